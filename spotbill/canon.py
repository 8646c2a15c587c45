from __future__ import annotations
from typing import Final

HOURS_PER_DAY: Final[int] = 24
HOUR_LABELS: Final[tuple[str, ...]] = tuple(f"{h:02d}:00" for h in range(HOURS_PER_DAY))

# Spot prices arrive in cents; totals are reported in euros
MINOR_UNITS_PER_MAJOR: Final[float] = 100.0
PRECISION: Final[int] = 3

# Consumption exports pad the tail of the period with zero rows
END_OF_DATA_SENTINEL: Final[str] = "0.00"

# Header names used by the default price and consumption exports
SPOT_DATE_TIME_FIELD: Final[str] = "DateTime"
SPOT_PRICE_FIELD: Final[str] = "Hinta"
CONSUMPTION_DATE_TIME_FIELD: Final[str] = "Alkaa"
CONSUMPTION_FIELD: Final[str] = "Kulutus (kWh)"
TEMPERATURE_FIELD: Final[str] = "Keskilämpötila"

SPOT_DELIMITER: Final[str] = ","
CONSUMPTION_DELIMITER: Final[str] = ";"
DEFAULT_ENCODING: Final[str] = "utf-8"

JSON_VIEWS: Final[tuple[str, ...]] = ("consumption", "spot", "totals")
