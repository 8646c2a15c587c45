from __future__ import annotations

from dataclasses import dataclass, field

from . import canon
from .exceptions import ConfigError
from .tariffs import Tariff
from .types import CSVFields


def _spot_fields() -> CSVFields:
    return CSVFields(canon.SPOT_DATE_TIME_FIELD, canon.SPOT_PRICE_FIELD, "")


def _consumption_fields() -> CSVFields:
    return CSVFields(
        canon.CONSUMPTION_DATE_TIME_FIELD,
        canon.CONSUMPTION_FIELD,
        canon.TEMPERATURE_FIELD,
    )


@dataclass
class SourceConfig:
    fields: CSVFields
    delimiter: str = ","
    encoding: str = canon.DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ConfigError(
                f"Delimiter must be a single character, got {self.delimiter!r}"
            )


@dataclass
class BillConfig:
    spot: SourceConfig = field(
        default_factory=lambda: SourceConfig(_spot_fields(), canon.SPOT_DELIMITER)
    )
    consumption: SourceConfig = field(
        default_factory=lambda: SourceConfig(
            _consumption_fields(), canon.CONSUMPTION_DELIMITER
        )
    )
    tariff: Tariff = field(default_factory=Tariff)


def default_config() -> BillConfig:
    return BillConfig()
