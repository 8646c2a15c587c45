from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Optional

from . import ingest, pricing, transform
from .config import BillConfig, default_config
from .tariffs import Tariff, validate_tariff
from .types import (
    AlignedSums,
    CSVFields,
    ConsumptionResult,
    SpotPriceResult,
    Totals,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BillReport:
    spot: SpotPriceResult
    consumption: ConsumptionResult
    sums: AlignedSums
    totals: Totals

    @property
    def complete(self) -> bool:
        """False when either source stopped on a parse error."""
        return "parse_error" not in (self.spot.outcome, self.consumption.outcome)


def _build_report(
    spot: SpotPriceResult, consumption: ConsumptionResult, tariff: Tariff
) -> BillReport:
    for name, res in (("spot price", spot), ("consumption", consumption)):
        if res.outcome == "parse_error":
            logger.warning(
                "%s data is partial (%s); totals cover %d consumption day(s)",
                name,
                res.error,
                consumption.days,
            )

    sums = transform.align(consumption.consumption, spot.prices)
    totals = pricing.calculate_totals(
        sums, consumption.temperatures, consumption.days, tariff
    )
    logger.info(
        "Matched %d hour(s) over %d day(s): %.3f kWh",
        sums.matched_hours,
        consumption.days,
        sums.total_consumption,
    )
    return BillReport(spot=spot, consumption=consumption, sums=sums, totals=totals)


def check_bill(
    spot_rows: Iterable[ingest.Row],
    consumption_rows: Iterable[ingest.Row],
    *,
    tariff: Optional[Tariff] = None,
    spot_fields: Optional[CSVFields] = None,
    consumption_fields: Optional[CSVFields] = None,
) -> BillReport:
    """Normalise both row streams, align them and compute the totals."""
    cfg = default_config()
    tariff = tariff or cfg.tariff
    validate_tariff(tariff)

    spot = ingest.normalize_spot_prices(spot_rows, spot_fields or cfg.spot.fields)
    consumption = ingest.normalize_consumption(
        consumption_rows, consumption_fields or cfg.consumption.fields
    )
    return _build_report(spot, consumption, tariff)


def check_bill_files(
    spot_source: str | Path | IO[str],
    consumption_source: str | Path | IO[str],
    *,
    config: Optional[BillConfig] = None,
) -> BillReport:
    """Same as check_bill, reading both CSV sources first."""
    cfg = config or default_config()
    validate_tariff(cfg.tariff)

    spot = ingest.read_spot_prices(spot_source, cfg.spot)
    consumption = ingest.read_consumption(consumption_source, cfg.consumption)
    return _build_report(spot, consumption, cfg.tariff)
