from __future__ import annotations
import math

from .schema import Tariff
from ..exceptions import TariffError

PER_KWH_FIELDS = (
    "margin_eur_per_kwh",
    "transfer_base_eur_per_kwh",
    "energy_tax_eur_per_kwh",
    "security_supply_eur_per_kwh",
)


def validate_tariff(tariff: Tariff) -> None:
    for name in PER_KWH_FIELDS + ("monthly_fee_eur",):
        value = getattr(tariff, name)
        if not math.isfinite(value):
            raise TariffError(f"Tariff '{tariff.name}': {name} must be finite")
    # a euro per kWh or more is almost always cents typed into a euro field
    for name in PER_KWH_FIELDS:
        if getattr(tariff, name) >= 1.0:
            raise TariffError(
                f"Tariff '{tariff.name}': {name}={getattr(tariff, name)} looks like cents, expected euros"
            )
