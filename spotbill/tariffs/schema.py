from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel, Field, ValidationError

from ..exceptions import TariffError

CurrencyEuros = float


class Tariff(BaseModel):
    """Per-contract charges. All amounts in euros."""

    model_config = {"frozen": True}

    name: str = "default"
    margin_eur_per_kwh: CurrencyEuros = Field(0.006, ge=0)
    transfer_base_eur_per_kwh: CurrencyEuros = Field(0.0409, ge=0)
    energy_tax_eur_per_kwh: CurrencyEuros = Field(0.02778, ge=0)
    security_supply_eur_per_kwh: CurrencyEuros = Field(0.00016, ge=0)
    monthly_fee_eur: CurrencyEuros = Field(3.53, ge=0)


def load_tariff(path: str | Path) -> Tariff:
    """Read a tariff from a JSON file; missing keys keep their defaults."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TariffError(f"Cannot read tariff file {path}: {exc}") from exc
    try:
        return Tariff.model_validate_json(text)
    except ValidationError as exc:
        raise TariffError(f"Invalid tariff in {path}: {exc}") from exc
