from __future__ import annotations
from typing import Iterable, Optional

from . import canon, utils
from .tariffs import Tariff
from .types import AlignedSums, Totals


def calculate_totals(
    sums: AlignedSums,
    temperatures: Iterable[float],
    days: int,
    tariff: Optional[Tariff] = None,
) -> Totals:
    """
    Derive the period's billing figures.

    - total_cost arrives in cents and is reported in euros.
    - avg_cost_per_kwh stays in cents: (cents + margin euros * 100) / kWh.
    - Zero consumption or zero days gives nan/inf, not an exception.
    """
    tariff = tariff or Tariff()
    consumption = sums.total_consumption

    total_amount = sums.total_cost / canon.MINOR_UNITS_PER_MAJOR
    marginal = consumption * tariff.margin_eur_per_kwh

    return Totals(
        total_consumption=consumption,
        total_amount=total_amount,
        total_amount_marginal=marginal,
        total_amount_with_marginal=total_amount + marginal,
        total_final_amount=total_amount + marginal + tariff.monthly_fee_eur,
        avg_cost_per_kwh=utils.ieee_div(
            sums.total_cost + marginal * canon.MINOR_UNITS_PER_MAJOR, consumption
        ),
        avg_spot_price=utils.ieee_div(sums.spot_price_sum, days),
        temperature_sum=float(sum(temperatures)),
        transfer_cost=consumption * tariff.transfer_base_eur_per_kwh,
        energy_tax=consumption * tariff.energy_tax_eur_per_kwh,
        security_supply_cost=consumption * tariff.security_supply_eur_per_kwh,
        days=days,
    )
