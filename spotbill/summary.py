from __future__ import annotations

from .utils import fmt
from .types import Totals


def summarise(totals: Totals) -> str:
    """Multi-line, human-readable bill summary."""
    lines = [
        f"Total consumption: {fmt(totals.total_consumption)} kWh",
        f"Total marginal amount: {fmt(totals.total_amount_marginal)} €",
        f"Total cost of bill w/o marginal: {fmt(totals.total_amount)} €",
        f"Total cost of bill with marginal: {fmt(totals.total_amount_with_marginal)} €",
        f"Total cost of bill: {fmt(totals.total_final_amount)} €",
        f"Average cost per kWh: {fmt(totals.avg_cost_per_kwh)} cnt",
        f"Average SpotPrice for {totals.days} days: {fmt(totals.avg_spot_price)} cnt",
        f"Average temperature: {fmt(totals.avg_temperature)} C",
        f"Transfer costs: {fmt(totals.total_transfer_cost)} €",
        f"Transfer and energy total: {fmt(totals.total_cost_with_transfer)} €",
    ]
    return "\n".join(lines)
