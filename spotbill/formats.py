from __future__ import annotations

import json
from typing import Mapping

from . import utils
from .types import DayHourMap, RenderedDayHourMap, Totals, TotalsPayload


def render_day_hour_map(data: DayHourMap) -> RenderedDayHourMap:
    """Date -> hour -> value as 3-decimal strings, dates and hours in order."""
    return {
        day: {hour: utils.fmt(value) for hour, value in sorted(data[day].items())}
        for day in sorted(data)
    }


def render_totals(totals: Totals) -> TotalsPayload:
    return {
        "consumption": utils.fmt(totals.total_consumption),
        "marginal": utils.fmt(totals.total_amount_marginal),
        "cost_wo_marginal": utils.fmt(totals.total_amount),
        "cost_with_marginal": utils.fmt(totals.total_amount_with_marginal),
        "total_cost": utils.fmt(totals.total_final_amount),
        "avg_kwh_cost": utils.fmt(totals.avg_cost_per_kwh),
        "avg_spotprice_per_kwh": utils.fmt(totals.avg_spot_price),
        "days": str(totals.days),
        "avg_temperature": utils.fmt(totals.avg_temperature),
        "transfer_cost": utils.fmt(totals.transfer_cost),
        "energy_tax": utils.fmt(totals.energy_tax),
        "security_supply_cost": utils.fmt(totals.security_supply_cost),
        "total_transfer_cost": utils.fmt(totals.total_transfer_cost),
        "total_cost_with_transfer": utils.fmt(totals.total_cost_with_transfer),
    }


def to_json(payload: Mapping[str, object]) -> str:
    # compact, keys in insertion order, non-ASCII kept as-is
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
