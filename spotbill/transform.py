from __future__ import annotations
import logging

import pandas as pd

from . import canon
from .types import AlignedSums, DayHourMap

logger = logging.getLogger(__name__)


def align(consumption: DayHourMap, prices: DayHourMap) -> AlignedSums:
    """
    Join consumption and spot prices on (date, hour) and accumulate the sums.

    Dates are driven by the consumption map; hours by the price map of that
    date. A priced hour without consumption, or a consumption day without
    prices, adds nothing. Neither input is modified.

    `spot_price_sum` adds up each matched date's mean price (sum / 24).
    """
    total_cost = 0.0
    total_consumption = 0.0
    spot_price_sum = 0.0
    matched = 0

    for day in sorted(consumption):
        day_prices = prices.get(day)
        if day_prices is None:
            logger.debug("No spot prices for %s", day)
            continue
        day_consumption = consumption[day]
        for hour in sorted(day_prices):
            kwh = day_consumption.get(hour)
            if kwh is None:
                logger.debug("No consumption for %s %s", day, hour)
                continue
            total_cost += day_prices[hour] * kwh
            total_consumption += kwh
            matched += 1
        spot_price_sum += sum(day_prices.values()) / canon.HOURS_PER_DAY

    return AlignedSums(
        total_cost=total_cost,
        total_consumption=total_consumption,
        spot_price_sum=spot_price_sum,
        matched_hours=matched,
    )


def to_frame(data: DayHourMap) -> pd.DataFrame:
    """Wide frame: one row per date, one column per hour label, NaN where absent."""
    df = pd.DataFrame.from_dict({day: data[day] for day in sorted(data)}, orient="index")
    df = df.reindex(columns=list(canon.HOUR_LABELS)).astype(float)
    df.index.name = "date"
    return df


def _long_frame(data: DayHourMap, value_col: str) -> pd.DataFrame:
    records = [
        {"date": day, "hour": hour, value_col: value}
        for day in sorted(data)
        for hour, value in sorted(data[day].items())
    ]
    return pd.DataFrame.from_records(records, columns=["date", "hour", value_col])


def aligned_frame(consumption: DayHourMap, prices: DayHourMap) -> pd.DataFrame:
    """
    Reconciled per-day, per-hour dataset.

    Columns: date, hour, kwh, price, cost. One row per consumption hour; price
    and cost are NaN where the hour has no spot price.
    """
    cons = _long_frame(consumption, "kwh")
    spot = _long_frame(prices, "price")
    out = cons.merge(spot, on=["date", "hour"], how="left", validate="one_to_one")
    out["kwh"] = out["kwh"].astype(float)
    out["price"] = out["price"].astype(float)
    out["cost"] = out["kwh"] * out["price"]
    return out.sort_values(["date", "hour"]).reset_index(drop=True)
