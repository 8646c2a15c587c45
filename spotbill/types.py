from __future__ import annotations
from typing import Dict, List, Literal, NamedTuple, Optional, TypedDict
from dataclasses import dataclass, field

from . import utils
from .exceptions import ParseError

# Hour label ("HH:00") -> value for a single day
HourMap = Dict[str, float]
# ISO date ("YYYY-MM-DD") -> HourMap
DayHourMap = Dict[str, HourMap]

# How a normaliser pass ended
Outcome = Literal["complete", "end_of_data", "parse_error"]


class CSVFields(NamedTuple):
    """
    Header names to read from one CSV source.

    - date_time: combined "<date> <hour>" column, or hour-only when `date` is set
    - value: price or consumption column
    - temperature: average temperature column ("" for the price source)
    - date: optional separate date column
    """

    date_time: str
    value: str
    temperature: str = ""
    date: Optional[str] = None

    def columns(self) -> list[str]:
        cols = [self.date_time, self.value]
        if self.temperature:
            cols.append(self.temperature)
        if self.date:
            cols.append(self.date)
        return cols


@dataclass
class SpotPriceResult:
    prices: DayHourMap = field(default_factory=dict)
    outcome: Outcome = "complete"
    error: Optional[ParseError] = None

    @property
    def days(self) -> int:
        return len(self.prices)


@dataclass
class ConsumptionResult:
    consumption: DayHourMap = field(default_factory=dict)
    temperatures: List[float] = field(default_factory=list)  # one mean per counted day
    days: int = 0
    outcome: Outcome = "complete"
    error: Optional[ParseError] = None


@dataclass(frozen=True)
class AlignedSums:
    total_cost: float = 0.0  # cents
    total_consumption: float = 0.0  # kWh
    spot_price_sum: float = 0.0  # sum of per-day mean prices
    matched_hours: int = 0


@dataclass(frozen=True)
class Totals:
    """
    Billing figures for one period.

    Amounts are euros except `avg_cost_per_kwh` and `avg_spot_price`, which stay
    in cents per kWh like the price source.
    """

    total_consumption: float
    total_amount: float
    total_amount_marginal: float
    total_amount_with_marginal: float
    total_final_amount: float
    avg_cost_per_kwh: float
    avg_spot_price: float
    temperature_sum: float
    transfer_cost: float
    energy_tax: float
    security_supply_cost: float
    days: int

    @property
    def avg_temperature(self) -> float:
        return utils.ieee_div(self.temperature_sum, self.days)

    @property
    def total_transfer_cost(self) -> float:
        return self.transfer_cost + self.energy_tax + self.security_supply_cost

    @property
    def total_cost_with_transfer(self) -> float:
        return self.total_final_amount + self.total_transfer_cost


# Rendered views: every value is a fixed-precision string
RenderedDayHourMap = Dict[str, Dict[str, str]]


class TotalsPayload(TypedDict):
    consumption: str
    marginal: str
    cost_wo_marginal: str
    cost_with_marginal: str
    total_cost: str
    avg_kwh_cost: str
    avg_spotprice_per_kwh: str
    days: str
    avg_temperature: str
    transfer_cost: str
    energy_tax: str
    security_supply_cost: str
    total_transfer_cost: str
    total_cost_with_transfer: str
