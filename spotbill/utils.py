# spotbill/utils.py
from __future__ import annotations
from datetime import date as _date
from typing import Tuple

import numpy as np

from . import canon


def add_leading_zero(token: str) -> str:
    """Pad a one-character token to two characters ('3' -> '03')."""
    return token if len(token) >= 2 else "0" + token


def convert_date_str(raw: str) -> str:
    """
    Convert a 'D.M.YYYY' date (day/month may be unpadded) to ISO 'YYYY-MM-DD'.

    >>> convert_date_str("3.10.2022")
    '2022-10-03'
    """
    tokens = raw.strip().split(".")
    if len(tokens) != 3 or not all(t.isdigit() for t in tokens):
        raise ValueError(f"Expected a D.M.YYYY date, got {raw!r}")
    day, month, year = tokens
    # rejects 31.2.2022 and friends
    _date(int(year), int(month), int(day))
    return f"{year}-{add_leading_zero(month)}-{add_leading_zero(day)}"


def convert_hour_str(raw: str) -> str:
    """Convert '0:00', '00:00' or '00:00:00' to the canonical 'HH:00' label."""
    head = raw.strip().split(":")[0]
    if not head.isdigit():
        raise ValueError(f"Expected an H:MM time, got {raw!r}")
    hour = int(head)
    if not 0 <= hour < canon.HOURS_PER_DAY:
        raise ValueError(f"Hour out of range 0-23: {raw!r}")
    return f"{hour:02d}:00"


def split_date_time(raw: str) -> Tuple[str, str]:
    """Split a combined '<date> <time>' field on whitespace."""
    parts = raw.split()
    if len(parts) != 2:
        raise ValueError(f"Expected '<date> <time>', got {raw!r}")
    return parts[0], parts[1]


def replace_comma(raw: str) -> str:
    """Swap the first decimal comma for a period ('12,5' -> '12.5')."""
    return raw.strip().replace(",", ".", 1)


def is_hour_label(label: str) -> bool:
    return label in canon.HOUR_LABELS


def ieee_div(num: float, den: float) -> float:
    """Divide with IEEE semantics: x/0 gives inf or nan instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


def fmt(value: float, precision: int = canon.PRECISION) -> str:
    """Render a number as a fixed-precision decimal string."""
    return f"{value:.{precision}f}"
