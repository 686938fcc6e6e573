"""Numeric helpers used by the data sources."""

from __future__ import annotations

import datetime as _dt
import math
from typing import Iterable


def mid_value(values: Iterable[float]) -> float:
    """Return the median of ``values``; raise ValueError when empty."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("no values for median")
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered[middle])
    return (ordered[middle - 1] + ordered[middle]) / 2


def std_deviation(values: Iterable[float]) -> float:
    """Return the population standard deviation; raise ValueError when empty.

    Infinite or NaN inputs give NaN rather than an exception.
    """
    data = [float(v) for v in values]
    if not data:
        raise ValueError("no values for standard deviation")
    mean = sum(data) / len(data)
    variance = sum((x - mean) ** 2 for x in data) / len(data)
    return math.sqrt(variance) if not math.isnan(variance) else math.nan


def latest_trading_day(today: _dt.date | None = None) -> str:
    """Return the most recent weekday on or before ``today`` as YYYY-mm-dd."""
    day = today if today is not None else _dt.date.today()
    if isinstance(day, _dt.datetime):
        day = day.date()
    weekday = day.weekday()
    if weekday >= 5:
        day -= _dt.timedelta(days=weekday - 4)
    return day.strftime("%Y-%m-%d")