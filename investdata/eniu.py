"""Historical stock price data source."""

from __future__ import annotations

import datetime as _dt
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from .httpclient import HTTPClient
from .stats import std_deviation

logger = logging.getLogger(__name__)

PRICE_URL = "https://eniu.com/chart/pricea/{code}/t/all"

_PERIODS = {"DAY": 1.0, "WEEK": 5.0, "MONTH": 21.75, "YEAR": 250.0}


def _log_ratio(end: float, start: float) -> float:
    if start == 0:
        ratio = math.nan if end == 0 else math.copysign(math.inf, end)
    else:
        ratio = end / start
    if math.isnan(ratio) or ratio < 0:
        return math.nan
    if ratio == 0:
        return -math.inf
    return math.log(ratio)


@dataclass
class HistoricalStockPrice:
    """Daily closing prices, oldest first."""

    date: list[str] = field(default_factory=list)
    price: list[float] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "HistoricalStockPrice":
        return cls(
            date=list(data.get("date") or []),
            price=[float(p) for p in data.get("price") or []],
        )

    def last_year_final_price(self, today: _dt.date | None = None) -> float:
        """Return the price of last December's final trading day, or 0.0."""
        if not self.date:
            return 0.0
        year = (today or _dt.date.today()).year
        prefix = f"{year - 1}-12-"
        # The first entry is never considered.
        for day, price in zip(reversed(self.date[1:]), reversed(self.price[1:len(self.date)])):
            if prefix in day:
                logger.debug("date:%s price:%f", day, price)
                return price
        return 0.0

    def historical_volatility(self, period: str) -> float:
        """Return the historical volatility scaled to ``period``.

        The standard deviation of the log returns is multiplied by the square
        root of the number of trading days in the period (DAY, WEEK, MONTH or
        YEAR; anything else counts as YEAR).
        """
        if not self.price:
            raise ValueError("no historical price data")
        prices = self.price
        logs = [_log_ratio(prices[i], prices[i - 1]) for i in range(len(prices) - 1, 0, -1)]
        stdev = std_deviation(logs)
        logger.debug("stdev: %s", stdev)
        volatility = stdev * math.sqrt(_PERIODS.get(period.upper(), 250.0))
        if math.isnan(volatility):
            raise ValueError("volatility is NaN")
        return volatility


class Eniu:
    """Client for the historical price service."""

    def __init__(self, http: HTTPClient | None = None):
        self.http = http if http is not None else HTTPClient()

    def get_path_code(self, secu_code: str) -> str:
        """Turn ``002459.SZ`` into ``sz002459``; return "" for other shapes."""
        parts = secu_code.split(".")
        if len(parts) != 2:
            return ""
        return parts[1].lower() + parts[0]

    def query_historical_stock_price(self, secu_code: str) -> HistoricalStockPrice:
        """Return all historical prices, newest last (one day behind)."""
        url = PRICE_URL.format(code=self.get_path_code(secu_code))
        return HistoricalStockPrice.from_json(self.http.get_json(url) or {})