"""Historical price-to-earnings ratios."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..httpclient import APIError
from ..stats import mid_value
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

HISTORICAL_PE_URL = "https://emfront.eastmoney.com/APP_HSF10/CPBD/GZFX"


@dataclass
class HistoricalPE:
    """PE value on a date."""

    value: float = 0.0
    date: str = ""


class HistoricalPEList(list):
    """PE history."""

    def get_mid_value(self) -> float:
        """Return the median PE."""
        return mid_value([i.value for i in self])


class HistoricalPEAPI(EastMoneyBase):
    """Historical PE queries."""

    def query_historical_pe_list(self, secu_code: str) -> HistoricalPEList:
        """Fetch ten years of PE values for ``secu_code``; unparsable values are skipped."""
        params = {
            "code": self.get_fc(secu_code),
            "year": "4",
            "type": "1",
        }
        logger.debug("EastMoney QueryHistoricalPEList %s begin %s", HISTORICAL_PE_URL, params)
        resp = self.http.get_json(HISTORICAL_PE_URL, params) or {}
        data = resp.get("data") or []
        if not data:
            raise APIError("no historical pe data")
        result = HistoricalPEList()
        for item in data[0] or []:
            try:
                value = float(item.get("VALUE"))
            except (TypeError, ValueError) as exc:
                logger.error("QueryHistoricalPEList ParseFloat error:%s", exc)
                continue
            result.append(HistoricalPE(value=value, date=str(item.get("ENDATE") or "")))
        return result