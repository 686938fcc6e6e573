"""Valuation status by PE, PB, PS and PCF."""

from __future__ import annotations

import logging

from ..httpclient import APIError
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

VALUATION_URL = "https://datacenter.eastmoney.com/securities/api/data/get"

_INDICATORS = (("1", "市盈率"), ("2", "市净率"), ("3", "市销率"), ("4", "市现率"))


class ValuationStatusAPI(EastMoneyBase):
    """Valuation status queries."""

    def query_valuation_status(self, secu_code: str) -> dict[str, str]:
        """Return the status per valuation indicator for ``secu_code``.

        Indicators without data are left out of the result.
        """
        code = secu_code.upper()
        valuations: dict[str, str] = {}
        for indicator, label in _INDICATORS:
            params = {
                "type": "RPT_VALUATIONSTATUS",
                "sty": "VALATION_STATUS",
                "p": "1",
                "ps": "1",
                "var": "source=DataCenter",
                "client": "APP",
                "filter": f'(SECUCODE="{code}")(INDICATOR_TYPE="{indicator}")',
            }
            logger.debug("EastMoney QueryValuationStatus %s begin %s", VALUATION_URL, params)
            resp = self.http.get_json(VALUATION_URL, params) or {}
            if resp.get("code", 0) != 0:
                raise APIError(f"{code} {resp!r}")
            data = (resp.get("result") or {}).get("data") or []
            if data:
                valuations[label] = str(data[0].get("VALATION_STATUS") or "")
        return valuations