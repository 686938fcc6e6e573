"""Analyst profit forecasts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..httpclient import APIError
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

PROFIT_PREDICT_URL = "https://datacenter.eastmoney.com/securities/api/data/get"


@dataclass
class ProfitPredict:
    """Forecast EPS and PE for one year."""

    predict_year: int = 0
    eps: float = 0.0
    pe: float = 0.0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "ProfitPredict":
        return cls(
            predict_year=int(data.get("PREDICT_YEAR") or 0),
            eps=float(data.get("EPS") or 0.0),
            pe=float(data.get("PE") or 0.0),
        )


class ProfitPredictList(list):
    """Forecasts by year."""

    def __str__(self) -> str:
        return "</br>".join(
            f"{i.predict_year} | 预测每股收益:{i.eps:f} 预测市盈率:{i.pe:f}" for i in self
        )


class ProfitPredictAPI(EastMoneyBase):
    """Profit forecast queries."""

    def query_profit_predict(self, secu_code: str) -> ProfitPredictList:
        """Fetch the profit forecasts of ``secu_code``."""
        params = {
            "source": "SECURITIES",
            "client": "APP",
            "type": "RPT_RES_PROFITPREDICT",
            "sty": "PREDICT_YEAR,EPS,PE",
            "filter": f'(SECUCODE="{secu_code.upper()}")',
            "sr": "1",
            "st": "PREDICT_YEAR",
        }
        logger.debug("EastMoney QueryProfitPredict %s begin %s", PROFIT_PREDICT_URL, params)
        resp = self.http.get_json(PROFIT_PREDICT_URL, params) or {}
        if resp.get("code", 0) != 0:
            raise APIError(f"{secu_code} {resp!r}")
        data = (resp.get("result") or {}).get("data") or []
        try:
            return ProfitPredictList(ProfitPredict.from_json(item) for item in data)
        except (TypeError, ValueError) as exc:
            raise APIError(f"{secu_code} invalid forecast data: {exc}") from exc