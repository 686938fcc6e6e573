"""Value assessment from the stock diagnosis service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..httpclient import APIError
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

JZPG_URL = "https://emstockdiag.eastmoney.com/api/ZhenGuShouYe/GetJiaZhiPingGu"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _head(value: str) -> str:
    return value.split("|")[0]


@dataclass
class JZPG:
    """Value assessment of a stock.

    Score fields come as ``value|extra``; the accessor methods return the
    part before the first ``|``.
    """

    secname: str = ""
    industryname: str = ""
    type: str = ""
    valueranking: str = ""
    total: str = ""
    valuetotalscore: str = ""
    reportdate: str = ""
    reporttype: str = ""
    profitabilityscore: str = ""
    growupscore: str = ""
    operationscore: str = ""
    cashflowscore: str = ""
    valuationscore: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "JZPG":
        return cls(
            secname=_text(data.get("SecName")),
            industryname=_text(data.get("IndustryName")),
            type=_text(data.get("Type")),
            valueranking=_text(data.get("ValueRanking")),
            total=_text(data.get("Total")),
            valuetotalscore=_text(data.get("ValueTotalScore")),
            reportdate=_text(data.get("ReportDate")),
            reporttype=_text(data.get("ReportType")),
            profitabilityscore=_text(data.get("ProfitabilityScore")),
            growupscore=_text(data.get("GrowUpScore")),
            operationscore=_text(data.get("OperationScore")),
            cashflowscore=_text(data.get("CashFlowScore")),
            valuationscore=_text(data.get("ValuationScore")),
        )

    def value_ranking(self) -> str:
        """Current ranking within the industry."""
        return _head(self.valueranking)

    def profitability_score(self) -> str:
        """Profitability."""
        return _head(self.profitabilityscore)

    def grow_up_score(self) -> str:
        """Growth."""
        return _head(self.growupscore)

    def operation_score(self) -> str:
        """Operation and solvency."""
        return _head(self.operationscore)

    def cash_flow_score(self) -> str:
        """Cash flow."""
        return _head(self.cashflowscore)

    def valuation_score(self) -> str:
        """Valuation."""
        return _head(self.valuationscore)

    def value_total_score(self) -> str:
        """Overall quality."""
        return _head(self.valuetotalscore)

    def __str__(self) -> str:
        return (
            f"{self.secname}属于{self.industryname}行业，排名{self.value_ranking()}/{self.total}。\n"
            f"盈利能力{self.profitability_score()}，成长能力{self.grow_up_score()}，"
            f"营运偿债能力{self.operation_score()}，现金流{self.cash_flow_score()}，"
            f"估值{self.valuation_score()}，整体质地{self.value_total_score()}。"
        )


class JiaZhiPingGuAPI(EastMoneyBase):
    """Value assessment queries."""

    def query_jia_zhi_ping_gu(self, secu_code: str) -> JZPG:
        """Fetch the value assessment of ``secu_code`` such as ``002291.SZ``."""
        fc = self.get_fc(secu_code)
        logger.debug("EastMoney QueryJiaZhiPingGu %s begin fc=%s", JZPG_URL, fc)
        resp = self.http.post_json(JZPG_URL, {"fc": fc}) or {}
        if resp.get("Status", 0) != 0:
            raise APIError(f"{secu_code} {resp.get('Message')!r}")
        return JZPG.from_json((resp.get("Result") or {}).get("JiaZhiPingGu_GaiYao") or {})