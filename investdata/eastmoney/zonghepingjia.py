"""Overall rating from the stock diagnosis service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..httpclient import APIError
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

ZHPJ_URL = "https://emstockdiag.eastmoney.com/api//ZhenGuShouYe/GetZongHePingJia"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class ZongHePingJia:
    """Overall rating of a stock."""

    security_code: str = ""
    update_time: str = ""
    total_score: str = ""
    total_score_chg: str = ""
    lead_pre: Any = None
    rise_pro: Any = None
    msg_count: str = ""
    capital_score: str = ""
    d1: str = ""
    value_score: str = ""
    market_score_chg: str = ""
    status: str = ""
    ping_fen_num: str = ""
    da_bai_shi_chang_num: str = ""
    shang_zhang_gai_lv_num: str = ""
    check_zhen_gu_status: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "ZongHePingJia":
        return cls(
            security_code=_text(data.get("SecurityCode")),
            update_time=_text(data.get("UpdateTime")),
            total_score=_text(data.get("TotalScore")),
            total_score_chg=_text(data.get("TotalScoreCHG")),
            lead_pre=data.get("LeadPre"),
            rise_pro=data.get("RisePro"),
            msg_count=_text(data.get("MsgCount")),
            capital_score=_text(data.get("CapitalScore")),
            d1=_text(data.get("D1")),
            value_score=_text(data.get("ValueScore")),
            market_score_chg=_text(data.get("MarketScoreCHG")),
            status=_text(data.get("Status")),
            ping_fen_num=_text(data.get("PingFenNum")),
            da_bai_shi_chang_num=_text(data.get("DaBaiShiChangNum")),
            shang_zhang_gai_lv_num=_text(data.get("ShangZhangGaiLvNum")),
            check_zhen_gu_status=bool(data.get("CheckZhenGuStatus", False)),
        )


class ZongHePingJiaAPI(EastMoneyBase):
    """Overall rating queries."""

    def query_zong_he_ping_jia(self, secu_code: str) -> ZongHePingJia:
        """Fetch the overall rating of ``secu_code`` such as ``600809.SH``."""
        fc = self.get_fc(secu_code)
        logger.debug("EastMoney QueryZongHePingJia %s begin fc=%s", ZHPJ_URL, fc)
        resp = self.http.post_json(ZHPJ_URL, {"fc": fc}) or {}
        if resp.get("Status", 0) != 0:
            raise APIError(f"{secu_code} {resp.get('Message')!r}")
        return ZongHePingJia.from_json((resp.get("Result") or {}).get("ZongHePingJia") or {})