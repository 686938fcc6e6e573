"""Funds holding a given stock."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..httpclient import APIError, random_user_agent
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

FUND_BY_STOCK_URL = (
    "https://fundztapi.eastmoney.com/FundSpecialApiNew/FundSpecialApiGpGetFunds"
    "?pageIndex=1&pageSize=10000&isBuy=1&sortName=ZJZBL&sortType=DESC&deviceid=1"
    "&version=6.9.9&product=EFund&plat=Iphone&name={name}&code={code}"
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _float(value: Any) -> float:
    return 0.0 if value is None else float(value)


@dataclass
class HoldStockFund:
    """A fund holding the stock; ``zjzbl`` is the share of net assets in percent."""

    fcode: str = ""
    shortname: str = ""
    holdstock: str = ""
    stockname: str = ""
    zjzbl: float = 0.0
    tsrq: str = ""
    chgtype: str = ""
    chgnum: float = 0.0
    syl_y: float = 0.0
    syl_6y: float = 0.0
    isbuy: str = ""
    stocktexch: str = ""
    newtexch: str = ""
    zjzblchg: float = 0.0
    zjzblchgtype: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "HoldStockFund":
        return cls(
            fcode=_text(data.get("FCODE")),
            shortname=_text(data.get("SHORTNAME")),
            holdstock=_text(data.get("HOLDSTOCK")),
            stockname=_text(data.get("STOCKNAME")),
            zjzbl=_float(data.get("ZJZBL")),
            tsrq=_text(data.get("TSRQ")),
            chgtype=_text(data.get("CHGTYPE")),
            chgnum=_float(data.get("CHGNUM")),
            syl_y=_float(data.get("SYL_Y")),
            syl_6y=_float(data.get("SYL_6Y")),
            isbuy=_text(data.get("ISBUY")),
            stocktexch=_text(data.get("STOCKTEXCH")),
            newtexch=_text(data.get("NEWTEXCH")),
            zjzblchg=_float(data.get("ZJZBLCHG")),
            zjzblchgtype=_text(data.get("ZJZBLCHGTYPE")),
        )


class FundByStockAPI(EastMoneyBase):
    """Queries of funds by held stock."""

    def query_fund_by_stock(self, stock_name: str, stock_code: str) -> list[HoldStockFund]:
        """Fetch the funds holding the stock, largest holding first."""
        url = FUND_BY_STOCK_URL.format(name=stock_name, code=stock_code)
        logger.debug("EastMoney QueryFundByStock %s begin", url)
        resp = self.http.get_json(url, headers={"user-agent": random_user_agent()}) or {}
        data = (resp.get("Datas") or {}).get("Datas") or []
        try:
            return [HoldStockFund.from_json(item) for item in data]
        except (TypeError, ValueError) as exc:
            raise APIError(f"{stock_code} invalid fund data: {exc}") from exc