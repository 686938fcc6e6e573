"""Fund manager lists from the mobile fund API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..httpclient import APIError, random_user_agent
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

BASE_LIST_URL = (
    "https://fundmapi.eastmoney.com/fundmobapi/FundMApi/FundMangerBaseList.ashx"
    "?COMPANYCODES=&MFTYPE={mftype}&Sort=desc&SortColumn={sort_column}"
    "&deviceid=fundmanager2016&pageIndex={index}&pageSize={size}"
    "&plat=Iphone&product=EFund&version=4.3.0"
)
MSN_INFO_URL = (
    "https://fundztapi.eastmoney.com/FundSpecialApiNew/FundMSNMangerInfo"
    "?FCODE={mgrid}&plat=Iphone&deviceid=123&product=EFund&version=6.4.7"
)
PAGE_SIZE = 300

MFTYPE_DESC = {
    "1": "偏债类",
    "2": "偏股类",
    "3": "指数类",
    "4": "货币类",
    "5": "QDII",
}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class FundManagerBaseInfo:
    """Basic facts about a fund manager.

    ``mftype`` is the speciality (see MFTYPE_DESC); ``sex`` is "0" for male
    and "1" for female. Returns are percentages, ``netnav`` is in yuan.
    """

    mgrid: str = ""
    mgrname: str = ""
    mftype: str = ""
    jjgs: str = ""
    jjgsid: str = ""
    yieldse: str = ""
    w: str = ""
    m: str = ""
    q: str = ""
    hy: str = ""
    y: str = ""
    netnav: str = ""
    mgold: str = ""
    precode: str = ""
    shortname: str = ""
    newphotourl: str = ""
    sex: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "FundManagerBaseInfo":
        return cls(**{name: _text(data.get(name.upper())) for name in cls.__dataclass_fields__})

    @property
    def mftype_desc(self) -> str:
        """Human readable speciality, empty if unknown."""
        return MFTYPE_DESC.get(self.mftype, "")


class FundManagerBaseListAPI(EastMoneyBase):
    """Fund manager list queries."""

    def fund_manager_base_list(self, mftype: str = "",
                               sort_column: str = "YIELDSE") -> list[FundManagerBaseInfo]:
        """Fetch every fund manager, page by page, until a page comes back empty.

        ``mftype``: "" all, 1 bond, 2 equity, 3 index, 4 money market, 5 QDII.
        ``sort_column``: W, M, Q, HY, Y, NETNAV, MGOLD or YIELDSE.
        """
        headers = {"user-agent": random_user_agent()}
        result: list[FundManagerBaseInfo] = []
        index = 1
        total = 0
        while True:
            url = BASE_LIST_URL.format(mftype=mftype, sort_column=sort_column,
                                       index=index, size=PAGE_SIZE)
            logger.debug("EastMoney FundMangerBaseList %s begin index=%d", url, index)
            resp = self.http.get_json(url, headers=headers) or {}
            total = resp.get("TotalCount") or 0
            page = [item for item in resp.get("Datas") or [] if item is not None]
            if not page:
                break
            result.extend(FundManagerBaseInfo.from_json(item) for item in page)
            index += 1
        logger.debug("EastMoney FundMangerBaseList end totalCount=%d resultCount=%d",
                     total, len(result))
        return result

    def query_fund_msn_manager_info(self, mgrid: str) -> dict[str, Any]:
        """Fetch the detailed record (``Datas``) of manager ``mgrid``."""
        url = MSN_INFO_URL.format(mgrid=mgrid)
        logger.debug("EastMoney QueryFundMsnMangerInfo %s begin", url)
        resp = self.http.get_json(url, headers={"user-agent": random_user_agent()}) or {}
        if resp.get("ErrCode", 0) != 0:
            raise APIError(_text(resp.get("ErrMsg")))
        return dict(resp.get("Datas") or {})