"""Fund keyword search."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..httpclient import APIError, random_user_agent
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

FUND_SEARCH_URL = "https://fundsuggest.eastmoney.com/FundCodeNew.aspx?input={kw}&count={count}&cb=x"
SEARCH_COUNT = 10

_MATCH = re.compile(r'"([0-9]{6}),.+?,(.+?),(.+?),"')


@dataclass
class SearchFundInfo:
    """A fund matching a search."""

    code: str = ""
    name: str = ""
    type: str = ""


def parse_fund_search(text: str) -> list[SearchFundInfo]:
    """Extract ``"code,abbr,name,type,"`` entries from a search reply."""
    if len(text) < 6:
        logger.warning("SearchFund invalid resp: %s", text)
        raise APIError("无法找到相关基金")
    return [SearchFundInfo(code=c, name=n, type=t) for c, n, t in _MATCH.findall(text)]


class FundSearchAPI(EastMoneyBase):
    """Fund search queries."""

    def search_fund(self, kw: str) -> list[SearchFundInfo]:
        """Search funds by name, code or pinyin."""
        url = FUND_SEARCH_URL.format(kw=kw, count=SEARCH_COUNT)
        logger.debug("EastMoney SearchFund %s begin", url)
        body = self.http.get_bytes(url, headers={"user-agent": random_user_agent()})
        return parse_fund_search(body.decode("utf-8", errors="replace"))