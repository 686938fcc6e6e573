"""Industry names available in the stock screener."""

from __future__ import annotations

import logging

from ..httpclient import APIError
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

INDUSTRY_LIST_URL = "https://datacenter.eastmoney.com/stock/selection/api/data/get/"


class IndustryListAPI(EastMoneyBase):
    """Industry list queries."""

    def query_industry_list(self) -> list[str]:
        """Fetch the names of all industries."""
        form = {
            "source": "SELECT_SECURITIES",
            "client": "APP",
            "type": "RPTA_APP_INDUSTRY",
            "sty": "ALL",
        }
        logger.debug("EastMoney IndustryList %s begin %s", INDUSTRY_LIST_URL, form)
        resp = self.http.post_form(INDUSTRY_LIST_URL, form) or {}
        if resp.get("code", 0) != 0:
            raise APIError(repr(resp))
        data = (resp.get("result") or {}).get("data") or []
        return [str(item.get("INDUSTRY") or "") for item in data]