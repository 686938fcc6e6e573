"""Main-capital net inflow data source."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .httpclient import APIError, HTTPClient

logger = logging.getLogger(__name__)

NET_INFLOW_URL = "https://zszx.cmschina.com/pcnews/f10/stkcnmnyflow"

_WINDOWS = (3, 5, 10, 20, 30, 40)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class NetInflow:
    """Money flow for one trading day; amounts are in units of 10k yuan."""

    trd_dt: str = ""
    cls_prc: str = ""
    main_mny_net_in: str = ""
    huge_net_in: str = ""
    big_net_in: str = ""
    mid_net_in: str = ""
    small_net_in: str = ""
    ttl_mny_net_in: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "NetInflow":
        return cls(
            trd_dt=_text(data.get("TrdDt")),
            cls_prc=_text(data.get("ClsPrc")),
            main_mny_net_in=_text(data.get("MainMnyNetIn")),
            huge_net_in=_text(data.get("HugeNetIn")),
            big_net_in=_text(data.get("BigNetIn")),
            mid_net_in=_text(data.get("MidNetIn")),
            small_net_in=_text(data.get("SmallNetIn")),
            ttl_mny_net_in=_text(data.get("TtlMnyNetIn")),
        )


class NetInflowList(list):
    """Daily net inflows, newest first."""

    def __getitem__(self, index):
        result = super().__getitem__(index)
        return NetInflowList(result) if isinstance(index, slice) else result

    def sum_main_net_in(self) -> float:
        """Sum the main-capital net inflow; unparsable values count as zero."""
        total = 0.0
        for item in self:
            try:
                total += float(item.main_mny_net_in)
            except ValueError:
                logger.error("Parse MainMnyNetIn:%s to Float error", item.main_mny_net_in)
        return total

    def __str__(self) -> str:
        lines = []
        for days in _WINDOWS:
            if len(self) >= days:
                lines.append(f"近{days}日主力资金净流入:{self[:days].sum_main_net_in():.2f}万元")
            else:
                lines.append("--")
        return "</br>".join(lines)


class Zszx:
    """Client for the money flow service."""

    def __init__(self, http: HTTPClient | None = None):
        self.http = http if http is not None else HTTPClient()

    def query_main_money_net_inflows(self, secu_code: str, start_date: str,
                                     end_date: str) -> NetInflowList:
        """Return the daily main-capital inflows for ``secu_code`` (e.g. 002028.SZ)."""
        parts = secu_code.split(".")
        if len(parts) != 2:
            raise ValueError("invalid secuCode:" + secu_code)
        stock_code, market = parts
        params = {
            "dateStart": start_date,
            "dateEnd": end_date,
            "ecode": "1" if market.upper() == "SH" else "0",
            "scode": stock_code,
        }
        resp = self.http.get_json(NET_INFLOW_URL, params) or {}
        if resp.get("code", 0) != 0:
            raise APIError(f"{secu_code} {resp!r}")
        return NetInflowList(NetInflow.from_json(item) for item in resp.get("data") or [])