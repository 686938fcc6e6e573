"""Top ten holders of free-floating shares."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..httpclient import APIError
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

FREE_HOLDERS_URL = "https://datacenter.eastmoney.com/securities/api/data/v1/get"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class FreeHolder:
    """One holder of free-floating shares.

    ``is_holdorg`` is "1" for an institution and "0" for a person.
    """

    end_date: str = ""
    holder_name: str = ""
    holder_code: str = ""
    hold_num: int = 0
    free_holdnum_ratio: float = 0.0
    free_ratio_qoq: str = ""
    is_holdorg: str = ""
    holder_rank: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "FreeHolder":
        return cls(
            end_date=_text(data.get("END_DATE")),
            holder_name=_text(data.get("HOLDER_NAME")),
            holder_code=_text(data.get("HOLDER_CODE")),
            hold_num=int(data.get("HOLD_NUM") or 0),
            free_holdnum_ratio=float(data.get("FREE_HOLDNUM_RATIO") or 0.0),
            free_ratio_qoq=_text(data.get("FREE_RATIO_QOQ")),
            is_holdorg=_text(data.get("IS_HOLDORG")),
            holder_rank=int(data.get("HOLDER_RANK") or 0),
        )


class FreeHolderList(list):
    """Holders in rank order."""

    def __str__(self) -> str:
        return "</br>".join(
            f"{n}.{h.holder_name}|{h.free_holdnum_ratio:.2f}%|{h.free_ratio_qoq}"
            for n, h in enumerate(self, start=1)
        )


class FreeHoldersAPI(EastMoneyBase):
    """Free-float holder queries."""

    def query_free_holders(self, secu_code: str) -> FreeHolderList:
        """Fetch the top ten free-float holders of ``secu_code``."""
        params = {
            "reportName": "RPT_F10_EH_FREEHOLDERS",
            "columns": "END_DATE,HOLDER_NAME,HOLDER_CODE,HOLD_NUM,FREE_HOLDNUM_RATIO,"
                       "FREE_RATIO_QOQ,IS_HOLDORG,HOLDER_RANK",
            "filter": f'(SECUCODE="{secu_code.upper()}")',
            "pageSize": "10",
        }
        logger.debug("EastMoney QueryFreeHolders %s begin %s", FREE_HOLDERS_URL, params)
        resp = self.http.get_json(FREE_HOLDERS_URL, params) or {}
        if resp.get("code", 0) != 0:
            raise APIError(f"{secu_code} {resp!r}")
        data = (resp.get("result") or {}).get("data") or []
        try:
            return FreeHolderList(FreeHolder.from_json(item) for item in data)
        except (TypeError, ValueError) as exc:
            raise APIError(f"{secu_code} invalid holder data: {exc}") from exc