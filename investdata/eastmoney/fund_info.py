"""Fund details from the mobile fund data service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ..httpclient import APIError, random_user_agent
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

FUND_INFO_URL = "http://j5.dfcfw.com/sc/tfs/qt/v2.0.1/{code}.json"


def _datas(data: Mapping[str, Any], section: str, default: Any) -> Any:
    value = (data.get(section) or {}).get("Datas")
    return default if value is None else value


@dataclass
class FundInfo:
    """Everything the service reports about one fund.

    Each attribute holds the ``Datas`` part of one section of the reply:
    ``detail`` (JJXQ), ``period_returns`` (JDZF), ``scale`` (JJGM),
    ``dividends`` (FHSP), ``positions`` (JJCC), ``features`` (TSSJ) and
    ``managers`` (JJJLNEW).
    """

    detail: dict[str, Any] = field(default_factory=dict)
    period_returns: list[dict[str, Any]] = field(default_factory=list)
    scale: list[dict[str, Any]] = field(default_factory=list)
    dividends: dict[str, Any] = field(default_factory=dict)
    positions: dict[str, Any] = field(default_factory=dict)
    features: dict[str, Any] = field(default_factory=dict)
    managers: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "FundInfo":
        data = data or {}
        return cls(
            detail=dict(_datas(data, "JJXQ", {})),
            period_returns=list(_datas(data, "JDZF", [])),
            scale=list(_datas(data, "JJGM", [])),
            dividends=dict(_datas(data, "FHSP", {})),
            positions=dict(_datas(data, "JJCC", {})),
            features=dict(_datas(data, "TSSJ", {})),
            managers=list(_datas(data, "JJJLNEW", [])),
        )

    @property
    def code(self) -> str:
        """Fund code, empty when the service knows no such fund."""
        return str(self.detail.get("FCODE") or "")

    @property
    def name(self) -> str:
        """Short fund name."""
        return str(self.detail.get("SHORTNAME") or "")


class FundInfoAPI(EastMoneyBase):
    """Fund detail queries."""

    def query_fund_info(self, fund_code: str) -> FundInfo:
        """Fetch the details of ``fund_code``; raise APIError if it is unknown."""
        url = FUND_INFO_URL.format(code=fund_code)
        logger.debug("EastMoney QueryFundInfo %s begin", url)
        resp = self.http.get_json(url, headers={"user-agent": random_user_agent()}) or {}
        try:
            info = FundInfo.from_json(resp)
        except (TypeError, ValueError, AttributeError) as exc:
            raise APIError(f"invalid fund info ({fund_code}): {exc}") from exc
        if not info.code:
            raise APIError(f"无法获取基金信息({fund_code})")
        return info