"""Aggregated institutional ratings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..httpclient import APIError
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

ORG_RATING_URL = "https://datacenter.eastmoney.com/securities/api/data/get"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class OrgRating:
    """Overall rating over a time window."""

    date_type: str = ""
    compre_rating: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "OrgRating":
        return cls(
            date_type=_text(data.get("DATE_TYPE")),
            compre_rating=_text(data.get("COMPRE_RATING")),
        )


class OrgRatingList(list):
    """Ratings per time window."""

    def __str__(self) -> str:
        return "</br>".join(f"{i.date_type}:{i.compre_rating}" for i in self)


class OrgRatingAPI(EastMoneyBase):
    """Institutional rating queries."""

    def query_org_rating(self, secu_code: str) -> OrgRatingList:
        """Fetch the rating statistics of ``secu_code``."""
        params = {
            "source": "SECURITIES",
            "client": "APP",
            "type": "RPT_RES_ORGRATING",
            "sty": "DATE_TYPE,COMPRE_RATING",
            "filter": f'(SECUCODE="{secu_code.upper()}")',
            "sr": "1",
            "st": "DATE_TYPE_CODE",
        }
        logger.debug("EastMoney QueryOrgRating %s begin %s", ORG_RATING_URL, params)
        resp = self.http.get_json(ORG_RATING_URL, params) or {}
        if resp.get("code", 0) != 0:
            raise APIError(f"{secu_code} {resp!r}")
        data = (resp.get("result") or {}).get("data") or []
        return OrgRatingList(OrgRating.from_json(item) for item in data)