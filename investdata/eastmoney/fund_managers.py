"""Fund manager rankings from the fund data portal."""

from __future__ import annotations

import logging
import math
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Mapping

from ..httpclient import APIError, random_user_agent
from .fund_manager_base_list import MFTYPE_DESC, FundManagerBaseListAPI

logger = logging.getLogger(__name__)

FUND_MANAGERS_URL = (
    "http://fund.eastmoney.com/Data/FundDataPortfolio_Interface.aspx"
    "?dt=14&mc=returnjson&ft={ft}&pn=20&pi={index}&sc={sc}&st={st}"
)

_ROW = re.compile(r'\[(".+?")\]')
_FIELD = re.compile(r'"(.*?)"')
_ROW_FIELDS = 12
_MISSING = ("", "--")


def _parse_float(text: str, suffix: str = "") -> float:
    if text in _MISSING:
        return 0.0
    number = text[: -len(suffix)] if suffix and text.endswith(suffix) else text
    try:
        return float(number)
    except ValueError:
        logger.warning("parse %s to float error", number)
        return 0.0


def _parse_int(text: str) -> int:
    if text in _MISSING:
        return 0
    try:
        return int(text)
    except ValueError:
        logger.warning("parse %s to int error", text)
        return 0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass
class FundManagerInfo:
    """A fund manager with performance figures.

    Returns and yields are percentages; ``current_fund_scale`` is in 100M yuan.
    """

    id: str = ""
    name: str = ""
    fund_company_id: str = ""
    fund_company_name: str = ""
    fund_codes: list[str] = field(default_factory=list)
    fund_names: list[str] = field(default_factory=list)
    working_years: float = 0.0
    current_best_return: float = 0.0
    current_best_fund_code: str = ""
    current_best_fund_name: str = ""
    current_fund_scale: float = 0.0
    working_best_return: float = 0.0
    yieldse: float = 0.0
    current_best_fund_type: str = ""
    score: float = 0.0
    resume: str = ""
    award_num: int = 0


@dataclass
class ParamFundManagerFilter:
    """Conditions a manager must meet to be kept by ``FundManagerInfoList.filter``."""

    name: str = ""
    min_working_years: int = 0
    min_yieldse: float = 0.0
    max_current_fund_count: int = 0
    min_scale: float = 0.0
    fund_type: str = ""


class FundManagerInfoList(list):
    """Fund managers; the sort methods order in place, largest first."""

    def filter(self, params: ParamFundManagerFilter) -> "FundManagerInfoList":
        """Return the managers that meet every condition of ``params``."""
        def keep(info: FundManagerInfo) -> bool:
            if params.name and params.name != info.name:
                return False
            if params.fund_type and params.fund_type != info.current_best_fund_type:
                return False
            return (
                info.working_years >= params.min_working_years
                and info.yieldse >= params.min_yieldse
                and len(info.fund_codes) <= params.max_current_fund_count
                and info.current_fund_scale >= params.min_scale
            )

        return FundManagerInfoList(i for i in self if keep(i))

    def sort_by_fund_count(self) -> None:
        self.sort(key=lambda i: len(i.fund_codes), reverse=True)

    def sort_by_award_num(self) -> None:
        self.sort(key=lambda i: i.award_num, reverse=True)

    def sort_by_score(self) -> None:
        self.sort(key=lambda i: i.score, reverse=True)

    def sort_by_scale(self) -> None:
        self.sort(key=lambda i: i.current_fund_scale, reverse=True)

    def sort_by_current_best_return(self) -> None:
        self.sort(key=lambda i: i.current_best_return, reverse=True)

    def sort_by_working_best_return(self) -> None:
        self.sort(key=lambda i: i.working_best_return, reverse=True)

    def sort_by_yieldse(self) -> None:
        self.sort(key=lambda i: i.yieldse, reverse=True)


def parse_manager_rows(text: str) -> list[list[str]]:
    """Extract the quoted 12-field rows of a portal reply; malformed rows are skipped."""
    rows = []
    for row in _ROW.findall(text):
        values = _FIELD.findall(row)
        if len(values) != _ROW_FIELDS:
            logger.warning("invalid fields len:%d %s", len(values), row)
            continue
        rows.append(values)
    return rows


class FundManagersAPI(FundManagerBaseListAPI):
    """Fund manager ranking queries."""

    def _build_info(self, row: list[str]) -> FundManagerInfo:
        info = FundManagerInfo(
            id=row[0],
            name=row[1],
            fund_company_id=row[2],
            fund_company_name=row[3],
            fund_codes=row[4].split(","),
            fund_names=row[5].split(","),
            working_years=_round_half_away(_parse_int(row[6]) / 365.0),
            current_best_return=_parse_float(row[7], "%"),
            current_best_fund_code=row[8],
            current_best_fund_name=row[9],
            current_fund_scale=_parse_float(row[10], "亿元"),
            working_best_return=_parse_float(row[11], "%"),
        )
        try:
            detail: Mapping[str, Any] = self.query_fund_msn_manager_info(row[0])
        except APIError as exc:
            logger.error("QueryFundMsnMangerInfo err:%s", exc)
            return info

        def text(key: str) -> str:
            value = detail.get(key)
            return "" if value is None else str(value)

        info.resume = (
            f"{text('RESUME')}\n投资方法:{text('INVESTMENTMETHOD')}\n"
            f"投资理念:{text('INVESTMENTIDEAR')}"
        ).strip()
        info.current_best_fund_type = MFTYPE_DESC.get(text("MFTYPE"), "")
        info.yieldse = _parse_float(text("YIELDSE"))
        # The detail record's representative fund takes precedence.
        if text("PRECODE") not in _MISSING:
            info.current_best_fund_code = text("PRECODE")
            info.current_best_fund_name = text("PRENAME")
        info.score = _parse_float(text("MGOLD"))
        info.award_num = _parse_int(text("AWARDNUM"))
        return info

    def fund_managers(self, ft: str = "all", sc: str = "penavgrowth",
                      st: str = "desc") -> FundManagerInfoList:
        """Fetch every manager page by page until a page has no rows.

        ``ft``: all, gp (equity), hh (mixed), zq (bond), sy (income).
        ``sc``: abbname, jjgspy, totaldays, netnav or penavgrowth.
        ``st``: asc or desc.
        """
        headers = {"user-agent": random_user_agent()}
        result = FundManagerInfoList()
        index = 1
        while True:
            url = FUND_MANAGERS_URL.format(ft=ft, index=index, sc=sc, st=st)
            logger.debug("EastMoney FundMangers %s begin index=%d", url, index)
            body = self.http.get_bytes(url, headers=headers)
            text = body.decode("utf-8", errors="replace")
            if not _ROW.search(text):
                break
            rows = parse_manager_rows(text)
            if rows:
                # One page at a time keeps memory bounded.
                with ThreadPoolExecutor(max_workers=len(rows)) as pool:
                    result.extend(pool.map(self._build_info, rows))
            index += 1
        logger.debug("EastMoney FundMangers end resultCount=%d", len(result))
        return result