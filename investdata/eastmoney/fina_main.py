"""Main financial indicators from periodic reports."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Mapping

from ..httpclient import APIError
from ..stats import mid_value, std_deviation
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

FINA_MAIN_URL = "https://datacenter.eastmoney.com/securities/api/data/get"
PUBLISH_DATE_URL = "https://datacenter.eastmoney.com/api/data/get"

# Average standard deviation of 37 banks, used as the stability threshold.
STABILITY_THRESHOLD = 2.51


class FinaReportType(str, Enum):
    """Kind of periodic report."""

    Q1 = "一季报"
    MID = "中报"
    Q3 = "三季报"
    YEAR = "年报"

    def __str__(self) -> str:
        return self.value


class ValueListType(str, Enum):
    """Indicator that can be extracted as a history of values."""

    NET_PROFIT = "NETPROFIT"
    GROSS_PROFIT = "GROSSPROFIT"
    REVENUE = "REVENUE"
    ROE = "ROE"
    EPS = "EPS"
    ROA = "ROA"
    MLL = "MLL"
    JLL = "JLL"

    def __str__(self) -> str:
        return self.value


_VALUE_ATTRS = {
    ValueListType.NET_PROFIT: "parentnetprofit",
    ValueListType.GROSS_PROFIT: "mlr",
    ValueListType.REVENUE: "totaloperatereve",
    ValueListType.EPS: "epsjb",
    ValueListType.ROA: "zzcjll",
    ValueListType.ROE: "roejq",
    ValueListType.MLL: "xsmll",
    ValueListType.JLL: "xsjll",
}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _float(value: Any) -> float:
    return 0.0 if value is None else float(value)


def _report_type(value: Any) -> str:
    text = _text(value)
    try:
        return FinaReportType(text)
    except ValueError:
        return text


_CONVERTERS = {"str": _text, "float": _float, "any": lambda v: v, "report_type": _report_type}


def _s(key: str) -> Any:
    return field(default="", metadata={"json": key, "kind": "str"})


def _f(key: str) -> Any:
    return field(default=0.0, metadata={"json": key, "kind": "float"})


def _go_float(value: float) -> str:
    """Format a float the way the default %v verb does: shortest digits, %g style."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign, digit_tuple, exponent = Decimal(repr(float(value))).as_tuple()
    prefix = "-" if sign else ""
    if value == 0:
        return prefix + "0"
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    point = len(text) + exponent
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{text}"
    if point >= len(text):
        return prefix + text + "0" * (point - len(text))
    return f"{prefix}{text[:point]}.{text[point:]}"


def format_value_list(values: Iterable[float]) -> str:
    """Join values with ``</br>``, formatted as shortest %g-style numbers."""
    return "</br>".join(_go_float(v) for v in values)


@dataclass
class FinaMainData:
    """Main indicators of one periodic report."""

    secucode: str = _s("SECUCODE")
    security_code: str = _s("SECURITY_CODE")
    security_name_abbr: str = _s("SECURITY_NAME_ABBR")
    org_code: str = _s("ORG_CODE")
    org_type: str = _s("ORG_TYPE")
    report_date: str = _s("REPORT_DATE")
    report_type: str = field(default="", metadata={"json": "REPORT_TYPE", "kind": "report_type"})
    report_date_name: str = _s("REPORT_DATE_NAME")
    report_year: str = _s("REPORT_YEAR")
    security_type_code: str = _s("SECURITY_TYPE_CODE")
    notice_date: str = _s("NOTICE_DATE")
    update_date: str = _s("UPDATE_DATE")
    currency: str = _s("CURRENCY")
    # per share
    epsjb: float = _f("EPSJB")
    epsjbtz: float = _f("EPSJBTZ")
    epskcjb: float = _f("EPSKCJB")
    epsxs: float = _f("EPSXS")
    bps: float = _f("BPS")
    bpstz: float = _f("BPSTZ")
    mgzbgj: float = _f("MGZBGJ")
    mgzbgjtz: float = _f("MGZBGJTZ")
    mgwfplr: float = _f("MGWFPLR")
    mgwfplrtz: float = _f("MGWFPLRTZ")
    mgjyxjje: float = _f("MGJYXJJE")
    mgjyxjjetz: float = _f("MGJYXJJETZ")
    # growth
    totaloperatereve: float = _f("TOTALOPERATEREVE")
    totaloperaterevetz: float = _f("TOTALOPERATEREVETZ")
    mlr: float = _f("MLR")
    parentnetprofit: float = _f("PARENTNETPROFIT")
    parentnetprofittz: float = _f("PARENTNETPROFITTZ")
    kcfjcxsyjlr: float = _f("KCFJCXSYJLR")
    kcfjcxsyjlrtz: float = _f("KCFJCXSYJLRTZ")
    yyzsrgdhbzc: float = _f("YYZSRGDHBZC")
    netprofitrphbzc: float = _f("NETPROFITRPHBZC")
    kfjlrgdhbzc: float = _f("KFJLRGDHBZC")
    # profitability
    roejq: float = _f("ROEJQ")
    roekcjq: float = _f("ROEKCJQ")
    roejqtz: float = _f("ROEJQTZ")
    zzcjll: float = _f("ZZCJLL")
    zzcjlltz: float = _f("ZZCJLLTZ")
    roic: float = _f("ROIC")
    roictz: float = _f("ROICTZ")
    xsmll: float = _f("XSMLL")
    xsjll: float = _f("XSJLL")
    # earnings quality
    yszkyysr: Any = field(default=None, metadata={"json": "YSZKYYSR", "kind": "any"})
    xsjxlyysr: float = _f("XSJXLYYSR")
    jyxjlyysr: float = _f("JYXJLYYSR")
    taxrate: float = _f("TAXRATE")
    # financial risk
    ld: float = _f("LD")
    sd: float = _f("SD")
    xjllb: float = _f("XJLLB")
    zcfzl: float = _f("ZCFZL")
    zcfzltz: float = _f("ZCFZLTZ")
    qycs: float = _f("QYCS")
    cqbl: float = _f("CQBL")
    # operating
    zzczzts: float = _f("ZZCZZTS")
    chzzts: float = _f("CHZZTS")
    yszkzzts: float = _f("YSZKZZTS")
    toazzl: float = _f("TOAZZL")
    chzzl: float = _f("CHZZL")
    yszkzzl: float = _f("YSZKZZL")
    # banks
    total_deposits: float = _f("TOTALDEPOSITS")
    gross_loans: float = _f("GROSSLOANS")
    ltdrr: float = _f("LTDRR")
    newcapitalader: float = _f("NEWCAPITALADER")
    hxyjbczl: float = _f("HXYJBCZL")
    non_per_loan: float = _f("NONPERLOAN")
    bldkbbl: float = _f("BLDKBBL")
    nzbje: float = _f("NZBJE")
    # insurers
    total_roi: float = _f("TOTAL_ROI")
    net_roi: float = _f("NET_ROI")
    earned_premium: float = _f("EARNED_PREMIUM")
    compensate_expense: float = _f("COMPENSATE_EXPENSE")
    surrender_rate_life: float = _f("SURRENDER_RATE_LIFE")
    solvency_ar: float = _f("SOLVENCY_AR")
    nbv_life: float = _f("NBV_LIFE")
    nbv_rate: float = _f("NBV_RATE")
    nhjz_current_amt: float = _f("NHJZ_CURRENT_AMT")

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "FinaMainData":
        values = {
            f.name: _CONVERTERS[f.metadata["kind"]](data.get(f.metadata["json"]))
            for f in fields(cls)
        }
        return cls(**values)


class HistoricalFinaMainData(list):
    """Reports, newest first."""

    def __getitem__(self, index):
        result = super().__getitem__(index)
        return HistoricalFinaMainData(result) if isinstance(index, slice) else result

    def filter_by_report_type(self, report_type: str) -> "HistoricalFinaMainData":
        """Keep reports of one kind (Q1, mid-year, Q3 or annual)."""
        return HistoricalFinaMainData(i for i in self if i.report_type == report_type)

    def filter_by_report_year(self, report_year: int) -> "HistoricalFinaMainData":
        """Keep reports of one year."""
        year = str(report_year)
        return HistoricalFinaMainData(i for i in self if i.report_year == year)

    def get_report(self, report_year: int, report_type: str) -> FinaMainData | None:
        """Return the report of a given year and kind, or None."""
        year = str(report_year)
        return next(
            (i for i in self if i.report_year == year and i.report_type == report_type), None
        )

    def current_report(self) -> FinaMainData | None:
        """Return the newest report, or None."""
        return self[0] if self else None

    def previous_report(self) -> FinaMainData | None:
        """Return the report before the newest, or None."""
        return self[1] if len(self) > 1 else None

    def value_list(self, value_type: str, count: int, report_type: str) -> list[float]:
        """Return up to ``count`` values (all if ``count`` <= 0), newest first.

        An unknown ``value_type`` yields -1 for every report.
        """
        data = self.filter_by_report_type(report_type)
        if count > 0:
            data = data[:count]
        try:
            attr = _VALUE_ATTRS.get(ValueListType(value_type))
        except ValueError:
            attr = None
        return [getattr(i, attr) if attr else -1.0 for i in data]

    def is_increasing_by_years(self, value_type: str, years_count: int,
                               report_type: str) -> bool:
        """Whether each value is strictly greater than the one before it in time."""
        data = self.value_list(value_type, years_count, report_type)
        return all(newer > older for newer, older in zip(data, data[1:]))

    def is_stability(self, value_type: str, years_count: int, report_type: str) -> bool:
        """Whether the standard deviation of the values is within the threshold."""
        values = self.value_list(value_type, years_count, report_type)
        try:
            sd = std_deviation(values)
        except (ValueError, ArithmeticError) as exc:
            logger.error("IsStability StdDeviationFloat64 error:%s", exc)
            return False
        logger.debug("StdDeviation value:%s", sd)
        return sd <= STABILITY_THRESHOLD

    def mid_value(self, value_type: str, years_count: int, report_type: str) -> float:
        """Return the median of the selected values."""
        return mid_value(self.value_list(value_type, years_count, report_type))

    def _avg_by_year(self, year: int, attr: str) -> float:
        data = self.filter_by_report_year(year)
        if not data:
            return 0.0
        return sum(getattr(d, attr) for d in data) / len(data)

    def get_avg_revenue_increasing_ratio_by_year(self, year: int) -> float:
        """Average year-on-year revenue growth (%) over the year's reports."""
        return self._avg_by_year(year, "totaloperaterevetz")

    def get_avg_eps_increasing_ratio_by_year(self, year: int) -> float:
        """Average year-on-year EPS growth (%) over the year's reports."""
        return self._avg_by_year(year, "epsjbtz")

    def get_avg_parent_netprofit_increasing_ratio_by_year(self, year: int) -> float:
        """Average year-on-year parent net profit growth (%) over the year's reports."""
        return self._avg_by_year(year, "parentnetprofittz")


@dataclass
class FinaPublishDate:
    """Scheduled and actual publication date of a report."""

    security_code: str = ""
    security_name_abbr: str = ""
    appoint_publish_date: str = ""
    report_date: str = ""
    actual_publish_date: str = ""
    report_type_name: str = ""
    is_publish: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "FinaPublishDate":
        return cls(
            security_code=_text(data.get("SECURITY_CODE")),
            security_name_abbr=_text(data.get("SECURITY_NAME_ABBR")),
            appoint_publish_date=_text(data.get("APPOINT_PUBLISH_DATE")),
            report_date=_text(data.get("REPORT_DATE")),
            actual_publish_date=_text(data.get("ACTUAL_PUBLISH_DATE")),
            report_type_name=_text(data.get("REPORT_TYPE_NAME")),
            is_publish=_text(data.get("IS_PUBLISH")),
        )


def _result_data(code: str, resp: Any) -> list:
    resp = resp or {}
    if resp.get("code", 0) != 0:
        raise APIError(f"{code} {resp!r}")
    return (resp.get("result") or {}).get("data") or []


class FinaMainAPI(EastMoneyBase):
    """Financial report queries."""

    def query_historical_fina_main_data(self, secu_code: str) -> HistoricalFinaMainData:
        """Fetch the main indicators of ``secu_code``, newest first."""
        params = {
            "filter": f'(SECUCODE="{secu_code.upper()}")',
            "client": "APP",
            "source": "HSF10",
            "type": "RPT_F10_FINANCE_MAINFINADATA",
            "sty": "APP_F10_MAINFINADATA",
            "st": "REPORT_DATE",
            "ps": "100",
            "sr": "-1",
        }
        logger.debug("EastMoney QueryHistoricalFinaMainData %s begin %s", FINA_MAIN_URL, params)
        data = _result_data(secu_code, self.http.get_json(FINA_MAIN_URL, params))
        try:
            return HistoricalFinaMainData(FinaMainData.from_json(item) for item in data)
        except (TypeError, ValueError) as exc:
            raise APIError(f"{secu_code} invalid report data: {exc}") from exc

    def query_fina_publish_date_list(self, security_code: str) -> list[FinaPublishDate]:
        """Fetch the report publication dates of ``security_code`` such as ``000026``."""
        params = {
            "filter": f'(SECURITY_CODE="{security_code.upper()}")',
            "client": "APP",
            "source": "DataCenter",
            "type": "RPT_PUBLIC_BS_APPOIN",
            "sty": "SECURITY_CODE,SECURITY_NAME_ABBR,APPOINT_PUBLISH_DATE,REPORT_DATE,"
                   "ACTUAL_PUBLISH_DATE,REPORT_TYPE_NAME,IS_PUBLISH",
            "st": "SECURITY_CODE,EITIME",
            "ps": "20",
            "p": "1",
            "sr": "-1,-1",
        }
        logger.debug("EastMoney QueryFinaPublishDate %s begin %s", PUBLISH_DATE_URL, params)
        data = _result_data(security_code, self.http.get_json(PUBLISH_DATE_URL, params))
        return [FinaPublishDate.from_json(item) for item in data]