"""Company profile: basic facts, themes and revenue composition."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ..httpclient import APIError
from .base import EastMoneyBase

logger = logging.getLogger(__name__)

JBZL_URL = "https://emh5.eastmoney.com/api/GongSiGaiKuang/GetJiBenZiLiao"
CPBD_URL = "https://emh5.eastmoney.com/api/CaoPanBiDu/GetCaoPanBiDuPart2Get"

# Classification type codes, in the order they are printed.
_FORM_SECTIONS = (("1", "按行业:"), ("3", "按产品:"), ("2", "按地区:"))


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class MainForm:
    """One line of the revenue composition.

    ``type`` is 1 for by industry, 2 for by region and 3 for by product.
    """

    type: str = ""
    main_form: str = ""
    main_income_ratio: str = ""
    main_income: str = ""
    main_income_ratio_chart: str = ""


@dataclass
class CompanyProfile:
    """Summary information about a listed company."""

    secucode: str = ""
    name: str = ""
    industry: str = ""
    concept: str = ""
    profile: str = ""
    main_business: str = ""
    keywords: list[str] = field(default_factory=list)
    main_forms: list[MainForm] = field(default_factory=list)

    def main_forms_string(self) -> str:
        """Render the revenue composition grouped by industry, product and region."""
        groups: dict[str, list[MainForm]] = {}
        for form in self.main_forms:
            groups.setdefault(form.type, []).append(form)
        lines: list[str] = []
        for type_code, title in _FORM_SECTIONS:
            lines.append(title)
            forms = groups.get(type_code)
            if forms:
                lines.extend(f"    {m.main_form}: {m.main_income_ratio}" for m in forms)
            else:
                lines.append("暂无数据")
        return "\n".join(lines)

    def profile_string(self) -> str:
        """Render the profile, main business and concepts."""
        return "\n".join([
            "公司简介:",
            self.profile,
            "主营业务:",
            "    " + self.main_business,
            "所属概念:",
            "    " + self.concept,
        ])

    def keywords_string(self) -> str:
        """Join the theme keywords with semicolons."""
        return ";".join(self.keywords)


def _check_status(secu_code: str, resp: Mapping[str, Any]) -> None:
    if resp.get("Status", 0) != 0:
        raise APIError(f"{secu_code} {resp.get('Message')!r}")


class CompanyProfileAPI(EastMoneyBase):
    """Company profile queries."""

    def query_company_profile(self, secu_code: str) -> CompanyProfile:
        """Fetch the profile of ``secu_code`` such as ``002459.SZ``."""
        fc = self.get_fc(secu_code)
        profile = CompanyProfile()

        logger.debug("EastMoney QueryCompanyProfile %s begin fc=%s", JBZL_URL, fc)
        resp = self.http.post_json(JBZL_URL, {"fc": fc}) or {}
        _check_status(secu_code, resp)
        basic = (resp.get("Result") or {}).get("JiBenZiLiao") or {}
        profile.secucode = _text(basic.get("SecurityCode"))
        profile.name = _text(basic.get("CompanyName"))
        profile.industry = _text(basic.get("Industry"))
        profile.concept = _text(basic.get("Block"))
        profile.profile = _text(basic.get("CompRofile"))
        profile.main_business = _text(basic.get("MainBusiness"))

        logger.debug("EastMoney QueryCompanyProfile %s begin fc=%s", CPBD_URL, fc)
        resp = self.http.get_json(CPBD_URL, {"fc": fc}) or {}
        _check_status(secu_code, resp)
        result = resp.get("Result") or {}
        profile.keywords = [
            _text(item.get("KeyWord")) for item in result.get("TiCaiXiangQingList") or []
        ]
        profile.main_forms = [
            MainForm(
                type=_text(item.get("ReportType")),
                main_form=_text(item.get("MainForm")),
                main_income=_text(item.get("MainIncome")),
                main_income_ratio=_text(item.get("MainIncomeRatio")),
                main_income_ratio_chart=_text(item.get("MainIncomeRatioChart")),
            )
            for item in result.get("ZhuYingGouChengList") or []
        ]
        return profile