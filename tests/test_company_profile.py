import json

import pytest
import responses

from investdata.eastmoney.company_profile import (
    CPBD_URL,
    JBZL_URL,
    CompanyProfile,
    CompanyProfileAPI,
    MainForm,
)
from investdata.httpclient import APIError

BASIC = {
    "Result": {
        "JiBenZiLiao": {
            "SecurityCode": "002459.SZ",
            "CompanyName": "晶澳太阳能科技股份有限公司",
            "Industry": "电气设备",
            "Block": "光伏概念",
            "CompRofile": "公司简介内容",
            "MainBusiness": "太阳能电池片及组件",
        }
    },
    "Status": 0,
    "Message": "",
}

CPBD = {
    "Result": {
        "TiCaiXiangQingList": [{"KeyWord": "光伏"}, {"KeyWord": "储能"}],
        "ZhuYingGouChengList": [
            {"ReportType": "1", "MainForm": "光伏行业", "MainIncome": "100亿",
             "MainIncomeRatio": "98%", "MainIncomeRatioChart": "0.98"},
            {"ReportType": "2", "MainForm": "境外", "MainIncome": "60亿",
             "MainIncomeRatio": "60%", "MainIncomeRatioChart": "0.6"},
        ],
    },
    "Status": 0,
    "Message": None,
}


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_query_company_profile(rsps):
    rsps.add(responses.POST, JBZL_URL, json=BASIC)
    rsps.add(responses.GET, CPBD_URL, json=CPBD)
    data = CompanyProfileAPI().query_company_profile("002459.sz")
    assert data.secucode == "002459.SZ"
    assert data.name == "晶澳太阳能科技股份有限公司"
    assert data.industry == "电气设备"
    assert data.concept == "光伏概念"
    assert data.profile == "公司简介内容"
    assert data.main_business == "太阳能电池片及组件"
    assert data.keywords == ["光伏", "储能"]
    assert [m.main_form for m in data.main_forms] == ["光伏行业", "境外"]
    assert data.main_forms[0].main_income_ratio_chart == "0.98"
    assert json.loads(rsps.calls[0].request.body) == {"fc": "00245902"}
    assert "fc=00245902" in rsps.calls[1].request.url


def test_query_company_profile_bad_status(rsps):
    rsps.add(responses.POST, JBZL_URL, json={"Status": 1, "Message": "bad"})
    with pytest.raises(APIError, match="002459.sz"):
        CompanyProfileAPI().query_company_profile("002459.sz")


def test_query_company_profile_second_call_bad_status(rsps):
    rsps.add(responses.POST, JBZL_URL, json=BASIC)
    rsps.add(responses.GET, CPBD_URL, json={"Status": -1, "Message": "oops"})
    with pytest.raises(APIError, match="oops"):
        CompanyProfileAPI().query_company_profile("002459.sz")


def test_main_forms_string_groups_and_orders():
    profile = CompanyProfile(main_forms=[
        MainForm(type="2", main_form="境内", main_income_ratio="40%"),
        MainForm(type="1", main_form="光伏", main_income_ratio="98%"),
    ])
    assert profile.main_forms_string() == "\n".join([
        "按行业:",
        "    光伏: 98%",
        "按产品:",
        "暂无数据",
        "按地区:",
        "    境内: 40%",
    ])


def test_profile_string_and_keywords():
    profile = CompanyProfile(profile="P", main_business="B", concept="C", keywords=["a", "b"])
    assert profile.profile_string() == "公司简介:\nP\n主营业务:\n    B\n所属概念:\n    C"
    assert profile.keywords_string() == "a;b"