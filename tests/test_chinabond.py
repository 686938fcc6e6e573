import re

import pytest
import responses

from investdata.chinabond import ChinaBond
from investdata.httpclient import APIError

AAA = "中债证券公司债收益率曲线(AAA)"
AAA_ID = "5781a1ff7651967e0176978d957b7346"
TREE_RE = re.compile(r"https://yield\.chinabond\.com\.cn/cbweb-mn/yc/queryTree.*")
FXSYL_RE = re.compile(r"https://yield\.chinabond\.com\.cn/cbweb-mn/yc/searchXyFxsyl.*")

TREE = [
    {"id": "aaaa", "pId": "0", "name": "中债国债收益率曲线", "isParent": "false",
     "open": "false", "checked": False, "font": None},
    {"id": AAA_ID, "pId": "1", "name": AAA, "isParent": "false",
     "open": "false", "checked": False, "font": None},
]
FXSYL = {
    "ycChartDataList": [
        {"ycDefId": AAA_ID, "ycDefName": AAA, "worktime": "2021-11-19",
         "seriesData": [[0.0, 2.31], [0.08, 2.35], [1.0, 2.6]],
         "isPoint": False, "hyCurve": False, "point": False}
    ],
    "chartDataList": None, "upThrow": 0, "downThrow": 0, "upOffset": 0, "downOffset": 0,
}


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_query_tree(rsps):
    rsps.add(responses.GET, TREE_RE, json=TREE)
    results = ChinaBond().query_tree()
    assert len(results) != 0
    assert results[AAA] == AAA_ID


def test_query_fxsyl(rsps):
    rsps.add(responses.POST, FXSYL_RE, json=FXSYL)
    results = ChinaBond().query_fxsyl(AAA_ID, "2021-11-19")
    assert len(results) != 0
    assert results[0][1] != 0
    url = rsps.calls[0].request.url
    assert "workTimes=2021-11-19" in url
    assert f"ycDefIds={AAA_ID}" in url


def test_query_fxsyl_empty_list(rsps):
    rsps.add(responses.POST, FXSYL_RE, json={"ycChartDataList": []})
    assert ChinaBond().query_fxsyl(AAA_ID, "2021-11-19") == []


def test_query_current_syl(rsps):
    rsps.add(responses.GET, TREE_RE, json=TREE)
    rsps.add(responses.POST, FXSYL_RE, json=FXSYL)
    result = ChinaBond().query_current_syl(AAA, "2021-11-19")
    assert result == 2.31


def test_query_current_syl_unknown_name(rsps):
    rsps.add(responses.GET, TREE_RE, json=TREE)
    with pytest.raises(APIError, match="债券名称不存在"):
        ChinaBond().query_current_syl("nope", "2021-11-19")


def test_query_current_syl_empty_data(rsps):
    rsps.add(responses.GET, TREE_RE, json=TREE)
    rsps.add(responses.POST, FXSYL_RE, json={"ycChartDataList": []})
    with pytest.raises(APIError, match="收益率数据为空"):
        ChinaBond().query_current_syl(AAA, "2021-11-19")


def test_query_current_syl_malformed_point(rsps):
    rsps.add(responses.GET, TREE_RE, json=TREE)
    rsps.add(responses.POST, FXSYL_RE,
             json={"ycChartDataList": [{"seriesData": [[1.0, 2.0, 3.0]]}]})
    with pytest.raises(APIError, match="收益率数据异常"):
        ChinaBond().query_current_syl(AAA, "2021-11-19")


def test_query_aaa_company_bond_syl(rsps):
    rsps.add(responses.GET, TREE_RE, json=TREE)
    rsps.add(responses.POST, FXSYL_RE, json=FXSYL)
    assert ChinaBond().query_aaa_company_bond_syl() == 2.31


def test_query_aaa_company_bond_syl_failure_gives_zero(rsps):
    rsps.add(responses.GET, TREE_RE, status=500)
    assert ChinaBond().query_aaa_company_bond_syl() == 0.0