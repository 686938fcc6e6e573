from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from investdata.httpclient import APIError
from investdata.zszx import NET_INFLOW_URL, NetInflow, NetInflowList, Zszx


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def _rows(count):
    return [
        {"TrdDt": f"2021-11-{i + 1:02d}", "ClsPrc": "10.0", "MainMnyNetIn": "1",
         "HugeNetIn": "0", "BigNetIn": "0", "MidNetIn": "0", "SmallNetIn": "0",
         "TtlMnyNetIn": "0"}
        for i in range(count)
    ]


def test_query_main_money_net_inflows(rsps):
    rsps.add(responses.GET, NET_INFLOW_URL, json={"success": True, "code": 0, "data": _rows(12)})
    results = Zszx().query_main_money_net_inflows("002028.sz", "2021-10-20", "2021-11-19")
    assert len(results) == 12
    assert results[:3].sum_main_net_in() == 3.0
    assert results[:5].sum_main_net_in() == 5.0
    assert results[:10].sum_main_net_in() == 10.0
    query = parse_qs(urlsplit(rsps.calls[0].request.url).query)
    assert query == {
        "dateStart": ["2021-10-20"], "dateEnd": ["2021-11-19"],
        "ecode": ["0"], "scode": ["002028"],
    }


def test_query_shanghai_market_code(rsps):
    rsps.add(responses.GET, NET_INFLOW_URL, json={"code": 0, "data": []})
    assert Zszx().query_main_money_net_inflows("600031.sh", "a", "b") == []
    query = parse_qs(urlsplit(rsps.calls[0].request.url).query)
    assert query["ecode"] == ["1"]


def test_query_invalid_code():
    with pytest.raises(ValueError, match="invalid secuCode"):
        Zszx().query_main_money_net_inflows("002028", "a", "b")


def test_query_nonzero_code_raises(rsps):
    rsps.add(responses.GET, NET_INFLOW_URL, json={"code": 1, "message": "bad"})
    with pytest.raises(APIError):
        Zszx().query_main_money_net_inflows("002028.SZ", "a", "b")


def test_sum_skips_unparsable():
    items = NetInflowList([NetInflow(main_mny_net_in="2.5"), NetInflow(main_mny_net_in="--")])
    assert items.sum_main_net_in() == 2.5


def test_str_with_few_rows():
    items = NetInflowList(NetInflow.from_json(r) for r in _rows(3))
    assert str(items) == "近3日主力资金净流入:3.00万元</br>--</br>--</br>--</br>--</br>--"


def test_str_with_all_windows():
    text = str(NetInflowList(NetInflow.from_json(r) for r in _rows(40)))
    assert text.split("</br>")[-1] == "近40日主力资金净流入:40.00万元"
    assert "--" not in text


def test_slice_keeps_type():
    items = NetInflowList(NetInflow.from_json(r) for r in _rows(4))
    assert isinstance(items[:2], NetInflowList)
    assert items[0].trd_dt == "2021-11-01"