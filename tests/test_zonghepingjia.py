import json

import pytest
import responses

from investdata.eastmoney.zonghepingjia import ZHPJ_URL, ZongHePingJia, ZongHePingJiaAPI
from investdata.httpclient import APIError

REPLY = {
    "Result": {
        "ZongHePingJia": {
            "SecurityCode": "600809",
            "UpdateTime": "2021-11-19",
            "TotalScore": "85.5",
            "TotalScoreCHG": "1.2",
            "LeadPre": None,
            "RisePro": None,
            "MsgCount": "12",
            "CapitalScore": "80",
            "D1": "短期强势",
            "ValueScore": "90",
            "MarketScoreCHG": "0.5",
            "Status": "1",
            "PingFenNum": "85.5",
            "DaBaiShiChangNum": "95%",
            "ShangZhangGaiLvNum": "55%",
            "CheckZhenGuStatus": True,
        }
    },
    "Status": 0,
    "Message": "",
}


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_query_zong_he_ping_jia(rsps):
    rsps.add(responses.POST, ZHPJ_URL, json=REPLY)
    data = ZongHePingJiaAPI().query_zong_he_ping_jia("600809.sh")
    assert data.security_code == "600809"
    assert data.total_score == "85.5"
    assert data.d1 == "短期强势"
    assert data.check_zhen_gu_status is True
    assert json.loads(rsps.calls[0].request.body) == {"fc": "60080901"}


def test_query_zong_he_ping_jia_bad_status(rsps):
    rsps.add(responses.POST, ZHPJ_URL, json={"Status": 3, "Message": "无数据"})
    with pytest.raises(APIError, match="无数据"):
        ZongHePingJiaAPI().query_zong_he_ping_jia("600809.sh")


def test_from_json_missing_fields_default():
    data = ZongHePingJia.from_json({"TotalScore": 70})
    assert data.total_score == "70"
    assert data.security_code == ""
    assert data.check_zhen_gu_status is False