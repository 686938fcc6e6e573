from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from investdata.eastmoney.org_rating import ORG_RATING_URL, OrgRating, OrgRatingAPI, OrgRatingList
from investdata.httpclient import APIError


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_str_format():
    ratings = OrgRatingList([OrgRating("近一月", "买入"), OrgRating("近三月", "增持")])
    assert str(ratings) == "近一月:买入</br>近三月:增持"


def test_query_org_rating_returns_three(rsps):
    rsps.add(responses.GET, ORG_RATING_URL, json={
        "code": 0,
        "result": {"data": [
            {"DATE_TYPE": "近一月", "COMPRE_RATING": "买入"},
            {"DATE_TYPE": "近三月", "COMPRE_RATING": "买入"},
            {"DATE_TYPE": "近六月", "COMPRE_RATING": "增持"},
        ]},
    })
    data = OrgRatingAPI().query_org_rating("002459.sz")
    assert len(data) == 3
    assert data[2] == OrgRating("近六月", "增持")
    query = parse_qs(urlsplit(rsps.calls[0].request.url).query)
    assert query["filter"] == ['(SECUCODE="002459.SZ")']
    assert query["st"] == ["DATE_TYPE_CODE"]


def test_query_org_rating_error_code(rsps):
    rsps.add(responses.GET, ORG_RATING_URL, json={"code": 9201})
    with pytest.raises(APIError):
        OrgRatingAPI().query_org_rating("002459.SZ")