import re

import pytest
import responses

from investdata.qq import QQ, SearchResult, parse_search_response

BODY = (
    r'v_hint="sh~600036~\u62db\u5546\u94f6\u884c~zsyh~GP-A'
    r'^hk~03968~\u62db\u5546\u94f6\u884c~zsyh~GP"'
)


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_keyword_search(rsps):
    rsps.add(responses.GET, re.compile(r"https://smartbox\.gtimg\.cn/s3/.*"),
             body=BODY.encode("ascii"))
    results = QQ().keyword_search("招商银行")
    assert results == [
        SearchResult(security_code="600036", secucode="600036.sh", name="招商银行"),
        SearchResult(security_code="03968", secucode="03968.hk", name="招商银行"),
    ]


def test_parse_skips_short_entries():
    results = parse_search_response('v_hint="sz~000001^sz~000002~abc~x"')
    assert results == [SearchResult(security_code="000002", secucode="000002.sz", name="abc")]


def test_parse_without_hint_is_empty():
    assert parse_search_response('v_other="x"') == []
    assert parse_search_response("") == []


def test_parse_bad_escape_raises():
    with pytest.raises(ValueError):
        parse_search_response(r'v_hint="sh~600036~\u62zz~a"')