import json
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from investdata.httpclient import APIError, HTTPClient, build_url, random_user_agent


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_build_url_sorts_params():
    assert build_url("http://host.example.com/a", {"b": "2", "a": "1"}) == (
        "http://host.example.com/a?a=1&b=2"
    )


def test_build_url_without_params_is_unchanged():
    url = "http://host.example.com/a?x=1"
    assert build_url(url, {}) == url
    assert build_url(url, None) == url


def test_build_url_merges_existing_query():
    url = build_url("http://host.example.com/a?z=9", {"filter": '(SECUCODE="X")'})
    query = parse_qs(urlsplit(url).query)
    assert query["z"] == ["9"]
    assert query["filter"] == ['(SECUCODE="X")']


def test_random_user_agent_is_browser_like():
    for _ in range(10):
        assert random_user_agent().startswith("Mozilla/")


def test_get_json_decodes_and_sends_params(rsps):
    rsps.add(responses.GET, "http://api.example.com/data", json={"code": 0, "v": [1, 2]})
    client = HTTPClient()
    result = client.get_json("http://api.example.com/data", {"p": "1"}, {"User-Agent": "ua"})
    assert result == {"code": 0, "v": [1, 2]}
    request = rsps.calls[0].request
    assert parse_qs(urlsplit(request.url).query) == {"p": ["1"]}
    assert request.headers["User-Agent"] == "ua"


def test_get_bytes_returns_raw_body(rsps):
    rsps.add(responses.GET, "http://api.example.com/raw", body=b"var x=1;")
    assert HTTPClient().get_bytes("http://api.example.com/raw") == b"var x=1;"


def test_bad_status_raises(rsps):
    rsps.add(responses.GET, "http://api.example.com/data", status=500)
    with pytest.raises(APIError):
        HTTPClient().get_json("http://api.example.com/data")


def test_invalid_json_raises(rsps):
    rsps.add(responses.GET, "http://api.example.com/data", body="not json")
    with pytest.raises(APIError):
        HTTPClient().get_json("http://api.example.com/data")


def test_post_json_sends_json_body(rsps):
    rsps.add(responses.POST, "http://api.example.com/post", json={"Status": 0})
    result = HTTPClient().post_json("http://api.example.com/post", {"fc": "00245902"})
    assert result == {"Status": 0}
    request = rsps.calls[0].request
    assert json.loads(request.body) == {"fc": "00245902"}
    assert request.headers["Content-Type"] == "application/json"


def test_post_form_sends_multipart(rsps):
    rsps.add(responses.POST, "http://api.example.com/form", json={"code": 0})
    result = HTTPClient().post_form("http://api.example.com/form", {"source": "SELECT_SECURITIES"})
    assert result == {"code": 0}
    request = rsps.calls[0].request
    assert b'name="source"' in request.body
    assert b"SELECT_SECURITIES" in request.body
    assert "multipart/form-data" in request.headers["Content-Type"]