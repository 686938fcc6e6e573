"""Stock keyword search backed by the suggest service."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .httpclient import APIError, HTTPClient

logger = logging.getLogger(__name__)

SEARCH_URL = "https://suggest3.sinajs.cn/suggest/key={kw}"


@dataclass
class SearchResult:
    """One matching security.

    ``market``: 11 A shares, 31 Hong Kong, 41 US, 103 UK.
    """

    security_code: str = ""
    secucode: str = ""
    name: str = ""
    market: int = 0


def parse_search_response(data: str) -> list[SearchResult]:
    """Parse a ``var x="a,b,...;..."`` reply, A shares first."""
    pieces = data.split("=")
    if len(pieces) != 2:
        raise APIError("search resp invalid:" + data)
    results = []
    for line in pieces[1].strip('"').split(";"):
        items = line.split(",")
        if len(items) < 9:
            continue
        try:
            market = int(items[1])
        except ValueError:
            logger.error("market:%s atoi error", items[1])
            market = 0
        results.append(SearchResult(
            security_code=items[2],
            secucode=items[3][2:] + "." + items[3][:2],
            name=items[6],
            market=market,
        ))
    return sorted(results, key=lambda r: r.market)


class Sina:
    """Client for the suggest search service."""

    def __init__(self, http: HTTPClient | None = None):
        self.http = http if http is not None else HTTPClient()

    def keyword_search(self, kw: str) -> list[SearchResult]:
        """Search by name, code or pinyin."""
        body = self.http.get_bytes(SEARCH_URL.format(kw=kw))
        return parse_search_response(body.decode("gbk", errors="replace"))