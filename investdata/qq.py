"""Stock keyword search backed by the smartbox service."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .httpclient import HTTPClient

logger = logging.getLogger(__name__)

SEARCH_URL = "https://smartbox.gtimg.cn/s3/?v=2&q={kw}&t=all&c=1"

_UNICODE_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{0,4})")


@dataclass
class SearchResult:
    """One matching security."""

    security_code: str = ""
    secucode: str = ""
    name: str = ""


def _decode_unicode_escapes(text: str) -> str:
    def replace(match: re.Match) -> str:
        digits = match.group(1)
        if len(digits) != 4:
            raise ValueError(f"invalid unicode escape in {text!r}")
        code_point = int(digits, 16)
        if 0xD800 <= code_point <= 0xDFFF:
            raise ValueError(f"invalid unicode escape in {text!r}")
        return chr(code_point)

    return _UNICODE_ESCAPE.sub(replace, text)


def parse_search_response(text: str) -> list[SearchResult]:
    """Parse a ``v_hint="market~code~name~...^..."`` reply into results."""
    values: dict[str, str] = {}
    for line in text.split(";"):
        items = line.split("=")
        if len(items) != 2:
            continue
        values[items[0].strip()] = items[1].strip().strip('"')
    results = []
    for entry in values.get("v_hint", "").split("^"):
        parts = entry.split("~")
        if len(parts) < 3:
            logger.debug("invalid matchedSlice:%s", parts)
            continue
        market, security_code, name = parts[0], parts[1], parts[2]
        results.append(SearchResult(
            security_code=security_code,
            secucode=f"{security_code}.{market}",
            name=_decode_unicode_escapes(name),
        ))
    return results


class QQ:
    """Client for the smartbox search service."""

    def __init__(self, http: HTTPClient | None = None):
        self.http = http if http is not None else HTTPClient()

    def keyword_search(self, kw: str) -> list[SearchResult]:
        """Search by name, code or pinyin."""
        body = self.http.get_bytes(SEARCH_URL.format(kw=kw))
        return parse_search_response(body.decode("utf-8", errors="replace"))