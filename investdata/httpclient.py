"""Small JSON-over-HTTP client shared by all data sources."""

from __future__ import annotations

import json
import logging
import random
import time
from typing import Any, Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60 * 5

_USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/96.0.4664.45 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/15.1 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64; rv:94.0) Gecko/20100101 Firefox/94.0",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 15_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/15.1 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (Linux; Android 11; Pixel 5) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/96.0.4664.45 Mobile Safari/537.36",
)


class APIError(Exception):
    """Raised when a remote API call fails or returns unusable data."""


def random_user_agent() -> str:
    """Return a browser user agent string picked at random."""
    return random.choice(_USER_AGENTS)


def build_url(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Return ``url`` with ``params`` merged into its query string, keys sorted."""
    if not params:
        return url
    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query.update({key: str(value) for key, value in params.items()})
    encoded = urlencode(sorted(query.items()))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, encoded, parts.fragment))


class HTTPClient:
    """Thin wrapper over a requests session with a fixed timeout."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None):
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        began = time.monotonic()
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise APIError(f"{method} {url} failed: {exc}") from exc
        finally:
            latency = (time.monotonic() - began) * 1000
            logger.debug("%s %s end latency(ms)=%.0f", method, url, latency)
        if not response.ok:
            raise APIError(f"{method} {url} returned status {response.status_code}")
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return json.loads(response.content)
        except ValueError as exc:
            raise APIError(f"invalid JSON from {response.url}: {exc}") from exc

    def get_bytes(self, url: str, params: Mapping[str, Any] | None = None,
                  headers: Mapping[str, str] | None = None) -> bytes:
        """GET ``url`` and return the raw body."""
        return self._send("GET", build_url(url, params), headers=dict(headers or {})).content

    def get_json(self, url: str, params: Mapping[str, Any] | None = None,
                 headers: Mapping[str, str] | None = None) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        response = self._send("GET", build_url(url, params), headers=dict(headers or {}))
        return self._decode(response)

    def post_json(self, url: str, payload: Any = None,
                  headers: Mapping[str, str] | None = None) -> Any:
        """POST ``payload`` as a JSON body and return the decoded JSON reply."""
        all_headers = {"Content-Type": "application/json", **(headers or {})}
        body = None if payload is None else json.dumps(payload)
        response = self._send("POST", url, data=body, headers=all_headers)
        return self._decode(response)

    def post_form(self, url: str, data: Mapping[str, Any],
                  headers: Mapping[str, str] | None = None) -> Any:
        """POST ``data`` as multipart form fields and return the decoded JSON reply."""
        files = {key: (None, str(value)) for key, value in data.items()}
        response = self._send("POST", url, files=files, headers=dict(headers or {}))
        return self._decode(response)