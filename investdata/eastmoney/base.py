"""Shared state and helpers for the EastMoney data source."""

from __future__ import annotations

from ..httpclient import HTTPClient


class EastMoneyBase:
    """Holds the HTTP client used by every EastMoney API group."""

    def __init__(self, http: HTTPClient | None = None):
        self.http = http if http is not None else HTTPClient()

    def get_fc(self, secu_code: str) -> str:
        """Build the ``fc`` request parameter: ``002459.SZ`` becomes ``00245902``.

        Codes without a ``.SH`` or ``.SZ`` suffix give an empty string.
        """
        code = secu_code.upper()
        if code.endswith(".SH"):
            return code.replace(".SH", "01")
        if code.endswith(".SZ"):
            return code.replace(".SZ", "02")
        return ""