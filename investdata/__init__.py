"""Clients for Chinese stock, fund and bond market data services."""

__version__ = "0.1.0"