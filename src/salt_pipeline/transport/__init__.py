"""HTTP transports for the Salt API."""

from .requests_client import RequestsHttpClient

__all__ = ["RequestsHttpClient"]
