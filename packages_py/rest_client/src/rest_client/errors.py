"""
Exceptions raised by rest_client.

Transport failures are not represented here: whatever the transport raises
(``httpx.TransportError``, ``httpx.TimeoutException``...) reaches the caller
unchanged.
"""
from typing import Any


class RestClientError(Exception):
    """Base class for rest_client errors."""


class InvalidBaseUrlError(RestClientError, ValueError):
    """Raised when a client is created without a valid absolute base URL."""

    def __init__(self, base_url: Any):
        self.base_url = base_url
        super().__init__(f"base_url must be a valid absolute URL, got {base_url!r}")
