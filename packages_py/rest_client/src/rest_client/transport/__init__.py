"""
Transports for rest_client.
"""
from .httpx_transport import (
    AsyncFetchResponse,
    AsyncHttpxTransport,
    FetchResponse,
    SyncHttpxTransport,
    body_to_httpx_kwargs,
    split_options,
)

__all__ = [
    "AsyncFetchResponse",
    "AsyncHttpxTransport",
    "FetchResponse",
    "SyncHttpxTransport",
    "body_to_httpx_kwargs",
    "split_options",
]
