"""
Minimal REST client for Python.

Binds a base URL and a set of default headers to a fetch-style transport so
callers can issue relative requests (``client.get("/users/1")``) against one
API origin. Absolute URLs bypass the base URL. The transport result is
returned unchanged; the default httpx transport returns an awaitable.
"""
from .types import (
    DELETE,
    GET,
    HEAD,
    OPTIONS,
    PATCH,
    POST,
    PUT,
    HttpMethod,
    RequestOptions,
    Response,
    Transport,
)
from .errors import InvalidBaseUrlError, RestClientError
from .codecs import (
    APPLICATION_JSON,
    BodyCodec,
    CodecRegistry,
    JsonBodyCodec,
    PassthroughCodec,
    default_codecs,
)
from .config import ClientConfig, TimeoutConfig
from .core.request_builder import is_absolute_url
from .core.rest_client import RestClient
from .transport import (
    AsyncFetchResponse,
    AsyncHttpxTransport,
    FetchResponse,
    SyncHttpxTransport,
)
from .factory import create_client, create_async_client, create_sync_client

__all__ = [
    # Methods
    "DELETE",
    "GET",
    "HEAD",
    "OPTIONS",
    "PATCH",
    "POST",
    "PUT",
    # Types
    "HttpMethod",
    "RequestOptions",
    "Response",
    "Transport",
    # Errors
    "InvalidBaseUrlError",
    "RestClientError",
    # Codecs
    "APPLICATION_JSON",
    "BodyCodec",
    "CodecRegistry",
    "JsonBodyCodec",
    "PassthroughCodec",
    "default_codecs",
    # Config
    "ClientConfig",
    "TimeoutConfig",
    # Client
    "RestClient",
    "is_absolute_url",
    # Transports
    "AsyncFetchResponse",
    "AsyncHttpxTransport",
    "FetchResponse",
    "SyncHttpxTransport",
    # Factory
    "create_client",
    "create_async_client",
    "create_sync_client",
]

__version__ = "0.1.0"
