"""
Transports backed by httpx.

A transport receives the resolved URL and the finalized options from
RestClient and performs the request. Passthrough options are forwarded as
keyword arguments to ``httpx.Client.request`` / ``httpx.AsyncClient.request``.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ..config import TimeoutConfig, is_ssl_verify_disabled_by_env, normalize_timeout
from ..console import print_response
from ..types import GET

logger = logging.getLogger("rest_client.transport")


def _build_timeout(timeout: Union[TimeoutConfig, float, None]) -> httpx.Timeout:
    resolved = normalize_timeout(timeout)
    return httpx.Timeout(
        connect=resolved.connect,
        read=resolved.read,
        write=resolved.write,
        pool=resolved.connect,
    )


def body_to_httpx_kwargs(body: Any) -> Dict[str, Any]:
    """Map a request body onto httpx request arguments.

    Mappings left unencoded by the client are sent as form fields. Anything
    else that is not text or bytes needs a codec selected by content-type.
    """
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return {"data": dict(body)}
    if isinstance(body, (str, bytes, bytearray, memoryview)):
        return {"content": body}
    raise TypeError(
        f"cannot send a {type(body).__name__} body without an encoding content-type "
        f"(e.g. content-type: application/json)"
    )


def split_options(options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Turn transport options into httpx.request keyword arguments."""
    kwargs = dict(options or {})
    method = kwargs.pop("method", None) or GET
    headers = kwargs.pop("headers", None) or {}
    body = kwargs.pop("body", None)
    return {
        "method": method,
        "headers": headers,
        **body_to_httpx_kwargs(body),
        **kwargs,
    }


class FetchResponse:
    """Response returned by SyncHttpxTransport."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def raw(self) -> httpx.Response:
        return self._response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def status_text(self) -> str:
        return self._response.reason_phrase or ""

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def url(self) -> str:
        return str(self._response.url)

    def text(self) -> str:
        return self._response.text

    def json(self) -> Any:
        return self._response.json()

    def content(self) -> bytes:
        return self._response.content

    def __repr__(self) -> str:
        return f"<{type(self).__name__} [{self.status}] {self.url}>"


class AsyncFetchResponse(FetchResponse):
    """Response returned by AsyncHttpxTransport; body accessors are awaitable."""

    async def text(self) -> str:
        return self._response.text

    async def json(self) -> Any:
        return self._response.json()

    async def content(self) -> bytes:
        return self._response.content


def _trace_response(response: httpx.Response) -> None:
    body: Any = response.text
    try:
        body = response.json()
    except ValueError:
        pass
    print_response(
        response.status_code,
        response.reason_phrase or "",
        str(response.url),
        response.headers,
        body,
    )


class AsyncHttpxTransport:
    """Asynchronous transport using httpx.AsyncClient."""

    def __init__(
        self,
        httpx_client: Optional[httpx.AsyncClient] = None,
        timeout: Union[TimeoutConfig, float, None] = None,
        verbose: bool = False,
    ):
        self._owns_client = httpx_client is None
        if httpx_client is not None:
            self._client = httpx_client
        else:
            # NODE_TLS_REJECT_UNAUTHORIZED=0 or SSL_CERT_VERIFY=0 disables SSL verification
            self._client = httpx.AsyncClient(
                timeout=_build_timeout(timeout),
                verify=not is_ssl_verify_disabled_by_env(),
            )
        self._verbose = verbose
        self._closed = False

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def __call__(self, url: str, options: Optional[Dict[str, Any]] = None) -> AsyncFetchResponse:
        if self._closed:
            raise RuntimeError("Transport has been closed")

        kwargs = split_options(options)
        logger.debug(f"AsyncHttpxTransport: {kwargs['method']} {url}")

        response = await self._client.request(url=url, **kwargs)

        logger.debug(f"AsyncHttpxTransport: {response.status_code} {url}")
        if self._verbose:
            _trace_response(response)
        return AsyncFetchResponse(response)

    async def aclose(self) -> None:
        """Close the transport. A client passed in by the caller stays open."""
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


class SyncHttpxTransport:
    """Synchronous transport using httpx.Client."""

    def __init__(
        self,
        httpx_client: Optional[httpx.Client] = None,
        timeout: Union[TimeoutConfig, float, None] = None,
        verbose: bool = False,
    ):
        self._owns_client = httpx_client is None
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.Client(
                timeout=_build_timeout(timeout),
                verify=not is_ssl_verify_disabled_by_env(),
            )
        self._verbose = verbose
        self._closed = False

    @property
    def client(self) -> httpx.Client:
        return self._client

    def __call__(self, url: str, options: Optional[Dict[str, Any]] = None) -> FetchResponse:
        if self._closed:
            raise RuntimeError("Transport has been closed")

        kwargs = split_options(options)
        logger.debug(f"SyncHttpxTransport: {kwargs['method']} {url}")

        response = self._client.request(url=url, **kwargs)

        logger.debug(f"SyncHttpxTransport: {response.status_code} {url}")
        if self._verbose:
            _trace_response(response)
        return FetchResponse(response)

    def close(self) -> None:
        """Close the transport. A client passed in by the caller stays open."""
        self._closed = True
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SyncHttpxTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
