"""
REST client bound to a base URL and a set of default headers.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from ..codecs import BodyCodec, CodecRegistry
from ..config import ClientConfig, ResolvedConfig, TimeoutConfig, resolve_config
from ..console import print_request
from ..transport import AsyncHttpxTransport
from ..types import (
    DELETE,
    GET,
    HEAD,
    OPTIONS,
    PATCH,
    POST,
    PUT,
    HttpMethod,
    RequestOptions,
    Transport,
)
from .request_builder import build_request

logger = logging.getLogger("rest_client.client")


class RestClient:
    """Issues requests relative to a fixed base URL.

    The client only shapes requests. The transport performs the I/O and its
    return value (an awaitable for async transports) is handed back as is.

    Example:
        client = RestClient("https://api.example.com", {"Accept": "application/json"})
        response = await client.get("/users/1")
        data = await response.json()
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[Transport] = None,
        *,
        timeout: Union[TimeoutConfig, float, None] = None,
        normalize_request_headers: bool = True,
        verbose: Optional[bool] = None,
        codecs: Optional[CodecRegistry] = None,
        owns_transport: Optional[bool] = None,
    ):
        config = ClientConfig(
            base_url=base_url,
            headers=dict(headers or {}),
            timeout=timeout,
            normalize_request_headers=normalize_request_headers,
            verbose=verbose,
            codecs=codecs,
        )
        self._init_from_config(resolve_config(config), transport, owns_transport)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[Transport] = None,
        owns_transport: Optional[bool] = None,
    ) -> "RestClient":
        """Create a client from a ClientConfig."""
        client = cls.__new__(cls)
        client._init_from_config(resolve_config(config), transport, owns_transport)
        return client

    def _init_from_config(
        self,
        config: ResolvedConfig,
        transport: Optional[Transport],
        owns_transport: Optional[bool] = None,
    ) -> None:
        self._config = config
        self._base_url = config.base_url
        self._headers: Dict[str, str] = {}
        self._codecs = config.codecs

        for name, value in config.headers.items():
            self.set_header(name, value)

        self._owns_transport = transport is None if owns_transport is None else owns_transport
        # None until first use when no transport is given
        self._transport: Optional[Transport] = transport

        logger.debug(
            f"RestClient: base_url={self._base_url}, headers={self.get_header_names()}, "
            f"transport={type(transport).__name__ if transport is not None else 'default'}"
        )

    def _get_transport(self) -> Transport:
        if self._transport is None:
            self._transport = AsyncHttpxTransport(
                timeout=self._config.timeout, verbose=self._config.verbose
            )
            logger.debug("RestClient: created default AsyncHttpxTransport")
        return self._transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Dict[str, str]:
        """Copy of the default headers."""
        return dict(self._headers)

    @property
    def transport(self) -> Transport:
        """The transport in use. The default one is created on first access."""
        return self._get_transport()

    # Headers

    def set_header(self, name: str, value: str) -> None:
        """Set a default header. Names are stored lowercase."""
        self._headers[name.lower()] = value

    def get_header(self, name: str) -> Optional[str]:
        """Return a default header by name (case-insensitive)."""
        return self._headers.get(name.lower())

    def get_header_names(self) -> List[str]:
        return list(self._headers)

    def remove_header(self, name: str) -> None:
        self._headers.pop(name.lower(), None)

    def register_codec(self, mime_type: str, codec: BodyCodec) -> None:
        """Register a body codec for a content-type."""
        self._codecs.register(mime_type, codec)

    # Dispatch

    def fetch(
        self,
        target: Optional[str] = None,
        options: Optional[RequestOptions] = None,
        **kwargs: Any,
    ) -> Any:
        """Fetch a resource and return the transport result unchanged.

        Keyword arguments are merged over ``options``.
        """
        merged: Dict[str, Any] = {**(options or {}), **kwargs}
        request = build_request(
            self._base_url,
            target,
            merged,
            self._headers,
            self._codecs,
            normalize=self._config.normalize_request_headers,
        )

        if self._config.verbose:
            print_request(request.method or GET, request.url, request.headers, request.body)

        return self._get_transport()(request.url, request.to_options())

    def _dispatch(
        self,
        method: HttpMethod,
        target: Optional[str],
        options: Optional[RequestOptions],
        kwargs: Dict[str, Any],
    ) -> Any:
        # The verb always wins over any method passed in options
        return self.fetch(target, {**(options or {}), **kwargs, "method": method})

    def _dispatch_with_body(
        self,
        method: HttpMethod,
        target: Optional[str],
        body: Any,
        options: Optional[RequestOptions],
        kwargs: Dict[str, Any],
    ) -> Any:
        return self.fetch(
            target, {**(options or {}), **kwargs, "body": body, "method": method}
        )

    def get(
        self, target: Optional[str] = None, options: Optional[RequestOptions] = None, **kwargs: Any
    ) -> Any:
        """GET request."""
        return self._dispatch(GET, target, options, kwargs)

    def head(
        self, target: Optional[str] = None, options: Optional[RequestOptions] = None, **kwargs: Any
    ) -> Any:
        """HEAD request."""
        return self._dispatch(HEAD, target, options, kwargs)

    def options(
        self, target: Optional[str] = None, options: Optional[RequestOptions] = None, **kwargs: Any
    ) -> Any:
        """OPTIONS request."""
        return self._dispatch(OPTIONS, target, options, kwargs)

    def delete(
        self, target: Optional[str] = None, options: Optional[RequestOptions] = None, **kwargs: Any
    ) -> Any:
        """DELETE request."""
        return self._dispatch(DELETE, target, options, kwargs)

    def post(
        self,
        target: Optional[str] = None,
        body: Any = None,
        options: Optional[RequestOptions] = None,
        **kwargs: Any,
    ) -> Any:
        """POST request."""
        return self._dispatch_with_body(POST, target, body, options, kwargs)

    def put(
        self,
        target: Optional[str] = None,
        body: Any = None,
        options: Optional[RequestOptions] = None,
        **kwargs: Any,
    ) -> Any:
        """PUT request."""
        return self._dispatch_with_body(PUT, target, body, options, kwargs)

    def patch(
        self,
        target: Optional[str] = None,
        body: Any = None,
        options: Optional[RequestOptions] = None,
        **kwargs: Any,
    ) -> Any:
        """PATCH request."""
        return self._dispatch_with_body(PATCH, target, body, options, kwargs)

    def close(self) -> None:
        """Close an owned synchronous transport.

        Raises:
            TypeError: If the owned transport can only be closed asynchronously.
        """
        if not self._owns_transport or self._transport is None:
            return
        if hasattr(self._transport, "close"):
            self._transport.close()
        elif hasattr(self._transport, "aclose"):
            raise TypeError("use 'async with' / aclose() for async transports")

    async def aclose(self) -> None:
        """Close an owned transport. A transport passed in by the caller stays open."""
        if not self._owns_transport or self._transport is None:
            return
        if hasattr(self._transport, "aclose"):
            await self._transport.aclose()
        elif hasattr(self._transport, "close"):
            self._transport.close()

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"RestClient(base_url={self._base_url!r}, headers={self.get_header_names()!r})"
