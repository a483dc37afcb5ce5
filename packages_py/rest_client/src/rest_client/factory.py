"""
Factory functions for creating REST clients.

The factories pick an httpx transport matching the supplied httpx client and
hand ownership of that transport to the returned RestClient. An httpx client
passed in by the caller is never closed by the transport.
"""
from typing import Dict, Optional, Union

import httpx

from .codecs import CodecRegistry
from .config import ClientConfig, TimeoutConfig, is_verbose_enabled_by_env, validate_config
from .core.rest_client import RestClient
from .transport import AsyncHttpxTransport, SyncHttpxTransport


def _build_config(
    base_url: str,
    timeout: Optional[Union[float, TimeoutConfig]],
    default_headers: Optional[Dict[str, str]],
    normalize_request_headers: bool,
    verbose: Optional[bool],
    codecs: Optional[CodecRegistry],
) -> ClientConfig:
    config = ClientConfig(
        base_url=base_url,
        headers=default_headers or {},
        timeout=timeout,
        normalize_request_headers=normalize_request_headers,
        verbose=verbose if verbose is not None else is_verbose_enabled_by_env(),
        codecs=codecs,
    )
    validate_config(config)
    return config


def create_client(
    base_url: str,
    httpx_client: Optional[Union[httpx.AsyncClient, httpx.Client]] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    default_headers: Optional[Dict[str, str]] = None,
    normalize_request_headers: bool = True,
    verbose: Optional[bool] = None,
    codecs: Optional[CodecRegistry] = None,
) -> RestClient:
    """
    Create a REST client with an httpx transport.

    Args:
        base_url: Absolute base URL for relative request paths.
        httpx_client: Pre-configured httpx client (AsyncClient or Client).
        timeout: Request timeout (seconds or TimeoutConfig), used when no
            httpx_client is supplied.
        default_headers: Default headers for all requests.
        normalize_request_headers: Lowercase per-call header names before merging.
        verbose: Print requests and responses to the console.
        codecs: Body codecs keyed by content-type.

    Returns:
        RestClient whose calls return awaitables for an AsyncClient (or no
        client) and responses directly for a Client.

    Example:
        client = create_client(
            base_url="https://api.example.com",
            default_headers={"Accept": "application/json"},
        )
        async with client:
            response = await client.get("/users/1")

        with create_client("https://api.example.com", httpx.Client()) as client:
            response = client.get("/users/1")
    """
    if isinstance(httpx_client, httpx.Client):
        return create_sync_client(
            base_url,
            httpx_client=httpx_client,
            timeout=timeout,
            default_headers=default_headers,
            normalize_request_headers=normalize_request_headers,
            verbose=verbose,
            codecs=codecs,
        )
    return create_async_client(
        base_url,
        httpx_client=httpx_client,
        timeout=timeout,
        default_headers=default_headers,
        normalize_request_headers=normalize_request_headers,
        verbose=verbose,
        codecs=codecs,
    )


def create_async_client(
    base_url: str,
    httpx_client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    default_headers: Optional[Dict[str, str]] = None,
    normalize_request_headers: bool = True,
    verbose: Optional[bool] = None,
    codecs: Optional[CodecRegistry] = None,
) -> RestClient:
    """
    Create a REST client backed by AsyncHttpxTransport.

    Returns:
        RestClient instance; calls return awaitables.
    """
    config = _build_config(
        base_url, timeout, default_headers, normalize_request_headers, verbose, codecs
    )
    transport = AsyncHttpxTransport(
        httpx_client=httpx_client, timeout=timeout, verbose=bool(config.verbose)
    )
    return RestClient.from_config(config, transport=transport, owns_transport=True)


def create_sync_client(
    base_url: str,
    httpx_client: Optional[httpx.Client] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    default_headers: Optional[Dict[str, str]] = None,
    normalize_request_headers: bool = True,
    verbose: Optional[bool] = None,
    codecs: Optional[CodecRegistry] = None,
) -> RestClient:
    """
    Create a REST client backed by SyncHttpxTransport.

    Returns:
        RestClient instance; calls return responses directly.
    """
    config = _build_config(
        base_url, timeout, default_headers, normalize_request_headers, verbose, codecs
    )
    transport = SyncHttpxTransport(
        httpx_client=httpx_client, timeout=timeout, verbose=bool(config.verbose)
    )
    return RestClient.from_config(config, transport=transport, owns_transport=True)
