"""
Configuration for rest_client.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
import logging
import os

from .codecs import CodecRegistry, default_codecs
from .core.request_builder import is_absolute_url, strip_trailing_slashes
from .errors import InvalidBaseUrlError

logger = logging.getLogger("rest_client.config")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


@dataclass
class ClientConfig:
    """Client configuration."""

    base_url: str
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: Union[TimeoutConfig, float, None] = None
    normalize_request_headers: bool = True
    verbose: Optional[bool] = None
    codecs: Optional[CodecRegistry] = None


# Default values
DEFAULT_TIMEOUT = TimeoutConfig()


def is_verbose_enabled_by_env() -> bool:
    """Check REST_CLIENT_VERBOSE for a truthy value."""
    return os.environ.get("REST_CLIENT_VERBOSE", "").strip().lower() in _TRUTHY


def is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def validate_base_url(base_url: Any) -> None:
    """Raise InvalidBaseUrlError unless base_url is an absolute URL string."""
    if not isinstance(base_url, str) or not is_absolute_url(base_url):
        raise InvalidBaseUrlError(base_url)


def validate_config(config: ClientConfig) -> None:
    """Validate client configuration."""
    validate_base_url(config.base_url)

    for name, value in config.headers.items():
        if not isinstance(name, str):
            raise TypeError(f"Header names must be strings, got {name!r}")


@dataclass
class ResolvedConfig:
    """Resolved client configuration with defaults applied."""

    base_url: str
    headers: Dict[str, str]
    timeout: TimeoutConfig
    normalize_request_headers: bool
    verbose: bool
    codecs: CodecRegistry


def resolve_config(config: ClientConfig) -> ResolvedConfig:
    """Resolve client configuration with defaults."""
    validate_config(config)

    verbose = config.verbose if config.verbose is not None else is_verbose_enabled_by_env()
    codecs = config.codecs.copy() if config.codecs is not None else default_codecs()

    logger.debug(
        f"resolve_config: base_url={config.base_url}, verbose={verbose}, "
        f"normalize_request_headers={config.normalize_request_headers}, "
        f"codecs={codecs.mime_types()}"
    )

    return ResolvedConfig(
        base_url=strip_trailing_slashes(config.base_url),
        headers=dict(config.headers),
        timeout=normalize_timeout(config.timeout),
        normalize_request_headers=config.normalize_request_headers,
        verbose=verbose,
        codecs=codecs,
    )
