"""
Request builder utilities for rest_client.

Pure helpers used by RestClient.fetch: URL resolution, header merging and
body encoding. Nothing here performs I/O.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..codecs import CodecRegistry
from ..types import HttpMethod, RequestBody

logger = logging.getLogger("rest_client.request_builder")

ABSOLUTE_URL_PATTERN = re.compile(r"^[A-Za-z0-9]+://")
TRAILING_SLASHES_PATTERN = re.compile(r"/+$")

SENSITIVE_HEADERS = frozenset(
    {"authorization", "proxy-authorization", "x-api-key", "cookie"}
)

# Keys of the options dict consumed by the builder itself
RESERVED_OPTIONS = ("method", "headers", "body")


def is_absolute_url(value: Any) -> bool:
    """Check if value is a string starting with ``<scheme>://``."""
    return isinstance(value, str) and ABSOLUTE_URL_PATTERN.match(value) is not None


def strip_trailing_slashes(url: str) -> str:
    return TRAILING_SLASHES_PATTERN.sub("", url)


def resolve_url(base_url: str, target: Any = None) -> str:
    """Resolve the request URL.

    Absolute targets are used unchanged. String targets are appended to
    base_url verbatim, so callers must supply the leading slash. Anything
    else resolves to base_url itself.
    """
    if is_absolute_url(target):
        return target
    if isinstance(target, str):
        return f"{base_url}{target}"
    return base_url


def normalize_header_names(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Lowercase header names; later case variants win."""
    result: Dict[str, str] = {}
    if headers:
        for name, value in headers.items():
            result[name.lower()] = value
    return result


def merge_headers(
    defaults: Mapping[str, str],
    headers: Optional[Mapping[str, str]] = None,
    normalize: bool = True,
) -> Dict[str, str]:
    """Overlay per-call headers on the defaults.

    With normalize=False the per-call keys are kept as supplied, so a key
    differing only by case from a default produces two entries.
    """
    result = dict(defaults)
    if headers:
        result.update(normalize_header_names(headers) if normalize else headers)
    return result


def get_content_type(headers: Mapping[str, str]) -> Optional[str]:
    return headers.get("content-type")


def encode_body(
    body: RequestBody,
    headers: Mapping[str, str],
    codecs: CodecRegistry,
) -> RequestBody:
    """Encode a structured body using the codec for the merged content-type."""
    return codecs.encode(body, get_content_type(headers))


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Mask credential headers for safe logging."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = mask_value(masked[key])
    return masked


def mask_value(value: Optional[str], show_chars: int = 4) -> str:
    if not value:
        return "<none>"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "***"


@dataclass
class RequestDescriptor:
    """Final request handed to the transport. Created per call."""

    url: str
    method: Optional[HttpMethod] = None
    headers: Dict[str, str] = field(default_factory=dict)
    body: RequestBody = None
    has_body: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_options(self) -> Dict[str, Any]:
        """Build the options dict passed to the transport."""
        options = dict(self.extra)
        if self.method is not None:
            options["method"] = self.method
        options["headers"] = self.headers
        if self.has_body:
            options["body"] = self.body
        return options


def build_request(
    base_url: str,
    target: Any,
    options: Optional[Mapping[str, Any]],
    default_headers: Mapping[str, str],
    codecs: CodecRegistry,
    normalize: bool = True,
) -> RequestDescriptor:
    """Resolve URL, merge headers and encode the body for one call."""
    options = dict(options or {})
    url = resolve_url(base_url, target)
    headers = merge_headers(default_headers, options.get("headers"), normalize)

    has_body = "body" in options
    body = options.get("body")
    if has_body:
        body = encode_body(body, headers, codecs)

    extra = {k: v for k, v in options.items() if k not in RESERVED_OPTIONS}

    logger.debug(
        f"build_request: method={options.get('method')}, target={target!r}, url={url}"
    )
    logger.debug(f"build_request: headers={mask_headers(headers)}")

    return RequestDescriptor(
        url=url,
        method=options.get("method"),
        headers=headers,
        body=body,
        has_body=has_body,
        extra=extra,
    )
