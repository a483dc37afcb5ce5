"""
Core modules for rest_client.
"""
from .request_builder import (
    RequestDescriptor,
    build_request,
    encode_body,
    is_absolute_url,
    merge_headers,
    normalize_header_names,
    resolve_url,
    strip_trailing_slashes,
)

__all__ = [
    "RequestDescriptor",
    "build_request",
    "encode_body",
    "is_absolute_url",
    "merge_headers",
    "normalize_header_names",
    "resolve_url",
    "strip_trailing_slashes",
]
