"""
Type definitions for rest_client.
"""
from typing import (
    Any,
    Awaitable,
    Dict,
    Literal,
    Mapping,
    Protocol,
    TypedDict,
    Union,
)


# HTTP methods
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

DELETE: HttpMethod = "DELETE"
GET: HttpMethod = "GET"
HEAD: HttpMethod = "HEAD"
OPTIONS: HttpMethod = "OPTIONS"
PATCH: HttpMethod = "PATCH"
POST: HttpMethod = "POST"
PUT: HttpMethod = "PUT"

# Request body as handed to the transport
RequestBody = Union[str, bytes, Any, None]


class RequestOptions(TypedDict, total=False):
    """Per-call request options.

    Only ``method``, ``headers`` and ``body`` are interpreted by the client.
    Any other key is forwarded untouched to the transport.
    """

    method: HttpMethod
    headers: Dict[str, str]
    body: RequestBody
    timeout: float
    params: Dict[str, Any]
    follow_redirects: bool


class Response(Protocol):
    """Minimal response abstraction returned by a transport."""

    status: int
    headers: Mapping[str, str]

    def text(self) -> Any:
        """Decode the body as text (may be awaitable)."""
        ...

    def json(self) -> Any:
        """Decode the body as JSON (may be awaitable)."""
        ...


class Transport(Protocol):
    """Fetch-compatible callable performing the actual I/O."""

    def __call__(
        self, url: str, options: Dict[str, Any]
    ) -> Union[Awaitable[Any], Any]:
        ...
