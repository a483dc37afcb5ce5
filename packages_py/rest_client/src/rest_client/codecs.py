"""
Request body codecs selected by content-type.

A codec only runs for structured bodies (mappings, lists, tuples). Strings,
bytes and absent bodies always reach the transport untouched.
"""
import json
import logging
from typing import Any, Dict, Mapping, Optional, Protocol, Union

logger = logging.getLogger("rest_client.codecs")

APPLICATION_JSON = "application/json"


class BodyCodec(Protocol):
    """Codec protocol for request body encoding."""

    def encode(self, body: Any) -> Union[str, bytes, Any]:
        """Encode a structured body."""
        ...


class PassthroughCodec:
    """Returns the body unchanged."""

    def encode(self, body: Any) -> Any:
        return body


class JsonBodyCodec:
    """Compact JSON encoder."""

    def __init__(self, ensure_ascii: bool = False):
        self._ensure_ascii = ensure_ascii

    def encode(self, body: Any) -> str:
        """Serialize body to a JSON string without insignificant whitespace."""
        return json.dumps(body, separators=(",", ":"), ensure_ascii=self._ensure_ascii)


PASSTHROUGH = PassthroughCodec()


def is_structured_body(body: Any) -> bool:
    """Check whether a body is a structured value eligible for encoding."""
    return isinstance(body, (Mapping, list, tuple))


class CodecRegistry:
    """Maps MIME types to body codecs.

    Lookups are exact on the content-type value; anything unregistered
    falls back to PASSTHROUGH.
    """

    def __init__(self, codecs: Optional[Dict[str, BodyCodec]] = None):
        self._codecs: Dict[str, BodyCodec] = {}
        for mime_type, codec in (codecs or {}).items():
            self.register(mime_type, codec)

    def register(self, mime_type: str, codec: BodyCodec) -> None:
        self._codecs[mime_type] = codec

    def unregister(self, mime_type: str) -> None:
        self._codecs.pop(mime_type, None)

    def get(self, mime_type: Optional[str]) -> BodyCodec:
        if mime_type is None:
            return PASSTHROUGH
        return self._codecs.get(mime_type, PASSTHROUGH)

    def mime_types(self) -> list[str]:
        return list(self._codecs)

    def copy(self) -> "CodecRegistry":
        return CodecRegistry(dict(self._codecs))

    def encode(self, body: Any, content_type: Optional[str]) -> Any:
        """Encode body with the codec registered for content_type."""
        if not is_structured_body(body):
            return body
        codec = self.get(content_type)
        if codec is PASSTHROUGH:
            return body
        logger.debug(f"encode: content_type={content_type}, codec={type(codec).__name__}")
        return codec.encode(body)


def default_codecs() -> CodecRegistry:
    """Create a registry with the built-in JSON codec."""
    return CodecRegistry({APPLICATION_JSON: JsonBodyCodec()})
