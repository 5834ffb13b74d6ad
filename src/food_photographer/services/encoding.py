"""Data URI helpers for carrying images in memory."""

import base64
import binascii

from food_photographer.domain.errors import MalformedPayloadError

_SCHEME = "data:"
_BASE64_MARKER = ";base64"


def encode_to_data_uri(payload: bytes, media_type: str) -> str:
    """Convert bytes to a base64 data URI."""
    encoded = base64.b64encode(payload).decode("utf-8")
    return f"{_SCHEME}{media_type}{_BASE64_MARKER},{encoded}"


def decode_from_data_uri(uri: str) -> tuple[bytes, str]:
    """Split a base64 data URI into its bytes and media type."""
    header, separator, body = uri.partition(",")
    if not separator or not header.startswith(_SCHEME):
        raise MalformedPayloadError("Expected a data URI with a header and body")
    if not header.endswith(_BASE64_MARKER):
        raise MalformedPayloadError("Data URI is not base64 encoded")
    media_type = header[len(_SCHEME) : -len(_BASE64_MARKER)]
    if not media_type:
        raise MalformedPayloadError("Data URI has no media type")
    try:
        payload = base64.b64decode(body, validate=True)
    except binascii.Error as exc:
        raise MalformedPayloadError(f"Invalid base64 body: {exc}") from exc
    return payload, media_type


def detect_media_type(payload: bytes, default: str = "image/jpeg") -> str:
    """Infer a basic image MIME type from file signatures."""
    if payload.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if payload.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if payload[:4] == b"RIFF" and payload[8:12] == b"WEBP":
        return "image/webp"
    return default
