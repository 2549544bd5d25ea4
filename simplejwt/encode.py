"""
Base64url segment codec and HS256 signing.
Base64url without padding on output; padded or unpadded accepted on input.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import re
from typing import Any, Dict

from .errors import DecodeError

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def encode_segment(data: bytes) -> str:
    """Base64url encode without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode_segment(data: str) -> bytes:
    """Base64url decode with automatic padding restoration."""
    if not isinstance(data, str) or not _SEGMENT_RE.fullmatch(data):
        raise DecodeError("Segment contains characters outside the base64url alphabet")
    s = data.rstrip("=").encode("ascii")
    padding = b"=" * (-len(s) % 4)
    try:
        return base64.urlsafe_b64decode(s + padding)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Segment is not valid base64url: {e}") from e


def encode_json(obj: Dict[str, Any]) -> str:
    """Serialize a mapping to compact JSON and encode it as a segment."""
    return encode_segment(json.dumps(obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8"))


def decode_json(segment: str) -> Dict[str, Any]:
    """Decode a segment holding a JSON object."""
    raw = decode_segment(segment)
    try:
        obj = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Segment is not valid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise DecodeError("Segment does not hold a JSON object")
    return obj


def signing_input(header_segment: str, payload_segment: str) -> bytes:
    return f"{header_segment}.{payload_segment}".encode("utf-8")


def sign(message: bytes, secret: str) -> bytes:
    """HMAC-SHA256 of message keyed with the UTF-8 bytes of secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def verify(message: bytes, signature: bytes, secret: str) -> bool:
    """Recompute the signature and compare in constant time."""
    return hmac.compare_digest(sign(message, secret), signature)
