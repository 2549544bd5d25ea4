"""
Stateless validation checks. Each check returns normally on success and
raises a distinct error kind on failure.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from . import encode
from .config import DEFAULT_SETTINGS, SECRET_SPECIAL_CHARS, TokenSettings
from .errors import (
    AlreadyExpired,
    ClaimTypeMismatch,
    DecodeError,
    Expired,
    InvalidSignature,
    MalformedToken,
    NotYetValid,
    WeakSecret,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _secret_pattern(min_length: int) -> "re.Pattern[str]":
    special = re.escape(SECRET_SPECIAL_CHARS)
    return re.compile(
        rf"(?=.{{{min_length},}})(?=.*[0-9])(?=.*[A-Z])(?=.*[a-z])(?=.*[{special}]).*",
        re.DOTALL,
    )


def validate_secret(secret: str, settings: Optional[TokenSettings] = None) -> None:
    """Length >= min_secret_length with lower, upper, digit and one special character."""
    settings = settings or DEFAULT_SETTINGS
    pattern = _secret_pattern(settings.min_secret_length)
    if not isinstance(secret, str) or not pattern.fullmatch(secret):
        raise WeakSecret(settings.min_secret_length)


def validate_not_past(timestamp: int, now: int) -> None:
    if timestamp < now:
        raise AlreadyExpired()


def _numeric_claim(claims: Dict[str, Any], name: str):
    value = claims.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ClaimTypeMismatch(name, "a number", value)
    return value


def validate_expiration(claims: Dict[str, Any], now: int) -> None:
    """A token without exp never expires; exp == now has not elapsed yet."""
    exp = _numeric_claim(claims, "exp")
    if exp is not None and exp < now:
        raise Expired()


def validate_not_before(claims: Dict[str, Any], now: int) -> None:
    nbf = _numeric_claim(claims, "nbf")
    if nbf is not None and nbf > now:
        raise NotYetValid()


def validate_structure(token: str) -> Tuple[str, str, str]:
    """Split the raw token into exactly three non-empty segments."""
    if not isinstance(token, str):
        raise MalformedToken("Token must be a string.")
    parts = token.split(".")
    if len(parts) != 3 or not all(parts):
        raise MalformedToken("Token must consist of three non-empty dot separated segments.")
    header_segment, payload_segment, signature_segment = parts
    return header_segment, payload_segment, signature_segment


def validate_signature(
    header_segment: str, payload_segment: str, signature_segment: str, secret: str
) -> None:
    try:
        signature = encode.decode_segment(signature_segment)
    except DecodeError as e:
        logger.debug("Signature segment could not be decoded: %s", e)
        raise InvalidSignature() from e
    message = encode.signing_input(header_segment, payload_segment)
    if not encode.verify(message, signature, secret):
        raise InvalidSignature()
