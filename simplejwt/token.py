"""
Facade: issue a token carrying a user id, check a token, read its payload.

For anything beyond these use builder() / validator() directly.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Union

from .build import Build
from .config import Clock, TokenSettings, parse_expires_at
from .errors import InvalidClaim, ValidateError
from .jwt import Jwt
from .parse import Parse

logger = logging.getLogger(__name__)

Expiration = Union[int, str, datetime]


def _to_timestamp(expiration: Expiration) -> int:
    if isinstance(expiration, datetime):
        return int(expiration.timestamp())
    if isinstance(expiration, str):
        ts = parse_expires_at(expiration)
        if ts is None:
            raise InvalidClaim(f"Cannot parse expiration '{expiration}'.")
        return ts
    return expiration


def builder(settings: Optional[TokenSettings] = None, clock: Optional[Clock] = None) -> Build:
    return Build(settings=settings, clock=clock)


def validator(token: str, secret: str, clock: Optional[Clock] = None) -> Parse:
    return Parse(Jwt(token, secret), clock=clock)


def issue(
    subject_id: Any,
    secret: str,
    expiration: Expiration,
    issuer: str,
    clock: Optional[Clock] = None,
) -> str:
    """Create a token holding the private claim user_id = subject_id."""
    return (
        builder(clock=clock)
        .set_private_claim("user_id", subject_id)
        .set_secret(secret)
        .set_expiration(_to_timestamp(expiration))
        .set_issuer(issuer)
        .build()
        .get_token()
    )


def is_valid(token: str, secret: str, now: Optional[int] = None, clock: Optional[Clock] = None) -> bool:
    """Signature, expiration and not-before check collapsed to a boolean."""
    parse = validator(token, secret, clock=clock)
    try:
        parse.validate().validate_expiration(now).validate_not_before(now)
    except ValidateError as e:
        logger.debug("Token is not valid: %s", type(e).__name__)
        return False
    return True


def read_payload(token: str, secret: str) -> Dict[str, Any]:
    """
    Verify the signature and return the claims.
    Expiration is NOT checked here; call is_valid or
    validator(...).validate_expiration() for that.
    """
    return validator(token, secret).validate().parse().get_payload()
