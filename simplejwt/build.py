"""
Token builder.

Fluent accumulator of header and payload claims. Every setter validates its
input immediately and returns the same builder so calls chain:

    token = Build().set_secret(secret).set_expiration(exp).set_issuer("me").build()

Standard claims (iss, sub, aud, exp, nbf, iat, jti) are reserved and can only
be set through their setters; set_private_claim rejects them with
ReservedClaim. Payload order: standard claims as first set, then private
claims in insertion order.
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from . import encode, validate
from .config import Clock, TokenSettings, DEFAULT_SETTINGS, now_ts
from .errors import InvalidClaim, MissingSecret, ReservedClaim
from .jwt import Jwt

logger = logging.getLogger(__name__)

RESERVED_CLAIMS = frozenset({"iss", "sub", "aud", "exp", "nbf", "iat", "jti"})


class Header(BaseModel):
    """Fixed JOSE header; key order is typ then alg."""

    model_config = ConfigDict(frozen=True)

    typ: str = "JWT"
    alg: str = "HS256"


HEADER = Header()


def _non_empty(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidClaim(f"Claim '{name}' must be a non-empty string.")
    return value


def _timestamp(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidClaim(f"Claim '{name}' must be an integer UNIX timestamp.")
    return value


class Build:
    def __init__(self, settings: Optional[TokenSettings] = None, clock: Optional[Clock] = None):
        self._settings = settings or DEFAULT_SETTINGS
        self._clock = clock or now_ts
        self._secret: Optional[str] = None
        self._standard: Dict[str, Any] = {}
        self._private: Dict[str, Any] = {}

    def set_secret(self, secret: str) -> "Build":
        validate.validate_secret(secret, self._settings)
        self._secret = secret
        return self

    def set_expiration(self, timestamp: int) -> "Build":
        timestamp = _timestamp("exp", timestamp)
        validate.validate_not_past(timestamp, self._clock())
        self._standard["exp"] = timestamp
        return self

    def set_issuer(self, issuer: str) -> "Build":
        self._standard["iss"] = _non_empty("iss", issuer)
        return self

    def set_subject(self, subject: str) -> "Build":
        self._standard["sub"] = _non_empty("sub", subject)
        return self

    def set_audience(self, audience: Union[str, List[str]]) -> "Build":
        if isinstance(audience, list):
            if not audience:
                raise InvalidClaim("Claim 'aud' must not be an empty list.")
            self._standard["aud"] = [_non_empty("aud", a) for a in audience]
        else:
            self._standard["aud"] = _non_empty("aud", audience)
        return self

    def set_issued_at(self, timestamp: int) -> "Build":
        self._standard["iat"] = _timestamp("iat", timestamp)
        return self

    def set_not_before(self, timestamp: int) -> "Build":
        self._standard["nbf"] = _timestamp("nbf", timestamp)
        return self

    def set_jwt_id(self, jwt_id: str) -> "Build":
        self._standard["jti"] = _non_empty("jti", jwt_id)
        return self

    def set_private_claim(self, name: str, value: Any) -> "Build":
        name = _non_empty("name", name)
        if name in RESERVED_CLAIMS:
            raise ReservedClaim(name)
        try:
            stored = json.loads(json.dumps(value, allow_nan=False))
        except (TypeError, ValueError) as e:
            raise InvalidClaim(f"Claim '{name}' is not JSON serializable: {e}") from e
        # tuples, non-string keys and the like would come back changed
        if stored != value:
            raise InvalidClaim(f"Claim '{name}' does not survive a JSON round trip.")
        self._private[name] = stored
        return self

    def get_payload(self) -> Dict[str, Any]:
        """Merged standard and private claims, without building."""
        payload = copy.deepcopy(self._standard)
        payload.update(copy.deepcopy(self._private))
        return payload

    def get_header(self) -> Dict[str, str]:
        return HEADER.model_dump()

    def build(self) -> Jwt:
        """Serialize, sign and return a new token value. The builder stays usable."""
        if self._secret is None:
            raise MissingSecret()

        header_segment = encode.encode_json(self.get_header())
        payload = self.get_payload()
        payload_segment = encode.encode_json(payload)
        signature = encode.sign(encode.signing_input(header_segment, payload_segment), self._secret)

        logger.debug("Built token with claims: %s", ", ".join(payload) or "<none>")
        return Jwt.from_segments(header_segment, payload_segment, encode.encode_segment(signature), self._secret)
