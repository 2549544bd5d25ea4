"""
Token parser.

Three stages over a Jwt, chainable:

    parsed = Parse(jwt).validate().validate_expiration().parse()

validate() checks structure, signature and header. validate_expiration() and
validate_not_before() check the time claims. parse() decodes the payload.

parse() does not verify anything by itself: called without validate() it
returns whatever the payload segment says, forged or not.

"now" is taken from the explicit argument when given, otherwise the clock is
sampled once per Parse instance and reused.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from . import encode, validate
from .build import HEADER
from .config import Clock, now_ts
from .errors import ClaimTypeMismatch, MalformedToken, ValidateError
from .jwt import Jwt

logger = logging.getLogger(__name__)


class Parsed:
    """Decoded claims of a token, with mapping, attribute and typed access."""

    def __init__(self, jwt: Jwt, header: Dict[str, Any], payload: Dict[str, Any], signature: str):
        self._jwt = jwt
        self._header = header
        self._payload = payload
        self._signature = signature

    def get_jwt(self) -> Jwt:
        return self._jwt

    def get_header(self) -> Dict[str, Any]:
        return dict(self._header)

    def get_payload(self) -> Dict[str, Any]:
        return dict(self._payload)

    def get_signature(self) -> str:
        return self._signature

    # mapping / attribute access

    def __getitem__(self, name: str) -> Any:
        return self._payload[name]

    def __contains__(self, name: object) -> bool:
        return name in self._payload

    def __iter__(self) -> Iterator[str]:
        return iter(self._payload)

    def __len__(self) -> int:
        return len(self._payload)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._payload[name]
        except KeyError:
            raise AttributeError(f"Token has no claim '{name}'") from None

    def get(self, name: str, default: Any = None) -> Any:
        return self._payload.get(name, default)

    # standard claims; exp, iat and nbf may be any JSON number

    def get_issuer(self) -> Optional[str]:
        return self._optional("iss", self.get_str)

    def get_subject(self) -> Optional[str]:
        return self._optional("sub", self.get_str)

    def get_audience(self):
        return self._payload.get("aud")

    def get_expiration(self) -> Optional[float]:
        return self._optional("exp", self.get_number)

    def get_issued_at(self) -> Optional[float]:
        return self._optional("iat", self.get_number)

    def get_not_before(self) -> Optional[float]:
        return self._optional("nbf", self.get_number)

    def get_jwt_id(self) -> Optional[str]:
        return self._optional("jti", self.get_str)

    def _optional(self, name, getter):
        if name not in self._payload:
            return None
        return getter(name)

    # typed accessors, no coercion

    def _typed(self, name: str, types: tuple, expected: str) -> Any:
        value = self._payload[name]
        if isinstance(value, bool) and bool not in types:
            raise ClaimTypeMismatch(name, expected, value)
        if not isinstance(value, types):
            raise ClaimTypeMismatch(name, expected, value)
        return value

    def get_str(self, name: str) -> str:
        return self._typed(name, (str,), "a string")

    def get_int(self, name: str) -> int:
        return self._typed(name, (int,), "an integer")

    def get_number(self, name: str) -> float:
        return self._typed(name, (int, float), "a number")

    def get_bool(self, name: str) -> bool:
        return self._typed(name, (bool,), "a boolean")

    def get_mapping(self, name: str) -> Dict[str, Any]:
        return self._typed(name, (dict,), "an object")

    def get_list(self, name: str) -> List[Any]:
        return self._typed(name, (list,), "an array")

    def __repr__(self) -> str:
        return f"Parsed(claims={sorted(self._payload)})"


class Parse:
    def __init__(self, jwt: Jwt, clock: Optional[Clock] = None):
        self._jwt = jwt
        self._clock = clock or now_ts
        self._now: Optional[int] = None

    def _current_time(self, now: Optional[int]) -> int:
        if now is not None:
            return now
        if self._now is None:
            self._now = self._clock()
        return self._now

    def _segments(self) -> Tuple[str, str, str]:
        try:
            return validate.validate_structure(self._jwt.get_token())
        except MalformedToken:
            logger.debug("Token rejected at stage: structure")
            raise

    def validate(self) -> "Parse":
        """Check structure, signature and header. Safe to call repeatedly."""
        header_segment, payload_segment, signature_segment = self._segments()
        try:
            validate.validate_signature(header_segment, payload_segment, signature_segment, self._jwt.get_secret())
        except ValidateError:
            logger.debug("Token rejected at stage: signature")
            raise
        header = self.get_header()
        if header.get("typ") != HEADER.typ or header.get("alg") != HEADER.alg:
            logger.debug("Token rejected at stage: header")
            raise MalformedToken("Unsupported token header.")
        return self

    def validate_expiration(self, now: Optional[int] = None) -> "Parse":
        try:
            validate.validate_expiration(self._payload(), self._current_time(now))
        except ValidateError:
            logger.debug("Token rejected at stage: expiration")
            raise
        return self

    def validate_not_before(self, now: Optional[int] = None) -> "Parse":
        try:
            validate.validate_not_before(self._payload(), self._current_time(now))
        except ValidateError:
            logger.debug("Token rejected at stage: not_before")
            raise
        return self

    def get_header(self) -> Dict[str, Any]:
        header_segment, _, _ = self._segments()
        return self._decode(header_segment)

    def _payload(self) -> Dict[str, Any]:
        _, payload_segment, _ = self._segments()
        return self._decode(payload_segment)

    def _decode(self, segment: str) -> Dict[str, Any]:
        try:
            return encode.decode_json(segment)
        except ValidateError:
            logger.debug("Token rejected at stage: decode")
            raise

    def parse(self) -> Parsed:
        _, _, signature_segment = self._segments()
        return Parsed(self._jwt, self.get_header(), self._payload(), signature_segment)
