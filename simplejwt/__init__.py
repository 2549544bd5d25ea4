"""
simplejwt: compact HS256 JSON Web Tokens.
Builder/Parse for full control, issue/is_valid/read_payload for the common case.
"""
from .build import Build, Header
from .config import TokenSettings, load_settings
from .errors import (
    AlreadyExpired,
    BuildError,
    ClaimTypeMismatch,
    DecodeError,
    Expired,
    InvalidClaim,
    InvalidSignature,
    MalformedToken,
    MissingSecret,
    NotYetValid,
    ReservedClaim,
    TokenError,
    ValidateError,
    WeakSecret,
)
from .jwt import Jwt
from .parse import Parse, Parsed
from .token import builder, is_valid, issue, read_payload, validator

__all__ = [
    "Build",
    "Header",
    "Jwt",
    "Parse",
    "Parsed",
    "TokenSettings",
    "load_settings",
    "builder",
    "validator",
    "issue",
    "is_valid",
    "read_payload",
    "TokenError",
    "BuildError",
    "ValidateError",
    "WeakSecret",
    "MissingSecret",
    "AlreadyExpired",
    "ReservedClaim",
    "InvalidClaim",
    "MalformedToken",
    "InvalidSignature",
    "Expired",
    "NotYetValid",
    "DecodeError",
    "ClaimTypeMismatch",
]
