"""
Error taxonomy for token building and validation.

All errors derive from ValueError so a caller that only guards against
ValueError keeps working.
"""


class TokenError(ValueError):
    """Base class for every error raised by simplejwt."""


# ============================
# Build side
# ============================

class BuildError(TokenError):
    """Raised by the builder at the call that violates an invariant."""


class WeakSecret(BuildError):
    def __init__(self, min_length: int = 12):
        super().__init__(
            f"Please set a valid secret. It must be at least {min_length} characters in length, "
            "contain lower and upper case letters, a number and one of the following characters *&!@%^#$."
        )


class MissingSecret(BuildError):
    def __init__(self):
        super().__init__("A secret must be set before the token can be built.")


class AlreadyExpired(BuildError):
    def __init__(self):
        super().__init__("The expiration timestamp you set has already expired.")


class ReservedClaim(BuildError):
    def __init__(self, name: str):
        super().__init__(f"Claim '{name}' is reserved, use its dedicated setter instead.")
        self.name = name


class InvalidClaim(BuildError):
    """Empty claim name, empty standard claim value, or a value JSON cannot carry."""


# ============================
# Validate side
# ============================

class ValidateError(TokenError):
    """Raised while validating or decoding an incoming token."""


class MalformedToken(ValidateError):
    pass


class InvalidSignature(ValidateError):
    def __init__(self):
        super().__init__("Token signature is invalid.")


class Expired(ValidateError):
    def __init__(self):
        super().__init__("Token has expired.")


class NotYetValid(ValidateError):
    def __init__(self):
        super().__init__("Token is not valid yet.")


class DecodeError(ValidateError):
    """A segment is not base64url, or its bytes are not the expected JSON."""


class ClaimTypeMismatch(DecodeError):
    def __init__(self, name: str, expected: str, value):
        super().__init__(f"Claim '{name}' is not {expected} (got {type(value).__name__}).")
        self.name = name
        self.expected = expected
