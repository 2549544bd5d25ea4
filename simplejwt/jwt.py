"""
Token value: the raw token string plus the secret used to sign or verify it.
Immutable. Holding a Jwt says nothing about whether its signature is valid.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Jwt(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str = Field(..., description="Compact serialization '<header>.<payload>.<signature>'")
    secret: str = Field(..., repr=False, description="HMAC key")

    def __init__(self, token: str, secret: str, **data):
        super().__init__(token=token, secret=secret, **data)

    @classmethod
    def from_segments(cls, header: str, payload: str, signature: str, secret: str) -> "Jwt":
        """Create a token value from the three segments produced by the builder."""
        return cls(f"{header}.{payload}.{signature}", secret)

    def get_token(self) -> str:
        return self.token

    def get_secret(self) -> str:
        return self.secret
