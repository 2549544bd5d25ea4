import pytest
from pydantic import ValidationError

from simplejwt import Build, encode, validate
from simplejwt.config import TokenSettings
from simplejwt.errors import (
    AlreadyExpired,
    ClaimTypeMismatch,
    Expired,
    InvalidSignature,
    MalformedToken,
    NotYetValid,
    WeakSecret,
)


@pytest.mark.parametrize("secret", ["Hello123$$Abc!!4538", "helLLO123$!456ht", "!123$!456htHeLOOl!", "aB3*aaaaaaaa"])
def test_validate_secret_accepts_strong(secret):
    validate.validate_secret(secret)


@pytest.mark.parametrize(
    "secret",
    [
        "Hello",            # too short
        "aB3*aaaaaaa",      # 11 chars
        "ab3*aaaaaaaaa",    # no upper
        "AB3*AAAAAAAAA",    # no lower
        "aBc*aaaaaaaaa",    # no digit
        "aB3aaaaaaaaaa",    # no special
        "aB3?aaaaaaaaa",    # special outside the set
        "",
    ],
)
def test_validate_secret_rejects_weak(secret):
    with pytest.raises(WeakSecret) as exc:
        validate.validate_secret(secret)
    assert "*&!@%^#$" in str(exc.value)


def test_validate_secret_tightened_policy():
    settings = TokenSettings(min_secret_length=20)
    with pytest.raises(WeakSecret, match="at least 20 characters"):
        validate.validate_secret("Hello123$$Abc!!4538", settings)
    validate.validate_secret("Hello123$$Abc!!45381", settings)


def test_build_policy_cannot_go_below_builtin():
    with pytest.raises(ValidationError):
        Build(settings=TokenSettings(min_secret_length=1)).set_secret("aA1*")
    with pytest.raises(WeakSecret):
        Build(settings=TokenSettings(min_secret_length=12)).set_secret("aA1")


def test_validate_not_past(now):
    validate.validate_not_past(now, now)
    validate.validate_not_past(now + 1, now)
    with pytest.raises(AlreadyExpired):
        validate.validate_not_past(now - 1, now)


def test_validate_expiration_boundary(now):
    validate.validate_expiration({"exp": now}, now)
    with pytest.raises(Expired):
        validate.validate_expiration({"exp": now}, now + 1)


def test_validate_expiration_without_exp_never_expires(now):
    validate.validate_expiration({"user_id": 1}, now + 10**9)


@pytest.mark.parametrize("exp", ["soon", True, [1]])
def test_validate_expiration_rejects_non_numeric(exp, now):
    with pytest.raises(ClaimTypeMismatch):
        validate.validate_expiration({"exp": exp}, now)


def test_validate_not_before(now):
    validate.validate_not_before({}, now)
    validate.validate_not_before({"nbf": now}, now)
    with pytest.raises(NotYetValid):
        validate.validate_not_before({"nbf": now + 1}, now)


@pytest.mark.parametrize("token", ["not.a.jwt.token", "a.b", "a..c", ".b.c", "a.b.", "", "abc", 123])
def test_validate_structure_rejects(token):
    with pytest.raises(MalformedToken):
        validate.validate_structure(token)


def test_validate_structure_splits():
    assert validate.validate_structure("a.b.c") == ("a", "b", "c")


def test_validate_signature():
    sig = encode.encode_segment(encode.sign(b"h.p", "key"))
    validate.validate_signature("h", "p", sig, "key")
    with pytest.raises(InvalidSignature):
        validate.validate_signature("h", "q", sig, "key")
    with pytest.raises(InvalidSignature):
        validate.validate_signature("h", "p", sig, "other")
    with pytest.raises(InvalidSignature):
        validate.validate_signature("h", "p", "!!!", "key")
