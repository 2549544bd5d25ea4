import os
import sys
import pytest

# 确保项目根目录在 sys.path 中
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from simplejwt.logging_config import get_colorful_logger

SECRET = "Hello123$$Abc!!4538"
NOW = 1_700_000_000


@pytest.fixture(scope="session")
def logger():
    """Test-level logger with rich output"""
    return get_colorful_logger("tests")


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock(now):
    """Clock frozen at `now`"""
    return lambda: now


@pytest.fixture
def make_builder(clock):
    """
    Factory for builders on the frozen clock.
    Usage:
        make_builder().set_secret(SECRET).build()
    """
    from simplejwt import Build

    def _mk(**kwargs):
        kwargs.setdefault("clock", clock)
        return Build(**kwargs)
    return _mk


@pytest.fixture
def built_jwt(make_builder, secret, now):
    """A signed token with exp = now + 300, iss and one private claim"""
    return (
        make_builder()
        .set_secret(secret)
        .set_expiration(now + 300)
        .set_issuer("issuer.example")
        .set_private_claim("user_id", 42)
        .build()
    )
