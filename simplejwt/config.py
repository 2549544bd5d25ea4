"""
Settings and clock helpers.

- TokenSettings holds the secret strength policy; it can raise the minimum secret
  length but never lower it below the built-in policy.
- load_settings reads a JSON file; missing file -> defaults + WARNING.
- now_ts is the only place the system clock is read. Everything else takes an
  injected clock or an explicit `now`.
- parse_expires_at accepts ISO-8601 with 'Z' or an offset; naive values are local time.
"""

from __future__ import annotations

import json
import logging
import os
import time as _time
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

MIN_SECRET_LENGTH = 12
SECRET_SPECIAL_CHARS = "*&!@%^#$"

Clock = Callable[[], int]


class TokenSettings(BaseModel):
    """Secret strength policy applied when a token is built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # the policy can only be tightened; the special character set is fixed
    min_secret_length: int = Field(MIN_SECRET_LENGTH, ge=MIN_SECRET_LENGTH, description="Minimum secret length")


DEFAULT_SETTINGS = TokenSettings()


def load_settings(path: str) -> TokenSettings:
    """Load TokenSettings from a JSON file, filling absent keys with defaults."""
    if not path or not os.path.isfile(path):
        logger.warning("Settings file %s not found; using default secret policy", path)
        return DEFAULT_SETTINGS
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")
    settings = TokenSettings(**data)
    logger.debug(
        "Loaded settings from %s: min_secret_length=%d", path, settings.min_secret_length
    )
    return settings


def now_ts() -> int:
    """Return current UNIX timestamp (seconds)."""
    return int(_time.time())


def parse_expires_at(expires_at: str) -> Optional[int]:
    """
    Parse an ISO-8601 datetime string into epoch seconds.
    Returns None when the string cannot be parsed.
    """
    if not isinstance(expires_at, str) or not expires_at.strip():
        return None
    s = expires_at.strip()

    # fromisoformat does not take a trailing 'Z' on older interpreters
    if s.lower().endswith("z"):
        s = s[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None

    if dt.tzinfo is None:
        return int(_time.mktime(dt.timetuple()))
    return int(dt.timestamp())
