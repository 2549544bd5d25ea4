import json
import time
from datetime import datetime

import pytest
from pydantic import ValidationError

from simplejwt import config
from simplejwt.config import TokenSettings, load_settings, now_ts, parse_expires_at


def test_default_settings():
    s = TokenSettings()
    assert s.min_secret_length == 12


def test_settings_validation():
    with pytest.raises(ValidationError):
        TokenSettings(min_secret_length=0)
    with pytest.raises(ValidationError):
        TokenSettings(min_secret_length=11)
    assert TokenSettings(min_secret_length=13).min_secret_length == 13


def test_special_chars_are_not_configurable():
    with pytest.raises(ValidationError):
        TokenSettings(secret_special_chars="a")


def test_load_settings_partial_file(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"min_secret_length": 16}), encoding="utf-8")
    s = load_settings(str(p))
    assert s.min_secret_length == 16


def test_load_settings_rejects_weaker_policy(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"min_secret_length": 8}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(str(p))


def test_load_settings_missing_file(tmp_path, caplog):
    with caplog.at_level("WARNING", logger="simplejwt.config"):
        s = load_settings(str(tmp_path / "nope.json"))
    assert s == TokenSettings()
    assert "not found" in caplog.text


def test_load_settings_rejects_non_object(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(p))


def test_now_ts(monkeypatch):
    monkeypatch.setattr(config._time, "time", lambda: 1234.9)
    assert now_ts() == 1234


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2099-12-31T23:59:59Z", 4102444799),
        ("2099-12-31T23:59:59z", 4102444799),
        ("2100-01-01T08:59:59+09:00", 4102444799),
    ],
)
def test_parse_expires_at_aware(value, expected):
    assert parse_expires_at(value) == expected


def test_parse_expires_at_naive_is_local():
    naive = "2099-12-31T23:59:59"
    assert parse_expires_at(naive) == int(time.mktime(datetime(2099, 12, 31, 23, 59, 59).timetuple()))


@pytest.mark.parametrize("value", ["", "   ", "tomorrow", None, 123])
def test_parse_expires_at_invalid(value):
    assert parse_expires_at(value) is None
