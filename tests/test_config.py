"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from config import Config, load_config


def test_defaults(monkeypatch):
    """Defaults give 6-character hex codes and a listing limit of 10."""
    for var in ("SHORT_CODE_LENGTH", "SHORT_CODE_ALPHABET", "RECENT_LIST_LIMIT", "PORT"):
        monkeypatch.delenv(var, raising=False)

    config = Config(_env_file=None)

    assert config.short_code_length == 6
    assert config.short_code_alphabet == "hex"
    assert config.recent_list_limit == 10
    assert config.max_collision_retries == 1000
    assert config.port == 5000


def test_environment_overrides(monkeypatch):
    """Settings are read case-insensitively from the environment."""
    monkeypatch.setenv("SHORT_CODE_LENGTH", "8")
    monkeypatch.setenv("short_code_alphabet", "base62")
    monkeypatch.setenv("BASE_URL", "https://sho.rt")

    config = load_config()

    assert config.short_code_length == 8
    assert config.short_code_alphabet == "base62"
    assert config.base_url == "https://sho.rt"


@pytest.mark.parametrize("field, value", [
    ("short_code_alphabet", "base64"),
    ("short_code_length", 2),
    ("max_collision_retries", 0),
    ("workers", 0),
])
def test_invalid_values(field, value):
    """Out-of-range settings are rejected."""
    with pytest.raises(ValidationError):
        Config(_env_file=None, **{field: value})
