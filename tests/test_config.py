"""
Unit tests for configuration loading.
"""

import pytest

from utils.config import DEFAULT_API_URL, load_settings, parse_timeout


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("FAQ_ADMIN_API_URL", "FAQ_ADMIN_TIMEOUT", "FAQ_ADMIN_LOG_LEVEL",
                 "FAQ_ADMIN_HOST", "FAQ_ADMIN_PORT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    
    assert settings.api_url == DEFAULT_API_URL
    assert settings.timeout is None
    assert settings.log_level == "INFO"
    assert settings.port == 7860


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FAQ_ADMIN_API_URL", "http://localhost:8787/")
    monkeypatch.setenv("FAQ_ADMIN_TIMEOUT", "2.5")
    monkeypatch.setenv("FAQ_ADMIN_LOG_LEVEL", "debug")
    monkeypatch.setenv("FAQ_ADMIN_PORT", "9000")
    
    settings = load_settings()
    
    assert settings.api_url == "http://localhost:8787"
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000


def test_invalid_url(monkeypatch):
    monkeypatch.setenv("FAQ_ADMIN_API_URL", "not-a-url")
    
    with pytest.raises(ValueError):
        load_settings()


@pytest.mark.parametrize("raw,expected", [
    ("", None),
    ("none", None),
    ("None", None),
    ("0", None),
    ("10", 10.0)
])
def test_parse_timeout(raw, expected):
    assert parse_timeout(raw) == expected


def test_negative_timeout():
    with pytest.raises(ValueError):
        parse_timeout("-1")
