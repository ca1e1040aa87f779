"""Unit tests for environment-driven client settings."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from bnet.core.config import BUNGIE_BASE_URL
from bnet.core.config import DEFAULT_HTTP_TIMEOUT_SECONDS
from bnet.core.config import DEFAULT_USER_AGENT
from bnet.core.config import get_bungie_settings
from bnet.core.config import redact_secret


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_bungie_settings.cache_clear()
    yield
    get_bungie_settings.cache_clear()


def test_defaults_point_at_production_host(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BNET_API_BASE_URL", "BNET_API_KEY", "BNET_HTTP_TIMEOUT_SECONDS", "BNET_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_bungie_settings()

    assert settings.api_base_url == BUNGIE_BASE_URL == "https://www.bungie.net"
    assert settings.api_key == ""
    assert settings.http_timeout_seconds == DEFAULT_HTTP_TIMEOUT_SECONDS
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_environment_overrides_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BNET_API_BASE_URL", "http://localhost:8080")
    monkeypatch.setenv("BNET_API_KEY", "abc123")
    monkeypatch.setenv("BNET_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("BNET_USER_AGENT", "my-app/3.1")

    settings = get_bungie_settings()

    assert settings.api_base_url == "http://localhost:8080"
    assert settings.api_key == "abc123"
    assert settings.http_timeout_seconds == 2.5
    assert settings.user_agent == "my-app/3.1"


def test_safe_for_logging_redacts_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BNET_API_KEY", "abc123")

    safe = get_bungie_settings().safe_for_logging()

    assert safe["api_key"] == "<redacted>"
    assert "abc123" not in str(safe)


def test_redact_secret_marks_empty_values() -> None:
    assert redact_secret("") == "<empty>"
    assert redact_secret("value") == "<redacted>"
