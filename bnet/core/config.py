"""Client configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

BUNGIE_BASE_URL = "https://www.bungie.net"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "bnet-client/0.1"


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    return float(raw)


def redact_secret(secret: str) -> str:
    """Return a non-recoverable placeholder for sensitive values."""
    if not secret:
        return "<empty>"
    return "<redacted>"


@dataclass(frozen=True)
class BungieSettings:
    """Runtime settings for Bungie.net platform calls."""

    api_base_url: str
    api_key: str
    http_timeout_seconds: float
    user_agent: str

    def safe_for_logging(self) -> dict[str, str | float]:
        """Return client settings safe for logs."""
        return {
            "api_base_url": self.api_base_url,
            "api_key": redact_secret(self.api_key),
            "http_timeout_seconds": self.http_timeout_seconds,
            "user_agent": self.user_agent,
        }


@lru_cache(maxsize=1)
def get_bungie_settings() -> BungieSettings:
    """Load client settings from the environment."""
    return BungieSettings(
        api_base_url=os.getenv("BNET_API_BASE_URL", BUNGIE_BASE_URL),
        api_key=os.getenv("BNET_API_KEY", ""),
        http_timeout_seconds=_get_float_env("BNET_HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS),
        user_agent=os.getenv("BNET_USER_AGENT", DEFAULT_USER_AGENT),
    )
