"""Async HTTP client for Bungie.net platform calls."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any
from typing import TypeVar

import logging

import httpx

from bnet.core.config import BUNGIE_BASE_URL
from bnet.core.config import DEFAULT_HTTP_TIMEOUT_SECONDS
from bnet.core.config import DEFAULT_USER_AGENT
from bnet.core.config import BungieSettings
from bnet.core.errors import BungieHTTPStatusError
from bnet.core.errors import BungieTimeoutError
from bnet.core.errors import BungieTransportError
from bnet.core.errors import EnvelopeDecodeError
from bnet.endpoints.decoder import decode_envelope
from bnet.schemas.envelope import BungieResponse

PayloadT = TypeVar("PayloadT")

logger = logging.getLogger(__name__)


class BungieClient:
    """Issue single GET requests against the platform and decode the envelope.

    No retries and no caching: one call is one request. Logical failures
    (`error_code` other than success) come back as normal envelopes.

    When no `http_client` is passed, one is created on the first request and
    owned by this client; release it with `aclose()` or `async with`.
    """

    def __init__(
        self,
        *,
        base_url: str = BUNGIE_BASE_URL,
        api_key: str | None = None,
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        normalized = base_url.rstrip("/")
        if not normalized:
            raise ValueError("base_url is required")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self._base_url = normalized
        self._api_key = api_key or None
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent
        self._owns_http_client = http_client is None
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: BungieSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> BungieClient:
        """Build a client from loaded runtime settings."""
        return cls(
            base_url=settings.api_base_url,
            api_key=settings.api_key,
            timeout_seconds=settings.http_timeout_seconds,
            user_agent=settings.user_agent,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get(
        self,
        path: str,
        payload_type: type[PayloadT],
        *,
        params: Mapping[str, Any] | None = None,
    ) -> BungieResponse[PayloadT]:
        """GET `path` under the base URL and decode the body as an envelope of `payload_type`."""
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)

        try:
            response = await self._client().get(
                url,
                headers=self._headers(),
                params=dict(params) if params else None,
                timeout=self._timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning("Bungie request to %s timed out", url, exc_info=exc)
            raise BungieTimeoutError(f"Bungie request to {url} timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning("Bungie request to %s failed", url, exc_info=exc)
            raise BungieTransportError(f"Bungie request to {url} failed") from exc
        except httpx.InvalidURL as exc:
            logger.warning("Bungie request URL %s is invalid", url, exc_info=exc)
            raise BungieTransportError(f"Bungie request URL {url} is invalid") from exc

        if not response.is_success:
            raise self._status_error(response, url)

        envelope = decode_envelope(response.content, payload_type)
        self._log_outcome(envelope, url)
        return envelope

    async def aclose(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> BungieClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient()
        return self._http_client

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }
        if self._api_key:
            headers["X-API-Key"] = self._api_key
        return headers

    @staticmethod
    def _status_error(response: httpx.Response, url: str) -> BungieHTTPStatusError:
        # The platform usually wraps error statuses in an envelope too; keep it when it parses.
        envelope: BungieResponse[Any] | None
        try:
            envelope = decode_envelope(response.content, Any)  # type: ignore[arg-type]
        except EnvelopeDecodeError:
            envelope = None

        logger.warning(
            "Bungie request to %s failed with status %s (error_status=%s)",
            url,
            response.status_code,
            envelope.error_status if envelope is not None else None,
        )
        return BungieHTTPStatusError(
            status_code=response.status_code,
            url=url,
            body=response.text,
            envelope=envelope,
        )

    @staticmethod
    def _log_outcome(envelope: BungieResponse[Any], url: str) -> None:
        if not envelope.is_success():
            logger.info(
                "Bungie request to %s returned error_code=%s error_status=%s message=%s",
                url,
                envelope.error_code,
                envelope.error_status,
                envelope.message,
            )
        throttle = envelope.should_throttle()
        if throttle:
            logger.warning("Bungie asked to throttle %s for %s seconds", url, throttle.total_seconds())
