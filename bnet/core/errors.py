"""Exception taxonomy for Bungie.net client operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING
from typing import Any

from bnet.schemas.error import DecodeErrorKind
from bnet.schemas.error import DecodeIssue

if TYPE_CHECKING:
    from bnet.schemas.envelope import BungieResponse


class BungieClientError(RuntimeError):
    """Base error raised by Bungie.net client operations."""


class BungieTransportError(BungieClientError):
    """Raised when a request could not be sent or no usable response was received."""


class BungieTimeoutError(BungieTransportError):
    """Raised when the platform did not answer within the configured timeout."""


class BungieHTTPStatusError(BungieTransportError):
    """Raised when the platform answers with a non-2xx status code."""

    def __init__(
        self,
        *,
        status_code: int,
        url: str,
        body: str,
        envelope: BungieResponse[Any] | None = None,
    ) -> None:
        super().__init__(f"Bungie request to {url} failed with status {status_code}")
        self.status_code = status_code
        self.url = url
        self.body = body
        self.envelope = envelope


class EnvelopeDecodeError(BungieClientError):
    """Raised when a response body does not match the envelope or payload shape."""

    def __init__(self, issues: Sequence[DecodeIssue]) -> None:
        if not issues:
            raise ValueError("EnvelopeDecodeError requires at least one issue")
        self.issues = list(issues)
        super().__init__(self._summary())

    @property
    def path(self) -> str:
        return self.issues[0].path

    @property
    def kind(self) -> DecodeErrorKind:
        return self.issues[0].kind

    def _summary(self) -> str:
        first = self.issues[0]
        summary = f"Invalid response envelope at `{first.path}` ({first.kind.value}): {first.message}"
        if len(self.issues) > 1:
            summary += f" (+{len(self.issues) - 1} more)"
        return summary
