"""Generic response envelope returned by every Bungie.net platform endpoint."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

PayloadT = TypeVar("PayloadT")

SUCCESS_ERROR_CODE = 1


class PlatformErrorCode(int, Enum):
    """Well-known subset of the platform's `PlatformErrorCodes` values."""

    NONE = 0
    SUCCESS = SUCCESS_ERROR_CODE
    TRANSPORT_EXCEPTION = 2
    UNHANDLED_EXCEPTION = 3
    NOT_IMPLEMENTED = 4
    SYSTEM_DISABLED = 5
    PARAMETER_PARSE_FAILURE = 7
    PARAMETER_INVALID_RANGE = 8
    BAD_REQUEST = 9
    AUTHENTICATION_INVALID = 10
    DATA_NOT_FOUND = 11
    INSUFFICIENT_PRIVILEGES = 12
    THROTTLE_LIMIT_EXCEEDED = 31
    THROTTLE_LIMIT_EXCEEDED_MINUTES = 35
    THROTTLE_LIMIT_EXCEEDED_MOMENTARILY = 36
    THROTTLE_LIMIT_EXCEEDED_SECONDS = 37
    API_INVALID_OR_EXPIRED_KEY = 2101
    API_KEY_MISSING_FROM_REQUEST = 2102


class BungieResponse(BaseModel, Generic[PayloadT]):
    """Uniform wrapper around one endpoint call outcome.

    `response` is only trustworthy when `is_success()` holds: the platform still
    serializes a placeholder payload on failures. `throttle_seconds` must be
    honoured regardless of the outcome.

    Frozen, but not hashable: `message_data` is a dict.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    response: PayloadT = Field(alias="Response")
    error_code: int = Field(alias="ErrorCode", strict=True)
    throttle_seconds: int = Field(alias="ThrottleSeconds", strict=True)
    error_status: str = Field(alias="ErrorStatus", strict=True)
    message: str = Field(alias="Message", strict=True)
    message_data: dict[str, str] = Field(alias="MessageData")
    detailed_error_trace: str | None = Field(default=None, alias="DetailedErrorTrace")

    @property
    def platform_error(self) -> PlatformErrorCode | None:
        """Return the named error code, or None for codes outside the known subset."""
        try:
            return PlatformErrorCode(self.error_code)
        except ValueError:
            return None

    def is_success(self) -> bool:
        return is_success(self)

    def should_throttle(self) -> timedelta:
        return should_throttle(self)


def is_success(envelope: BungieResponse[object]) -> bool:
    """Return True when the envelope carries the platform's success sentinel."""
    return envelope.error_code == SUCCESS_ERROR_CODE


def should_throttle(envelope: BungieResponse[object]) -> timedelta:
    """Return the server-requested wait before retrying; zero means no throttling."""
    if envelope.throttle_seconds <= 0:
        return timedelta(0)
    return timedelta(seconds=envelope.throttle_seconds)
