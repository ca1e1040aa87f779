"""Unit tests for success and throttle predicates on decoded envelopes."""

from __future__ import annotations

from datetime import timedelta
import json
from typing import Any

import pytest
from pydantic import ValidationError

from bnet.endpoints.decoder import decode_envelope
from bnet.schemas.envelope import SUCCESS_ERROR_CODE
from bnet.schemas.envelope import BungieResponse
from bnet.schemas.envelope import PlatformErrorCode
from bnet.schemas.envelope import is_success
from bnet.schemas.envelope import should_throttle


def _envelope(error_code: int, throttle_seconds: int = 0) -> BungieResponse[Any]:
    return BungieResponse[Any](
        response={},
        error_code=error_code,
        throttle_seconds=throttle_seconds,
        error_status="Success" if error_code == SUCCESS_ERROR_CODE else "SystemDisabled",
        message="",
        message_data={},
    )


def test_success_sentinel_is_one() -> None:
    assert SUCCESS_ERROR_CODE == 1
    assert PlatformErrorCode.SUCCESS == SUCCESS_ERROR_CODE


@pytest.mark.parametrize(
    ("error_code", "expected"),
    [(1, True), (5, False), (0, False), (2101, False), (-1, False)],
)
def test_is_success_matches_only_the_sentinel(error_code: int, expected: bool) -> None:
    envelope = _envelope(error_code)

    assert is_success(envelope) is expected
    assert envelope.is_success() is expected


def test_throttle_is_reported_even_on_success(make_envelope) -> None:
    envelope = decode_envelope(json.dumps(make_envelope(ThrottleSeconds=30)), dict[str, Any])

    assert envelope.is_success() is True
    assert should_throttle(envelope) == timedelta(seconds=30)
    assert envelope.should_throttle() == timedelta(seconds=30)


def test_throttle_is_reported_on_failure() -> None:
    envelope = _envelope(PlatformErrorCode.THROTTLE_LIMIT_EXCEEDED_MOMENTARILY.value, throttle_seconds=5)

    assert envelope.is_success() is False
    assert should_throttle(envelope) == timedelta(seconds=5)


@pytest.mark.parametrize("throttle_seconds", [0, -3])
def test_non_positive_throttle_means_no_wait(throttle_seconds: int) -> None:
    assert should_throttle(_envelope(1, throttle_seconds)) == timedelta(0)


def test_platform_error_maps_known_codes_only() -> None:
    assert _envelope(5).platform_error is PlatformErrorCode.SYSTEM_DISABLED
    assert _envelope(1).platform_error is PlatformErrorCode.SUCCESS
    assert _envelope(987654).platform_error is None


def test_envelope_is_immutable() -> None:
    envelope = _envelope(1)

    with pytest.raises(ValidationError):
        envelope.error_code = 5  # type: ignore[misc]


def test_envelope_is_immutable_but_not_hashable() -> None:
    with pytest.raises(TypeError):
        hash(_envelope(1))
