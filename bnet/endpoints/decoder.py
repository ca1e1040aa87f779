"""Decode raw platform response bodies into typed response envelopes."""

from __future__ import annotations

import logging
from typing import Any
from typing import TypeVar

from pydantic import ValidationError

from bnet.core.errors import EnvelopeDecodeError
from bnet.schemas.envelope import BungieResponse
from bnet.schemas.envelope import is_success
from bnet.schemas.error import DecodeErrorKind
from bnet.schemas.error import DecodeIssue

PayloadT = TypeVar("PayloadT")

logger = logging.getLogger(__name__)

ROOT_PATH = "body"
RESPONSE_KEY = "Response"


def decode_envelope(body: bytes | str, payload_type: type[PayloadT]) -> BungieResponse[PayloadT]:
    """Decode one response body, validating the envelope and its payload as `payload_type`.

    Every required envelope key must be present and of its declared type; values
    are never coerced. Failures raise `EnvelopeDecodeError` listing each issue
    with its wire path (for example `ErrorCode` or `Response.version`).

    Envelopes carrying a non-success error code are returned even when their
    `Response` placeholder does not match `payload_type`; in that case the
    payload is kept as the raw decoded JSON value.
    """
    envelope_type = BungieResponse[payload_type]  # type: ignore[valid-type]
    try:
        return envelope_type.model_validate_json(body)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        placeholder = _error_envelope_with_placeholder(body, errors)
        if placeholder is not None:
            return placeholder  # type: ignore[return-value]
        issues = [_issue_from_error(error) for error in errors]
        logger.debug("Envelope decode failed with %d issue(s): %s", len(issues), issues)
        raise EnvelopeDecodeError(issues) from exc


def encode_envelope(envelope: BungieResponse[Any]) -> str:
    """Serialize an envelope back to the platform's wire format."""
    return envelope.model_dump_json(by_alias=True)


def _error_envelope_with_placeholder(body: bytes | str, errors: list[Any]) -> BungieResponse[Any] | None:
    if not all(_is_payload_shape_error(error) for error in errors):
        return None
    try:
        envelope = BungieResponse[Any].model_validate_json(body)
    except ValidationError:
        return None
    if is_success(envelope):
        return None
    logger.debug(
        "Keeping raw Response placeholder for error envelope error_code=%s",
        envelope.error_code,
    )
    return envelope


def _is_payload_shape_error(error: Any) -> bool:
    location = tuple(error.get("loc", ()))
    if not location or location[0] != RESPONSE_KEY:
        return False
    return not (len(location) == 1 and error.get("type") == "missing")


def _issue_from_error(error: Any) -> DecodeIssue:
    return DecodeIssue(
        path=_format_location(error.get("loc", ())),
        kind=_classify(str(error.get("type", ""))),
        message=str(error.get("msg", "Invalid value")),
    )


def _classify(error_type: str) -> DecodeErrorKind:
    if error_type == "json_invalid":
        return DecodeErrorKind.MALFORMED_DOCUMENT
    if error_type == "missing":
        return DecodeErrorKind.MISSING_FIELD
    if error_type.endswith("_type") or error_type.endswith("_parsing") or error_type == "int_from_float":
        return DecodeErrorKind.TYPE_MISMATCH
    return DecodeErrorKind.INVALID_VALUE


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)
    if not location:
        return ROOT_PATH
    return ".".join(str(part) for part in location)
