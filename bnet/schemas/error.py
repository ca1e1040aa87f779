"""Decode issue schemas carried by envelope decode errors."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel
from pydantic import ConfigDict


class DecodeErrorKind(str, Enum):
    MALFORMED_DOCUMENT = "malformed_document"
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_VALUE = "invalid_value"


class DecodeIssue(BaseModel):
    """Single field-level problem found while decoding a response body."""

    model_config = ConfigDict(frozen=True)

    path: str
    kind: DecodeErrorKind
    message: str
