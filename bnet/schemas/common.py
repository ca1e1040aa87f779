"""Shared payload records reused across Destiny definitions and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class BungieModel(BaseModel):
    """Base for payload records: camelCase on the wire, snake_case locally.

    Instances are immutable but not hashable, since most records hold list or
    dict fields.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class DestinyIconSequenceDefinition(BungieModel):
    frames: list[str] | None = None


class DestinyDisplayPropertiesDefinition(BungieModel):
    """Display text and icon paths shared by most definition records."""

    description: str | None = None
    name: str | None = None
    icon: str | None = None
    icon_sequences: list[DestinyIconSequenceDefinition] | None = None
    high_res_icon: str | None = None
    has_icon: bool | None = None


class DestinyPositionDefinition(BungieModel):
    x: int | None = None
    y: int | None = None
    z: int | None = None


class DateRange(BungieModel):
    start: datetime | None = None
    end: datetime | None = None


class HyperlinkReference(BungieModel):
    title: str | None = None
    url: str | None = None


class InterpolationPoint(BungieModel):
    value: int | None = None
    weight: int | None = None


class InterpolationPointFloat(BungieModel):
    value: float | None = None
    weight: float | None = None
