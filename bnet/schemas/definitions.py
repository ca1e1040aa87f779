"""Destiny definition records served from the manifest.

Each record's `hash` identifies it within its own definition type only; the
same hash may refer to unrelated records of different types.
"""

from __future__ import annotations

from typing import Any

from bnet.schemas.common import BungieModel
from bnet.schemas.common import DestinyDisplayPropertiesDefinition


class DestinyDefinition(BungieModel):
    hash: int | None = None
    index: int | None = None
    redacted: bool | None = None


class DestinyLoreDefinition(DestinyDefinition):
    display_properties: DestinyDisplayPropertiesDefinition | None = None
    subtitle: str | None = None


class DestinyBreakerTypeDefinition(DestinyDefinition):
    display_properties: DestinyDisplayPropertiesDefinition | None = None
    enum_value: int | None = None


class DestinyEnergyTypeDefinition(DestinyDefinition):
    display_properties: DestinyDisplayPropertiesDefinition | None = None
    transparent_icon_path: str | None = None
    show_icon: bool | None = None
    enum_value: int | None = None
    capacity_stat_hash: int | None = None
    cost_stat_hash: int | None = None


class DestinyTraitDefinition(DestinyDefinition):
    display_properties: DestinyDisplayPropertiesDefinition | None = None
    trait_category_id: str | None = None
    trait_category_hash: int | None = None
    display_hint: str | None = None


class DestinyTraitCategoryDefinition(DestinyDefinition):
    trait_category_id: str | None = None
    trait_hashes: list[int] | None = None
    trait_ids: list[str] | None = None


class DestinyPlaceDefinition(DestinyDefinition):
    display_properties: DestinyDisplayPropertiesDefinition | None = None


DEFINITION_MODELS: dict[str, type[DestinyDefinition]] = {
    "DestinyLoreDefinition": DestinyLoreDefinition,
    "DestinyBreakerTypeDefinition": DestinyBreakerTypeDefinition,
    "DestinyEnergyTypeDefinition": DestinyEnergyTypeDefinition,
    "DestinyTraitDefinition": DestinyTraitDefinition,
    "DestinyTraitCategoryDefinition": DestinyTraitCategoryDefinition,
    "DestinyPlaceDefinition": DestinyPlaceDefinition,
}


def definition_model_for(entity_type: str) -> Any:
    """Return the payload type for a definition name, or a plain mapping when not modelled."""
    return DEFINITION_MODELS.get(entity_type, dict[str, Any])
