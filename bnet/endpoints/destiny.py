"""Destiny 2 manifest endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from bnet.endpoints.client import BungieClient
from bnet.schemas.config import DestinyManifest
from bnet.schemas.definitions import definition_model_for
from bnet.schemas.envelope import BungieResponse

MANIFEST_PATH = "/platform/destiny2/manifest/"


async def get_destiny_manifest(client: BungieClient) -> BungieResponse[DestinyManifest]:
    """Return the current version of the manifest."""
    return await client.get(MANIFEST_PATH, DestinyManifest)


async def get_destiny_entity_definition(
    client: BungieClient,
    entity_type: str,
    hash_identifier: int,
) -> BungieResponse[Any]:
    """Return one static definition record, typed when the entity type is modelled."""
    if not entity_type.strip():
        raise ValueError("entity_type is required")

    path = f"{MANIFEST_PATH}{quote(entity_type, safe='')}/{hash_identifier}/"
    return await client.get(path, definition_model_for(entity_type))
