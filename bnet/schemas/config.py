"""Manifest payload describing where the current content databases live."""

from __future__ import annotations

from pydantic import Field

from bnet.schemas.common import BungieModel


class GearAssetDataBaseDefinition(BungieModel):
    path: str | None = None
    version: int | None = None


class ImagePyramidEntry(BungieModel):
    """One downscaled icon variant, stored in a subfolder named after `name`."""

    name: str | None = None
    factor: float | None = None


class DestinyManifest(BungieModel):
    """Current content version and the paths to its definition databases.

    `json_world_component_content_paths` is keyed by locale, then by definition
    type name; `json_world_content_paths` is keyed by locale and points at the
    aggregated (large) world content file.
    """

    version: str
    mobile_asset_content_path: str | None = None
    mobile_gear_asset_data_bases: list[GearAssetDataBaseDefinition] = Field(default_factory=list)
    mobile_world_content_paths: dict[str, str] = Field(default_factory=dict)
    json_world_content_paths: dict[str, str] = Field(default_factory=dict)
    json_world_component_content_paths: dict[str, dict[str, str]] = Field(default_factory=dict)
    mobile_clan_banner_database_path: str | None = None
    mobile_gear_cdn: dict[str, str] = Field(default_factory=dict, alias="mobileGearCDN")
    icon_image_pyramid_info: list[ImagePyramidEntry] = Field(default_factory=list)

    def world_content_path(self, locale: str) -> str | None:
        """Return the aggregated world content path for a locale, if published."""
        return self.json_world_content_paths.get(locale)

    def component_content_path(self, locale: str, definition_type: str) -> str | None:
        """Return the per-definition content path for a locale, if published."""
        return self.json_world_component_content_paths.get(locale, {}).get(definition_type)
