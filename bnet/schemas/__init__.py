"""Payload and envelope schemas for Bungie.net platform responses."""

from bnet.schemas.common import BungieModel
from bnet.schemas.common import DateRange
from bnet.schemas.common import DestinyDisplayPropertiesDefinition
from bnet.schemas.common import DestinyIconSequenceDefinition
from bnet.schemas.common import DestinyPositionDefinition
from bnet.schemas.common import HyperlinkReference
from bnet.schemas.common import InterpolationPoint
from bnet.schemas.common import InterpolationPointFloat
from bnet.schemas.config import DestinyManifest
from bnet.schemas.config import GearAssetDataBaseDefinition
from bnet.schemas.config import ImagePyramidEntry
from bnet.schemas.definitions import DEFINITION_MODELS
from bnet.schemas.definitions import DestinyBreakerTypeDefinition
from bnet.schemas.definitions import DestinyDefinition
from bnet.schemas.definitions import DestinyEnergyTypeDefinition
from bnet.schemas.definitions import DestinyLoreDefinition
from bnet.schemas.definitions import DestinyPlaceDefinition
from bnet.schemas.definitions import DestinyTraitCategoryDefinition
from bnet.schemas.definitions import DestinyTraitDefinition
from bnet.schemas.envelope import SUCCESS_ERROR_CODE
from bnet.schemas.envelope import BungieResponse
from bnet.schemas.envelope import PlatformErrorCode
from bnet.schemas.error import DecodeErrorKind
from bnet.schemas.error import DecodeIssue

__all__ = [
    "DEFINITION_MODELS",
    "SUCCESS_ERROR_CODE",
    "BungieModel",
    "BungieResponse",
    "DateRange",
    "DecodeErrorKind",
    "DecodeIssue",
    "DestinyBreakerTypeDefinition",
    "DestinyDefinition",
    "DestinyDisplayPropertiesDefinition",
    "DestinyEnergyTypeDefinition",
    "DestinyIconSequenceDefinition",
    "DestinyLoreDefinition",
    "DestinyManifest",
    "DestinyPlaceDefinition",
    "DestinyPositionDefinition",
    "DestinyTraitCategoryDefinition",
    "DestinyTraitDefinition",
    "GearAssetDataBaseDefinition",
    "HyperlinkReference",
    "ImagePyramidEntry",
    "InterpolationPoint",
    "InterpolationPointFloat",
    "PlatformErrorCode",
]
