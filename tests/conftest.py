"""Shared pytest fixtures for bnet test suites."""

from collections.abc import Callable
from pathlib import Path
from typing import Any
import copy
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

MANIFEST_RESPONSE: dict[str, Any] = {
    "version": "1.2.3",
    "mobileAssetContentPath": "/common/destiny2_content/sqlite/asset/asset_sql_content.content",
    "mobileGearAssetDataBases": [
        {"version": 0, "path": "/common/destiny2_content/sqlite/asset/asset_sql_content.content"},
    ],
    "mobileWorldContentPaths": {
        "en": "/common/destiny2_content/sqlite/en/world_sql_content.content",
    },
    "jsonWorldContentPaths": {
        "en": "/common/destiny2_content/json/en/aggregate.json",
    },
    "jsonWorldComponentContentPaths": {
        "en": {
            "DestinyLoreDefinition": "/common/destiny2_content/json/en/DestinyLoreDefinition.json",
        },
    },
    "mobileClanBannerDatabasePath": "/common/destiny2_content/clanbanner/clanbanner_sql_content.content",
    "mobileGearCDN": {
        "Geometry": "/common/destiny2_content/geometry/platform/mobile/geometry",
    },
    "iconImagePyramidInfo": [],
}


@pytest.fixture
def make_envelope() -> Callable[..., dict[str, Any]]:
    """Build a wire-format envelope document with overridable top-level keys."""

    def _make(response: Any = None, **overrides: Any) -> dict[str, Any]:
        document: dict[str, Any] = {
            "Response": copy.deepcopy(MANIFEST_RESPONSE) if response is None else response,
            "ErrorCode": 1,
            "ThrottleSeconds": 0,
            "ErrorStatus": "Success",
            "Message": "Ok",
            "MessageData": {},
        }
        document.update(overrides)
        return document

    return _make


@pytest.fixture
def manifest_response() -> dict[str, Any]:
    """Provide a canned manifest payload in wire format."""
    return copy.deepcopy(MANIFEST_RESPONSE)
