"""Clips subpackage: serialized animation clip storage.

Re-exports the public API for the clips module:
- CurveCategory: StrEnum of the six serialized curve arrays
- SerializedClip: staged, committable view over a clip document
- PathProperty / CurveElement: write-back handle and element snapshot
- MemoryAssetDatabase / JsonAssetDatabase: persistence flush implementations
"""

from animation_validator.clips.assets import JsonAssetDatabase, MemoryAssetDatabase
from animation_validator.clips.categories import (
    CURVE_CATEGORIES,
    DEFAULT_ATTRIBUTE,
    CurveCategory,
)
from animation_validator.clips.storage import CurveElement, PathProperty, SerializedClip

__all__ = [
    "CURVE_CATEGORIES",
    "DEFAULT_ATTRIBUTE",
    "CurveCategory",
    "CurveElement",
    "JsonAssetDatabase",
    "MemoryAssetDatabase",
    "PathProperty",
    "SerializedClip",
]
