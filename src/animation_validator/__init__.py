"""Animation validator - find and repair lost animation curve bindings."""

from __future__ import annotations

import logging

from animation_validator.clips import (
    CURVE_CATEGORIES,
    CurveCategory,
    JsonAssetDatabase,
    MemoryAssetDatabase,
    SerializedClip,
)
from animation_validator.errors import (
    AnimationValidatorError,
    SceneFormatError,
    SessionClosedError,
)
from animation_validator.hierarchy import (
    HierarchyBuilder,
    HierarchyNode,
    PathEntry,
    flatten,
    get_object_name,
)
from animation_validator.models import Binding, ClipReport, FixState
from animation_validator.recoverer import (
    execute_all_recovery,
    execute_unit_recovery,
    recover,
    recover_all,
)
from animation_validator.session import ValidatorSession
from animation_validator.validator import validate, validate_selection

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "CURVE_CATEGORIES",
    "AnimationValidatorError",
    "Binding",
    "ClipReport",
    "CurveCategory",
    "FixState",
    "HierarchyBuilder",
    "HierarchyNode",
    "JsonAssetDatabase",
    "MemoryAssetDatabase",
    "PathEntry",
    "SceneFormatError",
    "SerializedClip",
    "SessionClosedError",
    "ValidatorSession",
    "execute_all_recovery",
    "execute_unit_recovery",
    "flatten",
    "get_object_name",
    "recover",
    "recover_all",
    "validate",
    "validate_selection",
]
