"""Shared fixtures for animation-validator tests.

Provides small hierarchies built from mappings and clip documents with
bindings in chosen curve categories.
"""

from __future__ import annotations

from typing import Any

import pytest

from animation_validator.clips.storage import SerializedClip
from animation_validator.hierarchy.builder import HierarchyBuilder
from animation_validator.hierarchy.nodes import HierarchyNode


def node(name: str, *children: dict[str, Any]) -> dict[str, Any]:
    """Shorthand for a hierarchy mapping."""
    return {"name": name, "children": list(children)}


def build_tree(document: dict[str, Any]) -> HierarchyNode:
    return HierarchyBuilder().build(document)


def make_clip(name: str, **curves: list[dict[str, Any]]) -> SerializedClip:
    """Build a SerializedClip; keyword names are serialized array names.

    Example: ``make_clip("Wave", m_PositionCurves=[{"path": "Arm/Hand"}])``
    """
    document: dict[str, Any] = {"m_Name": name}
    document.update(curves)
    return SerializedClip(document)


@pytest.fixture
def arm_tree() -> HierarchyNode:
    """Root/Arm/Hand plus Root/Leg/Foot."""
    return build_tree(
        node("Root", node("Arm", node("Hand")), node("Leg", node("Foot")))
    )


@pytest.fixture
def wave_clip() -> SerializedClip:
    """A clip animating Arm and Arm/Hand through position and float curves."""
    return make_clip(
        "Wave",
        m_PositionCurves=[{"path": "Arm"}, {"path": "Arm/Hand"}],
        m_FloatCurves=[{"path": "Arm/Hand", "attribute": "m_IsActive"}],
    )
