"""CurveCategory StrEnum: the six serialized curve arrays of an animation clip.

This is a closed set coupled to the clip serialization format. The validator
must scan every category; adding one is a format change, not an extension
point.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = ["CURVE_CATEGORIES", "DEFAULT_ATTRIBUTE", "CurveCategory"]

# Attribute name reported for curve elements that carry no ``attribute`` field
# (position, scale and euler curves address the transform as a whole).
DEFAULT_ATTRIBUTE = "Position"


class CurveCategory(StrEnum):
    """Serialized property names of the curve arrays in a clip document.

    - POSITION:     ``m_PositionCurves``
    - SCALE:        ``m_ScaleCurves``
    - FLOAT:        ``m_FloatCurves``
    - PPTR:         ``m_PPtrCurves`` (object-reference curves)
    - EDITOR:       ``m_EditorCurves``
    - EULER_EDITOR: ``m_EulerEditorCurves``
    """

    POSITION = "m_PositionCurves"
    SCALE = "m_ScaleCurves"
    FLOAT = "m_FloatCurves"
    PPTR = "m_PPtrCurves"
    EDITOR = "m_EditorCurves"
    EULER_EDITOR = "m_EulerEditorCurves"


# Scan order used by the validator; lost bindings are reported in this order.
CURVE_CATEGORIES: tuple[CurveCategory, ...] = tuple(CurveCategory)
