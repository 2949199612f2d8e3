"""SerializedClip: staged, committable access to a clip document's curve arrays.

A clip document is a mapping with an ``m_Name`` string and up to six curve
arrays (see ``CurveCategory``). Each array element is a mapping with a
``path`` string and, for some categories, an ``attribute`` string::

    {
        "m_Name": "Wave",
        "m_PositionCurves": [{"path": "Arm/Hand", "curve": {...}}],
        "m_FloatCurves": [{"path": "Arm", "attribute": "m_IsActive"}],
    }

Writes go through ``PathProperty`` handles and are staged until
``apply_modified_properties()`` commits them into the document. Committed
changes mark the clip dirty; an asset database persists dirty clips on
``save_assets()``. Everything other than ``path`` values is left untouched.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from animation_validator.clips.categories import CURVE_CATEGORIES, CurveCategory
from animation_validator.errors import SceneFormatError

__all__ = ["CurveElement", "PathProperty", "SerializedClip"]

NAME_FIELD = "m_Name"
PATH_FIELD = "path"
ATTRIBUTE_FIELD = "attribute"


class PathProperty:
    """Write-back handle to the ``path`` field of one curve element.

    Reading ``string_value`` returns the staged value when a write is pending,
    otherwise the committed document value. Assigning stages a write on the
    owning clip.
    """

    __slots__ = ("_clip", "category", "index")

    def __init__(self, clip: SerializedClip, category: CurveCategory, index: int) -> None:
        self._clip = clip
        self.category = category
        self.index = index

    @property
    def serialized_clip(self) -> SerializedClip:
        """The clip that owns this property."""
        return self._clip

    @property
    def string_value(self) -> str:
        return self._clip._read_path(self.category, self.index)

    @string_value.setter
    def string_value(self, value: str) -> None:
        self._clip._stage_path(self.category, self.index, value)

    def __repr__(self) -> str:
        return (
            f"PathProperty(clip={self._clip.name!r}, "
            f"category={self.category.value!r}, index={self.index})"
        )


@dataclass(frozen=True, slots=True)
class CurveElement:
    """Snapshot of one curve element's binding fields.

    Attributes:
        category:  Curve array the element lives in.
        index:     Position within that array.
        path:      Stored target path.
        attribute: Stored attribute name, or None when the element has none.
        handle:    Write-back handle to the element's ``path`` field.
    """

    category: CurveCategory
    index: int
    path: str
    attribute: str | None
    handle: PathProperty


class SerializedClip:
    """Mutable view over a clip document with staged path writes.

    Args:
        document: The clip mapping. It is mutated in place on commit.
        source:   Optional file the document was loaded from; used by
                  ``JsonAssetDatabase`` when saving.

    Raises:
        SceneFormatError: If ``m_Name`` is present but not a string, or a
            curve category is present but not a list of mappings, or a
            curve element has a non-string ``path``.
    """

    def __init__(
        self, document: MutableMapping[str, Any], source: Path | None = None
    ) -> None:
        name = document.get(NAME_FIELD, "")
        if not isinstance(name, str):
            raise SceneFormatError(
                f"{NAME_FIELD} must be a string, got {type(name).__name__}"
            )

        for category in CURVE_CATEGORIES:
            curves = document.get(category.value, [])
            if not isinstance(curves, list):
                raise SceneFormatError(
                    f"{category.value} must be a list, got {type(curves).__name__}"
                )
            for idx, element in enumerate(curves):
                if not isinstance(element, MutableMapping):
                    raise SceneFormatError(f"{category.value}[{idx}] must be a mapping")
                path = element.get(PATH_FIELD, "")
                if not isinstance(path, str):
                    raise SceneFormatError(
                        f"{category.value}[{idx}].path must be a string, "
                        f"got {type(path).__name__}"
                    )

        self._document = document
        self.source = source
        self._pending: dict[tuple[CurveCategory, int], str] = {}
        self._dirty = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return str(self._document.get(NAME_FIELD, ""))

    @property
    def document(self) -> MutableMapping[str, Any]:
        """The underlying (committed) clip document."""
        return self._document

    @property
    def has_modified_properties(self) -> bool:
        """True while staged writes are waiting for ``apply_modified_properties``."""
        return bool(self._pending)

    @property
    def dirty(self) -> bool:
        """True when committed changes have not been saved yet."""
        return self._dirty

    # ------------------------------------------------------------------
    # Curve access
    # ------------------------------------------------------------------

    def curves(self, category: CurveCategory) -> list[CurveElement]:
        """Return a snapshot of every element in one curve array.

        A missing array counts as empty. A missing ``path`` reads as the
        empty string; a missing or non-string ``attribute`` reads as None.
        """
        elements: list[CurveElement] = []
        for idx, raw in enumerate(self._document.get(category.value, [])):
            handle = PathProperty(self, category, idx)
            attribute = raw.get(ATTRIBUTE_FIELD)
            elements.append(
                CurveElement(
                    category=category,
                    index=idx,
                    path=handle.string_value,
                    attribute=attribute if isinstance(attribute, str) else None,
                    handle=handle,
                )
            )
        return elements

    # ------------------------------------------------------------------
    # Commit / save bookkeeping
    # ------------------------------------------------------------------

    def apply_modified_properties(self) -> bool:
        """Commit staged path writes into the document.

        Returns:
            True if at least one stored path actually changed.
        """
        changed = False
        for (category, idx), value in self._pending.items():
            element = self._document[category.value][idx]
            if element.get(PATH_FIELD) != value:
                element[PATH_FIELD] = value
                changed = True
        self._pending.clear()
        if changed:
            self._dirty = True
        return changed

    def mark_saved(self) -> None:
        """Clear the dirty flag after an asset database has persisted the clip."""
        self._dirty = False

    # ------------------------------------------------------------------
    # PathProperty plumbing
    # ------------------------------------------------------------------

    def _element(self, category: CurveCategory, idx: int) -> MutableMapping[str, Any]:
        return self._document[category.value][idx]

    def _read_path(self, category: CurveCategory, idx: int) -> str:
        staged = self._pending.get((category, idx))
        if staged is not None:
            return staged
        return self._element(category, idx).get(PATH_FIELD, "")

    def _stage_path(self, category: CurveCategory, idx: int, value: str) -> None:
        self._element(category, idx)  # IndexError for a stale handle
        self._pending[(category, idx)] = value

    def __repr__(self) -> str:
        return f"SerializedClip(name={self.name!r}, dirty={self._dirty})"
