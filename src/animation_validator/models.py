"""FixState, Binding and ClipReport: the validation result types.

A ``ClipReport`` is produced per clip by the validator and mutated in place
by the recoverer. Each ``Binding`` carries a write-back handle into the
serialized clip so that a repaired path can be stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from animation_validator.clips.storage import PathProperty

__all__ = ["Binding", "ClipReport", "FixState"]


class FixState(StrEnum):
    """Repair state of a binding.

    Transitions: ``NONE -> LOST -> {ERROR_NO_SAME_NAME | ERROR_DUPLICATE | FIXED}``.

    - NONE:               Not yet examined.
    - LOST:               Path does not resolve in the current hierarchy.
    - ERROR_NO_SAME_NAME: No object in the hierarchy has the binding's leaf name.
    - ERROR_DUPLICATE:    Two or more objects share the leaf name; ambiguous.
    - FIXED:              Path rewritten to the single matching object.
    """

    NONE = auto()
    LOST = auto()
    ERROR_NO_SAME_NAME = auto()
    ERROR_DUPLICATE = auto()
    FIXED = auto()


@dataclass(eq=False)
class Binding:
    """One lost animation-curve binding.

    Attributes:
        object_name: Leaf name of ``path`` (empty string for an empty path).
        path:        Root-relative target path as stored in the clip.
        attribute:   Animated property name, ``"Position"`` when the curve
                     carries none.
        handle:      Write-back handle to the ``path`` field in the clip.
        state:       Current FixState.
        fixed_path:  Path written back by the recoverer; None until FIXED.
                     ``path`` keeps the original (lost) value for reporting.
    """

    object_name: str
    path: str
    attribute: str
    handle: PathProperty | None = field(default=None, repr=False)
    state: FixState = FixState.NONE
    fixed_path: str | None = None


@dataclass(eq=False)
class ClipReport:
    """Lost bindings found in one animation clip.

    Attributes:
        clip_name: Name of the clip (``m_Name`` in the serialized document).
        bindings:  Lost bindings, in curve-category then curve order.
    """

    clip_name: str
    bindings: list[Binding] = field(default_factory=list)

    @property
    def has_no_error(self) -> bool:
        """True iff there are no bindings or every binding is FIXED."""
        return all(b.state is FixState.FIXED for b in self.bindings)

    @property
    def error_count(self) -> int:
        """Number of bindings not (yet) in the FIXED state."""
        return sum(1 for b in self.bindings if b.state is not FixState.FIXED)
