"""Protocols for the host-side collaborators of the validator and recoverer.

Hosts plug in their own clip storage, persistence and progress display
without inheriting from any base class; any object with conformant methods
passes ``isinstance`` checks.

Example::

    from animation_validator.protocols import ProgressReporter

    class ConsoleProgress:
        def display(self, content: str, progress: float) -> None:
            print(f"{progress:5.0%} {content}")

        def clear(self) -> None:
            print()

    assert isinstance(ConsoleProgress(), ProgressReporter)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from animation_validator.clips.categories import CurveCategory
    from animation_validator.clips.storage import CurveElement

__all__ = ["AssetDatabase", "ClipStorage", "ProgressCallback", "ProgressReporter"]

# Called with (item name, zero-based fraction complete) before each item.
ProgressCallback = Callable[[str, float], None]


@runtime_checkable
class ClipStorage(Protocol):
    """Serialized clip exposing its curve arrays and an explicit commit.

    ``curves`` must return every element of one category with a write-back
    handle on its ``path`` field; ``apply_modified_properties`` commits
    pending writes and must be called after all edits to the clip.
    """

    @property
    def name(self) -> str: ...

    def curves(self, category: CurveCategory) -> list[CurveElement]: ...

    def apply_modified_properties(self) -> bool: ...


@runtime_checkable
class AssetDatabase(Protocol):
    """Persistence flush: save every modified asset."""

    def save_assets(self) -> Any: ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Progress indicator driven during recovery.

    ``display`` is advisory; ``clear`` is always called once a recovery
    entry point finishes.
    """

    def display(self, content: str, progress: float) -> None: ...

    def clear(self) -> None: ...
