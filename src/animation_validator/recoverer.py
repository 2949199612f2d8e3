"""Recoverer: repairs lost bindings by unique leaf-name match.

For each lost binding, the flattened hierarchy is filtered to entries whose
object name equals the binding's leaf name:

- no match:        ERROR_NO_SAME_NAME, nothing written
- two or more:     ERROR_DUPLICATE, nothing written (never guesses)
- exactly one:     the stored path is rewritten to the match, the clip is
                   committed, and the binding becomes FIXED

There is no fuzzy matching and no use of the lost path's shape or parent
names. Error states are re-attempted from scratch on the next call; FIXED
bindings are final.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from animation_validator.hierarchy.nodes import HierarchyNode
from animation_validator.hierarchy.paths import PathEntry, flatten
from animation_validator.models import Binding, ClipReport, FixState
from animation_validator.protocols import (
    AssetDatabase,
    ProgressCallback,
    ProgressReporter,
)

__all__ = [
    "execute_all_recovery",
    "execute_unit_recovery",
    "match_candidates",
    "recover",
    "recover_all",
]

logger = logging.getLogger(__name__)


def match_candidates(binding: Binding, candidates: Sequence[PathEntry]) -> list[PathEntry]:
    """Return the candidates whose object name equals the binding's leaf name."""
    return [entry for entry in candidates if entry.object_name == binding.object_name]


def _apply_fix(binding: Binding, entry: PathEntry) -> None:
    logger.info("Rewrote binding path %r -> %r", binding.path, entry.relative_path)
    if binding.handle is not None:
        binding.handle.string_value = entry.relative_path
        binding.handle.serialized_clip.apply_modified_properties()
    binding.fixed_path = entry.relative_path
    binding.state = FixState.FIXED


def recover(
    report: ClipReport,
    candidates: Sequence[PathEntry],
    on_progress: ProgressCallback | None = None,
) -> ClipReport:
    """Attempt to repair every lost binding in ``report`` in place.

    Args:
        report:      The clip's validation report. Its bindings are mutated.
        candidates:  Flattened hierarchy (see ``flatten``). Read only.
        on_progress: Optional callback, invoked with ``(object_name, i / total)``
                     before each binding is processed.

    Returns:
        The same ``report``, for chaining.
    """
    total = len(report.bindings)
    for i, binding in enumerate(report.bindings):
        if on_progress is not None:
            on_progress(binding.object_name, i / total)

        if binding.state is FixState.FIXED:
            continue

        matches = match_candidates(binding, candidates)
        if not matches:
            binding.state = FixState.ERROR_NO_SAME_NAME
        elif len(matches) > 1:
            binding.state = FixState.ERROR_DUPLICATE
        else:
            _apply_fix(binding, matches[0])

    return report


def recover_all(
    reports: Sequence[ClipReport],
    candidates: Sequence[PathEntry],
    assets: AssetDatabase | None = None,
    on_progress: ProgressCallback | None = None,
) -> list[ClipReport]:
    """Run ``recover`` over every report, then flush persistence once.

    Args:
        reports:     Reports to repair, processed in order.
        candidates:  Flattened hierarchy shared by all reports.
        assets:      Asset database whose ``save_assets()`` is called once at
                     the end. Skipped when None.
        on_progress: Optional callback, invoked with ``(clip_name, i / count)``
                     before each clip is processed.

    Returns:
        The reports, as a list.
    """
    count = len(reports)
    for i, report in enumerate(reports):
        if on_progress is not None:
            on_progress(report.clip_name, i / count)
        recover(report, candidates)

    if assets is not None:
        assets.save_assets()
    return list(reports)


def execute_unit_recovery(
    root: HierarchyNode,
    report: ClipReport,
    progress: ProgressReporter | None = None,
) -> ClipReport:
    """Flatten ``root`` and repair one clip, driving ``progress`` if given.

    The progress indicator is cleared when recovery finishes, even on error.
    """
    candidates = flatten(root)
    try:
        return recover(
            report, candidates, progress.display if progress is not None else None
        )
    finally:
        if progress is not None:
            progress.clear()


def execute_all_recovery(
    root: HierarchyNode,
    reports: Sequence[ClipReport],
    assets: AssetDatabase | None = None,
    progress: ProgressReporter | None = None,
) -> list[ClipReport]:
    """Flatten ``root`` once and repair every clip, saving assets at the end."""
    candidates = flatten(root)
    try:
        return recover_all(
            reports,
            candidates,
            assets=assets,
            on_progress=progress.display if progress is not None else None,
        )
    finally:
        if progress is not None:
            progress.clear()
