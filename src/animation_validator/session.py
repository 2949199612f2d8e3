"""ValidatorSession: the state of one open results view.

Holds the selected root and its clip reports from the moment the view is
opened until it is closed. Each view owns its own session; nothing is kept in
module-level state, so two sessions never interfere with each other.

Example::

    session = ValidatorSession.open(selection, assets=assets)
    if session is not None:
        for report in session.reports:
            if not report.has_no_error:
                session.fix_clip(report)
        session.close()
"""

from __future__ import annotations

from animation_validator.controller import Selection
from animation_validator.errors import SessionClosedError
from animation_validator.hierarchy.nodes import HierarchyNode
from animation_validator.models import ClipReport
from animation_validator.protocols import AssetDatabase, ProgressReporter
from animation_validator.recoverer import execute_all_recovery, execute_unit_recovery
from animation_validator.validator import validate_selection

__all__ = ["ValidatorSession"]


class ValidatorSession:
    """Validation results plus the recovery actions available on them.

    Args:
        root:     Hierarchy root the reports were validated against.
        reports:  One report per clip, in discovery order.
        assets:   Asset database flushed after ``fix_all``. Optional.
        progress: Progress indicator driven during recovery. Optional.
    """

    def __init__(
        self,
        root: HierarchyNode,
        reports: list[ClipReport],
        assets: AssetDatabase | None = None,
        progress: ProgressReporter | None = None,
    ) -> None:
        self._root = root
        self._reports: list[ClipReport] | None = reports
        self._assets = assets
        self._progress = progress

    @classmethod
    def open(
        cls,
        selection: Selection,
        assets: AssetDatabase | None = None,
        progress: ProgressReporter | None = None,
    ) -> ValidatorSession | None:
        """Validate the current selection and open a session on the result.

        Returns:
            The session, or None when the selection cannot be validated (no
            object, no animator, or no controller).
        """
        reports = validate_selection(selection)
        selected = selection.active_object
        if reports is None or selected is None:
            return None
        return cls(selected.node, reports, assets, progress)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> HierarchyNode:
        return self._root

    @property
    def is_open(self) -> bool:
        return self._reports is not None

    @property
    def reports(self) -> list[ClipReport]:
        return self._require_open()

    @property
    def has_no_error(self) -> bool:
        """True when every clip report is error-free."""
        return all(report.has_no_error for report in self._require_open())

    @property
    def needs_fix_all(self) -> bool:
        """True when batch recovery is worth offering: several clips, some with errors."""
        reports = self._require_open()
        return len(reports) > 1 and not all(r.has_no_error for r in reports)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def fix_clip(self, report: ClipReport) -> ClipReport:
        """Run unit recovery on one of this session's reports."""
        if not any(report is r for r in self._require_open()):
            raise ValueError(
                f"report for clip {report.clip_name!r} does not belong to this session"
            )
        return execute_unit_recovery(self._root, report, progress=self._progress)

    def fix_all(self) -> list[ClipReport]:
        """Run batch recovery over every report, then save assets once."""
        return execute_all_recovery(
            self._root,
            self._require_open(),
            assets=self._assets,
            progress=self._progress,
        )

    def close(self) -> None:
        """Release the report list. Closing twice is a no-op."""
        if self._reports is not None:
            self._reports.clear()
        self._reports = None

    def _require_open(self) -> list[ClipReport]:
        if self._reports is None:
            raise SessionClosedError("session is closed")
        return self._reports
