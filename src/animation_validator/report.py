"""Plain-text rendering of validation results.

One block per clip, headed by an OK/NG marker and the clip name, followed by
one line per lost binding: ``path : attribute`` and the binding's state
detail. Fixed bindings show the path they were rewritten to.
"""

from __future__ import annotations

from collections.abc import Sequence

from animation_validator.models import Binding, ClipReport, FixState

__all__ = ["describe_state", "format_binding", "format_report"]

_DETAILS: dict[FixState, str] = {
    FixState.NONE: "",
    FixState.LOST: "missing",
    FixState.ERROR_NO_SAME_NAME: "no object with the same name was found",
    FixState.ERROR_DUPLICATE: "multiple objects with the same name exist in the hierarchy",
    FixState.FIXED: "animation path was changed",
}

INDENT = "    "


def describe_state(state: FixState) -> str:
    """Return the human-readable detail text for ``state``."""
    return _DETAILS[state]


def format_binding(binding: Binding) -> str:
    marker = "ok" if binding.state is FixState.FIXED else "ng"
    line = f"[{marker}] {binding.path} : {binding.attribute}"
    detail = describe_state(binding.state)
    if binding.state is FixState.FIXED and binding.fixed_path is not None:
        detail = f"{detail} -> {binding.fixed_path}"
    return f"{line} -> {detail}" if detail else line


def format_report(reports: Sequence[ClipReport]) -> str:
    """Render every report as a text block; an empty list renders a notice."""
    if not reports:
        return "No animation clips found."

    lines: list[str] = []
    for report in reports:
        if report.has_no_error:
            lines.append(f"[OK] {report.clip_name} -> no problems")
        else:
            lines.append(f"[NG] {report.clip_name} ({report.error_count} lost)")
        lines.extend(f"{INDENT}{format_binding(b)}" for b in report.bindings)
    return "\n".join(lines)
