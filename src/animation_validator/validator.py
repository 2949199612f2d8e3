"""Validator: finds curve bindings whose path no longer resolves.

For each clip, every element of all six curve arrays is resolved against the
hierarchy root with a child-name walk (``HierarchyNode.find``). Elements that
fail to resolve become ``Binding`` objects in the LOST state, each holding a
write-back handle so the recoverer can repair it later. Validation is a
read-only pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from animation_validator.clips.categories import CURVE_CATEGORIES, DEFAULT_ATTRIBUTE
from animation_validator.controller import Selection
from animation_validator.hierarchy.nodes import HierarchyNode
from animation_validator.hierarchy.paths import get_object_name
from animation_validator.models import Binding, ClipReport, FixState
from animation_validator.protocols import ClipStorage

__all__ = ["find_lost_bindings", "validate", "validate_selection"]

logger = logging.getLogger(__name__)


def find_lost_bindings(clip: ClipStorage, root: HierarchyNode) -> ClipReport:
    """Scan one clip and collect the bindings that do not resolve under ``root``.

    Args:
        clip: Serialized clip exposing the six curve arrays.
        root: Hierarchy root; binding paths are relative to it.

    Returns:
        A ClipReport whose bindings are all in the LOST state, in curve
        category order then element order. Empty when every path resolves.
    """
    lost: list[Binding] = []
    for category in CURVE_CATEGORIES:
        for element in clip.curves(category):
            if root.find(element.path) is not None:
                continue
            lost.append(
                Binding(
                    object_name=get_object_name(element.path),
                    path=element.path,
                    attribute=(
                        element.attribute
                        if element.attribute is not None
                        else DEFAULT_ATTRIBUTE
                    ),
                    handle=element.handle,
                    state=FixState.LOST,
                )
            )

    logger.debug("Clip %r: %d lost binding(s)", clip.name, len(lost))
    return ClipReport(clip_name=clip.name, bindings=lost)


def validate(root: HierarchyNode, clips: Iterable[ClipStorage]) -> list[ClipReport]:
    """Validate every clip against ``root``.

    Returns:
        One ClipReport per clip, in input order. Clips without lost bindings
        still get a (clean) report.
    """
    return [find_lost_bindings(clip, root) for clip in clips]


def validate_selection(selection: Selection) -> list[ClipReport] | None:
    """Validate the clips reachable from the host's selected object.

    Clips are taken from the animator controller's layers, in layer order
    then state order.

    Returns:
        The reports, or None when there is no selected object, the object
        has no animator, or the animator has no controller. The reason is
        logged as a warning; callers must not render or recover in that case.
    """
    selected = selection.active_object
    if selected is None:
        logger.warning("No object is selected")
        return None
    if selected.animator is None:
        logger.warning("Selected object %r has no Animator", selected.name)
        return None
    controller = selected.animator.controller
    if controller is None:
        logger.warning("Animator on %r has no AnimatorController", selected.name)
        return None

    return validate(selected.node, controller.iter_clips())
