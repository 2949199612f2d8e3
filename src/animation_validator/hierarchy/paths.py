"""Root-relative paths and hierarchy flattening.

``flatten`` turns the live hierarchy into the candidate list used by the
recoverer: one ``PathEntry`` per descendant of the root, carrying the node's
name and its path relative to (and excluding) the root. Binding paths stored
in clips follow the same convention, which is what makes plain string
comparison between the two valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from animation_validator.hierarchy.nodes import PATH_SEPARATOR, HierarchyNode

__all__ = ["PathEntry", "flatten", "get_object_name", "relative_path"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PathEntry:
    """A flattened hierarchy record.

    Attributes:
        object_name:   Leaf object name.
        relative_path: Path from the root to the node, root name excluded.
    """

    object_name: str
    relative_path: str


def get_object_name(path: str) -> str:
    """Return the leaf name of a slash-separated path ("" for an empty path)."""
    if not path:
        return ""
    return path.rsplit(PATH_SEPARATOR, 1)[-1]


def relative_path(node: HierarchyNode, root: HierarchyNode) -> str:
    """Build ``node``'s path relative to ``root`` by walking its ancestors.

    A node that is not reachable from ``root`` is a configuration error. It
    is logged and the names collected up to the top of the node's own tree
    are returned instead of raising.

    Args:
        node: A descendant of ``root``.
        root: The hierarchy root; its own name is never part of the path.

    Returns:
        The slash-separated path, e.g. ``"Arm/Hand"``; empty for the root.
    """
    names: list[str] = []
    current: HierarchyNode | None = node
    while current is not None and current is not root:
        names.append(current.name)
        current = current.parent

    if current is None:
        logger.error(
            "Node %r is not reachable from hierarchy root %r", node.name, root.name
        )

    return PATH_SEPARATOR.join(reversed(names))


def flatten(root: HierarchyNode) -> list[PathEntry]:
    """Flatten every descendant of ``root`` into a PathEntry.

    Traversal is depth-first pre-order in child order, so the result is
    deterministic for a fixed tree. The root itself is excluded.

    Args:
        root: The hierarchy root.

    Returns:
        One PathEntry per descendant, in traversal order.
    """
    return [
        PathEntry(object_name=node.name, relative_path=relative_path(node, root))
        for node in root.iter_descendants()
    ]
