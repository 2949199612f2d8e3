"""HierarchyNode dataclass: a named node in a rooted object hierarchy.

Provides the tree representation that clip bindings are resolved against.
Names are not guaranteed unique, so lookups walk children by name one path
segment at a time and take the first match, the same way the host resolves
an animation binding path.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

PATH_SEPARATOR = "/"


@dataclass(eq=False, slots=True)
class HierarchyNode:
    """A node in the object hierarchy.

    Attributes:
        name:     Object name. Not guaranteed unique, even among siblings.
        children: Ordered child nodes. Use ``add_child`` so the ``parent``
                  back-reference stays consistent.
        parent:   Non-owning back-reference to the parent node; ``None`` for
                  the root.

    Equality is identity: two distinct nodes with the same name are still
    different objects in the hierarchy.
    """

    name: str
    children: list[HierarchyNode] = field(default_factory=list)
    parent: HierarchyNode | None = field(default=None, repr=False)

    def add_child(self, child: HierarchyNode) -> HierarchyNode:
        """Append ``child`` and point its ``parent`` at this node.

        Returns:
            The appended child, for chaining while building trees by hand.
        """
        child.parent = self
        self.children.append(child)
        return child

    def child(self, name: str) -> HierarchyNode | None:
        """Return the first direct child called ``name``, or None."""
        for candidate in self.children:
            if candidate.name == name:
                return candidate
        return None

    def find(self, path: str) -> HierarchyNode | None:
        """Resolve a slash-separated path relative to this node.

        The first segment names a direct child of this node, never the node
        itself. An empty path resolves to this node. Resolution fails as soon
        as any segment (intermediate or final) has no matching child.

        Args:
            path: Root-relative object path, e.g. ``"Arm/Hand"``.

        Returns:
            The resolved node, or None when the path does not resolve.
        """
        if not path:
            return self

        node = self
        for segment in path.split(PATH_SEPARATOR):
            child = node.child(segment)
            if child is None:
                return None
            node = child
        return node

    def iter_descendants(self) -> Iterator[HierarchyNode]:
        """Yield every descendant (self excluded) in depth-first pre-order."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
