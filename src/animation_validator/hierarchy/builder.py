"""HierarchyBuilder: converts a JSON-shaped mapping into a HierarchyNode tree.

The expected shape is one mapping per object::

    {"name": "Root", "children": [{"name": "Arm", "children": [...]}]}

``children`` is optional and defaults to an empty list. The builder walks the
document iteratively, so deep hierarchies do not hit the recursion limit.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from animation_validator.errors import SceneFormatError
from animation_validator.hierarchy.nodes import HierarchyNode


@dataclass
class HierarchyBuilder:
    """Builds a fresh HierarchyNode tree from a nested mapping.

    Example::

        builder = HierarchyBuilder()
        root = builder.build({"name": "Root", "children": [{"name": "Arm"}]})
        # root.find("Arm").parent is root
    """

    def build(self, document: Mapping[str, Any], location: str = "root") -> HierarchyNode:
        """Convert ``document`` into a HierarchyNode tree.

        Args:
            document: Mapping with a ``name`` string and optional ``children``
                      list of mappings of the same shape.
            location: Human-readable location of ``document`` used in error
                      messages. Defaults to ``"root"``.

        Returns:
            The root HierarchyNode, with ``parent`` back-references wired.

        Raises:
            SceneFormatError: If a node is not a mapping, has a non-string
                name, or has a ``children`` value that is not a list.
        """
        root = HierarchyNode(name=self._name_of(document, location))
        pending: list[tuple[HierarchyNode, Mapping[str, Any], str]] = [
            (root, document, location)
        ]

        while pending:
            node, raw, where = pending.pop()
            children = raw.get("children", [])
            if not isinstance(children, list):
                raise SceneFormatError(
                    f"{where}.children must be a list, got {type(children).__name__}"
                )

            for idx, raw_child in enumerate(children):
                child_where = f"{where}.children[{idx}]"
                child = node.add_child(
                    HierarchyNode(name=self._name_of(raw_child, child_where))
                )
                pending.append((child, raw_child, child_where))

        return root

    @staticmethod
    def _name_of(raw: Any, where: str) -> str:
        if not isinstance(raw, Mapping):
            raise SceneFormatError(
                f"{where} must be a mapping, got {type(raw).__name__}"
            )
        name = raw.get("name")
        if not isinstance(name, str):
            raise SceneFormatError(
                f"{where}.name must be a string, got {type(name).__name__}"
            )
        return name
