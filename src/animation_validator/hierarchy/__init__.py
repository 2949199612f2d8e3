"""Hierarchy subpackage: the object tree bindings are resolved against.

Re-exports the public API for the hierarchy module:
- HierarchyNode: dataclass for a named node with children and a parent link
- HierarchyBuilder: converts a JSON-shaped mapping into a HierarchyNode tree
- PathEntry: flattened (object name, root-relative path) record
- flatten / relative_path / get_object_name: path helpers
"""

from animation_validator.hierarchy.builder import HierarchyBuilder
from animation_validator.hierarchy.nodes import PATH_SEPARATOR, HierarchyNode
from animation_validator.hierarchy.paths import (
    PathEntry,
    flatten,
    get_object_name,
    relative_path,
)

__all__ = [
    "PATH_SEPARATOR",
    "HierarchyBuilder",
    "HierarchyNode",
    "PathEntry",
    "flatten",
    "get_object_name",
    "relative_path",
]
