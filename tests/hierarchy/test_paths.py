"""Tests for get_object_name, relative_path and flatten."""

from __future__ import annotations

import logging

import pytest

from animation_validator.hierarchy.nodes import HierarchyNode
from animation_validator.hierarchy.paths import (
    PathEntry,
    flatten,
    get_object_name,
    relative_path,
)

from conftest import build_tree, node


class TestGetObjectName:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("Arm/Hand", "Hand"),
            ("Hand", "Hand"),
            ("", ""),
            ("Arm/", ""),
        ],
    )
    def test_last_segment(self, path: str, expected: str) -> None:
        assert get_object_name(path) == expected


class TestRelativePath:
    def test_excludes_root_name(self, arm_tree: HierarchyNode) -> None:
        hand = arm_tree.find("Arm/Hand")
        assert hand is not None
        assert relative_path(hand, arm_tree) == "Arm/Hand"

    def test_direct_child(self, arm_tree: HierarchyNode) -> None:
        arm = arm_tree.find("Arm")
        assert arm is not None
        assert relative_path(arm, arm_tree) == "Arm"

    def test_root_itself_is_empty(self, arm_tree: HierarchyNode) -> None:
        assert relative_path(arm_tree, arm_tree) == ""

    def test_relative_to_a_subtree_root(self, arm_tree: HierarchyNode) -> None:
        arm = arm_tree.find("Arm")
        hand = arm_tree.find("Arm/Hand")
        assert arm is not None and hand is not None
        assert relative_path(hand, arm) == "Hand"

    def test_unreachable_node_logs_error_and_returns(
        self, arm_tree: HierarchyNode, caplog: pytest.LogCaptureFixture
    ) -> None:
        stranger = HierarchyNode("Other")
        child = stranger.add_child(HierarchyNode("Child"))
        with caplog.at_level(logging.ERROR, logger="animation_validator"):
            path = relative_path(child, arm_tree)
        assert path == "Other/Child"
        assert "not reachable" in caplog.text


class TestFlatten:
    def test_preorder_entries(self, arm_tree: HierarchyNode) -> None:
        assert flatten(arm_tree) == [
            PathEntry("Arm", "Arm"),
            PathEntry("Hand", "Arm/Hand"),
            PathEntry("Leg", "Leg"),
            PathEntry("Foot", "Leg/Foot"),
        ]

    def test_root_without_children(self) -> None:
        assert flatten(HierarchyNode("Root")) == []

    def test_paths_resolve_back_to_their_nodes(self) -> None:
        root = build_tree(
            node("Root", node("A", node("B", node("C"))), node("E", node("D")))
        )
        for entry in flatten(root):
            resolved = root.find(entry.relative_path)
            assert resolved is not None
            assert resolved.name == entry.object_name

    def test_path_under_shadowed_sibling_does_not_resolve(self) -> None:
        root = build_tree(
            node("Root", node("A", node("B", node("C"))), node("A", node("D")))
        )
        paths = [e.relative_path for e in flatten(root)]
        assert paths == ["A", "A/B", "A/B/C", "A", "A/D"]
        assert root.find("A/B/C") is not None
        assert root.find("A/D") is None

    def test_duplicate_names_are_all_listed(self) -> None:
        root = build_tree(node("Root", node("L", node("Hand")), node("R", node("Hand"))))
        hands = [e for e in flatten(root) if e.object_name == "Hand"]
        assert [e.relative_path for e in hands] == ["L/Hand", "R/Hand"]

    def test_deterministic(self, arm_tree: HierarchyNode) -> None:
        assert flatten(arm_tree) == flatten(arm_tree)
