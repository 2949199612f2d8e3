"""Tests for CurveCategory and SerializedClip staged writes."""

from __future__ import annotations

import pytest

from animation_validator.clips.categories import CURVE_CATEGORIES, CurveCategory
from animation_validator.clips.storage import SerializedClip
from animation_validator.errors import SceneFormatError
from animation_validator.protocols import ClipStorage

from conftest import make_clip


class TestCurveCategory:
    def test_exactly_six_categories(self) -> None:
        assert len(CurveCategory) == 6
        assert len(CURVE_CATEGORIES) == 6

    def test_serialized_names_in_scan_order(self) -> None:
        assert [c.value for c in CURVE_CATEGORIES] == [
            "m_PositionCurves",
            "m_ScaleCurves",
            "m_FloatCurves",
            "m_PPtrCurves",
            "m_EditorCurves",
            "m_EulerEditorCurves",
        ]

    def test_members_are_str_instances(self) -> None:
        assert CurveCategory.FLOAT == "m_FloatCurves"


class TestCurves:
    def test_elements_expose_path_attribute_and_index(self) -> None:
        clip = make_clip(
            "Wave",
            m_FloatCurves=[{"path": "A"}, {"path": "A/B", "attribute": "m_Alpha"}],
        )
        elements = clip.curves(CurveCategory.FLOAT)
        assert [(e.index, e.path, e.attribute) for e in elements] == [
            (0, "A", None),
            (1, "A/B", "m_Alpha"),
        ]
        assert all(e.category is CurveCategory.FLOAT for e in elements)

    def test_missing_category_is_empty(self) -> None:
        clip = make_clip("Empty")
        assert clip.curves(CurveCategory.PPTR) == []

    def test_missing_path_reads_as_empty_string(self) -> None:
        clip = make_clip("Root", m_PositionCurves=[{"curve": {}}])
        assert clip.curves(CurveCategory.POSITION)[0].path == ""

    def test_non_string_attribute_reads_as_none(self) -> None:
        clip = make_clip("C", m_FloatCurves=[{"path": "A", "attribute": 7}])
        assert clip.curves(CurveCategory.FLOAT)[0].attribute is None

    def test_satisfies_clip_storage_protocol(self) -> None:
        assert isinstance(make_clip("Wave"), ClipStorage)

    def test_name(self) -> None:
        assert make_clip("Wave").name == "Wave"
        assert SerializedClip({}).name == ""


class TestStagedWrites:
    def test_write_is_staged_until_applied(self) -> None:
        clip = make_clip("C", m_PositionCurves=[{"path": "Arm/Hand"}])
        handle = clip.curves(CurveCategory.POSITION)[0].handle
        handle.string_value = "Leg/Hand"

        assert handle.string_value == "Leg/Hand"
        assert clip.has_modified_properties
        assert clip.document["m_PositionCurves"][0]["path"] == "Arm/Hand"
        assert not clip.dirty

    def test_apply_commits_and_marks_dirty(self) -> None:
        clip = make_clip("C", m_PositionCurves=[{"path": "Arm/Hand", "curve": {"k": 1}}])
        clip.curves(CurveCategory.POSITION)[0].handle.string_value = "Leg/Hand"

        assert clip.apply_modified_properties() is True
        assert clip.document["m_PositionCurves"][0] == {
            "path": "Leg/Hand",
            "curve": {"k": 1},
        }
        assert clip.dirty
        assert not clip.has_modified_properties

    def test_apply_without_change_is_not_dirty(self) -> None:
        clip = make_clip("C", m_PositionCurves=[{"path": "Arm"}])
        clip.curves(CurveCategory.POSITION)[0].handle.string_value = "Arm"
        assert clip.apply_modified_properties() is False
        assert not clip.dirty

    def test_mark_saved_clears_dirty(self) -> None:
        clip = make_clip("C", m_PositionCurves=[{"path": "Arm"}])
        clip.curves(CurveCategory.POSITION)[0].handle.string_value = "Leg"
        clip.apply_modified_properties()
        clip.mark_saved()
        assert not clip.dirty

    def test_handle_knows_its_clip(self) -> None:
        clip = make_clip("C", m_ScaleCurves=[{"path": "Arm"}])
        handle = clip.curves(CurveCategory.SCALE)[0].handle
        assert handle.serialized_clip is clip
        assert "m_ScaleCurves" in repr(handle)

    def test_stale_handle_raises(self) -> None:
        clip = make_clip("C", m_ScaleCurves=[{"path": "Arm"}])
        handle = clip.curves(CurveCategory.SCALE)[0].handle
        clip.document["m_ScaleCurves"].clear()
        with pytest.raises(IndexError):
            handle.string_value = "Leg"


class TestDocumentErrors:
    def test_non_string_name(self) -> None:
        with pytest.raises(SceneFormatError, match="m_Name"):
            SerializedClip({"m_Name": 5})

    def test_non_list_category(self) -> None:
        with pytest.raises(SceneFormatError, match="m_FloatCurves must be a list"):
            SerializedClip({"m_FloatCurves": {"path": "A"}})

    def test_non_mapping_element(self) -> None:
        with pytest.raises(SceneFormatError, match=r"m_PPtrCurves\[0\]"):
            SerializedClip({"m_PPtrCurves": ["A"]})

    @pytest.mark.parametrize("path", [None, 3, ["Arm"]])
    def test_non_string_path(self, path: object) -> None:
        with pytest.raises(
            SceneFormatError, match=r"m_PositionCurves\[1\]\.path must be a string"
        ):
            SerializedClip({"m_PositionCurves": [{"path": "Arm"}, {"path": path}]})
