# -*- coding: utf-8 -*-
"""
Tests for the Field Binder.

Tests cover:
- Path parsing
- Structural sharing of untouched subtrees
- Composition of edits
- List operations
"""

import pytest

from ui.wizards.framework.field_binder import (
    append_to, bind, get_value, insert_at, join_path, remove_at, replace_at,
    split_path, toggle_in, update_in
)


@pytest.fixture
def draft():
    return {
        "testator": {"name": "", "address": ""},
        "executor": {"name": "Sam"},
        "beneficiaries": [
            {"name": "A", "share": "50%"},
            {"name": "B", "share": "50%"},
        ],
        "powers": ["Tax matters"],
    }


class TestPaths:
    """Test path normalization."""

    def test_dotted_path_with_index(self):
        """Test numeric segments become list indexes."""
        assert split_path("beneficiaries.0.share") == ("beneficiaries", 0, "share")

    def test_sequence_path(self):
        """Test tuple paths pass through."""
        assert split_path(("a", 1, "b")) == ("a", 1, "b")

    def test_empty_path_rejected(self):
        """Test empty paths and empty segments are invalid."""
        with pytest.raises(ValueError):
            split_path("")
        with pytest.raises(ValueError):
            split_path("a..b")

    def test_join_path(self):
        """Test joining fragments, skipping an empty relative path."""
        assert join_path("trustees", 0, "name") == ("trustees", 0, "name")
        assert join_path(("services",), 2, ()) == ("services", 2)

    def test_get_value_missing(self):
        """Test missing paths return the default."""
        assert get_value({"a": {}}, "a.b.c", "x") == "x"
        assert get_value({"a": []}, "a.3") is None


class TestBind:
    """Test single-field updates."""

    def test_bind_sets_value(self, draft):
        """Test the new draft holds the value and the old one is untouched."""
        updated = bind(draft, "testator.name", "Jane Doe")

        assert get_value(updated, "testator.name") == "Jane Doe"
        assert draft["testator"]["name"] == ""

    def test_untouched_subtrees_are_shared(self, draft):
        """Test only the containers on the path are copied."""
        updated = bind(draft, "testator.name", "Jane Doe")

        assert updated is not draft
        assert updated["testator"] is not draft["testator"]
        assert updated["executor"] is draft["executor"]
        assert updated["beneficiaries"] is draft["beneficiaries"]

    def test_list_item_update_shares_siblings(self, draft):
        """Test updating one list item keeps the other items shared."""
        updated = bind(draft, ("beneficiaries", 1, "share"), "25%")

        assert updated["beneficiaries"][1]["share"] == "25%"
        assert updated["beneficiaries"][0] is draft["beneficiaries"][0]
        assert draft["beneficiaries"][1]["share"] == "50%"

    def test_edits_compose(self, draft):
        """Test bind(bind(d, p1, v1), p2, v2) keeps both values."""
        updated = bind(bind(draft, "testator.name", "Jane"), "testator.address", "1 Main St")

        assert updated["testator"] == {"name": "Jane", "address": "1 Main St"}

    def test_same_path_last_write_wins(self, draft):
        """Test a later bind to the same path replaces the earlier one."""
        updated = bind(bind(draft, "executor.name", "One"), "executor.name", "Two")
        assert updated["executor"]["name"] == "Two"

    def test_missing_section_created(self):
        """Test intermediate dicts are created when absent."""
        updated = bind({}, "finalWishes.funeral", "Quiet")
        assert updated == {"finalWishes": {"funeral": "Quiet"}}

    def test_update_in_receives_old_value(self, draft):
        """Test update_in passes the current value to the function."""
        updated = update_in(draft, "executor.name", lambda old: old.upper())
        assert updated["executor"]["name"] == "SAM"


class TestListOperations:
    """Test list helpers."""

    def test_append(self, draft):
        """Test append adds at the end."""
        updated = append_to(draft, "beneficiaries", {"name": "C", "share": ""})

        assert [b["name"] for b in updated["beneficiaries"]] == ["A", "B", "C"]
        assert len(draft["beneficiaries"]) == 2

    def test_insert_at_front(self, draft):
        """Test insert at index 0."""
        updated = insert_at(draft, "beneficiaries", 0, {"name": "Z"})
        assert updated["beneficiaries"][0] == {"name": "Z"}

    def test_insert_out_of_range(self, draft):
        """Test insert beyond the end raises."""
        with pytest.raises(IndexError):
            insert_at(draft, "beneficiaries", 5, {})

    def test_remove(self, draft):
        """Test remove drops the item."""
        updated = remove_at(draft, "beneficiaries", 0)
        assert [b["name"] for b in updated["beneficiaries"]] == ["B"]

    def test_remove_out_of_range(self, draft):
        """Test removing a missing index raises."""
        with pytest.raises(IndexError):
            remove_at(draft, "beneficiaries", 2)

    def test_replace(self, draft):
        """Test replace swaps one item."""
        updated = replace_at(draft, "beneficiaries", 1, {"name": "Q"})
        assert updated["beneficiaries"][1] == {"name": "Q"}
        assert updated["beneficiaries"][0] is draft["beneficiaries"][0]

    def test_toggle_adds_then_removes(self, draft):
        """Test toggle is its own inverse."""
        added = toggle_in(draft, "powers", "Business operations")
        assert added["powers"] == ["Tax matters", "Business operations"]

        removed = toggle_in(added, "powers", "Business operations")
        assert removed["powers"] == ["Tax matters"]

    def test_list_op_on_non_list(self, draft):
        """Test list helpers refuse non-list fields."""
        with pytest.raises(TypeError):
            append_to(draft, "executor", "x")
