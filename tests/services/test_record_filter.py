# -*- coding: utf-8 -*-
"""
Unit tests for the record list search and filter predicates.

Tests cover:
- Text search over several fields, ignoring case
- List-valued and missing fields
- Category filter and its "all" value
- Date ranges relative to a fixed day
- Combination of all filters
"""

from datetime import date

import pytest

from services.record_filter import (
    ALL, RANGE_MONTH, RANGE_QUARTER, RANGE_WEEK,
    filter_records, matches_category, matches_query, range_start
)

TODAY = date(2024, 5, 31)

RECORDS = [
    {"id": "1", "name": "John Smith", "services": ["Physio", "OT"], "status": "active",
     "date": "2024-05-30"},
    {"id": "2", "name": "Mary Jones", "services": ["Speech"], "status": "pending",
     "date": "2024-04-15"},
    {"id": "3", "name": None, "services": [], "status": "active", "date": "2023-12-01"},
]


class TestMatchesQuery:
    """Tests for text search."""

    def test_empty_query_matches(self):
        """Test an empty query matches every record."""
        assert matches_query(RECORDS[2], "", ["name"])

    def test_case_insensitive_substring(self):
        """Test "JOHN" matches "John Smith"."""
        assert matches_query(RECORDS[0], "JOHN", ["name"])
        assert not matches_query(RECORDS[1], "JOHN", ["name"])

    def test_list_field_matches_any_member(self):
        """Test a list-valued field matches when one member matches."""
        assert matches_query(RECORDS[0], "physio", ["name", "services"])
        assert not matches_query(RECORDS[1], "physio", ["name", "services"])

    def test_missing_field_skipped(self):
        """Test None values never match and never raise."""
        assert not matches_query(RECORDS[2], "smith", ["name", "services", "email"])


class TestMatchesCategory:
    """Tests for the category filter."""

    @pytest.mark.parametrize("category", [ALL, "", None])
    def test_disabled_values_match_everything(self, category):
        """Test "all", "" and None disable the filter."""
        assert matches_category(RECORDS[1], category, "status")

    def test_exact_match(self):
        """Test the category must equal the field."""
        assert matches_category(RECORDS[0], "active", "status")
        assert not matches_category(RECORDS[1], "active", "status")

    def test_no_category_field(self):
        """Test lists without a category field ignore the filter."""
        assert matches_category(RECORDS[1], "active", None)


class TestRangeStart:
    """Tests for date range starts."""

    def test_week(self):
        """Test the week range starts seven days back."""
        assert range_start(RANGE_WEEK, TODAY) == date(2024, 5, 24)

    def test_month_clamps_day(self):
        """Test one month before the 31st lands on the last day of the month."""
        assert range_start(RANGE_MONTH, TODAY) == date(2024, 4, 30)

    def test_quarter_crosses_year(self):
        """Test three months before January is in the previous year."""
        assert range_start(RANGE_QUARTER, date(2024, 1, 15)) == date(2023, 10, 15)

    def test_all(self):
        """Test "all" has no start."""
        assert range_start(ALL, TODAY) is None

    def test_unknown_range(self):
        """Test an unknown range raises ValueError."""
        with pytest.raises(ValueError):
            range_start("year", TODAY)


class TestFilterRecords:
    """Tests for the combined filter."""

    def test_identity(self):
        """Test no filters return the records unchanged and in order."""
        result = filter_records(RECORDS, fields=("name",), category_field="status")
        assert result == RECORDS

    def test_query_and_category(self):
        """Test query and category are combined with AND."""
        result = filter_records(RECORDS, query="o", category="active",
                                fields=("name",), category_field="status")
        assert [r["id"] for r in result] == ["1"]

    def test_date_range(self):
        """Test records before the range start are dropped."""
        result = filter_records(RECORDS, date_range=RANGE_MONTH, date_field="date",
                                fields=("name",), today=TODAY)
        assert [r["id"] for r in result] == ["1"]

    def test_quarter_keeps_older_records(self):
        """Test a wider range keeps records inside it."""
        result = filter_records(RECORDS, date_range=RANGE_QUARTER, date_field="date",
                                fields=("name",), today=TODAY)
        assert [r["id"] for r in result] == ["1", "2"]

    def test_record_without_date_excluded(self):
        """Test a record without a date fails an active date range."""
        records = [{"id": "4", "name": "No Date"}]
        assert filter_records(records, date_range=RANGE_WEEK, today=TODAY) == []
