# -*- coding: utf-8 -*-
"""
Client-side search and filter predicates for record lists.

Records are plain dict rows as returned by the store. All matching is
case-insensitive substring matching; list-valued fields match when any
member matches.
"""

import calendar
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Sequence

from utils.helpers import parse_date

ALL = "all"

# Date range filter values
RANGE_ALL = "all"
RANGE_WEEK = "week"
RANGE_MONTH = "month"
RANGE_QUARTER = "quarter"

DATE_RANGES = [
    (RANGE_ALL, "All time"),
    (RANGE_WEEK, "Last 7 days"),
    (RANGE_MONTH, "Last month"),
    (RANGE_QUARTER, "Last 3 months"),
]


def _is_disabled(category: Optional[str]) -> bool:
    return category is None or category == "" or category == ALL


def matches_query(record: Dict[str, Any], query: str, fields: Sequence[str]) -> bool:
    """True when ``query`` occurs in any of ``fields`` (ignoring case)."""
    if not query:
        return True
    needle = query.lower()
    for field_name in fields:
        value = record.get(field_name)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if any(item is not None and needle in str(item).lower() for item in value):
                return True
        elif needle in str(value).lower():
            return True
    return False


def matches_category(record: Dict[str, Any], category: Optional[str],
                     category_field: Optional[str]) -> bool:
    """Exact match of ``category_field``; "all"/""/None match everything."""
    if _is_disabled(category) or not category_field:
        return True
    return record.get(category_field) == category


def _months_ago(today: date, months: int) -> date:
    month = today.month - months
    year = today.year
    while month < 1:
        month += 12
        year -= 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def range_start(date_range: str, today: Optional[date] = None) -> Optional[date]:
    """First date inside ``date_range``; None for "all"."""
    today = today or date.today()
    if date_range == RANGE_WEEK:
        return today - timedelta(days=7)
    if date_range == RANGE_MONTH:
        return _months_ago(today, 1)
    if date_range == RANGE_QUARTER:
        return _months_ago(today, 3)
    if _is_disabled(date_range):
        return None
    raise ValueError(f"Unknown date range: {date_range}")


def matches_date_range(record: Dict[str, Any], date_range: Optional[str],
                       date_field: str = "date", today: Optional[date] = None) -> bool:
    """True when the record's date is on or after the range start."""
    start = range_start(date_range or RANGE_ALL, today)
    if start is None:
        return True
    value = parse_date(record.get(date_field))
    if value is None:
        return False
    return value >= start


def filter_records(
    records: Iterable[Dict[str, Any]],
    query: str = "",
    category: Optional[str] = ALL,
    fields: Sequence[str] = ("name",),
    category_field: Optional[str] = "status",
    date_range: Optional[str] = None,
    date_field: str = "date",
    today: Optional[date] = None
) -> List[Dict[str, Any]]:
    """
    Apply text, category and date-range filters, combined with AND.

    With an empty query, category "all" and no date range the records
    come back unchanged and in order.
    """
    return [
        record for record in records
        if matches_query(record, query, fields)
        and matches_category(record, category, category_field)
        and matches_date_range(record, date_range, date_field, today)
    ]
