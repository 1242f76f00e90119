# -*- coding: utf-8 -*-
"""
Unit tests for status badge colours and display names.
"""

from services.display_mappings import (
    BADGE_COLORS, GRAY, GREEN, PURPLE, RED, YELLOW, STATUS_COLORS,
    badge_colors, get_agreement_status_color, get_budget_category_color,
    get_document_type_display, get_transaction_status_color
)


class TestStatusColors:
    """Tests for colour roles."""

    def test_agreement_status(self):
        """Test agreement statuses ignore case."""
        assert get_agreement_status_color("Active") == GREEN
        assert get_agreement_status_color("cancelled") == RED

    def test_unknown_is_neutral(self):
        """Test unknown or missing statuses are gray."""
        assert get_transaction_status_color("refunded") == GRAY
        assert get_transaction_status_color(None) == GRAY
        assert get_transaction_status_color("pending") == YELLOW

    def test_budget_category(self):
        """Test budget categories have their own colours."""
        assert get_budget_category_color("Capacity Building") == PURPLE
        assert get_budget_category_color("Travel") == GRAY

    def test_badge_colors_fallback(self):
        """Test an unknown role falls back to gray."""
        assert badge_colors("teal") == BADGE_COLORS[GRAY]

    def test_every_list_has_colors(self):
        """Test each record list has a status colour lookup."""
        assert set(STATUS_COLORS) == {
            "legal_documents", "service_agreements", "participants",
            "service_providers", "transactions",
        }


class TestDisplayNames:
    """Tests for display names."""

    def test_document_type(self):
        """Test document types have readable names."""
        assert get_document_type_display("poa") == "Power of Attorney"
        assert get_document_type_display("codicil") == "codicil"
        assert get_document_type_display(None) == ""
