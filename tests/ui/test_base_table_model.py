# -*- coding: utf-8 -*-
"""
Tests for the dict-row table model.
"""

from PyQt5.QtCore import Qt

from services.display_mappings import BADGE_COLORS, GREEN, get_document_status_color
from ui.components.base_table_model import BaseTableModel


def _model(qapp):
    return BaseTableModel(
        items=[
            {"id": "1", "title": "Will", "status": "active", "services": ["OT", "Physio"]},
            {"id": "2", "title": None, "status": "draft", "services": []},
        ],
        columns=[("title", "Title"), ("services", "Services"), ("status", "Status")],
        formatters={"status": str.upper},
        status_key="status",
        status_color=get_document_status_color,
    )


def test_shape_and_headers(qapp):
    """Test rows, columns and header labels."""
    model = _model(qapp)
    assert model.rowCount() == 2
    assert model.columnCount() == 3
    assert model.headerData(1, Qt.Horizontal) == "Services"


def test_display_values(qapp):
    """Test None, list and formatted values."""
    model = _model(qapp)
    assert model.data(model.index(0, 1)) == "OT, Physio"
    assert model.data(model.index(1, 0)) == "-"
    assert model.data(model.index(0, 2)) == "ACTIVE"


def test_status_badge(qapp):
    """Test the status column is coloured by its role."""
    model = _model(qapp)
    background = model.data(model.index(0, 2), Qt.BackgroundRole)
    assert background.name().upper() == BADGE_COLORS[GREEN][0].upper()
    assert model.data(model.index(0, 0), Qt.BackgroundRole) is None


def test_get_item(qapp):
    """Test rows are returned by index and out-of-range gives None."""
    model = _model(qapp)
    assert model.get_item(1)["id"] == "2"
    assert model.get_item(5) is None
