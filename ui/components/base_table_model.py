# -*- coding: utf-8 -*-
"""
Reusable table model over dict rows.
"""

from typing import Callable, Dict, Optional, Sequence, Tuple

from PyQt5.QtCore import QAbstractTableModel, Qt, QModelIndex
from PyQt5.QtGui import QColor

from services.display_mappings import badge_colors


class BaseTableModel(QAbstractTableModel):
    """
    Base reusable table model with:
    - items storage (store rows as dicts)
    - column configuration: (key, header) pairs
    - optional per-column formatters
    - badge colours for one status column
    """

    def __init__(self, items=None, columns: Sequence[Tuple[str, str]] = None,
                 formatters: Optional[Dict[str, Callable]] = None,
                 status_key: Optional[str] = None,
                 status_color: Optional[Callable[[str], str]] = None):
        super().__init__()
        self._items = items or []
        self._columns = list(columns or [])
        self._formatters = formatters or {}
        self._status_key = status_key
        self._status_color = status_color

    def rowCount(self, parent=QModelIndex()):
        return len(self._items)

    def columnCount(self, parent=QModelIndex()):
        return len(self._columns)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None

        if orientation == Qt.Horizontal:
            _, header = self._columns[section]
            return header

        return section + 1

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None

        item = self._items[index.row()]
        key, _ = self._columns[index.column()]

        if role == Qt.DisplayRole:
            return self.display_value(item, key)

        if (role in (Qt.BackgroundRole, Qt.ForegroundRole)
                and key == self._status_key and self._status_color):
            background, foreground = badge_colors(self._status_color(item.get(key)))
            return QColor(background if role == Qt.BackgroundRole else foreground)

        return None

    def display_value(self, item: dict, key: str) -> str:
        value = item.get(key)
        formatter = self._formatters.get(key)
        if formatter is not None:
            return formatter(value)
        if value is None:
            return "-"
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v) for v in value)
        return str(value)

    def set_items(self, items):
        self.beginResetModel()
        self._items = list(items)
        self.endResetModel()

    def get_item(self, row: int):
        """Return the underlying item at `row` or None if out of range."""
        if row is None:
            return None
        if 0 <= int(row) < len(self._items):
            return self._items[int(row)]
        return None
