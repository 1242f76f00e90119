# -*- coding: utf-8 -*-
"""
iDecide UI Components
"""

from .base_table_model import BaseTableModel
from .sidebar import Sidebar

__all__ = [
    "BaseTableModel",
    "Sidebar",
]
