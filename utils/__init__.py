# -*- coding: utf-8 -*-
"""
iDecide Utility Module
"""

from .logger import get_logger, set_log_user, setup_logger
from .helpers import format_date, format_currency, parse_amount

__all__ = [
    "get_logger",
    "setup_logger",
    "set_log_user",
    "format_date",
    "format_currency",
    "parse_amount",
]
