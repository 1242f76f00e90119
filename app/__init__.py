# -*- coding: utf-8 -*-
"""
iDecide Application Core Module
"""

from .config import Config

__all__ = ["Config", "MainWindow"]


def __getattr__(name):
    """Lazy import so that loading Config does not pull in the widgets."""
    if name == "MainWindow":
        from .main_window import MainWindow
        return MainWindow
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
