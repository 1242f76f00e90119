# -*- coding: utf-8 -*-
"""
Unit tests for the logging setup.

Tests cover:
- File handler writing module records with the signed-in user
- Console level taken from the argument
"""

import logging

import pytest

from utils.logger import LOGGER_NAME, get_logger, set_log_user, setup_logger


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "logs" / "app.log"
    setup_logger(log_path=path, console_level="warning")
    yield path
    set_log_user(None)
    setup_logger()


def _flush():
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()


class TestSetupLogger:
    """Tests for setup_logger() and set_log_user()."""

    def test_records_carry_user(self, log_file):
        """Test file lines name the module and the signed-in user."""
        set_log_user("user-123")
        get_logger("services.http_data_store").info("[STORE REQ] GET /rest/v1/legal_documents")
        set_log_user(None)
        get_logger("app.main_window").info("signed out")
        _flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert "user=user-123 | idecide.services.http_data_store" in lines[0]
        assert lines[0].endswith("[STORE REQ] GET /rest/v1/legal_documents")
        assert "user=- | idecide.app.main_window" in lines[1]

    def test_console_level(self, log_file):
        """Test the console handler uses the requested level and the file keeps DEBUG."""
        handlers = logging.getLogger(LOGGER_NAME).handlers
        levels = sorted(h.level for h in handlers)
        assert levels == [logging.DEBUG, logging.WARNING]

    def test_setup_replaces_handlers(self, log_file):
        """Test setting up twice does not duplicate handlers."""
        setup_logger(log_path=log_file, console_level="info")
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 2
