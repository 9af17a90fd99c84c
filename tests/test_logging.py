"""Tests for structured logging configuration."""

import importlib

import pytest
import structlog

from thailaw.core import logging as thailaw_logging
from thailaw.core.config import get_settings
from thailaw.core.logging import configure_logging, get_logger


@pytest.fixture
def restore_logging(monkeypatch):
    """Undo settings patches and reconfigure logging after the test."""
    yield
    monkeypatch.undo()
    configure_logging(force=True)


class TestConfigureLogging:
    """Test renderer selection and one-time configuration."""

    @pytest.mark.parametrize(
        "module",
        [
            "thailaw.citations.parser",
            "thailaw.citations.statute_id",
            "thailaw.citations.validator",
            "thailaw.search.fts_query",
            "thailaw.store.sql",
            "thailaw.tools.search",
            "thailaw.tools.eu",
        ],
    )
    def test_modules_configure_on_import(self, module):
        """Test every logging module goes through the shared configuration."""
        imported = importlib.import_module(module)

        assert hasattr(imported, "logger")
        assert thailaw_logging._configured

    def test_console_renderer_in_debug(self, monkeypatch, restore_logging):
        """Test debug mode renders to the console."""
        monkeypatch.setattr(get_settings(), "debug", True)

        configure_logging(force=True)

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_json_renderer_by_default(self, monkeypatch, restore_logging):
        """Test non-debug mode renders JSON."""
        monkeypatch.setattr(get_settings(), "debug", False)
        monkeypatch.setattr(get_settings(), "log_json", True)

        configure_logging(force=True)

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    def test_second_call_is_noop(self, monkeypatch, restore_logging):
        """Test configuration is not repeated without force."""
        configure_logging(force=True)
        before = structlog.get_config()["processors"]

        monkeypatch.setattr(get_settings(), "debug", not get_settings().debug)
        configure_logging()

        assert structlog.get_config()["processors"] == before

    def test_get_logger(self):
        """Test get_logger returns a usable logger."""
        logger = get_logger("thailaw.test")

        logger.info("logger_ready", check=True)
