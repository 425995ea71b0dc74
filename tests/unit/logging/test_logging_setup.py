"""Unit tests for tree_i18n.logging setup.

Tests cover:
- Import without side effects on the host's structlog configuration
- Explicit configuration (level, production vs development rendering)
- Module logger context binding
"""

import importlib
import logging
import sys
from unittest.mock import patch

import pytest
import structlog

from tree_i18n.logging import configure_logging, get_module_logger


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the structlog and root logger configuration back after each test."""
    saved_config = structlog.get_config()
    saved_level = logging.root.level
    yield
    structlog.configure(**saved_config)
    logging.root.setLevel(saved_level)


@pytest.mark.unit
class TestImportSideEffects:
    """Importing the package must not touch logging configuration."""

    def test_import_keeps_host_structlog_configuration(self):
        """A host configuration installed before import stays in place."""
        renderer = structlog.processors.KeyValueRenderer()
        structlog.configure(processors=[renderer])

        fresh_modules = {
            name: module
            for name, module in sys.modules.items()
            if name != "tree_i18n" and not name.startswith("tree_i18n.")
        }
        with patch.dict(sys.modules, fresh_modules, clear=True):
            importlib.import_module("tree_i18n")

        assert structlog.get_config()["processors"] == [renderer]

    def test_import_keeps_root_logger_level(self):
        """The root logger level is left alone on import."""
        logging.root.setLevel(logging.WARNING)

        fresh_modules = {
            name: module
            for name, module in sys.modules.items()
            if name != "tree_i18n" and not name.startswith("tree_i18n.")
        }
        with patch.dict(sys.modules, fresh_modules, clear=True):
            importlib.import_module("tree_i18n")

        assert logging.root.level == logging.WARNING


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for configure_logging()."""

    def test_configure_logging_returns_logger(self):
        """configure_logging returns a logger instance."""
        logger = configure_logging(log_level="INFO", is_production=False)
        assert logger is not None
        assert hasattr(logger, "bind")

    def test_production_renders_json(self):
        """Production mode ends the processor chain with a JSON renderer."""
        configure_logging(is_production=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        """Development mode ends the processor chain with a console renderer."""
        configure_logging(is_production=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_log_level_applied_to_root_logger(self):
        """The requested level is set on the root logger."""
        configure_logging(log_level="debug", is_production=False)
        assert logging.root.level == logging.DEBUG

    def test_unknown_log_level_defaults_to_info(self):
        """An unknown level name falls back to INFO."""
        configure_logging(log_level="LOUD", is_production=False)
        assert logging.root.level == logging.INFO


@pytest.mark.unit
class TestModuleLogger:
    """Tests for get_module_logger()."""

    def test_module_logger_binds_context(self):
        """get_module_logger names the logger after the calling module."""
        with patch("tree_i18n.logging.setup.structlog.get_logger") as mock_get_logger:
            get_module_logger()

        mock_get_logger.assert_called_once_with(
            __name__,
            component=__name__.split(".")[-1],
            module_path=__name__,
        )

    def test_module_logger_follows_later_configuration(self):
        """A logger created before configuration uses the configuration."""
        logger = get_module_logger()
        captured = []

        def capture(_, __, event_dict):
            captured.append(event_dict)
            raise structlog.DropEvent

        structlog.configure(
            processors=[capture],
            wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
            cache_logger_on_first_use=False,
        )
        logger.debug("translation_not_found", key="home.title")

        assert captured == [
            {
                "event": "translation_not_found",
                "key": "home.title",
                "component": __name__.split(".")[-1],
                "module_path": __name__,
            }
        ]
