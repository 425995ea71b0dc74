"""Structlog configuration and module loggers.

Importing tree_i18n never configures logging. Module loggers are lazy
structlog proxies: they render with whatever configuration is active when
a message is emitted, so a host that already configured structlog keeps
its own processors and renderer. Hosts without a logging setup of their
own call configure_logging() once at startup.

Translation diagnostics (missing keys, format fallbacks, locale detection
failures) are emitted at debug level.

Usage:
    from tree_i18n.logging import configure_logging, get_module_logger

    # At application startup, before bootstrap_translation_session()
    configure_logging(log_level="DEBUG", is_production=False)

    # In a module
    logger = get_module_logger()
    logger.debug("translation_not_found", key="home.title")
"""

import inspect
import logging
import sys
from typing import Optional

import structlog

from tree_i18n.configuration import settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
):
    """Configure structlog on top of the standard library logging module.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ...).
            Defaults to settings.LOG_LEVEL.
        is_production: JSON output when True, console output otherwise.
            Defaults to settings.is_production.

    Returns:
        A logger bound to the new configuration.
    """
    prod_mode = is_production if is_production is not None else settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # basicConfig is a no-op when the root logger already has handlers
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.root.setLevel(getattr(logging, level_name, logging.INFO))

    return structlog.get_logger()


def get_module_logger():
    """Return a lazy logger for the calling module.

    The logger carries component and module_path context, e.g. for
    tree_i18n/i18n/loader.py: {"component": "loader",
    "module_path": "tree_i18n.i18n.loader"}.
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        module_name,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
