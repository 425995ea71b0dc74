"""Structured logging infrastructure.

Logging for tree-i18n using structlog. Nothing is configured on import;
module loggers follow the configuration the host application installs.

Public API:
    - configure_logging(): Optional structlog setup for hosts without one
    - get_module_logger(): Get a lazy logger for the calling module

Example:
    from tree_i18n.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.debug("format_fallback", resource="fr_FR.json")
"""

from tree_i18n.logging.setup import (
    configure_logging,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
]
