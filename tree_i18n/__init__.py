"""tree-i18n: hierarchical translation resolution.

Packages:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results (OperationResult, OperationStatus)
- i18n: Translation engine (TranslationSession, Locale, loaders)
- services: Dependency injection (TranslationSessionDep, get_translation_session)
"""

from tree_i18n.i18n import (
    Locale,
    SessionRegistry,
    TranslationSession,
    bootstrap_translation_session,
    create_translation_session,
)

__all__ = [
    "Locale",
    "SessionRegistry",
    "TranslationSession",
    "bootstrap_translation_session",
    "create_translation_session",
]
