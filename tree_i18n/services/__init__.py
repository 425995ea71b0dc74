"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from tree_i18n.services.dependencies import (
    SettingsDep,
    TranslationSessionDep,
)
from tree_i18n.services.providers import (
    get_settings,
    get_session_registry,
    get_translation_session,
)

__all__ = [
    "SettingsDep",
    "TranslationSessionDep",
    "get_settings",
    "get_session_registry",
    "get_translation_session",
]
