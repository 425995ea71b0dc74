"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for settings and the active translation session.
"""

from typing import Annotated
from fastapi import Depends
from tree_i18n.configuration import Settings
from tree_i18n.i18n.translator import TranslationSession
from tree_i18n.services.providers import (
    get_settings,
    get_translation_session,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Active translation session dependency
# Usage: i18n.translate("home.title"), i18n.pluralize("cart.items", 3)
TranslationSessionDep = Annotated[TranslationSession, Depends(get_translation_session)]

__all__ = [
    "SettingsDep",
    "TranslationSessionDep",
]
