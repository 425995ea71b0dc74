"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class

Example:
    ```python
    from tree_i18n.services import get_settings

    settings = get_settings()
    base_path = settings.i18n.base_path
    ```
"""

from tree_i18n.configuration.i18n import I18nSettings
from tree_i18n.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
