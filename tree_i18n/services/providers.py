"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for settings and the
active translation session.
"""

from functools import lru_cache

from tree_i18n.configuration import Settings
from tree_i18n.i18n.registry import SessionRegistry
from tree_i18n.i18n.translator import TranslationSession


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from tree_i18n.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return {"fallback": settings.i18n.fallback_file}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_session_registry() -> SessionRegistry:
    """
    Get the application-scoped session registry singleton.

    Install the loaded session once at startup:
        session = await bootstrap_translation_session(
            get_session_registry(), settings=get_settings().i18n
        )

    Returns:
        SessionRegistry: Cached registry instance.
    """
    return SessionRegistry()


def get_translation_session() -> TranslationSession:
    """
    Get the active translation session.

    Not cached: a session installed later (or replaced on teardown/restart)
    is picked up on the next call.

    Returns:
        TranslationSession: The session installed in the registry.

    Raises:
        SessionNotInstalledError: If no session was installed at startup.

    Usage:
        @router.get("/greeting")
        def greeting(i18n: TranslationSessionDep) -> dict:
            return {"text": i18n.translate("greeting.message", {"name": "Al"})}
    """
    return get_session_registry().current()
