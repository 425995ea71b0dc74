"""Factory functions for creating i18n components.

Provides convenience functions for building a translation session from
application settings and installing it at startup.
"""

from pathlib import Path
from typing import Optional

from tree_i18n.configuration import I18nSettings, settings as app_settings
from tree_i18n.i18n.loader import AssetSource, FileSystemAssetSource, ResourceLoader
from tree_i18n.i18n.models import Locale
from tree_i18n.i18n.registry import SessionRegistry
from tree_i18n.i18n.resolvers import DeviceLocaleProvider, LocaleResolver, system_locale
from tree_i18n.i18n.translator import TranslationSession
from tree_i18n.logging import get_module_logger

logger = get_module_logger()


def create_translation_session(
    settings: Optional[I18nSettings] = None,
    asset_source: Optional[AssetSource] = None,
    device_locale_provider: DeviceLocaleProvider = system_locale,
) -> TranslationSession:
    """Create and configure a TranslationSession (not yet loaded).

    Args:
        settings: I18nSettings to use (default: application settings).
        asset_source: Where resources are read from (default: the
            settings base_path on the filesystem).
        device_locale_provider: Device locale query (default: OS locale).

    Returns:
        TranslationSession: Configured session; call load() before use.

    Raises:
        ValueError: If settings.forced_locale is not a locale tag.

    Usage:
        # Use application settings
        session = create_translation_session()
        await session.load()

        # Resources shipped inside a package
        session = create_translation_session(
            asset_source=PackageAssetSource("myapp", "i18n"),
        )
    """
    i18n_settings = settings or app_settings.i18n

    if asset_source is None:
        asset_source = FileSystemAssetSource(Path(i18n_settings.base_path))

    forced_locale = None
    if i18n_settings.forced_locale:
        forced_locale = Locale.from_string(i18n_settings.forced_locale)

    session = TranslationSession(
        resource_loader=ResourceLoader(asset_source),
        locale_resolver=LocaleResolver(device_locale_provider),
        use_country_code=i18n_settings.use_country_code,
        fallback_file=i18n_settings.fallback_file,
        forced_locale=forced_locale,
    )
    logger.info(
        "translation_session_created",
        base_path=i18n_settings.base_path,
        fallback_file=i18n_settings.fallback_file,
        use_country_code=i18n_settings.use_country_code,
        forced_locale=str(forced_locale) if forced_locale else None,
    )
    return session


async def bootstrap_translation_session(
    registry: SessionRegistry,
    settings: Optional[I18nSettings] = None,
    asset_source: Optional[AssetSource] = None,
    device_locale_provider: DeviceLocaleProvider = system_locale,
) -> TranslationSession:
    """Create a session, load it and install it as the active session.

    Intended for application startup (e.g., a FastAPI lifespan handler).
    Logging is not configured here; hosts without a structlog setup of
    their own call tree_i18n.logging.configure_logging() first.

    Usage:
        @asynccontextmanager
        async def lifespan(app: FastAPI):
            configure_logging()
            await bootstrap_translation_session(get_session_registry())
            yield

    Args:
        registry: Registry that will hold the session.
        settings: See create_translation_session().
        asset_source: See create_translation_session().
        device_locale_provider: See create_translation_session().

    Returns:
        The loaded and installed TranslationSession.
    """
    session = create_translation_session(
        settings=settings,
        asset_source=asset_source,
        device_locale_provider=device_locale_provider,
    )
    await session.load()
    registry.install(session)
    return session
