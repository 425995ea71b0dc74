"""Locale resolution logic for determining the effective locale.

The effective locale is either an explicit override or the locale reported
by the operating system, parsed from its "lang_region" or
"lang_script_region" form.
"""

import inspect
import locale
import os
from typing import Awaitable, Callable, Optional, Union

from tree_i18n.i18n.errors import LocaleDetectionError
from tree_i18n.i18n.models import Locale
from tree_i18n.logging import get_module_logger

logger = get_module_logger()

DeviceLocaleProvider = Callable[[], Union[Optional[str], Awaitable[Optional[str]]]]

_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL_LOCALES = {"C", "POSIX"}


def _normalize_system_tag(tag: Optional[str]) -> Optional[str]:
    # pl_PL.UTF-8 -> pl_PL, de_DE@euro -> de_DE
    if not tag:
        return None
    tag = tag.split(".", 1)[0].split("@", 1)[0].strip()
    if not tag or tag in _NEUTRAL_LOCALES:
        return None
    # Windows reports names such as "English_United States"
    try:
        Locale.from_string(tag)
    except ValueError:
        return None
    return tag


def system_locale() -> Optional[str]:
    """Return the operating system locale as "lang_region", or None.

    Checks the process locale first, then the usual POSIX environment
    variables in precedence order. Values that are not locale tags are
    skipped.
    """
    try:
        tag = _normalize_system_tag(locale.getlocale()[0])
    except ValueError:
        tag = None
    if tag:
        return tag

    for var in _LOCALE_ENV_VARS:
        tag = _normalize_system_tag(os.environ.get(var))
        if tag:
            return tag
    return None


class LocaleResolver:
    """Resolves the effective locale from an override or the device.

    Attributes:
        device_locale_provider: Sync or async callable returning the device
            locale string, or None when unknown.
    """

    def __init__(self, device_locale_provider: DeviceLocaleProvider = system_locale):
        self.device_locale_provider = device_locale_provider

    async def resolve(self, override: Optional[Locale] = None) -> Locale:
        """Return override when given, otherwise the parsed device locale.

        Args:
            override: Explicit locale; returned unchanged when not None.

        Returns:
            Effective Locale.

        Raises:
            LocaleDetectionError: If the device query fails, returns nothing,
                or returns a string that is not a locale tag.
        """
        if override is not None:
            return override

        device_locale = await self._query_device()
        logger.debug("system_locale_detected", system_locale=device_locale)
        if not device_locale:
            logger.debug("locale_detection_failed", reason="no device locale")
            raise LocaleDetectionError("Device reported no locale")

        try:
            return Locale.from_string(device_locale)
        except ValueError as e:
            logger.debug("locale_detection_failed", reason=str(e))
            raise LocaleDetectionError(str(e)) from e

    async def _query_device(self) -> Optional[str]:
        try:
            result = self.device_locale_provider()
            if inspect.isawaitable(result):
                result = await result
        except LocaleDetectionError:
            raise
        except Exception as e:  # pylint: disable=broad-except
            logger.debug("locale_detection_failed", reason=str(e))
            raise LocaleDetectionError(f"Device locale query failed: {e}") from e
        return result
