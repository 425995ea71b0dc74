"""Translation session: the public translate/pluralize/load API.

A session owns one SessionState (locale plus translation tree). Loading
builds a complete new state off to the side and installs it with a single
assignment, so translate() and pluralize() running alongside a load see
either the previous state or the new one, never a mix.
"""

import itertools
from typing import Any, Mapping, Optional

from tree_i18n.i18n.errors import LocaleDetectionError
from tree_i18n.i18n.interpolation import interpolate
from tree_i18n.i18n.loader import ResourceLoader, compose_base_name
from tree_i18n.i18n.lookup import leaf_segment, lookup, resolve_submap
from tree_i18n.i18n.models import Locale, Node, SessionState
from tree_i18n.i18n.plurals import find_parameter_name, find_plural_key
from tree_i18n.i18n.resolvers import LocaleResolver
from tree_i18n.logging import get_module_logger

logger = get_module_logger()


class TranslationSession:
    """Resolves translations for one locale at a time.

    Attributes:
        resource_loader: Loads translation trees by resource base name.
        locale_resolver: Determines the effective locale.
        use_country_code: Compose resource names as <language>_<region>.
        fallback_file: Resource base name used when locale loading fails.
    """

    def __init__(
        self,
        resource_loader: ResourceLoader,
        locale_resolver: LocaleResolver,
        use_country_code: bool = False,
        fallback_file: str = "en",
        forced_locale: Optional[Locale] = None,
    ):
        """Initialize TranslationSession.

        Args:
            resource_loader: ResourceLoader for the application's assets.
            locale_resolver: LocaleResolver for device locale detection.
            use_country_code: Include the region in resource names.
            fallback_file: Locale-independent fallback resource base name.
            forced_locale: Optional locale that bypasses device detection.
        """
        self.resource_loader = resource_loader
        self.locale_resolver = locale_resolver
        self.use_country_code = use_country_code
        self.fallback_file = fallback_file
        self._forced_locale = forced_locale
        self._state = SessionState()
        self._load_counter = itertools.count(1)
        self._latest_load = 0

    @property
    def forced_locale(self) -> Optional[Locale]:
        return self._forced_locale

    def current_locale(self) -> Optional[Locale]:
        """Return the locale of the active translations.

        Returns:
            The effective Locale, or None before the first load or when
            the device locale could not be determined.
        """
        return self._state.locale

    async def load(self) -> bool:
        """Load translations for the forced or device locale.

        Falls back to the fallback resource when the locale cannot be
        determined or its resource cannot be loaded, and to an empty tree
        when the fallback fails too. When several loads overlap, the one
        started last is the one whose result stays installed.

        Returns:
            Always True; the session is usable after every load.
        """
        load_id = next(self._load_counter)
        self._latest_load = load_id

        state = await self._build_state(self._forced_locale)

        if load_id != self._latest_load:
            logger.debug(
                "load_superseded",
                load_id=load_id,
                latest_load=self._latest_load,
            )
            return True

        self._state = state
        logger.debug(
            "translations_installed",
            locale=str(state.locale) if state.locale else None,
            key_count=len(state.tree),
        )
        return True

    async def refresh(self, forced_locale: Optional[Locale]) -> bool:
        """Switch to a new forced locale and reload.

        Args:
            forced_locale: New override, or None to go back to device detection.

        Returns:
            Always True, as load().
        """
        self._forced_locale = forced_locale
        return await self.load()

    async def _build_state(self, override: Optional[Locale]) -> SessionState:
        try:
            locale = await self.locale_resolver.resolve(override)
        except LocaleDetectionError as e:
            logger.debug("locale_detection_failed", error=str(e))
            return SessionState(locale=None, tree=await self._load_fallback())

        logger.debug("current_locale", locale=str(locale))
        base_name = compose_base_name(locale, self.use_country_code)
        result = await self.resource_loader.load_resource(base_name)
        if result.is_success:
            return SessionState(locale=locale, tree=result.data)

        logger.debug(
            "translation_load_failed",
            resource=base_name,
            status=result.status.value,
            error_code=result.error_code,
        )
        return SessionState(locale=locale, tree=await self._load_fallback())

    async def _load_fallback(self) -> Node:
        result = await self.resource_loader.load_resource(self.fallback_file)
        if result.is_success:
            return result.data

        logger.debug(
            "fallback_load_failed",
            resource=self.fallback_file,
            status=result.status.value,
            error_code=result.error_code,
        )
        return Node.empty()

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Return the translation for a dotted key, interpolating params.

        Args:
            key: Dotted key path (e.g., "home.header.title").
            params: Optional placeholder values, applied in the given order.

        Returns:
            The translated string, or `key` itself when it is not found.
        """
        return self._translate_in(self._state.tree, key, params)

    def pluralize(self, key: str, value: int) -> str:
        """Return the plural variant of `key` matching `value`.

        The variant's first {placeholder} is filled with the value.

        Args:
            key: Dotted key path ending in the plural family base name.
            value: Count used to select the variant.

        Returns:
            The interpolated variant, or the rewritten key when the
            variant does not exist.
        """
        # One snapshot for selection and lookup, even if a load swaps state
        tree = self._state.tree
        submap = resolve_submap(tree, key)
        plural_key = find_plural_key(submap, key, value)
        template = lookup(submap, leaf_segment(plural_key))
        parameter_name = find_parameter_name(template)
        return self._translate_in(tree, plural_key, {parameter_name: str(value)})

    def _translate_in(
        self, tree: Node, key: str, params: Optional[Mapping[str, Any]]
    ) -> str:
        translation = lookup(tree, key)
        if translation is None:
            logger.debug("translation_not_found", key=key)
            translation = key
        if params is not None:
            translation = interpolate(translation, params)
        return translation
