"""i18n engine - hierarchical translation resolution.

Resolves locale-specific text from nested JSON/YAML resources, selects
plural variants by numeric threshold and interpolates named parameters.

Main components:
- models: Locale, Leaf, Node, SessionState
- resolvers: LocaleResolver and the system locale query
- loader: asset sources, resource formats and ResourceLoader
- lookup / plurals / interpolation: pure resolution helpers
- translator: TranslationSession (load, translate, pluralize, refresh)
- registry: SessionRegistry holding the active session
- factory: create_translation_session, bootstrap_translation_session
"""

from tree_i18n.i18n.errors import (
    DecodeError,
    LocaleDetectionError,
    ResourceNotFoundError,
    SessionNotInstalledError,
    TranslationError,
)
from tree_i18n.i18n.factory import (
    bootstrap_translation_session,
    create_translation_session,
)
from tree_i18n.i18n.interpolation import interpolate
from tree_i18n.i18n.loader import (
    DEFAULT_FORMATS,
    AssetSource,
    FileSystemAssetSource,
    PackageAssetSource,
    ResourceFormat,
    ResourceLoader,
)
from tree_i18n.i18n.lookup import lookup, resolve_submap
from tree_i18n.i18n.models import Leaf, Locale, Node, SessionState
from tree_i18n.i18n.registry import SessionRegistry
from tree_i18n.i18n.resolvers import LocaleResolver, system_locale
from tree_i18n.i18n.translator import TranslationSession

__all__ = [
    "Locale",
    "Leaf",
    "Node",
    "SessionState",
    "TranslationError",
    "LocaleDetectionError",
    "ResourceNotFoundError",
    "DecodeError",
    "SessionNotInstalledError",
    "AssetSource",
    "FileSystemAssetSource",
    "PackageAssetSource",
    "ResourceFormat",
    "ResourceLoader",
    "DEFAULT_FORMATS",
    "LocaleResolver",
    "system_locale",
    "lookup",
    "resolve_submap",
    "interpolate",
    "TranslationSession",
    "SessionRegistry",
    "create_translation_session",
    "bootstrap_translation_session",
]
