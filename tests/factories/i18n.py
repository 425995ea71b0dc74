"""Test data factories for i18n engine testing.

Provides deterministic test data builders for:
- Locale
- Translation trees
- TranslationSession wired to a directory or in-memory assets
"""

import json
from pathlib import Path
from typing import Dict, Optional

import yaml

from tree_i18n.i18n import (
    AssetSource,
    FileSystemAssetSource,
    Locale,
    LocaleResolver,
    Node,
    ResourceLoader,
    ResourceNotFoundError,
    TranslationSession,
)
from tree_i18n.i18n.loader import build_tree


def make_locale(language_code: str = "en", region_code: Optional[str] = "US") -> Locale:
    """Create a Locale instance.

    Args:
        language_code: Language code.
        region_code: Region code, or None for a language-only locale.

    Returns:
        Locale instance.
    """
    return Locale(language_code=language_code, region_code=region_code)


def make_translation_data() -> dict:
    """Return the reference document used across engine tests."""
    return {
        "greeting": {
            "message": "Hi {name}",
            "message-0": "Hi {name}",
        },
        "items": {
            "count-0": "{n} item",
            "count-5": "{n} items",
        },
        "home": {
            "header": {
                "title": "Welcome",
            },
        },
    }


def make_tree(data: Optional[dict] = None) -> Node:
    """Build a translation tree from a plain dict.

    Args:
        data: Nested dict document (default: make_translation_data()).

    Returns:
        Root Node.
    """
    return build_tree(make_translation_data() if data is None else data)


def write_json(directory: Path, base_name: str, data: dict) -> Path:
    path = directory / f"{base_name}.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def write_yaml(directory: Path, base_name: str, data: dict) -> Path:
    path = directory / f"{base_name}.yaml"
    path.write_text(yaml.dump(data, allow_unicode=True), encoding="utf-8")
    return path


class MemoryAssetSource(AssetSource):
    """Asset source backed by a dict of file name -> text."""

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self.files = dict(files or {})
        self.reads = []

    async def read_text(self, name: str) -> str:
        self.reads.append(name)
        if name not in self.files:
            raise ResourceNotFoundError(name)
        return self.files[name]


def make_session(
    translations_dir: Optional[Path] = None,
    asset_source: Optional[AssetSource] = None,
    device_locale: Optional[str] = "en_US",
    use_country_code: bool = True,
    fallback_file: str = "en",
    forced_locale: Optional[Locale] = None,
) -> TranslationSession:
    """Create a TranslationSession for tests.

    Args:
        translations_dir: Directory of resources (ignored if asset_source given).
        asset_source: Explicit asset source.
        device_locale: Value the fake device locale query returns.
        use_country_code: Include the region in resource names.
        fallback_file: Fallback resource base name.
        forced_locale: Optional locale override.

    Returns:
        TranslationSession instance (not loaded).
    """
    if asset_source is None:
        asset_source = FileSystemAssetSource(translations_dir)
    return TranslationSession(
        resource_loader=ResourceLoader(asset_source),
        locale_resolver=LocaleResolver(lambda: device_locale),
        use_country_code=use_country_code,
        fallback_file=fallback_file,
        forced_locale=forced_locale,
    )
