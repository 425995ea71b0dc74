"""Feature-level fixtures for i18n engine tests.

Provides resource directories and sessions for locale resolution,
loading and translation scenarios.
"""

import pytest

from tests.factories.i18n import (
    make_session,
    make_translation_data,
    make_tree,
    write_json,
    write_yaml,
)


@pytest.fixture
def sample_translation_data():
    """Reference translation document."""
    return make_translation_data()


@pytest.fixture
def sample_tree(sample_translation_data):
    """Reference document converted to a translation tree."""
    return make_tree(sample_translation_data)


@pytest.fixture
def translations_dir(tmp_path, sample_translation_data):
    """Create temporary directory with sample translation resources.

    Returns a directory structure like:
    - en_US.json   (reference document)
    - fr_FR.yaml   (French, YAML only)
    - en.json      (fallback resource)
    """
    write_json(tmp_path, "en_US", sample_translation_data)

    write_yaml(
        tmp_path,
        "fr_FR",
        {
            "greeting": {"message": "Salut {name}"},
            "items": {
                "count-0": "{n} article",
                "count-2": "{n} articles",
            },
            "home": {"header": {"title": "Bienvenue"}},
        },
    )

    write_json(
        tmp_path,
        "en",
        {
            "greeting": {"message": "Hello (fallback) {name}"},
            "home": {"header": {"title": "Welcome (fallback)"}},
        },
    )
    return tmp_path


@pytest.fixture
def session(translations_dir):
    """Session reading translations_dir with device locale en_US (not loaded)."""
    return make_session(translations_dir=translations_dir)
