"""Feature-level fixtures for i18n system tests.

Provides a temporary language tree and Language instances built on it.
"""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import Language, parse_translation_file
from tests.factories.i18n import make_language_tree


@pytest.fixture
def language_base(tmp_path):
    """Create a temporary language tree.

    Returns a base path with:
    - language/en-GB/en-GB.ini
    - language/en-GB/en-GB.com_content.ini
    - language/en-GB/metadata.yml
    - language/fr-FR/fr-FR.ini
    - language/fr-FR/fr-FR.com_content.ini
    - language/overrides/fr-FR.override.ini
    """
    return make_language_tree(
        tmp_path,
        files={
            "en-GB": {
                "core": {
                    "GREETING": "Hello",
                    "FAREWELL": "Goodbye",
                    "ONLY_EN": "English only",
                    "ESCAPED": r"Line one\nLine two",
                    "ITEMS_0": "No items",
                    "ITEMS_ONE": "One item",
                    "ITEMS_OTHER": "Many items",
                },
                "com_content": {
                    "COM_CONTENT_SAVE": "Save",
                    "COM_CONTENT_CANCEL": "Cancel",
                },
            },
            "fr-FR": {
                "core": {
                    "GREETING": "Bonjour",
                    "FAREWELL": "Au revoir",
                    "ONLY_FR": "Seulement en français",
                },
                "com_content": {
                    "COM_CONTENT_SAVE": "Enregistrer",
                },
            },
        },
        overrides={
            "fr-FR": {
                "FAREWELL": "Salut",
                "COM_CONTENT_SAVE": "Sauvegarder",
            },
        },
        metadata={
            "en-GB": {
                "name": "English (en-GB)",
                "tag": "en-GB",
                "rtl": 0,
                "locale": "en_GB.utf8, en_GB.UTF-8, en_GB, eng_GB, en, english",
                "firstDay": 1,
                "weekEnd": "0,6",
            },
        },
    )


@pytest.fixture
def counting_parser():
    """Parser mock delegating to the real parser, for counting calls."""
    return MagicMock(side_effect=parse_translation_file)


@pytest.fixture
def english(language_base):
    """Default language instance (en-GB) without debugging."""
    return Language("en-GB", base_path=language_base)


@pytest.fixture
def french(language_base):
    """French language instance without debugging."""
    return Language("fr-FR", base_path=language_base)


@pytest.fixture
def french_debug(language_base):
    """French language instance in debug mode."""
    return Language("fr-FR", debug=True, base_path=language_base)
