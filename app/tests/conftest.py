import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection even
# when the project is not installed.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.services.providers import get_language_factory, get_settings


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset application-scoped providers between tests."""
    yield
    get_language_factory.cache_clear()
    get_settings.cache_clear()
