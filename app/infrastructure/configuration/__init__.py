"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LanguageSettings: Language resolver settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_tag = settings.language.DEFAULT
    debug = settings.language.DEBUG
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.language import LanguageSettings

__all__ = ["Settings", "settings", "LanguageSettings"]
