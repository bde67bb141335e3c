"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import LanguageFactory


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_language_factory() -> LanguageFactory:
    """
    Get application-scoped language factory singleton.

    The factory owns the (tag, debug) -> Language cache, so every caller
    going through this provider shares loaded translations.

    Returns:
        LanguageFactory: Cached factory configured from settings.language.

    Usage:
        language = get_language_factory().get_language("fr-FR")
        title = language.translate("COM_CONTENT_TITLE")
    """
    settings = get_settings()
    return LanguageFactory(settings=settings.language)
