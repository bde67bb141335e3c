"""Factory for creating and caching Language instances.

Replaces process-wide static caching with an explicit cache owned by the
factory, keyed by (language tag, debug flag).
"""

from typing import Dict, Optional, Tuple

from infrastructure.configuration.infrastructure.language import LanguageSettings
from infrastructure.i18n.language import Language
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LanguageFactory:
    """Creates Language instances configured from LanguageSettings.

    Attributes:
        settings: Language settings used for every created instance.

    Usage:
        factory = LanguageFactory(settings.language)

        # Cached per (tag, debug)
        language = factory.get_language("fr-FR")

        # Always a new instance
        scratch = factory.create_language("fr-FR", debug=True)
    """

    def __init__(self, settings: Optional[LanguageSettings] = None):
        self.settings = settings or LanguageSettings()
        self._languages: Dict[Tuple[str, bool], Language] = {}

    def create_language(self, lang: Optional[str] = None, debug: bool = False) -> Language:
        """Build a new, uncached Language.

        Args:
            lang: Language tag; the configured default when not given.
            debug: Enable debug mode on the instance.

        Returns:
            Language instance.
        """
        return Language(
            lang or self.settings.DEFAULT,
            debug=debug,
            base_path=self.settings.BASE_PATH,
            default=self.settings.DEFAULT,
            overrides_path=self.settings.OVERRIDES_PATH,
            debug_show_constants=self.settings.DEBUG_SHOW_CONSTANTS,
        )

    def get_language(self, lang: Optional[str] = None, debug: Optional[bool] = None) -> Language:
        """Return the cached Language for (lang, debug), creating it if needed.

        Args:
            lang: Language tag; the configured default when not given.
            debug: Debug flag; the configured LANGUAGE_DEBUG when not given.

        Returns:
            Language instance shared by every caller asking for the same pair.
        """
        tag = lang or self.settings.DEFAULT
        debug_flag = self.settings.DEBUG if debug is None else bool(debug)
        cache_key = (tag, debug_flag)

        if cache_key not in self._languages:
            self._languages[cache_key] = self.create_language(tag, debug=debug_flag)
            logger.info("language_cached", lang=tag, debug=debug_flag)

        return self._languages[cache_key]

    def clear(self) -> None:
        """Drop every cached Language."""
        self._languages.clear()
        logger.info("cleared_language_cache")

    def __len__(self) -> int:
        return len(self._languages)
