"""Language resolver infrastructure settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from infrastructure.configuration.base import InfrastructureSettings


class LanguageSettings(InfrastructureSettings):
    """Runtime language configuration.

    Environment Variables:
        LANGUAGE_DEFAULT: Default language tag used as fallback (default: en-GB)
        LANGUAGE_DEBUG: Highlight translated and missing strings (default: False)
        LANGUAGE_DEBUG_SHOW_CONSTANTS: In debug mode, display the key instead
            of the translated string (default: False)
        LANGUAGE_BASE_PATH: Directory containing the ``language/`` tree
            (default: current directory)
        LANGUAGE_OVERRIDES_PATH: Directory holding ``<tag>.override.ini`` files
            (default: ``<base_path>/language/overrides``)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.language.DEBUG:
            show_constants = settings.language.DEBUG_SHOW_CONSTANTS
        ```
    """

    model_config = SettingsConfigDict(env_prefix="LANGUAGE_")

    DEFAULT: str = Field(
        default="en-GB",
        description="Language tag loaded first as a baseline for every other language",
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable language debugging (orphan and usage tracking)",
    )

    DEBUG_SHOW_CONSTANTS: bool = Field(
        default=False,
        description="Display translation keys instead of values while debugging",
    )

    BASE_PATH: str = Field(
        default=".",
        description="Base directory containing the language/ tree",
    )

    OVERRIDES_PATH: Optional[str] = Field(
        default=None,
        description="Directory holding per-language override files",
    )
