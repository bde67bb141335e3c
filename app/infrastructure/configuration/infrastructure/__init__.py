"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.language import LanguageSettings

__all__ = [
    "LanguageSettings",
]
