"""
Application-scoped service providers.

Provides cached provider functions for settings and the language factory.
"""

from infrastructure.services.providers import (
    get_language_factory,
    get_settings,
)

__all__ = [
    "get_language_factory",
    "get_settings",
]
