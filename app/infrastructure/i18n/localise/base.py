"""Localise registry and callback slots.

A localise is a class holding language specific rules. It may define any of
these static (or class) methods, each one optional:

- ``transliterate(string) -> str``
- ``get_plural_suffixes(count) -> list[str]``
- ``get_ignored_search_words() -> list[str]``
- ``get_lower_limit_search_word() -> int``
- ``get_upper_limit_search_word() -> int``
- ``get_search_displayed_characters_number() -> int``

Localises are registered per language tag:

    @register_localise("fr-FR")
    class FrFrLocalise:
        @staticmethod
        def get_plural_suffixes(count):
            return ["ONE"] if count in (0, 1) else ["OTHER"]
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, List, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Registry of localise classes keyed by language tag
_registry: Dict[str, Any] = {}

# Callback slot -> localise hook name
HOOKS = {
    "transliterator": "transliterate",
    "plural_suffixes": "get_plural_suffixes",
    "ignored_search_words": "get_ignored_search_words",
    "lower_limit_search_word": "get_lower_limit_search_word",
    "upper_limit_search_word": "get_upper_limit_search_word",
    "search_displayed_characters_number": "get_search_displayed_characters_number",
}


def localise_name(tag: str) -> str:
    """Conventional localise name for a tag (e.g. "en_GBLocalise")."""
    return tag.replace("-", "_") + "Localise"


def register_localise(tag: str):
    """Register a localise class for a language tag.

    Args:
        tag: Language tag (e.g., "en-GB").

    Returns:
        Decorator function

    Raises:
        TypeError: If not applied to a class.
        RuntimeError: If a localise is already registered for the tag.
    """

    def decorator(obj):
        if not isinstance(obj, type):
            raise TypeError("register_localise decorator must be applied to a class")

        if tag in _registry:
            raise RuntimeError(f"Localise already registered for language: {tag}")

        _registry[tag] = obj
        logger.debug(
            "localise_registered",
            tag=tag,
            class_name=obj.__name__,
            localise=localise_name(tag),
        )
        return obj

    return decorator


def unregister_localise(tag: str) -> Optional[Any]:
    """Remove the localise registered for a tag, returning it."""
    return _registry.pop(tag, None)


def get_localise(tag: str) -> Optional[Any]:
    """Return the localise registered for a tag, or None."""
    return _registry.get(tag)


def get_registered_localises() -> Dict[str, Any]:
    """Return a copy of the registry."""
    return dict(_registry)


@dataclass
class LanguageCallbacks:
    """Six optional per-language callbacks.

    A slot left as None means the language uses the built-in default.
    """

    transliterator: Optional[Callable[[str], str]] = None
    plural_suffixes: Optional[Callable[[int], List[str]]] = None
    ignored_search_words: Optional[Callable[[], List[str]]] = None
    lower_limit_search_word: Optional[Callable[[], int]] = None
    upper_limit_search_word: Optional[Callable[[], int]] = None
    search_displayed_characters_number: Optional[Callable[[], int]] = None

    @classmethod
    def from_localise(cls, localise: Any) -> "LanguageCallbacks":
        """Bind every hook the localise defines.

        Args:
            localise: Localise class or instance, or None.

        Returns:
            LanguageCallbacks with a slot set for each hook found.
        """
        if localise is None:
            return cls()

        bound = {}
        for slot, hook_name in HOOKS.items():
            hook = getattr(localise, hook_name, None)
            if callable(hook):
                bound[slot] = hook

        return cls(**bound)

    def bound_slots(self) -> List[str]:
        """Names of the slots holding a callback."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]
