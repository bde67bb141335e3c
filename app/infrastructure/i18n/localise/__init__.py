"""Per-language localise classes and the registry they are kept in.

Importing this package registers the built-in localises.
"""

from infrastructure.i18n.localise.base import (
    HOOKS,
    LanguageCallbacks,
    get_localise,
    get_registered_localises,
    localise_name,
    register_localise,
    unregister_localise,
)
from infrastructure.i18n.localise import en_gb  # noqa: F401

__all__ = [
    "HOOKS",
    "LanguageCallbacks",
    "get_localise",
    "get_registered_localises",
    "localise_name",
    "register_localise",
    "unregister_localise",
]
