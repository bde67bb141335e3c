"""i18n system - runtime language string resolver.

Loads INI-like translation files per language and extension, resolves
lookups by key and applies per-language rules (transliteration, plural
suffixes, search word limits). In debug mode it tracks missing keys, used
keys and malformed files.

Main components:
- models: TranslationStore, CallerContext, OrphanEntry, LanguageMetadata
- parser: parse_translation_file, resolve_language_path, TranslationFileError
- loader: TranslationFileLoader with default-language fallback
- debug: DebugInstrumentation (orphans, used keys, file validation)
- localise: per-language localise registry and LanguageCallbacks
- language: Language, the public lookup API
- factory: LanguageFactory caching instances per (tag, debug)
"""

from infrastructure.i18n.debug import DebugInstrumentation
from infrastructure.i18n.factory import LanguageFactory
from infrastructure.i18n.language import DEFAULT_LANGUAGE, Language
from infrastructure.i18n.loader import CORE_EXTENSION, TranslationFileLoader
from infrastructure.i18n.localise import (
    LanguageCallbacks,
    get_localise,
    register_localise,
)
from infrastructure.i18n.metadata import load_language_metadata
from infrastructure.i18n.models import (
    CallerContext,
    LanguageMetadata,
    OrphanEntry,
    TranslationStore,
)
from infrastructure.i18n.parser import (
    TranslationFileError,
    parse_translation_file,
    resolve_language_path,
)

__all__ = [
    "CORE_EXTENSION",
    "DEFAULT_LANGUAGE",
    "CallerContext",
    "DebugInstrumentation",
    "Language",
    "LanguageCallbacks",
    "LanguageFactory",
    "LanguageMetadata",
    "OrphanEntry",
    "TranslationFileError",
    "TranslationFileLoader",
    "TranslationStore",
    "get_localise",
    "load_language_metadata",
    "parse_translation_file",
    "register_localise",
    "resolve_language_path",
]
