"""Language instance: translation lookup and per-language rules.

A Language owns the strings loaded for one language tag, the override table
for that tag, the per-language callbacks and, in debug mode, the lookup
diagnostics.

Usage:
    language = Language("fr-FR", base_path="/srv/site")
    language.load("com_content")

    language.translate("COM_CONTENT_SAVE")       # "Enregistrer"
    language.translate("Unknown string")         # "Unknown string"
    language.plural("COM_CONTENT_N_ITEMS", 3)    # picks COM_CONTENT_N_ITEMS_<suffix>
"""

import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from infrastructure.i18n.debug import DebugInstrumentation
from infrastructure.i18n.loader import CORE_EXTENSION, TranslationFileLoader
from infrastructure.i18n.localise import LanguageCallbacks, get_localise
from infrastructure.i18n.metadata import MetadataProvider, load_language_metadata
from infrastructure.i18n.models import (
    CallerContext,
    ErrorFilesIndex,
    LanguageMetadata,
    OrphanEntry,
    TranslationStore,
)
from infrastructure.i18n.parser import (
    PathLike,
    PathResolver,
    TranslationParser,
    parse_translation_file,
    resolve_language_path,
)
from infrastructure.i18n.transliterate import default_transliterate
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LANGUAGE = "en-GB"
OVERRIDE_SUFFIX = ".override.ini"

DEFAULT_LOWER_LIMIT_SEARCH_WORD = 3
DEFAULT_UPPER_LIMIT_SEARCH_WORD = 200
DEFAULT_SEARCH_DISPLAYED_CHARACTERS = 200

_JS_UNSAFE_RE = re.compile(r"['\"\\\x00]")
_BACKSLASH_RE = re.compile(r"\\\\|\\t|\\n")
_BACKSLASH_MAP = {"\\\\": "\\", "\\t": "\t", "\\n": "\n"}


def _addslashes(string: str) -> str:
    """Escape quotes, backslashes and NUL for a script string literal."""
    return _JS_UNSAFE_RE.sub(
        lambda m: "\\0" if m.group(0) == "\x00" else "\\" + m.group(0), string
    )


def _interpret_backslashes(string: str) -> str:
    r"""Turn literal \\, \t and \n into \, TAB and LF in a single pass."""
    return _BACKSLASH_RE.sub(lambda m: _BACKSLASH_MAP[m.group(0)], string)


class Language:
    """Translation strings and language rules for one language tag.

    Attributes:
        base_path: Base directory containing the ``language/`` tree.
        metadata: Metadata record for the language.
        store: Loaded translations, override entries on top.
        loader: File loader feeding the store.
        instrumentation: Orphan, usage and file diagnostics.
        callbacks: Per-language callback slots.
    """

    def __init__(
        self,
        lang: Optional[str] = None,
        debug: bool = False,
        base_path: PathLike = ".",
        default: str = DEFAULT_LANGUAGE,
        overrides_path: Optional[PathLike] = None,
        debug_show_constants: bool = False,
        localise: Any = None,
        parser: TranslationParser = parse_translation_file,
        path_resolver: PathResolver = resolve_language_path,
        metadata_provider: MetadataProvider = load_language_metadata,
    ):
        """Create a language and load its core strings.

        Args:
            lang: Language tag; defaults to ``default``.
            debug: Enable debug mode (orphan and usage tracking).
            base_path: Base directory containing the ``language/`` tree.
            default: Default language loaded as a baseline.
            overrides_path: Directory holding ``<tag>.override.ini`` files,
                ``<base_path>/language/overrides`` when not given.
            debug_show_constants: In debug mode, display keys instead of values.
            localise: Localise class for the language; looked up in the
                localise registry when not given.
            parser: Translation file parser.
            path_resolver: Callable returning the directory for a language.
            metadata_provider: Callable returning the language's metadata.
        """
        self._default = default
        self._lang = lang or default
        self._debug = False
        self._debug_show_constants = bool(debug_show_constants)
        self._locale: Optional[List[str]] = None
        self._locale_resolved = False
        self.base_path = base_path

        self.metadata: LanguageMetadata = metadata_provider(base_path, self._lang)
        self.set_debug(debug)

        self.instrumentation = DebugInstrumentation()
        self.store = TranslationStore()
        self.loader = TranslationFileLoader(
            self.store,
            parser=parser,
            path_resolver=path_resolver,
            validator=self.validate_file,
            error_reporter=self.instrumentation.record_file_error,
        )

        if overrides_path is None:
            overrides_path = Path(base_path) / "language" / "overrides"
        self.override_file = str(Path(overrides_path) / f"{self._lang}{OVERRIDE_SUFFIX}")
        overrides = self.loader.parse(self.override_file, debug=self._debug)
        self.store.overrides = TranslationStore.normalize(overrides)

        if localise is None:
            localise = get_localise(self._lang)
        self.callbacks = LanguageCallbacks.from_localise(localise)

        self.load()

        logger.info(
            "language_created",
            lang=self._lang,
            debug=self._debug,
            override_count=len(self.store.overrides),
            callbacks=self.callbacks.bound_slots(),
        )

    def __repr__(self) -> str:
        return f"Language(lang={self._lang!r}, debug={self._debug!r})"

    @property
    def lang(self) -> str:
        """Language tag this instance was created for."""
        return self._lang

    @property
    def counter(self) -> int:
        """Number of file loads attempted so far."""
        return self.loader.counter

    def translate(
        self,
        string: str,
        js_safe: bool = False,
        interpret_backslashes: bool = True,
        caller: Optional[CallerContext] = None,
    ) -> str:
        r"""Translate a string.

        The lookup key is the uppercased string. On a miss the string is
        returned unchanged. In debug mode hits are wrapped as ``**value**``
        and misses as ``??string??``, and both are recorded.

        Args:
            string: String or key to translate.
            js_safe: Escape the result for use inside a script string.
            interpret_backslashes: Turn literal \t, \n and \\ into TAB, LF
                and \ (ignored when js_safe is set).
            caller: Caller context recorded while debugging.

        Returns:
            The translated string.
        """
        if string == "":
            return ""

        key = string.upper()
        translation = self.store.get(key)

        if translation is not None:
            string = translation

            if self._debug:
                value = key if self._debug_show_constants else string
                string = f"**{value}**"
                self.instrumentation.record_used(key, caller)
        elif self._debug:
            self.instrumentation.record_orphan(key, string, caller)
            string = f"??{string}??"

        if js_safe:
            string = _addslashes(string)
        elif interpret_backslashes and "\\" in string:
            string = _interpret_backslashes(string)

        return string

    def plural(
        self, string: str, count: int, caller: Optional[CallerContext] = None
    ) -> str:
        """Translate the plural variant of a key for a count.

        Tries ``<KEY>_<suffix>`` for each suffix from get_plural_suffixes()
        and falls back to the key itself.

        Args:
            string: Base key.
            count: Number the plural form is chosen for.
            caller: Caller context recorded while debugging.

        Returns:
            The translated string.
        """
        key = string.upper()
        for suffix in self.get_plural_suffixes(count):
            candidate = f"{key}_{suffix}"
            if self.has_key(candidate):
                return self.translate(candidate, caller=caller)

        return self.translate(string, caller=caller)

    def has_key(self, string: str) -> bool:
        """Check whether a translation exists for a key."""
        return string in self.store

    def load(
        self,
        extension: str = CORE_EXTENSION,
        base_path: Optional[PathLike] = None,
        lang: Optional[str] = None,
        reload: bool = False,
        default: bool = True,
    ) -> bool:
        """Load the strings of an extension.

        Args:
            extension: Extension to load; "core" loads the language's main file.
            base_path: Base directory, the instance's base_path when not given.
            lang: Language to load, the instance's language when not given.
            reload: Re-read files that were already attempted.
            default: Load the default language first and fall back to it.

        Returns:
            True if new strings were merged.
        """
        return self.loader.load(
            extension,
            self.base_path if base_path is None else base_path,
            lang or self._lang,
            self._default,
            reload=reload,
            default=default,
            debug=self._debug,
        )

    def validate_file(self, filename: PathLike) -> int:
        """Check a translation file for structural errors.

        Debug mode is suspended while the file is checked.

        Args:
            filename: File to check.

        Returns:
            Number of lines with errors.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        previous = self.set_debug(False)
        try:
            return self.instrumentation.validate_file(filename)
        finally:
            self.set_debug(previous)

    def get_paths(self, extension: Optional[str] = None):
        """Return the loaded-files index, or one extension's part of it."""
        return self.loader.get_paths(extension)

    get_loaded_files = get_paths

    def get_error_files(self) -> ErrorFilesIndex:
        return self.instrumentation.error_files

    def get_orphans(self) -> Dict[str, List[OrphanEntry]]:
        return self.instrumentation.orphans

    def get_used(self) -> Dict[str, List[CallerContext]]:
        return self.instrumentation.used

    # Configuration

    def get_debug(self) -> bool:
        return self._debug

    def set_debug(self, debug: bool) -> bool:
        """Set debug mode, returning the previous value."""
        previous = self._debug
        self._debug = bool(debug)
        return previous

    def get_debug_show_constants(self) -> bool:
        return self._debug_show_constants

    def set_debug_show_constants(self, show: bool) -> bool:
        """Set whether debug output shows keys, returning the previous value."""
        previous = self._debug_show_constants
        self._debug_show_constants = bool(show)
        return previous

    def get_default(self) -> str:
        return self._default

    def set_default(self, lang: str) -> str:
        """Set the default language tag, returning the previous value."""
        previous = self._default
        self._default = lang
        return previous

    # Metadata

    def get(self, prop: str, default: Any = None) -> Any:
        """Get a metadata property."""
        return self.metadata.get(prop, default)

    def get_name(self) -> str:
        return self.metadata.name

    def get_tag(self) -> str:
        return self.metadata.tag

    def get_calendar(self) -> str:
        return self.metadata.calendar or "gregorian"

    def is_rtl(self) -> bool:
        return bool(self.metadata.rtl)

    def get_locale(self) -> Optional[List[str]]:
        """Return the system locale names for the language, or None."""
        if not self._locale_resolved:
            locale = (self.metadata.locale or "").replace(" ", "")
            self._locale = locale.split(",") if locale else None
            self._locale_resolved = True

        return self._locale

    def get_first_day(self) -> int:
        return int(self.metadata.first_day or 0)

    def get_week_end(self) -> str:
        return self.metadata.week_end or "0,6"

    # Language callbacks

    def transliterate(self, string: str) -> str:
        """Replace accented characters by ASCII equivalents."""
        if self.callbacks.transliterator is not None:
            return self.callbacks.transliterator(string)

        return default_transliterate(string)

    def get_transliterator(self) -> Optional[Callable[[str], str]]:
        return self.callbacks.transliterator

    def set_transliterator(self, function: Callable[[str], str]):
        """Set the transliteration callback, returning the previous one."""
        previous = self.callbacks.transliterator
        self.callbacks.transliterator = function
        return previous

    def get_plural_suffixes(self, count: int) -> List[str]:
        """Return the key suffixes to try for a count, most specific first."""
        if self.callbacks.plural_suffixes is not None:
            return self.callbacks.plural_suffixes(count)

        return [str(count)]

    def get_plural_suffixes_callback(self) -> Optional[Callable[[int], List[str]]]:
        return self.callbacks.plural_suffixes

    def set_plural_suffixes_callback(self, function: Callable[[int], List[str]]):
        """Set the plural suffixes callback, returning the previous one."""
        previous = self.callbacks.plural_suffixes
        self.callbacks.plural_suffixes = function
        return previous

    def get_ignored_search_words(self) -> List[str]:
        if self.callbacks.ignored_search_words is not None:
            return self.callbacks.ignored_search_words()

        return []

    def get_ignored_search_words_callback(self) -> Optional[Callable[[], List[str]]]:
        return self.callbacks.ignored_search_words

    def set_ignored_search_words_callback(self, function: Callable[[], List[str]]):
        """Set the ignored search words callback, returning the previous one."""
        previous = self.callbacks.ignored_search_words
        self.callbacks.ignored_search_words = function
        return previous

    def get_lower_limit_search_word(self) -> int:
        """Minimum length of a search word (3 unless the language says otherwise)."""
        if self.callbacks.lower_limit_search_word is not None:
            return self.callbacks.lower_limit_search_word()

        return DEFAULT_LOWER_LIMIT_SEARCH_WORD

    def get_lower_limit_search_word_callback(self) -> Optional[Callable[[], int]]:
        return self.callbacks.lower_limit_search_word

    def set_lower_limit_search_word_callback(self, function: Callable[[], int]):
        """Set the lower search word limit callback, returning the previous one."""
        previous = self.callbacks.lower_limit_search_word
        self.callbacks.lower_limit_search_word = function
        return previous

    def get_upper_limit_search_word(self) -> int:
        """Maximum length of a search word.

        The callback can only raise the limit: values of 200 or less are
        ignored and 200 is returned.
        """
        if self.callbacks.upper_limit_search_word is not None:
            limit = self.callbacks.upper_limit_search_word()
            if limit > DEFAULT_UPPER_LIMIT_SEARCH_WORD:
                return limit

        return DEFAULT_UPPER_LIMIT_SEARCH_WORD

    def get_upper_limit_search_word_callback(self) -> Optional[Callable[[], int]]:
        return self.callbacks.upper_limit_search_word

    def set_upper_limit_search_word_callback(self, function: Callable[[], int]):
        """Set the upper search word limit callback, returning the previous one."""
        previous = self.callbacks.upper_limit_search_word
        self.callbacks.upper_limit_search_word = function
        return previous

    def get_search_displayed_characters_number(self) -> int:
        """Number of characters shown per search result (200 by default)."""
        if self.callbacks.search_displayed_characters_number is not None:
            return self.callbacks.search_displayed_characters_number()

        return DEFAULT_SEARCH_DISPLAYED_CHARACTERS

    def get_search_displayed_characters_number_callback(
        self,
    ) -> Optional[Callable[[], int]]:
        return self.callbacks.search_displayed_characters_number

    def set_search_displayed_characters_number_callback(
        self, function: Callable[[], int]
    ):
        """Set the displayed characters callback, returning the previous one."""
        previous = self.callbacks.search_displayed_characters_number
        self.callbacks.search_displayed_characters_number = function
        return previous
