"""Translation models for the language resolver.

Defines the translation store, debug records and language metadata.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Extension name -> {absolute file path -> loaded with at least one string}
LoadedFilesIndex = Dict[str, Dict[str, bool]]

# File path -> failing 1-based line numbers, or an error description
ErrorFilesIndex = Dict[str, Union[List[int], str]]


@dataclass(frozen=True)
class CallerContext:
    """Identifies the code that requested a translation.

    Supplied by the calling layer while debugging; every field is optional.

    Attributes:
        function: Calling function name.
        class_name: Calling class name, if any.
        file: Source file of the call.
        line: Line number of the call.
    """

    function: Optional[str] = None
    class_name: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None


@dataclass(frozen=True)
class OrphanEntry:
    """A lookup for a key that has no translation.

    Attributes:
        key: Normalized (uppercased) lookup key.
        string: The original string passed to translate().
        trace: Caller context of the lookup, if provided.
    """

    key: str
    string: str
    trace: Optional[CallerContext] = None


@dataclass
class TranslationStore:
    """Uppercased key to translated string mapping for one language.

    Override entries are fixed at construction and win over every merge.
    Later merges overwrite earlier values for all other keys.

    Attributes:
        overrides: Normalized override table.
        strings: Normalized translations currently loaded.
    """

    overrides: Dict[str, str] = field(default_factory=dict)
    strings: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.overrides = self.normalize(self.overrides)
        self.strings = self.normalize(self.strings)

    @staticmethod
    def normalize(strings: Mapping[str, Any]) -> Dict[str, str]:
        """Uppercase keys and coerce values to strings."""
        return {str(key).upper(): str(value) for key, value in strings.items()}

    def merge(self, strings: Mapping[str, Any]) -> None:
        """Merge parsed strings, keeping override entries on top.

        Args:
            strings: Key/value pairs from one translation file.
        """
        self.strings.update(self.normalize(strings))
        self.strings.update(self.overrides)

    def get(self, key: str) -> Optional[str]:
        """Return the translation for a key, or None if absent."""
        return self.strings.get(key.upper())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.upper() in self.strings

    def __len__(self) -> int:
        return len(self.strings)

    def __iter__(self) -> Iterator[str]:
        return iter(self.strings)


@dataclass
class LanguageMetadata:
    """Descriptive metadata for a language.

    Attributes:
        tag: Language tag (e.g., "en-GB").
        name: Human readable name (e.g., "English (en-GB)").
        rtl: Whether the language is written right-to-left.
        locale: Comma separated system locale names.
        first_day: First day of the week (0 = Sunday).
        week_end: Comma separated weekend day numbers.
        calendar: Calendar type, if not gregorian.
        extra: Any additional metadata properties.
    """

    tag: str
    name: str
    rtl: bool = False
    locale: Optional[str] = None
    first_day: int = 0
    week_end: str = "0,6"
    calendar: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    _FIELD_ALIASES = {
        "firstDay": "first_day",
        "weekEnd": "week_end",
    }

    @classmethod
    def from_dict(cls, tag: str, data: Mapping[str, Any]) -> "LanguageMetadata":
        """Build metadata from a mapping, keeping unknown keys in ``extra``.

        Args:
            tag: Language tag used when the mapping does not name one.
            data: Raw metadata mapping.

        Returns:
            LanguageMetadata instance.
        """
        known = {"tag", "name", "rtl", "locale", "first_day", "week_end", "calendar"}
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for raw_key, value in data.items():
            key = cls._FIELD_ALIASES.get(raw_key, raw_key)
            if key in known:
                values[key] = value
            else:
                extra[raw_key] = value

        values.setdefault("tag", tag)
        values.setdefault("name", values["tag"])
        values["rtl"] = str(values.get("rtl", 0)).strip().lower() in ("1", "true", "yes")
        values["first_day"] = _coerce_first_day(values.get("first_day"), values["tag"])
        values["week_end"] = str(values.get("week_end") or "0,6")
        return cls(extra=extra, **values)

    def get(self, prop: str, default: Any = None) -> Any:
        """Get a metadata property by name.

        Args:
            prop: Property name, either a field name or an extra key.
            default: Value returned when the property is unset.

        Returns:
            The property value or default.
        """
        key = self._FIELD_ALIASES.get(prop, prop)
        if key in self.__dataclass_fields__ and key != "extra":
            value = getattr(self, key)
            return default if value is None else value
        return self.extra.get(prop, default)


def _coerce_first_day(value: Any, tag: str) -> int:
    """Return the first day of the week as an int, 0 when unusable."""
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        logger.warning("invalid_first_day", tag=tag, value=str(value))
        return 0
