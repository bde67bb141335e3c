"""Translation file parsing and path resolution.

Translation files are INI-like text files:

    ; comment
    [section]
    COM_CONTENT_SAVE="Save"
    COM_CONTENT_QUOTE="He said _QQ_hello_QQ_" ; trailing comment

Keys are case-insensitive. Quoted values may embed a double quote as ``\\"``
or ``_QQ_``. Bare values follow INI literal rules (``yes``/``on``/``true``
become ``"1"``; ``no``/``off``/``false``/``none``/``null`` become ``""``).
"""

import re
from pathlib import Path
from typing import Callable, Dict, Union

PathLike = Union[str, Path]

# Keys that INI readers treat as boolean/null literals.
RESERVED_KEYS = frozenset({"YES", "NO", "NULL", "FALSE", "ON", "OFF", "NONE", "TRUE"})

_INI_LITERALS = {
    "YES": "1",
    "ON": "1",
    "TRUE": "1",
    "NO": "",
    "OFF": "",
    "FALSE": "",
    "NONE": "",
    "NULL": "",
}

_SECTION_RE = re.compile(r"^\[[^\]]*\](\s*;.*)?$")
_QUOTED_RE = re.compile(
    r'^(?P<key>[^=]+?)\s*=\s*"(?P<value>(?:[^"\\]|\\.)*)"\s*(;.*)?$'
)
# Raw inner quotes, e.g. KEY="He said "hi""
_LOOSE_QUOTED_RE = re.compile(r'^(?P<key>[^=]+?)\s*=\s*"(?P<value>.*)"\s*(;.*)?$')
_BARE_RE = re.compile(r'^(?P<key>[^=";]+?)\s*=\s*(?P<value>[^";]*?)\s*(;.*)?$')

TranslationParser = Callable[[PathLike], Dict[str, str]]
PathResolver = Callable[[PathLike, str], Path]


class TranslationFileError(ValueError):
    """Raised when a translation file has a syntax error.

    Attributes:
        path: File that failed to parse.
        line: 1-based line number of the first error.
    """

    def __init__(self, path: PathLike, line: int, reason: str):
        self.path = str(path)
        self.line = line
        self.reason = reason
        super().__init__(f"{reason} in {self.path} on line {line}")


def resolve_language_path(base_path: PathLike, lang: str) -> Path:
    """Return the directory holding the files for a language.

    Args:
        base_path: Base directory containing the ``language/`` tree.
        lang: Language tag (e.g., "en-GB").

    Returns:
        Path to ``<base_path>/language/<lang>``.
    """
    return Path(base_path) / "language" / lang


def parse_translation_file(path: PathLike) -> Dict[str, str]:
    """Parse a translation file into a key/value mapping.

    Keys are returned as written; normalization is the store's job.

    Args:
        path: File to parse.

    Returns:
        Mapping of key to value, empty for a file with no entries.

    Raises:
        FileNotFoundError: If the file does not exist.
        TranslationFileError: If a line cannot be parsed.
    """
    strings: Dict[str, str] = {}

    with open(path, "r", encoding="utf-8-sig") as f:
        for line_number, raw_line in enumerate(f, start=1):
            line = raw_line.strip()

            if not line or line.startswith(";") or _SECTION_RE.match(line):
                continue

            match = _QUOTED_RE.match(line) or _LOOSE_QUOTED_RE.match(line)
            if match:
                value = match.group("value").replace('\\"', '"').replace("_QQ_", '"')
            else:
                match = _BARE_RE.match(line)
                if not match:
                    raise TranslationFileError(path, line_number, "syntax error")
                value = match.group("value")
                value = _INI_LITERALS.get(value.upper(), value)

            key = match.group("key").strip()
            if key.upper() in RESERVED_KEYS:
                raise TranslationFileError(
                    path, line_number, f"reserved word {key!r} used as key"
                )

            strings[key] = value

    return strings
