"""Debug instrumentation for language lookups and translation files.

Tracks orphaned keys (lookups without a translation), used keys with their
caller context, and structural errors found in translation files.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional

from infrastructure.i18n.models import CallerContext, ErrorFilesIndex, OrphanEntry
from infrastructure.i18n.parser import RESERVED_KEYS, PathLike
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_BOM = "\ufeff"
_SECTION_RE = re.compile(r"^\[[^\]]*\](\s*;.*)?$")
_LINE_RE = re.compile(r'^[A-Z][A-Z0-9_*\-.]*\s*=\s*".*"(\s*;.*)?$')


class DebugInstrumentation:
    """Collects diagnostics while a language runs in debug mode.

    Attributes:
        orphans: Lookup key -> list of OrphanEntry, one per missed lookup.
        used: Lookup key -> list of CallerContext, one per resolved lookup.
        error_files: File path -> failing line numbers or error description.
    """

    def __init__(self):
        self.orphans: Dict[str, List[OrphanEntry]] = {}
        self.used: Dict[str, List[CallerContext]] = {}
        self.error_files: ErrorFilesIndex = {}

    def record_orphan(
        self, key: str, string: str, caller: Optional[CallerContext] = None
    ) -> OrphanEntry:
        """Record a lookup for a key with no translation."""
        entry = OrphanEntry(key=key, string=string, trace=caller)
        self.orphans.setdefault(key, []).append(entry)
        return entry

    def record_used(self, key: str, caller: Optional[CallerContext] = None) -> None:
        """Record a resolved lookup with its caller context."""
        self.used.setdefault(key, []).append(caller or CallerContext())

    def record_file_error(self, filename: PathLike, message: str) -> None:
        """Record a file that failed to parse without a flagged line."""
        self.error_files[str(filename)] = message
        logger.warning("translation_file_unparseable", file=str(filename), error=message)

    def validate_file(self, filename: PathLike) -> int:
        """Scan a translation file for common structural errors.

        Blank lines, ``;`` comments and ``[section]`` headers are skipped.
        A line is flagged when it has an odd number of double quotes, does
        not look like ``KEY="value"`` with an uppercase key, or uses a
        reserved INI literal as key. Flagged line numbers (1-based) are
        stored in ``error_files`` under the file path.

        Args:
            filename: Path of the file to check.

        Returns:
            Number of flagged lines.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(filename)
        if not path.is_file():
            raise FileNotFoundError(f'Unable to locate file "{filename}" for debugging')

        errors: List[int] = []

        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for index, raw_line in enumerate(f):
                if index == 0:
                    raw_line = raw_line.replace(_BOM, "")

                line = raw_line.strip()

                if not line or line.startswith(";"):
                    continue

                if _SECTION_RE.match(line):
                    continue

                line_number = index + 1

                if line.count('"') % 2 != 0:
                    errors.append(line_number)
                    continue

                if not _LINE_RE.match(line):
                    errors.append(line_number)
                    continue

                key = line.split("=", 1)[0].strip().upper()
                if key in RESERVED_KEYS:
                    errors.append(line_number)

        if errors:
            self.error_files[str(filename)] = errors
            logger.warning(
                "translation_file_has_errors",
                file=str(filename),
                lines=errors,
            )

        return len(errors)
