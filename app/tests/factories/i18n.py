"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- Translation files and language directory trees
- CallerContext
- LanguageMetadata
"""

from pathlib import Path
from typing import Dict, Optional

import yaml

from infrastructure.i18n import CallerContext, LanguageMetadata


def write_translation_file(
    path: Path,
    strings: Optional[Dict[str, str]] = None,
    header: str = "; Generated for tests\n",
) -> Path:
    """Write a translation file with one ``KEY="value"`` line per entry.

    Args:
        path: File to write; parent directories are created.
        strings: Key/value pairs to write.
        header: Text written before the entries.

    Returns:
        The written path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [header] if header else []
    for key, value in (strings or {}).items():
        lines.append(f'{key}="{value}"\n')
    path.write_text("".join(lines), encoding="utf-8")
    return path


def make_language_tree(
    base_path: Path,
    files: Dict[str, Dict[str, Dict[str, str]]],
    overrides: Optional[Dict[str, Dict[str, str]]] = None,
    metadata: Optional[Dict[str, dict]] = None,
) -> Path:
    """Create a ``language/`` tree under base_path.

    Args:
        base_path: Directory receiving the tree.
        files: {lang: {extension: strings}}; extension "core" writes
            ``<lang>.ini``, any other writes ``<lang>.<extension>.ini``.
        overrides: {lang: strings} written to ``overrides/<lang>.override.ini``.
        metadata: {lang: mapping} written to ``<lang>/metadata.yml``.

    Returns:
        base_path.
    """
    language_dir = base_path / "language"

    for lang, extensions in files.items():
        for extension, strings in extensions.items():
            name = lang if extension == "core" else f"{lang}.{extension}"
            write_translation_file(language_dir / lang / f"{name}.ini", strings)

    for lang, strings in (overrides or {}).items():
        write_translation_file(
            language_dir / "overrides" / f"{lang}.override.ini", strings
        )

    for lang, data in (metadata or {}).items():
        metadata_file = language_dir / lang / "metadata.yml"
        metadata_file.parent.mkdir(parents=True, exist_ok=True)
        with open(metadata_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)

    return base_path


def make_caller_context(
    function: str = "render",
    class_name: Optional[str] = "ArticleView",
    file: str = "/srv/site/views/article.py",
    line: int = 42,
) -> CallerContext:
    """Create a CallerContext instance."""
    return CallerContext(function=function, class_name=class_name, file=file, line=line)


def make_language_metadata(
    tag: str = "en-GB",
    name: str = "English (en-GB)",
    rtl: bool = False,
    locale: Optional[str] = "en_GB.utf8, en_GB.UTF-8, en_GB, eng_GB, en, english",
    first_day: int = 0,
    week_end: str = "0,6",
    calendar: Optional[str] = None,
) -> LanguageMetadata:
    """Create a LanguageMetadata instance."""
    return LanguageMetadata(
        tag=tag,
        name=name,
        rtl=rtl,
        locale=locale,
        first_day=first_day,
        week_end=week_end,
        calendar=calendar,
    )
