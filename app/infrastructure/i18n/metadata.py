"""Language metadata loading.

Metadata lives next to the language's translation files:

    <base_path>/language/<tag>/metadata.yml

    name: English (en-GB)
    tag: en-GB
    rtl: 0
    locale: en_GB.utf8, en_GB.UTF-8, en_GB, eng_GB, en, english
    firstDay: 0
    weekEnd: 0,6
"""

from pathlib import Path
from typing import Callable

import yaml

from infrastructure.i18n.models import LanguageMetadata
from infrastructure.i18n.parser import PathLike, resolve_language_path
from infrastructure.logging import get_module_logger

logger = get_module_logger()

METADATA_FILENAME = "metadata.yml"

MetadataProvider = Callable[[PathLike, str], LanguageMetadata]


def load_language_metadata(base_path: PathLike, lang: str) -> LanguageMetadata:
    """Load metadata for a language from its YAML metadata file.

    A missing file is not an error: the returned metadata names the
    language by its tag.

    Args:
        base_path: Base directory containing the ``language/`` tree.
        lang: Language tag.

    Returns:
        LanguageMetadata for the language.

    Raises:
        ValueError: If the metadata file is not valid YAML or not a mapping.
    """
    metadata_file = Path(resolve_language_path(base_path, lang)) / METADATA_FILENAME

    if not metadata_file.exists():
        logger.debug(
            "language_metadata_not_found", lang=lang, file=str(metadata_file)
        )
        return LanguageMetadata(tag=lang, name=lang)

    try:
        with open(metadata_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("metadata_parse_error", file=str(metadata_file), error=str(e))
        raise ValueError(f"Failed to parse {metadata_file}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.error("invalid_metadata_format", file=str(metadata_file), expected="dict")
        raise ValueError(f"Metadata file {metadata_file} must contain a mapping")

    return LanguageMetadata.from_dict(lang, data)
