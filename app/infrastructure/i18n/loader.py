"""Translation file loading.

Decides which translation files to read for a language/extension pair,
applies the default-language fallback policy and remembers which files were
already attempted so repeated loads are cheap.

File layout (see ``resolve_language_path``):

    <base_path>/language/<lang>/<lang>.ini              core strings
    <base_path>/language/<lang>/<lang>.<extension>.ini  extension strings
"""

import os
from pathlib import Path
from typing import Callable, Dict, Optional

from infrastructure.i18n.models import LoadedFilesIndex, TranslationStore
from infrastructure.i18n.parser import (
    PathLike,
    PathResolver,
    TranslationFileError,
    TranslationParser,
    parse_translation_file,
    resolve_language_path,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

CORE_EXTENSION = "core"
FILE_SUFFIX = ".ini"

FileValidator = Callable[[PathLike], int]
ParseErrorReporter = Callable[[PathLike, str], None]


class TranslationFileLoader:
    """Loads translation files into a TranslationStore.

    Attributes:
        store: Store receiving parsed strings.
        parser: Callable turning a file path into a key/value mapping.
        path_resolver: Callable returning the directory for (base_path, lang).
        validator: Optional structural check run on every parsed file while
            debugging.
        error_reporter: Optional callable receiving (path, message) for a
            parse error the validator did not flag while debugging.
        paths: Extension -> {file path -> load result}.
    """

    def __init__(
        self,
        store: TranslationStore,
        parser: TranslationParser = parse_translation_file,
        path_resolver: PathResolver = resolve_language_path,
        validator: Optional[FileValidator] = None,
        error_reporter: Optional[ParseErrorReporter] = None,
    ):
        self.store = store
        self.parser = parser
        self.path_resolver = path_resolver
        self.validator = validator
        self.error_reporter = error_reporter
        self.paths: LoadedFilesIndex = {}
        self._counter = 0

    @property
    def counter(self) -> int:
        """Number of file loads attempted so far."""
        return self._counter

    def build_filename(self, base_path: PathLike, lang: str, extension: str) -> str:
        """Return the absolute path of the file for a language and extension.

        Args:
            base_path: Base directory containing the ``language/`` tree.
            lang: Language tag.
            extension: Extension name; "core" or "" select the core file.

        Returns:
            Absolute file path as a string.
        """
        internal = extension in (CORE_EXTENSION, "")
        filename = lang if internal else f"{lang}.{extension}"
        directory = Path(self.path_resolver(base_path, lang))
        return os.path.abspath(directory / f"{filename}{FILE_SUFFIX}")

    def load(
        self,
        extension: str,
        base_path: PathLike,
        lang: str,
        default_lang: str,
        reload: bool = False,
        default: bool = True,
        debug: bool = False,
    ) -> bool:
        """Load the file for an extension, merging its strings into the store.

        When not debugging and ``lang`` is not the default language, the
        default language's file is loaded first so its strings form the
        baseline. A file that fails to load falls back to the default
        language's file once.

        Args:
            extension: Extension to load strings for.
            base_path: Base directory containing the ``language/`` tree.
            lang: Language to load.
            default_lang: Default language tag.
            reload: Re-read the file even if it was already attempted.
            default: Allow default-language fallback.
            debug: Whether the owning language is in debug mode.

        Returns:
            True if the file (or its fallback) added strings.
        """
        if not debug and lang != default_lang and default:
            self.load(
                extension,
                base_path,
                default_lang,
                default_lang,
                reload=False,
                default=False,
                debug=debug,
            )

        filename = self.build_filename(base_path, lang, extension)

        if not reload and filename in self.paths.get(extension, {}):
            result = self.paths[extension][filename]
        else:
            result = self.load_file(filename, extension, debug=debug)

        # The fallback lookup is reload-less, so a repeated call answers the same.
        if not result and default and not debug:
            fallback = self.build_filename(base_path, default_lang, extension)
            if fallback != filename:
                logger.debug(
                    "language_file_fallback",
                    extension=extension,
                    file=filename,
                    fallback=fallback,
                )
                if fallback in self.paths.get(extension, {}):
                    result = self.paths[extension][fallback]
                else:
                    result = self.load_file(fallback, extension, debug=debug)

        return result

    def load_file(self, filename: str, extension: str = "unknown", debug: bool = False) -> bool:
        """Parse one file and merge it into the store, recording the result.

        Args:
            filename: Absolute file path.
            extension: Extension the file belongs to.
            debug: Run the validator on the file after parsing.

        Returns:
            True if the file yielded at least one string.
        """
        self._counter += 1

        strings = self.parse(filename, debug=debug)
        result = False

        if strings:
            self.store.merge(strings)
            result = True
            logger.debug(
                "language_file_loaded",
                extension=extension,
                file=filename,
                string_count=len(strings),
            )

        self.paths.setdefault(extension, {})[filename] = result
        return result

    def parse(self, filename: PathLike, debug: bool = False) -> Dict[str, str]:
        """Parse a file, treating missing or broken files as empty.

        Args:
            filename: File to parse.
            debug: Run the validator on the file if it exists. A parse error
                the validator does not flag goes to the error reporter.

        Returns:
            Parsed key/value mapping, empty on failure.
        """
        parse_error: Optional[str] = None

        try:
            strings = self.parser(filename)
        except FileNotFoundError:
            logger.debug("translation_file_not_found", file=str(filename))
            strings = {}
        except (TranslationFileError, UnicodeDecodeError) as e:
            logger.warning(
                "translation_file_parse_failed", file=str(filename), error=str(e)
            )
            strings = {}
            parse_error = str(e)
        except OSError as e:
            logger.warning(
                "translation_file_unreadable", file=str(filename), error=str(e)
            )
            strings = {}

        if debug and self.validator is not None and os.path.isfile(filename):
            flagged = self.validator(filename)
            if parse_error and not flagged and self.error_reporter is not None:
                self.error_reporter(filename, parse_error)

        return strings

    def get_paths(self, extension: Optional[str] = None):
        """Return the loaded-files index.

        Args:
            extension: Optional extension name.

        Returns:
            The whole index, the extension's mapping, or None for an
            extension that was never loaded.
        """
        if extension is not None:
            return self.paths.get(extension)
        return self.paths
