"""Data models for Vocabulary Import Workbench."""

from .errors import InvalidModeError, RowNotFoundError, SourceTooLargeError
from .import_row import ImportRow, RowStatus
from .parse_mode import ParseMode
from .parser_settings import ParserSettings, DEFAULT_SETTINGS
from .vocabulary_entry import VocabularyEntry, DuplicatePolicy

__all__ = [
    "ImportRow",
    "RowStatus",
    "ParseMode",
    "ParserSettings",
    "DEFAULT_SETTINGS",
    "VocabularyEntry",
    "DuplicatePolicy",
    "InvalidModeError",
    "RowNotFoundError",
    "SourceTooLargeError",
]
