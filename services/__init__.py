"""Business logic services for Vocabulary Import Workbench."""

from .normalizer import Normalizer, NormalizedLine
from .mode_strategies import Extraction, resolve_mode, extract
from .confidence_scorer import ConfidenceScorer
from .status_manager import StatusManager, derive_status
from .row_builder import RowBuilder
from .import_parser import ImportParser, ParseResult
from .import_session import ImportSession, create_session
from .entry_merger import EntryMerger, MergeResult

__all__ = [
    "Normalizer",
    "NormalizedLine",
    "Extraction",
    "resolve_mode",
    "extract",
    "ConfidenceScorer",
    "StatusManager",
    "derive_status",
    "RowBuilder",
    "ImportParser",
    "ParseResult",
    "ImportSession",
    "create_session",
    "EntryMerger",
    "MergeResult",
]
