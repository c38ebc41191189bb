"""
RowBuilder combining extractions and scores into ImportRow objects.
"""

from typing import Iterable, List, Optional

from models import ImportRow, ParserSettings, DEFAULT_SETTINGS
from .confidence_scorer import ConfidenceScorer
from .mode_strategies import Extraction
from .status_manager import StatusManager


class RowBuilder:
    """Builds ImportRow objects with fresh ids and initial statuses."""
    
    def __init__(self,
                 settings: Optional[ParserSettings] = None,
                 scorer: Optional[ConfidenceScorer] = None,
                 status_manager: Optional[StatusManager] = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.scorer = scorer or ConfidenceScorer(self.settings)
        self.status_manager = status_manager or StatusManager(self.settings)
    
    def build(self, extraction: Extraction) -> ImportRow:
        """
        Build one row from an extraction.
        
        Args:
            extraction: Extracted pair with its source line
        
        Returns:
            New ImportRow with a fresh id
        """
        confidence = self.scorer.score(extraction)
        status = self.status_manager.initial_status(
            extraction.term, extraction.meaning, confidence
        )
        return ImportRow(
            term=extraction.term,
            meaning=extraction.meaning,
            confidence=confidence,
            source_line=extraction.source_line,
            status=status,
        )
    
    def build_all(self, extractions: Iterable[Extraction]) -> List[ImportRow]:
        """Build rows for all extractions, preserving order."""
        return [self.build(extraction) for extraction in extractions]
