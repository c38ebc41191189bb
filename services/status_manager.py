"""
StatusManager for import rows.

Pure status derivation shared by row creation and manual edits.
"""

from typing import Any, Optional

from models import ImportRow, RowStatus, ParserSettings, DEFAULT_SETTINGS
from utils.validation import validate_row_status


def is_resolved(term: str, meaning: str) -> bool:
    """True when both sides are non-blank after trimming."""
    return bool(term.strip()) and bool(meaning.strip())


def derive_status(term: str,
                  meaning: str,
                  confidence: float,
                  confirm_threshold: float,
                  manually_edited: bool = False) -> RowStatus:
    """
    Derive a row status from its current content.
    
    - unclassified: neither term nor meaning is populated
    - confirmed: row is resolved and either confidence clears the threshold
      or the content was entered by hand
    - candidate: anything else
    
    Args:
        term: Current term
        meaning: Current meaning
        confidence: Extraction confidence (never recomputed here)
        confirm_threshold: Minimum confidence for automatic confirmation
        manually_edited: True when deriving after a user edit
    
    Returns:
        Derived RowStatus
    """
    if not term.strip() and not meaning.strip():
        return RowStatus.UNCLASSIFIED
    
    if is_resolved(term, meaning) and (manually_edited or confidence >= confirm_threshold):
        return RowStatus.CONFIRMED
    
    return RowStatus.CANDIDATE


class StatusManager:
    """
    Applies status derivation and explicit overrides to rows.
    
    Attributes:
        settings: ParserSettings providing the confirm threshold
    """
    
    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS
    
    def initial_status(self, term: str, meaning: str, confidence: float) -> RowStatus:
        """Status for a freshly extracted row."""
        return derive_status(term, meaning, confidence, self.settings.confirm_threshold)
    
    def refresh(self, row: ImportRow) -> RowStatus:
        """
        Recompute a row's status after a manual edit.
        
        Args:
            row: Edited row (updated in place)
        
        Returns:
            The new status
        """
        row.status = derive_status(
            row.term,
            row.meaning,
            row.confidence,
            self.settings.confirm_threshold,
            manually_edited=True,
        )
        return row.status
    
    @staticmethod
    def coerce(status: Any) -> RowStatus:
        """
        Convert a user-supplied status into a RowStatus.
        
        Raises:
            ValueError: If status is not one of candidate/unclassified/confirmed
        """
        is_valid, error_msg = validate_row_status(status)
        if not is_valid:
            raise ValueError(error_msg)
        return RowStatus(status)
