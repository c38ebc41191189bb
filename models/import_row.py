"""
Import row data model for Vocabulary Import Workbench.

Represents a single candidate vocabulary entry extracted from pasted text,
together with its extraction confidence and review status.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum


class RowStatus(str, Enum):
    """Review status of an import row."""

    CANDIDATE = "candidate"
    UNCLASSIFIED = "unclassified"
    CONFIRMED = "confirmed"


def new_row_id() -> str:
    """Generate a fresh opaque row identifier."""
    return uuid.uuid4().hex


@dataclass
class ImportRow:
    """
    Represents one extracted term/meaning pair awaiting review.
    
    Attributes:
        term: Term side of the entry (editable)
        meaning: Meaning side of the entry (editable)
        confidence: Extraction certainty in [0.0, 1.0], set once at creation
        source_line: Original text this row was derived from
        status: Review status (candidate/unclassified/confirmed)
        id: Unique identifier, stable across manual edits
    """
    
    term: str
    meaning: str
    confidence: float
    source_line: str = ""
    status: RowStatus = RowStatus.CANDIDATE
    id: str = field(default_factory=new_row_id)
    
    @property
    def is_resolved(self) -> bool:
        """True when both term and meaning are non-blank."""
        return bool(self.term.strip()) and bool(self.meaning.strip())
    
    def content(self) -> tuple:
        """Row content without its identity, used for comparisons."""
        return (self.term, self.meaning, self.confidence, self.status)
