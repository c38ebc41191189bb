"""
Vocabulary entry model for Vocabulary Import Workbench.

An accepted term/meaning pair, the unit handed over to the vocabulary list
when an import session is accepted.
"""

from dataclasses import dataclass
from enum import Enum


class DuplicatePolicy(str, Enum):
    """How to treat an accepted entry whose term already exists."""

    OVERWRITE = "overwrite"
    SKIP = "skip"
    KEEP_BOTH = "keep_both"


@dataclass(frozen=True)
class VocabularyEntry:
    """
    Accepted vocabulary entry.
    
    Attributes:
        term: Term side, trimmed
        meaning: Meaning side, trimmed
    """
    
    term: str
    meaning: str
    
    @property
    def key(self) -> str:
        """Duplicate-detection key (case-insensitive term)."""
        return self.term.strip().lower()
