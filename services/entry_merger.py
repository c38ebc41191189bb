"""
EntryMerger for accepting an import session.

Collects confirmed rows and merges them into an in-memory vocabulary list
under a duplicate policy. Nothing is written to disk here.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from models import ImportRow, RowStatus, VocabularyEntry, DuplicatePolicy
from utils.validation import validate_accept_preconditions

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """
    Outcome of a merge.
    
    Attributes:
        entries: Merged vocabulary list (a new list)
        added: Entries appended or overwritten
        skipped: Entries ignored because the term already existed
    """
    
    entries: List[VocabularyEntry] = field(default_factory=list)
    added: int = 0
    skipped: int = 0


class EntryMerger:
    """
    Queues confirmed rows and merges them into existing vocabulary.
    
    Duplicates are matched on the trimmed, case-insensitive term.
    
    Attributes:
        policy: DuplicatePolicy applied when a term already exists
        pending: Entries queued for the next merge
    """
    
    def __init__(self, policy=DuplicatePolicy.SKIP):
        """
        Initialize EntryMerger.
        
        Args:
            policy: DuplicatePolicy or its string value
        
        Raises:
            ValueError: If policy is not supported
        """
        valid_policies = [p.value for p in DuplicatePolicy]
        if not isinstance(policy, DuplicatePolicy) and policy not in valid_policies:
            raise ValueError(
                f"Invalid policy: {policy}. Must be one of {valid_policies}"
            )
        
        self.policy = DuplicatePolicy(policy)
        self.pending: List[VocabularyEntry] = []
    
    def add_row(self, row: ImportRow):
        """
        Queue a confirmed row.
        
        Args:
            row: Row to queue
        
        Raises:
            ValueError: If the row is not confirmed or not resolved
        """
        if row.status is not RowStatus.CONFIRMED:
            raise ValueError(
                f"Only confirmed rows can be accepted. "
                f"Row {row.id} has status: {row.status.value}"
            )
        if not row.is_resolved:
            raise ValueError(f"Row {row.id} is missing a term or meaning")
        
        self.pending.append(VocabularyEntry(row.term.strip(), row.meaning.strip()))
    
    def add_session(self, session) -> int:
        """
        Queue every confirmed, resolved row of a session.
        
        Returns:
            Number of rows queued
        """
        rows = session.confirmed_rows()
        for row in rows:
            self.add_row(row)
        return len(rows)
    
    def get_entry_count(self) -> int:
        """Number of queued entries."""
        return len(self.pending)
    
    def clear(self):
        self.pending.clear()
    
    def merge(self, existing: List[VocabularyEntry]) -> MergeResult:
        """
        Merge queued entries into an existing vocabulary list.
        
        Args:
            existing: Current vocabulary (not modified)
        
        Returns:
            MergeResult with the merged list and counters
        
        Raises:
            ValueError: If no entries are queued
        """
        is_valid, error_msg = validate_accept_preconditions(len(self.pending))
        if not is_valid:
            raise ValueError(error_msg)
        
        merged = list(existing)
        result = MergeResult(entries=merged)
        
        for entry in self.pending:
            index = next(
                (i for i, current in enumerate(merged) if current.key == entry.key),
                None
            )
            if index is None:
                merged.append(entry)
                result.added += 1
            elif self.policy is DuplicatePolicy.OVERWRITE:
                merged[index] = entry
                result.added += 1
            elif self.policy is DuplicatePolicy.SKIP:
                result.skipped += 1
            else:
                merged.append(entry)
                result.added += 1
        
        logger.info(
            f"Merged {len(self.pending)} entries ({self.policy.value}): "
            f"{result.added} added, {result.skipped} skipped"
        )
        return result
