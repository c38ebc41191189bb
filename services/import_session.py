"""
ImportSession: the mutable aggregate of one import operation.

Holds the pasted source text, the selected parse mode and the current rows.
All mutating operations are serialized on a per-session lock so a reparse
can never interleave with a half-finished row edit.
"""

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from models import ImportRow, RowStatus, ParseMode, ParserSettings, DEFAULT_SETTINGS, RowNotFoundError
from utils.performance import monitor_performance
from .import_parser import ImportParser
from .status_manager import StatusManager

logger = logging.getLogger(__name__)


class ImportSession:
    """
    Transient container for one import.
    
    Rows are replaced wholesale on every reparse (manual edits are discarded,
    never merged). Between reparses they change only through update_row and
    set_status.
    
    Attributes:
        id: Unique session identifier
        settings: ParserSettings used for every parse of this session
    """
    
    def __init__(self,
                 source_text: str,
                 mode=ParseMode.AUTO,
                 settings: Optional[ParserSettings] = None):
        """
        Create a session and parse the source text.
        
        Args:
            source_text: Full pasted text (kept unchanged for reparsing)
            mode: Initial ParseMode or its string value (default: auto)
            settings: Parser settings (default: DEFAULT_SETTINGS)
        
        Raises:
            InvalidModeError: If mode is not recognized
            SourceTooLargeError: If the text exceeds the line limit
        """
        self.id = uuid.uuid4().hex
        self._created_at = datetime.now()
        self._source_text = source_text or ""
        self._mode = ParseMode.parse(mode)
        self.settings = settings or DEFAULT_SETTINGS
        
        self._parser = ImportParser(self.settings)
        self._status_manager = StatusManager(self.settings)
        self._lock = threading.RLock()
        self._rows: List[ImportRow] = []
        self._resolved_mode: ParseMode = ParseMode.SINGLE_LINE
        
        self.reparse()
        logger.info(
            f"Import session {self.id} created: {len(self._rows)} rows "
            f"(mode: {self._mode.value} -> {self._resolved_mode.value})"
        )
    
    @property
    def created_at(self) -> datetime:
        return self._created_at
    
    @property
    def source_text(self) -> str:
        return self._source_text
    
    @property
    def mode(self) -> ParseMode:
        """Mode selected by the user (may be AUTO)."""
        return self._mode
    
    @property
    def resolved_mode(self) -> ParseMode:
        """Concrete mode that produced the current rows."""
        return self._resolved_mode
    
    @property
    def rows(self) -> Tuple[ImportRow, ...]:
        """
        Current rows in extraction order.
        
        Rows are copies: editing them does not touch the session, use
        update_row / set_status for that.
        """
        with self._lock:
            return self._snapshot()
    
    def _snapshot(self) -> Tuple[ImportRow, ...]:
        return tuple(replace(row) for row in self._rows)
    
    @property
    def is_empty(self) -> bool:
        with self._lock:
            return not self._rows
    
    @monitor_performance("reparse")
    def reparse(self) -> Tuple[ImportRow, ...]:
        """
        Rebuild all rows from source_text under the current mode.
        
        Returns:
            The new rows
        """
        with self._lock:
            result = self._parser.parse(self._source_text, self._mode)
            self._rows = result.rows
            self._resolved_mode = result.mode
            return self._snapshot()
    
    def set_mode(self, mode) -> Tuple[ImportRow, ...]:
        """
        Switch parse mode and reparse.
        
        Args:
            mode: New ParseMode or its string value
        
        Returns:
            The new rows
        
        Raises:
            InvalidModeError: If mode is not recognized (nothing changes)
        """
        new_mode = ParseMode.parse(mode)
        with self._lock:
            self._mode = new_mode
            rows = self.reparse()
            logger.info(
                f"Session {self.id} reparsed as {new_mode.value} "
                f"({self._resolved_mode.value}): {len(rows)} rows"
            )
            return rows
    
    def _find_row(self, row_id: str) -> ImportRow:
        for row in self._rows:
            if row.id == row_id:
                return row
        logger.warning(f"Session {self.id}: row {row_id} not found")
        raise RowNotFoundError(row_id)
    
    def get_row(self, row_id: str) -> ImportRow:
        """
        Look up a row by id.
        
        Raises:
            RowNotFoundError: If no row has this id
        """
        with self._lock:
            return replace(self._find_row(row_id))
    
    def update_row(self,
                   row_id: str,
                   term: Optional[str] = None,
                   meaning: Optional[str] = None) -> ImportRow:
        """
        Edit a row's term and/or meaning in place.
        
        Confidence and source_line are left untouched; status is derived
        again from the edited content.
        
        Args:
            row_id: Id of the row to edit
            term: New term, or None to keep the current one
            meaning: New meaning, or None to keep the current one
        
        Returns:
            Copy of the edited row
        
        Raises:
            RowNotFoundError: If no row has this id (nothing changes)
        """
        with self._lock:
            row = self._find_row(row_id)
            if term is not None:
                row.term = term
            if meaning is not None:
                row.meaning = meaning
            self._status_manager.refresh(row)
            return replace(row)
    
    def set_status(self, row_id: str, status) -> ImportRow:
        """
        Override a row's status regardless of its content.
        
        The override stays until the next update_row on that row.
        
        Args:
            row_id: Id of the row
            status: RowStatus or its string value
        
        Returns:
            Copy of the updated row
        
        Raises:
            ValueError: If status is invalid
            RowNotFoundError: If no row has this id (nothing changes)
        """
        new_status = StatusManager.coerce(status)
        with self._lock:
            row = self._find_row(row_id)
            row.status = new_status
            return replace(row)
    
    def status_counts(self) -> Dict[str, int]:
        """Count rows per status."""
        with self._lock:
            counts = {status.value: 0 for status in RowStatus}
            for row in self._rows:
                counts[row.status.value] += 1
            return counts
    
    def resolved_count(self) -> int:
        """Count rows whose term and meaning are both filled in."""
        with self._lock:
            return sum(1 for row in self._rows if row.is_resolved)
    
    def confirmed_rows(self) -> List[ImportRow]:
        """Rows that are confirmed and resolved, in order."""
        with self._lock:
            return [
                replace(row) for row in self._rows
                if row.status is RowStatus.CONFIRMED and row.is_resolved
            ]


@monitor_performance("create_session")
def create_session(source_text: str,
                   mode=ParseMode.AUTO,
                   settings: Optional[ParserSettings] = None) -> ImportSession:
    """
    Create an ImportSession from pasted text.
    
    Args:
        source_text: Full pasted text
        mode: ParseMode or its string value (default: auto)
        settings: Parser settings
    
    Returns:
        New ImportSession (rows may be empty for blank text)
    
    Raises:
        InvalidModeError: If mode is not recognized
    """
    return ImportSession(source_text, mode=mode, settings=settings)
