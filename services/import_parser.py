"""
ImportParser running the full parsing pipeline.

Normalizer -> mode strategy (auto resolved first) -> ConfidenceScorer ->
RowBuilder, producing a brand-new list of rows on every call.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from models import ImportRow, ParseMode, ParserSettings, DEFAULT_SETTINGS, SourceTooLargeError
from utils.performance import monitor_performance
from utils.validation import validate_line_count
from .mode_strategies import extract
from .normalizer import Normalizer
from .row_builder import RowBuilder

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """
    Output of one parse.
    
    Attributes:
        mode: Concrete mode actually used (AUTO already resolved)
        rows: Rows in extraction order
        line_count: Number of normalized lines consumed
    """
    
    mode: ParseMode
    rows: List[ImportRow] = field(default_factory=list)
    line_count: int = 0


class ImportParser:
    """
    Stateless parser turning pasted text into ImportRow objects.
    
    Attributes:
        settings: ParserSettings shared by all pipeline stages
    """
    
    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.normalizer = Normalizer(self.settings)
        self.row_builder = RowBuilder(self.settings)
    
    @monitor_performance("parse")
    def parse(self, text: str, mode=ParseMode.AUTO) -> ParseResult:
        """
        Parse pasted text under the given mode.
        
        Text that normalizes to zero lines is not an error: the result simply
        holds no rows.
        
        Args:
            text: Raw pasted text
            mode: ParseMode or its string value
        
        Returns:
            ParseResult with the concrete mode and the new rows
        
        Raises:
            InvalidModeError: If mode is not recognized (checked before parsing)
            SourceTooLargeError: If the text has more lines than max_lines
        """
        mode = ParseMode.parse(mode)
        lines = self.normalizer.normalize(text or "")
        
        is_valid, error_msg = validate_line_count(len(lines), self.settings.max_lines)
        if not is_valid:
            logger.warning(error_msg)
            raise SourceTooLargeError(len(lines), self.settings.max_lines)
        
        resolved, extractions = extract(mode, lines, self.settings)
        rows = self.row_builder.build_all(extractions)
        
        logger.debug(
            f"Parsed {len(lines)} lines into {len(rows)} rows "
            f"(requested: {mode.value}, used: {resolved.value})"
        )
        return ParseResult(mode=resolved, rows=rows, line_count=len(lines))
