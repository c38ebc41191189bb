"""
Parser settings for Vocabulary Import Workbench.

Holds the tunable thresholds, confidence values and separator set used by
the import pipeline.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ParserSettings:
    """
    Tunable policy for parsing and scoring.
    
    Attributes:
        confirm_threshold: Minimum confidence for a resolved row to start confirmed
        delimiter_full_confidence: Delimiter split with both sides populated
        delimiter_partial_confidence: Delimiter split with one side populated
        delimiter_empty_confidence: Delimiter split with neither side populated
        alternating_pair_confidence: Alternating term/meaning pair
        alternating_dangling_confidence: Unpaired last line in alternating mode
        single_line_confidence: Whole line taken as term
        separators: Literal separators recognized anywhere on a line
        dash_separators: Dashes recognized only when surrounded by whitespace
        split_on_multiple_spaces: Treat a run of 2+ spaces as a separator
        max_lines: Maximum number of non-empty lines accepted per parse
        skip_header_lines: Drop UNIT/LESSON/page-number style heading lines
        clean_ocr_lines: Strip word numbers and drop pronunciation/POS-only lines
    """
    
    confirm_threshold: float = 0.8
    delimiter_full_confidence: float = 0.9
    delimiter_partial_confidence: float = 0.5
    delimiter_empty_confidence: float = 0.0
    alternating_pair_confidence: float = 0.85
    alternating_dangling_confidence: float = 0.3
    single_line_confidence: float = 0.2
    separators: Tuple[str, ...] = ("\t", ":", "：", "=", "→")
    dash_separators: Tuple[str, ...] = ("-", "–", "—")
    split_on_multiple_spaces: bool = True
    max_lines: int = 5000
    skip_header_lines: bool = False
    clean_ocr_lines: bool = False
    
    def __post_init__(self):
        """Reject out-of-range values at construction time."""
        from utils.validation import validate_settings
        
        is_valid, error_msg = validate_settings(self)
        if not is_valid:
            raise ValueError(error_msg)
    

DEFAULT_SETTINGS = ParserSettings()
