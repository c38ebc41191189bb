"""
ConfidenceScorer for extracted pairs.

Scores how unambiguous an extraction was. The score depends only on the
strategy that produced the pair and on which sides are populated; it says
nothing about whether the translation itself is correct.
"""

from typing import Optional

from models import ParseMode, ParserSettings, DEFAULT_SETTINGS
from .mode_strategies import Extraction


class ConfidenceScorer:
    """
    Maps an Extraction to a confidence value in [0.0, 1.0].
    
    Attributes:
        settings: ParserSettings providing the per-case confidence values
    """
    
    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS
    
    def score(self, extraction: Extraction) -> float:
        """
        Score one extraction.
        
        Rules:
        - delimiter: full pair > one side only > nothing
        - alternating: full pair > dangling last line
        - singleLine: always low, since no meaning was extracted
        
        Args:
            extraction: Extracted pair
        
        Returns:
            Confidence in [0.0, 1.0]
        """
        s = self.settings
        populated = int(extraction.has_term) + int(extraction.has_meaning)
        
        if extraction.mode is ParseMode.DELIMITER:
            if populated == 2:
                value = s.delimiter_full_confidence
            elif populated == 1:
                value = s.delimiter_partial_confidence
            else:
                value = s.delimiter_empty_confidence
        elif extraction.mode is ParseMode.ALTERNATING:
            if extraction.has_meaning:
                value = s.alternating_pair_confidence
            else:
                value = s.alternating_dangling_confidence
        elif extraction.mode is ParseMode.SINGLE_LINE:
            value = s.single_line_confidence
        else:
            raise ValueError(f"Cannot score extraction from unresolved mode: {extraction.mode}")
        
        return min(1.0, max(0.0, float(value)))
