"""
Normalizer for pasted import text.

Splits raw text into trimmed, non-empty candidate lines while keeping the
original text of every line for later display.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from models import ParserSettings, DEFAULT_SETTINGS


@dataclass(frozen=True)
class NormalizedLine:
    """
    One non-empty line of pasted text.
    
    Attributes:
        text: Line with surrounding whitespace removed (and OCR cleanup applied)
        original: Line exactly as it appeared in the source text
    """
    
    text: str
    original: str


# \r\n must come first so a Windows line ending counts as one break
LINE_BREAK = re.compile(r"\r\n|\r|\n")

HEADER_LINE = re.compile(r"^(?:(?:UNIT|LESSON|CHAPTER|PAGE)\b|(?:P|NO)\.)", re.IGNORECASE)
NUMBER_ONLY_LINE = re.compile(r"^\d+$")
PAGE_MARKER_LINE = re.compile(r"^\d+\s*/\s*\d+$")

WORD_NUMBER_PREFIX = re.compile(r"^\d{2,5}\s*")
PRONUNCIATION_ONLY_LINE = re.compile(r"^\[[^\]]+\]$")
PART_OF_SPEECH_MARKERS = {"cf.", "cf", "n.", "v.", "adj.", "adv."}


class Normalizer:
    """
    Turns pasted text into an ordered list of NormalizedLine items.
    
    Empty lines are always dropped. Heading lines and OCR noise are only
    dropped when the corresponding setting is enabled.
    """
    
    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS
    
    def split_lines(self, text: str) -> List[str]:
        """
        Split text on any mix of \\n, \\r\\n and \\r line endings.
        
        Args:
            text: Raw pasted text
        
        Returns:
            Raw lines in source order (may include empty lines)
        """
        if not text:
            return []
        return LINE_BREAK.split(text)
    
    def normalize(self, text: str) -> List[NormalizedLine]:
        """
        Normalize pasted text into candidate lines.
        
        Args:
            text: Raw pasted text
        
        Returns:
            Non-empty trimmed lines paired with their original text
        """
        lines = []
        for raw in self.split_lines(text):
            value = raw.strip()
            if not value:
                continue
            
            if self.settings.skip_header_lines and self.is_header_like(value):
                continue
            
            if self.settings.clean_ocr_lines:
                value = self.clean_ocr_line(value)
                if value is None:
                    continue
            
            lines.append(NormalizedLine(text=value, original=raw))
        
        return lines
    
    @staticmethod
    def is_header_like(text: str) -> bool:
        """
        Detect heading lines such as "UNIT 3", "Lesson 12", "p.45" or "3 / 10".
        
        Args:
            text: Trimmed line
        
        Returns:
            True if the line looks like a heading or page number
        """
        if HEADER_LINE.match(text):
            return True
        if NUMBER_ONLY_LINE.match(text):
            return True
        if PAGE_MARKER_LINE.match(text):
            return True
        return False
    
    @staticmethod
    def clean_ocr_line(line: str) -> Optional[str]:
        """
        Clean one line of OCR output from a printed word list.
        
        Strips a leading word number ("0963 apple" -> "apple") and drops
        lines that only hold a pronunciation ("[ǽpl]") or a part-of-speech
        marker ("adj.").
        
        Args:
            line: Line to clean
        
        Returns:
            Cleaned line, or None if nothing usable remains
        """
        trimmed = line.strip()
        if not trimmed:
            return None
        
        value = WORD_NUMBER_PREFIX.sub("", trimmed).strip()
        if not value:
            return None
        
        if PRONUNCIATION_ONLY_LINE.match(value):
            return None
        
        if value.lower() in PART_OF_SPEECH_MARKERS:
            return None
        
        return value
