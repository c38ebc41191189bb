"""
Mode strategies for turning normalized lines into term/meaning pairs.

The strategy set is closed: delimiter, alternating and singleLine. The auto
mode is resolved to exactly one of them per parse by resolve_mode().
"""

import re
import functools
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from models import ParseMode, ParserSettings, DEFAULT_SETTINGS
from .normalizer import NormalizedLine


@dataclass(frozen=True)
class Extraction:
    """
    A candidate pair extracted from one or two source lines.
    
    Attributes:
        term: Extracted term (may be empty)
        meaning: Extracted meaning (may be empty)
        source_line: Original text the pair came from
        mode: Concrete strategy that produced the pair
    """
    
    term: str
    meaning: str
    source_line: str
    mode: ParseMode
    
    @property
    def has_term(self) -> bool:
        return bool(self.term.strip())
    
    @property
    def has_meaning(self) -> bool:
        return bool(self.meaning.strip())


@functools.lru_cache(maxsize=16)
def _compile_separator_pattern(separators: Tuple[str, ...],
                               dash_separators: Tuple[str, ...],
                               split_on_multiple_spaces: bool) -> re.Pattern:
    alternatives = []
    blank = [s for s in separators if not s.strip()]
    marks = [s for s in separators if s.strip()]
    # Punctuation swallows the padding around it, so "apple  : りんご" splits on ":"
    if marks:
        punctuation = "|".join(re.escape(s) for s in marks)
        alternatives.append(rf"\s*(?:{punctuation})\s*")
    # Dashes only count when spaced, so hyphenated words stay intact
    if dash_separators:
        dashes = "|".join(re.escape(d) for d in dash_separators)
        alternatives.append(rf"\s+(?:{dashes})\s+")
    if split_on_multiple_spaces:
        alternatives.append(r" {2,}")
    alternatives.extend(re.escape(s) for s in blank)
    return re.compile("|".join(alternatives))


def separator_pattern(settings: Optional[ParserSettings] = None) -> re.Pattern:
    """
    Build the separator regex for the given settings.
    
    A single alternation is searched left to right, so the earliest
    separator on a line wins regardless of its kind.
    """
    settings = settings or DEFAULT_SETTINGS
    return _compile_separator_pattern(
        tuple(settings.separators),
        tuple(settings.dash_separators),
        settings.split_on_multiple_spaces,
    )


def split_by_delimiter(line: str, pattern: re.Pattern) -> Optional[Tuple[str, str]]:
    """
    Split a line on its first recognized separator.
    
    Args:
        line: Trimmed line
        pattern: Compiled separator pattern
    
    Returns:
        (term, meaning) with both sides trimmed, or None if no separator
    """
    match = pattern.search(line)
    if match is None:
        return None
    return line[:match.start()].strip(), line[match.end():].strip()


def has_separator(lines: Sequence[NormalizedLine], pattern: re.Pattern) -> bool:
    """Check whether any line contains a recognized separator."""
    return any(pattern.search(line.text) for line in lines)


def extract_delimiter(lines: Sequence[NormalizedLine],
                      settings: Optional[ParserSettings] = None) -> List[Extraction]:
    """
    One pair per line, split on the earliest separator.
    
    Lines without a separator become (line, "").
    """
    pattern = separator_pattern(settings)
    extractions = []
    for line in lines:
        pair = split_by_delimiter(line.text, pattern)
        term, meaning = pair if pair is not None else (line.text, "")
        extractions.append(Extraction(term, meaning, line.original, ParseMode.DELIMITER))
    return extractions


def extract_alternating(lines: Sequence[NormalizedLine]) -> List[Extraction]:
    """
    Pair line 1 with line 2, line 3 with line 4, and so on.
    
    An odd final line becomes a term-only row.
    """
    extractions = []
    for i in range(0, len(lines), 2):
        term_line = lines[i]
        if i + 1 < len(lines):
            meaning_line = lines[i + 1]
            extractions.append(Extraction(
                term_line.text,
                meaning_line.text,
                f"{term_line.original}\n{meaning_line.original}",
                ParseMode.ALTERNATING,
            ))
        else:
            extractions.append(Extraction(
                term_line.text, "", term_line.original, ParseMode.ALTERNATING
            ))
    return extractions


def extract_single_line(lines: Sequence[NormalizedLine]) -> List[Extraction]:
    """Each whole line is the term; meanings are left for manual fill-in."""
    return [
        Extraction(line.text, "", line.original, ParseMode.SINGLE_LINE)
        for line in lines
    ]


def resolve_mode(mode: ParseMode,
                 lines: Sequence[NormalizedLine],
                 settings: Optional[ParserSettings] = None) -> ParseMode:
    """
    Resolve AUTO to one concrete mode; concrete modes are returned as-is.
    
    Auto picks delimiter when any line has a separator, alternating when
    the line count is even and at least 2, and singleLine otherwise.
    
    Args:
        mode: Requested mode
        lines: Full normalized line set
        settings: Parser settings
    
    Returns:
        Concrete ParseMode (never AUTO)
    """
    mode = ParseMode.parse(mode)
    if mode.is_concrete:
        return mode
    
    if has_separator(lines, separator_pattern(settings)):
        return ParseMode.DELIMITER
    if len(lines) >= 2 and len(lines) % 2 == 0:
        return ParseMode.ALTERNATING
    return ParseMode.SINGLE_LINE


def extract(mode: ParseMode,
            lines: Sequence[NormalizedLine],
            settings: Optional[ParserSettings] = None) -> Tuple[ParseMode, List[Extraction]]:
    """
    Run the strategy for a mode, resolving AUTO first.
    
    Returns:
        Tuple of (concrete mode used, extractions in line order)
    """
    concrete = resolve_mode(mode, lines, settings)
    
    if concrete is ParseMode.DELIMITER:
        return concrete, extract_delimiter(lines, settings)
    elif concrete is ParseMode.ALTERNATING:
        return concrete, extract_alternating(lines)
    else:
        return concrete, extract_single_line(lines)
