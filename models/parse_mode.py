"""
Parse mode model for Vocabulary Import Workbench.

Enumerates the strategies available for splitting pasted lines into
term/meaning pairs.
"""

from enum import Enum

from .errors import InvalidModeError


class ParseMode(str, Enum):
    """
    Strategy used to turn normalized lines into term/meaning pairs.
    
    AUTO is a meta-mode: it is resolved to one of the three concrete
    modes once per parse and never appears as the result of resolution.
    """
    
    AUTO = "auto"
    DELIMITER = "delimiter"
    ALTERNATING = "alternating"
    SINGLE_LINE = "singleLine"
    
    @classmethod
    def parse(cls, value) -> "ParseMode":
        """
        Convert a user-supplied value into a ParseMode.
        
        Args:
            value: ParseMode instance or its string value
        
        Returns:
            Matching ParseMode
        
        Raises:
            InvalidModeError: If value is not one of the recognized modes
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(value) from None
    
    @property
    def is_concrete(self) -> bool:
        return self is not ParseMode.AUTO
