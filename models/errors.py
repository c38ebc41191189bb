"""Error types raised by the import pipeline."""


class InvalidModeError(ValueError):
    """Raised when a parse mode outside the recognized set is supplied."""
    
    def __init__(self, mode):
        self.mode = mode
        super().__init__(
            f"Invalid parse mode: {mode!r}. "
            f"Must be one of ['auto', 'delimiter', 'alternating', 'singleLine']"
        )


class RowNotFoundError(ValueError):
    """Raised when a row id is not present in the session."""
    
    def __init__(self, row_id: str):
        self.row_id = row_id
        super().__init__(f"Row with id {row_id} not found")


class SourceTooLargeError(ValueError):
    """Raised when pasted text exceeds the configured line limit."""
    
    def __init__(self, line_count: int, max_lines: int):
        self.line_count = line_count
        self.max_lines = max_lines
        super().__init__(
            f"文本过长，请分段导入（{line_count} 行，最多 {max_lines} 行）"
        )
