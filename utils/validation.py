"""
Validation utilities for import input.

Provides validation functions for parse modes, row statuses, parser
settings and source size.
"""

from typing import Tuple, List, Any


def validate_parse_mode(mode: Any) -> Tuple[bool, str]:
    """
    Validate that a parse mode is one of the recognized variants.
    
    Args:
        mode: ParseMode or string value to validate
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    from models import ParseMode, InvalidModeError
    
    try:
        ParseMode.parse(mode)
    except InvalidModeError as e:
        return False, str(e)
    
    return True, ""


def validate_row_status(status: Any) -> Tuple[bool, str]:
    """
    Validate a row status value.
    
    Args:
        status: RowStatus or string value to validate
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    from models import RowStatus
    
    valid_statuses = [s.value for s in RowStatus]
    if isinstance(status, RowStatus) or status in valid_statuses:
        return True, ""
    
    return False, f"Invalid status: {status}. Must be one of {valid_statuses}"


def validate_confidence(value: float, field_name: str = "confidence") -> Tuple[bool, str]:
    """
    Validate that a confidence value lies in [0.0, 1.0].
    
    Args:
        value: Value to validate
        field_name: Name of the field for error message
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False, f"{field_name} must be a number"
    
    if not 0.0 <= value <= 1.0:
        return False, f"{field_name} must be between 0.0 and 1.0, got {value}"
    
    return True, ""


def validate_line_count(line_count: int, max_lines: int) -> Tuple[bool, str]:
    """
    Validate that normalized source text stays within the line limit.
    
    Args:
        line_count: Number of non-empty lines
        max_lines: Configured maximum
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    if line_count > max_lines:
        return False, f"文本过长，请分段导入（{line_count} 行，最多 {max_lines} 行）"
    
    return True, ""


def validate_settings(settings: Any) -> Tuple[bool, str]:
    """
    Validate a ParserSettings instance.
    
    Args:
        settings: Settings to validate
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    errors: List[str] = []
    
    confidence_fields = [
        "confirm_threshold",
        "delimiter_full_confidence",
        "delimiter_partial_confidence",
        "delimiter_empty_confidence",
        "alternating_pair_confidence",
        "alternating_dangling_confidence",
        "single_line_confidence",
    ]
    for name in confidence_fields:
        is_valid, error_msg = validate_confidence(getattr(settings, name), name)
        if not is_valid:
            errors.append(error_msg)
    
    if settings.max_lines < 1:
        errors.append("max_lines must be at least 1")
    
    if any(not sep for sep in tuple(settings.separators) + tuple(settings.dash_separators)):
        errors.append("separators must be non-empty strings")
    
    if errors:
        return False, "; ".join(errors)
    
    return True, ""


def validate_content_not_empty(content: str, field_name: str = "内容") -> Tuple[bool, str]:
    """
    Validate that content is not empty or whitespace-only.
    
    Args:
        content: Content to validate
        field_name: Name of the field for error message
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not content or not content.strip():
        return False, f"{field_name}不能为空"
    
    return True, ""


def validate_accept_preconditions(confirmed_count: int) -> Tuple[bool, str]:
    """
    Validate preconditions for accepting an import session.
    
    Args:
        confirmed_count: Number of confirmed, resolved rows
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    if confirmed_count == 0:
        return False, "没有已确认的词条可导入"
    
    return True, ""
