"""
Unit tests for validation utilities.

Tests validation functions for modes, statuses, settings and preconditions.
"""

import pytest
from models import ParseMode, RowStatus, ParserSettings
from utils.validation import (
    validate_parse_mode,
    validate_row_status,
    validate_confidence,
    validate_line_count,
    validate_settings,
    validate_content_not_empty,
    validate_accept_preconditions
)


@pytest.mark.parametrize("mode", ["auto", "delimiter", "alternating", "singleLine", ParseMode.AUTO])
def test_validate_parse_mode_valid(mode):
    assert validate_parse_mode(mode) == (True, "")


@pytest.mark.parametrize("mode", ["single_line", "Auto", "", None, 3])
def test_validate_parse_mode_invalid(mode):
    is_valid, error_msg = validate_parse_mode(mode)
    assert is_valid == False
    assert "Invalid parse mode" in error_msg


def test_validate_row_status():
    assert validate_row_status("candidate") == (True, "")
    assert validate_row_status(RowStatus.CONFIRMED) == (True, "")
    
    is_valid, error_msg = validate_row_status("rejected")
    assert is_valid == False
    assert "Invalid status" in error_msg


@pytest.mark.parametrize("value", [0.0, 0.5, 1.0, 1])
def test_validate_confidence_valid(value):
    assert validate_confidence(value) == (True, "")


@pytest.mark.parametrize("value", [-0.1, 1.01, "0.5", None, True])
def test_validate_confidence_invalid(value):
    is_valid, error_msg = validate_confidence(value, "score")
    assert is_valid == False
    assert "score" in error_msg


def test_validate_line_count():
    assert validate_line_count(10, 10) == (True, "")
    
    is_valid, error_msg = validate_line_count(11, 10)
    assert is_valid == False
    assert "11" in error_msg


def test_validate_settings_defaults():
    assert validate_settings(ParserSettings()) == (True, "")


def test_invalid_settings_rejected_at_construction():
    with pytest.raises(ValueError, match="confirm_threshold"):
        ParserSettings(confirm_threshold=1.5)
    with pytest.raises(ValueError, match="max_lines"):
        ParserSettings(max_lines=0)
    with pytest.raises(ValueError, match="separators"):
        ParserSettings(separators=("",))


def test_validate_content_not_empty():
    assert validate_content_not_empty("apple") == (True, "")
    
    is_valid, error_msg = validate_content_not_empty("  \n", "粘贴的文本")
    assert is_valid == False
    assert error_msg == "粘贴的文本不能为空"


def test_validate_accept_preconditions():
    assert validate_accept_preconditions(3) == (True, "")
    
    is_valid, error_msg = validate_accept_preconditions(0)
    assert is_valid == False
    assert "没有已确认的词条" in error_msg


def test_settings_accept_list_separators():
    """Test separators given as lists validate and build a pattern."""
    from services.mode_strategies import separator_pattern, split_by_delimiter
    
    settings = ParserSettings(separators=["|"], dash_separators=["-"])
    
    assert validate_settings(settings) == (True, "")
    assert split_by_delimiter("a|b", separator_pattern(settings)) == ("a", "b")
    
    with pytest.raises(ValueError, match="separators"):
        ParserSettings(separators=["", "|"])


def test_status_coercion_matches_validator():
    """Test StatusManager rejects exactly what validate_row_status rejects."""
    from services import StatusManager
    
    is_valid, error_msg = validate_row_status("rejected")
    assert is_valid == False
    
    with pytest.raises(ValueError) as excinfo:
        StatusManager.coerce("rejected")
    assert str(excinfo.value) == error_msg
