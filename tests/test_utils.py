# =============================================================================
# tests/test_utils.py - Utility Tests
# =============================================================================

from datetime import timezone

import pytest

from lib.utils import parse_todo_id, utc_now


class TestParseTodoId:
    """Tests for parse_todo_id."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1", 1),
            ("42", 42),
            (" 7 ", 7),
            ("-3", -3),
            ("007", 7),
            (5, 5),
        ],
    )
    def test_parses_integers(self, value, expected):
        """Test that plain integers parse."""
        assert parse_todo_id(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "   ", "abc", "1abc", "1.5", "1e3", "0x10", "--1", "-", "١٢", True, "9" * 5000],
    )
    def test_rejects_everything_else(self, value):
        """Test that anything that is not a plain integer gives None."""
        assert parse_todo_id(value) is None


def test_utc_now_is_aware():
    """Test that timestamps carry the UTC timezone."""
    assert utc_now().tzinfo == timezone.utc
