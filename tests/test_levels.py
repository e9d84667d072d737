"""Tests for nsdebug.core.levels — level vocabulary and parsing."""

import pytest

from nsdebug.core.colors import Colors
from nsdebug.core.levels import (
    DEBUG, INFO, WARN, ERROR, FATAL, UNKNOWN,
    LEVEL_COLOR, LEVEL_TEXT,
    level_text, normalize_level, parse_level,
)


class TestLevelConstants:
    """Verify level ordinals and vocabulary."""

    def test_level_ordering(self):
        assert DEBUG < INFO < WARN < ERROR < FATAL < UNKNOWN

    def test_specific_values(self):
        assert DEBUG == 0
        assert UNKNOWN == 5

    def test_text_vocabulary(self):
        assert LEVEL_TEXT == ('DEBUG', 'INFO', 'WARN', 'ERROR', 'FATAL', 'UNKNOWN')
        assert level_text(WARN) == 'WARN'

    def test_one_color_per_level(self):
        assert len(LEVEL_COLOR) == len(LEVEL_TEXT)
        assert LEVEL_COLOR[ERROR] == Colors.RED


class TestNormalizeLevel:
    """Test coercion of level arguments."""

    def test_none_stays_none(self):
        assert normalize_level(None) is None

    @pytest.mark.parametrize("value,expected", [(0, 0), (3, 3), (5, 5), (-2, 0), (99, 5)])
    def test_integers_are_clamped(self, value, expected):
        assert normalize_level(value) == expected

    def test_names_case_insensitive(self):
        assert normalize_level("warn") == WARN
        assert normalize_level(" Error ") == ERROR

    def test_garbage_is_no_level(self):
        assert normalize_level("loud") is None
        assert normalize_level(3.5) is None
        assert normalize_level(True) is None


class TestParseLevel:
    """Test LOG_LEVEL parsing."""

    def test_missing_defaults_to_debug(self):
        assert parse_level(None) == DEBUG

    def test_names(self):
        assert parse_level("info") == INFO
        assert parse_level("FATAL") == FATAL

    def test_unrecognized_defaults_to_debug(self):
        assert parse_level("verbose") == DEBUG
        assert parse_level("") == DEBUG

    def test_numeric_strings(self):
        assert parse_level("2") == WARN
        assert parse_level("42") == UNKNOWN

    def test_ints(self):
        assert parse_level(3) == ERROR
