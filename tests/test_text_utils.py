"""Tests for the shared line, token and rounding helpers."""

from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from flowplanr.utils.dates import date_key, format_date, format_day, parse_date_key, week_start
from flowplanr.utils.text import clean_field, count_lines, parse_lines, round_half_up, tokenize


class TestLineParsing:
    def test_blank_lines_are_ignored(self):
        assert parse_lines("a\n\n  \n b \n") == ["a", "b"]
        assert count_lines("a\n\n  \n b \n") == 2

    def test_missing_field_counts_zero(self):
        assert parse_lines(None) == []
        assert count_lines("") == 0

    @given(st.lists(st.text(alphabet="ab \t", max_size=5), max_size=10))
    @settings(max_examples=50)
    def test_count_matches_non_blank_lines(self, lines):
        """*For any* list of lines, only the non-blank ones are counted."""
        text = "\n".join(lines)
        assert count_lines(text) == sum(1 for line in text.split("\n") if line.strip())


class TestTokenize:
    def test_splits_on_non_word_characters(self):
        assert tokenize("slow ci, flaky-tests!", 3) == ["slow", "flaky", "tests"]

    def test_keeps_only_longer_tokens(self):
        assert tokenize("abc abcd abcde", 4) == ["abcde"]


class TestRounding:
    @pytest.mark.parametrize("value, expected", [(2.5, 3), (2.49, 2), (0.5, 1), (59.5, 60), (0, 0)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestCleanField:
    def test_trims_and_blanks_to_none(self):
        assert clean_field("  hi  ") == "hi"
        assert clean_field("   ") is None
        assert clean_field(None) is None


class TestDates:
    def test_date_key_round_trip(self):
        assert date_key(date(2024, 1, 5)) == "2024-01-05"
        assert parse_date_key("2024-01-05") == date(2024, 1, 5)

    def test_rejects_bad_keys(self):
        with pytest.raises(ValueError):
            parse_date_key("05/01/2024")

    def test_rejects_unpadded_keys(self):
        with pytest.raises(ValueError):
            parse_date_key("2024-1-5")

    def test_long_formats(self):
        assert format_day(date(2024, 1, 5)) == "January 5, 2024"
        assert format_date(date(2024, 1, 5)) == "Friday, January 5, 2024"

    def test_week_starts_on_monday(self):
        assert week_start(date(2024, 3, 17)) == date(2024, 3, 11)
        assert week_start(date(2024, 3, 11)) == date(2024, 3, 11)
