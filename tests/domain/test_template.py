"""Tests for the date template token language."""

from __future__ import annotations

import pytest

from canvasdates.domain.calendar import CalendarDate
from canvasdates.domain.template import TOKENS, format_date

FRIDAY = CalendarDate(2024, 1, 19)


class TestTokens:
    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("YYYY", "2024"),
            ("MM", "January"),
            ("NN", "Friday"),
            ("DD", "19"),
            ("Y", "2024"),
            ("M", "Jan"),
            ("N", "Fri"),
            ("D", "19"),
        ],
    )
    def test_each_token(self, template: str, expected: str) -> None:
        assert format_date(FRIDAY, template) == expected

    def test_precedence_order(self) -> None:
        assert [token for token, _ in TOKENS] == ["YYYY", "MM", "NN", "DD", "Y", "M", "N", "D"]

    def test_padding(self) -> None:
        d = CalendarDate(2024, 3, 5)
        assert format_date(d, "DD") == "05"
        assert format_date(d, "D") == "5"

    def test_year_not_zero_padded(self) -> None:
        assert format_date(CalendarDate(999, 1, 1), "YYYY") == "999"


class TestTemplates:
    def test_long_form(self) -> None:
        assert format_date(FRIDAY, "MM DD, YYYY") == "January 19, 2024"

    def test_short_form(self) -> None:
        assert format_date(FRIDAY, "N, M D") == "Fri, Jan 19"

    def test_iso_like_template_not_corrupted(self) -> None:
        """Single-letter passes never eat into YYYY/MM/DD."""
        assert format_date(FRIDAY, "YYYY-MM-DD") == "2024-January-19"

    def test_literals_pass_through(self) -> None:
        assert format_date(FRIDAY, "Week of: ") == "Week of: "
        assert format_date(FRIDAY, "") == ""

    def test_case_sensitive(self) -> None:
        assert format_date(FRIDAY, "yyyy mm dd") == "yyyy mm dd"

    def test_no_escaping(self) -> None:
        """Capital token letters inside words are still tokens."""
        assert format_date(FRIDAY, "Due D") == "19ue 19"

    def test_repeated_tokens(self) -> None:
        assert format_date(FRIDAY, "D/D") == "19/19"
        assert format_date(FRIDAY, "YYYYY") == "20242024"
        assert format_date(FRIDAY, "MMM") == "JanuaryJan"


class TestNoResubstitution:
    """Text inserted by one token is never rewritten by a later token."""

    def test_month_names_with_token_letters(self) -> None:
        assert format_date(CalendarDate(2024, 3, 4), "MM") == "March"
        assert format_date(CalendarDate(2024, 5, 4), "MM") == "May"
        assert format_date(CalendarDate(2024, 11, 5), "MM") == "November"
        assert format_date(CalendarDate(2024, 12, 25), "MM") == "December"

    def test_weekday_names_with_token_letters(self) -> None:
        assert format_date(CalendarDate(2024, 3, 4), "NN") == "Monday"
        assert format_date(CalendarDate(2024, 3, 4), "N") == "Mon"

    def test_abbreviations(self) -> None:
        assert format_date(CalendarDate(2024, 12, 2), "M D") == "Dec 2"
        assert format_date(CalendarDate(2024, 11, 4), "N, M D") == "Mon, Nov 4"

    def test_full_sentence(self) -> None:
        assert format_date(CalendarDate(2024, 12, 1), "NN, MM DD") == "Sunday, December 01"
