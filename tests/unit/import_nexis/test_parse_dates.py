"""Tests for import_nexis.parse_dates module."""

import calendar
from datetime import date

import pytest

from import_nexis.parse_dates import (
    DATE_GRAMMARS,
    ENGLISH,
    GERMAN,
    DateMatch,
    format_date_phrase,
    get_grammar,
    parse_date_phrase,
)


class TestGetGrammar:
    def test_known_names(self) -> None:
        assert get_grammar("english") is ENGLISH
        assert get_grammar("german") is GERMAN

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="french"):
            get_grammar("french")


class TestEnglishDates:
    def test_date_with_weekday(self) -> None:
        assert parse_date_phrase("June 12, 1995, Monday", ENGLISH) == DateMatch(date="1995-06-12", edition="")

    def test_date_without_weekday(self) -> None:
        assert parse_date_phrase("January 1, 1986", ENGLISH).date == "1986-01-01"

    def test_trailing_text_is_edition(self) -> None:
        result = parse_date_phrase("March 12, 2013 Tuesday 9:47 AM GMT", ENGLISH)
        assert result == DateMatch(date="2013-03-12", edition="9:47 AM GMT")

    def test_edition_after_weekday(self) -> None:
        result = parse_date_phrase("December 3, 2001, Monday, Final Edition", ENGLISH)
        assert result.date == "2001-12-03"
        assert result.edition == "Final Edition"

    def test_semicolon_before_weekday(self) -> None:
        assert parse_date_phrase("May 5, 2005; Thursday", ENGLISH).date == "2005-05-05"

    def test_month_is_case_sensitive(self) -> None:
        assert parse_date_phrase("june 12, 1995", ENGLISH) is None

    def test_unmatched_phrase_returns_none(self) -> None:
        assert parse_date_phrase("Local news roundup", ENGLISH) is None

    def test_german_phrase_does_not_match_english(self) -> None:
        assert parse_date_phrase("1. Februar 2012 Mittwoch", ENGLISH) is None

    def test_invalid_calendar_date_has_no_date(self) -> None:
        result = parse_date_phrase("June 31, 1995, Saturday", ENGLISH)
        assert result is not None
        assert result.date == ""

    def test_february_29_non_leap_year(self) -> None:
        assert parse_date_phrase("February 29, 1995", ENGLISH).date == ""
        assert parse_date_phrase("February 29, 1996", ENGLISH).date == "1996-02-29"


class TestGermanDates:
    def test_date_with_weekday(self) -> None:
        assert parse_date_phrase("1. Februar 2012 Mittwoch", GERMAN) == DateMatch(date="2012-02-01", edition="")

    def test_umlaut_and_ascii_march(self) -> None:
        assert parse_date_phrase("5. März 2012", GERMAN).date == "2012-03-05"
        assert parse_date_phrase("5. Maerz 2012", GERMAN).date == "2012-03-05"

    def test_trailing_text_is_edition(self) -> None:
        result = parse_date_phrase("5. März 2012 Montag, Hamburg-Ausgabe", GERMAN)
        assert result == DateMatch(date="2012-03-05", edition="Hamburg-Ausgabe")

    def test_day_without_dot(self) -> None:
        assert parse_date_phrase("24 Dezember 2010", GERMAN).date == "2010-12-24"

    def test_english_phrase_does_not_match_german(self) -> None:
        assert parse_date_phrase("June 12, 1995, Monday", GERMAN) is None

    def test_invalid_calendar_date_has_no_date(self) -> None:
        assert parse_date_phrase("31. April 2012", GERMAN).date == ""


class TestFormatDatePhrase:
    def test_english_layout(self) -> None:
        assert format_date_phrase(date(1995, 6, 12), ENGLISH) == "June 12, 1995"

    def test_german_layout_uses_umlaut_spelling(self) -> None:
        assert format_date_phrase(date(2012, 3, 5), GERMAN) == "5. März 2012"


@pytest.mark.parametrize("grammar", list(DATE_GRAMMARS.values()), ids=lambda g: g.name)
@pytest.mark.parametrize("year", [1986, 2000, 2013])
def test_every_day_of_the_year_round_trips(grammar, year) -> None:
    for month in range(1, 13):
        for day in range(1, calendar.monthrange(year, month)[1] + 1):
            value = date(year, month, day)
            assert parse_date_phrase(format_date_phrase(value, grammar), grammar).date == value.isoformat()


@pytest.mark.parametrize("grammar", list(DATE_GRAMMARS.values()), ids=lambda g: g.name)
def test_days_past_month_end_are_rejected(grammar) -> None:
    for month in range(1, 13):
        last_day = calendar.monthrange(2001, month)[1]
        for day in range(last_day + 1, 32):
            name = grammar.month_name(month)
            phrase = grammar.layout.format(day=day, month=name, year=2001)
            assert parse_date_phrase(phrase, grammar).date == ""
