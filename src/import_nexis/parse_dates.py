"""Locale-specific parsing of Nexis date lines.

A date line reads like ``June 12, 1995, Monday`` (English) or
``1. Februar 2012 Mittwoch`` (German), optionally followed by free text such
as an edition name or a time. Each locale is described by a ``DateGrammar``;
the matching regular expression is built from its vocabulary and token order,
so a new locale only needs a new grammar instance.
"""

import re
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Optional


@dataclass(frozen=True)
class DateGrammar:
    """Vocabulary and layout of one locale's date lines.

    ``months`` maps every accepted month spelling to its number; the first
    spelling of a number is the one used when formatting. ``separators`` are
    the regex character classes between the first/second and second/third
    tokens of ``order``.
    """
    name: str
    months: tuple[tuple[str, int], ...]
    weekdays: tuple[str, ...]
    order: tuple[str, str, str]
    separators: tuple[str, str]
    weekday_separator: str
    layout: str
    trailing_separator: str = "[, ]+"

    def month_number(self, name: str) -> int:
        return dict(self.months)[name]

    def month_name(self, number: int) -> str:
        for name, value in self.months:
            if value == number:
                return name
        raise ValueError(f"No month {number} in {self.name} grammar")


ENGLISH = DateGrammar(
    name="english",
    months=(
        ("January", 1), ("February", 2), ("March", 3), ("April", 4),
        ("May", 5), ("June", 6), ("July", 7), ("August", 8),
        ("September", 9), ("October", 10), ("November", 11), ("December", 12),
    ),
    weekdays=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    order=("month", "day", "year"),
    separators=("[, ]+", "[, ]+"),
    weekday_separator="[,; ]+",
    layout="{month} {day}, {year}",
)

GERMAN = DateGrammar(
    name="german",
    months=(
        ("Januar", 1), ("Februar", 2), ("März", 3), ("Maerz", 3), ("April", 4),
        ("Mai", 5), ("Juni", 6), ("Juli", 7), ("August", 8),
        ("September", 9), ("Oktober", 10), ("November", 11), ("Dezember", 12),
    ),
    weekdays=("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
    order=("day", "month", "year"),
    separators=("[. ]+", "[ ]+"),
    weekday_separator="[ ]+",
    layout="{day}. {month} {year}",
)

DATE_GRAMMARS = {grammar.name: grammar for grammar in (ENGLISH, GERMAN)}


@dataclass(frozen=True)
class DateMatch:
    """A structurally matched date line.

    ``date`` is ``yyyy-mm-dd``, or empty when day/month/year do not form a
    real calendar date. ``edition`` is the trimmed trailing text, if any.
    """
    date: str
    edition: str = ""


def get_grammar(name: str) -> DateGrammar:
    """Look up a grammar by language name (``english`` or ``german``)."""
    try:
        return DATE_GRAMMARS[name]
    except KeyError:
        raise ValueError(
            f"Invalid language_date: {name!r}. Must be one of {sorted(DATE_GRAMMARS)}"
        ) from None


def _alternation(words) -> str:
    return "|".join(re.escape(word) for word in words)


@lru_cache(maxsize=None)
def compile_grammar(grammar: DateGrammar) -> re.Pattern:
    token_patterns = {
        "day": r"(?P<day>[0-9]{1,2})",
        "month": f"(?P<month>{_alternation(name for name, _ in grammar.months)})",
        "year": r"(?P<year>[0-9]{4})",
    }
    first, second, third = (token_patterns[token] for token in grammar.order)
    pattern = (
        f"{first}{grammar.separators[0]}{second}{grammar.separators[1]}{third}"
        f"(?:{grammar.weekday_separator}(?P<weekday>{_alternation(grammar.weekdays)}))?"
        f"(?:{grammar.trailing_separator}(?P<trailing>.+))?"
    )
    return re.compile(pattern)


def parse_date_phrase(text: str, grammar: DateGrammar = ENGLISH) -> Optional[DateMatch]:
    """Match a date line against a grammar.

    Returns None when the line does not match at all. Out-of-range dates
    (e.g. 31 June) still match structurally but carry an empty ``date``.
    """
    match = compile_grammar(grammar).search(text)
    if match is None:
        return None

    edition = (match.group("trailing") or "").strip()
    try:
        parsed = date(
            int(match.group("year")),
            grammar.month_number(match.group("month")),
            int(match.group("day")),
        )
    except ValueError:
        return DateMatch(date="", edition=edition)
    return DateMatch(date=parsed.isoformat(), edition=edition)


def format_date_phrase(value: date, grammar: DateGrammar = ENGLISH) -> str:
    """Render a date the way the grammar's date lines write it."""
    return grammar.layout.format(
        day=value.day,
        month=grammar.month_name(value.month),
        year=value.year,
    )
