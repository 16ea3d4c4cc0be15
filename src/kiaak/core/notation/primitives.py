"""Single-symbol decoders: squares, professions and colors.

Every decoder takes the remaining input and returns ``(remainder, value)``,
or raises :class:`NotationError` without consuming anything.
"""

from __future__ import annotations

from typing import TypeVar

from kiaak.core.enums import Color, Profession
from kiaak.core.notation.errors import NotationError, ParseErrorKind
from kiaak.core.notation.symbols import (
    COLOR_SYMBOLS,
    COLUMN_SYMBOLS,
    PROFESSION_OR_WILDCARD_SYMBOLS,
    PROFESSION_SYMBOLS,
    ROW_SYMBOLS,
)
from kiaak.core.types import Coord, parse_coord

_T = TypeVar("_T")


def unexpected(text: str, expected: str) -> NotationError:
    """Build an UNEXPECTED_SYMBOL failure at the head of *text*."""
    found = repr(text[0]) if text else "end of input"
    return NotationError(
        ParseErrorKind.UNEXPECTED_SYMBOL,
        f"expected {expected}, found {found}",
        text,
    )


def expect(text: str, literal: str) -> str:
    """Consume *literal* from the head of *text*."""
    if not text.startswith(literal):
        raise unexpected(text, repr(literal))
    return text[len(literal) :]


def one_of_and_map(text: str, table: dict[str, _T], expected: str) -> tuple[str, _T]:
    """Consume one symbol that is a key of *table* and return its value."""
    if not text or text[0] not in table:
        raise unexpected(text, expected)
    return text[1:], table[text[0]]


def take_run(text: str, alphabet: str, low: int, high: int) -> tuple[str, str]:
    """Greedily consume between *low* and *high* symbols from *alphabet*."""
    count = 0
    while count < high and count < len(text) and text[count] in alphabet:
        count += 1
    if count < low:
        raise unexpected(text[count:], f"one of {alphabet!r}")
    return text[count:], text[:count]


def parse_square(text: str) -> tuple[str, Coord]:
    """Decode a square: one column letter then one or two row letters."""
    if not text or text[0] not in COLUMN_SYMBOLS:
        raise unexpected(text, "a column letter")
    rem, row = take_run(text[1:], ROW_SYMBOLS, 1, 2)
    name = text[0] + row
    coord = parse_coord(name)
    if coord is None:
        raise NotationError(
            ParseErrorKind.INVALID_COORDINATE,
            f"{name!r} is not a square",
            rem,
        )
    return rem, coord


def parse_profession(text: str) -> tuple[str, Profession]:
    """Decode a concrete profession symbol, e.g. '船'."""
    return one_of_and_map(text, PROFESSION_SYMBOLS, "a profession")


def parse_profession_or_wildcard(text: str) -> tuple[str, Profession | None]:
    """Decode a profession symbol, or the wildcard '片' as ``None``."""
    return one_of_and_map(text, PROFESSION_OR_WILDCARD_SYMBOLS, "a profession or '片'")


def parse_color(text: str) -> tuple[str, Color]:
    """Decode a color symbol, '赤' or '黒'."""
    return one_of_and_map(text, COLOR_SYMBOLS, "a color")
