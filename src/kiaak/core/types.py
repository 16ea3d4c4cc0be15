"""Coordinate value object and the coordinate model.

A square is named by its column letter followed by its row name::

    K A      -> "KA"
    P AU     -> "PAU"

Every column/row pair is a valid square on the 9x9 board.
"""

from __future__ import annotations

from dataclasses import dataclass

from kiaak.core.enums import Column, Row


@dataclass(frozen=True, slots=True)
class Coord:
    """Immutable absolute board coordinate."""

    column: Column
    row: Row

    def __str__(self) -> str:
        return f"{self.column.value}{self.row.value}"


def parse_coord(text: str) -> Coord | None:
    """Validate *text* as a square name; ``None`` if it names no square."""
    if len(text) < 2:
        return None
    try:
        column = Column(text[0])
        row = Row(text[1:])
    except ValueError:
        return None
    return Coord(column, row)


def coord(name: str) -> Coord:
    """Parse square name, raising on invalid input, e.g. 'KE' -> Coord(K, E)."""
    result = parse_coord(name)
    if result is None:
        raise ValueError(f"Invalid square name: {name!r}")
    return result
