"""kiaak — parser for cetkaik move notation."""

from kiaak.core import (
    Color,
    Column,
    Coord,
    Move,
    NotationError,
    ParseErrorKind,
    Profession,
    Row,
    coord,
    move_from_notation,
    move_to_notation,
    parse_coord,
    parse_move,
    parse_moves,
    parse_profession,
    parse_profession_or_wildcard,
    parse_square,
)

__version__ = "0.1.0"

__all__ = [
    "Color",
    "Column",
    "Coord",
    "Move",
    "NotationError",
    "ParseErrorKind",
    "Profession",
    "Row",
    "coord",
    "move_from_notation",
    "move_to_notation",
    "parse_coord",
    "parse_move",
    "parse_moves",
    "parse_profession",
    "parse_profession_or_wildcard",
    "parse_square",
]
