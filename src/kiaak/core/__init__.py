"""Core domain layer — cetkaik notation with zero external dependencies.

Quick start::

    from kiaak.core import parse_moves, move_to_notation

    for move in parse_moves("XU兵XY無撃裁 KE皇[或]KI 黒弓MY"):
        print(type(move).__name__, move_to_notation(move))
"""

from kiaak.core.enums import Color, Column, Profession, Row
from kiaak.core.notation import (
    Move,
    NotationError,
    ParseErrorKind,
    move_from_notation,
    move_to_notation,
    parse_move,
    parse_moves,
    parse_profession,
    parse_profession_or_wildcard,
    parse_square,
)
from kiaak.core.types import Coord, coord, parse_coord

__all__ = [
    # Enums
    "Color",
    "Column",
    "Profession",
    "Row",
    # Types / helpers
    "Coord",
    "coord",
    "parse_coord",
    # Notation
    "Move",
    "NotationError",
    "ParseErrorKind",
    "move_from_notation",
    "move_to_notation",
    "parse_move",
    "parse_moves",
    "parse_profession",
    "parse_profession_or_wildcard",
    "parse_square",
]
