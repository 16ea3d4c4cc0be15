"""Core enumerations for the cetkaik domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Piece color."""

    KOK1 = 0  # red
    HUOK2 = 1  # black


class Profession(IntEnum):
    """The ten piece professions."""

    NUAK1 = 1  # vessel
    KAUK2 = 2  # pawn
    GUA2 = 3  # rook
    KAUN1 = 4  # bishop
    DAU2 = 5  # tiger
    MAUN1 = 6  # horse
    KUA2 = 7  # clerk
    TUK2 = 8  # shaman
    UAI1 = 9  # general
    IO = 10  # king


class Column(StrEnum):
    """Board columns, in board order."""

    K = "K"
    L = "L"
    N = "N"
    T = "T"
    Z = "Z"
    X = "X"
    C = "C"
    M = "M"
    P = "P"


class Row(StrEnum):
    """Board rows, in board order. The last three are two-letter names."""

    A = "A"
    E = "E"
    I = "I"  # noqa: E741
    U = "U"
    O = "O"  # noqa: E741
    Y = "Y"
    AI = "AI"
    AU = "AU"
    IA = "IA"
