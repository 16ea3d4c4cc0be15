"""The notation alphabet.

All tables here are closed: a symbol outside the table for its position is a
lexical failure.
"""

from __future__ import annotations

from kiaak.core.enums import Color, Profession

COLUMN_SYMBOLS = "KLNTZXCMP"
ROW_SYMBOLS = "AEIOUY"

TAM = "皇"
WATER = "水"
BRIDGE = "橋"
UNSPECIFIED = "或"
FAILURE = "此無"
NO_STICK = "無撃裁"
BRACKET_OPEN = "["
BRACKET_CLOSE = "]"
WILDCARD = "片"

# Whitespace allowed between moves of a record.
SEPARATORS = "\t\r\n \u00a0\u3000"

PROFESSION_SYMBOLS: dict[str, Profession] = {
    "船": Profession.NUAK1,
    "兵": Profession.KAUK2,
    "弓": Profession.GUA2,
    "車": Profession.KAUN1,
    "虎": Profession.DAU2,
    "馬": Profession.MAUN1,
    "筆": Profession.KUA2,
    "巫": Profession.TUK2,
    "将": Profession.UAI1,
    "王": Profession.IO,
}
PROFESSION_OR_WILDCARD_SYMBOLS: dict[str, Profession | None] = {
    **PROFESSION_SYMBOLS,
    WILDCARD: None,
}
PROFESSION_CHARS: dict[Profession, str] = {v: k for k, v in PROFESSION_SYMBOLS.items()}

COLOR_SYMBOLS: dict[str, Color] = {
    "赤": Color.KOK1,
    "黒": Color.HUOK2,
}
COLOR_CHARS: dict[Color, str] = {v: k for k, v in COLOR_SYMBOLS.items()}

BRIDGE_STICK_SIZES: dict[str, int | None] = {
    UNSPECIFIED: None,
    "無": 0,
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
}
NUMERAL_CHARS: dict[int | None, str] = {v: k for k, v in BRIDGE_STICK_SIZES.items()}

WATER_STICK_ALPHABET = "或無一二三四五此"

# Every legal water stick run and its (size, successful) outcome.
WATER_STICK_RUNS: dict[str, tuple[int | None, bool]] = {
    "無此無": (0, False),
    "一此無": (1, False),
    "二此無": (2, False),
    "三": (3, True),
    "四": (4, True),
    "五": (5, True),
    "或": (None, True),
    "或此無": (None, False),
}
WATER_STICK_CHARS: dict[tuple[int | None, bool], str] = {
    v: k for k, v in WATER_STICK_RUNS.items()
}
