"""Command line entry point.

Usage::

    kiaak "XU兵XY無撃裁 KE皇[或]KI"
    kiaak --file record.txt --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Any

from kiaak.core.notation import Move, NotationError, parse_moves
from kiaak.core.types import Coord

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kiaak",
        description="Parse cetkaik move notation into structured moves.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("notation", nargs="?", help="move list to parse")
    source.add_argument("--file", type=Path, help="read the move list from a UTF-8 file")
    parser.add_argument("--json", action="store_true", help="print a JSON array")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def _field_value(value: Any) -> Any:
    if isinstance(value, Coord):
        return str(value)
    if isinstance(value, Enum):
        return value.name
    return value


def move_fields(move: Move) -> dict[str, Any]:
    """Field name -> display value for *move*, in declaration order."""
    return {field.name: _field_value(getattr(move, field.name)) for field in fields(move)}


def format_move(move: Move) -> str:
    """One-line description, e.g. 'Parachute color=HUOK2 prof=GUA2 dest=MY'."""
    parts = [type(move).__name__]
    for name, value in move_fields(move).items():
        parts.append(f"{name}={'?' if value is None else value}")
    return " ".join(parts)


def move_payload(move: Move) -> dict[str, Any]:
    """JSON-ready mapping for *move*."""
    return {"kind": type(move).__name__, **move_fields(move)}


def main(argv: list[str] | None = None) -> int:
    """Parse the given move list and print it; returns the exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file is not None:
        try:
            text = args.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.error("Cannot read %s: %s", args.file, exc)
            return 1
    else:
        text = args.notation

    try:
        moves = parse_moves(text)
    except NotationError as exc:
        _LOGGER.error("Invalid notation: %s", exc)
        return 1

    if args.json:
        print(json.dumps([move_payload(m) for m in moves], ensure_ascii=False))
    else:
        for move in moves:
            print(format_move(move))
    return 0


if __name__ == "__main__":
    sys.exit(main())
