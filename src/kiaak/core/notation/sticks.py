"""Stick-throw suffix decoders.

Water and bridge throws follow different rules. A water throw of 3 or more
always succeeds and 2 or less always fails, so only the combinations in
:data:`WATER_STICK_RUNS` are representable. A bridge throw states its size
and fails only when followed by 此無, whatever the size.
"""

from __future__ import annotations

from kiaak.core.notation.errors import NotationError, ParseErrorKind
from kiaak.core.notation.models import StickOutcome
from kiaak.core.notation.primitives import expect, one_of_and_map, take_run
from kiaak.core.notation.symbols import (
    BRIDGE,
    BRIDGE_STICK_SIZES,
    FAILURE,
    WATER,
    WATER_STICK_ALPHABET,
    WATER_STICK_RUNS,
)


def parse_water_stick(text: str) -> tuple[str, StickOutcome]:
    """Decode '水' followed by one of the legal water stick runs."""
    rem = expect(text, WATER)
    rem, run = take_run(rem, WATER_STICK_ALPHABET, 1, 3)
    outcome = WATER_STICK_RUNS.get(run)
    if outcome is None:
        raise NotationError(
            ParseErrorKind.MALFORMED_STICK_THROW,
            f"{run!r} is not a water stick result",
            rem,
        )
    size, successful = outcome
    return rem, StickOutcome(size, successful)


def parse_bridge_stick_size(text: str) -> tuple[str, int | None]:
    """Decode '橋' followed by exactly one numeral or '或'."""
    rem = expect(text, BRIDGE)
    return one_of_and_map(rem, BRIDGE_STICK_SIZES, "a bridge stick numeral")


def parse_bridge_failure(text: str) -> tuple[str, bool]:
    """Consume an optional '此無'; returns whether the crossing succeeded."""
    if text.startswith(FAILURE):
        return text[len(FAILURE) :], False
    return text, True
