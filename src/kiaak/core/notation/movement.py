"""Move notation parsing.

A move is one of eleven shapes. Several shapes share a prefix (a Tam move
with a bracketed hint starts like one without, a bridge+water move starts
like a bridge move), so :func:`parse_move` tries the shapes in a fixed
priority order, most specific first, and keeps the first that matches.

Examples::

    XU兵XY無撃裁        NoStepAndNoStick
    LY弓ZY水五          NoStepAndWaterStick, size 5, successful
    ME弓MIMY橋或此無    StepAndBridgeStick, size unknown, failed
    KE皇[或]KI          TamNoStep, first destination unknown
    PAU皇[MAU]CAIMAU    TamStepDuringLatter
    黒弓MY              Parachute
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from kiaak.core.notation.errors import NotationError, ParseErrorKind
from kiaak.core.notation.models import (
    Move,
    NoStepAndNoStick,
    NoStepAndWaterStick,
    Parachute,
    StepAndBridgeStick,
    StepAndBridgeStickAndWaterStick,
    StepAndNoStick,
    StepAndWaterStick,
    TamNoStep,
    TamStepDuringFormer,
    TamStepDuringLatter,
    TamStepUnspecified,
)
from kiaak.core.notation.primitives import (
    expect,
    parse_color,
    parse_profession,
    parse_profession_or_wildcard,
    parse_square,
    unexpected,
)
from kiaak.core.notation.sticks import (
    parse_bridge_failure,
    parse_bridge_stick_size,
    parse_water_stick,
)
from kiaak.core.notation.symbols import (
    BRACKET_CLOSE,
    BRACKET_OPEN,
    NO_STICK,
    SEPARATORS,
    TAM,
    UNSPECIFIED,
)
from kiaak.core.types import Coord

_LOGGER = logging.getLogger(__name__)

_ShapeParser = Callable[[str], tuple[str, Move]]


def parse_tam_bracket(text: str) -> tuple[str, Coord | None]:
    """Decode a Tam hint: '[' square-or-'或' ']'. '[或]' yields ``None``."""
    rem = expect(text, BRACKET_OPEN)
    if rem.startswith(UNSPECIFIED):
        first_dest = None
        rem = rem[len(UNSPECIFIED) :]
    else:
        rem, first_dest = parse_square(rem)
    rem = expect(rem, BRACKET_CLOSE)
    return rem, first_dest


# ── Ordinary piece moves ─────────────────────────────────────────────────


def _parse_no_step_and_no_stick(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem, prof = parse_profession_or_wildcard(rem)
    rem, dest = parse_square(rem)
    rem = expect(rem, NO_STICK)
    return rem, NoStepAndNoStick(src, prof, dest)


def _parse_no_step_and_water_stick(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem, prof = parse_profession_or_wildcard(rem)
    rem, dest = parse_square(rem)
    rem, water = parse_water_stick(rem)
    return rem, NoStepAndWaterStick(src, prof, dest, water.size, water.successful)


def _parse_step_and_no_stick(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem, prof = parse_profession_or_wildcard(rem)
    rem, step = parse_square(rem)
    rem, dest = parse_square(rem)
    rem = expect(rem, NO_STICK)
    return rem, StepAndNoStick(src, prof, step, dest)


def _parse_step_and_water_stick(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem, prof = parse_profession_or_wildcard(rem)
    rem, step = parse_square(rem)
    rem, dest = parse_square(rem)
    rem, water = parse_water_stick(rem)
    return rem, StepAndWaterStick(
        src, prof, step, dest, water.size, water.successful
    )


def _parse_step_and_bridge_stick(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem, prof = parse_profession_or_wildcard(rem)
    rem, step = parse_square(rem)
    rem, dest = parse_square(rem)
    rem, bridge_size = parse_bridge_stick_size(rem)
    rem, bridge_successful = parse_bridge_failure(rem)
    return rem, StepAndBridgeStick(
        src, prof, step, dest, bridge_size, bridge_successful
    )


def _parse_step_and_bridge_stick_and_water_stick(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem, prof = parse_profession_or_wildcard(rem)
    rem, step = parse_square(rem)
    rem, dest = parse_square(rem)
    rem, bridge_size = parse_bridge_stick_size(rem)
    rem, water = parse_water_stick(rem)
    return rem, StepAndBridgeStickAndWaterStick(
        src, prof, step, dest, bridge_size, water.size, water.successful
    )


# ── Tam moves ────────────────────────────────────────────────────────────


def _parse_tam_no_step(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem = expect(rem, TAM)
    first_dest = None
    if rem.startswith(BRACKET_OPEN):
        rem, first_dest = parse_tam_bracket(rem)
    rem, second_dest = parse_square(rem)
    return rem, TamNoStep(src, first_dest, second_dest)


def _parse_tam_step_unspecified(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem = expect(rem, TAM)
    rem, step = parse_square(rem)
    rem, second_dest = parse_square(rem)
    return rem, TamStepUnspecified(src, step, second_dest)


def _parse_tam_step_during_former(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem = expect(rem, TAM)
    rem, step = parse_square(rem)
    rem, first_dest = parse_tam_bracket(rem)
    rem, second_dest = parse_square(rem)
    return rem, TamStepDuringFormer(src, step, first_dest, second_dest)


def _parse_tam_step_during_latter(text: str) -> tuple[str, Move]:
    rem, src = parse_square(text)
    rem = expect(rem, TAM)
    rem, first_dest = parse_tam_bracket(rem)
    rem, step = parse_square(rem)
    rem, second_dest = parse_square(rem)
    return rem, TamStepDuringLatter(src, first_dest, step, second_dest)


# ── Parachute ────────────────────────────────────────────────────────────


def _parse_parachute(text: str) -> tuple[str, Move]:
    rem, color = parse_color(text)
    rem, prof = parse_profession(rem)
    rem, dest = parse_square(rem)
    return rem, Parachute(color, prof, dest)


# Order matters: a shape must come before every shape that matches a
# prefix of it.
_SHAPES: tuple[_ShapeParser, ...] = (
    _parse_parachute,
    _parse_tam_step_during_former,
    _parse_tam_step_during_latter,
    _parse_tam_step_unspecified,
    _parse_tam_no_step,
    _parse_step_and_bridge_stick_and_water_stick,
    _parse_step_and_bridge_stick,
    _parse_step_and_water_stick,
    _parse_step_and_no_stick,
    _parse_no_step_and_water_stick,
    _parse_no_step_and_no_stick,
)


def parse_move(text: str) -> tuple[str, Move]:
    """Parse one move from the head of *text*.

    Returns ``(remainder, move)``; the remainder is the unconsumed suffix.
    Raises :class:`NotationError` with kind ``NO_MATCHING_SHAPE`` when no
    shape matches, keeping the failure that got furthest as its cause.
    """
    deepest: NotationError | None = None
    for shape in _SHAPES:
        try:
            return shape(text)
        except NotationError as exc:
            _LOGGER.debug("%s rejected %r: %s", shape.__name__, text, exc)
            if deepest is None or len(exc.remainder) < len(deepest.remainder):
                deepest = exc

    assert deepest is not None
    raise NotationError(
        ParseErrorKind.NO_MATCHING_SHAPE,
        f"cannot parse move {text!r} ({deepest})",
        text,
        cause=deepest,
    ) from deepest


def move_from_notation(text: str) -> Move:
    """Parse *text* as exactly one move, rejecting trailing input."""
    rem, move = parse_move(text)
    if rem:
        raise unexpected(rem, "end of move")
    return move


def _skip_separators(text: str) -> str:
    return text.lstrip(SEPARATORS)


def parse_moves(text: str) -> list[Move]:
    """Parse a whitespace-separated list of moves."""
    moves: list[Move] = []
    rem = _skip_separators(text)
    while rem:
        rem, move = parse_move(rem)
        moves.append(move)
        if rem and rem[0] not in SEPARATORS:
            raise unexpected(rem, "a separator between moves")
        rem = _skip_separators(rem)
    return moves
