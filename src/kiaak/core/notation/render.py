"""Move record -> notation text."""

from __future__ import annotations

from kiaak.core.enums import Profession
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
from kiaak.core.notation.symbols import (
    BRACKET_CLOSE,
    BRACKET_OPEN,
    BRIDGE,
    COLOR_CHARS,
    FAILURE,
    NO_STICK,
    NUMERAL_CHARS,
    PROFESSION_CHARS,
    TAM,
    UNSPECIFIED,
    WATER,
    WATER_STICK_CHARS,
    WILDCARD,
)
from kiaak.core.types import Coord

_ORDINARY_MOVES = (
    NoStepAndNoStick,
    NoStepAndWaterStick,
    StepAndNoStick,
    StepAndWaterStick,
    StepAndBridgeStick,
    StepAndBridgeStickAndWaterStick,
)


def _prof(prof: Profession | None) -> str:
    return WILDCARD if prof is None else PROFESSION_CHARS[prof]


def _water(size: int | None, successful: bool) -> str:
    run = WATER_STICK_CHARS.get((size, successful))
    if run is None:
        outcome = "success" if successful else "failure"
        raise ValueError(f"Water stick size {size!r} cannot be a {outcome}")
    return WATER + run


def _bridge(size: int | None) -> str:
    numeral = NUMERAL_CHARS.get(size)
    if numeral is None:
        raise ValueError(f"Invalid bridge stick size: {size!r}")
    return BRIDGE + numeral


def _bracket(first_dest: Coord | None) -> str:
    inner = UNSPECIFIED if first_dest is None else str(first_dest)
    return f"{BRACKET_OPEN}{inner}{BRACKET_CLOSE}"


def move_to_notation(move: Move) -> str:
    """Serialise *move* back to notation.

    ``parse_move(move_to_notation(m))`` gives back ``m``. A
    :class:`TamNoStep` with an unknown first destination is written without
    a bracket.
    """
    if isinstance(move, Parachute):
        return f"{COLOR_CHARS[move.color]}{PROFESSION_CHARS[move.prof]}{move.dest}"

    if isinstance(move, TamNoStep):
        hint = "" if move.first_dest is None else _bracket(move.first_dest)
        return f"{move.src}{TAM}{hint}{move.second_dest}"
    if isinstance(move, TamStepUnspecified):
        return f"{move.src}{TAM}{move.step}{move.second_dest}"
    if isinstance(move, TamStepDuringFormer):
        return f"{move.src}{TAM}{move.step}{_bracket(move.first_dest)}{move.second_dest}"
    if isinstance(move, TamStepDuringLatter):
        return f"{move.src}{TAM}{_bracket(move.first_dest)}{move.step}{move.second_dest}"

    if not isinstance(move, _ORDINARY_MOVES):
        raise ValueError(f"Not a move: {move!r}")

    head = f"{move.src}{_prof(move.prof)}"
    if isinstance(move, NoStepAndNoStick):
        return f"{head}{move.dest}{NO_STICK}"
    if isinstance(move, NoStepAndWaterStick):
        water = _water(move.water_stick_size, move.water_stick_successful)
        return f"{head}{move.dest}{water}"
    if isinstance(move, StepAndNoStick):
        return f"{head}{move.step}{move.dest}{NO_STICK}"
    if isinstance(move, StepAndWaterStick):
        water = _water(move.water_stick_size, move.water_stick_successful)
        return f"{head}{move.step}{move.dest}{water}"
    if isinstance(move, StepAndBridgeStick):
        bridge = _bridge(move.bridge_stick_size)
        if not move.bridge_stick_successful:
            bridge += FAILURE
        return f"{head}{move.step}{move.dest}{bridge}"
    bridge = _bridge(move.bridge_stick_size)
    water = _water(move.water_stick_size, move.water_stick_successful)
    return f"{head}{move.step}{move.dest}{bridge}{water}"
