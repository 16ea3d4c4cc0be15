"""Notation package: move parsing and serialization."""

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
    StickOutcome,
    TamNoStep,
    TamStepDuringFormer,
    TamStepDuringLatter,
    TamStepUnspecified,
)
from kiaak.core.notation.movement import (
    move_from_notation,
    parse_move,
    parse_moves,
    parse_tam_bracket,
)
from kiaak.core.notation.primitives import (
    parse_color,
    parse_profession,
    parse_profession_or_wildcard,
    parse_square,
)
from kiaak.core.notation.render import move_to_notation
from kiaak.core.notation.sticks import parse_bridge_stick_size, parse_water_stick

__all__ = [
    # Errors
    "NotationError",
    "ParseErrorKind",
    # Models
    "Move",
    "NoStepAndNoStick",
    "NoStepAndWaterStick",
    "StepAndNoStick",
    "StepAndWaterStick",
    "StepAndBridgeStick",
    "StepAndBridgeStickAndWaterStick",
    "TamNoStep",
    "TamStepUnspecified",
    "TamStepDuringFormer",
    "TamStepDuringLatter",
    "Parachute",
    "StickOutcome",
    # Parsing
    "parse_move",
    "parse_moves",
    "move_from_notation",
    "parse_square",
    "parse_profession",
    "parse_profession_or_wildcard",
    "parse_color",
    "parse_water_stick",
    "parse_bridge_stick_size",
    "parse_tam_bracket",
    # Serialization
    "move_to_notation",
]
