"""Structured move records produced by the notation parser.

Unknown values ("possibly unknown" in the notation) are ``None``: a
profession of ``None`` is the wildcard 片, a stick size of ``None`` is the
unspecified marker 或.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from kiaak.core.enums import Color, Profession
from kiaak.core.types import Coord


@dataclass(frozen=True, slots=True)
class StickOutcome:
    """Decoded stick throw: the numeral thrown, if stated, and the result."""

    size: int | None
    successful: bool


# ── Ordinary piece moves ─────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class NoStepAndNoStick:
    src: Coord
    prof: Profession | None
    dest: Coord


@dataclass(frozen=True, slots=True)
class NoStepAndWaterStick:
    src: Coord
    prof: Profession | None
    dest: Coord
    water_stick_size: int | None
    water_stick_successful: bool


@dataclass(frozen=True, slots=True)
class StepAndNoStick:
    src: Coord
    prof: Profession | None
    step: Coord
    dest: Coord


@dataclass(frozen=True, slots=True)
class StepAndWaterStick:
    src: Coord
    prof: Profession | None
    step: Coord
    dest: Coord
    water_stick_size: int | None
    water_stick_successful: bool


@dataclass(frozen=True, slots=True)
class StepAndBridgeStick:
    src: Coord
    prof: Profession | None
    step: Coord
    dest: Coord
    bridge_stick_size: int | None
    bridge_stick_successful: bool


@dataclass(frozen=True, slots=True)
class StepAndBridgeStickAndWaterStick:
    """Bridge then water crossing.

    Reaching the water stage means the bridge throw succeeded, so only its
    size is recorded.
    """

    src: Coord
    prof: Profession | None
    step: Coord
    dest: Coord
    bridge_stick_size: int | None
    water_stick_size: int | None
    water_stick_successful: bool


# ── Tam (coordinator) moves ──────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TamNoStep:
    src: Coord
    first_dest: Coord | None
    second_dest: Coord


@dataclass(frozen=True, slots=True)
class TamStepUnspecified:
    """Tam move with a step whose hop is not stated."""

    src: Coord
    step: Coord
    second_dest: Coord


@dataclass(frozen=True, slots=True)
class TamStepDuringFormer:
    """Tam move stepping during the hop from *src* to *first_dest*."""

    src: Coord
    step: Coord
    first_dest: Coord | None
    second_dest: Coord


@dataclass(frozen=True, slots=True)
class TamStepDuringLatter:
    """Tam move stepping during the hop from *first_dest* to *second_dest*."""

    src: Coord
    first_dest: Coord | None
    step: Coord
    second_dest: Coord


# ── Parachute ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Parachute:
    """A captured piece dropped back onto the board from the reserve."""

    color: Color
    prof: Profession
    dest: Coord


Move: TypeAlias = (
    NoStepAndNoStick
    | NoStepAndWaterStick
    | StepAndNoStick
    | StepAndWaterStick
    | StepAndBridgeStick
    | StepAndBridgeStickAndWaterStick
    | TamNoStep
    | TamStepUnspecified
    | TamStepDuringFormer
    | TamStepDuringLatter
    | Parachute
)
