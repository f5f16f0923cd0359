"""
Instruction model and parser for the toy robot command language.

A raw text line maps to exactly one of five instruction variants. Parsing
never fails: anything that is not recognised becomes a NoopInstruction that
keeps the original text, so the robot can report it as not executed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union
import re

from .directions import Direction, Rotation


@dataclass(frozen=True)
class NoopInstruction:
    """Unrecognised command; never executed."""

    raw: str = ""


@dataclass(frozen=True)
class PlaceInstruction:
    """Place, or reposition, the robot at (x, y) with the given facing."""

    x: int
    y: int
    direction: Direction
    raw: str = ""


@dataclass(frozen=True)
class MoveInstruction:
    """Move one cell forward along the current facing."""

    raw: str = ""


@dataclass(frozen=True)
class RotateInstruction:
    """Turn 90 degrees in place."""

    rotation: Rotation
    raw: str = ""


@dataclass(frozen=True)
class ReportInstruction:
    """Render the current position and facing."""

    raw: str = ""


Instruction = Union[
    NoopInstruction,
    PlaceInstruction,
    MoveInstruction,
    RotateInstruction,
    ReportInstruction,
]


# ---------------------------------------------------------------------------
# Patterns, tested in this order; the first match decides the instruction.
# Coordinates are single digits only.
# ---------------------------------------------------------------------------
PLACE_PATTERN = re.compile(
    r"PLACE\s+(\d)\s*,\s*(\d)\s*,(NORTH|EAST|SOUTH|WEST)", re.IGNORECASE | re.ASCII
)
MOVE_PATTERN = re.compile(r"MOVE", re.IGNORECASE | re.ASCII)
ROTATE_PATTERN = re.compile(r"(LEFT|RIGHT)", re.IGNORECASE | re.ASCII)
REPORT_PATTERN = re.compile(r"REPORT", re.IGNORECASE | re.ASCII)


def parse_command(line: str) -> Instruction:
    """Parse a single raw command line into an instruction.

    Parameters
    ----------
    line : str
        Raw text; surrounding whitespace is ignored.

    Returns
    -------
    Instruction
        The first matching variant in PLACE, MOVE, LEFT/RIGHT, REPORT order,
        or a NoopInstruction if nothing matches.
    """
    command = (line or "").strip()

    match = PLACE_PATTERN.search(command)
    if match:
        return PlaceInstruction(
            x=int(match.group(1)),
            y=int(match.group(2)),
            direction=Direction.from_name(match.group(3)),
            raw=command,
        )

    if MOVE_PATTERN.search(command):
        return MoveInstruction(raw=command)

    match = ROTATE_PATTERN.search(command)
    if match:
        rotation = (
            Rotation.CLOCKWISE
            if match.group(1).lower() == "right"
            else Rotation.COUNTER_CLOCKWISE
        )
        return RotateInstruction(rotation=rotation, raw=command)

    if REPORT_PATTERN.search(command):
        return ReportInstruction(raw=command)

    return NoopInstruction(raw=command)


def parse_commands(lines: Iterable[str]) -> List[Instruction]:
    return [parse_command(line) for line in lines]
