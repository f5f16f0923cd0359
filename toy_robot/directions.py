from __future__ import annotations

from enum import Enum, IntEnum
from typing import Tuple


class Rotation(Enum):
    """Direction of a 90 degree turn."""

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


class Direction(IntEnum):
    """Facing on the board, ordered clockwise starting from North."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Case-insensitive lookup, e.g. ``"east"`` -> ``Direction.EAST``."""
        return cls[name.strip().upper()]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy) taken when moving with this facing."""
        return _DELTAS[self]

    @property
    def initial(self) -> str:
        """Single-letter name used on the rendered board."""
        return self.name[0]

    def rotated(self, rotation: Rotation) -> "Direction":
        """Facing after a 90 degree turn, wrapping West <-> North."""
        offset = 1 if rotation is Rotation.CLOCKWISE else -1
        return Direction((int(self) + offset) % len(Direction))


_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}
