"""Cardinal directions on a map."""

from __future__ import annotations

from enum import IntEnum


class Direction(IntEnum):
    """The four cardinal directions, ordered clockwise starting from up."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def turned(self, quarter_turns: int) -> Direction:
        """Return the direction reached after clockwise quarter turns (negative turns go counter-clockwise)."""
        return Direction((self.value + quarter_turns) % len(Direction))