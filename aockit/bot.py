"""A map walker that tracks which cardinal direction it faces.

The bot maps its relative directions (front, left, right, rear) onto the
cardinal directions that a map understands.
"""

from __future__ import annotations

from aockit.direction import Direction


class Bot:
    """A walker facing one of the four cardinal directions."""

    def __init__(self, facing: Direction) -> None:
        self.facing = Direction(facing)

    def __repr__(self) -> str:
        return f"Bot(facing={self.facing.name})"

    def face(self, direction: Direction) -> Direction:
        """Face the given direction and return it."""
        self.facing = Direction(direction)
        return self.facing

    def turn_right(self) -> Direction:
        """Turn a quarter clockwise and return the new facing."""
        return self.face(self.right())

    def turn_left(self) -> Direction:
        """Turn a quarter counter-clockwise and return the new facing."""
        return self.face(self.left())

    def front(self) -> Direction:
        """The cardinal direction straight ahead."""
        return self.facing

    def left(self) -> Direction:
        """The cardinal direction on the bot's left."""
        return self.facing.turned(3)

    def right(self) -> Direction:
        """The cardinal direction on the bot's right."""
        return self.facing.turned(1)

    def rear(self) -> Direction:
        """The cardinal direction behind the bot."""
        return self.facing.turned(2)