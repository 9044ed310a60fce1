"""Character map with a cursor that walks, steps, peeks and warps across it."""

from __future__ import annotations

import os
import sys
from typing import TextIO, Union

from aockit.direction import Direction
from aockit.incache import InputCache

Tile = Union[int, str]


def _tile_value(tile: Tile) -> int:
    if isinstance(tile, str):
        if len(tile) != 1:
            raise ValueError("a tile must be a single character")
        tile = ord(tile)
    return int(tile) & 0xFF


class MapCache:
    """A rectangular map of byte tiles stored row after row.

    The map keeps a current position (the cursor) and a start position that
    coordinates are measured from. Moves that cannot be made return None and
    leave the cursor where it was.
    """

    def __init__(self, data: bytes, width: int) -> None:
        if width <= 0:
            raise ValueError("map width must be positive")
        self._data = bytearray(data)
        if not self._data:
            raise ValueError("map must hold at least one tile")
        self._width = width
        self._pos = 0
        self._start = 0

    def __repr__(self) -> str:
        return (
            f"MapCache(width={self._width}, height={self.height()}, "
            f"pos={self._pos})"
        )

    @classmethod
    def from_text(cls, text: str | bytes) -> MapCache:
        """Build a map from text; the first line fixes the width, newlines are dropped."""
        raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        newline = raw.find(b"\n")
        width = len(raw) if newline == -1 else newline
        return cls(raw.replace(b"\n", b""), width)

    @classmethod
    def from_file(cls, pathname: str | os.PathLike[str]) -> MapCache:
        """Read a map from a file; OSError propagates when it cannot be read."""
        return cls.from_text(bytes(InputCache.from_file(pathname)))

    @classmethod
    def grid(cls, rows: int, cols: int, tile: Tile) -> MapCache:
        """Build a rows by cols map filled with one tile."""
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be positive")
        return cls(bytes([_tile_value(tile)]) * (rows * cols), cols)

    def size(self) -> int:
        """Number of tiles in the map."""
        return len(self._data)

    def width(self) -> int:
        """Number of tiles in a row."""
        return self._width

    def height(self) -> int:
        """Number of rows."""
        return self.size() // self._width

    def tile(self) -> int:
        """The tile under the cursor."""
        return self._data[self._pos]

    def tile_id(self) -> int:
        """An identifier of the tile under the cursor, usable with goto_tile."""
        return self._pos

    def set_start(self) -> None:
        """Make the current tile the start point."""
        self._start = self._pos

    def reset(self) -> None:
        """Move the cursor back to the start point."""
        self._pos = self._start

    def absolute_reset(self) -> None:
        """Move the cursor to the first tile and make it the start point."""
        self._pos = 0
        self.set_start()

    def _in_map(self, idx: int) -> bool:
        return 0 <= idx < len(self._data)

    def _move_to(self, target: int | None) -> int | None:
        if target is None:
            return None
        self._pos = target
        return self.tile()

    def _linear_target(self, offset: int) -> int | None:
        target = self._pos + offset
        return target if self._in_map(target) else None

    def _vertical_target(self, up: bool) -> int | None:
        return self._linear_target(-self._width if up else self._width)

    def _horizontal_target(self, left: bool) -> int | None:
        row_start = (self._pos // self._width) * self._width
        row_end = row_start + self._width
        target = self._pos + (-1 if left else 1)
        if row_start <= target < row_end and self._in_map(target):
            return target
        return None

    def walk_forward(self) -> int | None:
        """Move to the next tile, running on into the next row."""
        return self._move_to(self._linear_target(1))

    def walk_backward(self) -> int | None:
        """Move to the previous tile, running back into the previous row."""
        return self._move_to(self._linear_target(-1))

    def step_up(self) -> int | None:
        return self._move_to(self._vertical_target(True))

    def step_down(self) -> int | None:
        return self._move_to(self._vertical_target(False))

    def step_left(self) -> int | None:
        return self._move_to(self._horizontal_target(True))

    def step_right(self) -> int | None:
        return self._move_to(self._horizontal_target(False))

    def step(self, direction: Direction) -> int | None:
        """Step one tile in the given direction without leaving the map."""
        steps = {
            Direction.UP: self.step_up,
            Direction.RIGHT: self.step_right,
            Direction.DOWN: self.step_down,
            Direction.LEFT: self.step_left,
        }
        return steps[Direction(direction)]()

    def warp_up(self) -> int:
        """Step up, or reappear on the bottom row when at the top."""
        tile = self.step_up()
        if tile is None:
            self._pos = self._pos + self.size() - self._width
            tile = self.tile()
        return tile

    def warp_down(self) -> int:
        """Step down, or reappear on the top row when at the bottom."""
        tile = self.step_down()
        if tile is None:
            self._pos = self._pos - self.size() + self._width
            tile = self.tile()
        return tile

    def warp_left(self) -> int:
        """Step left, or reappear at the row's right end when at its left end."""
        tile = self.step_left()
        if tile is None:
            self._pos = self._pos + self._width - 1
            tile = self.tile()
        return tile

    def warp_right(self) -> int:
        """Step right, or reappear at the row's left end when at its right end."""
        tile = self.step_right()
        if tile is None:
            self._pos = self._pos - (self._width - 1)
            tile = self.tile()
        return tile

    def warp(self, direction: Direction) -> int:
        """Move one tile in the given direction, wrapping round the map's edges."""
        warps = {
            Direction.UP: self.warp_up,
            Direction.RIGHT: self.warp_right,
            Direction.DOWN: self.warp_down,
            Direction.LEFT: self.warp_left,
        }
        return warps[Direction(direction)]()

    def _peek_at(self, target: int | None) -> int | None:
        return None if target is None else self._data[target]

    def peek_up(self) -> int | None:
        return self._peek_at(self._vertical_target(True))

    def peek_down(self) -> int | None:
        return self._peek_at(self._vertical_target(False))

    def peek_left(self) -> int | None:
        return self._peek_at(self._horizontal_target(True))

    def peek_right(self) -> int | None:
        return self._peek_at(self._horizontal_target(False))

    def peek(self, direction: Direction) -> int | None:
        """The neighbouring tile in the given direction, without moving."""
        peeks = {
            Direction.UP: self.peek_up,
            Direction.RIGHT: self.peek_right,
            Direction.DOWN: self.peek_down,
            Direction.LEFT: self.peek_left,
        }
        return peeks[Direction(direction)]()

    def coord(self) -> tuple[int, int]:
        """(row, col) of the cursor, measured from the start point."""
        return divmod(self._pos - self._start, self._width)

    def goto_tile(self, tile_id: int) -> int | None:
        """Jump to a tile by its id; when no tile has it, stop on the last tile and return None."""
        if self._in_map(tile_id):
            self._pos = tile_id
            return self.tile()
        self._pos = len(self._data) - 1
        return None

    def change_tile(self, tile: Tile) -> None:
        """Replace the tile under the cursor."""
        self._data[self._pos] = _tile_value(tile)

    def show(self, file: TextIO | None = None) -> None:
        """Print the map row by row, each row preceded by a newline."""
        out = sys.stdout if file is None else file
        text = self._data.decode("latin-1")
        for row_start in range(0, len(text), self._width):
            out.write("\n")
            out.write(text[row_start:row_start + self._width])
        out.write("\n")

    def copy(self) -> MapCache:
        """An independent map with the same tiles, cursor and start at the first tile."""
        return MapCache(bytes(self._data), self._width)

    def find_marker(self, tile: Tile) -> int | None:
        """Walk forward from the tile after the cursor to the first matching tile.

        When none is found the cursor stays where it was and None is returned.
        """
        wanted = _tile_value(tile)
        saved = self._pos
        while (found := self.walk_forward()) is not None:
            if found == wanted:
                return found
        self._pos = saved
        return None