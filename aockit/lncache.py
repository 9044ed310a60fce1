"""Line-oriented cache of a puzzle input."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from aockit.incache import InputCache


class LineCache:
    """The non-empty lines of an input, without their line terminators.

    Runs of newlines never produce empty lines: a line exists only once it
    holds at least one character.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)

    def __repr__(self) -> str:
        return f"LineCache({self._lines!r})"

    @classmethod
    def from_text(cls, text: str) -> LineCache:
        """Split text on newlines, dropping empty lines."""
        return cls(line for line in text.split("\n") if line)

    @classmethod
    def from_file(cls, pathname: str | os.PathLike[str]) -> LineCache:
        """Read a file whole and split it into lines; OSError propagates."""
        raw = bytes(InputCache.from_file(pathname))
        return cls.from_text(raw.decode("utf-8"))

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, idx: int) -> str:
        """Return the line at idx; IndexError when there is no such line."""
        if not 0 <= idx < len(self._lines):
            raise IndexError(f"line index {idx} out of range")
        return self._lines[idx]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def show(self, file: TextIO | None = None) -> None:
        """Print every line, each followed by a newline."""
        out = sys.stdout if file is None else file
        for line in self._lines:
            out.write(line)
            out.write("\n")