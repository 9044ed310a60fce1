"""Raw byte cache of a puzzle input."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


class InputCache:
    """The whole content of an input held as raw bytes."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    @classmethod
    def from_file(cls, pathname: str | os.PathLike[str]) -> InputCache:
        """Read a file whole; OSError propagates when it cannot be read."""
        return cls(Path(pathname).read_bytes())

    def __len__(self) -> int:
        return len(self._data)

    def get(self, idx: int) -> int:
        """Return the byte at idx; IndexError when idx is outside the input."""
        if not 0 <= idx < len(self._data):
            raise IndexError(f"input index {idx} out of range")
        return self._data[idx]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)