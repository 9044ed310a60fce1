"""Fixed-size chained hash table keyed by byte strings of a set length."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

_FNV1A_OFFSET = 0xCBF29CE484222325
_FNV1A_PRIME = 0x100000001B3
_MASK64 = (1 << 64) - 1


def fnv1a(data: bytes) -> int:
    """64-bit FNV-1a hash of data."""
    h = _FNV1A_OFFSET
    for byte in bytes(data):
        h = ((h ^ byte) * _FNV1A_PRIME) & _MASK64
    return h


class LookupTable:
    """A hash table with 2**shift buckets, fixed key length and fixed data length.

    Keys and data are byte strings. Iteration runs bucket by bucket, and within
    a bucket in insertion order.
    """

    def __init__(self, shift: int, keylen: int, datalen: int = 0) -> None:
        if shift <= 0:
            raise ValueError("shift must be positive")
        if keylen <= 0:
            raise ValueError("keylen must be positive")
        if datalen < 0:
            raise ValueError("datalen must not be negative")
        self.shift = shift
        self.keylen = keylen
        self.datalen = datalen
        self._buckets: list[list[tuple[bytes, bytes]]] = [
            [] for _ in range(1 << shift)
        ]

    def __repr__(self) -> str:
        return (
            f"LookupTable(shift={self.shift}, keylen={self.keylen}, "
            f"datalen={self.datalen}, items={len(self)})"
        )

    def _check_key(self, key: bytes) -> bytes:
        key = bytes(key)
        if len(key) != self.keylen:
            raise ValueError(f"key must be {self.keylen} bytes, got {len(key)}")
        return key

    def _check_data(self, data: bytes | None) -> bytes:
        if data is None:
            return bytes(self.datalen)
        data = bytes(data)
        if len(data) != self.datalen:
            raise ValueError(f"data must be {self.datalen} bytes, got {len(data)}")
        return data

    def _bucket(self, key: bytes) -> list[tuple[bytes, bytes]]:
        return self._buckets[fnv1a(key) & ((1 << self.shift) - 1)]

    def add(self, key: bytes, data: bytes | None = None) -> bool:
        """Store data under key; return False, leaving the entry as is, if key is present."""
        key = self._check_key(key)
        data = self._check_data(data)
        bucket = self._bucket(key)
        if any(stored == key for stored, _ in bucket):
            return False
        bucket.append((key, data))
        return True

    def lookup(self, key: bytes) -> bytes:
        """Return the data stored under key; KeyError when absent."""
        key = self._check_key(key)
        for stored, data in self._bucket(key):
            if stored == key:
                return data
        raise KeyError(key)

    def remove(self, key: bytes) -> None:
        """Delete the entry for key; KeyError when absent."""
        key = self._check_key(key)
        bucket = self._bucket(key)
        for pos, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[pos]
                return
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (bytes, bytearray, memoryview)):
            return False
        key = bytes(key)
        if len(key) != self.keylen:
            return False
        return any(stored == key for stored, _ in self._bucket(key))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def items(self) -> Iterator[tuple[bytes, bytes]]:
        """Yield (key, data) pairs in table order."""
        for bucket in self._buckets:
            yield from list(bucket)

    def foreach(
        self, callback: Callable[[bytes, bytes, Any], None], param: Any = None
    ) -> None:
        """Call callback(key, data, param) for every entry in table order."""
        if callback is None:
            raise TypeError("callback is required")
        for key, data in self.items():
            callback(key, data, param)