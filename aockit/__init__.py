"""Toolkit for puzzle solving: input caches, grid maps, walkers and containers."""

__version__ = "0.1.0"

__all__ = [
    "bot",
    "die",
    "direction",
    "dlist",
    "fifo",
    "incache",
    "lncache",
    "lut",
    "mapcache",
    "minheap",
    "stack",
]