# aockit

A small toolkit for solving daily programming puzzles. It reads an input
file as raw bytes, as lines or as a 2-D map. It walks the map with a bot
that knows left from right. It keeps state in a stack, a queue, a min-heap
or a lookup table with fixed-length keys.

## Install

    pip install .

## Pieces

| Module              | What it gives you                                                    |
|---------------------|----------------------------------------------------------------------|
| `aockit.direction`  | `Direction`: `UP`, `RIGHT`, `DOWN`, `LEFT`, with `turned(quarter_turns)` |
| `aockit.bot`        | `Bot`: a walker with `front`, `left`, `right`, `rear`, `turn_left`, `turn_right`, `face` |
| `aockit.incache`    | `InputCache`: the raw bytes of an input; `get` raises `IndexError` out of range |
| `aockit.lncache`    | `LineCache`: an input split into non-empty lines (`from_text`, `from_file`, `show`) |
| `aockit.mapcache`   | `MapCache`: a grid with a cursor that steps, peeks, warps and walks   |
| `aockit.lut`        | `LookupTable`: a bucketed hash table with fixed-length byte keys and data; `fnv1a` hash |
| `aockit.stack`      | `Stack`: last in, first out; `pop` raises `IndexError` when empty     |
| `aockit.fifo`       | `Queue`: first in, first out; `dequeue` raises `IndexError` when empty |
| `aockit.minheap`    | `MinHeap`: integer keys with payloads; `get` and `peek` return `(key, payload)` |
| `aockit.dlist`      | `DListNode`: a node of a circular doubly linked list                  |
| `aockit.die`        | `die(status, fmt, *args)`: write a message to stderr and raise `SystemExit` |

## Maps

`MapCache.from_text` and `MapCache.from_file` take the width from the first
line and drop the newlines. `MapCache.grid(rows, cols, tile)` builds a map
filled with one tile. Tiles are byte values. `change_tile`, `grid` and
`find_marker` also accept a one-character string.

Moves come in four kinds:

- `step_*` / `step(direction)` moves one tile and stays inside the map.
- `peek_*` / `peek(direction)` looks at the neighbouring tile without moving.
- `warp_*` / `warp(direction)` wraps round to the opposite edge.
- `walk_forward` / `walk_backward` runs on into the next or previous row.

A move or peek that cannot be made returns `None` and leaves the cursor in
place. `coord()` gives `(row, col)` measured from the start point, which
`set_start`, `reset` and `absolute_reset` manage. `tile_id()` and
`goto_tile()` let you come back to a tile. `copy()` makes an independent map.

## Example: following a path on a map

```python
from aockit.bot import Bot
from aockit.direction import Direction
from aockit.mapcache import MapCache

grid = MapCache.from_text("#####\n#S..#\n###.#\n")
grid.find_marker(ord("S"))

bot = Bot(Direction.RIGHT)
while grid.peek(bot.front()) == ord("."):
    grid.step(bot.front())

print(grid.coord())   # (1, 3)
```

## Example: lookup table

```python
from aockit.lut import LookupTable

table = LookupTable(shift=4, keylen=2, datalen=1)
table.add(b"ab", b"\x01")        # True
table.add(b"ab", b"\x02")        # False, the entry is left as it is
print(table.lookup(b"ab"))       # b'\x01'
table.remove(b"ab")
print(len(table))                # 0
```

## Example: the heap

```python
from aockit.minheap import MinHeap

heap = MinHeap()
heap.insert(5, "far")
heap.insert(1, "near")
print(heap.get())     # (1, 'near')
```

## What it does not do

This is a library only. It has no command-line program. It reads input files
but never writes or stores anything.

## Running the tests

    pip install .[test]
    pytest