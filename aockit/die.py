"""Fatal error reporting."""

from __future__ import annotations

import sys
from typing import NoReturn


def die(status: int, fmt: str, *args: object) -> NoReturn:
    """Write a printf-style message to stderr and exit with the given status."""
    message = fmt % args if args else fmt
    sys.stderr.write(message)
    sys.stderr.flush()
    raise SystemExit(status)