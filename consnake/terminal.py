"""Terminal helpers: screen clearing, raw input mode and key polling."""

from __future__ import annotations

import os
import select
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO

try:
    import termios
except ImportError:  # not available off Unix
    termios = None  # type: ignore[assignment]

CLEAR_SEQUENCE = "\033[H\033[J"


def _fileno(stream: IO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def clear_screen(stream: IO[str] | None = None) -> None:
    """Move the cursor home and clear the screen."""
    out = sys.stdout if stream is None else stream
    out.write(CLEAR_SEQUENCE)
    out.flush()


@contextmanager
def raw_mode(stream: IO | None = None) -> Iterator[IO]:
    """Turn off line buffering and echo on a terminal while the block runs."""
    stream = sys.stdin if stream is None else stream
    fd = _fileno(stream)
    if termios is None or fd is None or not os.isatty(fd):
        yield stream
        return
    saved = termios.tcgetattr(fd)
    attrs = termios.tcgetattr(fd)
    attrs[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, attrs)
    try:
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def read_key(stream: IO | None = None) -> str | None:
    """Return a pending key without waiting, or None if nothing is waiting."""
    stream = sys.stdin if stream is None else stream
    fd = _fileno(stream)
    if fd is None:
        return None
    ready, _, _ = select.select([fd], [], [], 0)
    if not ready:
        return None
    data = os.read(fd, 1)
    return data.decode("latin-1") if data else None