"""Append-only file persistence for write commands."""

from __future__ import annotations

import os

from .resp import Command, Del, Set, encode, parse
from .store import Store

DEFAULT_PATH = "aof.log"


def append(command: Command, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
    """Append a write command to the log; other commands are ignored."""
    if not isinstance(command, (Set, Del)):
        return
    with open(path, "a", encoding="utf-8", newline="") as log:
        log.write(encode(command))
        log.flush()


def _array_length(header: str) -> int:
    digits = header[1:].removeprefix("+")
    return int(digits) if digits.isascii() and digits.isdigit() else 0


def replay(store: Store, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
    """Apply every command recorded in the log to ``store``.

    A missing log is treated as empty.
    """
    try:
        log = open(path, encoding="utf-8", newline="")
    except FileNotFoundError:
        return

    with log:
        buffer: list[str] = []
        expected_lines = 0
        for raw in log:
            line = raw.strip()
            if line.startswith("*"):
                buffer = [line]
                expected_lines = _array_length(line) * 2
                continue

            buffer.append(line)
            if len(buffer) != expected_lines + 1:
                continue

            match parse("\r\n".join(buffer)):
                case Set(key, value):
                    store.set(key, value)
                case Del(keys):
                    store.delete(keys)
            buffer = []