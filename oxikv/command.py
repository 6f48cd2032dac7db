"""Execution of client requests against the store."""

from __future__ import annotations

import os
import sys

from . import aof
from .resp import Del, Get, Set, Unknown, parse
from .store import Store


def _persist(command, aof_path) -> None:
    try:
        aof.append(command, aof_path)
    except OSError as exc:
        print(f"AOF Append failed: {exc}", file=sys.stderr)


def process_command(
    text: str, store: Store, aof_path: str | os.PathLike[str] = aof.DEFAULT_PATH
) -> str:
    """Run one RESP request and return the RESP reply."""
    command = parse(text)

    match command:
        case Set(key, value):
            store.set(key, value)
            _persist(command, aof_path)
            return "+OK\r\n"
        case Get(key):
            value = store.get(key)
            if value is None:
                return "-Key not found\r\n"
            return f"${len(value.encode())}\r\n{value}\r\n"
        case Del(keys):
            deleted = store.delete(keys)
            _persist(command, aof_path)
            return f":{deleted}\r\n"
        case Unknown(name):
            return f"-Unknown or malformed command: {name}\r\n"
    raise TypeError(f"unexpected command: {command!r}")