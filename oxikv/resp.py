"""Parsing and encoding of the RESP subset understood by the server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Get:
    """Read the value stored under ``key``."""

    key: str


@dataclass(frozen=True)
class Set:
    """Store ``value`` under ``key``."""

    key: str
    value: str


@dataclass(frozen=True)
class Del:
    """Remove every key in ``keys``."""

    keys: tuple[str, ...]


@dataclass(frozen=True)
class Unknown:
    """A command that could not be recognised; ``text`` names what was seen."""

    text: str


Command = Union[Get, Set, Del, Unknown]


def _lines(text: str) -> Iterator[str]:
    """Yield the non-empty lines of ``text``, dropping ``\\n`` and ``\\r\\n`` endings."""
    *terminated, last = text.split("\n")
    for line in terminated:
        line = line.removesuffix("\r")
        if line:
            yield line
    if last:
        yield last


def parse(text: str) -> Command:
    """Parse a RESP array of bulk strings into a command.

    Array (``*``) and length (``$``) headers are skipped; the remaining lines
    are the command name and its arguments.
    """
    lines = list(_lines(text))
    if not lines:
        return Unknown(text)

    args = [line for line in lines if not line.startswith(("*", "$"))]

    match args:
        case ["SET", key, value]:
            return Set(key, value)
        case ["GET", key]:
            return Get(key)
        case ["DEL", *keys] if keys:
            return Del(tuple(keys))
        case [name, *_]:
            return Unknown(name)
        case _:
            return Unknown(text)


def _bulk(value: str) -> str:
    return f"${len(value.encode())}\r\n{value}\r\n"


def encode(command: Command) -> str:
    """Serialise a known command as a RESP array of bulk strings."""
    match command:
        case Set(key, value):
            return "*3\r\n$3\r\nSET\r\n" + _bulk(key) + _bulk(value)
        case Get(key):
            return "*2\r\n$3\r\nGET\r\n" + _bulk(key)
        case Del(keys):
            return f"*{len(keys) + 1}\r\n$3\r\nDEL\r\n" + "".join(_bulk(k) for k in keys)
        case _:
            raise ValueError(f"cannot encode command: {command!r}")