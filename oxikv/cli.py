"""Interactive command-line client."""

from __future__ import annotations

import argparse
import socket
import sys

_USAGE = "Invalid command. Try: SET key value or GET key"


def _bulk(value: str) -> str:
    return f"${len(value.encode())}\r\n{value}\r\n"


def build_request(line: str) -> str | None:
    """Turn a typed command into a RESP request.

    Returns ``None`` for a blank line and raises ``ValueError`` for anything
    that is not a well-formed SET, GET or DEL.
    """
    parts = line.split()
    if not parts:
        return None

    name, args = parts[0].upper(), parts[1:]
    if name == "SET" and len(args) == 2:
        return "*3\r\n$3\r\nSET\r\n" + _bulk(args[0]) + _bulk(args[1])
    if name == "GET" and len(args) == 1:
        return "*2\r\n$3\r\nGET\r\n" + _bulk(args[0])
    if name == "DEL" and args:
        keys = "".join(_bulk(key) for key in args)
        return f"*{len(args)}\r\n$3\r\nDEL\r\n{keys}\r\n"
    raise ValueError(_USAGE)


def main(argv: list[str] | None = None) -> int:
    """Read commands from the terminal and print the server's replies."""
    parser = argparse.ArgumentParser(description="Talk to the key-value server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=6379)
    args = parser.parse_args(argv)

    try:
        conn = socket.create_connection((args.host, args.port))
    except OSError as exc:
        print(f"Could not connect to {args.host}:{args.port}: {exc}", file=sys.stderr)
        return 1

    with conn:
        print(f"Connected to Oxi ({args.host}:{args.port})")
        print("Type commands like: SET key value or GET key\n")

        while True:
            try:
                line = input("oxi> ")
            except EOFError:
                break

            words = line.split()
            if words and words[0].lower() == "exit":
                print("Bye!")
                break

            try:
                request = build_request(line)
            except ValueError as exc:
                print(exc)
                continue
            if request is None:
                continue

            conn.sendall(request.encode())
            reply = conn.recv(1024)
            print(reply.decode("utf-8", errors="replace"))

    return 0


if __name__ == "__main__":
    sys.exit(main())