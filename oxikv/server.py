"""The TCP server and its command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

from . import aof
from .command import process_command
from .store import Store

_READ_SIZE = 1024


async def handle_connection(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    store: Store,
    aof_path: str | os.PathLike[str] = aof.DEFAULT_PATH,
) -> None:
    """Serve one client until it disconnects."""
    while True:
        try:
            data = await reader.read(_READ_SIZE)
        except OSError as exc:
            print(f"Failed to read from socket: {exc}", file=sys.stderr)
            raise

        if not data:
            print("Client disconnected")
            return

        text = data.decode("utf-8", errors="replace").strip()
        print(f"Received: {text}")
        response = process_command(text, store, aof_path)

        try:
            writer.write(response.encode())
            await writer.drain()
        except OSError as exc:
            print(f"Failed to write to socket: {exc}", file=sys.stderr)
            raise


async def run(
    host: str,
    port: int,
    store: Store,
    aof_path: str | os.PathLike[str] = aof.DEFAULT_PATH,
) -> None:
    """Listen on ``host:port`` and serve clients until cancelled."""

    async def on_client(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        print(f"New client connected: {writer.get_extra_info('peername')}")
        try:
            await handle_connection(reader, writer, store, aof_path)
        except Exception as exc:
            print(f"Client error: {exc}", file=sys.stderr)
        finally:
            writer.close()

    server = await asyncio.start_server(on_client, host, port)
    print(f"Oxi is running on {host}:{port}")
    async with server:
        await server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    """Replay the log, then serve clients."""
    parser = argparse.ArgumentParser(description="Run the key-value server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=6379)
    parser.add_argument("--aof", default=aof.DEFAULT_PATH, help="append-only log file")
    args = parser.parse_args(argv)

    store = Store()
    try:
        aof.replay(store, args.aof)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"AOF Replay failed: {exc}", file=sys.stderr)

    try:
        asyncio.run(run(args.host, args.port, store, args.aof))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())