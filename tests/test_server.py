import asyncio

import pytest

from oxikv.server import handle_connection
from oxikv.store import Store


class _RecordingWriter:
    def __init__(self):
        self.chunks = []

    def write(self, data):
        self.chunks.append(data)

    async def drain(self):
        pass


def _reader_with(data):
    reader = asyncio.StreamReader()
    if data:
        reader.feed_data(data)
    reader.feed_eof()
    return reader


@pytest.mark.asyncio
async def test_set_request_gets_ok(tmp_path):
    store = Store()
    writer = _RecordingWriter()
    reader = _reader_with(b"*3\r\n$3\r\nSET\r\n$3\r\nfoo\r\n$3\r\nbar\r\n")
    await handle_connection(reader, writer, store, tmp_path / "aof.log")
    assert writer.chunks == [b"+OK\r\n"]
    assert store.get("foo") == "bar"


@pytest.mark.asyncio
async def test_immediate_disconnect_writes_nothing(tmp_path, capsys):
    writer = _RecordingWriter()
    await handle_connection(_reader_with(b""), writer, Store(), tmp_path / "aof.log")
    assert writer.chunks == []
    assert "Client disconnected" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_unknown_request(tmp_path):
    writer = _RecordingWriter()
    reader = _reader_with(b"*1\r\n$4\r\nBLAH\r\n")
    await handle_connection(reader, writer, Store(), tmp_path / "aof.log")
    assert writer.chunks == [b"-Unknown or malformed command: BLAH\r\n"]


@pytest.mark.asyncio
async def test_over_real_socket(tmp_path):
    store = Store()
    aof_path = tmp_path / "aof.log"

    async def on_client(reader, writer):
        try:
            await handle_connection(reader, writer, store, aof_path)
        finally:
            writer.close()

    server = await asyncio.start_server(on_client, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    async with server:
        reader, writer = await asyncio.open_connection("127.0.0.1", port)

        writer.write(b"*3\r\n$3\r\nSET\r\n$3\r\nfoo\r\n$3\r\nbar\r\n")
        await writer.drain()
        assert await reader.read(1024) == b"+OK\r\n"

        writer.write(b"*2\r\n$3\r\nGET\r\n$3\r\nfoo\r\n")
        await writer.drain()
        assert await reader.read(1024) == b"$3\r\nbar\r\n"

        writer.write(b"*2\r\n$3\r\nDEL\r\n$3\r\nfoo\r\n")
        await writer.drain()
        assert await reader.read(1024) == b":1\r\n"

        writer.close()
        await writer.wait_closed()

    assert store.get("foo") is None
    assert aof_path.read_text(encoding="utf-8").count("DEL") == 1