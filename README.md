# oxikv

A small in-memory key-value server that speaks a subset of the RESP
protocol (`SET`, `GET`, `DEL`). It records every write in an append-only
log and replays that log when it starts.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
oxikv-server
```

Options:

| Option    | Default     | Meaning                    |
|-----------|-------------|----------------------------|
| `--host`  | `127.0.0.1` | address to listen on       |
| `--port`  | `6379`      | port to listen on          |
| `--aof`   | `aof.log`   | path of the append-only log |

At startup the log is replayed into the store; if it does not exist the
store starts empty, and if it cannot be read an `AOF Replay failed`
message is printed and the server starts anyway. Each `SET` and `DEL`
is appended to the log after it is applied. Stop the server with Ctrl-C.

## Using the client

```
oxikv-cli
```

It takes `--host` (default `127.0.0.1`) and `--port` (default `6379`),
and gives an `oxi>` prompt:

```
oxi> SET greeting hello
+OK

oxi> GET greeting
$5
hello

oxi> DEL greeting other
:1

oxi> exit
Bye!
```

Command names are case-insensitive at the prompt. Anything other than
`SET key value`, `GET key`, `DEL key [key ...]` or `exit` prints
`Invalid command. Try: SET key value or GET key`. End of input also
closes the client.

## Replies

| Command               | Reply                                        |
|-----------------------|----------------------------------------------|
| `SET key value`       | `+OK`                                        |
| `GET key`             | `$<len>` then the value, or `-Key not found` |
| `DEL key [key ...]`   | `:<number of keys removed>`                  |
| anything else         | `-Unknown or malformed command: <name>`      |

## Using it as a library

```python
from oxikv.store import Store
from oxikv.command import process_command

store = Store()
reply = process_command("*3\r\n$3\r\nSET\r\n$3\r\nfoo\r\n$3\r\nbar\r\n", store, "aof.log")
assert reply == "+OK\r\n"
assert store.get("foo") == "bar"
```

- `oxikv.store.Store` is a thread-safe string-to-string map with `get`,
  `set` and `delete` (which takes several keys and returns how many were
  present).
- `oxikv.resp.parse` turns RESP text into a `Get`, `Set`, `Del` or
  `Unknown` command; `oxikv.resp.encode` turns a `Get`, `Set` or `Del`
  back into RESP text and raises `ValueError` for anything else.
- `oxikv.aof.append(command, path)` writes a `Set` or `Del` to the log
  and ignores other commands; `oxikv.aof.replay(store, path)` applies a
  log to a store.
- `oxikv.server.run(host, port, store, aof_path)` serves clients with
  asyncio until cancelled; `oxikv.server.handle_connection` serves a
  single stream pair.
- `oxikv.cli.build_request(line)` turns a typed command into a RESP
  request, returning `None` for a blank line and raising `ValueError`
  for anything it does not accept.

## What it does not do

- Only `SET`, `GET` and `DEL` are understood; there are no other data
  types, no key expiry and no authentication.
- The server reads at most 1024 bytes at a time and treats each read as
  one request, so pipelined or larger requests are not supported.
- The data lives in memory only; persistence is the append-only log,
  which is never compacted.