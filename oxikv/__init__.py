"""In-memory key-value server with a RESP subset, an append-only log and a client."""

__version__ = "0.1.0"