"""Interactive line-based client for the chat server."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence
from typing import TextIO

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
_BUFFER_SIZE = 1024


def run_client(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> None:
    """Send each input line to the server and print one reply per line.

    Stops at end of input or when the server closes the connection.
    Raises OSError if the server cannot be reached.
    """
    input_stream = sys.stdin if input_stream is None else input_stream
    output_stream = sys.stdout if output_stream is None else output_stream

    with socket.create_connection((host, port)) as sock:
        output_stream.write(f"Connected to server at {host}:{port}\n")
        while True:
            output_stream.write("Enter message: ")
            output_stream.flush()
            line = input_stream.readline(_BUFFER_SIZE - 1)
            if not line:
                break
            sock.sendall(line.encode("utf-8"))
            try:
                data = sock.recv(_BUFFER_SIZE - 1)
            except ConnectionResetError:
                break
            if not data:
                break
            output_stream.write(f"Server: {data.decode('utf-8', 'replace')}\n")
            output_stream.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to a chat server and talk to it from the terminal."""
    parser = argparse.ArgumentParser(description="Chat client.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        run_client(args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Connection to server failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())