"""A small broadcast chat server built on select()."""

from __future__ import annotations

import argparse
import logging
import select
import socket
import sys
from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
MAX_CLIENTS = 4
WELCOME = b"Welcome to the server!\n"
_BACKLOG = 3
_BUFFER_SIZE = 1024


class ChatServer:
    """Accept clients and relay every message to all other connected clients."""

    def __init__(self, host: str = "", port: int = DEFAULT_PORT, max_clients: int = MAX_CLIENTS):
        if max_clients < 1:
            raise ValueError("max_clients must be at least 1")
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._listener.bind((host, port))
            self._listener.listen(_BACKLOG)
        except OSError:
            self._listener.close()
            raise
        self._slots: list[socket.socket | None] = [None] * max_clients
        # Clients accepted while every slot was taken: greeted, never read.
        self._unlisted: list[socket.socket] = []
        logger.info("Server listening on port %d", self._listener.getsockname()[1])

    def __enter__(self) -> "ChatServer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def serve_forever(self) -> None:
        """Handle connections and messages until interrupted."""
        while True:
            self.serve_once(None)

    def serve_once(self, timeout: float | None = None) -> int:
        """Wait for activity once and handle it; return the number of ready sockets."""
        clients = [sock for sock in self._slots if sock is not None]
        try:
            readable, _, _ = select.select([self._listener, *clients], [], [], timeout)
        except OSError as exc:
            logger.error("Select error: %s", exc)
            return 0

        ready = set(readable)
        if self._listener in ready:
            self._accept()
        for index, sock in enumerate(self._slots):
            if sock is not None and sock in ready:
                self._receive(index, sock)
        return len(readable)

    def _accept(self) -> None:
        try:
            conn, _ = self._listener.accept()
        except OSError as exc:
            logger.error("Accept failed: %s", exc)
            return
        logger.info("New client connected: socket %d", conn.fileno())
        try:
            index = self._slots.index(None)
        except ValueError:
            self._unlisted.append(conn)
        else:
            self._slots[index] = conn
            logger.info("Adding client to list at index %d", index)
        try:
            conn.sendall(WELCOME)
        except OSError:
            pass

    def _receive(self, index: int, sock: socket.socket) -> None:
        fd = sock.fileno()
        try:
            data = sock.recv(_BUFFER_SIZE - 1)
        except OSError:
            data = b""
        if not data:
            logger.info("Client disconnected: socket %d", fd)
            sock.close()
            self._slots[index] = None
            return

        logger.info("Client %d says: %s", fd, data.decode("utf-8", "replace"))
        for other in self._slots:
            if other is not None and other is not sock:
                try:
                    other.sendall(data)
                except OSError:
                    pass

    def close(self) -> None:
        """Close every client connection and the listening socket."""
        for sock in [*self._slots, *self._unlisted]:
            if sock is not None:
                sock.close()
        self._slots = [None] * len(self._slots)
        self._unlisted.clear()
        self._listener.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chat server from the command line."""
    parser = argparse.ArgumentParser(description="Broadcast chat server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--max-clients", type=int, default=MAX_CLIENTS)
    args = parser.parse_args(argv)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        try:
            server = ChatServer(args.host, args.port, args.max_clients)
        except OSError as exc:
            print(f"Bind failed: {exc}", file=sys.stderr)
            return 1
        with server:
            try:
                server.serve_forever()
            except KeyboardInterrupt:
                pass
        return 0
    finally:
        logger.removeHandler(handler)


if __name__ == "__main__":
    sys.exit(main())