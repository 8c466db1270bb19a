import socket

import pytest

from schedchat.server import WELCOME, ChatServer


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def _connect(port):
    return socket.create_connection(("127.0.0.1", port), timeout=5)


def _recv_exact(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _join(server, port):
    client = _connect(port)
    server.serve_once(5)
    assert _recv_exact(client, len(WELCOME)) == WELCOME
    return client


@pytest.fixture
def chat():
    def make(max_clients=2):
        port = _free_port()
        server = ChatServer("127.0.0.1", port, max_clients)
        created.append(server)
        return server, port

    created = []
    yield make
    for server in created:
        server.close()


def test_new_client_receives_welcome(chat):
    server, port = chat()
    with _connect(port) as client:
        assert server.serve_once(5) >= 1
        assert _recv_exact(client, len(WELCOME)) == WELCOME


def test_idle_serve_once_returns_zero(chat):
    server, _ = chat()
    assert server.serve_once(0.05) == 0


def test_message_broadcast_to_others_only(chat):
    server, port = chat()
    with _join(server, port) as a, _join(server, port) as b:
        a.sendall(b"hi there\n")
        server.serve_once(5)
        assert _recv_exact(b, len(b"hi there\n")) == b"hi there\n"
        a.settimeout(0.2)
        with pytest.raises(socket.timeout):
            a.recv(64)


def test_client_over_limit_is_greeted_but_not_read(chat):
    server, port = chat(max_clients=1)
    with _join(server, port) as a, _join(server, port) as b:
        b.sendall(b"ignored")
        assert server.serve_once(0.2) == 0
        a.settimeout(0.2)
        with pytest.raises(socket.timeout):
            a.recv(64)


def test_disconnect_frees_slot(chat):
    server, port = chat(max_clients=2)
    a = _join(server, port)
    with _join(server, port) as b:
        a.close()
        server.serve_once(5)
        with _join(server, port) as c:
            c.sendall(b"after")
            server.serve_once(5)
            assert _recv_exact(b, len(b"after")) == b"after"


def test_invalid_max_clients():
    with pytest.raises(ValueError):
        ChatServer("127.0.0.1", 0, 0)


def test_bind_on_busy_port_fails():
    with socket.create_server(("127.0.0.1", 0)) as busy:
        port = busy.getsockname()[1]
        with pytest.raises(OSError):
            ChatServer("127.0.0.1", port, 2)


def test_close_refuses_new_connections(chat):
    server, port = chat()
    with _connect(port) as client:
        assert server.serve_once(5) >= 1
        assert _recv_exact(client, len(WELCOME)) == WELCOME
    server.close()
    with pytest.raises(OSError):
        _connect(port)