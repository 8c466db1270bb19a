import io
import socket
import threading

import pytest

from schedchat.client import main, run_client


def _start_server(handler):
    listener = socket.create_server(("127.0.0.1", 0))
    listener.settimeout(5)
    port = listener.getsockname()[1]
    received = []

    def serve():
        with listener:
            conn, _ = listener.accept()
            conn.settimeout(5)
            with conn:
                handler(conn, received)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    return port, thread, received


def _closed_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_client_prints_replies():
    def echo(conn, received):
        data = conn.recv(1024)
        received.append(data)
        conn.sendall(b"echo:" + data)
        while conn.recv(1024):
            pass

    port, thread, received = _start_server(echo)
    out = io.StringIO()
    run_client("127.0.0.1", port, io.StringIO("hello\n"), out)
    thread.join(5)
    assert received == [b"hello\n"]
    assert out.getvalue() == (
        f"Connected to server at 127.0.0.1:{port}\n"
        "Enter message: Server: echo:hello\n\n"
        "Enter message: "
    )


def test_client_stops_at_end_of_input():
    def drain(conn, received):
        received.append(conn.recv(1024))

    port, thread, received = _start_server(drain)
    out = io.StringIO()
    run_client("127.0.0.1", port, io.StringIO(""), out)
    thread.join(5)
    assert received == [b""]
    assert out.getvalue() == f"Connected to server at 127.0.0.1:{port}\nEnter message: "


def test_client_stops_when_server_closes():
    def hang_up(conn, received):
        received.append(conn.recv(1024))

    port, thread, received = _start_server(hang_up)
    out = io.StringIO()
    run_client("127.0.0.1", port, io.StringIO("hi\nmore\n"), out)
    thread.join(5)
    assert received == [b"hi\n"]
    assert out.getvalue().count("Enter message: ") == 1


def test_client_connection_refused():
    with pytest.raises(ConnectionError):
        run_client("127.0.0.1", _closed_port(), io.StringIO(""), io.StringIO())


def test_main_reports_failed_connection(capsys):
    assert main(["--host", "127.0.0.1", "--port", str(_closed_port())]) == 1
    assert "Connection to server failed" in capsys.readouterr().err