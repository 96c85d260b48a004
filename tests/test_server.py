import socket
import threading
import time

import pytest

from packetnet.packet import Packet
from packetnet.server import ServerLogic, TcpServer, UdpServer


class UpperLogic(ServerLogic):
    def handle_request(self, packet):
        if packet.header == "0":
            return None
        return Packet(packet.header, packet.unwrap_data().upper())


def _start(server):
    thread = threading.Thread(target=server.run, args=(UpperLogic(),), daemon=True)
    thread.start()
    return thread


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


def test_tcp_server_announces_address(capsys):
    TcpServer("127.0.0.1:0")
    assert "Server listening on 127.0.0.1:0" in capsys.readouterr().out


def test_tcp_server_answers_request():
    server = TcpServer("127.0.0.1:0")
    _start(server)
    with socket.create_connection(server.address, timeout=5) as conn:
        conn.sendall(b"1;abc")
        reply = conn.recv(1024)
    assert Packet.unmarshall(reply.decode()) == Packet("1", "ABC")
    assert server.requests_handled == 1


def test_tcp_server_skips_unanswered_request_on_same_connection():
    server = TcpServer("127.0.0.1:0")
    _start(server)
    with socket.create_connection(server.address, timeout=5) as conn:
        conn.sendall(b"0;ignored")
        assert _wait_for(lambda: server.requests_handled == 1)
        conn.sendall(b"2;_")
        reply = conn.recv(1024)
    assert reply == b"2;_"
    assert server.requests_handled == 2


def test_tcp_server_serves_successive_connections():
    server = TcpServer("127.0.0.1:0")
    _start(server)
    replies = []
    for word in ("first", "second"):
        with socket.create_connection(server.address, timeout=5) as conn:
            conn.sendall(f"1;{word}".encode())
            replies.append(conn.recv(1024))
    assert replies == [b"1;FIRST", b"1;SECOND"]


def test_udp_server_replies_to_sender():
    server = UdpServer("127.0.0.1:0")
    _start(server)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(5)
        sock.sendto(b"1;shout", server.address)
        reply, sender = sock.recvfrom(1024)
    assert reply == b"1;SHOUT"
    assert sender == server.address
    assert server.requests_handled == 1


def test_udp_server_counts_unanswered_requests():
    server = UdpServer("127.0.0.1:0")
    _start(server)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(5)
        sock.sendto(b"0;quiet", server.address)
        assert _wait_for(lambda: server.requests_handled == 1)
        assert server.requests_handled == 1
        sock.sendto(b"1;next", server.address)
        reply, _ = sock.recvfrom(1024)
    # The first datagram got no answer, so the only reply is for the second.
    assert reply == b"1;NEXT"
    assert server.requests_handled == 2


def test_server_rejects_invalid_address():
    with pytest.raises(ValueError):
        UdpServer("localhost")