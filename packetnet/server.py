"""Servers that answer packets using pluggable request handling logic."""

from __future__ import annotations

import socket
import time
from abc import ABC, abstractmethod

from packetnet.client import _family_for, _parse_address
from packetnet.packet import Packet

RECEIVE_BUFFER_SIZE = 512


class ServerLogic(ABC):
    """Application behaviour that turns requests into responses."""

    @abstractmethod
    def handle_request(self, packet: Packet) -> Packet | None:
        """Return the response to a request, or None to send nothing."""


class Server(ABC):
    """A server that serves requests until its socket is closed."""

    @abstractmethod
    def run(self, logic: ServerLogic) -> None:
        """Serve requests with ``logic``."""


def _is_closed(sock: socket.socket) -> bool:
    return sock.fileno() == -1


class TcpServer(Server):
    """Serves one TCP connection at a time, one request per read."""

    def __init__(self, bind_addr: str) -> None:
        host, port = _parse_address(bind_addr)
        self._listener = socket.socket(_family_for(host), socket.SOCK_STREAM)
        try:
            self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._listener.bind((host, port))
            self._listener.listen()
        except OSError:
            self._listener.close()
            raise
        self.address = self._listener.getsockname()
        self.requests_handled = 0
        self.start_time = time.monotonic()
        print(f"Server listening on {bind_addr}")

    def run(self, logic: ServerLogic) -> None:
        while True:
            try:
                conn, _ = self._listener.accept()
            except OSError:
                if _is_closed(self._listener):
                    return
                continue
            with conn:
                self._serve_connection(conn, logic)

    def _serve_connection(self, conn: socket.socket, logic: ServerLogic) -> None:
        while True:
            try:
                chunk = conn.recv(RECEIVE_BUFFER_SIZE)
            except OSError:
                return
            if not chunk:
                return
            self.requests_handled += 1
            request = Packet.unmarshall(chunk.decode("utf-8"))
            response = logic.handle_request(request)
            if response is None:
                continue
            print(f"Command {response.header}")
            try:
                conn.sendall(response.marshall().encode("utf-8"))
            except OSError:
                return


class UdpServer(Server):
    """Answers each datagram with a datagram to its sender."""

    def __init__(self, bind_addr: str) -> None:
        host, port = _parse_address(bind_addr)
        self._socket = socket.socket(_family_for(host), socket.SOCK_DGRAM)
        try:
            self._socket.bind((host, port))
        except OSError:
            self._socket.close()
            raise
        self.address = self._socket.getsockname()
        self.requests_handled = 0
        self.start_time = time.monotonic()

    def run(self, logic: ServerLogic) -> None:
        while True:
            try:
                chunk, sender = self._socket.recvfrom(RECEIVE_BUFFER_SIZE)
            except OSError:
                if _is_closed(self._socket):
                    return
                continue
            request = Packet.unmarshall(chunk.decode("utf-8"))
            print(f"Connection requested from {sender[0]}:{sender[1]}")
            self.requests_handled += 1

            response = logic.handle_request(request)
            if response is None:
                continue
            print(f"Command {response.header}")
            try:
                self._socket.sendto(response.marshall().encode("utf-8"), sender)
            except OSError:
                continue