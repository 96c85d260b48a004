"""Client transports and the interface for client-side application logic."""

from __future__ import annotations

import socket
from abc import ABC, abstractmethod

from packetnet.packet import Packet

RECEIVE_BUFFER_SIZE = 1024


def _parse_address(addr: str) -> tuple[str, int]:
    """Split ``host:port`` (or ``[v6]:port``) into a host and an integer port."""
    host, separator, port = addr.rpartition(":")
    if not separator or not host or not port.isdigit():
        raise ValueError(f"invalid socket address: {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, int(port)


def _family_for(host: str) -> socket.AddressFamily:
    return socket.AF_INET6 if ":" in host else socket.AF_INET


class ClientLogic(ABC):
    """Application behaviour driven by a client loop."""

    @abstractmethod
    def print_usage(self) -> None:
        """Show the user what requests can be made."""

    @abstractmethod
    def build_request(self) -> Packet | None:
        """Build the next request, or return None to skip this round."""

    @abstractmethod
    def handle_response(self, response: Packet, rtt: int) -> None:
        """Present a response; ``rtt`` is the round trip time in nanoseconds."""


class Client(ABC):
    """A connection that can exchange raw bytes and packets with a server."""

    @abstractmethod
    def connect(self) -> None:
        """Establish the connection."""

    @abstractmethod
    def send(self, data: bytes) -> None:
        """Send raw bytes."""

    @abstractmethod
    def receive(self, bufsize: int) -> bytes:
        """Receive up to ``bufsize`` bytes."""

    @abstractmethod
    def close(self) -> None:
        """Release the connection."""

    def send_packet(self, packet: Packet) -> None:
        """Send a packet in its wire form."""
        self.send(packet.marshall().encode("utf-8"))

    def receive_packet(self) -> Packet:
        """Receive one packet."""
        data = self.receive(RECEIVE_BUFFER_SIZE)
        return Packet.unmarshall(data.decode("utf-8"))


class TcpClient(Client):
    """A client over a TCP stream, opened by :meth:`connect`."""

    def __init__(self, addr: str) -> None:
        self.addr = addr
        self._stream: socket.socket | None = None

    def connect(self) -> None:
        self._stream = socket.create_connection(_parse_address(self.addr))

    def send(self, data: bytes) -> None:
        if self._stream is not None:
            self._stream.sendall(data)

    def receive(self, bufsize: int) -> bytes:
        if self._stream is None:
            return b""
        try:
            return self._stream.recv(bufsize)
        except OSError:
            return b""

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None


class UdpClient(Client):
    """A client over a UDP socket bound locally and connected to a target."""

    def __init__(self, bind_addr: str, target: str) -> None:
        bind_host, bind_port = _parse_address(bind_addr)
        self._socket = socket.socket(_family_for(bind_host), socket.SOCK_DGRAM)
        try:
            self._socket.bind((bind_host, bind_port))
            self._socket.connect(_parse_address(target))
        except OSError:
            self._socket.close()
            raise

    def connect(self) -> None:
        """Nothing to do: the socket is connected on construction."""

    def send(self, data: bytes) -> None:
        self._socket.send(data)

    def receive(self, bufsize: int) -> bytes:
        return self._socket.recv(bufsize)

    def close(self) -> None:
        self._socket.close()