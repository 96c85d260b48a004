"""Interactive menu client for the text, uptime, address and counter service."""

from __future__ import annotations

import argparse
import re
import sys
import time
from typing import TextIO

from packetnet.client import Client, ClientLogic, TcpClient, UdpClient
from packetnet.packet import Packet

DEFAULT_TCP_SERVER = "0.0.0.0:39999"
DEFAULT_UDP_SERVER = "0.0.0.0:29999"
DEFAULT_UDP_BIND = "0.0.0.0:0"

EXIT_COMMAND = 5
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide rounding toward zero, the remainder taking the dividend's sign."""
    quotient, remainder = divmod(abs(value), divisor)
    return (quotient, remainder) if value >= 0 else (-quotient, -remainder)


def _parse_int(text: str, default: int) -> int:
    return int(text) if _INTEGER.fullmatch(text) else default


def format_ms_to_hh_mm_ss(ms: int) -> str:
    """Format a duration in milliseconds as ``HH:MM:SS``."""
    secs, _ = _trunc_divmod(ms, 1000)
    hours, rest = _trunc_divmod(secs, 3600)
    minutes, seconds = _trunc_divmod(rest, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def format_client_ip_port(data: str) -> str:
    """Describe an ``ip:port`` string, or return ``""`` if it is not one."""
    parts = data.split(":")
    if len(parts) != 2:
        return ""
    return f"client IP = {parts[0]}, port = {parts[1]}"


class MenuClientLogic(ClientLogic):
    """Reads menu choices from a text stream and prints server replies."""

    def __init__(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.output_stream.write(text)
        self.output_stream.flush()

    def _read_line(self) -> str:
        line = self.input_stream.readline()
        if not line:
            raise EOFError("input closed")
        return line.strip()

    def _wrong_command(self) -> None:
        self._write("\nPlease try again\n\n")

    def print_usage(self) -> None:
        self._write(
            "<Menu>\n"
            "1) convert text to UPPER-case\n"
            "2) get server running time\n"
            "3) get my IP address and port number\n"
            "4) get server request count\n"
            "5) exit\n"
        )

    def build_request(self) -> Packet | None:
        """Read a menu choice; exits with status 0 when the user picks exit."""
        self._write("Input option: ")
        command = _parse_int(self._read_line(), -1)
        if 1 <= command <= 4:
            data = None
            if command == 1:
                self._write("Input sentence: ")
                data = self._read_line()
            return Packet(str(command), data)
        if command == EXIT_COMMAND:
            self._write("Bye bye~\n")
            raise SystemExit(0)
        self._wrong_command()
        return None

    def handle_response(self, response: Packet, rtt: int) -> None:
        command = _parse_int(response.header, -1)
        data = response.unwrap_data()
        if command == 2:
            result = format_ms_to_hh_mm_ss(_parse_int(data, 0))
        elif command == 3:
            result = format_client_ip_port(data)
        elif command == 4:
            result = f"requests served = {data}"
        else:
            result = data
        self._write(f"\nReply from server: {result}\n")
        self._write(f"RTT = {rtt / 1_000_000:.3f}\n\n")


def run_client(logic: ClientLogic, client: Client) -> None:
    """Connect and loop: ask for a request, send it, show the reply.

    The loop ends only when ``logic.build_request`` raises.
    """
    client.connect()
    while True:
        logic.print_usage()
        request = logic.build_request()
        if request is None:
            continue
        try:
            client.send_packet(request)
        except OSError:
            continue
        sent_at = time.perf_counter_ns()
        try:
            response = client.receive_packet()
        except OSError:
            continue
        logic.handle_response(response, time.perf_counter_ns() - sent_at)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Menu client for the packet service.")
    parser.add_argument("protocol", choices=("tcp", "udp"), help="transport to use")
    parser.add_argument("--server", help="server address as host:port")
    parser.add_argument("--bind", default=DEFAULT_UDP_BIND, help="local UDP address as host:port")
    args = parser.parse_args(argv)

    try:
        if args.protocol == "tcp":
            client: Client = TcpClient(args.server or DEFAULT_TCP_SERVER)
        else:
            client = UdpClient(args.bind, args.server or DEFAULT_UDP_SERVER)
    except OSError as exc:
        print(f"Could not connect to server: {exc}", file=sys.stderr)
        return 1

    try:
        run_client(MenuClientLogic(), client)
    except OSError as exc:
        print(f"Could not connect to server: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        return 0
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())