# packetnet

A small framework for request/response programs over TCP or UDP. Messages
are `Packet` objects, sent as UTF-8 text in the form `header;data`, where
`_` stands for "no data".

## Installation

```
pip install packetnet
```

It needs nothing outside the standard library.

## Packets (`packetnet.packet`)

```python
from packetnet.packet import Packet

Packet("1", "hello").marshall()        # "1;hello"
Packet("4").unwrap_data()              # "_"
Packet.unmarshall("2;_").data          # None
Packet.unmarshall("1;a;b").data        # "a;b"  (only the first ';' splits)
Packet.unmarshall("3").data            # None   (no separator, no data)
```

`Packet` is a dataclass with the fields `header` and `data` (`None` when
there is no data).

## Servers (`packetnet.server`)

Subclass `ServerLogic` and implement `handle_request(packet)`. It returns the
response `Packet`, or `None` to send no reply. Pass it to the `run` method of
a `TcpServer` or a `UdpServer`, each built from a `host:port` address:

```python
from packetnet.packet import Packet
from packetnet.server import ServerLogic, TcpServer

class UpperCase(ServerLogic):
    def handle_request(self, packet):
        return Packet(packet.header, packet.unwrap_data().upper())

TcpServer("127.0.0.1:39999").run(UpperCase())
```

- `TcpServer` accepts one connection at a time and treats each read of up to
  512 bytes as one request. It prints `Server listening on <address>` when
  created.
- `UdpServer` treats each datagram (up to 512 bytes) as one request and
  sends the reply to the sender. It prints the sender of each request.
- Both print `Command <header>` for every reply they send, and keep
  `address` (the bound address), `requests_handled` (a counter of requests
  received) and `start_time` (a `time.monotonic()` reading taken at
  creation). `run` does not return while the server's socket is open.

## Clients (`packetnet.client`)

`TcpClient(addr)` and `UdpClient(bind_addr, target)` share the `Client`
interface: `connect`, `send`, `receive`, `close`, `send_packet` and
`receive_packet` (which reads up to 1024 bytes).

```python
from packetnet.client import TcpClient
from packetnet.packet import Packet

client = TcpClient("127.0.0.1:39999")
client.connect()
client.send_packet(Packet("1", "hello"))
print(client.receive_packet().data)
client.close()
```

A `UdpClient` binds and connects its socket when it is created, so its
`connect` does nothing: `UdpClient("0.0.0.0:0", "127.0.0.1:29999")`.
`TcpClient.receive` returns `b""` when not connected or when the read fails.

`ClientLogic` is the interface for the application side of a client:
`print_usage()`, `build_request()` (a `Packet`, or `None` to skip a round)
and `handle_response(response, rtt)` with the round trip time in
nanoseconds.

## Interactive menu client (`packetnet.menu_client`)

`MenuClientLogic` reads menu choices from a text stream (standard input by
default) and writes to another (standard output by default). The menu is:

1. convert text to UPPER-case (asks for a sentence, sent as the data)
2. get server running time (the reply, in milliseconds, is shown as `HH:MM:SS`)
3. get my IP address and port number (a reply `ip:port` is shown as `client IP = ..., port = ...`)
4. get server request count
5. exit

Each request is sent with the option number as its header. After each reply
the round trip time is printed in milliseconds. `run_client(logic, client)`
connects the client and runs this loop; choosing 5 exits with status 0.
`format_ms_to_hh_mm_ss` and `format_client_ip_port` are the formatting
helpers it uses.

The command takes the transport as its first argument:

```
packetnet-client tcp
packetnet-client udp --server 127.0.0.1:29999
```

Options:

- `--server host:port` – server address (default `0.0.0.0:39999` for TCP,
  `0.0.0.0:29999` for UDP)
- `--bind host:port` – local UDP address (default `0.0.0.0:0`)

The command returns 0 when input ends and 1 when the connection cannot be
made.

## What it does not do

The package has no ready-made server for the menu client: no `ServerLogic`
that upper-cases text, reports running time, echoes the client's address or
reports the request count is included, and there is no command that starts a
server. Write your own `ServerLogic` and run it with `TcpServer` or
`UdpServer` as shown above. The servers also have no method to stop them.