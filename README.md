# linksocket

Unreliable, unordered packet sockets over UDP for real-time applications
such as multiplayer games. A client talks to a single server; a server
exchanges packets with many clients at once. Both ends can run incoming
traffic through a *link conditioner* that simulates latency, jitter and
packet loss, so you can see how your code behaves on a bad connection.

The package has no dependencies beyond the standard library.

## Installation

```
pip install linksocket
```

To run the test suite:

```
pip install "linksocket[test]"
pytest
```

## Configuration

Both sockets take a `SocketConfig` (from `linksocket.config`). With no link
conditioner, packets are handed out as soon as they arrive:

```python
from linksocket.config import LinkConditionerConfig, SocketConfig

plain = SocketConfig()
```

Three presets describe typical connections:

| preset                                      | latency (ms) | jitter (ms) | loss  |
|---------------------------------------------|--------------|-------------|-------|
| `LinkConditionerConfig.good_condition()`    | 50           | 10          | 1 %   |
| `LinkConditionerConfig.average_condition()` | 200          | 20          | 5.5 % |
| `LinkConditionerConfig.poor_condition()`    | 350          | 30          | 10 %  |

```python
laggy = SocketConfig(LinkConditionerConfig.poor_condition())
custom = SocketConfig(LinkConditionerConfig(incoming_latency=100, incoming_jitter=5, incoming_loss=0.02))
```

Negative latency or jitter raises `ValueError`.

Each incoming packet is dropped with the configured probability; otherwise
it is held back for the latency plus or minus a random amount below the
jitter (never less than zero), and released once that moment has passed.
This is done by `linksocket.link_conditioner.process_packet(config,
time_queue, packet)`, which returns `True` if the packet was queued and
`False` if it was dropped.

`SocketConfig` also carries an `rtc_endpoint_path` (default
`"new_rtc_session"`); the UDP sockets in this package do not use it.

## Server

```python
from linksocket.config import SocketConfig
from linksocket.server.addrs import ServerAddrs
from linksocket.server.packet import Packet
from linksocket.server.socket import Socket

with Socket(SocketConfig()) as socket:
    socket.listen(ServerAddrs.default())   # UDP on 127.0.0.1:14191
    print(socket.local_address)

    sender = socket.packet_sender()
    receiver = socket.packet_receiver()

    while True:
        packet = receiver.receive()        # None when nothing is ready
        if packet is not None:
            sender.send(Packet(packet.address, packet.payload))  # echo it back
```

`listen` binds a UDP socket to `session_listen_addr` and runs it on an event
loop in a background thread; `send` queues a packet and returns at once.
Calling `listen` twice, or asking for the sender or receiver before
`listen`, raises `RuntimeError`. `close()` (or leaving the `with` block)
stops the background threads and closes the socket.

Errors reported by the underlying socket are not raised from `receive`:
they are consumed and `receive` returns `None` in their place.

For use inside your own event loop, `linksocket.server.udp.AsyncUdpSocket`
offers the same transport directly:

```python
sock = await AsyncUdpSocket.listen(ServerAddrs.default(), SocketConfig())
await sock.sender().put(Packet(("127.0.0.1", 5000), b"hello"))
packet = await sock.receive()   # also sends queued packets while waiting
sock.close()
```

`receive` raises `ServerSocketError` if the socket reports an error and
`SendError` (carrying the `address`) if a queued packet cannot be sent. The
outgoing queue holds at most eight packets.

## Client

```python
from linksocket.client.packet import Packet
from linksocket.client.udp import Socket
from linksocket.config import SocketConfig
from linksocket.demo import get_server_address

with Socket(SocketConfig()) as socket:
    socket.connect(get_server_address())

    sender = socket.packet_sender()
    receiver = socket.packet_receiver()

    sender.send(Packet(b"ping"))
    reply = receiver.receive()             # None until something arrives
```

`connect` binds a non-blocking UDP socket to this host's IP address, found
with `linksocket.net.find_my_ip_address()`, unless one is passed as
`Socket(config, local_ip=...)`. If no address can be found, `connect`
raises `RuntimeError`, as it does when called twice; asking for the sender
or receiver before `connect` raises `RuntimeError` too.

Receiving never blocks. Without a link conditioner, a packet from any
address other than the server's raises `ClientSocketError` (from
`linksocket.errors`), as do socket failures. With a link conditioner, such
errors end the current poll silently. Sending failures are dropped like
lost datagrams.

## Helpers

- `linksocket.clock.Instant`: a moment on the monotonic clock in seconds,
  with `now()`, `elapsed()`, `until()` and `add_millis()`.
- `linksocket.clock.Timer(duration)`: rings once `duration` seconds have
  passed since the last `reset()`; `ring_manual()` makes it ring at once.
- `linksocket.time_queue.TimeQueue`: a queue that only gives up items whose
  time has come, earliest first (`add_item`, `has_item`, `pop_item`,
  `peek_entry`, `len()`).
- `linksocket.packet_reader.PacketReader`: reads `read_u8`, big-endian
  `read_u16` and `read_u64` from a payload, raising `EOFError` when bytes
  run out.
- `linksocket.timestamp.Timestamp`: whole seconds since the Unix epoch,
  written to a `bytearray` and read back from a `PacketReader` as a
  big-endian 64-bit integer.
- `linksocket.randomness`: `gen_range_f32`, `gen_range_u32` and `gen_bool`.
- `linksocket.net.find_my_ip_address()`: the local IP address used for
  outgoing traffic, or `None`.

## Demo

A ping-pong pair shows the sockets at work. Both use the average link
condition, so replies come back after a noticeable delay and some are lost.

Start the server in one terminal:

```
linksocket-demo-server
```

and the client in another:

```
linksocket-demo-client
```

The client sends `ping` once a second, whenever nothing has arrived, until
it has received ten `pong` replies; the server answers every `ping` it
receives. Both log what they send and receive. Stop either with Ctrl+C.

Options:

- `linksocket-demo-server --port PORT`: listen on `127.0.0.1:PORT`
  (default 14191).
- `linksocket-demo-client --server HOST:PORT`: the server to ping (default
  `127.0.0.1:14191`).
- `linksocket-demo-client --local-ip IP`: the local address to bind instead
  of the discovered one. When the server is on `127.0.0.1`, pass
  `--local-ip 127.0.0.1` so the replies reach the client.

The same apps are available as `linksocket.demo_server.ServerApp` and
`linksocket.demo_client.ClientApp`, each with an `update()` method that
handles one step.

## What this package does not do

Only UDP is supported. There is no browser or WebRTC transport and no HTTP
session endpoint: the `webrtc_listen_addr` and `public_webrtc_addr` fields
of `ServerAddrs`, and `SocketConfig.rtc_endpoint_path`, are carried but not
used. There is no reliability, ordering, connection tracking or
encryption; packets may be lost, duplicated or reordered.