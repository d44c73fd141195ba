import socket
import time

import pytest

from linksocket.config import LinkConditionerConfig, SocketConfig
from linksocket.server.addrs import ServerAddrs
from linksocket.server.packet import Packet
from linksocket.server.socket import Socket


def _addrs(port=0):
    return ServerAddrs(("127.0.0.1", port), ("127.0.0.1", 0), ("127.0.0.1", 0))


def _poll(receiver, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        packet = receiver.receive()
        if packet is not None:
            return packet
        time.sleep(0.01)
    return None


@pytest.fixture
def client():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.settimeout(2.0)
        yield sock


@pytest.fixture
def server():
    sock = Socket(SocketConfig())
    sock.listen(_addrs())
    yield sock
    sock.close()


def test_receives_packet_from_client(server, client):
    client.sendto(b"hello", server.local_address)
    packet = _poll(server.packet_receiver())
    assert packet == Packet(client.getsockname(), b"hello")


def test_sends_packet_to_client(server, client):
    server.packet_sender().send(Packet(client.getsockname(), b"pong"))
    data, source = client.recvfrom(100)
    assert data == b"pong"
    assert source == server.local_address


def test_handles_before_listen_raise():
    sock = Socket(SocketConfig())
    with pytest.raises(RuntimeError):
        sock.packet_sender()
    with pytest.raises(RuntimeError):
        sock.packet_receiver()


def test_listen_twice_raises(server):
    with pytest.raises(RuntimeError, match="already listening"):
        server.listen(_addrs())


def test_close_releases_handles():
    sock = Socket(SocketConfig())
    sock.listen(_addrs())
    sock.close()
    with pytest.raises(RuntimeError):
        sock.packet_sender()


def test_bind_failure_raises_and_leaves_socket_idle():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as holder:
        holder.bind(("127.0.0.1", 0))
        port = holder.getsockname()[1]
        sock = Socket(SocketConfig())
        with pytest.raises(OSError):
            sock.listen(_addrs(port))
        with pytest.raises(RuntimeError):
            sock.packet_receiver()


def test_conditioned_without_loss_delivers(client):
    config = SocketConfig(LinkConditionerConfig(0, 0, 0.0))
    with Socket(config) as sock:
        sock.listen(_addrs())
        client.sendto(b"through", sock.local_address)
        packet = _poll(sock.packet_receiver())
        assert packet == Packet(client.getsockname(), b"through")


def test_conditioned_with_full_loss_drops(client):
    config = SocketConfig(LinkConditionerConfig(0, 0, 1.0))
    with Socket(config) as sock:
        sock.listen(_addrs())
        client.sendto(b"lost", sock.local_address)
        time.sleep(0.3)
        assert _poll(sock.packet_receiver(), timeout=0.3) is None