import asyncio
import socket

import pytest

from linksocket.config import SocketConfig
from linksocket.server.addrs import ServerAddrs
from linksocket.server.packet import Packet
from linksocket.server.udp import CLIENT_CHANNEL_SIZE, AsyncUdpSocket


def _addrs(port=0):
    return ServerAddrs(("127.0.0.1", port), ("127.0.0.1", 0), ("127.0.0.1", 0))


def _client():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    return sock


@pytest.mark.asyncio
async def test_local_address_is_loopback():
    server = await AsyncUdpSocket.listen(_addrs(), SocketConfig())
    try:
        host, port = server.local_address[:2]
        assert host == "127.0.0.1"
        assert port > 0
    finally:
        server.close()


@pytest.mark.asyncio
async def test_receive_returns_client_packet():
    server = await AsyncUdpSocket.listen(_addrs(), SocketConfig())
    try:
        with _client() as client:
            client.sendto(b"hello", server.local_address)
            packet = await asyncio.wait_for(server.receive(), 2.0)
            assert packet.payload == b"hello"
            assert packet.address == client.getsockname()
    finally:
        server.close()


@pytest.mark.asyncio
async def test_queued_packet_is_sent_while_receiving():
    server = await AsyncUdpSocket.listen(_addrs(), SocketConfig())
    try:
        with _client() as client:
            receive_task = asyncio.create_task(server.receive())
            await server.sender().put(Packet(client.getsockname(), b"pong"))
            data, source = await asyncio.to_thread(client.recvfrom, 100)
            assert data == b"pong"
            assert source == server.local_address
            client.sendto(b"done", server.local_address)
            packet = await asyncio.wait_for(receive_task, 2.0)
            assert packet.payload == b"done"
    finally:
        server.close()


@pytest.mark.asyncio
async def test_sender_queue_is_bounded():
    server = await AsyncUdpSocket.listen(_addrs(), SocketConfig())
    try:
        assert server.sender().maxsize == CLIENT_CHANNEL_SIZE == 8
    finally:
        server.close()


@pytest.mark.asyncio
async def test_receive_after_close_raises():
    server = await AsyncUdpSocket.listen(_addrs(), SocketConfig())
    server.close()
    with pytest.raises(RuntimeError):
        await server.receive()


@pytest.mark.asyncio
async def test_listen_on_used_port_fails():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as holder:
        holder.bind(("127.0.0.1", 0))
        port = holder.getsockname()[1]
        with pytest.raises(OSError):
            await AsyncUdpSocket.listen(_addrs(port), SocketConfig())