"""Client socket over a non-blocking UDP socket."""

from __future__ import annotations

import ipaddress
import logging
import socket
import threading
from dataclasses import dataclass
from typing import Any

from linksocket.client.packet import Packet
from linksocket.client.receiver import (
    ConditionedPacketReceiver,
    PacketReceiver,
    PacketSource,
)
from linksocket.config import SocketConfig
from linksocket.errors import ClientSocketError
from linksocket.net import find_my_ip_address

logger = logging.getLogger(__name__)

_RECEIVE_BUFFER_SIZE = 1472

IpAddress = ipaddress.IPv4Address | ipaddress.IPv6Address
_Endpoint = tuple[IpAddress, int]


def _normalize(address: tuple[Any, ...]) -> _Endpoint:
    host, port = address[0], address[1]
    try:
        ip = ipaddress.ip_address(host)
    except ValueError as err:
        raise ValueError(f"not an IP address: {host!r}") from err
    return ip, int(port)


def _to_socket_address(endpoint: _Endpoint) -> tuple[str, int]:
    return str(endpoint[0]), endpoint[1]


class UdpPacketReceiver(PacketSource):
    """Polls a UDP socket for packets coming from the server's address."""

    def __init__(
        self,
        address: tuple[Any, ...],
        sock: socket.socket,
        lock: threading.Lock | None = None,
    ) -> None:
        self._address = _normalize(address)
        self._socket = sock
        self._lock = lock if lock is not None else threading.Lock()

    def receive(self) -> Packet | None:
        """Return a waiting packet from the server, or None if none arrived."""
        with self._lock:
            try:
                data, source = self._socket.recvfrom(_RECEIVE_BUFFER_SIZE)
            except BlockingIOError:
                return None
            except OSError as err:
                raise ClientSocketError(cause=err) from err
        if _normalize(source) == self._address:
            return Packet(data)
        raise ClientSocketError("Unknown sender.")


class PacketSender:
    """Sends packets to the server through a UDP socket."""

    def __init__(
        self,
        address: tuple[Any, ...],
        sock: socket.socket,
        lock: threading.Lock | None = None,
    ) -> None:
        self._address = _normalize(address)
        self._socket = sock
        self._lock = lock if lock is not None else threading.Lock()

    def send(self, packet: Packet) -> None:
        """Send a packet; failures to send are dropped like lost datagrams."""
        with self._lock:
            try:
                self._socket.sendto(packet.payload, _to_socket_address(self._address))
            except OSError as err:
                logger.debug("failed to send packet: %s", err)


@dataclass
class _Io:
    sender: PacketSender
    receiver: PacketReceiver
    socket: socket.socket


class Socket:
    """A client socket that exchanges unordered, unreliable packets with a server.

    The local address is discovered automatically unless ``local_ip`` is given.
    """

    def __init__(self, config: SocketConfig, local_ip: IpAddress | None = None) -> None:
        self.config = config
        self._local_ip = local_ip
        self._io: _Io | None = None

    def connect(self, server_address: tuple[Any, ...]) -> None:
        """Open the underlying socket and direct it at the server."""
        if self._io is not None:
            raise RuntimeError("Socket already connected!")
        server = _normalize(server_address)
        local_ip = self._local_ip if self._local_ip is not None else find_my_ip_address()
        if local_ip is None:
            raise RuntimeError("cannot find current ip address")

        family = socket.AF_INET6 if local_ip.version == 6 else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_DGRAM)
        try:
            sock.bind((str(local_ip), 0))
            sock.setblocking(False)
        except OSError:
            sock.close()
            raise

        lock = threading.Lock()
        address = _to_socket_address(server)
        source: PacketSource = UdpPacketReceiver(address, sock, lock)
        conditioner = self.config.link_condition_config
        if conditioner is not None:
            source = ConditionedPacketReceiver(source, conditioner)

        self._io = _Io(
            sender=PacketSender(address, sock, lock),
            receiver=PacketReceiver(source),
            socket=sock,
        )

    def _require_io(self) -> _Io:
        if self._io is None:
            raise RuntimeError(
                "Socket is not connected yet! Call Socket.connect() before this."
            )
        return self._io

    def packet_sender(self) -> PacketSender:
        """The sender for packets going to the server."""
        return self._require_io().sender

    def packet_receiver(self) -> PacketReceiver:
        """The receiver for packets coming from the server."""
        return self._require_io().receiver

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._io is not None:
            self._io.socket.close()