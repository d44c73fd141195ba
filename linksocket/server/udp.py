"""Asynchronous UDP socket that exchanges packets with many clients."""

from __future__ import annotations

import asyncio
from typing import Any, Union

from linksocket.config import SocketConfig
from linksocket.errors import SendError, ServerSocketError
from linksocket.server.addrs import ServerAddrs
from linksocket.server.packet import Packet

CLIENT_CHANNEL_SIZE = 8

_Inbound = Union[Packet, Exception]


class _DatagramInbox(asyncio.DatagramProtocol):
    """Collects incoming datagrams and socket errors in arrival order."""

    def __init__(self) -> None:
        self.queue: asyncio.Queue[_Inbound] = asyncio.Queue()

    def datagram_received(self, data: bytes, addr: tuple[Any, ...]) -> None:
        self.queue.put_nowait(Packet(addr, data))

    def error_received(self, exc: Exception) -> None:
        self.queue.put_nowait(exc)


class AsyncUdpSocket:
    """Receives packets from clients while sending queued packets to them.

    Packets to send are put on the queue returned by :meth:`sender`; they are
    delivered while :meth:`receive` is being awaited.
    """

    def __init__(self, transport: asyncio.DatagramTransport, inbox: _DatagramInbox) -> None:
        self._transport = transport
        self._inbox = inbox
        self._outgoing: asyncio.Queue[Packet] = asyncio.Queue(CLIENT_CHANNEL_SIZE)
        self._incoming_task: asyncio.Future[_Inbound] | None = None
        self._outgoing_task: asyncio.Future[Packet] | None = None
        self._closed = False

    @classmethod
    async def listen(cls, addrs: ServerAddrs, config: SocketConfig) -> AsyncUdpSocket:
        """Bind to the session listen address and return the socket.

        The config is accepted for symmetry with other transports; UDP needs
        nothing from it.
        """
        loop = asyncio.get_running_loop()
        transport, inbox = await loop.create_datagram_endpoint(
            _DatagramInbox, local_addr=tuple(addrs.session_listen_addr)
        )
        return cls(transport, inbox)

    @property
    def local_address(self) -> tuple[Any, ...]:
        """The address the socket is bound to."""
        return tuple(self._transport.get_extra_info("sockname"))

    async def receive(self) -> Packet:
        """Wait for the next packet from a client, sending queued packets meanwhile.

        Raises ServerSocketError if the socket reports an error, and
        SendError if a queued packet cannot be sent.
        """
        if self._closed:
            raise RuntimeError("socket is closed")
        while True:
            if self._incoming_task is None:
                self._incoming_task = asyncio.ensure_future(self._inbox.queue.get())
            if self._outgoing_task is None:
                self._outgoing_task = asyncio.ensure_future(self._outgoing.get())
            await asyncio.wait(
                {self._incoming_task, self._outgoing_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
            if self._outgoing_task.done():
                packet = self._outgoing_task.result()
                self._outgoing_task = None
                self._send(packet)
            if self._incoming_task.done():
                item = self._incoming_task.result()
                self._incoming_task = None
                if isinstance(item, Exception):
                    raise ServerSocketError(item) from item
                return item

    def _send(self, packet: Packet) -> None:
        if self._transport.is_closing():
            raise SendError(packet.address)
        try:
            self._transport.sendto(packet.payload, packet.address)
        except (OSError, ValueError, TypeError) as err:
            raise SendError(packet.address) from err

    def sender(self) -> asyncio.Queue[Packet]:
        """The bounded queue of packets waiting to be sent to clients."""
        return self._outgoing

    def close(self) -> None:
        """Stop pending work and close the underlying transport."""
        self._closed = True
        for task in (self._incoming_task, self._outgoing_task):
            if task is not None:
                task.cancel()
        self._incoming_task = None
        self._outgoing_task = None
        self._transport.close()