"""Blocking server socket backed by an event loop on a background thread."""

from __future__ import annotations

import asyncio
import contextlib
import queue
import threading
from dataclasses import dataclass
from typing import Any

from linksocket.config import SocketConfig
from linksocket.errors import ServerSocketError
from linksocket.server.addrs import ServerAddrs
from linksocket.server.packet import Packet
from linksocket.server.receiver import (
    ConditionedQueuePacketReceiver,
    PacketReceiver,
    PacketSource,
    QueuePacketReceiver,
)
from linksocket.server.sender import PacketSender
from linksocket.server.udp import AsyncUdpSocket

_STOP = object()


async def _pump(sock: AsyncUdpSocket, from_client: queue.Queue) -> None:
    while True:
        try:
            packet = await sock.receive()
        except ServerSocketError as err:
            from_client.put(err)
        else:
            from_client.put(packet)


async def _start(
    addrs: ServerAddrs, config: SocketConfig, from_client: queue.Queue
) -> tuple[AsyncUdpSocket, asyncio.Task, tuple[Any, ...]]:
    sock = await AsyncUdpSocket.listen(addrs, config)
    task = asyncio.get_running_loop().create_task(_pump(sock, from_client))
    return sock, task, sock.local_address


async def _stop(sock: AsyncUdpSocket, task: asyncio.Task) -> None:
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task
    sock.close()
    await asyncio.sleep(0)


def _forward(to_client: queue.Queue, outgoing: asyncio.Queue, loop: asyncio.AbstractEventLoop) -> None:
    while (packet := to_client.get()) is not _STOP:
        asyncio.run_coroutine_threadsafe(outgoing.put(packet), loop).result()


@dataclass
class _Io:
    sender: PacketSender
    receiver: PacketReceiver
    local_address: tuple[Any, ...]
    to_client: queue.Queue
    loop: asyncio.AbstractEventLoop
    loop_thread: threading.Thread
    send_thread: threading.Thread
    async_socket: AsyncUdpSocket
    pump: asyncio.Task


class Socket:
    """Sends packets to and receives packets from remote clients."""

    def __init__(self, config: SocketConfig) -> None:
        self.config = config
        self._io: _Io | None = None

    def listen(self, server_addrs: ServerAddrs) -> None:
        """Start listening for clients on the given addresses."""
        if self._io is not None:
            raise RuntimeError("Socket already listening!")

        from_client: queue.Queue = queue.Queue()
        to_client: queue.Queue[Packet] = queue.Queue()

        loop = asyncio.new_event_loop()
        loop_thread = threading.Thread(
            target=loop.run_forever, name="linksocket-io", daemon=True
        )
        loop_thread.start()
        try:
            async_socket, pump, local_address = asyncio.run_coroutine_threadsafe(
                _start(server_addrs, self.config, from_client), loop
            ).result()
        except BaseException:
            loop.call_soon_threadsafe(loop.stop)
            loop_thread.join()
            loop.close()
            raise

        send_thread = threading.Thread(
            target=_forward,
            args=(to_client, async_socket.sender(), loop),
            name="linksocket-send",
            daemon=True,
        )
        send_thread.start()

        conditioner = self.config.link_condition_config
        source: PacketSource
        if conditioner is not None:
            source = ConditionedQueuePacketReceiver(from_client, conditioner)
        else:
            source = QueuePacketReceiver(from_client)

        self._io = _Io(
            sender=PacketSender(to_client),
            receiver=PacketReceiver(source),
            local_address=local_address,
            to_client=to_client,
            loop=loop,
            loop_thread=loop_thread,
            send_thread=send_thread,
            async_socket=async_socket,
            pump=pump,
        )

    def _require_io(self) -> _Io:
        if self._io is None:
            raise RuntimeError(
                "Socket is not listening yet! Call Socket.listen() before this."
            )
        return self._io

    @property
    def local_address(self) -> tuple[Any, ...]:
        """The address the socket is bound to."""
        return self._require_io().local_address

    def packet_sender(self) -> PacketSender:
        """The sender for packets going to clients."""
        return self._require_io().sender

    def packet_receiver(self) -> PacketReceiver:
        """The receiver for packets coming from clients."""
        return self._require_io().receiver

    def close(self) -> None:
        """Stop listening and release the background threads."""
        io = self._io
        if io is None:
            return
        self._io = None
        io.to_client.put(_STOP)
        io.send_thread.join()
        asyncio.run_coroutine_threadsafe(_stop(io.async_socket, io.pump), io.loop).result()
        io.loop.call_soon_threadsafe(io.loop.stop)
        io.loop_thread.join()
        io.loop.close()

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()