"""Receiving packets on the server, optionally through a link conditioner."""

from __future__ import annotations

import queue
from abc import ABC, abstractmethod
from typing import Union

from linksocket.config import LinkConditionerConfig
from linksocket.errors import ServerSocketError
from linksocket.link_conditioner import process_packet
from linksocket.server.packet import Packet
from linksocket.time_queue import TimeQueue

ReceiveResult = Union[Packet, ServerSocketError]


class PacketSource(ABC):
    """Something packets from clients can be polled from."""

    @abstractmethod
    def receive(self) -> Packet | None:
        """Return the next packet, or None if none is waiting."""


class PacketReceiver:
    """Public handle for polling packets from a server socket."""

    def __init__(self, inner: PacketSource) -> None:
        self._inner = inner

    def receive(self) -> Packet | None:
        """Return the next packet, or None if none is waiting."""
        return self._inner.receive()


def _take(channel: "queue.Queue[ReceiveResult]") -> Packet | None:
    try:
        item = channel.get_nowait()
    except queue.Empty:
        return None
    return None if isinstance(item, Exception) else item


class QueuePacketReceiver(PacketSource):
    """Takes packets from a queue fed by the socket's receive loop.

    Errors on the queue are consumed and reported as no packet.
    """

    def __init__(self, channel: "queue.Queue[ReceiveResult]") -> None:
        self._channel = channel

    def receive(self) -> Packet | None:
        return _take(self._channel)


class ConditionedQueuePacketReceiver(PacketSource):
    """Takes packets from a queue, delaying and dropping them to simulate a network."""

    def __init__(
        self,
        channel: "queue.Queue[ReceiveResult]",
        config: LinkConditionerConfig,
    ) -> None:
        self._channel = channel
        self._config = config
        self._queue: TimeQueue[Packet] = TimeQueue()

    def receive(self) -> Packet | None:
        """Drain the channel, then return a packet whose delay has passed."""
        while (packet := _take(self._channel)) is not None:
            process_packet(self._config, self._queue, packet)
        return self._queue.pop_item()