"""Receiving packets on the client, optionally through a link conditioner."""

from __future__ import annotations

from abc import ABC, abstractmethod

from linksocket.client.packet import Packet
from linksocket.config import LinkConditionerConfig
from linksocket.errors import ClientSocketError
from linksocket.link_conditioner import process_packet
from linksocket.time_queue import TimeQueue


class PacketSource(ABC):
    """Something packets from the server can be polled from."""

    @abstractmethod
    def receive(self) -> Packet | None:
        """Return the next packet, or None if none is waiting.

        Raises ClientSocketError on failure.
        """


class PacketReceiver:
    """Public handle for polling packets from a client socket."""

    def __init__(self, inner: PacketSource) -> None:
        self._inner = inner

    def receive(self) -> Packet | None:
        """Return the next packet, or None if none is waiting."""
        return self._inner.receive()


class ConditionedPacketReceiver(PacketSource):
    """Delays and drops packets from an inner source to simulate a network."""

    def __init__(self, inner: PacketSource, config: LinkConditionerConfig) -> None:
        self._inner = inner
        self._config = config
        self._queue: TimeQueue[Packet] = TimeQueue()

    def receive(self) -> Packet | None:
        """Drain the inner source, then return a packet whose delay has passed."""
        while True:
            try:
                packet = self._inner.receive()
            except ClientSocketError:
                break
            if packet is None:
                break
            process_packet(self._config, self._queue, packet)
        return self._queue.pop_item()