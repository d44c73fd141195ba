"""Sending packets from the server to clients."""

from __future__ import annotations

import queue

from linksocket.server.packet import Packet


class PacketSender:
    """Hands packets to the socket's send loop through a queue."""

    def __init__(self, channel: "queue.Queue[Packet]") -> None:
        self._channel = channel

    def send(self, packet: Packet) -> None:
        """Queue a packet for delivery to its address."""
        self._channel.put(packet)