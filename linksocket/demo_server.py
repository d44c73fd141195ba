"""Demo server that answers every "ping" with a "pong"."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Any

from linksocket.config import SocketConfig
from linksocket.demo import PING_MSG, PONG_MSG, get_server_address, get_shared_config
from linksocket.errors import ServerSocketError
from linksocket.server.addrs import ServerAddrs
from linksocket.server.packet import Packet
from linksocket.server.socket import Socket

logger = logging.getLogger(__name__)

_DATA_ADDRESS = ("127.0.0.1", 14192)
_IDLE_SECONDS = 0.001


def _describe(address: tuple[Any, ...]) -> str:
    return f"{address[0]}:{address[1]}"


class ServerApp:
    """Listens for clients and replies to their pings."""

    def __init__(
        self,
        server_addrs: ServerAddrs | None = None,
        config: SocketConfig | None = None,
    ) -> None:
        logger.info("Server socket demo started")
        if server_addrs is None:
            server_addrs = ServerAddrs(get_server_address(), _DATA_ADDRESS, _DATA_ADDRESS)
        self._socket = Socket(config if config is not None else get_shared_config())
        self._socket.listen(server_addrs)
        self._sender = self._socket.packet_sender()
        self._receiver = self._socket.packet_receiver()

    @property
    def local_address(self) -> tuple[Any, ...]:
        """The address the server is bound to."""
        return self._socket.local_address

    def update(self) -> None:
        """Handle at most one incoming packet."""
        try:
            packet = self._receiver.receive()
        except ServerSocketError as err:
            logger.info("Server Error: %s", err)
            return
        if packet is None:
            return
        address = _describe(packet.address)
        message = packet.payload.decode("utf-8", errors="replace")
        logger.info("Server recv <- %s: %s", address, message)
        if message == PING_MSG:
            logger.info("Server send -> %s: %s", address, PONG_MSG)
            self._sender.send(Packet(packet.address, PONG_MSG.encode()))

    def close(self) -> None:
        """Stop listening."""
        self._socket.close()

    def __enter__(self) -> ServerApp:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Run the demo server until interrupted."""
    host, default_port = get_server_address()
    parser = argparse.ArgumentParser(
        prog="linksocket-demo-server", description="Answer pings from demo clients."
    )
    parser.add_argument("--port", type=int, default=default_port, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    addrs = ServerAddrs((host, args.port), _DATA_ADDRESS, _DATA_ADDRESS)
    with ServerApp(addrs) as app:
        try:
            while True:
                app.update()
                time.sleep(_IDLE_SECONDS)
        except KeyboardInterrupt:
            pass
    return 0