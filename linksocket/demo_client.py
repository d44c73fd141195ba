"""Demo client that pings the server once a second and counts the pongs."""

from __future__ import annotations

import argparse
import contextlib
import ipaddress
import logging
import time
from typing import Any

from linksocket.client.packet import Packet
from linksocket.client.udp import IpAddress, Socket
from linksocket.config import SocketConfig
from linksocket.clock import Timer
from linksocket.demo import PING_MSG, PONG_MSG, get_server_address, get_shared_config
from linksocket.errors import ClientSocketError

logger = logging.getLogger(__name__)

MAX_PINGS = 10
_PING_INTERVAL_SECONDS = 1.0
_IDLE_SECONDS = 0.001


class ClientApp:
    """Pings the server whenever the timer rings and nothing has arrived."""

    def __init__(
        self,
        server_address: tuple[Any, ...] | None = None,
        config: SocketConfig | None = None,
        local_ip: IpAddress | None = None,
    ) -> None:
        logger.info("Client socket demo started")
        self._stack = contextlib.ExitStack()
        self._socket = self._stack.enter_context(
            Socket(config if config is not None else get_shared_config(), local_ip)
        )
        self._socket.connect(server_address if server_address is not None else get_server_address())
        self._sender = self._socket.packet_sender()
        self._receiver = self._socket.packet_receiver()
        self.message_count = 0
        self.timer = Timer(_PING_INTERVAL_SECONDS)

    def update(self) -> None:
        """Handle one incoming packet, or send a ping if the timer rings."""
        try:
            packet = self._receiver.receive()
        except ClientSocketError as err:
            logger.info("Client Error: %s", err)
            return
        if packet is not None:
            message = packet.payload.decode("utf-8", errors="replace")
            logger.info("Client recv: %s", message)
            if message == PONG_MSG:
                self.message_count += 1
        elif self.timer.ringing():
            self.timer.reset()
            if self.message_count < MAX_PINGS:
                logger.info("Client send: %s", PING_MSG)
                self._sender.send(Packet(PING_MSG.encode()))

    def close(self) -> None:
        """Close the underlying socket."""
        self._stack.close()

    def __enter__(self) -> ClientApp:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _server_address(text: str) -> tuple[str, int]:
    host, sep, port = text.rpartition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected HOST:PORT, got {text!r}")
    host = host.strip("[]")
    try:
        ip = ipaddress.ip_address(host)
        port_number = int(port)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid address {text!r}") from err
    if not 0 < port_number < 65536:
        raise argparse.ArgumentTypeError(f"port out of range in {text!r}")
    return str(ip), port_number


def _local_ip(text: str) -> IpAddress:
    try:
        return ipaddress.ip_address(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid IP address {text!r}") from err


def main(argv: list[str] | None = None) -> int:
    """Run the demo client until interrupted."""
    host, port = get_server_address()
    parser = argparse.ArgumentParser(
        prog="linksocket-demo-client", description="Ping the demo server."
    )
    parser.add_argument(
        "--server", type=_server_address, default=(host, port), help="server HOST:PORT"
    )
    parser.add_argument(
        "--local-ip", type=_local_ip, default=None, help="local IP address to bind"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    with ClientApp(args.server, local_ip=args.local_ip) as app:
        try:
            while True:
                app.update()
                time.sleep(_IDLE_SECONDS)
        except KeyboardInterrupt:
            pass
    return 0