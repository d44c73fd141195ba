"""Settings shared by the demo client and server."""

from __future__ import annotations

from linksocket.config import LinkConditionerConfig, SocketConfig

PING_MSG = "ping"
PONG_MSG = "pong"


def get_server_address() -> tuple[str, int]:
    """The address the demo server listens on and the client connects to."""
    return ("127.0.0.1", 14191)


def get_shared_config() -> SocketConfig:
    """Socket settings for the demo: an average-quality simulated link."""
    return SocketConfig(LinkConditionerConfig.average_condition(), None)