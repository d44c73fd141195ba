"""Discovery of this host's own IP address."""

from __future__ import annotations

import ipaddress
import socket
from typing import Optional, Union

IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

# A documentation-range address: connecting a UDP socket only picks a route
# and the local interface for it; nothing is sent.
_PROBE_ADDRESS = ("192.0.2.1", 80)


def _parse(host: str) -> Optional[IpAddress]:
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


def find_my_ip_address() -> Optional[IpAddress]:
    """Return the local IP address used for outgoing traffic, if one is found."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
            probe.connect(_PROBE_ADDRESS)
            host = probe.getsockname()[0]
    except OSError:
        return None
    return _parse(host)