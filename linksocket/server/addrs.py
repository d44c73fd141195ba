"""Addresses a server socket listens on."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ServerAddrs:
    """The session listen address, the data listen address and the public data address."""

    session_listen_addr: tuple[str, int]
    webrtc_listen_addr: tuple[str, int]
    public_webrtc_addr: tuple[str, int]

    @classmethod
    def default(cls) -> ServerAddrs:
        """Local addresses on the standard ports."""
        return cls(
            session_listen_addr=("127.0.0.1", 14191),
            webrtc_listen_addr=("127.0.0.1", 14192),
            public_webrtc_addr=("127.0.0.1", 14192),
        )