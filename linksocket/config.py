"""Configuration shared by client and server sockets."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_RTC_PATH = "new_rtc_session"


@dataclass
class LinkConditionerConfig:
    """Simulated incoming network conditions.

    Latency and jitter are in milliseconds; jitter may be added to or
    subtracted from the latency. Loss is the chance, from 0 to 1, that an
    incoming packet is dropped.
    """

    incoming_latency: int
    incoming_jitter: int
    incoming_loss: float

    def __post_init__(self) -> None:
        if self.incoming_latency < 0:
            raise ValueError("incoming_latency must not be negative")
        if self.incoming_jitter < 0:
            raise ValueError("incoming_jitter must not be negative")

    @classmethod
    def good_condition(cls) -> LinkConditionerConfig:
        """A connection in good condition."""
        return cls(incoming_latency=50, incoming_jitter=10, incoming_loss=0.01)

    @classmethod
    def average_condition(cls) -> LinkConditionerConfig:
        """A connection in average condition."""
        return cls(incoming_latency=200, incoming_jitter=20, incoming_loss=0.055)

    @classmethod
    def poor_condition(cls) -> LinkConditionerConfig:
        """A connection in poor condition."""
        return cls(incoming_latency=350, incoming_jitter=30, incoming_loss=0.1)


@dataclass
class SocketConfig:
    """Settings shared by server and client sockets.

    Passing None for the endpoint path selects the default path.
    """

    link_condition_config: LinkConditionerConfig | None = None
    rtc_endpoint_path: str | None = DEFAULT_RTC_PATH

    def __post_init__(self) -> None:
        if self.rtc_endpoint_path is None:
            self.rtc_endpoint_path = DEFAULT_RTC_PATH