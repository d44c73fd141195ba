"""Monotonic points in time and a timer that rings after a set duration."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(order=True)
class Instant:
    """A moment on the monotonic clock, measured in seconds."""

    seconds: float

    @classmethod
    def now(cls) -> Instant:
        """Return the current moment."""
        return cls(time.monotonic())

    def elapsed(self) -> float:
        """Seconds passed since this moment, never negative."""
        return max(0.0, time.monotonic() - self.seconds)

    def until(self) -> float:
        """Seconds left until this moment, never negative."""
        return max(0.0, self.seconds - time.monotonic())

    def add_millis(self, millis: int) -> None:
        """Move this moment later by the given number of milliseconds."""
        if millis < 0:
            raise ValueError(f"millis must not be negative, got {millis}")
        self.seconds += millis / 1000


class Timer:
    """Rings once its duration (in seconds) has passed since the last reset."""

    def __init__(self, duration: float) -> None:
        if duration < 0:
            raise ValueError(f"duration must not be negative, got {duration}")
        self.duration = duration
        self._last = time.monotonic()

    def reset(self) -> None:
        """Stop ringing and start waiting for the full duration again."""
        self._last = time.monotonic()

    def ringing(self) -> bool:
        """Whether more than the duration has passed since the last reset."""
        return max(0.0, time.monotonic() - self._last) > self.duration

    def ring_manual(self) -> None:
        """Push the last reset back by one duration so the timer rings."""
        self._last -= self.duration