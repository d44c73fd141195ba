"""Simulated network conditions applied to incoming packets."""

from __future__ import annotations

import logging
from typing import TypeVar

from linksocket import randomness
from linksocket.clock import Instant
from linksocket.config import LinkConditionerConfig
from linksocket.time_queue import TimeQueue

logger = logging.getLogger(__name__)

T = TypeVar("T")


def process_packet(
    config: LinkConditionerConfig, time_queue: TimeQueue[T], packet: T
) -> bool:
    """Drop the packet or queue it at a delayed time, as the config dictates.

    Returns True if the packet was queued, False if it was lost.
    """
    if randomness.gen_range_f32(0.0, 1.0) <= config.incoming_loss:
        logger.info("link conditioner: packet lost")
        return False
    latency = config.incoming_latency
    if config.incoming_jitter > 0:
        offset = randomness.gen_range_u32(0, config.incoming_jitter)
        if randomness.gen_bool():
            latency += offset
        else:
            latency = max(0, latency - offset)
    timestamp = Instant.now()
    timestamp.add_millis(latency)
    time_queue.add_item(timestamp, packet)
    return True