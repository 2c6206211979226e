"""
Packet Ingestion
================
Receives raw records from the step tracker.

The tracker's wire format is not decoded yet: ``process_packet`` logs the raw
string and appends a fixed placeholder record. Replace the body with a real
decoder once the format is known; the signature is the contract callers use.
"""

from __future__ import annotations

import logging

from fittracker.models.packet import Packet

logger = logging.getLogger(__name__)

PLACEHOLDER_PACKET = Packet(date="20250628", time="12:28:00", steps=5000)


def process_packet(packet_str: str, packets: list[Packet]) -> list[Packet]:
    """Return *packets* extended with the record decoded from *packet_str*.

    The input list is left untouched.
    """
    logger.info("Packet processed: %s", packet_str)
    return [*packets, PLACEHOLDER_PACKET.model_copy()]
