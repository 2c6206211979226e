"""
Fitness Tracker Demo
====================
Processes a sample tracker packet and prints reports for three example
sessions.

Run: python -m fittracker.demo
"""

from __future__ import annotations

import logging
from datetime import timedelta

from fittracker.config import get_settings
from fittracker.models.packet import Packet
from fittracker.models.training import (
    LEN_STEP,
    SWIMMING_LEN_STEP,
    RunningSession,
    Session,
    SwimmingSession,
    WalkingSession,
)
from fittracker.services.packets import process_packet
from fittracker.services.report import read_data

logger = logging.getLogger(__name__)

SAMPLE_PACKET = "20250628 12:28:00,5000"


def example_sessions() -> list[Session]:
    return [
        SwimmingSession(
            action=2000,
            len_step=SWIMMING_LEN_STEP,
            duration=timedelta(minutes=90),
            weight=85,
            length_pool=50,
            count_pool=5,
        ),
        WalkingSession(
            action=20000,
            len_step=LEN_STEP,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
            height=185,
        ),
        RunningSession(
            action=5000,
            len_step=LEN_STEP,
            duration=timedelta(minutes=30),
            weight=85,
        ),
    ]


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    # Buffered tracker records; only counted until a real decoder consumes them.
    packets: list[Packet] = []
    packets = process_packet(SAMPLE_PACKET, packets)
    logger.debug("%d packet(s) buffered", len(packets))

    print("Processing packet:")
    for session in example_sessions():
        print(read_data(session))


if __name__ == "__main__":
    main()
