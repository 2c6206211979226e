"""
Report Service
==============
Turns a training session into the fixed-template text report.

Unknown training kinds are not an error: ``format_report`` returns the
``UNKNOWN_TRAINING_TYPE`` sentinel without computing any metrics, and
callers are expected to pass that string through unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional

from fittracker.models.training import (
    RunningSession,
    Session,
    SwimmingSession,
    TrainingInfo,
    TrainingKind,
    TrainingRecord,
    WalkingSession,
)
from fittracker.services.metrics import training_info

logger = logging.getLogger(__name__)

UNKNOWN_TRAINING_TYPE = "unknown training type\n"

REPORT_TEMPLATE = (
    "Training type: {training_type}\n"
    "Duration: {duration:.2f} min\n"
    "Distance: {distance:.2f} km.\n"
    "Mean speed: {speed:.2f} km/h\n"
    "Calories burned: {calories:.2f}\n"
)


def render(info: TrainingInfo) -> str:
    return REPORT_TEMPLATE.format(
        training_type=info.training_type.value,
        duration=info.duration_minutes,
        distance=info.distance,
        speed=info.speed,
        calories=info.calories,
    )


def read_data(session: Session) -> str:
    """Compute the metrics for *session* and render them."""
    return render(training_info(session))


def parse_kind(kind: str) -> Optional[TrainingKind]:
    """Match *kind* against the known labels, ignoring case and padding."""
    wanted = kind.strip().lower()
    for candidate in TrainingKind:
        if candidate.value.lower() == wanted:
            return candidate
    return None


def build_session(kind: str, record: TrainingRecord) -> Optional[Session]:
    """Build the session variant for *kind* from raw counters.

    Returns None when *kind* is not a known training type.
    """
    training_kind = parse_kind(kind)
    if training_kind is None:
        return None

    common = {
        "action": record.action,
        "duration": record.duration,
        "weight": record.weight,
    }
    if training_kind is TrainingKind.RUNNING:
        return RunningSession(**common)
    if training_kind is TrainingKind.WALKING:
        return WalkingSession(**common, height=record.height)
    if training_kind is TrainingKind.SWIMMING:
        return SwimmingSession(
            **common,
            length_pool=record.length_pool,
            count_pool=record.count_pool,
        )
    raise TypeError(f"No session variant for training kind {training_kind!r}")


def format_report(kind: str, record: TrainingRecord) -> str:
    """Render the report for one session, or the unknown-type sentinel."""
    session = build_session(kind, record)
    if session is None:
        logger.info("Unknown training type %r, returning sentinel report", kind)
        return UNKNOWN_TRAINING_TYPE
    return read_data(session)
