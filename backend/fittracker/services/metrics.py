"""
Metrics Service
===============
Derives distance, mean speed and calories for a training session.

Every operation dispatches over the closed set of session variants
(Running, Walking, Swimming). All of them are pure and total: any formula
whose denominator could be zero returns 0 instead.

Formulas:
    distance   = action * len_step / 1000            (running, walking)
               = length_pool * count_pool / 1000     (swimming)
    mean speed = distance / duration_hours
    calories   = (18 * speed + 1.79) * weight / 1000 * duration_minutes          (running)
               = (0.035 * weight + speed**2 / height_m * 0.029 * weight)
                 * duration_minutes                                               (walking)
               = (speed + 1.1) * 2 * weight * duration_hours                      (swimming)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fittracker.models.training import (
    RunningSession,
    Session,
    SwimmingSession,
    TrainingInfo,
    WalkingSession,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FormulaConstants:
    """Unit conversions and empirical coefficients used by the formulas."""

    m_in_km: int = 1000
    min_in_hours: int = 60
    cm_in_m: int = 100

    # running
    calories_mean_speed_multiplier: float = 18
    calories_mean_speed_shift: float = 1.79

    # walking
    calories_weight_multiplier: float = 0.035
    calories_speed_height_multiplier: float = 0.029

    # swimming
    swimming_calories_mean_speed_shift: float = 1.1
    swimming_calories_weight_multiplier: float = 2


DEFAULT_CONSTANTS = FormulaConstants()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _minutes(session: Session) -> float:
    return session.duration.total_seconds() / 60


def _hours(session: Session, constants: FormulaConstants) -> float:
    return _minutes(session) / constants.min_in_hours


def _unsupported(session: object) -> TypeError:
    return TypeError(f"Unsupported training session: {type(session).__name__}")


def step_distance(action: int, len_step: float, constants: FormulaConstants = DEFAULT_CONSTANTS) -> float:
    """Kilometres covered by *action* steps or strokes of *len_step* metres."""
    return action * len_step / constants.m_in_km


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def distance(session: Session, constants: FormulaConstants = DEFAULT_CONSTANTS) -> float:
    """Distance in kilometres."""
    if isinstance(session, (RunningSession, WalkingSession)):
        return step_distance(session.action, session.len_step, constants)
    if isinstance(session, SwimmingSession):
        return session.length_pool * session.count_pool / constants.m_in_km
    raise _unsupported(session)


def mean_speed(session: Session, constants: FormulaConstants = DEFAULT_CONSTANTS) -> float:
    """Mean speed in km/h over the whole session."""
    hours = _hours(session, constants)
    if hours == 0:
        return 0.0
    if isinstance(session, SwimmingSession) and (session.length_pool == 0 or session.count_pool == 0):
        return 0.0
    return distance(session, constants) / hours


def calories(session: Session, constants: FormulaConstants = DEFAULT_CONSTANTS) -> float:
    """Kilocalories burned, using the formula for the session's kind."""
    minutes = _minutes(session)
    if minutes == 0:
        return 0.0

    speed = mean_speed(session, constants)

    if isinstance(session, RunningSession):
        return (
            (constants.calories_mean_speed_multiplier * speed + constants.calories_mean_speed_shift)
            * session.weight / constants.m_in_km * minutes
        )

    if isinstance(session, WalkingSession):
        if session.height == 0:
            return 0.0
        height_m = session.height / constants.cm_in_m
        return (
            constants.calories_weight_multiplier * session.weight
            + (speed ** 2 / height_m) * constants.calories_speed_height_multiplier * session.weight
        ) * minutes

    if isinstance(session, SwimmingSession):
        return (
            (speed + constants.swimming_calories_mean_speed_shift)
            * constants.swimming_calories_weight_multiplier
            * session.weight
            * _hours(session, constants)
        )

    raise _unsupported(session)


def training_info(session: Session, constants: FormulaConstants = DEFAULT_CONSTANTS) -> TrainingInfo:
    """Compute every derived metric for *session*."""
    info = TrainingInfo(
        training_type=session.kind,
        duration=session.duration,
        distance=distance(session, constants),
        speed=mean_speed(session, constants),
        calories=calories(session, constants),
    )
    logger.debug(
        "%s: distance=%.3f km speed=%.3f km/h calories=%.3f kcal",
        info.training_type.value, info.distance, info.speed, info.calories,
    )
    return info
