"""
Training Schemas
================
Pydantic models for training sessions and the metrics derived from them.

A session is a tagged variant over ``TrainingKind``: each variant carries only
the fields its formulas need, and ``Session`` is the discriminated union of the
three.
"""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Per-action distance constants (metres)
# ---------------------------------------------------------------------------

LEN_STEP = 0.65  # average step for running and walking
SWIMMING_LEN_STEP = 1.38  # average stroke; swimming distance uses pool geometry instead

# Largest whole-minute duration a timedelta can hold.
MAX_DURATION_MINUTES = timedelta.max.days * 24 * 60


class TrainingKind(str, Enum):
    RUNNING = "Running"
    WALKING = "Walking"
    SWIMMING = "Swimming"


# ---------------------------------------------------------------------------
# Session variants
# ---------------------------------------------------------------------------

class _SessionBase(BaseModel):
    """Fields shared by every kind of training session."""

    model_config = ConfigDict(frozen=True)

    action: int = Field(..., ge=0, description="Steps or strokes performed.")
    len_step: float = Field(default=LEN_STEP, gt=0, allow_inf_nan=False, description="Metres per action.")
    duration: timedelta = Field(..., ge=timedelta(0))
    weight: float = Field(..., gt=0, allow_inf_nan=False, description="Body weight in kilograms.")


class RunningSession(_SessionBase):
    kind: Literal[TrainingKind.RUNNING] = TrainingKind.RUNNING


class WalkingSession(_SessionBase):
    kind: Literal[TrainingKind.WALKING] = TrainingKind.WALKING
    height: float = Field(..., ge=0, allow_inf_nan=False, description="Height in centimetres.")


class SwimmingSession(_SessionBase):
    kind: Literal[TrainingKind.SWIMMING] = TrainingKind.SWIMMING
    len_step: float = Field(default=SWIMMING_LEN_STEP, gt=0, allow_inf_nan=False)
    length_pool: int = Field(..., ge=0, description="Pool length in metres.")
    count_pool: int = Field(..., ge=0, description="Number of pool lengths swum.")


Session = Annotated[
    Union[RunningSession, WalkingSession, SwimmingSession],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Raw input
# ---------------------------------------------------------------------------

class TrainingRecord(BaseModel):
    """Kind-agnostic counters as they arrive from a tracker or a client.

    Fields a given kind does not use are ignored when the session is built.
    """

    action: int = Field(..., ge=0)
    duration_minutes: float = Field(..., ge=0, le=MAX_DURATION_MINUTES, allow_inf_nan=False)
    weight: float = Field(..., gt=0, allow_inf_nan=False)
    height: float = Field(default=0, ge=0, allow_inf_nan=False)
    length_pool: int = Field(default=0, ge=0)
    count_pool: int = Field(default=0, ge=0)

    @property
    def duration(self) -> timedelta:
        return timedelta(minutes=self.duration_minutes)


# ---------------------------------------------------------------------------
# Derived metrics
# ---------------------------------------------------------------------------

class TrainingInfo(BaseModel):
    """Metrics computed for one session, ready to be rendered."""

    model_config = ConfigDict(frozen=True)

    training_type: TrainingKind
    duration: timedelta
    distance: float = Field(..., description="Kilometres.")
    speed: float = Field(..., description="Mean speed in km/h.")
    calories: float = Field(..., description="Kilocalories burned.")

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60
