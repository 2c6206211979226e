"""
Reports Router
==============
POST /api/v1/reports       : Render the text report for one session.
GET  /api/v1/reports/kinds : List the supported training kinds.

An unknown training kind is not an error: the endpoint answers 200 with the
"unknown training type" sentinel as the report and no metrics, so clients
can display the text as-is. Malformed counters (negative steps, zero weight)
are rejected by Pydantic with 422.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from fittracker.models.training import TrainingKind, TrainingRecord
from fittracker.services.metrics import training_info
from fittracker.services.report import UNKNOWN_TRAINING_TYPE, build_session, render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class ReportRequest(TrainingRecord):
    """Raw session counters plus the training kind label."""

    kind: str = Field(..., description="Training kind label; unrecognised labels yield the sentinel report.")


class MetricsSummary(BaseModel):
    duration_minutes: float
    distance_km: float
    mean_speed_kmh: float
    calories: float


class ReportResponse(BaseModel):
    training_type: Optional[TrainingKind] = Field(
        default=None,
        description="Recognised training kind, or null for an unknown kind.",
    )
    report: str
    metrics: Optional[MetricsSummary] = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get(
    "/kinds",
    summary="List supported training kinds",
)
async def list_kinds() -> list[str]:
    return [kind.value for kind in TrainingKind]


@router.post(
    "",
    response_model=ReportResponse,
    status_code=status.HTTP_200_OK,
    summary="Render a training report",
    responses={
        200: {"description": "Report rendered (or the unknown-type sentinel)"},
        422: {"description": "Validation error (negative counters, missing fields, etc.)"},
    },
)
async def create_report(body: ReportRequest) -> ReportResponse:
    """Compute the metrics for one session and render the text report."""
    session = build_session(body.kind, body)
    if session is None:
        logger.info("Report requested for unknown training type %r", body.kind)
        return ReportResponse(report=UNKNOWN_TRAINING_TYPE)

    info = training_info(session)
    return ReportResponse(
        training_type=info.training_type,
        report=render(info),
        metrics=MetricsSummary(
            duration_minutes=info.duration_minutes,
            distance_km=info.distance,
            mean_speed_kmh=info.speed,
            calories=info.calories,
        ),
    )
