"""
Packet Schemas
==============
A single record received from the step tracker.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Packet(BaseModel):
    date: str = Field(..., description="Date in YYYYMMDD format.")
    time: str = Field(..., description="Time in HH:MM:SS format.")
    steps: int = Field(..., ge=0)
