"""
Fitness Tracker API
===================
FastAPI application entry point. Mount routers here.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fittracker.config import get_settings
from fittracker.routers import reports

settings = get_settings()

app = FastAPI(
    title="Fitness Tracker API",
    description="Distance, speed and calorie reports for running, walking and swimming",
    version="0.1.0",
    docs_url="/api/docs" if settings.environment != "production" else None,
    redoc_url="/api/redoc" if settings.environment != "production" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reports.router)


@app.get("/api/v1/health")
async def health_check() -> dict:
    return {"status": "ok", "service": "fittracker-api"}
