"""
FastAPI wrapper for the schedule generator.

Provides HTTP endpoints for generating date schedules from schedule terms.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError
from typing import Optional, Dict, List, Any
import json
import logging
from pathlib import Path

# Import backend (installed as editable package)
from schedgen import __version__
from schedgen.core.day_count import DayCountConvention
from schedgen.core.errors import ScheduleError
from schedgen.reporting import generate_schedule_report
from schedgen.terms.schema import ScheduleTerms, build_schedule

logger = logging.getLogger(__name__)

EXAMPLE_TERMS_PATH = Path(__file__).parent.parent / "backend" / "examples" / "semiannual_coupons.json"


app = FastAPI(
    title="Schedule Generator API",
    description="API for generating rule-driven cash-flow date schedules",
    version=__version__,
)

# CORS for UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==============================================================================
# Request/Response Models
# ==============================================================================

class ScheduleRequest(BaseModel):
    """Request body for /schedule endpoint."""
    terms: Dict[str, Any]
    day_count: Optional[DayCountConvention] = Field(
        default=None,
        description="Add accrual fractions with this day count"
    )


class PeriodResponse(BaseModel):
    """Single schedule period."""
    index: int
    start: str
    end: str
    days: int
    year_fraction: Optional[float] = None


class ScheduleResponse(BaseModel):
    """Response from /schedule endpoint."""
    schedule_id: str
    names: List[str]
    dates: Dict[str, List[str]]
    periods: List[PeriodResponse]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


# ==============================================================================
# Endpoints
# ==============================================================================

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/schema")
async def get_example_terms():
    """Get example schedule terms."""
    if not EXAMPLE_TERMS_PATH.exists():
        raise HTTPException(status_code=404, detail="Example terms not found")

    with open(EXAMPLE_TERMS_PATH) as f:
        return json.load(f)


@app.post("/schedule", response_model=ScheduleResponse)
async def generate_schedule(request: ScheduleRequest):
    """
    Generate a schedule.

    Returns the named date series and the periods they were generated from.
    """
    try:
        terms = ScheduleTerms(**request.terms)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid schedule terms: {str(e)}"
        )

    try:
        result = build_schedule(terms)
    except ScheduleError as e:
        logger.info("Rejected schedule %s: %s", terms.schedule_id, e)
        raise HTTPException(
            status_code=400,
            detail=f"{type(e).__name__}: {str(e)}"
        )

    report = generate_schedule_report(result, terms.schedule_id, request.day_count)

    return ScheduleResponse(
        schedule_id=terms.schedule_id,
        names=result.names,
        dates=result.to_dict()["dates"],
        periods=[
            PeriodResponse(
                index=row.index,
                start=row.period_start.isoformat(),
                end=row.period_end.isoformat(),
                days=row.days,
                year_fraction=row.year_fraction,
            )
            for row in report.rows
        ],
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
