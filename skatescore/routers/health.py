"""
Health Check Router - Skate Score Calculator
skatescore/routers/health.py

Reports whether the Scale of Values document can be loaded.
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

from skatescore.config import get_settings
from skatescore.core.dependencies import get_scale_of_values
from skatescore.core.exceptions import ScaleOfValuesLoadError

router = APIRouter(tags=["Health"])



#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]



#  Dependency Health Checks


def check_sov() -> str:
    """Check the Scale of Values document."""
    try:
        sov = get_scale_of_values()
        return f"healthy (season: {sov.season}, elements: {len(sov)})"
    except ScaleOfValuesLoadError as e:
        return f"unhealthy: {e}"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "All dependencies healthy"},
        503: {"description": "Scale of Values unavailable"},
    },
    summary="Health check",
    description="Check that the Scale of Values is loaded.",
)
async def health_check():
    """Check health of all dependencies."""
    dependencies = {"sov": check_sov()}

    all_healthy = all(v.startswith("healthy") for v in dependencies.values())

    response = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=get_settings().APP_VERSION,
        dependencies=dependencies,
    )

    if all_healthy:
        return response
    else:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump(mode="json"),
        )
