"""
routers/sov.py - Scale of Values lookups

Endpoints:
  GET /api/v1/sov                           - Season and element codes
  GET /api/v1/sov/elements/{code}           - Base value and GOE table for one code
  GET /api/v1/sov/elements/{code}/score     - Base + tabulated GOE delta
  GET /api/v1/sov/rotations/{jump}          - Rotation counts available for a jump
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from typing import Dict, List, Optional

from skatescore.core.dependencies import get_scale_of_values
from skatescore.scoring.sov import ScaleOfValues

router = APIRouter(prefix="/sov", tags=["Scale of Values"])


# =====================================================================
# Response Models
# =====================================================================

class SovSummaryResponse(BaseModel):
    season: Optional[str] = None
    element_count: int
    codes: List[str]


class SovElementResponse(BaseModel):
    code: str
    base: float
    goe: Dict[int, float]


class SovScoreResponse(BaseModel):
    code: str
    goe: int
    base: float
    delta: float
    score: float


class RotationsResponse(BaseModel):
    jump: str
    rotations: List[int]


# =====================================================================
# Endpoints
# =====================================================================

@router.get("", response_model=SovSummaryResponse, summary="Scale of Values summary")
async def get_sov_summary(sov: ScaleOfValues = Depends(get_scale_of_values)):
    codes = sov.codes()
    return SovSummaryResponse(season=sov.season, element_count=len(codes), codes=codes)


@router.get(
    "/elements/{code}",
    response_model=SovElementResponse,
    summary="Base value and GOE deltas for an element code",
)
async def get_sov_element(code: str, sov: ScaleOfValues = Depends(get_scale_of_values)):
    base = sov.get_base(code)
    return SovElementResponse(
        code=code,
        base=float(base),
        goe={g: float(d) for g, d in sorted(sov.goe_table(code).items())},
    )


@router.get(
    "/elements/{code}/score",
    response_model=SovScoreResponse,
    summary="Element score from the tabulated GOE delta",
)
async def get_sov_score(
    code: str,
    goe: int = Query(0, ge=-5, le=5, description="Grade of Execution"),
    sov: ScaleOfValues = Depends(get_scale_of_values),
):
    return SovScoreResponse(
        code=code,
        goe=goe,
        base=float(sov.get_base(code)),
        delta=float(sov.get_delta(code, goe)),
        score=float(sov.get_score(code, goe)),
    )


@router.get(
    "/rotations/{jump}",
    response_model=RotationsResponse,
    summary="Rotation counts listed for a jump",
)
async def get_rotations(jump: str, sov: ScaleOfValues = Depends(get_scale_of_values)):
    return RotationsResponse(jump=jump, rotations=sov.available_rotations(jump))
