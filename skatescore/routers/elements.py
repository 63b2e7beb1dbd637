"""
routers/elements.py - Element scoring endpoints

Endpoints:
  POST /api/v1/elements/score   - Score a structured protocol row
  POST /api/v1/elements/parse   - Parse protocol notation, then score it
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from typing import List, Optional
import logging

from skatescore.core.dependencies import get_scale_of_values
from skatescore.models.element import ElementEntry
from skatescore.scoring.element_calculator import ElementCalculator, ElementResult
from skatescore.scoring.notation import format_entry, parse_entry
from skatescore.scoring.sov import ScaleOfValues

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/elements", tags=["Elements"])


# =====================================================================
# Request / Response Models
# =====================================================================

class NotationRow(BaseModel):
    """A protocol row given as notation text."""
    notation: str = Field(..., min_length=1, max_length=64, examples=["3Lz+3T"])
    goe: int = Field(default=0, ge=-5, le=5)


class PartResponse(BaseModel):
    code: Optional[str] = None
    base_value: float
    bv_for_score: float
    bv_for_goe: float


class ElementScoreResponse(BaseModel):
    """Scored protocol row."""
    number: Optional[int] = None
    notation: str
    total_bv: float
    goe: int
    goe_value: float
    total_score: float
    parts: List[PartResponse]


class ParseResponse(BaseModel):
    entry: ElementEntry
    score: ElementScoreResponse


# =====================================================================
# Helper
# =====================================================================

def to_response(
    entry: ElementEntry, result: ElementResult, number: Optional[int] = None
) -> ElementScoreResponse:
    return ElementScoreResponse(
        number=number,
        notation=format_entry(entry),
        total_bv=float(result.total_bv),
        goe=result.goe,
        goe_value=float(result.goe_value),
        total_score=float(result.total_score),
        parts=[
            PartResponse(
                code=p.code,
                base_value=float(p.base_value),
                bv_for_score=float(p.bv_for_score),
                bv_for_goe=float(p.bv_for_goe),
            )
            for p in result.parts
        ],
    )


# =====================================================================
# Endpoints
# =====================================================================

@router.post(
    "/score",
    response_model=ElementScoreResponse,
    summary="Score one element or jump combination",
)
async def score_element(entry: ElementEntry, sov: ScaleOfValues = Depends(get_scale_of_values)):
    result = ElementCalculator(sov).calculate(entry)
    return to_response(entry, result)


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse protocol notation and score it",
    description="""
    Accepts protocol text such as `3Lz<+2T`, `FCCoSp4V`, `StSq3` or
    `3F+2T  x` (second-half bonus) together with a GOE.
    """,
)
async def parse_element(row: NotationRow, sov: ScaleOfValues = Depends(get_scale_of_values)):
    entry = parse_entry(row.notation, goe=row.goe)
    result = ElementCalculator(sov).calculate(entry)
    logger.info(f"Parsed {row.notation!r} -> {format_entry(entry)!r}")
    return ParseResponse(entry=entry, score=to_response(entry, result))
