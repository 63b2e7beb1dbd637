"""
routers/programs.py - Segment scoring endpoint

Endpoints:
  POST /api/v1/programs/score   - TES, PCS and TSS for a list of rows
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Union
import logging
import time

from skatescore.core.dependencies import get_scale_of_values
from skatescore.models.element import ElementEntry
from skatescore.models.program import ProgramComponents
from skatescore.routers.elements import ElementScoreResponse, NotationRow, to_response
from skatescore.scoring.element_calculator import ElementCalculator
from skatescore.scoring.notation import parse_entry
from skatescore.scoring.program_calculator import ProgramCalculator
from skatescore.scoring.sov import ScaleOfValues

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/programs", tags=["Programs"])


# =====================================================================
# Request / Response Models
# =====================================================================

class ProgramRequest(BaseModel):
    """Rows in skating order, each structured or as notation."""
    elements: List[Union[ElementEntry, NotationRow]] = Field(default_factory=list)
    components: ProgramComponents = Field(default_factory=ProgramComponents)
    pcs_factor: Optional[float] = Field(default=None, gt=0.0, le=5.0)
    deductions: float = Field(default=0.0, le=0.0)


class ProgramScoreResponse(BaseModel):
    tes: float
    pcs: float
    deductions: float
    tss: float
    pcs_factor: float
    components: Dict[str, float]
    elements: List[ElementScoreResponse]
    duration_seconds: float


# =====================================================================
# Endpoints
# =====================================================================

@router.post(
    "/score",
    response_model=ProgramScoreResponse,
    summary="Score a whole segment",
    description="""
    TES = Σ element scores
    PCS = Σ components (each capped at 10) × factor
    TSS = TES + PCS + deductions
    """,
)
async def score_program(request: ProgramRequest, sov: ScaleOfValues = Depends(get_scale_of_values)):
    start = time.time()

    entries: List[ElementEntry] = []
    for row in request.elements:
        if isinstance(row, NotationRow):
            entries.append(parse_entry(row.notation, goe=row.goe))
        else:
            entries.append(row)

    result = ProgramCalculator(ElementCalculator(sov)).calculate(
        entries,
        components=request.components,
        pcs_factor=request.pcs_factor,
        deductions=request.deductions,
    )

    logger.info(
        f"Scored program: {len(entries)} elements, TES={result.tes} PCS={result.pcs} TSS={result.tss}"
    )

    return ProgramScoreResponse(
        tes=float(result.tes),
        pcs=float(result.pcs),
        deductions=float(result.deductions),
        tss=float(result.tss),
        pcs_factor=float(result.pcs_factor),
        components={k: float(v) for k, v in result.components_used.items()},
        elements=[
            to_response(entry, res, number=i + 1)
            for i, (entry, res) in enumerate(zip(entries, result.elements))
        ],
        duration_seconds=round(time.time() - start, 4),
    )
