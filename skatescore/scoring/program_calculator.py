"""
scoring/program_calculator.py

Aggregates element scores and program components into segment totals.

Formula:
    TES = round2(Σ element total_score)
    PCS = round2(Σ min(component, max) × factor)
    TSS = round2(TES + PCS + deductions)

Deductions are entered as a non-positive number (e.g. -1.00 for a fall).
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

from skatescore.config import get_settings
from skatescore.models.element import ElementEntry
from skatescore.models.program import ProgramComponents
from skatescore.scoring.element_calculator import ElementCalculator, ElementResult
from skatescore.scoring.utils import clamp, decimal_sum, round_score, to_decimal

logger = logging.getLogger(__name__)


def _resolve_factor(pcs_factor: Optional[float]) -> Decimal:
    if pcs_factor is None:
        pcs_factor = get_settings().PCS_FACTOR
    return Decimal(str(pcs_factor))


@dataclass
class ProgramResult:
    """Output of ProgramCalculator.calculate()."""
    tes: Decimal                    # Technical element score, quantized to 0.01
    pcs: Decimal                    # Program component score, quantized to 0.01
    deductions: Decimal             # Non-positive, quantized to 0.01
    tss: Decimal                    # Total segment score, quantized to 0.01
    pcs_factor: Decimal
    components_used: Dict[str, Decimal] = field(default_factory=dict)  # after clamping
    elements: List[ElementResult] = field(default_factory=list)


class ProgramCalculator:
    """Calculate TES, PCS and TSS for a list of protocol rows."""

    def __init__(self, element_calculator: Optional[ElementCalculator] = None):
        self.element_calculator = element_calculator or ElementCalculator()

    def calculate_pcs(
        self,
        components: ProgramComponents,
        pcs_factor: Optional[float] = None,
    ) -> Tuple[Decimal, Dict[str, Decimal]]:
        """
        Factored program component score.

        Returns:
            (pcs_total, components_used) where components_used holds each
            mark after clamping to PCS_COMPONENT_MAX.
        """
        factor = _resolve_factor(pcs_factor)
        component_max = Decimal(str(get_settings().PCS_COMPONENT_MAX))

        used: Dict[str, Decimal] = {}
        for name, mark in components.as_dict().items():
            mark_d = Decimal(str(mark))
            if mark_d > component_max:
                logger.warning(f"{name} mark {mark_d} above maximum, clamped to {component_max}")
            used[name] = clamp(mark_d, Decimal("0"), component_max)

        pcs_total = round_score(decimal_sum(used.values()) * factor)
        return pcs_total, used

    def calculate(
        self,
        elements: Sequence[ElementEntry],
        components: Optional[ProgramComponents] = None,
        pcs_factor: Optional[float] = None,
        deductions: float = 0.0,
    ) -> ProgramResult:
        """
        Score a whole segment.

        Args:
            elements: Protocol rows in skating order.
            components: Program component marks (all zero if omitted).
            pcs_factor: Segment factor; defaults to settings.PCS_FACTOR.
            deductions: Non-positive total deductions.

        Raises:
            ValueError: deductions is positive.
            UnknownElementError: an element code is missing from the table.
        """
        if deductions > 0:
            raise ValueError("deductions must be zero or negative")

        element_results = [self.element_calculator.calculate(e) for e in elements]
        tes = round_score(decimal_sum(r.total_score for r in element_results))

        pcs_total, used = self.calculate_pcs(components or ProgramComponents(), pcs_factor)
        deduct = to_decimal(deductions)
        tss = round_score(tes + pcs_total + deduct)

        logger.info(
            "program_calculated",
            extra={
                "elements": len(element_results),
                "tes": float(tes),
                "pcs": float(pcs_total),
                "deductions": float(deduct),
                "tss": float(tss),
            },
        )

        return ProgramResult(
            tes=tes,
            pcs=pcs_total,
            deductions=deduct,
            tss=tss,
            pcs_factor=_resolve_factor(pcs_factor),
            components_used=used,
            elements=element_results,
        )
