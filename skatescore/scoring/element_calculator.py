# skatescore/scoring/element_calculator.py
"""
Element Calculator
------------------
Computes base value, GOE value and element score for one protocol row
(a single element or a jump combination).

Per part:
    bv           = 0 if invalid, else SOV base value
                   (a downgraded jump is valued one rotation lower)
    f            = 0.6   if under-rotated and edge call
                   0.75  elif V spin
                   0.8   elif under-rotated or edge call
                   1     otherwise
    bv_for_score = bv × 1.1 (bonus) × 0.7 (repeat) × f
    bv_for_goe   = round2(bv × f)          (ChSq: round2(bv))

Per element:
    goe_value   = round2(max(bv_for_goe) × GOE × 0.1)   (ChSq: round2(GOE × 0.5))
    total_bv    = round2(Σ bv_for_score)
    total_score = round2(Σ bv_for_score + goe_value)

Bonus and repeat reduce or raise only the scoring value; the GOE is always
taken from the reduced-but-unbonused value of the best part.
"""
import structlog
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from skatescore.models.element import ElementEntry, ElementPart
from skatescore.models.enumerations import ElementType, SequenceName
from skatescore.scoring.sov import ScaleOfValues, spin_code
from skatescore.scoring.utils import decimal_sum, round_score

logger = structlog.get_logger(__name__)

BONUS_FACTOR = Decimal("1.1")
REPEAT_FACTOR = Decimal("0.7")
UR_AND_EDGE_FACTOR = Decimal("0.6")
V_SPIN_FACTOR = Decimal("0.75")
UR_OR_EDGE_FACTOR = Decimal("0.8")
GOE_STEP = Decimal("0.1")
CHOREO_GOE_STEP = Decimal("0.5")

ZERO = Decimal("0")
ONE = Decimal("1")


@dataclass
class PartResult:
    """Valuation of one element part."""
    code: Optional[str]       # SOV code looked up, None when worth nothing
    base_value: Decimal       # Raw SOV base value (0 if invalid)
    bv_for_score: Decimal     # After bonus, repeat and reduction factors
    bv_for_goe: Decimal       # After reduction factor only, quantized to 0.01


@dataclass
class ElementResult:
    """Output of ElementCalculator.calculate()."""
    total_bv: Decimal         # Σ bv_for_score, quantized to 0.01
    goe: int
    goe_value: Decimal        # quantized to 0.01
    total_score: Decimal      # quantized to 0.01
    parts: List[PartResult] = field(default_factory=list)


def reduction_factor(part: ElementPart) -> Decimal:
    """Multiplier for rotation, edge and V calls on a part."""
    if part.ur and part.edge:
        return UR_AND_EDGE_FACTOR
    if part.spin_v:
        return V_SPIN_FACTOR
    if part.ur or part.edge:
        return UR_OR_EDGE_FACTOR
    return ONE


def part_code(part: ElementPart, sov: Optional[ScaleOfValues] = None) -> Optional[str]:
    """
    SOV code a part is valued at, or None for a zero-level part.

    With a table, flying change-foot spins resolve the way the table values them.
    """
    if part.type == ElementType.JUMP:
        rotations = part.rotations
        if part.dg and rotations != 0:
            rotations -= 1
        return f"{rotations}{part.name}" if rotations else None
    if part.lod == "0":
        return None
    if part.type == ElementType.SPIN:
        if sov is not None:
            return sov.resolve_spin_code(part.name, part.lod, part.fly, part.cof)
        return spin_code(part.name, part.lod, part.fly, part.cof)
    return f"{part.name}{part.lod}"


class ElementCalculator:
    """Score protocol rows against a Scale of Values."""

    def __init__(self, sov: Optional[ScaleOfValues] = None):
        if sov is None:
            from skatescore.core.dependencies import get_scale_of_values
            sov = get_scale_of_values()
        self.sov = sov

    def base_value(self, part: ElementPart) -> Decimal:
        """
        Raw base value of a part.

        Raises:
            UnknownElementError: the part's code is not in the table.
        """
        if part.invalid:
            return ZERO
        if part.type == ElementType.JUMP:
            rotations = part.rotations
            if part.dg and rotations != 0:
                rotations -= 1
            return self.sov.jump_base(part.name, rotations)
        if part.type == ElementType.SEQUENCE:
            return self.sov.sequence_base(part.name, part.lod)
        return self.sov.spin_base(part.name, part.lod, part.fly, part.cof)

    def _value_part(self, part: ElementPart, bonus: bool) -> PartResult:
        bv = self.base_value(part)
        factor = reduction_factor(part)

        bv_for_score = bv
        if bonus:
            bv_for_score *= BONUS_FACTOR
        if part.rep:
            bv_for_score *= REPEAT_FACTOR
        bv_for_score *= factor

        if part.name == SequenceName.CHOREO.value:
            bv_for_goe = round_score(bv)
        else:
            bv_for_goe = round_score(bv * factor)

        return PartResult(
            code=part_code(part, self.sov),
            base_value=bv,
            bv_for_score=bv_for_score,
            bv_for_goe=bv_for_goe,
        )

    def calculate(self, entry: ElementEntry) -> ElementResult:
        """
        Args:
            entry: Validated protocol row.

        Returns:
            ElementResult with total_bv, goe_value, total_score and per-part values.

        Raises:
            UnknownElementError: a part's code is missing from the table.

        Examples:
            >>> calc.calculate(parse_entry("3Lz+3T", goe=2)).total_score
            Decimal('11.28')
        """
        parts = [self._value_part(p, entry.bonus) for p in entry.parts]
        bv_sum = decimal_sum(p.bv_for_score for p in parts)

        goe = entry.goe
        if entry.lead.name == SequenceName.CHOREO.value:
            goe_value = round_score(goe * CHOREO_GOE_STEP)
        elif goe != 0:
            best = max(p.bv_for_goe for p in parts)
            goe_value = round_score(best * (goe * GOE_STEP))
        else:
            goe_value = ZERO.quantize(Decimal("0.01"))

        total_bv = round_score(bv_sum)
        total_score = round_score(bv_sum + goe_value)

        logger.debug(
            "element_calculated",
            codes=[p.code for p in parts],
            bonus=entry.bonus,
            goe=goe,
            total_bv=float(total_bv),
            goe_value=float(goe_value),
            total_score=float(total_score),
        )

        return ElementResult(
            total_bv=total_bv,
            goe=goe,
            goe_value=goe_value,
            total_score=total_score,
            parts=parts,
        )
