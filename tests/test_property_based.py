# tests/test_property_based.py
"""
Property-Based Tests

Hypothesis tests over valid jump rows and component marks, covering:
  - ElementCalculator properties
  - ProgramCalculator properties
  - Notation formatting
"""

from decimal import Decimal

from hypothesis import given, settings
from hypothesis import strategies as st

from skatescore.models.element import ElementEntry, ElementPart
from skatescore.models.program import ProgramComponents
from skatescore.scoring.element_calculator import ElementCalculator
from skatescore.scoring.notation import format_entry, parse_entry
from skatescore.scoring.program_calculator import ProgramCalculator
from skatescore.scoring.sov import ScaleOfValues
from skatescore.config import DEFAULT_SOV_PATH

# Hypothesis does not mix with function-scoped fixtures
SOV = ScaleOfValues.load(DEFAULT_SOV_PATH)
CALC = ElementCalculator(SOV)

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

JUMPS = ["T", "S", "Lo", "F", "Lz", "A"]

goe_st = st.integers(min_value=-5, max_value=5)
mark_st = st.floats(min_value=0.0, max_value=12.0, allow_nan=False, allow_infinity=False)


@st.composite
def jump_part_st(draw, allow_ur=True):
    """A valid, scoreable jump part (never invalid, never worth zero)."""
    name = draw(st.sampled_from(JUMPS))
    call = draw(st.sampled_from(["clean", "ur", "dg"] if allow_ur else ["clean", "dg"]))
    rotations = draw(st.integers(min_value=2 if call == "dg" else 1, max_value=4))
    edge = name in ("F", "Lz") and draw(st.booleans())
    return ElementPart(
        type="jump",
        name=name,
        lod=str(rotations),
        ur=call == "ur",
        dg=call == "dg",
        edge=edge,
        rep=draw(st.booleans()),
    )


@st.composite
def jump_entry_st(draw):
    parts = draw(st.lists(jump_part_st(), min_size=1, max_size=3))
    return ElementEntry(parts=parts, goe=draw(goe_st), bonus=draw(st.booleans()))


@st.composite
def components_st(draw):
    return ProgramComponents(
        skating_skills=draw(mark_st),
        transitions=draw(mark_st),
        performance=draw(mark_st),
        composition=draw(mark_st),
        interpretation=draw(mark_st),
    )


def sign(value) -> int:
    return (value > 0) - (value < 0)


# ---------------------------------------------------------------------------
# Element Property Tests
# ---------------------------------------------------------------------------


class TestElementPropertyBased:
    """Property tests for ElementCalculator."""

    @given(jump_entry_st())
    @settings(max_examples=300)
    def test_goe_value_follows_goe_sign(self, entry):
        """GOE value is positive for positive GOE, negative for negative, zero for zero."""
        result = CALC.calculate(entry)
        assert sign(result.goe_value) == sign(entry.goe)

    @given(jump_entry_st())
    @settings(max_examples=300)
    def test_score_never_negative(self, entry):
        """Even at GOE -5 an element keeps a non-negative score."""
        assert CALC.calculate(entry).total_score >= Decimal("0")

    @given(jump_entry_st())
    @settings(max_examples=300)
    def test_score_is_bv_plus_goe(self, entry):
        """Element score equals base value plus GOE value within one cent."""
        result = CALC.calculate(entry)
        assert abs(result.total_score - (result.total_bv + result.goe_value)) <= Decimal("0.01")

    @given(jump_entry_st())
    @settings(max_examples=300)
    def test_deterministic(self, entry):
        """Calling calculate() twice with the same row yields the same score."""
        assert CALC.calculate(entry) == CALC.calculate(entry)

    @given(jump_part_st(allow_ur=False), goe_st, st.booleans())
    @settings(max_examples=300)
    def test_under_rotation_never_increases_score(self, part, goe, bonus):
        """Calling a clean jump under-rotated cannot raise its score."""
        clean = part.model_copy(update={"dg": False})
        called = clean.model_copy(update={"ur": True})
        clean_score = CALC.calculate(ElementEntry(parts=[clean], goe=goe, bonus=bonus)).total_score
        called_score = CALC.calculate(ElementEntry(parts=[called], goe=goe, bonus=bonus)).total_score
        assert called_score <= clean_score

    @given(jump_entry_st())
    @settings(max_examples=300)
    def test_bonus_never_decreases_score(self, entry):
        """The second-half bonus only raises the base value."""
        with_bonus = CALC.calculate(entry.model_copy(update={"bonus": True})).total_score
        without = CALC.calculate(entry.model_copy(update={"bonus": False})).total_score
        assert with_bonus >= without


# ---------------------------------------------------------------------------
# Program Property Tests
# ---------------------------------------------------------------------------


class TestProgramPropertyBased:
    """Property tests for ProgramCalculator."""

    @given(components_st())
    @settings(max_examples=300)
    def test_pcs_bounded(self, components):
        """PCS never exceeds five maxed-out marks times the factor."""
        pcs, used = ProgramCalculator(CALC).calculate_pcs(components, pcs_factor=1.67)
        assert Decimal("0") <= pcs <= Decimal("83.50")
        assert all(v <= Decimal("10") for v in used.values())

    @given(
        st.lists(jump_entry_st(), max_size=6),
        components_st(),
        st.floats(min_value=-10.0, max_value=0.0, allow_nan=False, allow_infinity=False),
    )
    @settings(max_examples=200)
    def test_tss_is_sum_of_parts(self, entries, components, deductions):
        """TSS = TES + PCS + deductions, and TES = Σ element scores."""
        result = ProgramCalculator(CALC).calculate(entries, components, 1.67, deductions)
        assert result.tes == sum((r.total_score for r in result.elements), Decimal("0"))
        assert result.tss == result.tes + result.pcs + result.deductions


# ---------------------------------------------------------------------------
# Notation Property Tests
# ---------------------------------------------------------------------------


class TestNotationPropertyBased:

    @given(jump_entry_st())
    @settings(max_examples=300)
    def test_parse_restores_formatted_row(self, entry):
        """Protocol text parses back to the row it was formatted from."""
        assert parse_entry(format_entry(entry), goe=entry.goe).model_dump() == entry.model_dump()
