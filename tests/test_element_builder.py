# tests/test_element_builder.py

"""
Element Builder and Program Sheet Tests - entry drafting, editing, reordering
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from skatescore.core.exceptions import IncompleteElementError, UnknownElementError
from skatescore.models.enumerations import ElementType
from skatescore.models.program import ProgramComponents
from skatescore.scoring.element_builder import ElementBuilder
from skatescore.scoring.element_calculator import ElementCalculator
from skatescore.scoring.notation import parse_entry
from skatescore.scoring.program_sheet import ProgramSheet
from skatescore.scoring.sov import ScaleOfValues


@pytest.fixture
def builder(sov):
    return ElementBuilder(sov)


@pytest.fixture
def sheet(calc):
    return ProgramSheet(calc)


def enter(sheet: ProgramSheet, text: str, goe: int = 0) -> None:
    """Type a row into the sheet's builder and commit it."""
    entry = parse_entry(text, goe=goe)
    sheet.builder.load(entry)
    sheet.commit()


# =============================================================================
# BUILDER
# =============================================================================

class TestBuilderToggles:

    def test_under_rotation_clears_downgrade(self, builder):
        builder.set_name(ElementType.JUMP, "A").set_lod("3").toggle_dg().toggle_ur()
        assert builder.current.ur is True
        assert builder.current.dg is False

    def test_downgrade_clears_under_rotation(self, builder):
        builder.set_name(ElementType.JUMP, "A").set_lod("3").toggle_ur().toggle_dg()
        assert builder.current.dg is True
        assert builder.current.ur is False

    def test_toggle_twice_is_off(self, builder):
        builder.set_name(ElementType.JUMP, "Lz").toggle_edge().toggle_edge()
        assert builder.current.edge is False

    def test_bonus_and_goe_belong_to_row(self, builder):
        builder.set_name(ElementType.JUMP, "Lz").set_lod("3").toggle_bonus().set_goe(3)
        builder.add_jump().set_name(ElementType.JUMP, "T").set_lod("3")
        entry = builder.build()
        assert entry.bonus is True
        assert entry.goe == 3
        assert len(entry.parts) == 2


class TestBuilderBuild:

    def test_build_single_jump(self, builder):
        entry = builder.set_name("jump", "F").set_lod("3").toggle_edge().build()
        assert entry.parts[0].edge is True
        assert entry.parts[0].type == ElementType.JUMP

    def test_build_without_name(self, builder):
        with pytest.raises(IncompleteElementError):
            builder.build()

    def test_unnamed_combination_part(self, builder):
        builder.set_name("jump", "Lz").set_lod("3").add_jump()
        with pytest.raises(IncompleteElementError):
            builder.build()

    def test_add_jump_needs_jump(self, builder):
        with pytest.raises(IncompleteElementError):
            builder.add_jump()
        builder.set_name("spin", "CSp").set_lod("3")
        with pytest.raises(IncompleteElementError):
            builder.add_jump()

    def test_combination_limit(self, builder):
        builder.set_name("jump", "T").set_lod("2")
        builder.add_jump().set_name("jump", "T").set_lod("2")
        builder.add_jump().set_name("jump", "T").set_lod("2")
        with pytest.raises(IncompleteElementError):
            builder.add_jump()

    def test_rotation_not_in_table(self, builder):
        builder.set_name("jump", "A").set_lod("5")
        with pytest.raises(IncompleteElementError):
            builder.build()

    def test_edge_on_axel_rejected(self, builder):
        builder.set_name("jump", "A").set_lod("2").toggle_edge()
        with pytest.raises(ValidationError):
            builder.build()

    def test_v_without_prefix_rejected(self, builder):
        builder.set_name("spin", "CSp").set_lod("3").toggle_spin_v()
        with pytest.raises(ValidationError):
            builder.build()

    def test_available_rotations(self, builder):
        builder.set_name("jump", "A")
        assert builder.available_rotations() == [0, 1, 2, 3, 4]
        builder.set_name("jump", "Eu")
        assert builder.available_rotations() == [0, 1]


class TestBuilderDisplay:

    def test_empty(self, builder):
        assert builder.display() == ""

    def test_combination_in_progress(self, builder):
        builder.set_name("jump", "Lz").set_lod("3").add_jump()
        assert builder.display() == "3Lz"
        builder.set_name("jump", "T").set_lod("3").toggle_bonus()
        assert builder.display() == "3Lz+3T  x"

    def test_load_round_trip(self, builder):
        entry = parse_entry("FCCoSp4V", goe=-1)
        assert builder.load(entry).build().model_dump() == entry.model_dump()
        assert builder.display() == "FCCoSp4V"

    def test_clear(self, builder):
        builder.set_name("jump", "Lz").set_goe(2).toggle_bonus().clear()
        assert builder.display() == ""
        assert builder.goe == 0
        assert builder.bonus is False


# =============================================================================
# PROGRAM SHEET
# =============================================================================

class TestProgramSheet:

    def test_commit_appends_and_clears(self, sheet):
        sheet.builder.set_name("jump", "Lz").set_lod("3").set_goe(1)
        sheet.commit()
        assert len(sheet) == 1
        assert sheet.builder.display() == ""

    def test_rows(self, sheet):
        enter(sheet, "3Lz+3T", goe=2)
        enter(sheet, "StSq4", goe=4)
        rows = sheet.rows()
        assert [r.number for r in rows] == [1, 2]
        assert [r.notation for r in rows] == ["3Lz+3T", "StSq4"]
        assert rows[0].result.total_score == Decimal("11.28")

    def test_edit_replaces_row(self, sheet):
        enter(sheet, "3Lz", goe=0)
        enter(sheet, "3F", goe=0)
        sheet.edit(0).set_goe(2)
        sheet.commit()
        assert len(sheet) == 2
        assert sheet.elements[0].goe == 2
        assert sheet.editing_index is None

    def test_edit_does_not_touch_row_until_commit(self, sheet):
        enter(sheet, "3Lz", goe=0)
        sheet.edit(0).set_goe(4)
        assert sheet.elements[0].goe == 0

    def test_remove(self, sheet):
        enter(sheet, "3Lz")
        enter(sheet, "3F")
        removed = sheet.remove(0)
        assert removed.parts[0].name == "Lz"
        assert [r.notation for r in sheet.rows()] == ["3F"]

    def test_remove_out_of_range(self, sheet):
        with pytest.raises(IndexError):
            sheet.remove(0)

    def test_move(self, sheet):
        for text in ("3Lz", "3F", "3Lo"):
            enter(sheet, text)
        sheet.move(0, 2)
        assert [r.notation for r in sheet.rows()] == ["3F", "3Lo", "3Lz"]
        sheet.move(2, 0)
        assert [r.notation for r in sheet.rows()] == ["3Lz", "3F", "3Lo"]

    def test_unknown_code_never_stored(self, write_sov):
        table = ScaleOfValues.load(write_sov({"elements": {"LSp4": {"base": 2.7, "goe": {}}}}))
        sheet = ProgramSheet(ElementCalculator(table))
        sheet.builder.set_name("spin", "LSp").set_lod("4").toggle_fly().toggle_cof()
        with pytest.raises(UnknownElementError):
            sheet.commit()
        assert len(sheet) == 0

    def test_flying_change_foot_spin_committed(self, sheet):
        sheet.builder.set_name("spin", "SSp").set_lod("4").toggle_fly().toggle_cof().set_goe(1)
        sheet.commit()
        row = sheet.rows()[0]
        assert row.notation == "FCSSp4"
        assert row.result.total_score == Decimal("3.30")

    def test_score(self, sheet):
        enter(sheet, "3Lz+3T", goe=2)
        enter(sheet, "FCCoSp4", goe=3)
        enter(sheet, "StSq4", goe=4)
        marks = ProgramComponents(
            skating_skills=8.0, transitions=8.0, performance=8.0,
            composition=8.0, interpretation=8.0,
        )
        result = sheet.score(marks, pcs_factor=1.67, deductions=-1.0)
        assert result.tes == Decimal("21.29")
        assert result.tss == Decimal("87.09")
