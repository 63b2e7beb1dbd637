"""
Program Sheet
skatescore/scoring/program_sheet.py

The ordered protocol of one segment: committed rows plus the builder for the
row currently being entered or edited.
"""

from dataclasses import dataclass
from typing import List, Optional

from skatescore.models.element import ElementEntry
from skatescore.models.program import ProgramComponents
from skatescore.scoring.element_builder import ElementBuilder
from skatescore.scoring.element_calculator import ElementCalculator, ElementResult
from skatescore.scoring.notation import format_entry
from skatescore.scoring.program_calculator import ProgramCalculator, ProgramResult


@dataclass
class SheetRow:
    """One protocol line."""
    number: int               # 1-based position in skating order
    notation: str
    result: ElementResult


class ProgramSheet:
    """Ordered element rows with add / edit / delete / reorder."""

    def __init__(self, calculator: Optional[ElementCalculator] = None):
        self.calculator = calculator or ElementCalculator()
        self.builder = ElementBuilder(self.calculator.sov)
        self.elements: List[ElementEntry] = []
        self.editing_index: Optional[int] = None

    def __len__(self) -> int:
        return len(self.elements)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.elements):
            raise IndexError(f"No element at row {index + 1}")

    def commit(self) -> ElementEntry:
        """
        Build the current draft and store it: replaces the row being edited,
        otherwise appends. The builder is cleared afterwards.
        """
        entry = self.builder.build()
        # Score before storing so an unknown code never lands in the sheet
        self.calculator.calculate(entry)

        if self.editing_index is not None:
            self.elements[self.editing_index] = entry
        else:
            self.elements.append(entry)

        self.clear_entry()
        return entry

    def add(self, entry: ElementEntry) -> None:
        """Append an already-built row."""
        self.calculator.calculate(entry)
        self.elements.append(entry)

    def edit(self, index: int) -> ElementBuilder:
        """Load row `index` into the builder; the next commit() replaces it."""
        self._check_index(index)
        self.builder.load(self.elements[index].model_copy(deep=True))
        self.editing_index = index
        return self.builder

    def clear_entry(self) -> None:
        """Drop the draft and leave edit mode."""
        self.builder.clear()
        self.editing_index = None

    def remove(self, index: int) -> ElementEntry:
        self._check_index(index)
        if self.editing_index is not None:
            self.clear_entry()
        return self.elements.pop(index)

    def move(self, src: int, dst: int) -> None:
        """Move row `src` so it ends up at position `dst`."""
        self._check_index(src)
        self._check_index(dst)
        if src == dst:
            return
        row = self.elements.pop(src)
        self.elements.insert(dst, row)

    def rows(self) -> List[SheetRow]:
        return [
            SheetRow(number=i + 1, notation=format_entry(e), result=self.calculator.calculate(e))
            for i, e in enumerate(self.elements)
        ]

    def score(
        self,
        components: Optional[ProgramComponents] = None,
        pcs_factor: Optional[float] = None,
        deductions: float = 0.0,
    ) -> ProgramResult:
        return ProgramCalculator(self.calculator).calculate(
            self.elements, components, pcs_factor, deductions
        )
