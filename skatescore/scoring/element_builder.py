"""
Element Builder
skatescore/scoring/element_builder.py

Mutable draft of the protocol row being entered. Selections are made one at
a time (name, level, each call toggled on or off) and build() validates the
draft into an ElementEntry.

Toggle rules:
    - under-rotation and downgrade exclude each other; setting one clears the other
    - add_jump() starts the next jump of a combination
    - GOE and bonus belong to the whole row
"""

from dataclasses import asdict, dataclass
from typing import List, Optional

from skatescore.core.exceptions import IncompleteElementError
from skatescore.models.element import ElementEntry, ElementPart
from skatescore.models.enumerations import ElementType, JumpName
from skatescore.scoring.notation import BONUS_MARK, MAX_COMBINATION_PARTS, format_part
from skatescore.scoring.sov import ScaleOfValues


@dataclass
class PartDraft:
    """Unvalidated part selections."""
    type: Optional[ElementType] = None
    name: Optional[str] = None
    lod: str = "0"
    ur: bool = False
    dg: bool = False
    edge: bool = False
    rep: bool = False
    fly: bool = False
    cof: bool = False
    spin_v: bool = False
    invalid: bool = False


class ElementBuilder:
    """Build one ElementEntry through individual selections."""

    def __init__(self, sov: Optional[ScaleOfValues] = None):
        self.sov = sov
        self.clear()

    def clear(self) -> None:
        """Discard all selections."""
        self.parts: List[PartDraft] = [PartDraft()]
        self.goe = 0
        self.bonus = False

    @property
    def current(self) -> PartDraft:
        return self.parts[-1]

    # ------------------------------------------------------------------
    # Selections
    # ------------------------------------------------------------------

    def set_name(self, element_type: ElementType, name: str) -> "ElementBuilder":
        self.current.type = ElementType(element_type)
        self.current.name = name
        return self

    def set_lod(self, lod: str) -> "ElementBuilder":
        self.current.lod = str(lod)
        return self

    def toggle_ur(self) -> "ElementBuilder":
        self.current.ur = not self.current.ur
        self.current.dg = False
        return self

    def toggle_dg(self) -> "ElementBuilder":
        self.current.dg = not self.current.dg
        self.current.ur = False
        return self

    def toggle_edge(self) -> "ElementBuilder":
        self.current.edge = not self.current.edge
        return self

    def toggle_rep(self) -> "ElementBuilder":
        self.current.rep = not self.current.rep
        return self

    def toggle_fly(self) -> "ElementBuilder":
        self.current.fly = not self.current.fly
        return self

    def toggle_cof(self) -> "ElementBuilder":
        self.current.cof = not self.current.cof
        return self

    def toggle_spin_v(self) -> "ElementBuilder":
        self.current.spin_v = not self.current.spin_v
        return self

    def toggle_invalid(self) -> "ElementBuilder":
        self.current.invalid = not self.current.invalid
        return self

    def toggle_bonus(self) -> "ElementBuilder":
        self.bonus = not self.bonus
        return self

    def set_goe(self, goe: int) -> "ElementBuilder":
        self.goe = int(goe)
        return self

    def add_jump(self) -> "ElementBuilder":
        """Start the next jump of a combination."""
        if self.current.type != ElementType.JUMP or self.current.name is None:
            raise IncompleteElementError("Select a jump before adding another to the combination")
        if len(self.parts) >= MAX_COMBINATION_PARTS:
            raise IncompleteElementError(
                f"A combination has at most {MAX_COMBINATION_PARTS} jumps"
            )
        self.parts.append(PartDraft(type=ElementType.JUMP))
        return self

    # ------------------------------------------------------------------
    # Editing round-trip
    # ------------------------------------------------------------------

    def load(self, entry: ElementEntry) -> "ElementBuilder":
        """Replace the draft with a committed row, for editing."""
        self.parts = [PartDraft(**p.model_dump()) for p in entry.parts]
        self.goe = entry.goe
        self.bonus = entry.bonus
        return self

    def available_rotations(self) -> List[int]:
        """Rotations selectable for the current jump, 0 always included."""
        if self.sov is None or self.current.name is None:
            return [0, 1, 2, 3, 4, 5]
        if self.current.name == JumpName.EULER.value:
            return [0, 1]
        return [0] + self.sov.available_rotations(self.current.name)

    def display(self) -> str:
        """Protocol text of the draft so far (unnamed parts are skipped)."""
        named = []
        for draft in self.parts:
            if draft.name is None:
                continue
            try:
                named.append(format_part(ElementPart(**asdict(draft))))
            except ValueError:
                named.append(draft.name)
        text = "+".join(named)
        return text + BONUS_MARK if self.bonus and text else text

    def build(self) -> ElementEntry:
        """
        Validate the draft into an ElementEntry.

        Raises:
            IncompleteElementError: a part has no element selected, or a jump
                has a rotation count the Scale of Values does not list.
            pydantic.ValidationError: modifiers are inconsistent.
        """
        if any(d.type is None or d.name is None for d in self.parts):
            raise IncompleteElementError()

        parts = [ElementPart(**asdict(d)) for d in self.parts]
        if self.sov is not None:
            for part in parts:
                if (
                    part.type == ElementType.JUMP
                    and part.name != JumpName.EULER.value
                    and part.rotations
                    and part.rotations not in self.sov.available_rotations(part.name)
                ):
                    raise IncompleteElementError(
                        f"{part.lod}{part.name} is not in the Scale of Values"
                    )

        return ElementEntry(parts=parts, goe=self.goe, bonus=self.bonus)
