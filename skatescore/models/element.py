from pydantic import BaseModel, Field, model_validator
from typing import List

from skatescore.models.enumerations import (
    EDGE_JUMPS,
    ELEMENT_NAMES,
    SINGLE_LEVEL_ELEMENTS,
    ElementType,
)

JUMP_LEVELS = ("0", "1", "2", "3", "4", "5")
SPIN_SEQUENCE_LEVELS = ("0", "B", "1", "2", "3", "4")


class ElementPart(BaseModel):
    """
    One jump, spin or sequence. Jump combinations hold several parts.
    """

    type: ElementType = Field(
        ...,
        description="Element family (jump, spin, seq)"
    )

    name: str = Field(
        ...,
        description="Element name, e.g. Lz, CoSp, StSq"
    )

    lod: str = Field(
        default="0",
        description="Rotations for jumps (0-5), level for spins and sequences (0, B, 1-4)"
    )

    ur: bool = Field(default=False, description="Under-rotated (<)")
    dg: bool = Field(default=False, description="Downgraded (<<)")
    edge: bool = Field(default=False, description="Wrong take-off edge (e)")
    rep: bool = Field(default=False, description="Repeated jump (+REP)")
    fly: bool = Field(default=False, description="Flying entry (F prefix)")
    cof: bool = Field(default=False, description="Change of foot (C prefix)")
    spin_v: bool = Field(default=False, description="V spin (V suffix)")
    invalid: bool = Field(default=False, description="Invalid element (*)")

    @model_validator(mode="after")
    def validate_modifiers(self):
        """Reject modifier combinations no protocol can contain."""
        if self.name not in ELEMENT_NAMES[self.type]:
            raise ValueError(f"{self.name!r} is not a {self.type.value} element")

        levels = JUMP_LEVELS if self.type == ElementType.JUMP else SPIN_SEQUENCE_LEVELS
        if self.lod not in levels:
            raise ValueError(f"lod {self.lod!r} is not valid for a {self.type.value}")

        if self.name in SINGLE_LEVEL_ELEMENTS and self.lod not in ("0", "1"):
            raise ValueError(f"{self.name} only has level 1")

        if self.type != ElementType.JUMP and (self.ur or self.dg or self.edge or self.rep):
            raise ValueError("ur, dg, edge and rep apply to jumps only")
        if self.ur and self.dg:
            raise ValueError("A jump cannot be both under-rotated and downgraded")
        if self.edge and self.name not in EDGE_JUMPS:
            raise ValueError(f"Edge calls apply to {' and '.join(EDGE_JUMPS)} only")

        if self.type != ElementType.SPIN and (self.fly or self.cof or self.spin_v):
            raise ValueError("fly, cof and spin_v apply to spins only")
        if self.spin_v and not (self.fly or self.cof):
            raise ValueError("V applies to flying or change-of-foot spins only")
        return self

    @property
    def rotations(self) -> int:
        """Jump rotation count (0 for spins and sequences)."""
        return int(self.lod) if self.type == ElementType.JUMP else 0


class ElementEntry(BaseModel):
    """
    A protocol row: one element or a jump combination, with its GOE.
    """

    parts: List[ElementPart] = Field(
        ...,
        min_length=1,
        max_length=3,
        description="Element parts; more than one only for jump combinations"
    )

    goe: int = Field(
        default=0,
        ge=-5,
        le=5,
        description="Grade of Execution"
    )

    bonus: bool = Field(
        default=False,
        description="Second-half bonus (x), applied to every part"
    )

    @model_validator(mode="after")
    def validate_combination(self):
        """Only jumps can be combined."""
        if len(self.parts) > 1 and any(p.type != ElementType.JUMP for p in self.parts):
            raise ValueError("Only jumps can be combined into one element")
        return self

    @property
    def is_combination(self) -> bool:
        return len(self.parts) > 1

    @property
    def lead(self) -> ElementPart:
        """First part; carries the element's family for GOE purposes."""
        return self.parts[0]
