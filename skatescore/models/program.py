from pydantic import BaseModel, Field
from typing import Dict

from skatescore.models.enumerations import ProgramComponent


class ProgramComponents(BaseModel):
    """
    Program component marks. Marks above the component maximum are
    clamped when the program is scored.
    """

    skating_skills: float = Field(default=0.0, ge=0.0, description="Skating skills")
    transitions: float = Field(default=0.0, ge=0.0, description="Transitions")
    performance: float = Field(default=0.0, ge=0.0, description="Performance")
    composition: float = Field(default=0.0, ge=0.0, description="Composition")
    interpretation: float = Field(default=0.0, ge=0.0, description="Interpretation of the music")

    def as_dict(self) -> Dict[str, float]:
        """Marks keyed by component name, in protocol order."""
        return {c.value: getattr(self, c.value) for c in ProgramComponent}
