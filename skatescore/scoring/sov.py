# skatescore/scoring/sov.py
"""
Scale of Values (SOV) table
---------------------------
Read-only lookup over the ISU Scale of Values JSON document.

Document layout:
    {
      "season": "2025-26",
      "elements": {
        "3Lz":     {"base": 5.90, "goe": {"-5": -2.95, ..., "5": 2.95}},
        "FCCoSp4": {"base": 3.50, "goe": {...}},
        "ChSq1":   {"base": 3.00, "goe": {...}}
      }
    }

Element codes:
    jumps      <rotations><name>          3Lz, 2A, 1Eu
    spins      [F][C]<name><level>        FCCoSp4, CSp3, USpB
    sequences  <name><level>              StSq4, ChSq1

Numbers are parsed straight into Decimal so table values are never
touched by binary floating point.
"""
import json
import structlog
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional, Union

from skatescore.core.exceptions import (
    MissingGoeError,
    ScaleOfValuesLoadError,
    UnknownElementError,
)
from skatescore.scoring.utils import round_score

logger = structlog.get_logger(__name__)

# Jumps that come in 1..5 rotations. Euler is single-rotation only.
ROTATION_JUMPS = ("T", "S", "Lo", "F", "Lz", "A")
MAX_ROTATIONS = 5

# Protocol variants that prove a rotation count exists in the table
_ROTATION_VARIANTS = ("", "q", "<", "<<", "!")

ZERO = Decimal("0")
GOE_RANGE = range(-5, 6)


def _is_number(value) -> bool:
    return isinstance(value, (int, Decimal)) and not isinstance(value, bool)


def _entry_problem(entry) -> Optional[str]:
    """Describe what is wrong with one element entry, None if it is well formed."""
    if not isinstance(entry, dict):
        return "entry is not an object"
    if not _is_number(entry.get("base")):
        return "missing or non-numeric 'base'"
    goe = entry.get("goe", {})
    if not isinstance(goe, dict):
        return "'goe' is not an object"
    for grade, delta in goe.items():
        try:
            valid_grade = int(grade) in GOE_RANGE
        except ValueError:
            valid_grade = False
        if not valid_grade:
            return f"GOE key {grade!r} is not an integer from -5 to 5"
        if not _is_number(delta):
            return f"GOE {grade} delta is not a number"
    return None


class ScaleOfValues:
    """Base values and GOE deltas keyed by element code."""

    def __init__(self, elements: Dict[str, dict], season: Optional[str] = None):
        self._elements = elements
        self.season = season

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ScaleOfValues":
        """
        Load the SOV document from disk.

        Raises:
            ScaleOfValuesLoadError: file missing, unreadable, not JSON,
                without an "elements" mapping, or with a malformed entry
                (non-object, missing base, GOE keys outside -5..5).
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f, parse_float=Decimal)
        except (OSError, ValueError) as e:
            logger.error("sov_load_failed", path=str(path), error=str(e))
            raise ScaleOfValuesLoadError(f"Failed to load SOV data: {e}") from e

        elements = data.get("elements") if isinstance(data, dict) else None
        if not isinstance(elements, dict):
            raise ScaleOfValuesLoadError(
                f"Failed to load SOV data: {path} has no 'elements' mapping"
            )
        for code, entry in elements.items():
            problem = _entry_problem(entry)
            if problem:
                logger.error("sov_load_failed", path=str(path), code=code, error=problem)
                raise ScaleOfValuesLoadError(f"Failed to load SOV data: {code}: {problem}")

        logger.info(
            "sov_loaded",
            path=str(path),
            season=data.get("season"),
            elements=len(elements),
        )
        return cls(elements, season=data.get("season"))

    def __contains__(self, code: str) -> bool:
        return code in self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def codes(self) -> List[str]:
        """All element codes in document order."""
        return list(self._elements)

    # ------------------------------------------------------------------
    # Code lookups
    # ------------------------------------------------------------------

    def _entry(self, code: str) -> dict:
        entry = self._elements.get(code)
        if not entry:
            raise UnknownElementError(code)
        return entry

    def get_base(self, code: str) -> Decimal:
        """Base value for an element code."""
        return Decimal(str(self._entry(code)["base"]))

    def get_delta(self, code: str, goe: int) -> Decimal:
        """
        GOE point delta for an element code.

        GOE 0 is always worth nothing, so the code is not even looked up.
        """
        if goe == 0:
            return ZERO
        entry = self._entry(code)
        delta = entry.get("goe", {}).get(str(goe))
        if isinstance(delta, bool) or not isinstance(delta, (int, float, Decimal)):
            raise MissingGoeError(code, goe)
        return Decimal(str(delta))

    def get_score(self, code: str, goe: int) -> Decimal:
        """Base value plus tabulated GOE delta, rounded to hundredths."""
        return round_score(self.get_base(code) + self.get_delta(code, goe))

    def goe_table(self, code: str) -> Dict[int, Decimal]:
        """All GOE deltas for a code, keyed by GOE integer."""
        raw = self._entry(code).get("goe", {})
        return {int(k): Decimal(str(v)) for k, v in raw.items()}

    def available_rotations(self, jump: str) -> List[int]:
        """
        Rotation counts present in the table for a jump name.

        A rotation counts as available if any protocol variant of it
        (plain, q, <, <<, !) has an entry.
        """
        if jump not in ROTATION_JUMPS:
            return []
        rotations = []
        for n in range(1, MAX_ROTATIONS + 1):
            code = f"{n}{jump}"
            if any(code + suffix in self._elements for suffix in _ROTATION_VARIANTS):
                rotations.append(n)
        return rotations

    def max_rotations(self, jump: str) -> int:
        """Highest rotation count in the table for a jump, 0 if none."""
        if jump == "Eu":
            return 1 if "1Eu" in self._elements else 0
        return max(self.available_rotations(jump), default=0)

    # ------------------------------------------------------------------
    # Base value adapter: element name + level -> code -> base value
    # ------------------------------------------------------------------

    def jump_base(self, name: str, rotations: int) -> Decimal:
        """Base value of a jump; zero rotations is worth nothing."""
        if rotations == 0:
            return ZERO
        return self.get_base(f"{rotations}{name}")

    def resolve_spin_code(self, name: str, level: str, fly: bool = False, cof: bool = False) -> str:
        """
        Table code a spin is valued at.

        A flying change-foot spin uses its FC code when the table lists one
        (FCCoSp4), otherwise change of foot takes precedence (FCSSp4 -> CSSp4).
        """
        code = spin_code(name, level, fly, cof)
        if fly and cof and code not in self._elements:
            return spin_code(name, level, fly=False, cof=True)
        return code

    def spin_base(self, name: str, level: str, fly: bool = False, cof: bool = False) -> Decimal:
        """Base value of a spin with its flying / change-of-foot prefix."""
        if level == "0":
            return ZERO
        return self.get_base(self.resolve_spin_code(name, level, fly, cof))

    def sequence_base(self, name: str, level: str) -> Decimal:
        """Base value of a step or choreographic sequence."""
        if level == "0":
            return ZERO
        return self.get_base(f"{name}{level}")


def spin_code(name: str, level: str, fly: bool = False, cof: bool = False) -> str:
    """SOV code for a spin, e.g. ("CoSp", "4", fly, cof) -> "FCCoSp4"."""
    prefix = ("F" if fly else "") + ("C" if cof else "")
    return f"{prefix}{name}{level}"
