"""
Score figure-skating elements or a whole segment from the command line.

Usage:
    python -m skatescore.scripts.score_program --element "3Lz+3T" --goe 2
    python -m skatescore.scripts.score_program --element "FCCoSp4" --element "StSq3" --goe 1
    python -m skatescore.scripts.score_program program.json
    python -m skatescore.scripts.score_program program.json --sov ./isu_sov_2026_27.json

Program file:
    {
      "elements": [
        {"notation": "3Lz+3T", "goe": 2},
        {"parts": [{"type": "spin", "name": "CoSp", "lod": "4", "fly": true, "cof": true}], "goe": 1}
      ],
      "components": {"skating_skills": 8.5, "transitions": 8.25, "performance": 8.5,
                     "composition": 8.75, "interpretation": 8.5},
      "pcs_factor": 1.67,
      "deductions": -1.0
    }
"""

import argparse
import json
import logging
import sys
from typing import List

from pydantic import ValidationError

logging.basicConfig(level=logging.INFO, format='%(asctime)s | %(levelname)-8s | %(message)s', datefmt='%H:%M:%S')
logger = logging.getLogger(__name__)


def load_rows(raw_rows: list, default_goe: int = 0):
    """Protocol rows from JSON: {"notation", "goe"} or a structured entry."""
    from skatescore.models.element import ElementEntry
    from skatescore.scoring.notation import parse_entry

    entries = []
    for row in raw_rows:
        if isinstance(row, str):
            entries.append(parse_entry(row, goe=default_goe))
        elif "notation" in row:
            entries.append(parse_entry(row["notation"], goe=row.get("goe", default_goe)))
        else:
            entries.append(ElementEntry.model_validate(row))
    return entries


def print_protocol(sheet, result) -> None:
    """Print the protocol table and segment totals."""
    print()
    print(f"{'#':>3}  {'Element':<22} {'BV':>6} {'GOE':>4} {'GOE pts':>8} {'Score':>7}")
    print("─" * 56)
    for row in sheet.rows():
        r = row.result
        goe = f"{r.goe:+d}" if r.goe else "0"
        print(
            f"{row.number:>3}  {row.notation:<22} {r.total_bv:>6} {goe:>4} "
            f"{r.goe_value:>8} {r.total_score:>7}"
        )
    print("─" * 56)
    print(f"{'TES':<10}{result.tes:>10}")
    print(f"{'PCS':<10}{result.pcs:>10}   (factor {result.pcs_factor})")
    if result.deductions:
        print(f"{'Deduct.':<10}{result.deductions:>10}")
    print(f"{'TSS':<10}{result.tss:>10}")
    print()


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Score figure-skating elements")
    parser.add_argument("program", nargs="?", help="Program JSON file")
    parser.add_argument("--element", action="append", default=[],
                        help="Element notation, e.g. 3Lz+3T (repeatable)")
    parser.add_argument("--goe", type=int, default=0, help="GOE applied to --element rows")
    parser.add_argument("--sov", default=None, help="Scale of Values JSON (default: bundled season)")
    parser.add_argument("--pcs-factor", type=float, default=None, help="Program component factor")
    parser.add_argument("--deductions", type=float, default=None, help="Total deductions (<= 0)")
    args = parser.parse_args(argv)

    if not args.program and not args.element:
        parser.error("give a program file or at least one --element")

    from skatescore.config import get_settings
    from skatescore.core.logging_config import configure_logging
    from skatescore.core.exceptions import ScoringException
    from skatescore.models.program import ProgramComponents
    from skatescore.scoring.element_calculator import ElementCalculator
    from skatescore.scoring.program_sheet import ProgramSheet
    from skatescore.scoring.sov import ScaleOfValues

    configure_logging()

    try:
        sov = ScaleOfValues.load(args.sov or get_settings().SOV_PATH)
        sheet = ProgramSheet(ElementCalculator(sov))

        program = {}
        if args.program:
            with open(args.program, encoding="utf-8") as f:
                program = json.load(f)
            logger.info(f"Loaded program from {args.program}")

        for entry in load_rows(program.get("elements", []) + args.element, default_goe=args.goe):
            sheet.add(entry)

        components = ProgramComponents.model_validate(program.get("components", {}))
        pcs_factor = args.pcs_factor if args.pcs_factor is not None else program.get("pcs_factor")
        deductions = args.deductions if args.deductions is not None else program.get("deductions", 0.0)

        result = sheet.score(components, pcs_factor, deductions)
    except (ScoringException, ValidationError, ValueError, OSError) as e:
        logger.error(f"Scoring failed: {e}")
        return 1

    print_protocol(sheet, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
