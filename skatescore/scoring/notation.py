"""
Protocol notation
skatescore/scoring/notation.py

Converts element entries to and from the text printed on judges' protocols:

    3Lz+3T          jump combination
    3Fe<            triple flip, wrong edge, under-rotated
    2A<<*           downgraded, invalid
    2S+REP          repeated jump
    FCCoSp4V        flying change-foot combination spin, V
    StSq3           step sequence level 3
    3Lz+2T  x       second-half bonus (two spaces, then x)
"""

import re
from typing import List

from pydantic import ValidationError

from skatescore.core.exceptions import NotationError
from skatescore.models.element import ElementEntry, ElementPart
from skatescore.models.enumerations import ElementType

MAX_COMBINATION_PARTS = 3
BONUS_MARK = "  x"
REPEAT_MARK = "REP"

_SEQUENCE_RE = re.compile(
    r"^(?P<name>StSq|ChSq)(?P<lod>[B1-4])?(?P<invalid>\*)?$"
)
_SPIN_RE = re.compile(
    r"^(?P<fly>F)?(?P<cof>C)?(?P<name>USp|LSp|CSp|SSp|CoSp)"
    r"(?P<lod>[B1-4])?(?P<v>V)?(?P<invalid>\*)?$"
)
_JUMP_RE = re.compile(
    r"^(?P<lod>[0-5])?(?P<name>Lz|Lo|Eu|T|S|F|A)"
    r"(?P<edge>e)?(?P<rot><<|<)?(?P<invalid>\*)?$"
)
_BONUS_RE = re.compile(r"^(?P<body>.*?)\s+x$")


def format_part(part: ElementPart) -> str:
    """Protocol text for a single part."""
    level = part.lod if part.lod != "0" else ""
    invalid = "*" if part.invalid else ""

    if part.type == ElementType.JUMP:
        out = level + part.name
        if part.edge:
            out += "e"
        if part.ur:
            out += "<"
        if part.dg:
            out += "<<"
        out += invalid
        if part.rep:
            out += "+" + REPEAT_MARK
        return out

    if part.type == ElementType.SPIN:
        prefix = ("F" if part.fly else "") + ("C" if part.cof else "")
        return prefix + part.name + level + ("V" if part.spin_v else "") + invalid

    return part.name + level + invalid


def format_entry(entry: ElementEntry) -> str:
    """Protocol text for a whole row, parts joined with '+'."""
    out = "+".join(format_part(p) for p in entry.parts)
    if entry.bonus:
        out += BONUS_MARK
    return out


def _parse_part(token: str, text: str) -> ElementPart:
    fields = None

    m = _SEQUENCE_RE.match(token)
    if m:
        fields = dict(type=ElementType.SEQUENCE, name=m["name"], lod=m["lod"] or "0")
    else:
        m = _SPIN_RE.match(token)
        if m:
            fields = dict(
                type=ElementType.SPIN,
                name=m["name"],
                lod=m["lod"] or "0",
                fly=bool(m["fly"]),
                cof=bool(m["cof"]),
                spin_v=bool(m["v"]),
            )
        else:
            m = _JUMP_RE.match(token)
            if m:
                fields = dict(
                    type=ElementType.JUMP,
                    name=m["name"],
                    lod=m["lod"] or "0",
                    edge=bool(m["edge"]),
                    ur=m["rot"] == "<",
                    dg=m["rot"] == "<<",
                )

    if fields is None:
        raise NotationError(text, f"unrecognised element {token!r}")

    try:
        return ElementPart(invalid=bool(m["invalid"]), **fields)
    except ValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else str(e)
        raise NotationError(text, reason) from e


def parse_entry(text: str, goe: int = 0) -> ElementEntry:
    """
    Parse protocol text into an ElementEntry.

    Args:
        text: Protocol notation, e.g. "3Lz<+2T  x".
        goe: Grade of Execution for the row (not part of the notation).

    Raises:
        NotationError: text is not a valid element.
        pydantic.ValidationError: goe out of range.
    """
    body = text.strip()
    bonus = False
    m = _BONUS_RE.match(body)
    if m:
        body, bonus = m["body"], True
    if not body:
        raise NotationError(text, "empty notation")

    parts: List[ElementPart] = []
    for token in body.split("+"):
        token = token.strip()
        if token == REPEAT_MARK:
            if not parts or parts[-1].type != ElementType.JUMP or parts[-1].rep:
                raise NotationError(text, "+REP must follow a jump")
            parts[-1] = parts[-1].model_copy(update={"rep": True})
            continue
        if not token:
            raise NotationError(text, "empty element between '+'")
        parts.append(_parse_part(token, text))

    if len(parts) > MAX_COMBINATION_PARTS:
        raise NotationError(text, f"at most {MAX_COMBINATION_PARTS} jumps per combination")
    if len(parts) > 1 and any(p.type != ElementType.JUMP for p in parts):
        raise NotationError(text, "only jumps can be combined")

    return ElementEntry(parts=parts, goe=goe, bonus=bonus)
