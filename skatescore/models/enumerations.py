from enum import Enum

class ElementType(str, Enum):
    JUMP = "jump"
    SPIN = "spin"
    SEQUENCE = "seq"

class JumpName(str, Enum):
    TOE_LOOP = "T"
    SALCHOW = "S"
    LOOP = "Lo"
    FLIP = "F"
    LUTZ = "Lz"
    AXEL = "A"
    EULER = "Eu"

class SpinName(str, Enum):
    UPRIGHT = "USp"
    LAYBACK = "LSp"
    CAMEL = "CSp"
    SIT = "SSp"
    COMBINATION = "CoSp"

class SequenceName(str, Enum):
    STEP = "StSq"
    CHOREO = "ChSq"

class ProgramComponent(str, Enum):
    SKATING_SKILLS = "skating_skills"
    TRANSITIONS = "transitions"
    PERFORMANCE = "performance"
    COMPOSITION = "composition"
    INTERPRETATION = "interpretation"


ELEMENT_NAMES = {
    ElementType.JUMP: tuple(n.value for n in JumpName),
    ElementType.SPIN: tuple(n.value for n in SpinName),
    ElementType.SEQUENCE: tuple(n.value for n in SequenceName),
}

# Jumps whose take-off edge can be called
EDGE_JUMPS = (JumpName.FLIP.value, JumpName.LUTZ.value)

# Elements that are only ever performed at level / rotation 1
SINGLE_LEVEL_ELEMENTS = (SequenceName.CHOREO.value, JumpName.EULER.value)
