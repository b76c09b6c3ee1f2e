"""
Domain enumerations for the protection calculator.

This module contains all enumeration types used throughout the
calculator, plus simple lookup functions with no external dependencies.
"""

from enum import Enum

from domain.errors import InvalidInput


class Phase(Enum):
    """Power system phases in positive sequence order."""
    A = "A"
    B = "B"
    C = "C"


class FaultKind(Enum):
    """Families of faults handled by the fault solver."""
    THREE_PHASE = "3-Phase"
    TWO_PHASE = "2-Phase"
    PHASE_GROUND = "Phase-Ground"


class CurveFamily(Enum):
    """Time-overcurrent characteristics (IEC 60255)."""
    DEFINITE = "Definite"
    IEC_STANDARD_INVERSE = "IEC Inverse"
    IEC_VERY_INVERSE = "Very Inverse"
    IEC_EXTREMELY_INVERSE = "Extremely Inverse"


class CtConnection(Enum):
    """Current transformer secondary winding connection."""
    STAR = "Star"
    DELTA = "Delta"


class CtWarning(Enum):
    """Advisory classification of a CT secondary current."""
    MEASUREMENT_FLOOR = "Below measurement floor"
    SATURATION_RISK = "Core saturation risk"


# =============================================================================
# LOOKUP FUNCTIONS
# =============================================================================

# Phases in positive sequence order, used to rotate fault frames
PHASE_ORDER = (Phase.A, Phase.B, Phase.C)


def phase_shift(phase: Phase) -> int:
    """
    Return the position of a phase in the A-B-C sequence.

    Args:
        phase: Phase to look up.

    Returns:
        0 for A, 1 for B, 2 for C.

    Example:
        >>> phase_shift(Phase.C)
        2
    """
    return PHASE_ORDER.index(phase)


def parse_curve_family(name: str) -> CurveFamily:
    """
    Convert a curve label (as shown on relay setting sheets) to a family.

    Matching ignores case and surrounding whitespace. Both the enum value
    ('IEC Inverse') and the enum name ('IEC_STANDARD_INVERSE') are accepted.

    Raises:
        InvalidInput: If the label matches no curve family.

    Example:
        >>> parse_curve_family('very inverse')
        <CurveFamily.IEC_VERY_INVERSE: 'Very Inverse'>
    """
    key = name.strip().lower()
    for family in CurveFamily:
        if key in (family.value.lower(), family.name.lower()):
            return family
    raise InvalidInput(f"Unknown curve family: {name!r}", field="family")
