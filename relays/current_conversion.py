"""
Current conversion utilities for relay analysis.

This module provides functions to convert solved fault currents to the
values seen by different relay measurement types (phase, 3I0, I2, etc.).

Functions:
    sequence_components: Decompose phase currents into I0, I1, I2
    get_measured_current: Current seen by a measurement type
    convert_to_i2: Negative sequence current magnitude
    convert_to_i0: Zero sequence current magnitude
"""

from typing import Tuple

import domain as dd
from domain.phasor import A, A2, Phasor


def sequence_components(
    ia: Phasor,
    ib: Phasor,
    ic: Phasor
) -> Tuple[Phasor, Phasor, Phasor]:
    """
    Decompose three phase phasors into symmetrical components.

    Theory:
        I0 = (Ia + Ib + Ic) / 3
        I1 = (Ia + a·Ib + a²·Ic) / 3
        I2 = (Ia + a²·Ib + a·Ic) / 3
        where a = e^(j120°)

    Returns:
        (I0, I1, I2) referred to phase A.

    Example:
        >>> pq = solve_fault(network, dd.SinglePhaseToGround())
        >>> i0, i1, i2 = sequence_components(*pq.currents)
        >>> abs(i0.magnitude - i1.magnitude) < 1e-9
        True
    """
    i0 = (ia + ib + ic).scale(1 / 3)
    i1 = (ia + ib * A + ic * A2).scale(1 / 3)
    i2 = (ia + ib * A2 + ic * A).scale(1 / 3)
    return i0, i1, i2


def get_measured_current(measure_type: str, quantities: dd.PhaseQuantities) -> float:
    """
    Calculate the current seen by a relay element for a solved fault.

    Different relay measurement types see different currents for the
    same fault. This function converts the phase currents to what the
    element's measurement type would see.

    Args:
        measure_type: Relay measurement type (see mapping below).
        quantities: Solved fault phase quantities.

    Returns:
        Current magnitude in Amperes as seen by the measurement type.

    Measurement Type Mapping:
        - '3ph', 'd3m': Largest phase current
        - '3I0', 'S3I0': 3x zero sequence (earth) current
        - 'I0': Zero sequence current
        - '1ph': Phase A current
        - 'I2': Negative sequence current
        - '3I2': 3x negative sequence current

    Example:
        >>> current = get_measured_current('3I0', earth_fault)
    """
    if measure_type in ['3ph', 'd3m']:
        # 3-Phase current measurement
        return quantities.max_current

    elif measure_type in ['3I0', 'S3I0']:
        # Earth current & sensitive earth current (3I0)
        return convert_to_i0(quantities, threei0=True)

    elif measure_type in ['I0']:
        return convert_to_i0(quantities, threei0=False)

    elif measure_type in ['1ph']:
        # Single phase element connected to phase A
        return quantities.ia.magnitude

    elif measure_type in ['I2']:
        # Negative sequence current
        return convert_to_i2(quantities, threei2=False)

    elif measure_type in ['3I2']:
        # 3x negative sequence current
        return convert_to_i2(quantities, threei2=True)

    else:
        raise dd.InvalidInput(
            f"Unknown measurement type: {measure_type!r}",
            field="measure_type"
        )


def convert_to_i2(quantities: dd.PhaseQuantities, threei2: bool = False) -> float:
    """
    Return the negative sequence current (I2, or 3·I2) magnitude.

    Balanced three-phase faults return 0 to within rounding.
    """
    _, _, i2 = sequence_components(*quantities.currents)
    return 3 * i2.magnitude if threei2 else i2.magnitude


def convert_to_i0(quantities: dd.PhaseQuantities, threei0: bool = False) -> float:
    """
    Return the zero sequence current (I0, or 3·I0) magnitude.

    Theory:
        For a single-phase-to-ground fault: Ia=If, Ib=0, Ic=0
        I0 = (Ia + Ib + Ic) / 3 = If / 3
        3I0 = If (the neutral/earth current)
    """
    i0, _, _ = sequence_components(*quantities.currents)
    return 3 * i0.magnitude if threei0 else i0.magnitude
