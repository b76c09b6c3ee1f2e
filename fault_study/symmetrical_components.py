"""
Symmetrical-components fault solver.

Computes the phase currents and fault-point phase voltages for a single
fault on a Thevenin equivalent network. Each fault kind connects the
sequence networks differently:

- Three-phase: positive sequence network only
- Phase-to-phase: positive and negative networks in parallel, I2 = -I1
- Phase-to-ground: all three networks in series, I0 = I1 = I2

Every branch is solved in a frame whose reference is the phase that
makes the fault symmetrical (the faulted phase for phase-to-ground, the
healthy phase for phase-to-phase). The frame reference voltage is that
phase's own pre-fault voltage, so results stay in the A-referenced frame
once mapped back onto phases A, B and C.

Functions:
    solve_fault: Solve a fault and return the phase quantities
    phase_voltage: Nominal phase-to-neutral voltage magnitude
"""

import logging
import math
from typing import Tuple

from calc_config import ZERO_MAGNITUDE_TOLERANCE
import domain as dd
from domain.phasor import A, A2, Phasor, ZERO

# Rotation from phase A into the frame of phase A, B or C
_FRAME_ROTATION = (Phasor(1.0, 0.0), A2, A)

# (reference, lagging, leading) quantities in a solver frame
_Frame = Tuple[Phasor, Phasor, Phasor]


def phase_voltage(line_voltage_rms: float) -> float:
    """Return the phase-to-neutral voltage for a line voltage."""
    return line_voltage_rms / math.sqrt(3)


def solve_fault(
    network: dd.NetworkParameters,
    fault_type: dd.FaultType
) -> dd.PhaseQuantities:
    """
    Calculate phase currents and voltages for a fault.

    Args:
        network: Equivalent network seen from the fault point.
        fault_type: ThreePhase, PhaseToPhase or SinglePhaseToGround.

    Returns:
        PhaseQuantities with primary currents (A) and fault-point phase
        voltages (V). Angles are referred to the pre-fault phase A voltage.

    Raises:
        DivisionByZero: If the fault loop impedance has zero magnitude.
        TypeError: If fault_type is not a fault type variant.

    Example:
        >>> network = dd.NetworkParameters(
        ...     10000, dd.Phasor(1, 5), dd.Phasor(3, 15)
        ... )
        >>> pq = solve_fault(network, dd.ThreePhase())
        >>> print(f"{pq.ia.magnitude:.0f}A at {pq.ia.angle_degrees:.1f}")
        1132A at -78.7
    """
    va = Phasor(phase_voltage(network.line_voltage_rms), 0.0)

    if isinstance(fault_type, dd.ThreePhase):
        shift = 0
        currents, voltages = _three_phase(network, va)
    elif isinstance(fault_type, dd.SinglePhaseToGround):
        shift = dd.phase_shift(fault_type.phase)
        reference = va * _FRAME_ROTATION[shift]
        currents, voltages = _single_phase_to_ground(network, reference)
    elif isinstance(fault_type, dd.PhaseToPhase):
        shift = dd.phase_shift(fault_type.healthy_phase)
        reference = va * _FRAME_ROTATION[shift]
        currents, voltages = _phase_to_phase(network, reference)
    else:
        raise TypeError(f"{fault_type!r}: Unhandled fault type")

    ia, ib, ic = _to_phases(currents, shift)
    ua, ub, uc = _to_phases(voltages, shift)

    logging.debug(
        f"{fault_type.code} fault at {network.line_voltage_rms:.0f}V: "
        f"Ia={ia}, Ib={ib}, Ic={ic}"
    )
    return dd.PhaseQuantities(ia=ia, ib=ib, ic=ic, ua=ua, ub=ub, uc=uc)


# =============================================================================
# FAULT BRANCHES
# =============================================================================

def _three_phase(
    network: dd.NetworkParameters,
    va: Phasor
) -> Tuple[_Frame, _Frame]:
    """Balanced fault: only positive sequence current flows."""
    z1 = network.positive_seq_impedance
    rf = Phasor(network.fault_resistance)

    ia = _loop_current(va, z1 + rf, "Three-phase", "positive_seq_impedance")
    ua = va - ia * z1

    return (ia, ia * A2, ia * A), (ua, ua * A2, ua * A)


def _single_phase_to_ground(
    network: dd.NetworkParameters,
    va: Phasor
) -> Tuple[_Frame, _Frame]:
    """Sequence networks in series: I0 = I1 = I2."""
    z1 = network.positive_seq_impedance
    z2 = network.negative_seq_impedance
    z0 = network.zero_seq_impedance
    rf3 = Phasor(3 * network.fault_resistance)

    i012 = _loop_current(va, z1 + z2 + z0 + rf3, "Phase-ground", None)

    # Neutral displacement shifts both healthy phases
    vn = -(i012 * z0)
    voltages = (i012 * rf3, va * A2 + vn, va * A + vn)

    return (i012 * 3, ZERO, ZERO), voltages


def _phase_to_phase(
    network: dd.NetworkParameters,
    va: Phasor
) -> Tuple[_Frame, _Frame]:
    """Positive and negative networks in parallel: I2 = -I1, no I0."""
    z1 = network.positive_seq_impedance
    z2 = network.negative_seq_impedance
    rf = Phasor(network.fault_resistance)

    i1 = _loop_current(va, z1 + z2 + rf, "Phase-phase", "positive_seq_impedance")
    i2 = -i1

    ib = i1 * A2 + i2 * A
    ic = i1 * A + i2 * A2

    # Faulted phases collapse towards each other; the healthy phase holds
    voltages = (va, va * A2 - ib * z1, va * A - ic * z1)

    return (ZERO, ib, ic), voltages


# =============================================================================
# HELPERS
# =============================================================================

def _loop_current(
    voltage: Phasor,
    loop_impedance: Phasor,
    description: str,
    field
) -> Phasor:
    """Divide the driving voltage by the fault loop impedance."""
    if loop_impedance.magnitude <= ZERO_MAGNITUDE_TOLERANCE:
        raise dd.DivisionByZero(
            f"{description} fault loop impedance is zero", field=field
        )
    return voltage / loop_impedance


def _to_phases(frame: _Frame, shift: int) -> _Frame:
    """Map (reference, lagging, leading) frame values back onto A, B, C."""
    phases = [ZERO, ZERO, ZERO]
    for k, value in enumerate(frame):
        phases[(shift + k) % 3] = value
    return phases[0], phases[1], phases[2]
