"""
Fault level study across all fault kinds.

Runs the symmetrical-components solver once per fault kind and collects
the largest phase current of each study into an immutable FaultCurrents
container. The result feeds reach factor and selectivity checks.

Main workflow:
1. Solve three-phase, phase-to-phase (B-C) and phase-to-ground (A) faults
2. Take the maximum phase current magnitude of each study
3. Optionally repeat the earth fault with a fault impedance for a
   minimum fault level

Functions:
    fault_levels: Maximum phase current for each fault kind
    min_fault_levels: Fault levels with an earth fault resistance applied
"""

import dataclasses
import logging
from typing import Dict

import domain as dd
from fault_study.symmetrical_components import solve_fault

# One representative fault per fault kind
STUDY_CONFIGS = (
    dd.ThreePhase(),
    dd.PhaseToPhase((dd.Phase.B, dd.Phase.C)),
    dd.SinglePhaseToGround(dd.Phase.A),
)


def fault_study(network: dd.NetworkParameters) -> Dict[dd.FaultKind, dd.PhaseQuantities]:
    """
    Solve one fault of each kind on the network.

    Returns:
        Dictionary of FaultKind: PhaseQuantities.
    """
    return {fault.kind: solve_fault(network, fault) for fault in STUDY_CONFIGS}


def fault_levels(network: dd.NetworkParameters) -> dd.FaultCurrents:
    """
    Calculate the fault level for each fault kind.

    Args:
        network: Equivalent network seen from the fault point.

    Returns:
        FaultCurrents holding the maximum phase current (A) of each study.

    Example:
        >>> fc = fault_levels(network)
        >>> print(fc)
        FaultCurrents(3ph=1132A, 2ph=980A, pg=679A)
    """
    results = fault_study(network)
    currents = dd.FaultCurrents(
        three_phase=results[dd.FaultKind.THREE_PHASE].max_current,
        two_phase=results[dd.FaultKind.TWO_PHASE].max_current,
        phase_ground=results[dd.FaultKind.PHASE_GROUND].max_current,
    )
    logging.info(f"Fault levels at {network.line_voltage_rms:.0f}V: {currents}")
    return currents


def min_fault_levels(
    network: dd.NetworkParameters,
    earth_fault_resistance: float
) -> dd.FaultCurrents:
    """
    Calculate fault levels with a resistive earth fault.

    Phase faults use the network's own fault resistance. The
    phase-to-ground study replaces it with ``earth_fault_resistance``,
    giving the minimum earth fault level used for reach checks.

    Raises:
        InvalidInput: If earth_fault_resistance is negative.
    """
    phase_levels = fault_levels(network)
    earth_network = dataclasses.replace(
        network, fault_resistance=earth_fault_resistance
    )
    earth_fault = solve_fault(earth_network, dd.SinglePhaseToGround(dd.Phase.A))

    return dd.FaultCurrents(
        three_phase=phase_levels.three_phase,
        two_phase=phase_levels.two_phase,
        phase_ground=earth_fault.max_current,
    )
