"""
Fault result containers for the protection calculator.

This module provides immutable containers for fault solver output,
ensuring results cannot be modified once computed. Results are always
recomputed in full when an input changes.

Classes:
    PhaseQuantities: Per-phase current and voltage phasors at the fault
    FaultCurrents: Fault current magnitudes for each fault kind
"""

from dataclasses import dataclass
from typing import Tuple

from domain.phasor import Phasor


@dataclass(frozen=True)
class PhaseQuantities:
    """
    Immutable per-phase fault currents and fault-point voltages.

    All values are primary quantities: currents in Amperes, voltages in
    Volts (phase to neutral).

    Attributes:
        ia, ib, ic: Phase currents.
        ua, ub, uc: Phase voltages at the fault point.

    Properties:
        currents: (ia, ib, ic) tuple.
        voltages: (ua, ub, uc) tuple.
        max_current: Largest phase current magnitude.

    Example:
        >>> pq = solve_fault(network, ThreePhase())
        >>> print(f"{pq.ia.magnitude:.0f}A")
        1132A
        >>> pq.ia = Phasor(0, 0)  # Raises FrozenInstanceError
    """

    ia: Phasor
    ib: Phasor
    ic: Phasor
    ua: Phasor
    ub: Phasor
    uc: Phasor

    @property
    def currents(self) -> Tuple[Phasor, Phasor, Phasor]:
        return self.ia, self.ib, self.ic

    @property
    def voltages(self) -> Tuple[Phasor, Phasor, Phasor]:
        return self.ua, self.ub, self.uc

    @property
    def max_current(self) -> float:
        """Return the largest phase current magnitude."""
        return max(i.magnitude for i in self.currents)


@dataclass(frozen=True)
class FaultCurrents:
    """
    Immutable container for fault current magnitudes at a location.

    All values are in Amperes (primary) and refer to the maximum phase
    current for each fault kind.

    Attributes:
        three_phase: Three-phase symmetrical fault current (A).
        two_phase: Two-phase fault current (A).
        phase_ground: Phase-to-ground fault current (A).

    Properties:
        max_phase: Maximum of three-phase and two-phase currents.
        min_fault: Smallest current of the three fault kinds.

    Example:
        >>> fc = FaultCurrents(
        ...     three_phase=1132,
        ...     two_phase=980,
        ...     phase_ground=594
        ... )
        >>> print(fc.max_phase)
        1132
    """

    three_phase: float
    two_phase: float
    phase_ground: float

    @property
    def max_phase(self) -> float:
        """Return the maximum of three-phase and two-phase fault currents."""
        return max(self.three_phase, self.two_phase)

    @property
    def min_fault(self) -> float:
        """Return the smallest fault current of all fault kinds."""
        return min(self.three_phase, self.two_phase, self.phase_ground)

    def __repr__(self) -> str:
        """Return string representation with formatted current values."""
        return (
            f"FaultCurrents(3ph={self.three_phase:.0f}A, "
            f"2ph={self.two_phase:.0f}A, "
            f"pg={self.phase_ground:.0f}A)"
        )
