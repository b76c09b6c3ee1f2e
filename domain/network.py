"""
Network and fault scenario models for the fault solver.

The network is reduced to a single Thevenin equivalent seen from the
fault point. The fault type is a closed set of variants, each carrying
the phases it involves.

Classes:
    NetworkParameters: Equivalent source impedances and fault resistance
    ThreePhase: Balanced three-phase fault
    PhaseToPhase: Fault between two phases (no earth)
    SinglePhaseToGround: Fault from one phase to earth

Functions:
    parse_fault_code: Convert a fault code ('ABC', 'BC', 'AN') to a variant
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from domain.enums import FaultKind, Phase, PHASE_ORDER
from domain.errors import InvalidInput
from domain.phasor import Phasor


@dataclass(frozen=True)
class NetworkParameters:
    """
    Thevenin equivalent source as seen from the fault point.

    Positive and negative sequence impedances are assumed equal (Z2 = Z1),
    the usual simplification for static plant. The zero sequence
    impedance is supplied by the caller and is never derived from Z1.

    Attributes:
        line_voltage_rms: Nominal line-to-line voltage (V).
        positive_seq_impedance: Z1 (Ω).
        zero_seq_impedance: Z0 (Ω).
        fault_resistance: Fault resistance Rf (Ω).

    Raises:
        InvalidInput: If any value is NaN or infinite, the voltage is not
            positive, or a resistance (Z1, Z0 or Rf) is negative.

    Example:
        >>> network = NetworkParameters(
        ...     line_voltage_rms=10000,
        ...     positive_seq_impedance=Phasor(1, 5),
        ...     zero_seq_impedance=Phasor(3, 15),
        ... )
    """

    line_voltage_rms: float
    positive_seq_impedance: Phasor
    zero_seq_impedance: Phasor
    fault_resistance: float = 0.0

    def __post_init__(self):
        if not (math.isfinite(self.line_voltage_rms)
                and self.line_voltage_rms > 0):
            raise InvalidInput(
                f"Line voltage must be positive, got {self.line_voltage_rms}",
                field="line_voltage_rms"
            )
        for name in ("positive_seq_impedance", "zero_seq_impedance"):
            z = getattr(self, name)
            if not (math.isfinite(z.re) and math.isfinite(z.im)):
                raise InvalidInput(
                    f"{name} must be finite, got {z}", field=name
                )
            if not z.re >= 0:
                raise InvalidInput(
                    f"{name} resistance must not be negative, got {z.re}",
                    field=name
                )
        if not (math.isfinite(self.fault_resistance)
                and self.fault_resistance >= 0):
            raise InvalidInput(
                f"Fault resistance must be finite and not negative, got "
                f"{self.fault_resistance}",
                field="fault_resistance"
            )

    @property
    def negative_seq_impedance(self) -> Phasor:
        """Z2, taken equal to Z1."""
        return self.positive_seq_impedance


# =============================================================================
# FAULT TYPES
# =============================================================================

@dataclass(frozen=True)
class ThreePhase:
    """Balanced fault involving all three phases."""

    kind: ClassVar[FaultKind] = FaultKind.THREE_PHASE

    @property
    def code(self) -> str:
        return "ABC"


@dataclass(frozen=True)
class PhaseToPhase:
    """
    Fault between two phases without an earth path.

    Attributes:
        pair: The two faulted phases. Defaults to B-C.
    """

    kind: ClassVar[FaultKind] = FaultKind.TWO_PHASE
    pair: Tuple[Phase, Phase] = (Phase.B, Phase.C)

    def __post_init__(self):
        if (len(self.pair) != 2
                or not all(isinstance(ph, Phase) for ph in self.pair)
                or self.pair[0] == self.pair[1]):
            raise InvalidInput(
                f"Phase-to-phase fault needs two distinct phases, got "
                f"{self.pair}",
                field="pair"
            )

    @property
    def healthy_phase(self) -> Phase:
        """The phase not involved in the fault."""
        return next(ph for ph in PHASE_ORDER if ph not in self.pair)

    @property
    def code(self) -> str:
        # Codes follow positive sequence order: AB, BC, CA
        healthy = PHASE_ORDER.index(self.healthy_phase)
        first = PHASE_ORDER[(healthy + 1) % 3]
        second = PHASE_ORDER[(healthy + 2) % 3]
        return first.value + second.value


@dataclass(frozen=True)
class SinglePhaseToGround:
    """
    Fault from one phase to earth.

    Attributes:
        phase: The faulted phase. Defaults to A.
    """

    kind: ClassVar[FaultKind] = FaultKind.PHASE_GROUND
    phase: Phase = Phase.A

    def __post_init__(self):
        if not isinstance(self.phase, Phase):
            raise InvalidInput(
                f"Phase-to-ground fault needs a Phase, got {self.phase!r}",
                field="phase"
            )

    @property
    def code(self) -> str:
        return self.phase.value + "N"


FaultType = Union[ThreePhase, PhaseToPhase, SinglePhaseToGround]


def parse_fault_code(code: str) -> FaultType:
    """
    Convert a fault code to a fault type variant.

    Accepted codes: 'ABC' (three-phase), 'AB', 'BC', 'CA' and their
    reversals (phase-to-phase), 'AN', 'BN', 'CN' (phase-to-ground).
    Matching ignores case.

    Raises:
        InvalidInput: If the code is not recognised.

    Example:
        >>> parse_fault_code('bn')
        SinglePhaseToGround(phase=<Phase.B: 'B'>)
    """
    key = code.strip().upper()
    phases = {ph.value: ph for ph in PHASE_ORDER}

    if key == "ABC":
        return ThreePhase()
    if len(key) == 2 and key[1] == "N" and key[0] in phases:
        return SinglePhaseToGround(phases[key[0]])
    if len(key) == 2 and all(ch in phases for ch in key) and key[0] != key[1]:
        return PhaseToPhase((phases[key[0]], phases[key[1]]))

    raise InvalidInput(f"Unknown fault code: {code!r}", field="fault_type")
