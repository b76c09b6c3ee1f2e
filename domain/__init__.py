"""
Domain models for the protection calculator.

This package contains the core value types used throughout the
calculator. Every type is immutable; results are recomputed from scratch
whenever an input changes.

Modules:
    enums: Phases, fault kinds, curve families, CT connections
    errors: Calculation error kinds
    phasor: Immutable complex phasor arithmetic
    network: Equivalent network and fault type variants
    fault_data: Fault result containers
    device: Relay curve and CT settings, trip evaluation results

Usage:
    import domain as dd

    network = dd.NetworkParameters(10000, dd.Phasor(1, 5), dd.Phasor(3, 15))
    fault = dd.parse_fault_code('AN')
"""

# =============================================================================
# ENUMERATIONS
# =============================================================================

from domain.enums import (
    Phase,
    FaultKind,
    CurveFamily,
    CtConnection,
    CtWarning,
    PHASE_ORDER,
    phase_shift,
    parse_curve_family,
)

# =============================================================================
# ERRORS
# =============================================================================

from domain.errors import (
    CalculationError,
    InvalidInput,
    DivisionByZero,
    InvalidSetting,
)

# =============================================================================
# PHASORS
# =============================================================================

from domain.phasor import Phasor, ZERO, A, A2

# =============================================================================
# DOMAIN MODELS
# =============================================================================

from domain.network import (
    NetworkParameters,
    ThreePhase,
    PhaseToPhase,
    SinglePhaseToGround,
    FaultType,
    parse_fault_code,
)
from domain.fault_data import PhaseQuantities, FaultCurrents
from domain.device import CurveSpec, TripEvaluation, CtSpec, CtScaling

# =============================================================================
# PUBLIC API
# =============================================================================

__all__ = [
    # Enums
    "Phase",
    "FaultKind",
    "CurveFamily",
    "CtConnection",
    "CtWarning",
    "PHASE_ORDER",
    "phase_shift",
    "parse_curve_family",
    # Errors
    "CalculationError",
    "InvalidInput",
    "DivisionByZero",
    "InvalidSetting",
    # Phasors
    "Phasor",
    "ZERO",
    "A",
    "A2",
    # Domain models
    "NetworkParameters",
    "ThreePhase",
    "PhaseToPhase",
    "SinglePhaseToGround",
    "FaultType",
    "parse_fault_code",
    "PhaseQuantities",
    "FaultCurrents",
    "CurveSpec",
    "TripEvaluation",
    "CtSpec",
    "CtScaling",
]
