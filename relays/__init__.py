"""
Relay analysis package.

This package provides relay-side calculations split into focused
modules:

- curves: IEC 60255 time-overcurrent curve evaluation
- ct_scaling: Current transformer ratio and connection scaling
- current_conversion: Phase currents to measurement type conversion
- reach_factors: Pickup selection and reach factor calculations

All functions are re-exported at the package level.

Usage (targeted imports):
    from relays.curves import evaluate_trip
    from relays.ct_scaling import scale_to_secondary

Usage (package level):
    import relays
    result = relays.evaluate_trip(spec, 1132)
"""

# =============================================================================
# CURVE EVALUATION
# =============================================================================

from relays.curves import (
    evaluate_trip,
    operating_time,
    curve_constants,
    IEC_CONSTANTS,
)

# =============================================================================
# CT SCALING
# =============================================================================

from relays.ct_scaling import (
    scale_to_secondary,
    scale_to_primary,
    classify_secondary,
    DELTA_FACTOR,
)

# =============================================================================
# CURRENT CONVERSION
# =============================================================================

from relays.current_conversion import (
    sequence_components,
    get_measured_current,
    convert_to_i2,
    convert_to_i0,
)

# =============================================================================
# REACH FACTOR CALCULATIONS
# =============================================================================

from relays.reach_factors import (
    recommended_pickup,
    reach_factor,
    device_reach_factors,
)

# =============================================================================
# PUBLIC API
# =============================================================================

__all__ = [
    # curves
    'evaluate_trip',
    'operating_time',
    'curve_constants',
    'IEC_CONSTANTS',
    # ct_scaling
    'scale_to_secondary',
    'scale_to_primary',
    'classify_secondary',
    'DELTA_FACTOR',
    # current_conversion
    'sequence_components',
    'get_measured_current',
    'convert_to_i2',
    'convert_to_i0',
    # reach_factors
    'recommended_pickup',
    'reach_factor',
    'device_reach_factors',
]
