"""Centralized numeric configuration for the protection calculator.

This module holds the constants shared by the fault solver, the curve
evaluator, the CT scaler and the curve sampler. Import the constants
directly where they are needed.

Usage:
    from calc_config import NO_TRIP, MAX_TRIP_TIME

    if evaluation.trip_time_seconds == NO_TRIP:
        ...
"""

# =============================================================================
# TRIP TIME SENTINELS
# =============================================================================

# Returned as the trip time when the relay does not operate
NO_TRIP = -1.0

# Trip time reported when the curve denominator collapses near multiplicity 1
MAX_TRIP_TIME = 1.0e6

# Curve denominators below this value are treated as singular
CURVE_DENOMINATOR_EPSILON = 1.0e-9

# =============================================================================
# PHASOR ARITHMETIC
# =============================================================================

# Divisor magnitudes at or below this value raise DivisionByZero
ZERO_MAGNITUDE_TOLERANCE = 1.0e-12

# =============================================================================
# CT SCALING
# =============================================================================

# Fractions of the CT secondary rating used for advisory warnings
CT_MEASUREMENT_FLOOR = 0.05
CT_SATURATION_LIMIT = 1.2

# =============================================================================
# CURVE SAMPLING
# =============================================================================

# First sample sits this far above pickup to stay clear of the asymptote
PICKUP_START_FACTOR = 1.01

DEFAULT_SAMPLE_POINTS = 200
MIN_SAMPLE_POINTS = 150
MAX_SAMPLE_POINTS = 250

# Chart bounds used when the caller does not supply a window
CHART_CURRENT_SPAN = 10.0
CHART_MIN_TIME = 5.0

# =============================================================================
# PROTECTION SETTINGS
# =============================================================================

# Minimum grading margin between upstream and downstream relays (s)
DEFAULT_GRADING_MARGIN = 0.3

# Pickup coefficients: safety, drop-off (return) and motor self-start
K_SAFETY = 1.2
K_RETURN = 0.85
K_SELF_START = 2.5

__all__ = [
    'NO_TRIP',
    'MAX_TRIP_TIME',
    'CURVE_DENOMINATOR_EPSILON',
    'ZERO_MAGNITUDE_TOLERANCE',
    'CT_MEASUREMENT_FLOOR',
    'CT_SATURATION_LIMIT',
    'PICKUP_START_FACTOR',
    'DEFAULT_SAMPLE_POINTS',
    'MIN_SAMPLE_POINTS',
    'MAX_SAMPLE_POINTS',
    'CHART_CURRENT_SPAN',
    'CHART_MIN_TIME',
    'DEFAULT_GRADING_MARGIN',
    'K_SAFETY',
    'K_RETURN',
    'K_SELF_START',
]
