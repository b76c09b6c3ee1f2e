"""
Time-overcurrent curve evaluation (IEC 60255).

Inverse-time operating time:

    t = TMS * k / ((I / Is) ** alpha - 1)

Definite-time elements trip after the set delay regardless of current.
No family trips at or below pickup (multiplicity <= 1).

Functions:
    evaluate_trip: Decide whether and when a relay trips
    curve_constants: (k, alpha) for an inverse family
    operating_time: Trip time for a multiplicity above pickup
"""

import logging
import math
from typing import Tuple

from calc_config import CURVE_DENOMINATOR_EPSILON, MAX_TRIP_TIME, NO_TRIP
import domain as dd

# IEC 60255 constants (k, alpha)
IEC_CONSTANTS = {
    dd.CurveFamily.IEC_STANDARD_INVERSE: (0.14, 0.02),
    dd.CurveFamily.IEC_VERY_INVERSE: (13.5, 1.0),
    dd.CurveFamily.IEC_EXTREMELY_INVERSE: (80.0, 2.0),
}


def curve_constants(family: dd.CurveFamily) -> Tuple[float, float]:
    """
    Return the IEC constants (k, alpha) for an inverse curve family.

    Raises:
        InvalidSetting: For DEFINITE, which has no curve constants.
    """
    try:
        return IEC_CONSTANTS[family]
    except KeyError:
        raise dd.InvalidSetting(
            f"{family.value} curve has no inverse-time constants",
            field="family"
        ) from None


def operating_time(spec: dd.CurveSpec, multiplicity: float) -> float:
    """
    Calculate the operating time for a multiplicity above pickup.

    Near multiplicity 1 the inverse curve denominator collapses; any
    denominator below CURVE_DENOMINATOR_EPSILON returns MAX_TRIP_TIME
    instead of dividing.

    Computed times are also capped at MAX_TRIP_TIME. Just above the guard
    band the raw time can exceed that cap (TMS * k / epsilon), so the
    curve is strictly decreasing only where it lies below MAX_TRIP_TIME
    and is flat at MAX_TRIP_TIME closer to pickup.

    Args:
        spec: Curve settings.
        multiplicity: Applied current / pickup current, > 1.

    Returns:
        Operating time in seconds, always finite.
    """
    if spec.is_definite:
        return spec.time_setting

    k, alpha = curve_constants(spec.family)
    denominator = multiplicity ** alpha - 1
    if denominator < CURVE_DENOMINATOR_EPSILON:
        logging.warning(
            f"{spec.family.value} curve singular at M={multiplicity:.9f}, "
            f"reporting {MAX_TRIP_TIME}s"
        )
        return MAX_TRIP_TIME

    return min(spec.time_setting * k / denominator, MAX_TRIP_TIME)


def evaluate_trip(spec: dd.CurveSpec, applied_current: float) -> dd.TripEvaluation:
    """
    Evaluate a relay curve at an applied current.

    Args:
        spec: Curve settings (validated on construction).
        applied_current: Current seen by the relay (A), in the same units
            as spec.pickup_current.

    Returns:
        TripEvaluation. When multiplicity <= 1 the relay does not trip and
        trip_time_seconds is NO_TRIP.

    Raises:
        InvalidInput: If applied_current is negative, NaN or infinite.

    Example:
        >>> spec = dd.CurveSpec(dd.CurveFamily.IEC_STANDARD_INVERSE, 350, 0.3)
        >>> result = evaluate_trip(spec, 1132)
        >>> print(f"{result.trip_time_seconds:.2f}s")
        1.77s
    """
    if not (math.isfinite(applied_current) and applied_current >= 0):
        raise dd.InvalidInput(
            f"Applied current must be finite and not negative, got "
            f"{applied_current}",
            field="applied_current"
        )

    multiplicity = applied_current / spec.pickup_current

    if multiplicity <= 1.0:
        return dd.TripEvaluation(
            is_trip=False,
            trip_time_seconds=NO_TRIP,
            multiplicity=multiplicity
        )

    return dd.TripEvaluation(
        is_trip=True,
        trip_time_seconds=operating_time(spec, multiplicity),
        multiplicity=multiplicity
    )
