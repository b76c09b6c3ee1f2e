"""
Protection device setting models for the protection calculator.

A device is described by its time-overcurrent characteristic (CurveSpec)
and the current transformer feeding it (CtSpec). Settings are validated
at construction so an invalid setting can never reach the evaluators.
"""

from dataclasses import dataclass
from typing import Optional

from calc_config import NO_TRIP
from domain.enums import CtConnection, CtWarning, CurveFamily
from domain.errors import InvalidSetting


@dataclass(frozen=True)
class CurveSpec:
    """
    Time-overcurrent characteristic of a relay element.

    Attributes:
        family: Curve family (definite time or an IEC inverse family).
        pickup_current: Pickup current Is (A), must be > 0.
        time_setting: Trip delay in seconds for DEFINITE, time multiplier
            setting (TMS) for the inverse families. Must be > 0.

    Raises:
        InvalidSetting: If pickup_current or time_setting is not positive.

    Example:
        >>> spec = CurveSpec(CurveFamily.IEC_STANDARD_INVERSE, 350, 0.3)
        >>> spec.is_definite
        False
    """

    family: CurveFamily
    pickup_current: float
    time_setting: float

    def __post_init__(self):
        if not self.pickup_current > 0:
            raise InvalidSetting(
                f"Pickup current must be positive, got {self.pickup_current}",
                field="pickup_current"
            )
        if not self.time_setting > 0:
            raise InvalidSetting(
                f"Time setting must be positive, got {self.time_setting}",
                field="time_setting"
            )

    @property
    def is_definite(self) -> bool:
        return self.family == CurveFamily.DEFINITE


@dataclass(frozen=True)
class TripEvaluation:
    """
    Outcome of evaluating a curve at one applied current.

    Attributes:
        is_trip: True if the relay operates.
        trip_time_seconds: Operating time (s), or NO_TRIP when the
            relay does not operate. Always finite.
        multiplicity: Applied current divided by pickup current.
    """

    is_trip: bool
    trip_time_seconds: float
    multiplicity: float

    @property
    def time_or_none(self) -> Optional[float]:
        """Return the trip time, or None if the relay does not trip."""
        return self.trip_time_seconds if self.is_trip else None

    def __repr__(self) -> str:
        if self.trip_time_seconds == NO_TRIP:
            return f"TripEvaluation(no trip, M={self.multiplicity:.3f})"
        return (
            f"TripEvaluation(trip in {self.trip_time_seconds:.3f}s, "
            f"M={self.multiplicity:.3f})"
        )


@dataclass(frozen=True)
class CtSpec:
    """
    Current transformer rating and secondary connection.

    Attributes:
        primary_rated: Rated primary current (A), must be > 0.
        secondary_rated: Rated secondary current (A), usually 1 or 5.
        connection: STAR or DELTA secondary connection.

    Raises:
        InvalidSetting: If either rating is not positive.

    Example:
        >>> ct = CtSpec(200, 5, CtConnection.DELTA)
        >>> ct.ratio
        40.0
    """

    primary_rated: float
    secondary_rated: float
    connection: CtConnection = CtConnection.STAR

    def __post_init__(self):
        if not self.primary_rated > 0:
            raise InvalidSetting(
                f"CT primary rating must be positive, got {self.primary_rated}",
                field="primary_rated"
            )
        if not self.secondary_rated > 0:
            raise InvalidSetting(
                f"CT secondary rating must be positive, got "
                f"{self.secondary_rated}",
                field="secondary_rated"
            )

    @property
    def ratio(self) -> float:
        """Transformation ratio primary_rated / secondary_rated."""
        return self.primary_rated / self.secondary_rated


@dataclass(frozen=True)
class CtScaling:
    """
    Secondary current seen by the relay, with an advisory warning.

    Attributes:
        secondary_current: Relay input current (A).
        warning: MEASUREMENT_FLOOR, SATURATION_RISK or None.
    """

    secondary_current: float
    warning: Optional[CtWarning] = None
