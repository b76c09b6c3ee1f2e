"""
Selectivity (grading) check between a downstream and an upstream relay.

For every fault current of interest both relay curves are evaluated. The
downstream relay, nearest the fault, must trip first and the upstream
relay must wait at least the grading margin longer:

    t_upstream - t_downstream >= margin

Classes:
    GradingPoint: Both relay responses at one current
    SelectivityResult: All grading points and the overall verdict

Functions:
    check_selectivity: Grade two curves over a set of currents
    fault_currents_for_selectivity: Fault currents from solver results
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from calc_config import DEFAULT_GRADING_MARGIN
import domain as dd
from relays.curves import evaluate_trip


@dataclass(frozen=True)
class GradingPoint:
    """
    Relay responses at one fault current.

    Attributes:
        current: Fault current (A).
        downstream: Downstream relay evaluation.
        upstream: Upstream relay evaluation.
        margin: Upstream minus downstream trip time (s), or None when
            either relay does not trip.
        is_selective: True if the downstream relay clears the fault with
            at least the required margin.
    """

    current: float
    downstream: dd.TripEvaluation
    upstream: dd.TripEvaluation
    margin: Optional[float]
    is_selective: bool


@dataclass(frozen=True)
class SelectivityResult:
    """
    Outcome of a grading check.

    Attributes:
        points: Grading points where at least one relay trips.
        required_margin: Margin the check was run with (s).

    Properties:
        is_selective: True if every point is selective.
        min_margin: Smallest margin where both relays trip, else None.
        failures: Points that are not selective.
    """

    points: Tuple[GradingPoint, ...]
    required_margin: float

    @property
    def is_selective(self) -> bool:
        return all(point.is_selective for point in self.points)

    @property
    def min_margin(self) -> Optional[float]:
        margins = [p.margin for p in self.points if p.margin is not None]
        return min(margins) if margins else None

    @property
    def failures(self) -> List[GradingPoint]:
        return [point for point in self.points if not point.is_selective]


def check_selectivity(
    downstream: dd.CurveSpec,
    upstream: dd.CurveSpec,
    currents: Iterable[float],
    margin: float = DEFAULT_GRADING_MARGIN
) -> SelectivityResult:
    """
    Check that two relay curves are graded over a set of fault currents.

    Rules at each current:
        - Neither relay trips: ignored (no fault seen).
        - Only the downstream relay trips: selective.
        - Only the upstream relay trips: not selective.
        - Both trip: selective if the upstream relay is slower by at
          least ``margin`` seconds.

    Args:
        downstream: Curve of the relay nearest the fault.
        upstream: Curve of the backup relay.
        currents: Fault currents to check (A).
        margin: Required grading margin (s), must not be negative.

    Returns:
        SelectivityResult with one GradingPoint per current where a relay
        trips, in ascending current order.

    Raises:
        InvalidSetting: If margin is negative.

    Example:
        >>> result = check_selectivity(feeder_spec, incomer_spec, [1132, 680])
        >>> result.is_selective
        True
    """
    if margin < 0:
        raise dd.InvalidSetting(
            f"Grading margin must not be negative, got {margin}",
            field="margin"
        )

    points = []
    for current in np.sort(np.asarray(list(currents), dtype=float)):
        ds_eval = evaluate_trip(downstream, float(current))
        us_eval = evaluate_trip(upstream, float(current))

        if not ds_eval.is_trip and not us_eval.is_trip:
            continue

        if ds_eval.is_trip and us_eval.is_trip:
            grading = us_eval.trip_time_seconds - ds_eval.trip_time_seconds
            selective = grading >= margin
        else:
            grading = None
            selective = ds_eval.is_trip

        points.append(GradingPoint(
            current=float(current),
            downstream=ds_eval,
            upstream=us_eval,
            margin=grading,
            is_selective=selective,
        ))

    result = SelectivityResult(points=tuple(points), required_margin=margin)
    if not result.is_selective:
        logging.warning(
            f"Relays not selective at {len(result.failures)} of "
            f"{len(points)} currents (required margin {margin}s)"
        )
    return result


def fault_currents_for_selectivity(
    studies: Iterable[dd.PhaseQuantities]
) -> List[float]:
    """
    Collect the largest phase current of each solved fault.

    Example:
        >>> studies = fault_study(network).values()
        >>> currents = fault_currents_for_selectivity(studies)
    """
    return sorted(quantities.max_current for quantities in studies)
