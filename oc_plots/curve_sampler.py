"""
Time-current curve sampling for selectivity plots.

Walks a relay curve from just above pickup to the edge of the chart and
returns (current, time) points that are safe to draw. The sampler never
evaluates the curve at multiplicity 1, where inverse curves are
asymptotic, and drops points whose time falls outside the chart window
instead of clamping them to the border.

Functions:
    sample_curve: Ordered (current, time) samples of a curve
    sample_currents: The current grid used by sample_curve
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from calc_config import (
    DEFAULT_SAMPLE_POINTS,
    MAX_SAMPLE_POINTS,
    MIN_SAMPLE_POINTS,
    PICKUP_START_FACTOR,
)
import domain as dd
from oc_plots.plot_settings import ChartWindow
from relays.curves import evaluate_trip


class CurveSample(NamedTuple):
    """One point of a time-current curve."""
    current: float
    time: float


def sample_currents(
    spec: dd.CurveSpec,
    max_current: float,
    points: int = DEFAULT_SAMPLE_POINTS,
    log_spacing: bool = True,
    min_current: float = 0.0
) -> np.ndarray:
    """
    Build the current grid for a curve.

    The grid starts at the larger of min_current and
    PICKUP_START_FACTOR x pickup, and ends at max_current.

    Args:
        spec: Curve settings.
        max_current: Upper end of the current range (A).
        points: Number of grid points, between MIN_SAMPLE_POINTS and
            MAX_SAMPLE_POINTS.
        log_spacing: Geometric spacing when True, linear when False.
        min_current: Lower end of the current range (A).

    Returns:
        Ascending numpy array. Empty when max_current is below the start.

    Raises:
        InvalidSetting: If points is outside the allowed range.
    """
    if not MIN_SAMPLE_POINTS <= points <= MAX_SAMPLE_POINTS:
        raise dd.InvalidSetting(
            f"Sample points must be between {MIN_SAMPLE_POINTS} and "
            f"{MAX_SAMPLE_POINTS}, got {points}",
            field="points"
        )

    start = max(min_current, spec.pickup_current * PICKUP_START_FACTOR)
    if max_current < start:
        return np.array([], dtype=float)

    if log_spacing:
        return np.geomspace(start, max_current, points)
    return np.linspace(start, max_current, points)


def sample_curve(
    spec: dd.CurveSpec,
    current_range: Tuple[float, float],
    window: Optional[ChartWindow] = None,
    points: int = DEFAULT_SAMPLE_POINTS,
    log_spacing: bool = True
) -> List[CurveSample]:
    """
    Sample a relay curve across a current range.

    Args:
        spec: Curve settings.
        current_range: (low, high) currents in Amperes. Samples start at
            the larger of low and PICKUP_START_FACTOR x pickup.
        window: Chart window; samples whose time lies outside it are
            skipped. Defaults to no time limit.
        points: Number of grid points before filtering.
        log_spacing: Geometric spacing when True, linear when False.

    Returns:
        List of CurveSample ordered by ascending current. Every sample has
        a finite trip time; the list may be shorter than ``points``.

    Example:
        >>> spec = dd.CurveSpec(dd.CurveFamily.IEC_VERY_INVERSE, 500, 0.3)
        >>> samples = sample_curve(spec, (0, 5000), default_chart_window(spec))
        >>> samples[0].current > 500
        True
    """
    low, high = current_range
    if high <= low:
        raise dd.InvalidInput(
            f"Current range must be ascending, got {current_range}",
            field="current_range"
        )

    currents = sample_currents(spec, high, points, log_spacing, min_current=low)

    samples = []
    for current in currents:
        evaluation = evaluate_trip(spec, float(current))
        if not evaluation.is_trip:
            continue
        time = evaluation.trip_time_seconds
        if window is not None and not window.contains_time(time):
            continue
        samples.append(CurveSample(float(current), time))

    logging.debug(
        f"Sampled {spec.family.value} curve Is={spec.pickup_current:g}A: "
        f"{len(samples)} of {len(currents)} points in window"
    )
    return samples
