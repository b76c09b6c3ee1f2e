"""
Tabular formatting of calculator results.

Builds pandas DataFrames from solver, evaluator, sampler and selectivity
results so the display layer can render them as tables or charts.
Trip times that mean "no trip" become NaN so they never appear as
numbers in a table or plot.

Functions:
    phase_quantities_frame: One row per phase (current and voltage)
    trip_frame: One row per evaluated current
    curve_frame: Sampled curve points
    selectivity_frame: Grading points of a selectivity check
    safe_numeric: Convert sentinels and non-finite values to NaN
    clean_dataframe: Round numeric columns for display
"""

import math
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd

from calc_config import NO_TRIP
import domain as dd
from oc_plots.curve_sampler import CurveSample
from oc_plots.selectivity import SelectivityResult


def phase_quantities_frame(quantities: dd.PhaseQuantities) -> pd.DataFrame:
    """
    Format solved phase quantities as a table.

    Returns:
        DataFrame indexed by phase ('A', 'B', 'C') with columns
        'I (A)', 'I angle (deg)', 'U (V)', 'U angle (deg)'.

    Example:
        >>> df = phase_quantities_frame(solve_fault(network, dd.ThreePhase()))
        >>> round(df.loc['A', 'I (A)'])
        1132
    """
    rows: Dict[str, List[float]] = {
        'I (A)': [i.magnitude for i in quantities.currents],
        'I angle (deg)': [i.angle_degrees for i in quantities.currents],
        'U (V)': [u.magnitude for u in quantities.voltages],
        'U angle (deg)': [u.angle_degrees for u in quantities.voltages],
    }
    index = pd.Index([ph.value for ph in dd.PHASE_ORDER], name='Phase')
    return pd.DataFrame(rows, index=index)


def trip_frame(
    spec: dd.CurveSpec,
    evaluations: Iterable[dd.TripEvaluation]
) -> pd.DataFrame:
    """Format trip evaluations of one curve as a table."""
    records = [
        {
            'Current (A)': evaluation.multiplicity * spec.pickup_current,
            'Multiplicity': evaluation.multiplicity,
            'Trip': evaluation.is_trip,
            'Time (s)': safe_numeric(evaluation.trip_time_seconds),
        }
        for evaluation in evaluations
    ]
    return pd.DataFrame.from_records(
        records, columns=['Current (A)', 'Multiplicity', 'Trip', 'Time (s)']
    )


def curve_frame(samples: Iterable[CurveSample]) -> pd.DataFrame:
    """Format curve samples as a two-column table."""
    return pd.DataFrame(
        [tuple(sample) for sample in samples],
        columns=['Current (A)', 'Time (s)']
    )


def selectivity_frame(result: SelectivityResult) -> pd.DataFrame:
    """
    Format a selectivity check as a table.

    Columns: 'Current (A)', 'Downstream (s)', 'Upstream (s)',
    'Margin (s)', 'Selective'. Relays that do not trip show NaN.
    """
    records = [
        {
            'Current (A)': point.current,
            'Downstream (s)': safe_numeric(point.downstream.trip_time_seconds),
            'Upstream (s)': safe_numeric(point.upstream.trip_time_seconds),
            'Margin (s)': safe_numeric(point.margin),
            'Selective': point.is_selective,
        }
        for point in result.points
    ]
    return pd.DataFrame.from_records(
        records,
        columns=[
            'Current (A)', 'Downstream (s)', 'Upstream (s)',
            'Margin (s)', 'Selective'
        ]
    )


def safe_numeric(value):
    """
    Safely convert a value to numeric, returning NaN for no-trip
    sentinels, None and non-finite values.
    """
    if value is None or value == NO_TRIP:
        return np.nan
    try:
        value = float(value)
    except (ValueError, TypeError):
        return np.nan
    if not math.isfinite(value):
        return np.nan
    return value


def clean_dataframe(df: pd.DataFrame, decimals: int = 3) -> pd.DataFrame:
    """
    Round float columns for display.

    Returns a copy; the original DataFrame is left unchanged.
    """
    if df is None or df.empty:
        return df

    # Create a copy to avoid modifying the original
    df_clean = df.copy()
    float_cols = df_clean.select_dtypes(include='float').columns
    df_clean[float_cols] = df_clean[float_cols].round(decimals)
    return df_clean
