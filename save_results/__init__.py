"""
Result formatting package for the protection calculator.

Modules:
    save_result: pandas DataFrames of solver, curve and selectivity results
"""

from save_results.save_result import (
    phase_quantities_frame,
    trip_frame,
    curve_frame,
    selectivity_frame,
    safe_numeric,
    clean_dataframe,
)

__all__ = [
    'phase_quantities_frame',
    'trip_frame',
    'curve_frame',
    'selectivity_frame',
    'safe_numeric',
    'clean_dataframe',
]
