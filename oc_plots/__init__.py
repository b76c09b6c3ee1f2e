"""
Time-current plotting support package.

This package prepares relay curves for plotting on shared axes and
checks the grading between two relays. Drawing itself is left to the
display layer.

Modules:
    plot_settings: Chart window bounds
    curve_sampler: Singularity-free (current, time) samples of a curve
    selectivity: Grading margin check between two relays
"""

from oc_plots.plot_settings import ChartWindow, default_chart_window
from oc_plots.curve_sampler import CurveSample, sample_curve, sample_currents
from oc_plots.selectivity import (
    GradingPoint,
    SelectivityResult,
    check_selectivity,
    fault_currents_for_selectivity,
)

__all__ = [
    'ChartWindow',
    'default_chart_window',
    'CurveSample',
    'sample_curve',
    'sample_currents',
    'GradingPoint',
    'SelectivityResult',
    'check_selectivity',
    'fault_currents_for_selectivity',
]
