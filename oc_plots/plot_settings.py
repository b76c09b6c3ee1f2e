"""
Time-current chart window settings.

A chart window bounds the current and time axes shared by the curves
of a selectivity plot. Samples outside the window are dropped by the
curve sampler rather than clamped to the edge.

Classes:
    ChartWindow: Visible current and time ranges

Functions:
    default_chart_window: Window sized to fit a main and a backup curve
"""

from dataclasses import dataclass
from typing import Optional

from calc_config import CHART_CURRENT_SPAN, CHART_MIN_TIME
import domain as dd


@dataclass(frozen=True)
class ChartWindow:
    """
    Visible area of a time-current chart.

    Attributes:
        max_current: Right edge of the current axis (A).
        max_time: Top of the time axis (s).
        min_time: Bottom of the time axis (s). Samples must lie strictly
            between min_time and max_time to be drawn.

    Raises:
        InvalidSetting: If max_current or max_time is not positive, or
            min_time is not below max_time.
    """

    max_current: float
    max_time: float
    min_time: float = 0.0

    def __post_init__(self):
        if not self.max_current > 0:
            raise dd.InvalidSetting(
                f"Chart current range must be positive, got {self.max_current}",
                field="max_current"
            )
        if not self.max_time > 0 or self.min_time >= self.max_time:
            raise dd.InvalidSetting(
                f"Invalid chart time range {self.min_time}-{self.max_time}s",
                field="max_time"
            )

    def contains_time(self, time: float) -> bool:
        return self.min_time < time < self.max_time


def default_chart_window(
    main: dd.CurveSpec,
    backup: Optional[dd.CurveSpec] = None
) -> ChartWindow:
    """
    Size a chart window to fit a main relay curve and an optional backup.

    Current axis:   10 x the largest pickup.
    Time axis:      the larger of the main time setting, 10 x the backup
                    time setting and 5 seconds.

    Example:
        >>> main = dd.CurveSpec(dd.CurveFamily.DEFINITE, 350, 0.5)
        >>> default_chart_window(main)
        ChartWindow(max_current=3500.0, max_time=5.0, min_time=0.0)
    """
    pickups = [main.pickup_current]
    times = [main.time_setting, CHART_MIN_TIME]
    if backup is not None:
        pickups.append(backup.pickup_current)
        times.append(backup.time_setting * CHART_CURRENT_SPAN)

    return ChartWindow(
        max_current=float(max(pickups) * CHART_CURRENT_SPAN),
        max_time=float(max(times)),
    )
