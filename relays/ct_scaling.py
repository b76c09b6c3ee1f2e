"""
Current transformer ratio and connection scaling.

Converts primary currents to the secondary current a relay actually
measures. A delta-connected secondary presents line currents that are
the difference of two phase currents, raising the magnitude by √3.

Functions:
    scale_to_secondary: Primary to relay input current, with warning
    scale_to_primary: Star-connected secondary back to primary current
    classify_secondary: Advisory warning for a secondary current
"""

import logging
import math
from typing import Optional

from calc_config import CT_MEASUREMENT_FLOOR, CT_SATURATION_LIMIT
import domain as dd

DELTA_FACTOR = math.sqrt(3)


def scale_to_secondary(ct: dd.CtSpec, primary_current: float) -> dd.CtScaling:
    """
    Convert a primary current to the relay secondary current.

    secondary = primary / (primary_rated / secondary_rated) * (√3 if delta)

    The result carries an advisory warning (never an exception) when it
    falls below 5 % of the secondary rating (measurement floor) or rises
    above 120 % (core saturation risk).

    Args:
        ct: CT rating and connection.
        primary_current: Primary current magnitude (A).

    Returns:
        CtScaling with the secondary current and optional warning.

    Raises:
        InvalidInput: If primary_current is negative.

    Example:
        >>> ct = dd.CtSpec(200, 5, dd.CtConnection.DELTA)
        >>> print(f"{scale_to_secondary(ct, 100).secondary_current:.2f}A")
        4.33A
    """
    if primary_current < 0:
        raise dd.InvalidInput(
            f"Primary current must not be negative, got {primary_current}",
            field="primary_current"
        )

    secondary = primary_current / ct.ratio
    if ct.connection == dd.CtConnection.DELTA:
        secondary *= DELTA_FACTOR

    warning = classify_secondary(ct, secondary)
    if warning is not None:
        logging.warning(
            f"CT {ct.primary_rated:g}/{ct.secondary_rated:g}A "
            f"{ct.connection.value}: {secondary:.3f}A - {warning.value}"
        )

    return dd.CtScaling(secondary_current=secondary, warning=warning)


def classify_secondary(ct: dd.CtSpec, secondary_current: float) -> Optional[dd.CtWarning]:
    """Return the advisory warning for a secondary current, if any."""
    if secondary_current < CT_MEASUREMENT_FLOOR * ct.secondary_rated:
        return dd.CtWarning.MEASUREMENT_FLOOR
    if secondary_current > CT_SATURATION_LIMIT * ct.secondary_rated:
        return dd.CtWarning.SATURATION_RISK
    return None


def scale_to_primary(ct: dd.CtSpec, secondary_current: float) -> float:
    """
    Convert a secondary current back to primary current.

    The delta factor is removed for delta-connected secondaries so the
    result is the primary phase current in both cases.

    Raises:
        InvalidInput: If secondary_current is negative.
    """
    if secondary_current < 0:
        raise dd.InvalidInput(
            f"Secondary current must not be negative, got {secondary_current}",
            field="secondary_current"
        )

    primary = secondary_current * ct.ratio
    if ct.connection == dd.CtConnection.DELTA:
        primary /= DELTA_FACTOR
    return primary
