"""
Pickup selection and protection reach factor calculations.

Reach Factor = (Minimum Fault Current at Location) / (Device Pickup)

A reach factor > 1.0 means the device can detect faults at that
location. Higher values indicate better protection coverage with
margin for error.

The recommended phase pickup follows the usual load-based rule:

    Is = K_self_start * K_safety * I_load / K_return

Functions:
    recommended_pickup: Phase pickup from load current and coefficients
    reach_factor: Fault current / pickup
    device_reach_factors: Phase and earth reach factors for a relay
"""

from typing import Dict, Optional, Union

from calc_config import K_RETURN, K_SAFETY, K_SELF_START
import domain as dd


def recommended_pickup(
    load_current: float,
    k_safety: float = K_SAFETY,
    k_return: float = K_RETURN,
    k_self_start: float = K_SELF_START
) -> float:
    """
    Calculate the recommended primary pickup for a phase overcurrent
    element.

    Args:
        load_current: Maximum load current (A).
        k_safety: Safety (reliability) coefficient, typically 1.1-1.3.
        k_return: Drop-off to pickup ratio of the relay, typically 0.85-0.95.
        k_self_start: Motor self-start coefficient, typically 1.5-3.

    Returns:
        Recommended pickup current in Amperes (primary).

    Raises:
        InvalidSetting: If any input is not positive.

    Example:
        >>> print(f"{recommended_pickup(100):.1f}A")
        352.9A
    """
    inputs = {
        'load_current': load_current,
        'k_safety': k_safety,
        'k_return': k_return,
        'k_self_start': k_self_start,
    }
    for name, value in inputs.items():
        if not value > 0:
            raise dd.InvalidSetting(
                f"{name} must be positive, got {value}", field=name
            )

    return k_self_start * k_safety * load_current / k_return


def reach_factor(fault_current: float, pickup: float) -> float:
    """
    Calculate the reach factor of a pickup for a fault current.

    Raises:
        InvalidSetting: If pickup is not positive.
    """
    if not pickup > 0:
        raise dd.InvalidSetting(
            f"Pickup must be positive, got {pickup}", field="pickup_current"
        )
    return round(fault_current / pickup, 2)


def device_reach_factors(
    fault_currents: dd.FaultCurrents,
    phase_spec: dd.CurveSpec,
    earth_spec: Optional[dd.CurveSpec] = None
) -> Dict[str, Union[float, str]]:
    """
    Calculate phase and earth reach factors for a relay.

    Phase elements are checked against the smaller of the two-phase and
    three-phase fault levels. Earth faults are detected by the earth
    element when fitted, else by the phase element, so the effective
    earth pickup is the lower of the two.

    Args:
        fault_currents: Fault levels at the far end of the protected zone.
        phase_spec: Phase overcurrent element settings.
        earth_spec: Earth fault element settings, or None if not fitted.

    Returns:
        Dictionary with:
        - 'ph_pickup', 'ef_pickup': Pickups used ('NA' if no earth element)
        - 'ph_rf', 'ef_rf': Phase and earth reach factors

    Example:
        >>> factors = device_reach_factors(fc, phase_spec, earth_spec)
        >>> factors['ph_rf'] > 1
        True
    """
    ph_pickup = phase_spec.pickup_current
    min_phase_fault = min(fault_currents.two_phase, fault_currents.three_phase)

    if earth_spec is not None:
        ef_pickup = earth_spec.pickup_current
        effective_ef_pickup = min(ef_pickup, ph_pickup)
    else:
        ef_pickup = 'NA'
        effective_ef_pickup = ph_pickup

    return {
        'ph_pickup': ph_pickup,
        'ef_pickup': ef_pickup,
        'ph_rf': reach_factor(min_phase_fault, ph_pickup),
        'ef_rf': reach_factor(fault_currents.phase_ground, effective_ef_pickup),
    }
