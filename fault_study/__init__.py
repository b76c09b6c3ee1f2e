"""
Fault study package for the protection calculator.

This package provides the symmetrical-components fault solver and a
study wrapper that runs every fault kind on one network.

Modules:
    symmetrical_components: Phase currents and voltages for a fault
    fault_level_study: Fault level for each fault kind
"""

from fault_study.symmetrical_components import solve_fault, phase_voltage
from fault_study.fault_level_study import (
    fault_study,
    fault_levels,
    min_fault_levels,
)

__all__ = [
    'solve_fault',
    'phase_voltage',
    'fault_study',
    'fault_levels',
    'min_fault_levels',
]
