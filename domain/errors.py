"""
Calculation error kinds for the protection calculator.

Every error is caller-correctable: it names the offending input through
the ``field`` attribute so the display layer can show the message next
to the input that caused it.

Classes:
    CalculationError: Base class for all calculator errors
    InvalidInput: Negative or otherwise impossible network/current input
    DivisionByZero: A divisor phasor has zero magnitude
    InvalidSetting: Non-positive relay or CT setting
"""

from typing import Optional


class CalculationError(ValueError):
    """
    Base class for errors raised by the calculation core.

    Attributes:
        field: Name of the input that caused the error, or None when the
            error cannot be attributed to a single input.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidInput(CalculationError):
    """Negative impedance, resistance, voltage or current."""


class DivisionByZero(CalculationError):
    """Complex division by a zero-magnitude phasor."""


class InvalidSetting(CalculationError):
    """Non-positive pickup, time setting, CT rating or coefficient."""
