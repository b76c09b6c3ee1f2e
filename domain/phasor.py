"""
Complex phasor arithmetic for fault calculations.

A Phasor is an immutable rectangular-form complex value. Every operation
returns a new Phasor; nothing is modified in place. Angles are always in
degrees.

Classes:
    Phasor: Immutable complex value with polar helpers

Constants:
    ZERO: 0 + j0
    A: Rotation operator 1∠120°
    A2: Rotation operator 1∠240°
"""

import math
from dataclasses import dataclass

from calc_config import ZERO_MAGNITUDE_TOLERANCE
from domain.errors import DivisionByZero


@dataclass(frozen=True)
class Phasor:
    """
    Immutable complex value representing a sinusoidal quantity.

    Attributes:
        re: Real (in-phase) component.
        im: Imaginary (quadrature) component.

    The named operations (add, sub, mul, div, scale) are also available
    through the arithmetic operators. Multiplying or dividing by a plain
    number scales the phasor.

    Example:
        >>> z1 = Phasor(1, 5)
        >>> va = Phasor.from_polar(5773.5, 0)
        >>> ia = va / z1
        >>> print(f"{ia.magnitude:.1f}A at {ia.angle_degrees:.1f} deg")
        1132.3A at -78.7 deg
        >>> z1.re = 2  # Raises FrozenInstanceError
    """

    re: float
    im: float = 0.0

    @classmethod
    def from_polar(cls, magnitude: float, angle_degrees: float) -> "Phasor":
        """Build a phasor from magnitude and angle in degrees."""
        rad = math.radians(angle_degrees)
        return cls(magnitude * math.cos(rad), magnitude * math.sin(rad))

    @classmethod
    def from_complex(cls, value: complex) -> "Phasor":
        return cls(value.real, value.imag)

    def to_complex(self) -> complex:
        return complex(self.re, self.im)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "Phasor") -> "Phasor":
        return Phasor(self.re + other.re, self.im + other.im)

    def sub(self, other: "Phasor") -> "Phasor":
        return Phasor(self.re - other.re, self.im - other.im)

    def mul(self, other: "Phasor") -> "Phasor":
        return Phasor(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re
        )

    def div(self, other: "Phasor") -> "Phasor":
        """
        Complex division.

        Raises:
            DivisionByZero: If the divisor has zero magnitude.
        """
        if other.magnitude <= ZERO_MAGNITUDE_TOLERANCE:
            raise DivisionByZero(f"Division by zero-magnitude phasor {other}")
        den = other.re * other.re + other.im * other.im
        return Phasor(
            (self.re * other.re + self.im * other.im) / den,
            (self.im * other.re - self.re * other.im) / den
        )

    def scale(self, k: float) -> "Phasor":
        return Phasor(self.re * k, self.im * k)

    def conjugate(self) -> "Phasor":
        return Phasor(self.re, -self.im)

    # -------------------------------------------------------------------------
    # Polar properties
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im)

    @property
    def angle_degrees(self) -> float:
        return math.degrees(math.atan2(self.im, self.re))

    def is_close(self, other: "Phasor", tol: float = 1e-9) -> bool:
        """Return True if the two phasors differ by at most ``tol``."""
        return self.sub(other).magnitude <= tol

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: "Phasor") -> "Phasor":
        return self.add(other)

    def __sub__(self, other: "Phasor") -> "Phasor":
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, Phasor):
            return self.mul(other)
        return self.scale(other)

    def __rmul__(self, other):
        return self.scale(other)

    def __truediv__(self, other):
        if isinstance(other, Phasor):
            return self.div(other)
        return self.div(Phasor(other))

    def __neg__(self) -> "Phasor":
        return self.scale(-1)

    def __abs__(self) -> float:
        return self.magnitude

    def __repr__(self) -> str:
        return (
            f"Phasor({self.magnitude:.4g}∠{self.angle_degrees:.2f}°)"
        )


ZERO = Phasor(0.0, 0.0)

# Symmetrical component rotation operators
A = Phasor.from_polar(1, 120)
A2 = Phasor.from_polar(1, 240)
