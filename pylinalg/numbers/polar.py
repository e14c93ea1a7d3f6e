"""
Polar representation of complex numbers.

Addition and subtraction go through the cartesian form; multiplication and
division act on magnitude and phase directly, and normalize the resulting
phase into [0, 2*pi).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pylinalg.core.compute.precision import FP64, Precision, PrecisionChoice, precision_of, resolve_precision
from pylinalg.numbers.complex_number import ComplexNumber
from pylinalg.numbers.real_number import round_real


@dataclass(frozen=True)
class Polar:
    """
    Complex number as (magnitude, phase).

    Attributes:
        magnitude: Distance from the origin
        phase: Angle in radians, not necessarily normalized
    """
    magnitude: np.floating
    phase: np.floating

    __array_ufunc__ = None

    def __post_init__(self):
        dtype = type(self.magnitude) if isinstance(self.magnitude, (np.float32, np.float64)) else np.float64
        object.__setattr__(self, 'magnitude', dtype(self.magnitude))
        object.__setattr__(self, 'phase', dtype(self.phase))

    @property
    def precision(self) -> Precision:
        return precision_of(type(self.magnitude))

    def add(self, other: Polar) -> Polar:
        return to_polar(self.to_cartesian() + other.to_cartesian())

    def subtract(self, other: Polar) -> Polar:
        return to_polar(self.to_cartesian() - other.to_cartesian())

    def multiply(self, other: Polar) -> Polar:
        return Polar(
            self.magnitude * other.magnitude,
            normalize_phase(self.phase + other.phase),
        )

    def divide(self, other: Polar) -> Polar:
        with np.errstate(divide='ignore', invalid='ignore'):
            magnitude = self.magnitude / other.magnitude
        return Polar(magnitude, normalize_phase(self.phase - other.phase))

    def round(self, tolerance: float | None = None) -> Polar:
        if tolerance is None:
            tolerance = self.precision.round_tolerance
        return Polar(
            round_real(self.magnitude, tolerance),
            round_real(self.phase, tolerance),
        )

    def to_cartesian(self) -> ComplexNumber:
        return to_cartesian(self)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide


def P(magnitude: float, phase: float, precision: PrecisionChoice | Precision = FP64) -> Polar:
    """Construct a Polar value at the given precision."""
    p = resolve_precision(precision)
    return Polar(p.real(magnitude), p.real(phase))


def normalize_phase(phase: np.floating) -> np.floating:
    """Map a phase into [0, 2*pi)."""
    dtype = type(phase) if isinstance(phase, (np.float32, np.float64)) else np.float64
    full_turn = dtype(2 * np.pi)
    phase = dtype(phase)
    normalized = np.mod(phase, full_turn)
    # tiny negative phases round up to exactly one full turn
    if normalized >= full_turn:
        return dtype(0)
    return dtype(normalized)


def to_polar(value: ComplexNumber) -> Polar:
    """Magnitude and atan2 phase, in (-pi, pi]."""
    return Polar(value.modulus(), np.arctan2(value.imaginary, value.real))


def to_cartesian(polar: Polar) -> ComplexNumber:
    return ComplexNumber(
        polar.magnitude * np.cos(polar.phase),
        polar.magnitude * np.sin(polar.phase),
    )
