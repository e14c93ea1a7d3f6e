"""
Complex scalar arithmetic at a fixed floating-point precision.

ComplexNumber is an immutable (real, imaginary) pair of NumPy float32 or
float64 scalars. Both components always share one dtype; operands of
another precision are converted to the left operand's precision.

Equality is exact component-wise equality. Use round() first to absorb
floating-point noise before comparing against integer-valued results.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from pylinalg.core.compute.precision import (
    FP64,
    Precision,
    PrecisionChoice,
    precision_of,
    resolve_precision,
)
from pylinalg.core.exceptions import ValidationError
from pylinalg.numbers.real_number import round_real


@dataclass(frozen=True)
class ComplexNumber:
    """
    Complex number with components of one NumPy floating dtype.

    Attributes:
        real: Real component
        imaginary: Imaginary component
    """
    real: np.floating
    imaginary: np.floating

    # Keeps NumPy scalars on the left of an operator from broadcasting
    # over this object; Python then falls back to the reflected method.
    __array_ufunc__ = None

    def __post_init__(self):
        if isinstance(self.real, (np.float32, np.float64)):
            dtype = type(self.real)
        elif isinstance(self.imaginary, (np.float32, np.float64)):
            dtype = type(self.imaginary)
        else:
            dtype = np.float64
        object.__setattr__(self, 'real', dtype(self.real))
        object.__setattr__(self, 'imaginary', dtype(self.imaginary))

    # ── construction ──────────────────────────────────────────────────

    @classmethod
    def of(cls, value: ComplexLike, precision: PrecisionChoice | Precision = FP64) -> ComplexNumber:
        """
        Coerce a scalar to a ComplexNumber at the given precision.

        Accepts ComplexNumber, (real, imaginary) tuples, Python/NumPy
        complex numbers and real numbers.

        Raises:
            ValidationError: If value is not a number
        """
        p = resolve_precision(precision)
        if isinstance(value, ComplexNumber):
            return cls(p.real(value.real), p.real(value.imaginary))
        if isinstance(value, tuple) and len(value) == 2:
            real, imaginary = value
            return cls(p.real(real), p.real(imaginary))
        if isinstance(value, (bool, np.bool_)):
            raise ValidationError(f"Expected a number, got {type(value).__name__}")
        if isinstance(value, (numbers.Complex, np.number)):
            value = complex(value)
            return cls(p.real(value.real), p.real(value.imag))
        raise ValidationError(f"Expected a number, got {type(value).__name__}")

    @classmethod
    def zero(cls, precision: PrecisionChoice | Precision = FP64) -> ComplexNumber:
        return C(0, 0, precision)

    @classmethod
    def one(cls, precision: PrecisionChoice | Precision = FP64) -> ComplexNumber:
        return C(1, 0, precision)

    @classmethod
    def negative_one(cls, precision: PrecisionChoice | Precision = FP64) -> ComplexNumber:
        return C(-1, 0, precision)

    @classmethod
    def two(cls, precision: PrecisionChoice | Precision = FP64) -> ComplexNumber:
        return C(2, 0, precision)

    @property
    def precision(self) -> Precision:
        return precision_of(type(self.real))

    # ── arithmetic ────────────────────────────────────────────────────

    def _coerce(self, other: Any) -> ComplexNumber:
        return ComplexNumber.of(other, self.precision)

    def add(self, other: ComplexLike) -> ComplexNumber:
        other = self._coerce(other)
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: ComplexLike) -> ComplexNumber:
        other = self._coerce(other)
        return ComplexNumber(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: ComplexLike) -> ComplexNumber:
        other = self._coerce(other)
        return ComplexNumber(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + other.real * self.imaginary,
        )

    def divide(self, other: ComplexLike) -> ComplexNumber:
        """
        Divide by multiplying through with the conjugate of the denominator.

        A zero-modulus denominator yields non-finite components.
        """
        other = self._coerce(other)
        conjugate = other.conjugate()
        numerator = self.multiply(conjugate)
        denominator = other.multiply(conjugate).real
        with np.errstate(divide='ignore', invalid='ignore'):
            return ComplexNumber(
                numerator.real / denominator,
                numerator.imaginary / denominator,
            )

    def additive_inverse(self) -> ComplexNumber:
        return ComplexNumber(-self.real, -self.imaginary)

    def conjugate(self) -> ComplexNumber:
        return ComplexNumber(self.real, -self.imaginary)

    def square(self) -> ComplexNumber:
        return self.multiply(self)

    def modulus(self) -> np.floating:
        return np.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    def sqrt(self) -> ComplexNumber:
        """
        Principal square root.

        The real part is non-negative; the imaginary part carries the sign
        of this number's imaginary part (including -0.0).
        """
        modulus = self.modulus()
        two = type(self.real)(2)
        real = np.sqrt((modulus + self.real) / two)
        imaginary = np.copysign(np.sqrt(np.maximum((modulus - self.real) / two, 0)), self.imaginary)
        return ComplexNumber(real, imaginary)

    def round(self, tolerance: float | None = None) -> ComplexNumber:
        """
        Snap each component to the nearest integer when within tolerance.

        Args:
            tolerance: Snapping distance; defaults to the precision's
                round_tolerance
        """
        if tolerance is None:
            tolerance = self.precision.round_tolerance
        return ComplexNumber(
            round_real(self.real, tolerance),
            round_real(self.imaginary, tolerance),
        )

    # ── operators ─────────────────────────────────────────────────────

    def __add__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self._coerce(other).add(self)

    def __sub__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self._coerce(other).subtract(self)

    def __mul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self._coerce(other).multiply(self)

    def __truediv__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self._coerce(other).divide(self)

    def __neg__(self) -> ComplexNumber:
        return self.additive_inverse()

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imaginary))

    def __str__(self) -> str:
        sign = '-' if np.signbit(self.imaginary) else '+'
        return f"({self.real} {sign} {abs(self.imaginary)}i)"


ComplexLike = Union[ComplexNumber, tuple, complex, float, int, np.number]


def _is_scalar(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (ComplexNumber, numbers.Complex, np.number))


def C(
    real: float,
    imaginary: float = 0,
    precision: PrecisionChoice | Precision = FP64,
) -> ComplexNumber:
    """Construct a ComplexNumber from components at the given precision."""
    p = resolve_precision(precision)
    return ComplexNumber(p.real(real), p.real(imaginary))
