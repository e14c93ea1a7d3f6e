"""
Numerical precision descriptors.

A Precision bundles everything that depends on the floating-point width:
the real and complex NumPy dtypes, machine epsilon, and the tolerance used
when snapping values to integers before structural predicates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np

from pylinalg.core.exceptions import ValidationError


PrecisionChoice = Literal['fp32', 'fp64']

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


@dataclass(frozen=True)
class Precision:
    """
    Floating-point precision used by every value of one factory.

    Attributes:
        name: 'fp32' or 'fp64'
        real_dtype: NumPy dtype of real scalars
        complex_dtype: NumPy dtype of complex entries
        epsilon: Machine epsilon of real_dtype
        round_tolerance: Distance to the nearest integer within which
            round() snaps a component onto that integer
    """
    name: str
    real_dtype: type[np.floating]
    complex_dtype: type[np.complexfloating]
    epsilon: float
    round_tolerance: float

    def __str__(self) -> str:
        return self.name

    def real(self, value) -> np.floating:
        """Convert a Python/NumPy real number to this precision."""
        return self.real_dtype(value)


FP32 = Precision(
    name='fp32',
    real_dtype=np.float32,
    complex_dtype=np.complex64,
    epsilon=EPSILON_32,
    round_tolerance=1e-5,
)

FP64 = Precision(
    name='fp64',
    real_dtype=np.float64,
    complex_dtype=np.complex128,
    epsilon=EPSILON_64,
    round_tolerance=1e-6,
)

_PRECISIONS = {'fp32': FP32, 'fp64': FP64}


def resolve_precision(precision: PrecisionChoice | Precision) -> Precision:
    """
    Look up a Precision by name.

    Args:
        precision: 'fp32', 'fp64' or an existing Precision

    Returns:
        The matching Precision

    Raises:
        ValidationError: If the name is unknown
    """
    if isinstance(precision, Precision):
        return precision
    try:
        return _PRECISIONS[precision]
    except (KeyError, TypeError):
        raise ValidationError(
            f"Unknown precision: {precision!r}. Must be 'fp32' or 'fp64'."
        ) from None


def precision_of(dtype: np.dtype | type) -> Precision:
    """
    Precision matching a real or complex NumPy dtype.

    float32/complex64 map to FP32, float64/complex128 to FP64.
    """
    dtype = np.dtype(dtype)
    if dtype in (np.dtype(np.float32), np.dtype(np.complex64)):
        return FP32
    if dtype in (np.dtype(np.float64), np.dtype(np.complex128)):
        return FP64
    raise ValidationError(f"No precision for dtype {dtype}")


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)
