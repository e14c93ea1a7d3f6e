"""
Real scalar helpers.

Real scalars are plain NumPy float32/float64 values; this module only adds
construction at a given precision and the integer-snapping round shared by
ComplexNumber, Polar and the matrix backends.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.precision import Precision, PrecisionChoice, resolve_precision


def R(value: float, precision: PrecisionChoice | Precision = 'fp64') -> np.floating:
    """Real scalar at the given precision."""
    return resolve_precision(precision).real(value)


def pi(precision: PrecisionChoice | Precision = 'fp64') -> np.floating:
    return R(np.pi, precision)


def round_real(value: np.floating, tolerance: float) -> np.floating:
    """
    Snap value onto the nearest integer when within tolerance.

    Values farther away, and non-finite values, are returned unchanged.
    A snapped zero is always +0.0.
    """
    return round_array(np.asarray(value), tolerance)[()]


def round_array(array: NDArray, tolerance: float) -> NDArray:
    """
    Elementwise round_real over a real or complex array.

    Complex entries are snapped component by component. Returns a new array
    of the same dtype.
    """
    if np.iscomplexobj(array):
        result = np.empty_like(array)
        result.real = round_array(array.real, tolerance)
        result.imag = round_array(array.imag, tolerance)
        return result

    nearest = np.rint(array)
    with np.errstate(invalid='ignore'):
        close = np.abs(array - nearest) <= tolerance
    return np.where(close, nearest + array.dtype.type(0.0), array).astype(array.dtype)
