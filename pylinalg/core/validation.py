"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion beyond numeric array conversion
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError


def check_numeric_array(entries: ArrayLike, name: str) -> NDArray[Any]:
    """
    Convert entries to a numeric (real or complex) NumPy array.

    Object arrays are accepted when every element converts with complex(),
    which covers ComplexNumber values and mixed Python/NumPy scalars.

    Args:
        entries: Array-like of numbers
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with a real floating or complex dtype

    Raises:
        ValidationError: If entries cannot be converted to numbers
    """
    try:
        array = np.asarray(entries)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if array.dtype == object:
        try:
            flat = [complex(value) for value in array.ravel()]
        except (ValueError, TypeError) as e:
            raise ValidationError(
                f"{name}: entries must be numbers, got {e}"
            ) from e
        array = np.array(flat, dtype=np.complex128).reshape(array.shape)

    if array.dtype == np.bool_ or not np.issubdtype(array.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected numeric data"
        )

    if np.issubdtype(array.dtype, np.integer):
        array = array.astype(np.float64)

    return array


def check_real_valued(array: NDArray[Any], name: str) -> None:
    """
    Verify a complex array has no imaginary component.

    Raises:
        ValidationError: If any entry has a nonzero imaginary part
    """
    if np.iscomplexobj(array) and np.any(array.imag != 0):
        n_complex = int(np.count_nonzero(array.imag))
        raise ValidationError(
            f"{name}: real field cannot hold complex values "
            f"({n_complex} entries with nonzero imaginary part)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify array is a square 2D grid.

    Raises:
        DimensionError: If array is not 2D or rows != columns
    """
    check_ndim(array, 2, name)
    rows, columns = array.shape
    if rows != columns:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {array.shape}",
            expected=(rows, rows),
            actual=(rows, columns),
        )


def check_same_length(left: int, right: int, operation: str) -> None:
    """
    Verify two vector operands have equal length.

    Raises:
        DimensionError: If the lengths differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: operands must have equal length, got {left} and {right}",
            expected=left,
            actual=right,
        )


def check_same_dimension(left: int, right: int, operation: str) -> None:
    """
    Verify two square-matrix (or matrix and vector) operands agree on dimension.

    Raises:
        DimensionError: If the dimensions differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: operands must have equal dimension, got {left} and {right}",
            expected=left,
            actual=right,
        )


def check_size(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer size.

    Returns:
        value as int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify index addresses one of size positions; negative indices count from the end.

    Raises:
        ValidationError: If index is not an integer
        IndexError: If index is out of range
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer index, got {type(index).__name__}")
    if not -size <= index < size:
        raise IndexError(f"{name}: index {index} out of range for size {size}")
    return int(index) % size
