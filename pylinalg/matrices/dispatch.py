"""
Operand checks shared by the façade types.

A façade holds exactly one concrete backend value. Before a binary
operation is forwarded, the operand's backend is unwrapped here and checked
against the receiver's: two values built by different factories (another
backend family, precision or field) are never combined or coerced.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from pylinalg.core.exceptions import BackendMismatchError
from pylinalg.numbers.complex_number import ComplexNumber


def unbox(left: Any, right: Any, operation: str) -> Any:
    """
    Return the right operand's backend after checking it matches left.

    Args:
        left: Backend value of the receiver
        right: Façade value of the operand
        operation: Operation name for the error message

    Raises:
        BackendMismatchError: If the two backends differ
    """
    backend = right.backend
    if type(backend).family != type(left).family or backend.name != left.name:
        raise BackendMismatchError(
            f"{operation}: cannot combine {left.name} with {backend.name}",
            left=left.name,
            right=backend.name,
        )
    return backend


def expect(value: Any, kind: type, operation: str) -> None:
    """
    Raises:
        TypeError: If value is not a kind
    """
    if not isinstance(value, kind):
        raise TypeError(
            f"{operation}: expected {kind.__name__}, got {type(value).__name__}"
        )


def is_scalar(value: Any) -> bool:
    """True for ComplexNumber and Python/NumPy numbers other than bools."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (ComplexNumber, numbers.Complex, np.number))
