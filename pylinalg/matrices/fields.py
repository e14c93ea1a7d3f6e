"""
Scalar fields a vector or matrix is defined over.

One backend implementation serves both fields; the Field decides the entry
dtype, how entries and scalars are converted, and what a single entry looks
like to callers (ComplexNumber for the complex field, a NumPy real scalar
for the real field).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.precision import Precision
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_numeric_array, check_real_valued
from pylinalg.numbers.complex_number import ComplexNumber


@dataclass(frozen=True)
class Field:
    """
    The complex or the real field.

    Attributes:
        name: 'complex' or 'real'
        is_complex: True for the complex field
    """
    name: str
    is_complex: bool

    def __str__(self) -> str:
        return self.name

    def dtype(self, precision: Precision) -> np.dtype:
        if self.is_complex:
            return np.dtype(precision.complex_dtype)
        return np.dtype(precision.real_dtype)

    def entries(self, entries: ArrayLike, precision: Precision, name: str) -> NDArray:
        """
        Convert entries to a fresh read-only array of this field's dtype.

        Raises:
            ValidationError: If entries are not numeric, or complex values
                are given to the real field
        """
        array = check_numeric_array(entries, name)
        if not self.is_complex:
            check_real_valued(array, name)
            array = array.real
        result = np.array(array, dtype=self.dtype(precision), copy=True)
        result.setflags(write=False)
        return result

    def scalar(self, value: Any, precision: Precision) -> ComplexNumber | np.floating:
        """Present one array element to callers."""
        if self.is_complex:
            value = precision.complex_dtype(value)
            return ComplexNumber(precision.real(value.real), precision.real(value.imag))
        return precision.real(np.real(value))

    def coerce(self, scalar: Any, precision: Precision) -> np.number:
        """
        Convert a caller-supplied scalar to this field's NumPy scalar type.

        Raises:
            ValidationError: If scalar is not a number, or is complex with a
                nonzero imaginary part and this is the real field
        """
        value = ComplexNumber.of(scalar, precision)
        if self.is_complex:
            return precision.complex_dtype(complex(value))
        if value.imaginary != 0:
            raise ValidationError(
                f"real field cannot be scaled by complex scalar {complex(value)}"
            )
        return value.real


COMPLEX = Field(name='complex', is_complex=True)
REAL = Field(name='real', is_complex=False)

_FIELDS = {'complex': COMPLEX, 'real': REAL}


def resolve_field(field: str | Field) -> Field:
    """
    Look up a Field by name.

    Raises:
        ValidationError: If the name is unknown
    """
    if isinstance(field, Field):
        return field
    try:
        return _FIELDS[field]
    except (KeyError, TypeError):
        raise ValidationError(
            f"Unknown field: {field!r}. Must be 'complex' or 'real'."
        ) from None
