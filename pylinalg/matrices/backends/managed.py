"""
Managed backend: every operation computed in-process with NumPy.

Values are frozen dataclasses over read-only arrays. One implementation
serves both fields and both precisions; the Field and Precision carried by
each value pick the dtype. Elementwise add, subtract and scale and the
matrix product go through small hook methods so the accelerated backend can
swap in native kernels without repeating the algebra.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.precision import FP64, Precision
from pylinalg.core.validation import (
    check_index,
    check_ndim,
    check_same_dimension,
    check_same_length,
    check_square,
)
from pylinalg.matrices.fields import COMPLEX, Field
from pylinalg.numbers.real_number import round_array


@dataclass(frozen=True, eq=False)
class _ManagedValue:
    """
    Shared state and helpers of every managed value.

    Attributes:
        entries: Read-only array of the field's dtype at this precision
        precision: FP32 or FP64
        field: COMPLEX or REAL
    """
    entries: NDArray
    precision: Precision = FP64
    field: Field = COMPLEX

    family: ClassVar[str] = 'managed'

    def __post_init__(self):
        entries = self.field.entries(self.entries, self.precision, type(self).__name__)
        self._check_shape(entries)
        object.__setattr__(self, 'entries', entries)

    def _check_shape(self, entries: NDArray) -> None:
        raise NotImplementedError

    @property
    def name(self) -> str:
        return f"{self.family}_{self.precision.name}_{self.field.name}"

    def _new(self, entries: Any, kind: type | None = None):
        """Build a value of kind (default: this type) sharing every setting but entries."""
        kind = kind or type(self)
        settings = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        settings['entries'] = entries
        return kind(**settings)

    def _scalar(self, value: Any):
        return self.field.scalar(value, self.precision)

    def _coerce(self, scalar: Any) -> np.number:
        return self.field.coerce(scalar, self.precision)

    def _round_tolerance(self, tolerance: float | None) -> float:
        return self.precision.round_tolerance if tolerance is None else tolerance

    # Elementwise hooks, overridden by the accelerated backend.

    def _add(self, a: NDArray, b: NDArray) -> NDArray:
        return a + b

    def _subtract(self, a: NDArray, b: NDArray) -> NDArray:
        return a - b

    def _scale(self, a: NDArray, scalar: np.number) -> NDArray:
        return scalar * a

    def _matmul(self, a: NDArray, b: NDArray) -> NDArray:
        return a @ b

    def is_equivalent_to(self, other: _ManagedValue) -> bool:
        return bool(np.array_equal(self.entries, other.entries))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.name == other.name and self.is_equivalent_to(other)

    def __hash__(self) -> int:
        # +0.0 folds negative zeros so equal values hash alike
        return hash((self.name, self.entries.shape, (self.entries + 0.0).tobytes()))


@dataclass(frozen=True, eq=False)
class _ManagedVector(_ManagedValue):
    """Operations shared by column and row vectors."""

    _transpose_type: ClassVar[type]

    def _check_shape(self, entries: NDArray) -> None:
        check_ndim(entries, 1, type(self).__name__)

    @property
    def length(self) -> int:
        return self.entries.shape[0]

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator:
        return (self._scalar(value) for value in self.entries)

    def item(self, index: int):
        return self._scalar(self.entries[check_index(index, self.length, 'index')])

    def add(self, other: _ManagedVector):
        check_same_length(self.length, other.length, 'add')
        return self._new(self._add(self.entries, other.entries))

    def subtract(self, other: _ManagedVector):
        check_same_length(self.length, other.length, 'subtract')
        return self._new(self._subtract(self.entries, other.entries))

    def additive_inverse(self):
        return self._new(-self.entries)

    def scale(self, scalar: Any):
        return self._new(self._scale(self.entries, self._coerce(scalar)))

    def conjugate(self):
        return self._new(np.conj(self.entries))

    def transpose(self):
        return self._new(self.entries, self._transpose_type)

    def adjoint(self):
        return self._new(np.conj(self.entries), self._transpose_type)

    def _inner(self, a: NDArray, b: NDArray) -> np.number:
        """
        Sum of a[i] * conjugate(b[i]) as a NumPy scalar.

        Computed on real and imaginary parts separately so that the
        imaginary part of <v, v> cancels exactly.
        """
        if not self.field.is_complex:
            return np.sum(a * b)
        real = np.sum(a.real * b.real + a.imag * b.imag)
        imaginary = np.sum(a.imag * b.real - a.real * b.imag)
        return self.entries.dtype.type(complex(real, imaginary))

    def inner_product(self, other: _ManagedVector):
        check_same_length(self.length, other.length, 'inner_product')
        return self._scalar(self._inner(self.entries, other.entries))

    def norm(self) -> np.floating:
        squared = np.real(self._inner(self.entries, self.entries))
        return self.precision.real(np.sqrt(squared))

    def distance(self, other: _ManagedVector) -> np.floating:
        check_same_length(self.length, other.length, 'distance')
        return self.subtract(other).norm()

    def normalized(self):
        """(1 / norm) * v; a zero vector yields non-finite entries."""
        with np.errstate(divide='ignore', invalid='ignore'):
            factor = self.entries.dtype.type(1 / self.norm())
            return self._new(self._scale(self.entries, factor))

    def orthonormal(self):
        return self.normalized()

    def sum(self):
        return self._scalar(np.sum(self.entries))

    def tensor_product(self, other: _ManagedVector):
        """Every pairwise product a[i] * b[j], row-major over (i, j)."""
        return self._new(np.multiply.outer(self.entries, other.entries).ravel())

    def round(self, tolerance: float | None = None):
        return self._new(round_array(self.entries, self._round_tolerance(tolerance)))

    def map(self, f: Callable[[Any], Any]):
        return self._new([f(value) for value in self])

    def zip(self, other: _ManagedVector, f: Callable[[Any, Any], Any]):
        check_same_length(self.length, other.length, 'zip')
        return self._new([f(a, b) for a, b in zip(self, other)])


@dataclass(frozen=True, eq=False)
class ManagedColumnVector(_ManagedVector):
    """Column vector computed in-process."""


@dataclass(frozen=True, eq=False)
class ManagedRowVector(_ManagedVector):
    """Row vector computed in-process."""

    def multiply(self, column: ManagedColumnVector):
        """Bilinear row-times-column product; the column is not conjugated."""
        check_same_length(self.length, column.length, 'multiply')
        return self._scalar(np.sum(self.entries * column.entries))


@dataclass(frozen=True, eq=False)
class ManagedSquareMatrix(_ManagedValue):
    """m x m matrix computed in-process."""

    _row_type: ClassVar[type] = ManagedRowVector
    _column_type: ClassVar[type] = ManagedColumnVector

    def _check_shape(self, entries: NDArray) -> None:
        check_square(entries, type(self).__name__)

    @property
    def m(self) -> int:
        return self.entries.shape[0]

    def item(self, i: int, j: int):
        return self._scalar(self.entries[check_index(i, self.m, 'row'), check_index(j, self.m, 'column')])

    def row(self, i: int):
        return self._new(self.entries[check_index(i, self.m, 'row')], self._row_type)

    def column(self, j: int):
        return self._new(self.entries[:, check_index(j, self.m, 'column')], self._column_type)

    def rows(self) -> list:
        return [self.row(i) for i in range(self.m)]

    def columns(self) -> list:
        return [self.column(j) for j in range(self.m)]

    def add(self, other: ManagedSquareMatrix):
        check_same_dimension(self.m, other.m, 'add')
        return self._new(self._add(self.entries, other.entries))

    def subtract(self, other: ManagedSquareMatrix):
        check_same_dimension(self.m, other.m, 'subtract')
        return self._new(self._subtract(self.entries, other.entries))

    def additive_inverse(self):
        return self._new(-self.entries)

    def scale(self, scalar: Any):
        return self._new(self._scale(self.entries, self._coerce(scalar)))

    def multiply(self, other: ManagedSquareMatrix):
        check_same_dimension(self.m, other.m, 'multiply')
        return self._new(self._matmul(self.entries, other.entries))

    def transpose(self):
        return self._new(self.entries.T)

    def conjugate(self):
        return self._new(np.conj(self.entries))

    def adjoint(self):
        return self._new(np.conj(self.entries).T)

    def act(self, column: ManagedColumnVector):
        """A * v: each row of A dotted (bilinearly) with v."""
        check_same_dimension(self.m, column.length, 'act')
        return self._new(self.entries @ column.entries, self._column_type)

    def act_left(self, row: ManagedRowVector):
        """v * A: r[j] = sum over i of v[i] * A[i, j]."""
        check_same_dimension(self.m, row.length, 'act_left')
        return self._new(row.entries @ self.entries, self._row_type)

    def commutator(self, other: ManagedSquareMatrix):
        check_same_dimension(self.m, other.m, 'commutator')
        return self.multiply(other).subtract(other.multiply(self))

    def tensor_product(self, other: ManagedSquareMatrix):
        return self._new(np.kron(self.entries, other.entries))

    def round(self, tolerance: float | None = None):
        return self._new(round_array(self.entries, self._round_tolerance(tolerance)))

    def is_identity(self, tolerance: float | None = None) -> bool:
        rounded = round_array(self.entries, self._round_tolerance(tolerance))
        return bool(np.array_equal(rounded, np.eye(self.m, dtype=self.entries.dtype)))

    def is_hermitian(self) -> bool:
        return bool(np.array_equal(self.entries, np.conj(self.entries).T))

    def is_unitary(self, tolerance: float | None = None) -> bool:
        adjoint = self.adjoint()
        return (
            self.multiply(adjoint).is_identity(tolerance)
            and adjoint.multiply(self).is_identity(tolerance)
        )

    def map(self, f: Callable[[Any], Any]):
        values = [f(self._scalar(value)) for value in self.entries.ravel()]
        return self._new(self.field.entries(values, self.precision, 'map').reshape(self.m, self.m))

    def zip(self, other: ManagedSquareMatrix, f: Callable[[Any, Any], Any]):
        check_same_dimension(self.m, other.m, 'zip')
        values = [
            f(self._scalar(a), self._scalar(b))
            for a, b in zip(self.entries.ravel(), other.entries.ravel())
        ]
        return self._new(self.field.entries(values, self.precision, 'zip').reshape(self.m, self.m))


ManagedColumnVector._transpose_type = ManagedRowVector
ManagedRowVector._transpose_type = ManagedColumnVector
