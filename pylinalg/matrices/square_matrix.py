"""
Square matrix façade.

Forwards every operation to one concrete SquareMatrixBackend value and wraps
vector results back into ColumnVector / RowVector façades.

Operators:
    A + B, A - B, -A        elementwise
    s * A, A * s            scale by a scalar
    A * B                   matrix product
    A * v                   action on a ColumnVector
    r * A                   left action of a RowVector
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.precision import Precision
from pylinalg.core.protocols import SquareMatrixBackend
from pylinalg.matrices.dispatch import expect, is_scalar, unbox
from pylinalg.matrices.fields import Field
from pylinalg.matrices.vectors import ColumnVector, RowVector


@dataclass(frozen=True, eq=False, repr=False)
class SquareMatrix:
    """
    m x m matrix over the complex or real field.

    Attributes:
        backend: The concrete SquareMatrixBackend value
    """
    backend: SquareMatrixBackend

    __array_ufunc__ = None

    def _wrap(self, backend: SquareMatrixBackend) -> SquareMatrix:
        return SquareMatrix(backend)

    def _operand(self, other: Any, operation: str) -> SquareMatrixBackend:
        expect(other, SquareMatrix, operation)
        return unbox(self.backend, other, operation)

    @property
    def name(self) -> str:
        return self.backend.name

    @property
    def precision(self) -> Precision:
        return self.backend.precision

    @property
    def field(self) -> Field:
        return self.backend.field

    @property
    def m(self) -> int:
        return self.backend.m

    @property
    def entries(self) -> NDArray:
        return self.backend.entries

    def to_numpy(self) -> NDArray:
        return np.array(self.backend.entries, copy=True)

    def __getitem__(self, index: tuple[int, int]):
        i, j = index
        return self.backend.item(i, j)

    def row(self, i: int) -> RowVector:
        return RowVector(self.backend.row(i))

    def column(self, j: int) -> ColumnVector:
        return ColumnVector(self.backend.column(j))

    def rows(self) -> list[RowVector]:
        return [RowVector(row) for row in self.backend.rows()]

    def columns(self) -> list[ColumnVector]:
        return [ColumnVector(column) for column in self.backend.columns()]

    # ── algebra ───────────────────────────────────────────────────────

    def add(self, other: SquareMatrix) -> SquareMatrix:
        return self._wrap(self.backend.add(self._operand(other, 'add')))

    def subtract(self, other: SquareMatrix) -> SquareMatrix:
        return self._wrap(self.backend.subtract(self._operand(other, 'subtract')))

    def additive_inverse(self) -> SquareMatrix:
        return self._wrap(self.backend.additive_inverse())

    def scale(self, scalar: Any) -> SquareMatrix:
        return self._wrap(self.backend.scale(scalar))

    def multiply(self, other: Any):
        """
        Matrix product, action on a column vector, or scaling.

        Args:
            other: SquareMatrix, ColumnVector or scalar

        Returns:
            SquareMatrix for a matrix or scalar operand, ColumnVector for a
            column vector operand
        """
        if isinstance(other, SquareMatrix):
            return self._wrap(self.backend.multiply(self._operand(other, 'multiply')))
        if isinstance(other, ColumnVector):
            return self.act(other)
        return self.scale(other)

    def transpose(self) -> SquareMatrix:
        return self._wrap(self.backend.transpose())

    def conjugate(self) -> SquareMatrix:
        return self._wrap(self.backend.conjugate())

    def adjoint(self) -> SquareMatrix:
        return self._wrap(self.backend.adjoint())

    def act(self, column: ColumnVector) -> ColumnVector:
        expect(column, ColumnVector, 'act')
        return ColumnVector(self.backend.act(unbox(self.backend, column, 'act')))

    def act_left(self, row: RowVector) -> RowVector:
        expect(row, RowVector, 'act_left')
        return RowVector(self.backend.act_left(unbox(self.backend, row, 'act_left')))

    def commutator(self, other: SquareMatrix) -> SquareMatrix:
        """A*B - B*A."""
        return self._wrap(self.backend.commutator(self._operand(other, 'commutator')))

    def tensor_product(self, other: SquareMatrix) -> SquareMatrix:
        """Kronecker product, dimension m_A * m_B."""
        return self._wrap(self.backend.tensor_product(self._operand(other, 'tensor_product')))

    def round(self, tolerance: float | None = None) -> SquareMatrix:
        return self._wrap(self.backend.round(tolerance))

    def is_identity(self) -> bool:
        return self.backend.is_identity()

    def is_hermitian(self) -> bool:
        return self.backend.is_hermitian()

    def is_unitary(self) -> bool:
        return self.backend.is_unitary()

    def map(self, f: Callable[[Any], Any]) -> SquareMatrix:
        return self._wrap(self.backend.map(f))

    def zip(self, other: SquareMatrix, f: Callable[[Any, Any], Any]) -> SquareMatrix:
        return self._wrap(self.backend.zip(self._operand(other, 'zip'), f))

    def is_equivalent_to(self, other: SquareMatrix) -> bool:
        return self.backend.is_equivalent_to(self._operand(other, 'is_equivalent_to'))

    # ── operators ─────────────────────────────────────────────────────

    def __add__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> SquareMatrix:
        return self.additive_inverse()

    def __mul__(self, other):
        if isinstance(other, (SquareMatrix, ColumnVector)) or is_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, RowVector):
            return self.act_left(other)
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.backend == other.backend

    def __hash__(self) -> int:
        return hash(self.backend)

    def __repr__(self) -> str:
        return f"SquareMatrix({self.entries.tolist()!r}, backend={self.name!r})"
