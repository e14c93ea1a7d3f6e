"""
Column and row vector façades.

Each façade holds one concrete backend value and forwards every operation
to it, so that call sites are written once regardless of whether the value
came from the managed or the accelerated factory. Results are wrapped back
into façades; scalars come back as ComplexNumber (complex field) or NumPy
real scalars (real field).

Operators:
    a + b, a - b, -a        elementwise
    s * v, v * s            scale by a scalar
    a * b                   inner product (two columns or two rows)
    row * column            bilinear product, no conjugation
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.precision import Precision
from pylinalg.core.protocols import ColumnVectorBackend, RowVectorBackend
from pylinalg.matrices.dispatch import expect, is_scalar, unbox
from pylinalg.matrices.fields import Field


@dataclass(frozen=True, eq=False)
class _Vector:
    """Forwarding shared by ColumnVector and RowVector."""
    backend: Any

    # Keeps NumPy scalars on the left of '*' from broadcasting over the vector.
    __array_ufunc__ = None

    _transpose_facade: ClassVar[type]

    def _wrap(self, backend: Any):
        return type(self)(backend)

    def _operand(self, other: Any, operation: str):
        expect(other, type(self), operation)
        return unbox(self.backend, other, operation)

    # ── properties ────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Backend name, e.g. 'managed_fp64_complex'."""
        return self.backend.name

    @property
    def precision(self) -> Precision:
        return self.backend.precision

    @property
    def field(self) -> Field:
        return self.backend.field

    @property
    def length(self) -> int:
        return self.backend.length

    @property
    def entries(self) -> NDArray:
        """Read-only view of the entries."""
        return self.backend.entries

    def to_numpy(self) -> NDArray:
        """Writeable copy of the entries."""
        return np.array(self.backend.entries, copy=True)

    def __len__(self) -> int:
        return self.backend.length

    def __iter__(self) -> Iterator:
        return iter(self.backend)

    def __getitem__(self, index: int):
        return self.backend.item(index)

    # ── algebra ───────────────────────────────────────────────────────

    def add(self, other):
        return self._wrap(self.backend.add(self._operand(other, 'add')))

    def subtract(self, other):
        return self._wrap(self.backend.subtract(self._operand(other, 'subtract')))

    def additive_inverse(self):
        return self._wrap(self.backend.additive_inverse())

    def scale(self, scalar: Any):
        return self._wrap(self.backend.scale(scalar))

    def multiply(self, scalar: Any):
        return self.scale(scalar)

    def conjugate(self):
        return self._wrap(self.backend.conjugate())

    def transpose(self):
        return self._transpose_facade(self.backend.transpose())

    def adjoint(self):
        return self._transpose_facade(self.backend.adjoint())

    def inner_product(self, other):
        """Sesquilinear: linear in self, conjugate-linear in other."""
        return self.backend.inner_product(self._operand(other, 'inner_product'))

    def norm(self) -> np.floating:
        return self.backend.norm()

    def distance(self, other) -> np.floating:
        return self.backend.distance(self._operand(other, 'distance'))

    def normalized(self):
        return self._wrap(self.backend.normalized())

    def orthonormal(self):
        return self._wrap(self.backend.orthonormal())

    def sum(self):
        return self.backend.sum()

    def tensor_product(self, other):
        return self._wrap(self.backend.tensor_product(self._operand(other, 'tensor_product')))

    def round(self, tolerance: float | None = None):
        return self._wrap(self.backend.round(tolerance))

    def map(self, f: Callable[[Any], Any]):
        return self._wrap(self.backend.map(f))

    def zip(self, other, f: Callable[[Any, Any], Any]):
        return self._wrap(self.backend.zip(self._operand(other, 'zip'), f))

    def is_equivalent_to(self, other) -> bool:
        return self.backend.is_equivalent_to(self._operand(other, 'is_equivalent_to'))

    # ── operators ─────────────────────────────────────────────────────

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.additive_inverse()

    def __mul__(self, other):
        if isinstance(other, type(self)):
            return self.inner_product(other)
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.backend == other.backend

    def __hash__(self) -> int:
        return hash(self.backend)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.entries.tolist()!r}, backend={self.name!r})"


@dataclass(frozen=True, eq=False, repr=False)
class ColumnVector(_Vector):
    """
    Column vector (ket) over the complex or real field.

    Attributes:
        backend: The concrete ColumnVectorBackend value
    """
    backend: ColumnVectorBackend


@dataclass(frozen=True, eq=False, repr=False)
class RowVector(_Vector):
    """
    Row vector (bra) over the complex or real field.

    A RowVector times a ColumnVector is the bilinear product
    sum(a[i] * b[i]); unlike inner_product, nothing is conjugated.

    Attributes:
        backend: The concrete RowVectorBackend value
    """
    backend: RowVectorBackend

    def multiply(self, other: Any):
        """Bilinear product with a ColumnVector, or scaling by a scalar."""
        if isinstance(other, ColumnVector):
            return self.backend.multiply(unbox(self.backend, other, 'multiply'))
        return self.scale(other)

    def __mul__(self, other):
        if isinstance(other, ColumnVector):
            return self.multiply(other)
        return super().__mul__(other)


ColumnVector._transpose_facade = RowVector
RowVector._transpose_facade = ColumnVector
