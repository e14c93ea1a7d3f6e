"""
Accelerated backend: managed algebra with native elementwise kernels.

Elementwise add, subtract and scale, and the matrix product, are handed to
a NativeKernels object once the operand holds at least native_threshold
entries. Everything else (tensor products, predicates, map/zip, vector
action) runs the managed algorithms on the arrays the kernels returned.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from numpy.typing import NDArray

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import NativeKernels
from pylinalg.matrices.backends.managed import (
    ManagedColumnVector,
    ManagedRowVector,
    ManagedSquareMatrix,
)


class _NativeDelegation:
    """Overrides the managed elementwise hooks with native kernel calls."""

    family = 'accelerated'

    def __post_init__(self):
        if self.kernels is None:
            raise ValidationError(f"{type(self).__name__}: kernels are required")
        if self.native_threshold < 0:
            raise ValidationError(
                f"native_threshold: must be non-negative, got {self.native_threshold}"
            )
        super().__post_init__()

    @property
    def name(self) -> str:
        return f"{self.family}_{self.kernels.name}_{self.precision.name}_{self.field.name}"

    def _delegates(self, a: NDArray) -> bool:
        return a.size >= self.native_threshold

    def _add(self, a: NDArray, b: NDArray) -> NDArray:
        if self._delegates(a):
            return self.kernels.add(a, b)
        return super()._add(a, b)

    def _subtract(self, a: NDArray, b: NDArray) -> NDArray:
        if self._delegates(a):
            return self.kernels.subtract(a, b)
        return super()._subtract(a, b)

    def _scale(self, a: NDArray, scalar: Any) -> NDArray:
        if self._delegates(a):
            return self.kernels.scale(a, scalar.item())
        return super()._scale(a, scalar)

    def _matmul(self, a: NDArray, b: NDArray) -> NDArray:
        if self._delegates(a):
            return self.kernels.matmul(a, b)
        return super()._matmul(a, b)


@dataclass(frozen=True, eq=False)
class AcceleratedColumnVector(_NativeDelegation, ManagedColumnVector):
    """Column vector with native elementwise kernels."""
    kernels: NativeKernels | None = dataclasses.field(default=None, repr=False)
    native_threshold: int = 1


@dataclass(frozen=True, eq=False)
class AcceleratedRowVector(_NativeDelegation, ManagedRowVector):
    """Row vector with native elementwise kernels."""
    kernels: NativeKernels | None = dataclasses.field(default=None, repr=False)
    native_threshold: int = 1


@dataclass(frozen=True, eq=False)
class AcceleratedSquareMatrix(_NativeDelegation, ManagedSquareMatrix):
    """m x m matrix with native elementwise kernels and matrix product."""
    kernels: NativeKernels | None = dataclasses.field(default=None, repr=False)
    native_threshold: int = 1

    _row_type = AcceleratedRowVector
    _column_type = AcceleratedColumnVector


AcceleratedColumnVector._transpose_type = AcceleratedRowVector
AcceleratedRowVector._transpose_type = AcceleratedColumnVector
