"""
Core protocols for pylinalg.

These define the operation contracts every concrete backend satisfies, one
per shape, plus the contract of the native kernels the accelerated backend
delegates to. We use Protocol (structural typing) rather than ABC (nominal
typing) so backends share implementation freely while call sites stay
backend-agnostic.

Design Principles:
    - One contract per shape: column vector, row vector, square matrix
    - Every operation returns a new value; nothing mutates
    - Binary operations take an operand of the SAME concrete backend type;
      the dispatch layer guarantees this before delegating
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class NativeKernels(Protocol):
    """
    Protocol for the accelerated native library.

    Each method is one blocking foreign call. Inputs are NumPy arrays that
    the implementation must not modify; outputs are fresh NumPy arrays of
    the same dtype. Failures raise AcceleratorError carrying the status the
    native call reported.
    """

    @property
    def name(self) -> str:
        """
        Kernels identifier.

        Convention: '{library}_{device}'
        Examples: 'torch_cuda', 'torch_mps', 'torch_cpu'
        """
        ...

    def warmup(self) -> int:
        """Trivial round trip through the native library. Returns 11."""
        ...

    def add(self, a: NDArray, b: NDArray) -> NDArray:
        """Elementwise a + b for equally shaped arrays."""
        ...

    def subtract(self, a: NDArray, b: NDArray) -> NDArray:
        """Elementwise a - b for equally shaped arrays."""
        ...

    def scale(self, a: NDArray, scalar: complex | float) -> NDArray:
        """Elementwise scalar * a."""
        ...

    def matmul(self, a: NDArray, b: NDArray) -> NDArray:
        """Matrix product of two square arrays of equal dimension."""
        ...


@runtime_checkable
class VectorBackend(Protocol):
    """
    Operations shared by column and row vector backends.

    Scalars are ComplexNumber values for the complex field and NumPy real
    scalars for the real field.
    """

    entries: NDArray

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{family}_{precision}_{field}'
        Examples: 'managed_fp64_complex', 'accelerated_torch_cuda_fp32_real'
        """
        ...

    @property
    def length(self) -> int:
        ...

    def item(self, index: int) -> Any:
        ...

    def add(self, other: Any) -> Any:
        ...

    def subtract(self, other: Any) -> Any:
        ...

    def additive_inverse(self) -> Any:
        ...

    def scale(self, scalar: Any) -> Any:
        ...

    def conjugate(self) -> Any:
        ...

    def transpose(self) -> Any:
        ...

    def adjoint(self) -> Any:
        ...

    def inner_product(self, other: Any) -> Any:
        """Sesquilinear: sum of a[i] * conjugate(b[i])."""
        ...

    def norm(self) -> np.floating:
        ...

    def distance(self, other: Any) -> np.floating:
        ...

    def normalized(self) -> Any:
        ...

    def sum(self) -> Any:
        ...

    def tensor_product(self, other: Any) -> Any:
        ...

    def round(self, tolerance: float | None = None) -> Any:
        ...

    def map(self, f: Callable[[Any], Any]) -> Any:
        ...

    def zip(self, other: Any, f: Callable[[Any, Any], Any]) -> Any:
        ...

    def is_equivalent_to(self, other: Any) -> bool:
        ...


@runtime_checkable
class ColumnVectorBackend(VectorBackend, Protocol):
    """Backend contract for column vectors. transpose() yields a RowVectorBackend."""

    def transpose(self) -> RowVectorBackend:
        ...

    def adjoint(self) -> RowVectorBackend:
        ...


@runtime_checkable
class RowVectorBackend(VectorBackend, Protocol):
    """
    Backend contract for row vectors.

    Adds the bilinear row-times-column product, which is NOT the inner
    product: the right operand is not conjugated.
    """

    def transpose(self) -> ColumnVectorBackend:
        ...

    def adjoint(self) -> ColumnVectorBackend:
        ...

    def multiply(self, column: ColumnVectorBackend) -> Any:
        """Bilinear product: sum of a[i] * b[i]."""
        ...


@runtime_checkable
class SquareMatrixBackend(Protocol):
    """
    Backend contract for m x m matrices.

    Structural predicates round before comparing, except is_hermitian
    which compares exactly.
    """

    entries: NDArray

    @property
    def name(self) -> str:
        ...

    @property
    def m(self) -> int:
        ...

    def item(self, i: int, j: int) -> Any:
        ...

    def row(self, i: int) -> RowVectorBackend:
        ...

    def column(self, j: int) -> ColumnVectorBackend:
        ...

    def add(self, other: SquareMatrixBackend) -> SquareMatrixBackend:
        ...

    def subtract(self, other: SquareMatrixBackend) -> SquareMatrixBackend:
        ...

    def additive_inverse(self) -> SquareMatrixBackend:
        ...

    def scale(self, scalar: Any) -> SquareMatrixBackend:
        ...

    def multiply(self, other: SquareMatrixBackend) -> SquareMatrixBackend:
        """Matrix product: (i, j) = sum over k of A[i, k] * B[k, j]."""
        ...

    def transpose(self) -> SquareMatrixBackend:
        ...

    def conjugate(self) -> SquareMatrixBackend:
        ...

    def adjoint(self) -> SquareMatrixBackend:
        ...

    def act(self, column: ColumnVectorBackend) -> ColumnVectorBackend:
        ...

    def act_left(self, row: RowVectorBackend) -> RowVectorBackend:
        """Left action: r[j] = sum over i of v[i] * A[i, j]."""
        ...

    def commutator(self, other: SquareMatrixBackend) -> SquareMatrixBackend:
        ...

    def tensor_product(self, other: SquareMatrixBackend) -> SquareMatrixBackend:
        ...

    def round(self, tolerance: float | None = None) -> SquareMatrixBackend:
        ...

    def is_identity(self) -> bool:
        ...

    def is_hermitian(self) -> bool:
        ...

    def is_unitary(self) -> bool:
        ...

    def map(self, f: Callable[[Any], Any]) -> SquareMatrixBackend:
        ...

    def zip(self, other: SquareMatrixBackend, f: Callable[[Any, Any], Any]) -> SquareMatrixBackend:
        ...

    def is_equivalent_to(self, other: SquareMatrixBackend) -> bool:
        ...
