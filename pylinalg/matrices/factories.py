"""
Factory layer: the only way to construct vectors and matrices.

A Matrices value fixes one (field, precision, backend) combination; every
value it builds carries the matching concrete backend inside its façade.
The module-level M, V, U, zero, identity, zero_column_vector and
zero_row_vector resolve a Matrices value from their keyword arguments, with
defaults taken from the environment (see pylinalg.core.config).

Usage:
    >>> from pylinalg import M, V, identity
    >>> a = V([1 + 2j, 3 + 5j], precision='fp32', backend='managed')
    >>> A = M([[0, 1], [1, 0]], precision='fp32', backend='managed')
    >>> (A * A).is_identity()
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike

from pylinalg.core.compute.device import DeviceInfo, detect_gpu, torch_available
from pylinalg.core.compute.precision import FP64, Precision, PrecisionChoice, resolve_precision
from pylinalg.core.config import BACKENDS, BackendChoice, load_settings
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import NativeKernels
from pylinalg.core.validation import check_size
from pylinalg.matrices.backends.accelerated import (
    AcceleratedColumnVector,
    AcceleratedRowVector,
    AcceleratedSquareMatrix,
)
from pylinalg.matrices.backends.managed import (
    ManagedColumnVector,
    ManagedRowVector,
    ManagedSquareMatrix,
)
from pylinalg.matrices.fields import COMPLEX, Field, resolve_field
from pylinalg.matrices.square_matrix import SquareMatrix
from pylinalg.matrices.vectors import ColumnVector, RowVector
from pylinalg.numbers.complex_number import ComplexNumber

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Matrices:
    """
    Constructors for one (field, precision, backend) combination.

    Attributes:
        field: COMPLEX or REAL
        precision: FP32 or FP64
        kernels: Native kernels for the accelerated backend; None selects
            the managed backend
        native_threshold: Minimum entry count before the accelerated
            backend delegates to the kernels
    """
    field: Field = COMPLEX
    precision: Precision = FP64
    kernels: NativeKernels | None = None
    native_threshold: int = 1

    def __post_init__(self):
        object.__setattr__(self, 'field', resolve_field(self.field))
        object.__setattr__(self, 'precision', resolve_precision(self.precision))
        if self.kernels is not None and not isinstance(self.kernels, NativeKernels):
            raise ValidationError(
                f"kernels: {type(self.kernels).__name__} does not implement NativeKernels"
            )
        check_size(self.native_threshold, 'native_threshold')

    @property
    def backend(self) -> str:
        return 'managed' if self.kernels is None else 'accelerated'

    def _build(self, managed: type, accelerated: type, entries: Any):
        if self.kernels is None:
            return managed(entries, self.precision, self.field)
        return accelerated(
            entries,
            self.precision,
            self.field,
            kernels=self.kernels,
            native_threshold=self.native_threshold,
        )

    def _vector_entries(self, entries: Any, initializer: Callable[[int], Any] | None, name: str):
        if initializer is not None:
            length = check_size(entries, 'length')
            return self._coerce_pairs([initializer(i) for i in range(length)])
        if isinstance(entries, (int, np.integer)) and not isinstance(entries, bool):
            raise ValidationError(f"{name}: initializer is required when a length is given")
        if isinstance(entries, np.ndarray):
            return entries
        try:
            return self._coerce_pairs(list(entries))
        except TypeError as e:
            raise ValidationError(f"{name}: entries must be iterable: {e}") from e

    def _coerce_pairs(self, values: list) -> list:
        # (real, imaginary) tuples become ComplexNumber; other tuples are rejected
        return [
            ComplexNumber.of(value, self.precision) if isinstance(value, tuple) else value
            for value in values
        ]

    def M(
        self,
        entries: ArrayLike | int,
        initializer: Callable[[int, int], Any] | None = None,
    ) -> SquareMatrix:
        """
        Square matrix from a 2D grid, or from a dimension and initializer(i, j).

        Cells are numbers or ComplexNumber values. Tuples in a grid are read
        as rows, so (real, imaginary) pairs are not accepted here.

        Raises:
            DimensionError: If the grid is not square
            ValidationError: If the entries are not numbers
        """
        if initializer is not None:
            m = check_size(entries, 'm')
            values = [initializer(i, j) for i in range(m) for j in range(m)]
            entries = self.field.entries(values, self.precision, 'M').reshape(m, m)
        elif isinstance(entries, (int, np.integer)) and not isinstance(entries, bool):
            raise ValidationError("M: initializer is required when a dimension is given")
        return SquareMatrix(self._build(ManagedSquareMatrix, AcceleratedSquareMatrix, entries))

    def V(
        self,
        entries: ArrayLike | int,
        initializer: Callable[[int], Any] | None = None,
    ) -> ColumnVector:
        """
        Column vector from any iterable of numbers, or from a length and initializer(i).

        Entries may be numbers, ComplexNumber values or (real, imaginary) pairs.

        Raises:
            ValidationError: If an entry is not a number or a pair
        """
        entries = self._vector_entries(entries, initializer, 'V')
        return ColumnVector(self._build(ManagedColumnVector, AcceleratedColumnVector, entries))

    def U(
        self,
        entries: ArrayLike | int,
        initializer: Callable[[int], Any] | None = None,
    ) -> RowVector:
        """Row vector; entries as for V."""
        entries = self._vector_entries(entries, initializer, 'U')
        return RowVector(self._build(ManagedRowVector, AcceleratedRowVector, entries))

    def zero(self, m: int) -> SquareMatrix:
        m = check_size(m, 'm')
        return self.M(np.zeros((m, m), dtype=self.field.dtype(self.precision)))

    def identity(self, m: int) -> SquareMatrix:
        m = check_size(m, 'm')
        return self.M(np.eye(m, dtype=self.field.dtype(self.precision)))

    def zero_column_vector(self, length: int) -> ColumnVector:
        length = check_size(length, 'length')
        return self.V(np.zeros(length, dtype=self.field.dtype(self.precision)))

    def zero_row_vector(self, length: int) -> RowVector:
        length = check_size(length, 'length')
        return self.U(np.zeros(length, dtype=self.field.dtype(self.precision)))


def _get_kernels(
    choice: BackendChoice,
    precision: Precision,
    device: str,
) -> NativeKernels | None:
    """
    Select the native kernels for a backend choice.

    Returns:
        Kernels for the accelerated backend, or None for managed

    Raises:
        ValidationError: If the backend name is unknown, or 'accelerated'
            is requested without PyTorch
    """
    if choice == 'managed':
        return None

    if choice == 'accelerated':
        if not torch_available():
            raise ValidationError(
                "backend='accelerated' requires PyTorch. "
                "Install it with: pip install pylinalg[accelerated]"
            )
        return _torch_kernels(device, precision)

    if choice == 'auto':
        gpu = detect_gpu()
        if gpu is None:
            logger.info("No GPU available, using the managed backend")
            return None
        if precision.name == 'fp64' and not gpu.supports_fp64:
            logger.info("%s has no fp64 support, using the managed backend", gpu)
            return None
        return _torch_kernels(gpu, precision)

    raise ValidationError(
        f"Unknown backend: {choice!r}. Must be one of {', '.join(BACKENDS)}."
    )


def _torch_kernels(device: str | DeviceInfo, precision: Precision) -> NativeKernels:
    from pylinalg.core.compute.native import TorchKernels
    return TorchKernels(device=device, precision=precision)


def matrices(
    field: str | Field = 'complex',
    precision: PrecisionChoice | Precision | None = None,
    backend: BackendChoice | None = None,
    kernels: NativeKernels | None = None,
    native_threshold: int | None = None,
    device: str | None = None,
) -> Matrices:
    """
    Resolve a Matrices value from explicit arguments and environment defaults.

    Args:
        field: 'complex' or 'real'
        precision: 'fp32' or 'fp64' (default: PYLINALG_PRECISION)
        backend: 'auto', 'managed' or 'accelerated' (default: PYLINALG_BACKEND)
        kernels: Explicit native kernels; implies the accelerated backend
        native_threshold: Delegation threshold (default: PYLINALG_NATIVE_THRESHOLD)
        device: 'auto', 'cpu' or 'gpu' for the kernels (default: PYLINALG_DEVICE)

    Returns:
        Matrices for the resolved combination
    """
    settings = load_settings()
    resolved_precision = resolve_precision(precision or settings.precision)
    threshold = settings.native_threshold if native_threshold is None else native_threshold

    if backend is not None and backend not in BACKENDS:
        raise ValidationError(
            f"Unknown backend: {backend!r}. Must be one of {', '.join(BACKENDS)}."
        )
    if kernels is None:
        choice = backend or settings.backend
        kernels = _get_kernels(choice, resolved_precision, device or settings.device)
    elif backend == 'managed':
        raise ValidationError("kernels cannot be combined with backend='managed'")

    result = Matrices(
        field=resolve_field(field),
        precision=resolved_precision,
        kernels=kernels,
        native_threshold=threshold,
    )
    logger.debug(
        "Selected %s backend (%s, %s)", result.backend, result.precision, result.field
    )
    return result


def M(
    entries: ArrayLike | int,
    initializer: Callable[[int, int], Any] | None = None,
    **options: Any,
) -> SquareMatrix:
    """
    Square matrix. Keyword options are those of matrices().

    Examples:
        M([[1, 2j], [-2j, 1]])
        M(3, lambda i, j: float(i == j), precision='fp32')
    """
    return matrices(**options).M(entries, initializer)


def V(
    entries: ArrayLike | int,
    initializer: Callable[[int], Any] | None = None,
    **options: Any,
) -> ColumnVector:
    """Column vector. Keyword options are those of matrices()."""
    return matrices(**options).V(entries, initializer)


def U(
    entries: ArrayLike | int,
    initializer: Callable[[int], Any] | None = None,
    **options: Any,
) -> RowVector:
    """Row vector. Keyword options are those of matrices()."""
    return matrices(**options).U(entries, initializer)


def zero(m: int, **options: Any) -> SquareMatrix:
    return matrices(**options).zero(m)


def identity(m: int, **options: Any) -> SquareMatrix:
    return matrices(**options).identity(m)


def zero_column_vector(length: int, **options: Any) -> ColumnVector:
    return matrices(**options).zero_column_vector(length)


def zero_row_vector(length: int, **options: Any) -> RowVector:
    return matrices(**options).zero_row_vector(length)
