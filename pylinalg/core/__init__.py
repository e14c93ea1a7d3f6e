"""
Core infrastructure for pylinalg.

Key components:
    protocols: Backend and NativeKernels contracts
    exceptions: Exception hierarchy
    validation: Input validators
    config: Environment-driven defaults
    compute: Precision, tolerances, device detection, native kernels
"""

from pylinalg.core.exceptions import (
    AcceleratorError,
    BackendMismatchError,
    DimensionError,
    PyLinAlgError,
    ValidationError,
)
from pylinalg.core.protocols import (
    ColumnVectorBackend,
    NativeKernels,
    RowVectorBackend,
    SquareMatrixBackend,
)

__all__ = [
    # Protocols
    "ColumnVectorBackend",
    "RowVectorBackend",
    "SquareMatrixBackend",
    "NativeKernels",
    # Exceptions
    "PyLinAlgError",
    "ValidationError",
    "DimensionError",
    "BackendMismatchError",
    "AcceleratorError",
]
