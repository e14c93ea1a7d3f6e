"""
pylinalg: dense complex and real linear algebra with pluggable backends.

Vectors and square matrices over the complex or real field, in fp32 or
fp64, computed either in-process with NumPy or with native kernels on a
GPU through PyTorch.

Submodules:
    numbers: ComplexNumber, real-number helpers, polar form
    matrices: ColumnVector, RowVector, SquareMatrix and their factories
    core: Exceptions, validation, configuration, compute infrastructure
"""

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    AcceleratorError,
    BackendMismatchError,
    DimensionError,
    PyLinAlgError,
    ValidationError,
)
from pylinalg.matrices import (
    ColumnVector,
    Matrices,
    M,
    RowVector,
    SquareMatrix,
    U,
    V,
    identity,
    matrices,
    zero,
    zero_column_vector,
    zero_row_vector,
)
from pylinalg.numbers import C, ComplexNumber, P, Polar, R

__all__ = [
    "__version__",
    # Factories
    "M",
    "V",
    "U",
    "zero",
    "identity",
    "zero_column_vector",
    "zero_row_vector",
    "matrices",
    "Matrices",
    # Values
    "ColumnVector",
    "RowVector",
    "SquareMatrix",
    "ComplexNumber",
    "Polar",
    "C",
    "P",
    "R",
    # Exceptions
    "PyLinAlgError",
    "ValidationError",
    "DimensionError",
    "BackendMismatchError",
    "AcceleratorError",
]
