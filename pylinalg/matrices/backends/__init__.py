"""
Concrete backends.

Available backends:
    managed: In-process NumPy implementation (reference)
    accelerated: Managed algebra with elementwise work and the matrix
        product delegated to NativeKernels
"""

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

__all__ = [
    "ManagedColumnVector",
    "ManagedRowVector",
    "ManagedSquareMatrix",
    "AcceleratedColumnVector",
    "AcceleratedRowVector",
    "AcceleratedSquareMatrix",
]
