"""
Vector and matrix algebra.

Values are built by the factories (M, V, U, zero, identity, ...) and are
façades over one concrete backend value each.
"""

from pylinalg.matrices.factories import (
    M,
    Matrices,
    U,
    V,
    identity,
    matrices,
    zero,
    zero_column_vector,
    zero_row_vector,
)
from pylinalg.matrices.fields import COMPLEX, REAL, Field
from pylinalg.matrices.square_matrix import SquareMatrix
from pylinalg.matrices.vectors import ColumnVector, RowVector

__all__ = [
    "M",
    "V",
    "U",
    "zero",
    "identity",
    "zero_column_vector",
    "zero_row_vector",
    "matrices",
    "Matrices",
    "ColumnVector",
    "RowVector",
    "SquareMatrix",
    "Field",
    "COMPLEX",
    "REAL",
]
