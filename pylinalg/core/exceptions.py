"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinAlgError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Precondition violations are raised at the call site, never repaired
"""


class PyLinAlgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinAlgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: unknown
    backend or precision names, non-numeric entries, a complex scalar
    applied to a real-valued vector, an unsupported device.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand lengths or dimensions are inconsistent.

    Raised when two vectors of different length meet in a binary operation,
    when two matrices of different dimension are combined, when a matrix
    acts on a vector of the wrong length, or when matrix entries are not
    square.

    Attributes:
        expected: The length/dimension the operation required
        actual: The length/dimension that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class BackendMismatchError(PyLinAlgError):
    """
    Operands of one operation are backed by different backends.

    Two values produced by different factories (managed vs accelerated,
    fp32 vs fp64, complex vs real) cannot be combined. This is a
    programming error on the caller's side and is never coerced.

    Attributes:
        left: Backend name of the left operand
        right: Backend name of the right operand
    """

    def __init__(self, message: str, left: str | None = None, right: str | None = None):
        super().__init__(message)
        self.left = left
        self.right = right


class AcceleratorError(PyLinAlgError):
    """
    A call into the accelerated native library failed.

    The engine defines no recovery path; the failure is surfaced as-is.

    Attributes:
        status: ComputationStatus code reported for the failed call
        kernel: Name of the kernel that failed, if known
    """

    def __init__(self, message: str, status: int, kernel: str | None = None):
        super().__init__(message)
        self.status = status
        self.kernel = kernel
