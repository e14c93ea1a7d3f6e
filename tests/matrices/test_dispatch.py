"""
Tests for backend dispatch: operand checks, backend names and delegation
to native kernels.
"""

import numpy as np
import pytest

from pylinalg.core.compute.native import ComputationStatus
from pylinalg.core.compute.precision import FP32, FP64
from pylinalg.core.compute.tolerances import select_tolerance
from pylinalg.core.exceptions import AcceleratorError, BackendMismatchError, ValidationError
from pylinalg.core.protocols import (
    ColumnVectorBackend,
    NativeKernels,
    RowVectorBackend,
    SquareMatrixBackend,
)
from pylinalg.matrices import Matrices
from pylinalg.matrices.backends import AcceleratedColumnVector, ManagedColumnVector
from pylinalg.matrices.fields import COMPLEX, REAL
from pylinalg.numbers import C


class FailingKernels:
    """Kernels whose every call reports a kernel failure."""

    name = 'failing'

    def warmup(self):
        return 11

    def _fail(self, kernel):
        raise AcceleratorError(
            f"Native call failed in kernel '{kernel}': KERNEL_FAILED",
            status=ComputationStatus.KERNEL_FAILED,
            kernel=kernel,
        )

    def add(self, a, b):
        self._fail('add')

    def subtract(self, a, b):
        self._fail('subtract')

    def scale(self, a, scalar):
        self._fail('scale')

    def matmul(self, a, b):
        self._fail('matmul')


# ═══════════════════════════════════════════════════════════════════════
# Backend names and protocol conformance
# ═══════════════════════════════════════════════════════════════════════


class TestBackendNames:

    def test_managed_name(self):
        assert Matrices().V([1]).name == 'managed_fp64_complex'

    def test_accelerated_name(self, kernels):
        algebra = Matrices(field='real', precision='fp32', kernels=kernels)
        assert algebra.identity(2).name == 'accelerated_recording_fp32_real'
        assert algebra.backend == 'accelerated'

    def test_derived_values_keep_name(self, kernels):
        m = Matrices(kernels=kernels).identity(2)
        assert m.row(0).name == m.name
        assert m.column(1).transpose().name == m.name
        assert (m * m.column(0)).name == m.name

    def test_accelerated_requires_kernels(self):
        with pytest.raises(ValidationError, match="kernels are required"):
            AcceleratedColumnVector(np.array([1.0]))

    def test_managed_protocols(self):
        algebra = Matrices()
        assert isinstance(algebra.V([1]).backend, ColumnVectorBackend)
        assert isinstance(algebra.U([1]).backend, RowVectorBackend)
        assert isinstance(algebra.identity(1).backend, SquareMatrixBackend)

    def test_accelerated_protocols(self, kernels):
        algebra = Matrices(kernels=kernels)
        assert isinstance(algebra.V([1]).backend, ColumnVectorBackend)
        assert isinstance(algebra.identity(1).backend, SquareMatrixBackend)

    def test_kernels_protocol(self, kernels):
        assert isinstance(kernels, NativeKernels)
        assert not isinstance(object(), NativeKernels)

    def test_backend_values_are_frozen(self):
        backend = ManagedColumnVector(np.array([1.0]))
        with pytest.raises(AttributeError):
            backend.entries = np.array([2.0])


# ═══════════════════════════════════════════════════════════════════════
# Mixed-backend operands
# ═══════════════════════════════════════════════════════════════════════


class TestBackendMismatch:

    def test_precision_mismatch(self):
        a = Matrices(precision=FP64).V([1, 2])
        b = Matrices(precision=FP32).V([1, 2])
        with pytest.raises(BackendMismatchError) as info:
            a + b
        assert info.value.left == 'managed_fp64_complex'
        assert info.value.right == 'managed_fp32_complex'
        assert str(info.value).startswith('add:')

    def test_family_mismatch(self, kernels):
        managed = Matrices().identity(2)
        accelerated = Matrices(kernels=kernels).identity(2)
        with pytest.raises(BackendMismatchError):
            managed * accelerated
        with pytest.raises(BackendMismatchError):
            accelerated + managed

    def test_field_mismatch(self):
        with pytest.raises(BackendMismatchError):
            Matrices(field=COMPLEX).V([1]) * Matrices(field=REAL).V([1])

    def test_matrix_action_mismatch(self):
        m = Matrices(precision=FP64).identity(2)
        with pytest.raises(BackendMismatchError, match="act"):
            m * Matrices(precision=FP32).V([1, 2])

    def test_row_times_column_mismatch(self):
        with pytest.raises(BackendMismatchError, match="multiply"):
            Matrices(precision=FP32).U([1, 2]) * Matrices(precision=FP64).V([1, 2])

    def test_equality_across_backends_is_false(self, kernels):
        assert Matrices().V([1, 2]) != Matrices(kernels=kernels).V([1, 2])

    def test_scalar_precision_is_coerced(self):
        v = Matrices(precision=FP32).V([1, 2])
        scaled = C(2, 0) * v
        assert scaled.precision is FP32
        assert scaled == Matrices(precision=FP32).V([2, 4])


class TestUnsupportedOperands:

    def test_column_plus_row(self):
        algebra = Matrices()
        with pytest.raises(TypeError):
            algebra.V([1, 2]) + algebra.U([1, 2])

    def test_named_method_rejects_wrong_kind(self):
        algebra = Matrices()
        with pytest.raises(TypeError, match="add: expected ColumnVector"):
            algebra.V([1, 2]).add(algebra.U([1, 2]))

    def test_act_rejects_row(self):
        algebra = Matrices()
        with pytest.raises(TypeError, match="act"):
            algebra.identity(2).act(algebra.U([1, 2]))

    def test_matrix_plus_vector(self):
        algebra = Matrices()
        with pytest.raises(TypeError):
            algebra.identity(2) + algebra.V([1, 2])

    @pytest.mark.parametrize("other", ["2", True, None, [1, 2]])
    def test_non_scalar_multiplier(self, other):
        with pytest.raises(TypeError):
            Matrices().V([1, 2]) * other


# ═══════════════════════════════════════════════════════════════════════
# Delegation to native kernels
# ═══════════════════════════════════════════════════════════════════════


class TestDelegation:

    def test_elementwise_operations_delegate(self, kernels):
        algebra = Matrices(kernels=kernels)
        a = algebra.V([1, 2])
        a + a
        a - a
        2 * a
        assert kernels.calls == ['add', 'subtract', 'scale']

    def test_matrix_product_delegates(self, kernels):
        m = Matrices(kernels=kernels).M([[1, 2], [3, 4]])
        assert m * m == Matrices(kernels=kernels).M([[7, 10], [15, 22]])
        assert kernels.calls == ['matmul']

    def test_is_unitary_uses_two_products(self, kernels):
        Matrices(kernels=kernels).identity(2).is_unitary()
        assert kernels.calls == ['matmul', 'matmul']

    def test_commutator(self, kernels):
        m = Matrices(kernels=kernels).identity(2)
        m.commutator(m)
        assert kernels.calls == ['matmul', 'matmul', 'subtract']

    def test_managed_operations_stay_managed(self, kernels):
        algebra = Matrices(kernels=kernels)
        m = algebra.M([[1, 2], [3, 4]])
        v = algebra.V([1, 1])
        m.tensor_product(m)
        m * v
        v.tensor_product(v)
        v * v
        -v
        m.adjoint()
        m.is_hermitian()
        assert kernels.calls == []

    def test_threshold_keeps_small_operands_managed(self, kernels):
        algebra = Matrices(kernels=kernels, native_threshold=5)
        algebra.V([1, 2, 3, 4]) + algebra.V([1, 2, 3, 4])
        algebra.identity(2) * algebra.identity(2)
        assert kernels.calls == []
        algebra.V([1, 2, 3, 4, 5]) + algebra.V([1, 2, 3, 4, 5])
        algebra.identity(3) * algebra.identity(3)
        assert kernels.calls == ['add', 'matmul']

    def test_zero_threshold_delegates_empty_operands(self, kernels):
        algebra = Matrices(kernels=kernels, native_threshold=0)
        assert (algebra.V([]) + algebra.V([])).length == 0
        assert kernels.calls == ['add']

    def test_kernel_failure_propagates(self):
        algebra = Matrices(kernels=FailingKernels())
        with pytest.raises(AcceleratorError) as info:
            algebra.V([1]) + algebra.V([1])
        assert info.value.status == ComputationStatus.KERNEL_FAILED
        assert info.value.kernel == 'add'

    def test_warmup(self, kernels):
        assert kernels.warmup() == 11


class TestBackendAgreement:

    @pytest.mark.parametrize("precision", [FP64, FP32], ids=['fp64', 'fp32'])
    def test_accelerated_matches_managed(self, precision, kernels, rng):
        grid = rng.standard_normal((6, 6)) + 1j * rng.standard_normal((6, 6))
        vector = rng.standard_normal(6) + 1j * rng.standard_normal(6)
        managed = Matrices(precision=precision)
        accelerated = Matrices(precision=precision, kernels=kernels)
        tolerance = select_tolerance(accelerated.identity(1).name)

        expected = managed.M(grid) * managed.M(grid).adjoint()
        actual = accelerated.M(grid) * accelerated.M(grid).adjoint()
        np.testing.assert_allclose(
            actual.entries, expected.entries, rtol=tolerance.rtol, atol=tolerance.atol
        )

        expected_norm = managed.V(vector).normalized()
        actual_norm = accelerated.V(vector).normalized()
        np.testing.assert_allclose(
            actual_norm.entries, expected_norm.entries, rtol=tolerance.rtol, atol=tolerance.atol
        )
