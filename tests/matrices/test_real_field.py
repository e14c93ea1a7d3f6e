"""
Tests for vectors and matrices over the real field.
"""

import math

import numpy as np
import pytest

from pylinalg.core.exceptions import ValidationError
from pylinalg.numbers import C


class TestRealEntries:

    def test_complex_entries_rejected(self, real_algebra):
        with pytest.raises(ValidationError, match="1 entries with nonzero imaginary part"):
            real_algebra.V([1, 2j])

    def test_complex_with_zero_imaginary_accepted(self, real_algebra):
        assert real_algebra.V([1 + 0j, C(2, 0)]) == real_algebra.V([1, 2])

    def test_dtype_is_real(self, real_algebra):
        m = real_algebra.identity(2)
        assert m.entries.dtype == real_algebra.precision.real_dtype

    def test_items_are_real_scalars(self, real_algebra):
        v = real_algebra.V([1.5, -2])
        assert type(v[0]) is real_algebra.precision.real_dtype
        assert v[1] == -2

    def test_name(self, real_algebra):
        assert real_algebra.V([1]).name.endswith(f"_{real_algebra.precision.name}_real")


class TestRealScalars:

    def test_complex_scalar_rejected(self, real_algebra):
        with pytest.raises(ValidationError, match="complex scalar"):
            1j * real_algebra.V([1, 2])

    def test_complex_number_with_zero_imaginary_accepted(self, real_algebra):
        assert C(2, 0) * real_algebra.V([1, 2]) == real_algebra.V([2, 4])

    def test_non_number_scalar_rejected(self, real_algebra):
        with pytest.raises(ValidationError):
            real_algebra.V([1, 2]).scale("2")


class TestRealAlgebra:

    def test_inner_product_is_dot(self, real_algebra):
        a = real_algebra.V([1, 2, 3])
        b = real_algebra.V([4, -5, 6])
        assert a * b == 12
        assert type(a * b) is real_algebra.precision.real_dtype

    def test_row_times_column(self, real_algebra):
        assert real_algebra.U([1, 2]) * real_algebra.V([3, 4]) == 11

    def test_conjugate_is_identity(self, real_algebra):
        v = real_algebra.V([1, -2])
        assert v.conjugate() == v
        assert v.adjoint() == v.transpose()

    def test_norm(self, real_algebra):
        assert real_algebra.V([3, 4]).norm() == 5

    def test_matrix_product(self, real_algebra):
        a = real_algebra.M([[1, 2], [3, 4]])
        b = real_algebra.M([[5, 6], [7, 8]])
        assert a * b == real_algebra.M([[19, 22], [43, 50]])

    def test_sum(self, real_algebra):
        assert real_algebra.V([1, 2, -0.5]).sum() == 2.5


class TestRealPredicates:

    def test_rotation_is_unitary(self, real_algebra):
        theta = 0.3
        rotation = real_algebra.M([
            [math.cos(theta), -math.sin(theta)],
            [math.sin(theta), math.cos(theta)],
        ])
        assert rotation.is_unitary()
        assert not rotation.is_hermitian()

    def test_symmetric_is_hermitian(self, real_algebra):
        assert real_algebra.M([[2, -1], [-1, 3]]).is_hermitian()

    def test_shear_not_unitary(self, real_algebra):
        assert not real_algebra.M([[1, 1], [0, 1]]).is_unitary()

    def test_identity(self, real_algebra):
        m = real_algebra.identity(3)
        assert m.is_identity()
        np.testing.assert_array_equal(m.to_numpy(), np.eye(3))

    def test_map_keeps_real_field(self, real_algebra):
        doubled = real_algebra.M([[1, 2], [3, 4]]).map(lambda x: 2 * x)
        assert doubled == real_algebra.M([[2, 4], [6, 8]])
        assert doubled.field.name == 'real'
