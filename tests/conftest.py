"""
pytest configuration and shared fixtures.

Every algebra fixture is parametrized over both precisions and both
backends. The accelerated backend runs on RecordingKernels, a NumPy
stand-in for the native library, so the suite needs neither PyTorch nor a
GPU.
"""

import numpy as np
import pytest

from pylinalg.core.compute.precision import FP32, FP64
from pylinalg.matrices.factories import Matrices
from pylinalg.matrices.fields import COMPLEX, REAL


class RecordingKernels:
    """NativeKernels implemented with NumPy; records every call by name."""

    name = 'recording'

    def __init__(self):
        self.calls = []

    def warmup(self):
        self.calls.append('warmup')
        return 5 + 6

    def add(self, a, b):
        self.calls.append('add')
        return a + b

    def subtract(self, a, b):
        self.calls.append('subtract')
        return a - b

    def scale(self, a, scalar):
        self.calls.append('scale')
        return a.dtype.type(scalar) * a

    def matmul(self, a, b):
        self.calls.append('matmul')
        return a @ b


BACKEND_IDS = ['managed-fp64', 'managed-fp32', 'accelerated-fp64', 'accelerated-fp32']
BACKEND_PARAMS = [
    ('managed', FP64),
    ('managed', FP32),
    ('accelerated', FP64),
    ('accelerated', FP32),
]


def _matrices(field, backend, precision):
    kernels = RecordingKernels() if backend == 'accelerated' else None
    return Matrices(field=field, precision=precision, kernels=kernels)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def kernels():
    return RecordingKernels()


@pytest.fixture(params=BACKEND_PARAMS, ids=BACKEND_IDS)
def algebra(request):
    """Complex-field Matrices for every (backend, precision) pair."""
    backend, precision = request.param
    return _matrices(COMPLEX, backend, precision)


@pytest.fixture(params=BACKEND_PARAMS, ids=BACKEND_IDS)
def real_algebra(request):
    """Real-field Matrices for every (backend, precision) pair."""
    backend, precision = request.param
    return _matrices(REAL, backend, precision)


@pytest.fixture
def integer_complex(rng):
    """
    Factory for random complex arrays with small integer components.

    Sums and products of such entries are exact in fp32 and fp64, so
    algebraic laws can be checked with exact equality.
    """
    def make(*shape):
        real = rng.integers(-9, 10, size=shape)
        imaginary = rng.integers(-9, 10, size=shape)
        return real + 1j * imaginary
    return make
