"""
Tests for the native kernels boundary.

Status handling runs everywhere. TorchKernels tests run on the CPU device
and are skipped when PyTorch is not installed.
"""

import numpy as np
import pytest

from pylinalg.core.compute.device import DeviceInfo
from pylinalg.core.compute.native import ComputationStatus, raise_on_failure
from pylinalg.core.exceptions import AcceleratorError, ValidationError
from pylinalg.core.protocols import NativeKernels


# ═══════════════════════════════════════════════════════════════════════
# Status codes
# ═══════════════════════════════════════════════════════════════════════


class TestRaiseOnFailure:

    def test_success_returns_value(self):
        assert raise_on_failure(ComputationStatus.SUCCEEDED, 11) == 11

    def test_plain_int_success(self):
        assert raise_on_failure(0, 'ok') == 'ok'

    @pytest.mark.parametrize(
        "status",
        [s for s in ComputationStatus if s != ComputationStatus.SUCCEEDED],
    )
    def test_failure_raises_with_status(self, status):
        with pytest.raises(AcceleratorError, match=status.name) as info:
            raise_on_failure(status, kernel='add')
        assert info.value.status == int(status)
        assert info.value.kernel == 'add'

    def test_unknown_status(self):
        with pytest.raises(AcceleratorError, match="UNKNOWN") as info:
            raise_on_failure(42)
        assert info.value.status == 42

    def test_status_values_are_stable(self):
        assert [s.value for s in ComputationStatus] == list(range(7))


class TestRecordingKernels:

    def test_satisfies_protocol(self, kernels):
        assert isinstance(kernels, NativeKernels)

    def test_warmup(self, kernels):
        assert kernels.warmup() == 11
        assert kernels.calls == ['warmup']


# ═══════════════════════════════════════════════════════════════════════
# TorchKernels
# ═══════════════════════════════════════════════════════════════════════


class TestTorchKernels:

    @pytest.fixture
    def torch_kernels(self):
        pytest.importorskip("torch")
        from pylinalg.core.compute.native import TorchKernels
        return TorchKernels(device='cpu', precision='fp64')

    def test_satisfies_protocol(self, torch_kernels):
        assert isinstance(torch_kernels, NativeKernels)
        assert torch_kernels.name == 'torch_cpu'

    def test_warmup_returns_eleven(self, torch_kernels):
        assert torch_kernels.warmup() == 11

    def test_add_subtract(self, torch_kernels):
        a = np.array([1 + 2j, 3 + 5j])
        b = np.array([7 + 11j, 13 + 19j])
        np.testing.assert_array_equal(torch_kernels.add(a, b), [8 + 13j, 16 + 24j])
        np.testing.assert_array_equal(torch_kernels.subtract(b, a), [6 + 9j, 10 + 14j])

    def test_scale_keeps_dtype(self, torch_kernels):
        a = np.array([1.0, 2.0], dtype=np.float32)
        result = torch_kernels.scale(a, 3.0)
        assert result.dtype == np.float32
        np.testing.assert_array_equal(result, [3.0, 6.0])

    def test_matmul(self, torch_kernels):
        a = np.array([[1 + 2j, 3 + 5j], [7 + 11j, 13 + 19j]])
        b = np.array([[23 + 29j, 31 + 37j], [41 + 43j, 47 + 53j]])
        np.testing.assert_array_equal(torch_kernels.matmul(a, b), a @ b)

    def test_inputs_untouched(self, torch_kernels):
        a = np.array([1.0, 2.0])
        before = a.copy()
        torch_kernels.scale(a, -1.0)
        np.testing.assert_array_equal(a, before)

    def test_kernel_failure_raises(self, torch_kernels):
        with pytest.raises(AcceleratorError) as info:
            torch_kernels.matmul(np.zeros((2, 2)), np.zeros((3, 3)))
        assert info.value.status == ComputationStatus.KERNEL_FAILED
        assert info.value.kernel == 'matmul'

    def test_mps_rejects_fp64(self):
        pytest.importorskip("torch")
        from pylinalg.core.compute.native import TorchKernels
        mps = DeviceInfo(device_type='mps', device_index=0, name='Apple Silicon GPU')
        with pytest.raises(ValidationError, match="float64"):
            TorchKernels(device=mps, precision='fp64')
