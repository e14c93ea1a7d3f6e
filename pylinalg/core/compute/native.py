"""
Native kernels for the accelerated backend.

The accelerated backend hands bulk elementwise work and the matrix product
to a kernels object across a foreign-function boundary. Every call into the
native library reports a ComputationStatus; anything other than SUCCEEDED is
raised as AcceleratorError. Nothing is retried.

TorchKernels is the shipped implementation and runs on CUDA, MPS or the CPU
through PyTorch. Any object satisfying the NativeKernels protocol can be
plugged in instead.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.device import DeviceInfo, DevicePreference, select_device
from pylinalg.core.compute.precision import Precision, PrecisionChoice, resolve_precision
from pylinalg.core.exceptions import AcceleratorError, ValidationError
from pylinalg.core.protocols import NativeKernels

logger = logging.getLogger(__name__)

__all__ = [
    'ComputationStatus',
    'NativeKernels',
    'TorchKernels',
    'raise_on_failure',
]


class ComputationStatus(IntEnum):
    """Status codes reported by a native call."""
    SUCCEEDED = 0
    SET_DEVICE_FAILED = 1
    DEVICE_RESET_FAILED = 2
    ALLOCATION_FAILED = 3
    COPY_FAILED = 4
    KERNEL_FAILED = 5
    SYNCHRONIZE_FAILED = 6


def raise_on_failure(status: int, value: Any = None, kernel: str | None = None) -> Any:
    """
    Return value if status reports success, else raise.

    Args:
        status: Code returned by the native call
        value: Result of the call
        kernel: Kernel name for the error message

    Raises:
        AcceleratorError: If status is not SUCCEEDED
    """
    if status == ComputationStatus.SUCCEEDED:
        return value
    try:
        label = ComputationStatus(status).name
    except ValueError:
        label = f"UNKNOWN({status})"
    where = f" in kernel {kernel!r}" if kernel else ""
    raise AcceleratorError(
        f"Native call failed{where}: {label}",
        status=int(status),
        kernel=kernel,
    )


class TorchKernels:
    """
    NativeKernels backed by PyTorch.

    Operands are copied onto the device, the kernel runs there, and the
    result is copied back into a fresh NumPy array. fp32 on consumer GPUs
    is much faster than fp64; MPS has no fp64 at all.
    """

    def __init__(
        self,
        device: DevicePreference | DeviceInfo = 'auto',
        precision: PrecisionChoice | Precision = 'fp64',
    ):
        """
        Initialize the kernels on a device.

        Args:
            device: 'cpu', 'gpu', 'auto' or an already selected DeviceInfo
            precision: 'fp32' or 'fp64'

        Raises:
            ValidationError: If the device cannot run the precision
        """
        import torch

        self._torch = torch
        self.precision = resolve_precision(precision)
        self.device_info = device if isinstance(device, DeviceInfo) else select_device(device)

        if self.precision.name == 'fp64' and not self.device_info.supports_fp64:
            raise ValidationError(
                "MPS does not support float64. Use precision='fp32' "
                "or device='cpu' for double precision."
            )

        self.device = torch.device(self.device_info.torch_name)
        logger.debug(
            "Initialized torch kernels on %s (%s)", self.device_info, self.precision
        )

    @property
    def name(self) -> str:
        return f"torch_{self.device_info.device_type}"

    def warmup(self) -> int:
        """Round-trip a trivial sum through the device; returns 11."""
        torch = self._torch

        def kernel() -> int:
            lhs = torch.tensor(5, device=self.device)
            rhs = torch.tensor(6, device=self.device)
            return int((lhs + rhs).item())

        return self._call('warmup', kernel)

    def add(self, a: NDArray, b: NDArray) -> NDArray:
        return self._call('add', lambda: self._download(self._upload(a) + self._upload(b)))

    def subtract(self, a: NDArray, b: NDArray) -> NDArray:
        return self._call('subtract', lambda: self._download(self._upload(a) - self._upload(b)))

    def scale(self, a: NDArray, scalar: complex | float) -> NDArray:
        def kernel() -> NDArray:
            tensor = self._upload(a)
            factor = self._torch.tensor(scalar, dtype=tensor.dtype, device=self.device)
            return self._download(tensor * factor)

        return self._call('scale', kernel)

    def matmul(self, a: NDArray, b: NDArray) -> NDArray:
        return self._call('matmul', lambda: self._download(self._upload(a) @ self._upload(b)))

    def _upload(self, array: NDArray):
        try:
            return self._torch.from_numpy(np.array(array, copy=True)).to(self.device)
        except RuntimeError as e:
            raise AcceleratorError(
                f"Copy to {self.device_info} failed: {e}",
                status=int(ComputationStatus.COPY_FAILED),
            ) from e

    def _download(self, tensor) -> NDArray:
        if self.device.type == 'cuda':
            self._torch.cuda.synchronize(self.device)
        return tensor.cpu().numpy()

    def _call(self, kernel: str, fn: Callable[[], Any]) -> Any:
        torch = self._torch
        try:
            value = fn()
            status = ComputationStatus.SUCCEEDED
        except AcceleratorError as e:
            e.kernel = kernel
            raise
        except torch.cuda.OutOfMemoryError as e:
            raise AcceleratorError(
                f"Native call failed in kernel {kernel!r}: ALLOCATION_FAILED ({e})",
                status=int(ComputationStatus.ALLOCATION_FAILED),
                kernel=kernel,
            ) from e
        except RuntimeError as e:
            raise AcceleratorError(
                f"Native call failed in kernel {kernel!r}: KERNEL_FAILED ({e})",
                status=int(ComputationStatus.KERNEL_FAILED),
                kernel=kernel,
            ) from e
        return raise_on_failure(status, value, kernel)
