"""
Shared compute infrastructure for pylinalg.

Submodules:
    precision: FP32/FP64 descriptors and machine epsilon
    tolerances: Comparison tolerance tiers per backend and precision
    device: Hardware detection and device selection
    native: NativeKernels status codes and the PyTorch implementation

PyTorch is imported only when GPU detection runs or TorchKernels is built.
"""

from pylinalg.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pylinalg.core.compute.precision import FP32, FP64, Precision, resolve_precision

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Precision
    "Precision",
    "FP32",
    "FP64",
    "resolve_precision",
]
