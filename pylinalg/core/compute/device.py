"""
Hardware detection for the accelerated backend.

Finds the device the native kernels should run on. PyTorch is imported
lazily so that the managed backend never pays for it.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from typing import Literal

from pylinalg.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

DevicePreference = Literal['cpu', 'gpu', 'auto']


@dataclass(frozen=True)
class DeviceInfo:
    """
    A compute device the native kernels can target.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        device_index: Device ordinal (None for CPU)
        name: Human-readable device name
        memory_bytes: Total device memory in bytes (None if unknown)
    """
    device_type: Literal['cpu', 'cuda', 'mps']
    device_index: int | None
    name: str
    memory_bytes: int | None = None

    def __str__(self) -> str:
        if self.device_type == 'cpu':
            return f"CPU ({self.name})"
        if self.memory_bytes is None:
            return f"{self.device_type.upper()}:{self.device_index} ({self.name})"
        return (
            f"{self.device_type.upper()}:{self.device_index} "
            f"({self.name}, {self.memory_bytes / 1024**3:.1f}GB)"
        )

    @property
    def is_gpu(self) -> bool:
        return self.device_type != 'cpu'

    @property
    def supports_fp64(self) -> bool:
        """MPS has no double-precision support."""
        return self.device_type != 'mps'

    @property
    def torch_name(self) -> str:
        """Device string understood by torch.device()."""
        if self.device_type == 'cuda':
            return f"cuda:{self.device_index}"
        return self.device_type


def torch_available() -> bool:
    """True if PyTorch can be imported."""
    try:
        import torch  # noqa: F401
    except ImportError:
        return False
    return True


def detect_gpu() -> DeviceInfo | None:
    """
    Detect the best available GPU, CUDA before MPS.

    Returns None when PyTorch is missing or no GPU is visible.
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        idx = torch.cuda.current_device()
        props = torch.cuda.get_device_properties(idx)
        return DeviceInfo(
            device_type='cuda',
            device_index=idx,
            name=props.name,
            memory_bytes=props.total_memory,
        )

    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo(device_type='mps', device_index=0, name='Apple Silicon GPU')

    return None


def get_cpu_info() -> DeviceInfo:
    processor = platform.processor() or platform.machine() or "Unknown CPU"
    return DeviceInfo(device_type='cpu', device_index=None, name=processor)


def select_device(prefer: DevicePreference = 'auto') -> DeviceInfo:
    """
    Select a compute device based on preference and availability.

    Args:
        prefer: 'cpu' always picks the CPU, 'gpu' requires a GPU,
            'auto' uses a GPU when one is present

    Returns:
        DeviceInfo for the selected device

    Raises:
        ValidationError: If prefer is unknown, or 'gpu' is requested
            and none is available
    """
    if prefer not in ('cpu', 'gpu', 'auto'):
        raise ValidationError(
            f"device: must be 'cpu', 'gpu', or 'auto', got {prefer!r}"
        )

    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()

    if prefer == 'gpu':
        if gpu is None:
            raise ValidationError(
                "GPU requested but no GPU available. "
                "Ensure PyTorch is installed with CUDA/MPS support."
            )
        return gpu

    if gpu is None:
        logger.debug("No GPU detected, selecting CPU")
        return get_cpu_info()
    logger.debug("Selected %s", gpu)
    return gpu
