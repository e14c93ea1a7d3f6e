"""
Tolerance tiers for comparing results across backends and precisions.

Defines precision expectations for different compute paths:
- Managed FP64 (reference): exact for integer-valued data, machine precision otherwise
- Managed FP32: single-precision rounding
- Accelerated FP64: same as managed FP64
- Accelerated FP32: relaxed, device kernels may reorder summations

Used by the test suite to compare accelerated results against the managed
reference.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


MANAGED_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='managed_fp64',
    description='Managed double precision, reference',
)

MANAGED_FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='managed_fp32',
    description='Managed single precision',
)

ACCELERATED_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='accelerated_fp64',
    description='Accelerated double precision, matches managed reference',
)

ACCELERATED_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='accelerated_fp32',
    description='Accelerated single precision, device summation order may differ',
)


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select the tolerance tier for a backend name such as 'accelerated_fp32'."""
    if backend_name.startswith('accelerated'):
        if 'fp32' in backend_name:
            return ACCELERATED_FP32
        return ACCELERATED_FP64
    if 'fp32' in backend_name:
        return MANAGED_FP32
    return MANAGED_FP64
