"""
Tolerance tiers for comparing computed values across backends.

The CPU einsum path is the reference. GPU paths must agree with it to
within the tier for their precision.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision reference',
)

GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)

# float32 accumulation over p predictors
GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision',
)


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select the tolerance tier for a backend name."""
    if 'gpu' in backend_name:
        return GPU_FP64 if 'fp64' in backend_name else GPU_FP32
    return CPU_FP64
