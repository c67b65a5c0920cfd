"""
Shared compute infrastructure.

Submodules:
    device: GPU detection and device selection
    tolerances: Agreement tiers between CPU and GPU results
"""

from autologistic.core.compute.device import detect_gpu, select_device
from autologistic.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    GPU_FP32,
    GPU_FP64,
    select_tolerance,
)

__all__ = [
    "detect_gpu",
    "select_device",
    "ToleranceTier",
    "CPU_FP64",
    "GPU_FP32",
    "GPU_FP64",
    "select_tolerance",
]
