"""
Value-evaluation backends for unary components.

Available backends:
    CPUEinsumBackend: CPU reference implementation (numpy.einsum)
    GPUEinsumBackend: GPU implementation using PyTorch (optional extra)

The GPU backend is not imported here so that torch stays optional.
"""

from typing import Literal

from autologistic.core.compute.device import select_device
from autologistic.unary.backends.cpu import CPUEinsumBackend

BackendChoice = Literal['auto', 'cpu', 'gpu', 'cpu_einsum', 'gpu_fp32', 'gpu_fp64']


def get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Args:
        choice: Backend preference
            - 'cpu' / 'cpu_einsum': CPU reference
            - 'gpu' / 'gpu_fp32': GPU in single precision
            - 'gpu_fp64': GPU in double precision (CUDA only)
            - 'auto': GPU if available, else CPU

    Returns:
        Backend instance with an evaluate(X, beta) method

    Raises:
        ValueError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if choice in ('cpu', 'cpu_einsum'):
        return CPUEinsumBackend()

    if choice == 'auto':
        device = select_device('auto')
        if device == 'cpu':
            return CPUEinsumBackend()
        from autologistic.unary.backends.gpu import GPUEinsumBackend
        return GPUEinsumBackend(device=device)

    if choice in ('gpu', 'gpu_fp32', 'gpu_fp64'):
        device = select_device('gpu')
        from autologistic.unary.backends.gpu import GPUEinsumBackend
        return GPUEinsumBackend(use_fp64=(choice == 'gpu_fp64'), device=device)

    raise ValueError(f"Unknown backend: {choice!r}")


__all__ = [
    "BackendChoice",
    "CPUEinsumBackend",
    "get_backend",
]
