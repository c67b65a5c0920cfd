"""
GPU backend for unary value evaluation using PyTorch.

Performance path for large design tensors, validated against the CPU
reference. Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon).
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


class GPUEinsumBackend:
    """
    GPU backend computing the (n, m) value matrix with torch.einsum.

    FP32 by default for performance on consumer GPUs. Results are
    returned to the host as float64 numpy arrays.
    """

    def __init__(self, use_fp64: bool = False, device: str = 'cuda'):
        """
        Initialize GPU backend.

        Args:
            use_fp64: If True, compute in float64 (slow on consumer GPUs).
            device: GPU device type ('cuda', 'cuda:0', 'mps')

        Raises:
            RuntimeError: If the requested device is unavailable, or
                float64 is requested on MPS
            ValueError: If device is not a GPU device name
        """
        import torch

        if device.startswith('cuda'):
            if not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
        elif device == 'mps':
            if not (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()):
                raise RuntimeError(
                    "MPS not available. Requires macOS with Apple Silicon "
                    "and PyTorch with MPS support."
                )
            if use_fp64:
                raise RuntimeError(
                    "MPS does not support float64. Use use_fp64=False "
                    "or use backend='cpu' for double precision."
                )
        else:
            raise ValueError(
                f"Unknown GPU device: {device!r}. Use 'cuda' or 'mps'."
            )

        self.device = torch.device(device)
        self.use_fp64 = use_fp64
        self.dtype = torch.float64 if use_fp64 else torch.float32

    @property
    def name(self) -> str:
        precision = "fp64" if self.use_fp64 else "fp32"
        return f'gpu_einsum_{precision}'

    def evaluate(
        self,
        X: NDArray[np.floating[Any]],
        beta: NDArray[np.floating[Any]],
    ) -> NDArray[np.float64]:
        """
        Evaluate the full value matrix on the GPU.

        Args:
            X: Design tensor (n, p, m)
            beta: Coefficients (p,)

        Returns:
            Values (n, m) as float64
        """
        import torch

        X_t = torch.from_numpy(np.ascontiguousarray(X)).to(device=self.device, dtype=self.dtype)
        beta_t = torch.from_numpy(np.ascontiguousarray(beta)).to(device=self.device, dtype=self.dtype)
        values = torch.einsum('ijr,j->ir', X_t, beta_t)
        return values.cpu().numpy().astype(np.float64)
