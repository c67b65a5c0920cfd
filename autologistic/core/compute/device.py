"""
Device selection for the optional GPU path.

torch is imported lazily so that CPU-only installs never pay for it.
"""

from typing import Literal

DeviceName = Literal['cpu', 'cuda', 'mps']


def detect_gpu() -> DeviceName | None:
    """
    Detect an available GPU, if any.

    Returns:
        'cuda' or 'mps' for the best available GPU, or None.

    Priority: CUDA > MPS (Apple Silicon)
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        return 'cuda'
    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return 'mps'
    return None


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceName:
    """
    Select a compute device based on preference and availability.

    Args:
        prefer: Device preference
            - 'cpu': Always use CPU
            - 'gpu': Require GPU (raises if unavailable)
            - 'auto': Use GPU if available, else CPU

    Returns:
        'cpu', 'cuda' or 'mps'

    Raises:
        RuntimeError: If 'gpu' requested but no GPU available
        ValueError: If prefer is not a recognized preference
    """
    if prefer == 'cpu':
        return 'cpu'
    if prefer not in ('gpu', 'auto'):
        raise ValueError(f"Unknown device preference: {prefer!r}")

    gpu = detect_gpu()
    if prefer == 'gpu' and gpu is None:
        raise RuntimeError(
            "GPU requested but no GPU available. "
            "Ensure PyTorch is installed with CUDA/MPS support."
        )
    return gpu if gpu is not None else 'cpu'
