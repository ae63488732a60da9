"""
Conversion between tensorlib tensors and numpy / torch arrays.

torch is an optional dependency (``pip install tensorlib[torch]``) and is
imported only by the torch helpers.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np

from .core.storage import DType
from .tensor import Tensor

if TYPE_CHECKING:
    import torch


def from_numpy(arr: np.ndarray) -> Tensor:
    """Tensor with ``arr``'s shape and a copy of its data."""
    arr = np.asarray(arr)
    return Tensor(arr.shape, arr.ravel(), dtype=DType.from_numpy(arr.dtype))


def to_numpy(tensor: Tensor) -> np.ndarray:
    """Shaped copy of the tensor data."""
    return tensor.numpy()


def from_torch(t: 'torch.Tensor') -> Tensor:
    """Tensor holding a copy of a (possibly GPU-resident) torch tensor."""
    return from_numpy(t.detach().cpu().numpy())


def to_torch(tensor: Tensor) -> 'torch.Tensor':
    """
    torch tensor with the same shape and values.

    Raises:
        TypeError: For object-dtype tensors, which torch cannot hold
    """
    import torch

    if tensor.dtype is DType.OBJECT:
        raise TypeError("Cannot convert an object-dtype tensor to torch")
    return torch.from_numpy(tensor.numpy())
