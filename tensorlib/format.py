"""Text dumps of tensors, built only on the public Tensor accessors."""

from __future__ import annotations
import sys
from typing import Optional, TextIO
import numpy as np

from .tensor import Tensor


def format_dimensions(tensor: Tensor) -> str:
    """One-line description of shape and strides."""
    return f"Shape: {tensor.shape}, strides: {tensor.strides}, elements: {tensor.total_elements}"


def format_tensor(tensor: Tensor, precision: int = 4) -> str:
    """The tensor contents laid out by shape."""
    return np.array2string(tensor.numpy(), precision=precision, suppress_small=True)


def print_dimensions(tensor: Tensor, stream: Optional[TextIO] = None) -> None:
    """Write ``format_dimensions`` to ``stream`` (stdout by default)."""
    print(format_dimensions(tensor), file=stream if stream is not None else sys.stdout)


def print_tensor(tensor: Tensor, precision: int = 4, stream: Optional[TextIO] = None) -> None:
    """Write ``format_tensor`` to ``stream`` (stdout by default)."""
    print(format_tensor(tensor, precision), file=stream if stream is not None else sys.stdout)
