"""
tensorlib: Flat-Buffer N-Dimensional Tensors
============================================

A small tensor library: a flat row-major buffer, a shape, and the stride
table that maps N-dimensional positions onto the buffer. Transformations
never mutate; they return new tensors.

Example:
    >>> import tensorlib as tl
    >>> t = tl.tensor([[1, 2, 3], [4, 5, 6]])
    >>> t.strides
    (3, 1)
    >>> t.at((1, 2))
    6
    >>> t.element_wise_apply(lambda x: x * 2).at((1, 2))
    12
"""

__version__ = "0.1.0"

from typing import Any, Optional, Sequence
import numpy as np

# Core types
from .tensor import Tensor
from .complex import Complex

# Errors
from .errors import (
    TensorError,
    InvalidShape,
    ShapeMismatch,
    RankMismatch,
    IndexOutOfRange,
    ElementTypeMismatch,
    NotInitialized,
    AlreadyInitialized,
)

# Low-level core
from .core import (
    total_elements,
    compute_strides,
    DType,
    Storage,
    float32,
    float64,
    int32,
    int64,
    bool_,
    complex128,
    object_,
)

from . import config
from .config import get_options, set_options, options
from .interop import from_numpy, to_numpy, from_torch, to_torch
from .format import format_dimensions, format_tensor, print_dimensions, print_tensor
from .utils.logging import setup_logging


def tensor(data: Any, dtype: Optional[DType] = None) -> Tensor:
    """
    Create a tensor from (nested) Python data or a numpy array.

    Args:
        data: Nested lists/tuples or array
        dtype: Data type (inferred when omitted)

    Example:
        >>> tl.tensor([[1.0, 2.0], [3.0, 4.0]]).shape
        (2, 2)
    """
    arr = np.asarray(data, dtype=dtype.numpy_dtype if dtype else None)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    return Tensor(arr.shape, arr.ravel(), dtype=dtype or DType.from_numpy(arr.dtype))


def zeros(*shape: int, dtype: Optional[DType] = None) -> Tensor:
    """Tensor of default (zero) values."""
    if len(shape) == 1 and isinstance(shape[0], Sequence):
        shape = tuple(shape[0])
    return Tensor(shape, dtype=dtype)


__all__ = [
    # Version
    "__version__",

    # Main classes
    "Tensor",
    "Complex",

    # Factory functions
    "tensor",
    "zeros",
    "from_numpy",
    "to_numpy",
    "from_torch",
    "to_torch",

    # Shape arithmetic
    "total_elements",
    "compute_strides",

    # Errors
    "TensorError",
    "InvalidShape",
    "ShapeMismatch",
    "RankMismatch",
    "IndexOutOfRange",
    "ElementTypeMismatch",
    "NotInitialized",
    "AlreadyInitialized",

    # Core types (advanced)
    "DType",
    "Storage",
    "float32",
    "float64",
    "int32",
    "int64",
    "bool_",
    "complex128",
    "object_",

    # Configuration and diagnostics
    "config",
    "get_options",
    "set_options",
    "options",
    "setup_logging",
    "format_dimensions",
    "format_tensor",
    "print_dimensions",
    "print_tensor",
]
