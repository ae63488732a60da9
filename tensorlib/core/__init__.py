"""Shape arithmetic and flat storage for tensorlib."""

from .shape import total_elements, compute_strides, check_shape, flat_offset
from .storage import (
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

__all__ = [
    'total_elements',
    'compute_strides',
    'check_shape',
    'flat_offset',
    'DType',
    'Storage',
    'float32',
    'float64',
    'int32',
    'int64',
    'bool_',
    'complex128',
    'object_',
]
