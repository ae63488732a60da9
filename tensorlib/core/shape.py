"""
Shape and stride arithmetic for row-major flat buffers.

All helpers are pure functions of their arguments.
"""

from __future__ import annotations
import operator
from typing import Optional, Sequence, Tuple

from ..errors import InvalidShape


def total_elements(shape: Sequence[int]) -> int:
    """
    Number of elements described by ``shape``.

    Entries are not checked for positivity; a zero or negative
    dimension propagates into the product.

    Args:
        shape: Per-dimension sizes

    Returns:
        Product of all entries

    Raises:
        InvalidShape: If ``shape`` is empty
    """
    if len(shape) == 0:
        raise InvalidShape("Shape should not be empty", shape=shape)
    result = shape[0]
    for dim in shape[1:]:
        result *= dim
    return result


def compute_strides(shape: Sequence[int], total: Optional[int] = None) -> Tuple[int, ...]:
    """
    Row-major strides for ``shape``.

    Starts from the total element count and divides it down one
    dimension at a time, so the outermost dimension gets the largest
    stride and the innermost gets 1.

    Args:
        shape: Per-dimension sizes
        total: Precomputed element count (computed from ``shape`` if omitted)

    Returns:
        One stride per dimension, in the order of ``shape``

    Raises:
        InvalidShape: If ``shape`` is empty or contains a zero entry

    Example:
        >>> compute_strides((2, 3, 4))
        (12, 4, 1)
    """
    if len(shape) == 0:
        raise InvalidShape("Shape should not be empty", shape=shape)
    if total is None:
        total = total_elements(shape)

    strides = []
    running = total
    for dim in shape:
        if dim == 0:
            raise InvalidShape("Shape entries must be non-zero to compute strides", shape=shape)
        strides.append(running // dim)
        running //= dim
    return tuple(strides)


def check_shape(shape: Sequence[int]) -> Tuple[int, ...]:
    """Normalize ``shape`` to a tuple of positive ints or raise InvalidShape."""
    if isinstance(shape, (int, str, bytes)) or shape is None:
        raise InvalidShape(f"Shape must be a sequence of integers, got {shape!r}")
    dims = []
    for dim in shape:
        try:
            dim = operator.index(dim)
        except TypeError:
            raise InvalidShape(f"Shape entries must be integers, got {dim!r}", shape=shape) from None
        if dim <= 0:
            raise InvalidShape(f"Shape entries must be positive, got {dim}", shape=shape)
        dims.append(dim)
    if not dims:
        raise InvalidShape("Shape should not be empty", shape=())
    return tuple(dims)


def flat_offset(position: Sequence[int], strides: Sequence[int]) -> int:
    """Dot product of ``position`` and ``strides`` (no bounds checking)."""
    return sum(index * stride for index, stride in zip(position, strides))
