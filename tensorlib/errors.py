"""
tensorlib Error Hierarchy
=========================

Every failure is raised synchronously to the caller; nothing is recovered internally.

Error Categories:
- TensorError: Base class for all tensorlib errors
- InvalidShape: Shape descriptor is empty or has unusable entries
- ShapeMismatch: Element count does not match the shape
- RankMismatch: Position length does not match the tensor rank
- IndexOutOfRange: A coordinate falls outside its dimension
- ElementTypeMismatch: Elements do not fit the buffer dtype
- NotInitialized / AlreadyInitialized: Lifecycle violations

Each concrete error also derives from the closest builtin exception, so callers
can catch ``ValueError`` or ``IndexError`` without importing this module.
"""

from typing import Optional


class TensorError(Exception):
    """
    Base class for all tensorlib errors.

    Attributes:
        message: Human-readable error message
        context: Optional context dictionary for debugging
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class InvalidShape(TensorError, ValueError):
    """Shape is empty, or holds a non-integer or non-positive dimension."""

    def __init__(self, message: str = "Shape should not be empty", shape=None):
        context = {}
        if shape is not None:
            context["shape"] = tuple(shape)
        super().__init__(message, context)
        self.shape = shape


class ShapeMismatch(TensorError, ValueError):
    """Supplied element count differs from the product of the shape."""

    def __init__(self, expected: int, actual: int, shape=None):
        self.expected = expected
        self.actual = actual
        context = {"expected": expected, "actual": actual}
        if shape is not None:
            context["shape"] = tuple(shape)
        super().__init__("Input data size does not match tensor shape", context)


class RankMismatch(TensorError, IndexError):
    """Position length differs from the tensor rank."""

    def __init__(self, rank: int, position_length: int):
        self.rank = rank
        self.position_length = position_length
        super().__init__(
            "Position should match shape dimensions",
            {"rank": rank, "position_length": position_length},
        )


class IndexOutOfRange(TensorError, IndexError):
    """A coordinate is negative or not smaller than its dimension."""

    def __init__(self, dim: int, index: int, size: int):
        self.dim = dim
        self.index = index
        self.size = size
        super().__init__(
            f"Index {index} out of bounds for dimension {dim} with size {size}"
        )


class ElementTypeMismatch(TensorError, ValueError):
    """Elements cannot be stored as scalars of the tensor dtype (overflow, nesting, wrong kind)."""

    def __init__(self, dtype, reason: str):
        self.dtype = dtype
        self.reason = reason
        super().__init__(f"Elements cannot be stored as {dtype!r}: {reason}", {"dtype": repr(dtype)})


class NotInitialized(TensorError, RuntimeError):
    """Tensor was default-constructed and never initialized."""

    def __init__(self, attribute: Optional[str] = None):
        context = {"attribute": attribute} if attribute else None
        super().__init__("Tensor has not been initialized", context)


class AlreadyInitialized(TensorError, RuntimeError):
    """initialize() was called on a tensor that already holds data."""

    def __init__(self, shape=None):
        context = {"shape": tuple(shape)} if shape is not None else None
        super().__init__("Tensor is already initialized", context)


__all__ = [
    "TensorError",
    "InvalidShape",
    "ShapeMismatch",
    "RankMismatch",
    "IndexOutOfRange",
    "ElementTypeMismatch",
    "NotInitialized",
    "AlreadyInitialized",
]
