"""Tensor container: shape, stride table and flat element buffer."""

from __future__ import annotations
import logging
import operator
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, Sequence, Tuple, Union
import numpy as np

from .config import get_options
from .core.shape import check_shape, compute_strides, flat_offset, total_elements
from .core.storage import DType, Storage
from .errors import (
    AlreadyInitialized,
    IndexOutOfRange,
    NotInitialized,
    RankMismatch,
    ShapeMismatch,
)

logger = logging.getLogger(__name__)


def _infer_dtype(elements: Sequence[Any]) -> DType:
    """DType numpy would pick for a flat sequence; nested or ragged elements give OBJECT."""
    try:
        data = np.asarray(elements)
    except ValueError:
        return DType.OBJECT
    if data.ndim != 1:
        return DType.OBJECT
    return DType.from_numpy(data.dtype)


def _to_python(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


class Tensor:
    """
    An N-dimensional array stored as a flat row-major buffer.

    The shape, stride table and buffer are fixed once the tensor is
    initialized; transformations return new tensors.

    Example:
        >>> t = Tensor((2, 3), [1, 2, 3, 4, 5, 6])
        >>> t.strides
        (3, 1)
        >>> t.at((1, 2))
        6
    """

    def __init__(
        self,
        shape: Optional[Sequence[int]] = None,
        elements: Optional[Sequence[Any]] = None,
        dtype: Optional[DType] = None,
    ):
        """
        Create a Tensor.

        Without a shape the tensor is left uninitialized; call
        ``initialize`` once to give it data.

        Args:
            shape: Per-dimension sizes
            elements: Flat row-major values; empty or omitted means default values
            dtype: Element type (inferred from elements when omitted)
        """
        self._shape: Optional[Tuple[int, ...]] = None
        self._strides: Optional[Tuple[int, ...]] = None
        self._total: Optional[int] = None
        self._storage: Optional[Storage] = None

        if shape is not None:
            self.initialize(shape, elements, dtype)

    def initialize(
        self,
        shape: Sequence[int],
        elements: Optional[Sequence[Any]] = None,
        dtype: Optional[DType] = None,
    ) -> 'Tensor':
        """
        Give an uninitialized tensor its shape and data.

        Args:
            shape: Per-dimension sizes
            elements: Flat row-major values; empty or omitted means default values
            dtype: Element type (inferred from elements when omitted)

        Returns:
            self

        Raises:
            AlreadyInitialized: If the tensor already holds data
            InvalidShape: If the shape is empty or has a non-positive entry
            ShapeMismatch: If the element count differs from the product of the shape
            ElementTypeMismatch: If an element cannot be stored as a scalar of ``dtype``
        """
        if self._storage is not None:
            raise AlreadyInitialized(self._shape)

        shape = check_shape(shape)
        total = total_elements(shape)
        strides = compute_strides(shape, total)

        if elements is None or len(elements) == 0:
            if dtype is None:
                dtype = get_options().default_dtype
            storage = Storage(total, dtype)
        elif len(elements) != total:
            raise ShapeMismatch(total, len(elements), shape)
        else:
            if dtype is None:
                dtype = _infer_dtype(elements)
            storage = Storage(total, dtype, elements)

        self._shape = shape
        self._strides = strides
        self._total = total
        self._storage = storage
        logger.debug("Initialized tensor shape=%s strides=%s dtype=%r", shape, strides, dtype)
        return self

    def _require(self, name: str) -> Storage:
        if self._storage is None:
            raise NotInitialized(name)
        return self._storage

    @property
    def is_initialized(self) -> bool:
        return self._storage is not None

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape of the tensor."""
        self._require("shape")
        return self._shape

    @property
    def strides(self) -> Tuple[int, ...]:
        """Flat-offset increment per dimension."""
        self._require("strides")
        return self._strides

    @property
    def total_elements(self) -> int:
        """Number of elements (product of the shape)."""
        self._require("total_elements")
        return self._total

    size = total_elements

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def dtype(self) -> DType:
        return self._require("dtype").dtype

    @property
    def elements(self) -> np.ndarray:
        """Read-only flat view of the element buffer."""
        return self._require("elements").numpy()

    def numpy(self) -> np.ndarray:
        """Copy of the data shaped as the tensor."""
        return self.elements.reshape(self._shape).copy()

    def clone(self) -> 'Tensor':
        storage = self._require("clone")
        return Tensor(self._shape, storage.numpy(), dtype=storage.dtype)

    def __len__(self) -> int:
        return self.shape[0]

    def _flat_index(self, position: Sequence[int]) -> int:
        position = tuple(operator.index(index) for index in position)
        if len(position) != len(self._shape):
            raise RankMismatch(len(self._shape), len(position))
        for i, (index, size) in enumerate(zip(position, self._shape)):
            if index < 0 or index >= size:
                raise IndexOutOfRange(i, index, size)
        return flat_offset(position, self._strides)

    def at(self, position: Sequence[int]) -> Any:
        """
        Element at an N-dimensional position.

        Args:
            position: One index per dimension

        Returns:
            The element, as a Python scalar for numeric dtypes

        Raises:
            RankMismatch: If ``len(position)`` differs from the rank
            IndexOutOfRange: If any index is negative or not below its dimension
        """
        storage = self._require("at")
        value = _to_python(storage[self._flat_index(position)])
        if get_options().echo_lookups:
            logger.info("Element at given position %s: %r", tuple(position), value)
        return value

    def __getitem__(self, indices: Union[int, Tuple[int, ...]]) -> Any:
        if isinstance(indices, (int, np.integer)):
            indices = (indices,)
        if isinstance(indices, tuple) and all(isinstance(i, (int, np.integer)) for i in indices):
            return self.at(indices)
        raise NotImplementedError("Slicing and advanced indexing are not supported")

    def element_wise_apply(
        self,
        operation: Callable[[Any], Any],
        parallel: Optional[bool] = None,
        max_workers: Optional[int] = None,
    ) -> 'Tensor':
        """
        Apply ``operation`` to every element, returning a new tensor.

        ``operation`` must be pure: elements may be evaluated on a thread
        pool in any order. Results are collected in index order and stored
        with this tensor's shape and dtype in a freshly owned buffer.

        Args:
            operation: Unary callable mapping an element to an element
            parallel: Use a thread pool (defaults to the ``parallel`` option)
            max_workers: Thread pool size (defaults to the ``max_workers`` option)

        Returns:
            New Tensor with the same shape

        Raises:
            ElementTypeMismatch: If a result does not fit this tensor's dtype,
                e.g. an int64 result that overflows

        Example:
            >>> Tensor((2,), [1, 2]).element_wise_apply(lambda x: x * 2).elements
            array([2, 4])
        """
        storage = self._require("element_wise_apply")
        options = get_options()
        if parallel is None:
            parallel = options.parallel
        if max_workers is None:
            max_workers = options.max_workers

        values = storage.numpy().tolist()
        if parallel and len(values) > 1:
            logger.debug("Applying %r to %d elements on a thread pool", operation, len(values))
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                new_values = list(executor.map(operation, values))
        else:
            new_values = [operation(value) for value in values]

        return Tensor(self._shape, new_values, dtype=storage.dtype)

    def row_wise_apply(self, operation: Callable[[Any], Any]) -> 'Tensor':
        raise NotImplementedError("row_wise_apply has no defined iteration order yet")

    def column_wise_apply(self, operation: Callable[[Any], Any]) -> 'Tensor':
        raise NotImplementedError("column_wise_apply has no defined iteration order yet")

    def __repr__(self) -> str:
        if self._storage is None:
            return "Tensor(<uninitialized>)"
        data_str = np.array2string(self.numpy(), precision=4, suppress_small=True)
        return f"Tensor({data_str}, shape={self._shape}, dtype={self._storage.dtype!r})"
