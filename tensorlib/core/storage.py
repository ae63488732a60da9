"""
tensorlib Core: DType and Storage
=================================

The flat element buffer that backs every Tensor.
"""

from __future__ import annotations
import numpy as np
from typing import Any, Optional, Sequence
from enum import Enum

from ..errors import ElementTypeMismatch


class DType(Enum):
    FLOAT32 = ("float32", np.float32)
    FLOAT64 = ("float64", np.float64)
    INT32 = ("int32", np.int32)
    INT64 = ("int64", np.int64)
    BOOL = ("bool", np.bool_)
    COMPLEX128 = ("complex128", np.complex128)
    OBJECT = ("object", np.object_)

    def __init__(self, name: str, numpy_dtype):
        self._name = name
        self.numpy_dtype = numpy_dtype

    def __repr__(self) -> str:
        return f"tl.{self._name}"

    @classmethod
    def from_numpy(cls, dtype) -> "DType":
        """Map a numpy dtype to the matching DType; unknown kinds fall back to OBJECT."""
        dtype = np.dtype(dtype)
        for member in cls:
            if np.dtype(member.numpy_dtype) == dtype:
                return member
        if dtype.kind == "f":
            return cls.FLOAT64
        if dtype.kind in "iu":
            return cls.INT64
        if dtype.kind == "c":
            return cls.COMPLEX128
        return cls.OBJECT


float32 = DType.FLOAT32
float64 = DType.FLOAT64
int32 = DType.INT32
int64 = DType.INT64
bool_ = DType.BOOL
complex128 = DType.COMPLEX128
object_ = DType.OBJECT


class Storage:
    """
    Owned, read-only, one-dimensional buffer of ``size`` elements.

    ``data`` is copied one entry per element; without it the buffer holds
    zeros of ``dtype``. Object buffers store each entry as-is, so tuples
    and lists stay single elements.

    Raises:
        ElementTypeMismatch: If ``data`` does not hold ``size`` scalars of ``dtype``
    """

    def __init__(
        self,
        size: int,
        dtype: DType = float64,
        data: Optional[Sequence[Any]] = None,
    ):
        self.size = size
        self.dtype = dtype

        if data is not None and len(data) != size:
            raise ElementTypeMismatch(dtype, f"expected {size} elements, got {len(data)}")
        if data is not None and dtype is DType.OBJECT:
            self._data = np.empty(size, dtype=np.object_)
            for i, value in enumerate(data):
                self._data[i] = value
        elif data is not None:
            try:
                self._data = np.array(data, dtype=dtype.numpy_dtype)
            except (OverflowError, TypeError, ValueError) as err:
                raise ElementTypeMismatch(dtype, str(err)) from err
            if self._data.shape != (size,):
                raise ElementTypeMismatch(
                    dtype, f"expected {size} scalars, got an array of shape {self._data.shape}"
                )
        elif dtype is DType.OBJECT:
            self._data = np.zeros(size, dtype=np.int64).astype(np.object_)
        else:
            self._data = np.zeros(size, dtype=dtype.numpy_dtype)
        self._data.flags.writeable = False

    def __getitem__(self, idx: int) -> Any:
        return self._data[idx]

    def numpy(self) -> np.ndarray:
        return self._data
