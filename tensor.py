# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorstep — Tensor & Optimizer Core                                ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Core Tensor class: a flat NumPy buffer plus a shape descriptor.

The shape only tells callers how to read the buffer; element-wise ops
check total element counts, never dimensions, and the result always takes
the left operand's shape.  A tensor built directly from ``(data, shape)``
is not validated against ``product(shape)`` at construction time.
"""
from __future__ import annotations

import math
import numpy as np
from typing import Any, Sequence

from .dtype import dtype as Dtype
from .errors import ShapeMismatch, SizeMismatch


def _resolve_dtype(dtype) -> np.dtype:
    if dtype is None:
        return np.dtype(np.float32)
    if isinstance(dtype, Dtype):
        return dtype.to_numpy()
    dt = np.dtype(dtype)
    if not np.issubdtype(dt, np.floating):
        raise ValueError(f"Tensor buffers must be floating point, got {dt}")
    return dt


def _as_shape(shape) -> tuple[int, ...]:
    if isinstance(shape, (int, np.integer)):
        shape = (shape,)
    dims = tuple(int(s) for s in shape)
    for s in dims:
        if s < 0:
            raise ValueError(f"Shape dimensions must be non-negative, got {dims}")
    return dims


def _unpack_shape(shape: tuple) -> tuple:
    # reshape(2, 3) and reshape((2, 3)) are both accepted
    if len(shape) == 1 and isinstance(shape[0], (tuple, list, np.ndarray)):
        return tuple(shape[0])
    return shape


class Tensor:
    """Multi-dimensional array of floating-point values.

    ``data`` is held flat and row-major; ``shape`` is a tuple of
    non-negative ints whose product is expected to equal ``size()``.
    """

    __slots__ = ('_data', '_shape')

    # ------------------------------------------------------------------ #
    #  Construction                                                      #
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        data: Any,
        shape: Sequence[int] | int | None = None,
        dtype: Dtype | np.dtype | None = None,
    ):
        if isinstance(data, Tensor):
            src_shape = data._shape
            arr = data._data
            if dtype is None:
                dtype = arr.dtype
        else:
            arr = np.asarray(data)
            src_shape = arr.shape

        self._data: np.ndarray = np.array(arr, dtype=_resolve_dtype(dtype)).reshape(-1)
        self._shape: tuple[int, ...] = _as_shape(src_shape if shape is None else shape)

    @classmethod
    def from_shape(cls, shape: Sequence[int] | int,
                   dtype: Dtype | np.dtype | None = None) -> 'Tensor':
        """Zero-filled tensor holding ``product(shape)`` elements."""
        dims = _as_shape(shape)
        return cls._wrap(np.zeros(math.prod(dims), dtype=_resolve_dtype(dtype)), dims)

    @staticmethod
    def _wrap(data: np.ndarray, shape: tuple[int, ...]) -> 'Tensor':
        t = Tensor.__new__(Tensor)
        t._data = data
        t._shape = shape
        return t

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def dtype(self) -> Dtype:
        return Dtype.from_numpy(self._data.dtype)

    # ------------------------------------------------------------------ #
    #  Basic info methods                                                 #
    # ------------------------------------------------------------------ #

    def size(self) -> int:
        """Number of elements actually stored, not the shape's product."""
        return self._data.size

    def numel(self) -> int:
        return self.size()

    def rank(self) -> int:
        """Number of dimensions in the shape."""
        return len(self._shape)

    def __repr__(self) -> str:
        return f"tensor({self._data.tolist()}, shape={self._shape})"

    # ------------------------------------------------------------------ #
    #  Shape manipulation                                                 #
    # ------------------------------------------------------------------ #

    def reshape(self, *shape) -> 'Tensor':
        """Replace the shape in place; the buffer is never touched.

        Raises:
            ShapeMismatch: if ``product(new_shape)`` differs from the
                product of the current shape.  The tensor is left as it was.
        """
        new_shape = _as_shape(_unpack_shape(shape))
        size = math.prod(self._shape)
        new_size = math.prod(new_shape)
        if size != new_size:
            raise ShapeMismatch(size, new_size)
        self._shape = new_shape
        return self

    # ------------------------------------------------------------------ #
    #  Element-wise arithmetic                                            #
    # ------------------------------------------------------------------ #

    def _elementwise(self, other: 'Tensor', op: str, fn) -> 'Tensor':
        if not isinstance(other, Tensor):
            raise TypeError(
                f"Cannot {op} Tensor and {type(other).__name__}")
        size = self.size()
        if size != other.size():
            raise SizeMismatch(op, size, other.size())
        return Tensor._wrap(fn(self._data, other._data), self._shape)

    def add(self, other: 'Tensor') -> 'Tensor':
        """Element-wise sum, shaped like ``self``."""
        return self._elementwise(other, 'add', np.add)

    def multiply(self, other: 'Tensor') -> 'Tensor':
        """Element-wise (Hadamard) product, shaped like ``self``."""
        return self._elementwise(other, 'multiply', np.multiply)

    mul = multiply

    def __add__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.multiply(other)

    # ------------------------------------------------------------------ #
    #  Conversion                                                         #
    # ------------------------------------------------------------------ #

    def numpy(self) -> np.ndarray:
        """Copy of the flat buffer."""
        return self._data.copy()

    def tolist(self) -> list[float]:
        return self._data.tolist()


# ====================================================================
# Module-level factory functions
# ====================================================================

def tensor(data, shape=None, dtype=None) -> Tensor:
    return Tensor(data, shape=shape, dtype=dtype)


def from_shape(shape, dtype=None) -> Tensor:
    return Tensor.from_shape(shape, dtype=dtype)


def zeros(*size, dtype=None) -> Tensor:
    return Tensor.from_shape(_unpack_shape(size), dtype=dtype)
