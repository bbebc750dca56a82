"""Dense two-dimensional matrix backed by a row-major linear buffer."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .backend import is_array
from .constants import DEFAULT_DTYPE
from .dtypes import DTYPES, resolve_dtype
from .exceptions import InvalidArgumentError

__all__ = ["Matrix", "matrix"]


@dataclass(eq=False)
class Matrix:
    """Dense 2-D matrix.

    Attributes
    ----------
    data : ndarray
        Contiguous 1-D buffer holding the elements in row-major order.
    shape : tuple of int
        ``(rows, cols)`` extents. ``rows * cols`` must equal ``len(data)``.
    """

    data: np.ndarray
    shape: tuple[int, int]

    def __post_init__(self):
        if not is_array(self.data) or self.data.ndim != 1:
            raise InvalidArgumentError("Matrix data must be a 1-D array.")
        shape = tuple(self.shape)
        if len(shape) != 2 or any(isinstance(d, bool) or not isinstance(d, (int, np.integer)) for d in shape):
            raise InvalidArgumentError(f"Matrix shape must be a pair of integers, got {self.shape!r}.")
        if shape[0] < 0 or shape[1] < 0:
            raise InvalidArgumentError(f"Matrix shape must be non-negative, got {self.shape!r}.")
        self.shape = (int(shape[0]), int(shape[1]))
        if self.shape[0] * self.shape[1] != self.data.size:
            raise InvalidArgumentError(
                f"Matrix shape {self.shape} does not match data length {self.data.size}."
            )

    @property
    def dtype(self):
        """Precision tag of the backing buffer."""
        return self.data.dtype.name

    @property
    def ndims(self):
        return 2

    @property
    def length(self):
        return int(self.data.size)

    def get(self, i, j):
        """Return the element at row ``i``, column ``j``."""
        return self.data[self._index(i, j)]

    def set(self, i, j, value):
        """Set the element at row ``i``, column ``j``."""
        self.data[self._index(i, j)] = value
        return self

    def to_numpy(self):
        """Return a 2-D view that shares memory with ``data``."""
        return self.data.reshape(self.shape)

    def _index(self, i, j):
        rows, cols = self.shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise IndexError(f"Index ({i}, {j}) is out of bounds for matrix of shape {self.shape}.")
        return i * cols + j

    def __repr__(self):
        return f"Matrix(shape={self.shape}, dtype={self.dtype!r})"


def matrix(shape, data=None, dtype=None):
    """Create a :class:`Matrix`.

    Parameters
    ----------
    shape : tuple of int
        ``(rows, cols)`` extents.
    data : array_like, optional
        Elements in row-major order (any shape with ``rows * cols``
        elements). When omitted the matrix is filled with zeros.
    dtype : str, optional
        Precision tag from :data:`~poissonvar.core.dtypes.DTYPES`. Defaults
        to the dtype of ``data`` when it is an array, otherwise ``"float64"``.

    Returns
    -------
    Matrix
        New matrix. Array ``data`` of the requested dtype is used without
        copying when it is already 1-D and contiguous.
    """
    if dtype is not None:
        dtype = resolve_dtype(dtype)

    shape = tuple(shape)
    if data is None:
        if len(shape) != 2:
            raise InvalidArgumentError(f"Matrix shape must be a pair of integers, got {shape!r}.")
        buf = np.zeros(int(shape[0]) * int(shape[1]), dtype=DTYPES[dtype or DEFAULT_DTYPE])
        return Matrix(buf, shape)

    if is_array(data):
        if dtype is None:
            dtype = resolve_dtype(data.dtype)
        buf = data if data.ndim == 1 else data.reshape(-1)
        buf = buf.astype(DTYPES[dtype], copy=False)
    else:
        buf = np.ravel(np.asarray(data, dtype=DTYPES[dtype or DEFAULT_DTYPE]))
    return Matrix(buf, shape)
