"""Array module dispatch for NumPy and CuPy buffers."""

import numpy as np

try:
    import cupy as cp

    HAS_CUPY = True
except ImportError:
    HAS_CUPY = False
    cp = None

__all__ = [
    "HAS_CUPY",
    "_array_module",
    "is_array",
    "is_writeable",
    "to_numpy",
]


def is_array(obj):
    """Return True for NumPy ndarrays and, when installed, CuPy ndarrays."""
    if isinstance(obj, np.ndarray):
        return True
    return HAS_CUPY and hasattr(cp, "ndarray") and isinstance(obj, cp.ndarray)


def is_writeable(arr):
    """Whether an array's memory can be written to in place."""
    flags = getattr(arr, "flags", None)
    if flags is None:
        return True
    return bool(getattr(flags, "writeable", True))


def to_numpy(arr):
    """Ensure the array is a CPU NumPy array.

    Parameters
    ----------
    arr : array_like
        Input array (NumPy or CuPy).

    Returns
    -------
    numpy.ndarray
        CPU NumPy array. NumPy input is returned without a copy.
    """
    if HAS_CUPY and hasattr(cp, "ndarray") and isinstance(arr, cp.ndarray):
        return cp.asnumpy(arr)
    return np.asarray(arr)


def _array_module(*arrays):
    """Return ``cupy`` if any array is a CuPy ndarray, else ``numpy``.

    Output buffers are allocated with the module of the input so a CuPy
    buffer stays on the device it came from.

    Parameters
    ----------
    *arrays : array_like
        One or more arrays to inspect.

    Returns
    -------
    module
        ``cupy`` if any input is a CuPy ndarray, ``numpy`` otherwise.
    """
    if HAS_CUPY and hasattr(cp, "ndarray"):
        for arr in arrays:
            if isinstance(arr, cp.ndarray):
                return cp
    return np
