"""Supported output precisions."""

from types import MappingProxyType

import numpy as np

from .constants import DEFAULT_DTYPE
from .exceptions import InvalidArgumentError

__all__ = [
    "DEFAULT_DTYPE",
    "DTYPES",
    "is_integer_dtype",
    "resolve_dtype",
]

DTYPES = MappingProxyType(
    {
        "int8": np.int8,
        "int16": np.int16,
        "int32": np.int32,
        "int64": np.int64,
        "uint8": np.uint8,
        "uint16": np.uint16,
        "uint32": np.uint32,
        "uint64": np.uint64,
        "float16": np.float16,
        "float32": np.float32,
        "float64": np.float64,
    }
)


def resolve_dtype(dtype):
    """Return the canonical tag for a requested output precision.

    Parameters
    ----------
    dtype : str or numpy dtype-like
        A tag from :data:`DTYPES` (e.g. ``"int32"``) or anything NumPy
        understands as a dtype whose name is one of those tags
        (e.g. ``np.float32``).

    Returns
    -------
    str
        The supported precision tag.

    Raises
    ------
    InvalidArgumentError
        If the dtype is not in the supported set.
    """
    if isinstance(dtype, str) and dtype in DTYPES:
        return dtype
    if isinstance(dtype, bool) or dtype is None:
        raise InvalidArgumentError(f"dtype must be a string or NumPy dtype, not {type(dtype).__name__}.")

    try:
        name = np.dtype(dtype).name
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"dtype={dtype!r} is not supported. Must be one of {', '.join(DTYPES)}.") from e
    if name not in DTYPES:
        raise InvalidArgumentError(f"dtype={name!r} is not supported. Must be one of {', '.join(DTYPES)}.")
    return name


def is_integer_dtype(dtype):
    """Whether a tag or dtype stores integers."""
    return np.dtype(DTYPES.get(dtype, dtype)).kind in "iu"
