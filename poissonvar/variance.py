"""Element-wise Poisson distribution variance."""

from __future__ import annotations

import logging
import warnings
from dataclasses import replace

import numpy as np

from poissonvar.core.backend import _array_module, is_array, is_writeable
from poissonvar.core.classify import classify_input
from poissonvar.core.config import VarianceConfig
from poissonvar.core.constants import DEFAULT_DTYPE, DEFAULT_SEPARATOR, InputKind
from poissonvar.core.dtypes import DTYPES, is_integer_dtype
from poissonvar.core.exceptions import InvalidArgumentError
from poissonvar.core.extractors import RawExtractor, select_extractor
from poissonvar.core.matrix import Matrix
from poissonvar.core.number import as_float, is_rate, poisson_variance, poisson_variance_array
from poissonvar.core.validators import validate_config

log = logging.getLogger("poissonvar.variance")

__all__ = [
    "variance",
    "variance_array",
    "variance_matrix",
    "variance_number",
    "variance_sequence",
]


def variance(x, *, accessor=None, dtype=None, copy=True, path=None, sep=DEFAULT_SEPARATOR):
    r"""Compute the variance of a Poisson distribution.

    The variance of a Poisson distribution with mean :math:`\lambda > 0` is
    :math:`\lambda` itself. The rate may be given as a single number or
    element-wise as a sequence, an array or a matrix. Rates that are not
    positive finite numbers give ``nan`` at their position; they never raise.

    Parameters
    ----------
    x : number, list, tuple, ndarray or Matrix
        Mean parameter(s) :math:`\lambda`. Any other input (``None``,
        booleans, strings, mappings, callables, ...) returns ``nan``.
    accessor : callable, optional
        ``accessor(element, index) -> number`` reading the rate from each
        element of a sequence. Results replace the elements (``copy=False``)
        or fill a new list. Takes priority over ``path``.
    dtype : str, optional
        Output precision, one of ``int8``, ``int16``, ``int32``, ``int64``,
        ``uint8``, ``uint16``, ``uint32``, ``uint64``, ``float16``,
        ``float32`` or ``float64``. Arrays and matrices default to
        ``float64``; a plain sequence with a dtype returns an ndarray.
        Ignored for scalars and in accessor/path modes. Integer outputs store
        invalid results as ``0``.
    copy : bool, default True
        When False, results are written into ``x`` and ``x`` is returned.
        If ``x`` cannot hold the results (read-only storage, a tuple, or a
        different ``dtype`` was requested) a new container is returned and a
        ``UserWarning`` is issued.
    path : str, optional
        Delimited path of a nested field holding the rate in each element of a
        sequence. The field is overwritten with the variance and the input
        sequence is returned, whatever ``copy`` says.
    sep : str, default "."
        Separator used to split ``path``.

    Returns
    -------
    float or list or tuple or ndarray or Matrix
        Variance(s) in a container of the same shape as ``x``, or ``nan``
        for unsupported input.

    Raises
    ------
    InvalidArgumentError
        If ``accessor`` is not callable, ``dtype`` is not supported, or
        ``copy``, ``path`` or ``sep`` have the wrong type. Options are checked
        before any element is processed.

    Examples
    --------
    >>> variance(4)
    4
    >>> variance([2, 4, -1])
    [2, 4, nan]
    >>> variance([{"rate": 2}, {"rate": 8}], accessor=lambda d, i: d["rate"])
    [2, 8]
    """
    config = validate_config(VarianceConfig(accessor=accessor, dtype=dtype, copy=copy, path=path, sep=sep))
    kind = classify_input(x)
    log.debug("Dispatching Poisson variance for %s input", kind.value)

    if kind is InputKind.INVALID:
        return np.nan
    if kind is InputKind.SCALAR:
        return variance_number(x)
    if kind is InputKind.MATRIX:
        return _variance_matrix(x, config)
    if kind is InputKind.TYPED_BUFFER:
        return _variance_ndarray(x, config, "array")
    return _variance_sequence(x, config)


def variance_number(lam):
    """Variance for a single rate; 0-d arrays are unwrapped first."""
    if is_array(lam):
        if lam.ndim != 0:
            raise InvalidArgumentError(f"Expected a scalar, got an array of shape {lam.shape}.")
        lam = lam.item()
    return poisson_variance(lam)


def variance_sequence(seq, *, accessor=None, dtype=None, copy=True, path=None, sep=DEFAULT_SEPARATOR):
    """Element-wise variance for a list or tuple.

    See :func:`variance` for the meaning of the options.
    """
    if not isinstance(seq, (list, tuple)):
        raise InvalidArgumentError(f"Expected a list or tuple, got {type(seq).__name__}.")
    config = validate_config(VarianceConfig(accessor=accessor, dtype=dtype, copy=copy, path=path, sep=sep))
    return _variance_sequence(seq, config)


def variance_array(arr, *, dtype=None, copy=True):
    """Element-wise variance for a NumPy or CuPy array of any rank.

    See :func:`variance` for the meaning of the options.
    """
    if not is_array(arr) or arr.ndim == 0:
        raise InvalidArgumentError(f"Expected an array with at least one dimension, got {type(arr).__name__}.")
    config = validate_config(VarianceConfig(dtype=dtype, copy=copy))
    return _variance_ndarray(arr, config, "array")


def variance_matrix(mat, *, dtype=None, copy=True):
    """Element-wise variance for a :class:`~poissonvar.core.matrix.Matrix` or 2-D array.

    See :func:`variance` for the meaning of the options.
    """
    if classify_input(mat) is not InputKind.MATRIX:
        raise InvalidArgumentError(f"Expected a Matrix or 2-D array, got {type(mat).__name__}.")
    config = validate_config(VarianceConfig(dtype=dtype, copy=copy))
    return _variance_matrix(mat, config)


def _plan(current, writeable, config, what, stacklevel=4):
    """Decide between writing into the input and allocating a new output.

    Returns ``(in_place, dtype)``. ``copy=False`` is honoured only when the
    input is writeable and the output precision stays ``current``; otherwise
    a new container is allocated and the caller is warned. ``stacklevel``
    counts the frames between the warning and the user's call.
    """
    if config.copy:
        return False, config.dtype or DEFAULT_DTYPE

    if config.dtype is not None and config.dtype != current:
        held = f"dtype {current!r}" if current else "no fixed dtype"
        warnings.warn(
            f"copy=False cannot be honoured: the input {what} has {held} and cannot store {config.dtype!r} "
            "values. A new container was allocated.",
            UserWarning,
            stacklevel=stacklevel,
        )
        return False, config.dtype

    if not writeable:
        warnings.warn(
            f"copy=False cannot be honoured: the input {what} is read-only. A new container was allocated.",
            UserWarning,
            stacklevel=stacklevel,
        )
        return False, config.dtype or (current if current in DTYPES else DEFAULT_DTYPE)

    return True, current


def _results(arr, dtype):
    """Variances of ``arr`` as a new array of ``dtype``; invalid results are ``0`` in integer storage.

    Integer inputs going to integer storage never pass through ``float64``,
    so values beyond 2**53 stay exact.
    """
    xp = _array_module(arr)
    if is_integer_dtype(dtype) and arr.dtype.kind in "iu":
        return xp.where(arr > 0, arr, 0).astype(DTYPES[dtype])

    values = poisson_variance_array(arr)
    if is_integer_dtype(dtype):
        values = xp.where(xp.isnan(values), 0, values)
    return values.astype(DTYPES[dtype])


def _store(arr):
    """Overwrite ``arr`` with its own variances."""
    xp = _array_module(arr)
    if arr.dtype.kind in "iu":
        arr[...] = xp.where(arr > 0, arr, 0)
        return

    values = poisson_variance_array(arr)
    if arr.dtype.kind == "b":
        values = xp.where(xp.isnan(values), 0, values)
    arr[...] = values


def _integer_results(seq, dtype):
    """Variances of a plain sequence as an integer array, computed on Python ints.

    Values outside the range of ``dtype`` wrap around as in a NumPy integer cast.
    """
    info = np.iinfo(DTYPES[dtype])
    span = 1 << info.bits
    values = [(int(v) - info.min) % span + info.min if is_rate(v) else 0 for v in seq]
    return np.asarray(values, dtype=DTYPES[dtype])


def _variance_ndarray(arr, config, what, stacklevel=4):
    in_place, dtype = _plan(arr.dtype.name, is_writeable(arr), config, what, stacklevel=stacklevel)
    mode = "in place" if in_place else "new output"
    log.debug("Poisson variance of %s with shape %s: %s, dtype=%s", what, arr.shape, mode, dtype)

    if in_place:
        if arr.size:
            _store(arr)
        return arr
    if arr.size == 0:
        xp = _array_module(arr)
        return xp.empty(arr.shape, dtype=DTYPES[dtype])
    return _results(arr, dtype)


def _variance_matrix(mat, config):
    if not isinstance(mat, Matrix):
        return _variance_ndarray(mat, config, "matrix", stacklevel=5)

    data = _variance_ndarray(mat.data, config, "matrix", stacklevel=5)
    if data is mat.data:
        return mat
    return Matrix(data, mat.shape)


def _variance_sequence(seq, config):
    extractor = select_extractor(config)

    if extractor.in_place:
        log.debug("Poisson variance of %d elements at path %r", len(seq), config.path)
        for i, element in enumerate(seq):
            extractor.write(seq, i, element, poisson_variance(extractor.extract(element, i)))
        return seq

    if config.dtype is not None and isinstance(extractor, RawExtractor):
        _, dtype = _plan(None, True, config, "sequence")
        log.debug("Poisson variance of %d elements into a %s array", len(seq), dtype)
        if is_integer_dtype(dtype):
            return _integer_results(seq, dtype)
        return np.asarray([as_float(v) if is_rate(v) else np.nan for v in seq], dtype=DTYPES[dtype])

    in_place, _ = _plan(None, isinstance(seq, list), replace(config, dtype=None), "sequence")
    log.debug("Poisson variance of %d elements: %s", len(seq), "in place" if in_place else "new output")

    out = seq if in_place else [None] * len(seq)
    for i, element in enumerate(seq):
        extractor.write(out, i, element, poisson_variance(extractor.extract(element, i)))
    if isinstance(seq, tuple):
        return tuple(out)
    return out
