"""Poisson distribution variance for a single rate and for numeric arrays."""

import math
import numbers

import numpy as np

from .backend import _array_module

__all__ = ["as_float", "is_number", "is_rate", "poisson_variance", "poisson_variance_array"]

_NUMERIC_KINDS = "iuf"


def is_number(value):
    """Whether a value is a real number (booleans excluded)."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def poisson_variance(lam):
    r"""Variance of a Poisson distribution with mean ``lam``.

    .. math::
        \operatorname{Var}[X] = \lambda

    Parameters
    ----------
    lam : float
        Mean parameter :math:`\lambda`.

    Returns
    -------
    float
        ``lam`` unchanged if it is a finite number greater than zero,
        otherwise ``nan``. Never raises.

    Examples
    --------
    >>> poisson_variance(4)
    4
    >>> poisson_variance(-1)
    nan
    """
    if not is_rate(lam):
        return np.nan
    return lam


def is_rate(value):
    """Whether ``value`` is a positive finite real number.

    Integers and fractions are always finite, however large; only floats are
    checked for ``inf`` and ``nan``.
    """
    if not is_number(value) or not value > 0:
        return False
    return isinstance(value, numbers.Rational) or math.isfinite(value)


def as_float(value):
    """``float(value)``, with rates too large for a double mapped to ``inf``."""
    try:
        return float(value)
    except OverflowError:
        return math.inf


def poisson_variance_array(lam):
    """Element-wise :func:`poisson_variance` over an array.

    Parameters
    ----------
    lam : ndarray
        NumPy or CuPy array of any shape.

    Returns
    -------
    ndarray
        ``float64`` array of the same shape and array module, with ``nan``
        wherever the input is not a positive finite number.
    """
    xp = _array_module(lam)
    if lam.dtype.kind not in _NUMERIC_KINDS:
        values = [as_float(v) if is_rate(v) else np.nan for v in lam.ravel().tolist()]
        return xp.asarray(values, dtype=xp.float64).reshape(lam.shape)

    values = lam.astype(xp.float64)
    valid = xp.isfinite(values) & (values > 0)
    return xp.where(valid, values, xp.nan)
