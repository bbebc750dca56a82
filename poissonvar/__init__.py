"""Variance of the Poisson distribution for numbers, sequences, arrays and matrices."""

from poissonvar.core import (
    DEFAULT_DTYPE,
    DTYPES,
    HAS_CUPY,
    InputKind,
    InvalidArgumentError,
    Matrix,
    VarianceConfig,
    classify_input,
    matrix,
    poisson_variance,
    resolve_dtype,
    to_numpy,
)

from .variance import variance, variance_array, variance_matrix, variance_number, variance_sequence

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DTYPE",
    "DTYPES",
    "HAS_CUPY",
    "InputKind",
    "InvalidArgumentError",
    "Matrix",
    "VarianceConfig",
    "classify_input",
    "matrix",
    "poisson_variance",
    "resolve_dtype",
    "to_numpy",
    "variance",
    "variance_array",
    "variance_matrix",
    "variance_number",
    "variance_sequence",
]
