"""Core building blocks: scalar variance, dtypes, matrices, paths and validation."""

from .backend import HAS_CUPY, to_numpy
from .classify import classify_input
from .config import VarianceConfig
from .constants import DEFAULT_DTYPE, DEFAULT_SEPARATOR, InputKind
from .dtypes import DTYPES, resolve_dtype
from .exceptions import InvalidArgumentError
from .extractors import AccessorExtractor, PathExtractor, RawExtractor, ValueExtractor, select_extractor
from .matrix import Matrix, matrix
from .number import poisson_variance, poisson_variance_array
from .paths import deep_get, deep_set, split_path
from .validators import validate_config

__all__ = [
    "DEFAULT_DTYPE",
    "DEFAULT_SEPARATOR",
    "DTYPES",
    "HAS_CUPY",
    "AccessorExtractor",
    "InputKind",
    "InvalidArgumentError",
    "Matrix",
    "PathExtractor",
    "RawExtractor",
    "ValueExtractor",
    "VarianceConfig",
    "classify_input",
    "deep_get",
    "deep_set",
    "matrix",
    "poisson_variance",
    "poisson_variance_array",
    "resolve_dtype",
    "select_extractor",
    "split_path",
    "to_numpy",
    "validate_config",
]
