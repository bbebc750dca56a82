"""Validation of variance options."""

from dataclasses import replace

import numpy as np

from .config import VarianceConfig
from .dtypes import resolve_dtype
from .exceptions import InvalidArgumentError


def validate_config(config: VarianceConfig) -> VarianceConfig:
    """Validate options and return a config with a canonical dtype tag.

    NumPy booleans are accepted for ``copy`` and stored as plain ``bool``.

    Raises
    ------
    InvalidArgumentError
        If any option has the wrong type or an unsupported value.
    """
    if config.accessor is not None and not callable(config.accessor):
        raise InvalidArgumentError(f"accessor must be callable, not {type(config.accessor).__name__}.")
    if not isinstance(config.copy, (bool, np.bool_)):
        raise InvalidArgumentError(f"copy must be a boolean, not {type(config.copy).__name__}.")
    if config.path is not None and not isinstance(config.path, str):
        raise InvalidArgumentError(f"path must be a string, not {type(config.path).__name__}.")
    if not isinstance(config.sep, str) or not config.sep:
        raise InvalidArgumentError(f"sep={config.sep!r} is not valid. Must be a non-empty string.")

    if not isinstance(config.copy, bool):
        config = replace(config, copy=bool(config.copy))
    if config.dtype is None:
        return config
    return replace(config, dtype=resolve_dtype(config.dtype))
