"""Configuration for element-wise variance computation."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class VarianceConfig:
    """Variance config.

    Attributes
    ----------
    accessor : callable, optional
        ``accessor(element, index) -> number`` used to read the rate from each
        element of a sequence. Takes priority over ``path``.
    dtype : str, optional
        Output precision tag for sequences, typed buffers and matrices.
    copy : bool
        When False, write results into the input container where possible.
    path : str, optional
        Delimited path of a nested field to read and overwrite in each element.
    sep : str
        Separator for ``path``.
    """

    accessor: Callable[[Any, int], Any] | None = None
    dtype: str | None = None
    copy: bool = True
    path: str | None = None
    sep: str = DEFAULT_SEPARATOR

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return dict(self.__dict__)
