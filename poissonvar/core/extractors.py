"""Strategies for reading rates from, and writing variances to, sequence elements."""

import logging
from typing import Any, Protocol

from .config import VarianceConfig
from .paths import deep_get, deep_set, split_path

log = logging.getLogger("poissonvar.core.extractors")

__all__ = [
    "AccessorExtractor",
    "PathExtractor",
    "RawExtractor",
    "ValueExtractor",
    "select_extractor",
]


class ValueExtractor(Protocol):
    """Value extractor."""

    in_place: bool

    def extract(self, element: Any, index: int) -> Any:
        """Return the rate held by ``element``."""

    def write(self, out: list, index: int, element: Any, value: Any) -> None:
        """Store the variance computed for ``element``."""


class RawExtractor:
    """Elements are rates themselves."""

    in_place = False

    def extract(self, element, index):
        return element

    def write(self, out, index, element, value):
        out[index] = value


class AccessorExtractor:
    """Rates are read with ``accessor(element, index)``; results replace the element slot."""

    in_place = False

    def __init__(self, accessor):
        self.accessor = accessor

    def extract(self, element, index):
        return self.accessor(element, index)

    def write(self, out, index, element, value):
        out[index] = value


class PathExtractor:
    """Rates live in a nested field which is overwritten with the result.

    Always mutates the elements, whatever the ``copy`` option says.
    """

    in_place = True

    def __init__(self, path, sep):
        self.path = path
        self.keys = split_path(path, sep)

    def extract(self, element, index):
        return deep_get(element, self.keys)

    def write(self, out, index, element, value):
        if not deep_set(element, self.keys, value):
            log.debug("Path %r does not resolve in element %d; left unchanged", self.path, index)


def select_extractor(config: VarianceConfig) -> ValueExtractor:
    """Pick the strategy for a sequence; an accessor beats a path."""
    if config.accessor is not None:
        return AccessorExtractor(config.accessor)
    if config.path is not None:
        return PathExtractor(config.path, config.sep)
    return RawExtractor()


