"""Constants for element-wise variance computation."""

from enum import Enum

DEFAULT_DTYPE = "float64"
DEFAULT_SEPARATOR = "."


class InputKind(str, Enum):
    """Input kind."""

    INVALID = "invalid"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    TYPED_BUFFER = "typed_buffer"
    MATRIX = "matrix"
