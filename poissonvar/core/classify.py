"""Classification of inputs into the supported container kinds."""

from .backend import is_array
from .constants import InputKind
from .matrix import Matrix
from .number import is_number


def classify_input(x) -> InputKind:
    """Return the :class:`InputKind` of a variance input.

    Booleans, ``None``, strings, mappings, callables and any other object
    are :attr:`InputKind.INVALID`. Zero-dimensional arrays count as scalars
    and 2-D arrays as matrices.
    """
    if is_number(x):
        return InputKind.SCALAR
    if isinstance(x, Matrix):
        return InputKind.MATRIX
    if is_array(x):
        if x.ndim == 0:
            return InputKind.SCALAR
        if x.ndim == 2:
            return InputKind.MATRIX
        return InputKind.TYPED_BUFFER
    if isinstance(x, (list, tuple)):
        return InputKind.SEQUENCE
    return InputKind.INVALID
