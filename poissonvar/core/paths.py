"""Read and write nested fields addressed by a delimited path."""

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence

from .constants import DEFAULT_SEPARATOR

__all__ = ["MISSING", "deep_get", "deep_set", "split_path"]


class _Missing:
    def __repr__(self):
        return "MISSING"


MISSING = _Missing()


def split_path(path, sep=DEFAULT_SEPARATOR):
    """Split ``"a.b.0"`` style paths into keys."""
    if path == "":
        return ()
    return tuple(path.split(sep))


def _step(obj, key):
    if isinstance(obj, Mapping):
        return obj.get(key, MISSING)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        idx = _as_index(key)
        if idx is None or not -len(obj) <= idx < len(obj):
            return MISSING
        return obj[idx]
    return getattr(obj, key, MISSING)


def _as_index(key):
    try:
        return int(key)
    except ValueError:
        return None


def deep_get(obj, keys):
    """Return the value at ``keys`` inside ``obj``, or :data:`MISSING`.

    Mappings are traversed by key, sequences by integer index and any other
    object by attribute name.
    """
    cur = obj
    for key in keys:
        cur = _step(cur, key)
        if cur is MISSING:
            return MISSING
    return cur


def deep_set(obj, keys, value):
    """Overwrite an existing nested field.

    Missing intermediate or leaf fields are never created.

    Returns
    -------
    bool
        Whether the field existed and was written.
    """
    if not keys:
        return False
    parent = deep_get(obj, keys[:-1])
    if parent is MISSING:
        return False

    leaf = keys[-1]
    if isinstance(parent, MutableMapping):
        if leaf not in parent:
            return False
        parent[leaf] = value
        return True
    if isinstance(parent, MutableSequence):
        idx = _as_index(leaf)
        if idx is None or not -len(parent) <= idx < len(parent):
            return False
        parent[idx] = value
        return True
    if isinstance(parent, (Mapping, Sequence)) or not hasattr(parent, leaf):
        return False
    setattr(parent, leaf, value)
    return True
