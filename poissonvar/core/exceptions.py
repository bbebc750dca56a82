"""Exceptions raised by poissonvar."""


class InvalidArgumentError(TypeError, ValueError):
    """Invalid option or constructor argument.

    Subclasses both ``TypeError`` and ``ValueError`` so callers can catch
    either a wrong-type option (e.g. a non-callable accessor) or a wrong-value
    option (e.g. an unknown dtype) with the builtin they expect.
    """
