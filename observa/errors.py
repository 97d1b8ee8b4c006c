"""
Observa Errors
==============

Exceptions raised by Observa. Both concrete errors also derive from
``TypeError`` so callers catching the builtin keep working.
"""


class ObservaError(Exception):
    """Base class for all Observa errors."""

    pass


class InvalidArgument(ObservaError, TypeError):
    """Raised when a key, observer or observable argument is missing or of the wrong type."""

    pass


class InvalidCallback(ObservaError, TypeError):
    """Raised when an observer callback is not a one-argument callable."""

    pass
