"""
Observa Observer - Callback Holder
==================================

An Observer wraps a single-argument callback. When the Observable or
ObservableEvent it is attached to fires, the callback receives the firing
entity itself (not its payload).

Observer is meant to be extended: subclasses can override ``observe()``
directly and skip the callback altogether.

Example:
    ```python
    from observa import Observable, Observer

    seen = []
    obs = Observable({"count": 1})
    obs.attach("log", Observer(lambda event: seen.append(event.data)))
    obs.notify()
    # seen == [{"count": 1}]
    ```
"""

import inspect
import logging
from typing import Any, Callable, Optional

from .errors import InvalidCallback

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def callback_arity(fn: Callable) -> Optional[int]:
    """
    Count the required positional parameters of ``fn``.

    Parameters with defaults and ``*args``/``**kwargs`` are not counted.
    Returns None when the signature cannot be read or when ``fn`` has a
    required keyword-only parameter, since such a callable can never be
    invoked with a single positional argument.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    required = 0
    for param in sig.parameters.values():
        if param.default is not inspect.Parameter.empty:
            continue
        if param.kind in _POSITIONAL:
            required += 1
        elif param.kind is inspect.Parameter.KEYWORD_ONLY:
            return None
    return required


class Observer:
    """
    Subscriber to Observable and ObservableEvent objects.

    The callback given at construction (or via ``set_observe``) becomes the
    ``observe`` behaviour. Without one, ``observe`` does nothing.
    """

    def __init__(self, fn: Optional[Callable[[Any], Any]] = None) -> None:
        self._callback: Optional[Callable[[Any], Any]] = None
        if fn is not None:
            self.set_observe(fn)

    @property
    def has_callback(self) -> bool:
        return self._callback is not None

    def set_observe(self, fn: Callable[[Any], Any]) -> None:
        """Replace the observe logic with ``fn``, which must take exactly one argument."""
        if fn is None:
            raise InvalidCallback(
                "The observe method must be a valid function that accepts only one parameter"
            )
        if not callable(fn):
            raise InvalidCallback(
                f"Observer must be given a function, not {type(fn).__name__}"
            )
        arity = callback_arity(fn)
        if arity != 1:
            raise InvalidCallback(
                "The observe function can only accept one parameter, "
                "which is the event passed to the Observer"
            )
        self._callback = fn
        logger.debug(f"Observer {id(self):#x} callback set to {fn!r}")

    def observe(self, event: Any) -> None:
        """Run the observe logic for ``event``, the Observable that fired."""
        if self._callback is not None:
            self._callback(event)

    def __repr__(self) -> str:
        return f"Observer({self._callback!r})"
