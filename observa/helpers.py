"""
Observa Helpers
===============

Shortcuts for the common cases: wrap a value and a callback into an
Observable/Observer pair, and fire anything that might be an Observable.
"""

from typing import Any, Callable, Hashable, NamedTuple, Union

from .observable import Observable, ObservableEvent
from .observer import Observer


class Observation(NamedTuple):
    """The Observer/Observable pair produced by ``observe()``."""

    observer: Observer
    observable: Union[Observable, ObservableEvent]


def is_observable(obj: Any) -> bool:
    """
    Check if an object is an Observable or an ObservableEvent.

    Example:
        ```python
        is_observable(Observable(5))             # True
        is_observable(ObservableEvent("tick"))   # True
        is_observable(5)                         # False
        ```
    """
    return isinstance(obj, (Observable, ObservableEvent))


def observe(
    observable: Any, fn: Union[Observer, Callable[[Any], Any]], key: Hashable
) -> Observation:
    """
    Attach ``fn`` to ``observable`` under ``key``.

    Anything that is not already an Observable or ObservableEvent becomes the
    payload of a new Observable, and anything that is not already an
    Observer is wrapped in one (so it must be a one-argument callable).

    Returns:
        Observation(observer, observable)
    """
    if not is_observable(observable):
        observable = Observable(observable)
    if not isinstance(fn, Observer):
        fn = Observer(fn)

    observable.attach(key, fn)
    return Observation(observer=fn, observable=observable)


def dispatch(observable: Any) -> None:
    """Notify ``observable`` if it is an Observable or ObservableEvent; ignore anything else."""
    if is_observable(observable):
        observable.notify()
