"""
Observa Dispatcher
==================

ObservablesDispatcher is a keyed directory of Observable and ObservableEvent
objects. It lets one place fire a single registered container by key, or all
of them at once.
"""

import logging
from typing import Any, Dict, Hashable, Iterator, Union

from .errors import InvalidArgument
from .helpers import is_observable
from .observable import Observable, ObservableEvent

logger = logging.getLogger(__name__)

AnyObservable = Union[Observable, ObservableEvent]


class ObservablesDispatcher:
    """Container and director for Observable and ObservableEvent objects."""

    def __init__(self) -> None:
        self._observables: Dict[Hashable, AnyObservable] = {}

    def register(self, key: Hashable, observable: AnyObservable) -> None:
        """
        Register ``observable`` under ``key``, replacing any previous entry.

        Raises InvalidArgument when either argument is empty or when
        ``observable`` is neither an Observable nor an ObservableEvent.
        """
        if not key or not observable:
            raise InvalidArgument("key and observable must not be empty")
        if not is_observable(observable):
            raise InvalidArgument(
                "The Dispatcher can only accept objects of class Observable or ObservableEvent"
            )
        try:
            self._observables[key] = observable
        except TypeError as e:
            raise InvalidArgument(f"key must be hashable, got {type(key).__name__}") from e
        logger.debug(f"Dispatcher {id(self):#x}: registered {key!r}")

    def unregister(self, key: Hashable) -> None:
        if self.get(key) is not None:
            del self._observables[key]
            logger.debug(f"Dispatcher {id(self):#x}: unregistered {key!r}")

    def remove_all(self) -> None:
        self._observables.clear()

    def get(self, key: Hashable, default: Any = None) -> Any:
        try:
            return self._observables.get(key, default)
        except TypeError:
            # Unhashable keys can never be registered.
            return default

    def dispatch(self, key: Hashable) -> None:
        """Notify the container registered under ``key``; do nothing if there is none."""
        observable = self.get(key)
        if observable is None:
            logger.debug(f"Dispatcher {id(self):#x}: nothing registered for {key!r}")
            return
        observable.notify()

    def dispatch_all(self) -> None:
        """Notify every registered container in registration order."""
        for observable in list(self._observables.values()):
            observable.notify()

    def __len__(self) -> int:
        return len(self._observables)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._observables
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._observables))

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"ObservablesDispatcher({list(self._observables)!r})"
