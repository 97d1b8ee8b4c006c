"""
Observa Observer Registry
=========================

ObserverRegistry is the ordered key -> Observer mapping behind every
Observable and ObservableEvent.

The registry is a shared handle: converting an Observable to an
ObservableEvent (or back) hands the same registry object to the new
container, so attaching or detaching through either view is visible
through both.
"""

import logging
from typing import Any, Dict, Hashable, Iterator, List, Tuple

from .errors import InvalidArgument
from .observer import Observer

logger = logging.getLogger(__name__)


class ObserverRegistry:
    """
    Insertion-ordered mapping of keys to Observer instances.

    Keys may be any truthy hashable value. Storing under an existing key
    replaces the Observer but keeps the key's original position.
    """

    __slots__ = ("_observers",)

    def __init__(self) -> None:
        self._observers: Dict[Hashable, Observer] = {}

    def add(self, key: Hashable, observer: Observer) -> None:
        if not key or not observer:
            raise InvalidArgument("key and observer must not be empty")
        if not isinstance(observer, Observer):
            raise InvalidArgument("observer must be an instance of Observer")
        try:
            self._observers[key] = observer
        except TypeError as e:
            raise InvalidArgument(f"key must be hashable, got {type(key).__name__}") from e
        logger.debug(f"Registry {id(self):#x}: attached {key!r}")

    def remove(self, key: Hashable) -> None:
        try:
            removed = self._observers.pop(key, None)
        except TypeError:
            # Unhashable keys can never have been added.
            return
        if removed is not None:
            logger.debug(f"Registry {id(self):#x}: detached {key!r}")

    def clear(self) -> None:
        self._observers.clear()
        logger.debug(f"Registry {id(self):#x}: cleared")

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._observers.get(key, default)

    def snapshot(self) -> List[Tuple[Hashable, Observer]]:
        """Return the current (key, observer) pairs in insertion order."""
        return list(self._observers.items())

    def keys(self) -> List[Hashable]:
        return list(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._observers
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())

    def __getitem__(self, key: Hashable) -> Observer:
        return self._observers[key]

    def __repr__(self) -> str:
        return f"ObserverRegistry({self.keys()!r})"
