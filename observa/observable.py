"""
Observa Observable - Payload Containers With Keyed Observers
============================================================

This module provides the two notifiable containers of Observa:

- **Observable**: holds a payload (``data``) and a keyed registry of Observers.
- **ObservableEvent**: the same contract, but also an ``Event`` and an
  ``EventTarget``, so plain listeners can subscribe to it by type.

Both share ``ObservableMixin``, which implements attach/detach/notify.
``notify()`` is synchronous: each attached Observer's ``observe()`` is called
in insertion order with the container itself as the only argument. An
exception raised by an Observer propagates and the remaining Observers are
not called.

Converting between the two variants keeps the payload and hands over the
same ObserverRegistry, so both views share their Observers:

    ```python
    from observa import Observable, Observer

    obs = Observable("payload")
    event = obs.to_observable_event("changed")
    event.attach("a", Observer(lambda e: print(e.data)))
    "a" in obs  # True
    ```
"""

import logging
from typing import Any, Hashable, Mapping, Optional

from .events import Event, EventTarget
from .observer import Observer
from .registry import ObserverRegistry

logger = logging.getLogger(__name__)


class ObservableMixin:
    """Registry and notification behaviour shared by Observable and ObservableEvent."""

    _observers: ObserverRegistry
    _data: Any

    def _init_observable(
        self, data: Any = None, observers: Optional[ObserverRegistry] = None
    ) -> None:
        self._observers = observers if observers is not None else ObserverRegistry()
        self._data = data

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, value: Any) -> None:
        self._data = value

    @property
    def observers(self) -> ObserverRegistry:
        """The registry of attached Observers, shared with converted counterparts."""
        return self._observers

    def attach(self, key: Hashable, observer: Observer) -> None:
        """
        Attach ``observer`` under ``key`` so it is called on ``notify()``.

        Raises InvalidArgument if either argument is empty or if ``observer``
        is not an Observer. An Observer already stored under ``key`` is
        replaced.
        """
        self._observers.add(key, observer)

    def detach(self, key: Hashable) -> None:
        """Detach the Observer stored under ``key``, if any."""
        self._observers.remove(key)

    def detach_all(self) -> None:
        self._observers.clear()

    def set_data(self, data: Any) -> None:
        self._data = data

    def notify(self) -> None:
        """Call ``observe(self)`` on every attached Observer, in insertion order."""
        snapshot = self._observers.snapshot()
        logger.debug(f"{self!r}: notifying {len(snapshot)} observer(s)")
        for _key, observer in snapshot:
            observer.observe(self)

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, key: object) -> bool:
        return key in self._observers

    def __bool__(self) -> bool:
        # An empty registry must not make the container falsy.
        return True


class Observable(ObservableMixin):
    """
    Container for a payload that Observers can watch.

    Observable objects cannot be listened to through ``add_event_listener``;
    convert with ``to_observable_event()`` for that.
    """

    def __init__(
        self, data: Any = None, observers: Optional[ObserverRegistry] = None
    ) -> None:
        self._init_observable(data, observers)

    def to_observable_event(
        self, type: str, details: Optional[Mapping[str, Any]] = None
    ) -> "ObservableEvent":
        """Return an ObservableEvent with this payload and the same Observer registry."""
        return ObservableEvent(type, details, self._data, observers=self._observers)

    def __repr__(self) -> str:
        return f"Observable({self._data!r}, observers={self._observers.keys()!r})"


class ObservableEvent(Event, EventTarget, ObservableMixin):
    """
    An Event carrying a payload, observable both by Observers and by plain listeners.

    ``notify()`` reaches attached Observers; ``dispatch_event(event)`` reaches
    listeners registered with ``add_event_listener``. The two channels are
    independent.
    """

    def __init__(
        self,
        type: str,
        details: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        observers: Optional[ObserverRegistry] = None,
    ) -> None:
        Event.__init__(self, type, details)
        EventTarget.__init__(self)
        self._init_observable(data, observers)

    def to_observable(self) -> Observable:
        """Return an Observable with this payload and the same Observer registry."""
        return Observable(self._data, observers=self._observers)

    def __repr__(self) -> str:
        return (
            f"ObservableEvent({self.type!r}, {self._data!r}, "
            f"observers={self._observers.keys()!r})"
        )
