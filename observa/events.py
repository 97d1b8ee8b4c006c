"""
Observa Events - Native Event Dispatch
======================================

A small in-process event mechanism that ObservableEvent plugs into. It
mirrors the browser's Event/EventTarget pair closely enough that plain
listeners can subscribe to an ObservableEvent by type, alongside any
Observers attached to it.

Event
-----
A type tag plus a ``details`` mapping. The ``bubbles``, ``cancelable`` and
``composed`` keys of ``details`` become flags; everything else is kept as
free-form metadata.

EventTarget
-----------
Holds listeners per event type, in registration order. Dispatch is
synchronous and listener exceptions propagate to the caller.

Example:
    ```python
    from observa.events import Event, EventTarget

    target = EventTarget()
    target.add_event_listener("saved", lambda event: print(event.type))
    target.dispatch_event(Event("saved"))
    ```
"""

import logging
import time
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

Listener = Callable[["Event"], Any]

_FLAG_KEYS = ("bubbles", "cancelable", "composed")


class Event:
    """A typed event with optional details, dispatched through an EventTarget."""

    def __init__(self, type: str, details: Optional[Mapping[str, Any]] = None) -> None:
        if not isinstance(type, str) or not type:
            raise InvalidArgument("event type must be a non-empty string")
        if details is not None and not isinstance(details, Mapping):
            raise InvalidArgument("event details must be a mapping")

        details = dict(details or {})
        self._type = type
        self._details = details
        self.bubbles = bool(details.get("bubbles", False))
        self.cancelable = bool(details.get("cancelable", False))
        self.composed = bool(details.get("composed", False))
        self.time_stamp = time.monotonic()

        self.target: Optional["EventTarget"] = None
        self.current_target: Optional["EventTarget"] = None
        self._default_prevented = False
        self._stop_immediate = False

    @property
    def type(self) -> str:
        return self._type

    @property
    def details(self) -> Dict[str, Any]:
        """Metadata given at construction, minus the flag keys."""
        return {k: v for k, v in self._details.items() if k not in _FLAG_KEYS}

    @property
    def default_prevented(self) -> bool:
        return self._default_prevented

    def prevent_default(self) -> None:
        # Ignored for non-cancelable events, as in the DOM.
        if self.cancelable:
            self._default_prevented = True

    def stop_immediate_propagation(self) -> None:
        self._stop_immediate = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._type!r})"


class _ListenerEntry:
    __slots__ = ("listener", "once", "removed")

    def __init__(self, listener: Listener, once: bool) -> None:
        self.listener = listener
        self.once = once
        self.removed = False


class EventTarget:
    """
    Registry of listeners keyed by event type.

    Adding the same listener twice for one type is a no-op. Listeners added
    with ``once=True`` are removed right before their first call.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[_ListenerEntry]] = {}

    def add_event_listener(
        self, type: str, listener: Listener, once: bool = False
    ) -> None:
        if not callable(listener):
            raise InvalidArgument("listener must be callable")
        entries = self._listeners.setdefault(type, [])
        if any(entry.listener == listener for entry in entries):
            return
        entries.append(_ListenerEntry(listener, once))
        logger.debug(f"{self!r}: listener added for {type!r}")

    def remove_event_listener(self, type: str, listener: Listener) -> None:
        entries = self._listeners.get(type)
        if not entries:
            return
        kept = []
        for entry in entries:
            if entry.listener == listener:
                # Skipped by any dispatch already iterating over this entry.
                entry.removed = True
            else:
                kept.append(entry)
        self._listeners[type] = kept
        if not self._listeners[type]:
            del self._listeners[type]

    def has_event_listener(self, type: str, listener: Listener) -> bool:
        return any(e.listener == listener for e in self._listeners.get(type, ()))

    def dispatch_event(self, event: Event) -> bool:
        """
        Call every listener registered for ``event.type``.

        Returns False if a listener called ``prevent_default()`` on a
        cancelable event, True otherwise.
        """
        if not isinstance(event, Event):
            raise InvalidArgument("dispatch_event requires an Event instance")

        event.target = self
        event.current_target = self
        event._stop_immediate = False
        try:
            for entry in list(self._listeners.get(event.type, ())):
                if entry.removed:
                    continue
                if entry.once:
                    self.remove_event_listener(event.type, entry.listener)
                entry.listener(event)
                if event._stop_immediate:
                    break
        finally:
            event.current_target = None

        logger.debug(f"{self!r}: dispatched {event.type!r}")
        return not event.default_prevented
