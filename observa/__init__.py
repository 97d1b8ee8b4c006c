"""
Observa - Keyed Observer Pattern for Python
===========================================

Observers, Observables, ObservableEvents and an ObservablesDispatcher.

Observables hold a payload and a keyed registry of Observers; ``notify()``
calls every attached Observer with the Observable that fired. ObservableEvent
adds a native event-listener channel on top. ObservablesDispatcher fires
registered containers by key.
"""

from .dispatcher import ObservablesDispatcher
from .errors import InvalidArgument, InvalidCallback, ObservaError
from .events import Event, EventTarget
from .helpers import Observation, dispatch, is_observable, observe
from .observable import Observable, ObservableEvent, ObservableMixin
from .observer import Observer, callback_arity
from .registry import ObserverRegistry

__version__ = "1.0.0"

__all__ = [
    # Core
    "Observer",
    "Observable",
    "ObservableEvent",
    "ObservableMixin",
    "ObservablesDispatcher",
    "ObserverRegistry",
    # Native events
    "Event",
    "EventTarget",
    # Helpers
    "observe",
    "dispatch",
    "is_observable",
    "callback_arity",
    "Observation",
    # Exceptions
    "ObservaError",
    "InvalidArgument",
    "InvalidCallback",
]
