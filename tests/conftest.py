"""
Shared pytest fixtures for Observa tests.
"""

import pytest

from observa import Observable, ObservableEvent, ObservablesDispatcher, Observer


@pytest.fixture
def calls():
    """A list that recording observers append to."""
    return []


@pytest.fixture
def recorder(calls):
    """Factory for Observers that record (tag, event) pairs into ``calls``."""

    def make(tag):
        return Observer(lambda event: calls.append((tag, event)))

    return make


@pytest.fixture
def observable():
    """Provide a fresh Observable with a simple payload."""
    return Observable({"count": 1})


@pytest.fixture
def observable_event():
    """Provide a fresh ObservableEvent with a simple payload."""
    return ObservableEvent("changed", {"cancelable": True}, {"count": 1})


@pytest.fixture
def dispatcher():
    """Provide a fresh ObservablesDispatcher."""
    return ObservablesDispatcher()
