"""Unit tests for Observable attach/detach/notify behaviour."""

import pytest

from observa import InvalidArgument, Observable, ObservableEvent, Observer, ObserverRegistry


@pytest.mark.unit
@pytest.mark.observable
def test_observable_starts_empty_with_payload():
    obs = Observable([1, 2, 3])

    assert obs.data == [1, 2, 3]
    assert len(obs) == 0
    assert obs


@pytest.mark.unit
@pytest.mark.observable
def test_notify_passes_container_not_payload(observable, calls, recorder):
    """Observers receive the Observable itself as the event"""
    observable.attach("a", recorder("a"))

    observable.notify()

    assert calls == [("a", observable)]
    assert calls[0][1].data == {"count": 1}


@pytest.mark.unit
@pytest.mark.observable
def test_notify_calls_each_observer_once_in_insertion_order(observable, calls, recorder):
    observable.attach("first", recorder("first"))
    observable.attach("second", recorder("second"))
    observable.attach("third", recorder("third"))

    observable.notify()

    assert [tag for tag, _ in calls] == ["first", "second", "third"]


@pytest.mark.unit
@pytest.mark.observable
def test_attach_then_detach_restores_registry(observable, recorder):
    observable.attach("keep", recorder("keep"))
    before = observable.observers.snapshot()

    observable.attach("temp", recorder("temp"))
    observable.detach("temp")

    assert observable.observers.snapshot() == before


@pytest.mark.unit
@pytest.mark.observable
def test_attach_same_key_overwrites(observable, calls, recorder):
    observable.attach("a", recorder("old"))
    observable.attach("a", recorder("new"))

    observable.notify()

    assert [tag for tag, _ in calls] == ["new"]


@pytest.mark.unit
@pytest.mark.observable
def test_detach_missing_key_is_silent(observable):
    observable.detach("nothing-here")

    assert len(observable) == 0


@pytest.mark.unit
@pytest.mark.observable
def test_detach_all_empties_registry(observable, calls, recorder):
    for tag in ("a", "b", "c"):
        observable.attach(tag, recorder(tag))

    observable.detach_all()
    observable.notify()

    assert len(observable) == 0
    assert calls == []


@pytest.mark.unit
@pytest.mark.observable
def test_attach_plain_function_raises_invalid_argument(observable):
    with pytest.raises(InvalidArgument):
        observable.attach("fn", lambda event: None)


@pytest.mark.unit
@pytest.mark.observable
def test_attach_missing_arguments_raise_type_error(observable):
    with pytest.raises(TypeError):
        observable.attach("key", None)

    with pytest.raises(TypeError):
        observable.attach(None, Observer())

    with pytest.raises(TypeError):
        observable.attach(Observer())


@pytest.mark.unit
@pytest.mark.observable
def test_set_data_replaces_payload(observable, calls):
    observable.attach("log", Observer(lambda event: calls.append(event.data)))

    observable.set_data("new payload")
    observable.notify()
    observable.data = None
    observable.notify()

    assert calls == ["new payload", None]


@pytest.mark.unit
@pytest.mark.observable
def test_observer_exception_aborts_remaining_notifications(observable, calls, recorder):
    def boom(event):
        raise RuntimeError("observer failed")

    observable.attach("a", recorder("a"))
    observable.attach("boom", Observer(boom))
    observable.attach("c", recorder("c"))

    with pytest.raises(RuntimeError, match="observer failed"):
        observable.notify()

    assert [tag for tag, _ in calls] == ["a"]


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.observable
def test_observer_detaching_itself_during_notify(observable, calls, recorder):
    """Detaching during notify does not break the running fan-out"""

    def detach_self(event):
        calls.append(("once", event))
        event.detach("once")

    observable.attach("once", Observer(detach_self))
    observable.attach("after", recorder("after"))

    observable.notify()
    observable.notify()

    assert [tag for tag, _ in calls] == ["once", "after", "after"]


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.observable
def test_same_observer_under_two_keys_is_called_twice(observable, calls, recorder):
    shared = recorder("shared")
    observable.attach("one", shared)
    observable.attach("two", shared)

    observable.notify()

    assert len(calls) == 2


@pytest.mark.unit
@pytest.mark.observable
def test_contains_checks_keys(observable, recorder):
    observable.attach("a", recorder("a"))

    assert "a" in observable
    assert "b" not in observable


@pytest.mark.unit
@pytest.mark.observable
def test_to_observable_event_carries_payload_and_shares_registry(observable, calls, recorder):
    observable.attach("a", recorder("a"))

    event = observable.to_observable_event("changed", {"cancelable": True})

    assert isinstance(event, ObservableEvent)
    assert event.type == "changed"
    assert event.cancelable
    assert event.data == {"count": 1}
    assert event.observers is observable.observers

    event.attach("b", recorder("b"))
    observable.detach("a")

    assert observable.observers.keys() == ["b"]
    event.notify()
    assert calls == [("b", event)]


@pytest.mark.unit
@pytest.mark.observable
def test_round_trip_preserves_payload_and_observers(observable, recorder):
    observable.attach("a", recorder("a"))
    observable.attach("b", recorder("b"))

    round_tripped = observable.to_observable_event("x").to_observable()

    assert isinstance(round_tripped, Observable)
    assert round_tripped.data == observable.data
    assert round_tripped.observers.snapshot() == observable.observers.snapshot()


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.observable
def test_detach_all_is_visible_through_converted_view(observable, recorder):
    observable.attach("a", recorder("a"))
    event = observable.to_observable_event("x")

    observable.detach_all()

    assert len(event) == 0


@pytest.mark.unit
@pytest.mark.observable
def test_observable_constructor_accepts_existing_registry(recorder):
    """Observables built over one registry share their Observers"""
    registry = ObserverRegistry()
    first = Observable("a", observers=registry)
    second = Observable("b", observers=registry)

    first.attach("x", recorder("x"))

    assert second.observers is registry
    assert "x" in second
