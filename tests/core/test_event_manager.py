"""
test_event_manager.py
---------------------
Tests for the scene-local EventManager.
"""

from pushball.core.services.event_manager import (
    EventManager,
    RestartRequestedEvent,
    TriggerEnteredEvent,
)


def test_dispatch_reaches_subscribers_of_that_type_only():
    events = EventManager()
    entered, restarts = [], []
    events.subscribe(TriggerEnteredEvent, entered.append)
    events.subscribe(RestartRequestedEvent, restarts.append)

    events.dispatch(TriggerEnteredEvent(region="Goal", body_name="Ball"))

    assert entered == [TriggerEnteredEvent(region="Goal", body_name="Ball")]
    assert restarts == []


def test_duplicate_subscription_is_ignored():
    events = EventManager()
    received = []
    events.subscribe(RestartRequestedEvent, received.append)
    events.subscribe(RestartRequestedEvent, received.append)

    events.dispatch(RestartRequestedEvent())

    assert len(received) == 1
    assert events.get_subscriber_count(RestartRequestedEvent) == 1


def test_failing_subscriber_does_not_block_others():
    events = EventManager()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    events.subscribe(RestartRequestedEvent, broken)
    events.subscribe(RestartRequestedEvent, received.append)

    events.dispatch(RestartRequestedEvent(source="keyboard"))

    assert received == [RestartRequestedEvent(source="keyboard")]


def test_subscriber_may_clear_during_dispatch():
    """A restart handler tears the scene (and its subscriptions) down mid-dispatch."""
    events = EventManager()
    calls = []

    def first(event):
        calls.append("first")
        events.clear_all()

    events.subscribe(RestartRequestedEvent, first)
    events.subscribe(RestartRequestedEvent, lambda e: calls.append("second"))

    events.dispatch(RestartRequestedEvent())

    assert calls == ["first", "second"]
    assert events.get_subscriber_count() == 0


def test_unsubscribe_and_counts():
    events = EventManager()
    handler = [].append
    events.subscribe(TriggerEnteredEvent, handler)
    assert events.get_subscriber_count() == 1

    events.unsubscribe(TriggerEnteredEvent, handler)
    events.unsubscribe(TriggerEnteredEvent, handler)

    assert events.get_subscriber_count(TriggerEnteredEvent) == 0


def test_events_are_immutable_values():
    a = TriggerEnteredEvent(region="Goal", body_name="Ball")
    b = TriggerEnteredEvent(region="Goal", body_name="Ball")
    assert a == b
    assert hash(a) == hash(b)
