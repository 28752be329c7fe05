"""Tests for event models and the in-memory EventLog."""

from kitties import EventLog, EventSink, Kitty
from kitties.events import (
    KittyBred,
    KittyCreated,
    KittyExchanged,
    KittyPriceSet,
    KittyTransferred,
    event_to_dict,
)


def test_event_log_satisfies_protocol():
    assert isinstance(EventLog(), EventSink)


def test_event_log_preserves_order():
    log = EventLog()
    events = [
        KittyCreated("alice", 0, Kitty(bytes(16))),
        KittyTransferred("alice", "bob", 0),
        KittyPriceSet(0, 10),
    ]
    for event in events:
        log.emit(event)

    assert log.events == events
    assert list(log) == events
    assert len(log) == 3
    assert log.last() == events[-1]


def test_event_log_filters_by_type():
    log = EventLog()
    log.emit(KittyCreated("alice", 0, Kitty(bytes(16))))
    log.emit(KittyExchanged(0, "alice", "bob"))
    log.emit(KittyCreated("alice", 1, Kitty(bytes(16))))

    assert [event.kitty_id for event in log.of_type(KittyCreated)] == [0, 1]
    assert log.of_type(KittyBred) == []


def test_bounded_event_log_keeps_newest():
    log = EventLog(max_events=2)
    for kitty_id in range(5):
        log.emit(KittyPriceSet(kitty_id, kitty_id))

    assert [event.kitty_id for event in log] == [3, 4]


def test_clear_and_empty_last():
    log = EventLog()
    log.emit(KittyPriceSet(0, 1))
    log.clear()

    assert len(log) == 0
    assert log.last() is None


def test_event_to_dict_hex_encodes_genome():
    kitty = Kitty(bytes(range(16)))

    assert event_to_dict(KittyBred("alice", 2, kitty)) == {
        "type": "KittyBred",
        "owner": "alice",
        "kitty_id": 2,
        "kitty": kitty.to_hex(),
    }
    assert event_to_dict(KittyExchanged(1, "alice", "bob")) == {
        "type": "KittyExchanged",
        "kitty_id": 1,
        "initiator": "alice",
        "counterparty": "bob",
    }
