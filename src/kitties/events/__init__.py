"""Notification events and sinks.

Usage:
    from kitties.events import EventLog, KittyCreated

    log = EventLog()
    module = KittiesModule(sink=log)
    module.create("alice")
    assert isinstance(log.last(), KittyCreated)
"""

from kitties.events.log import EventLog
from kitties.events.models import (
    Event,
    KittyBred,
    KittyCreated,
    KittyExchanged,
    KittyPriceSet,
    KittyTransferred,
    event_to_dict,
)
from kitties.events.protocol import EventSink

__all__ = [
    "Event",
    "EventSink",
    "EventLog",
    "KittyCreated",
    "KittyBred",
    "KittyTransferred",
    "KittyPriceSet",
    "KittyExchanged",
    "event_to_dict",
]
