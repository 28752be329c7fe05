"""In-memory event sink."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from kitties.events.models import Event, event_to_dict

E = TypeVar("E")


class EventLog:
    """Append-only, in-memory list of emitted events.

    Args:
        max_events: Keep only the newest max_events entries (None = unbounded).
    """

    def __init__(self, max_events: int | None = None):
        self._events: list[Event] = []
        self._max_events = max_events

    def emit(self, event: Event) -> None:
        self._events.append(event)
        if self._max_events is not None and len(self._events) > self._max_events:
            del self._events[: len(self._events) - self._max_events]

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    def last(self) -> Event | None:
        return self._events[-1] if self._events else None

    def of_type(self, event_type: type[E]) -> list[E]:
        return [event for event in self._events if isinstance(event, event_type)]

    def to_dicts(self) -> list[dict[str, Any]]:
        return [event_to_dict(event) for event in self._events]

    def clear(self) -> None:
        self._events.clear()
