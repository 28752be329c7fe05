"""Protocol for notification sinks.

Emission is fire-and-forget: sinks are called after state is committed and
cannot veto or roll back a call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kitties.events.models import Event


@runtime_checkable
class EventSink(Protocol):
    """Receiver of events emitted by successful calls.

    Example implementations:
        - EventLog: in-memory list (development, tests)
        - A dispatcher-provided sink forwarding to the ledger's event stream
    """

    def emit(self, event: Event) -> None:
        """Deliver one event."""
        ...
