"""Notification records emitted after successful calls.

Events carry plain values so sinks can serialize them with to_dict().
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from kitties.core.genome import Kitty
from kitties.core.types import AccountId, Balance, KittyId


@dataclass(frozen=True, slots=True)
class KittyCreated:
    """A kitty is created. [owner, kitty_id, kitty]"""

    owner: AccountId
    kitty_id: KittyId
    kitty: Kitty


@dataclass(frozen=True, slots=True)
class KittyBred:
    """A new kitten is bred. [owner, kitty_id, kitty]"""

    owner: AccountId
    kitty_id: KittyId
    kitty: Kitty


@dataclass(frozen=True, slots=True)
class KittyTransferred:
    """A kitty is transferred. [sender, to, kitty_id]"""

    sender: AccountId
    to: AccountId
    kitty_id: KittyId


@dataclass(frozen=True, slots=True)
class KittyPriceSet:
    """A listing price is updated. [kitty_id, price]

    `price` is the price that was replaced.
    """

    kitty_id: KittyId
    price: Balance


@dataclass(frozen=True, slots=True)
class KittyExchanged:
    """A listed kitty is exchanged. [kitty_id, initiator, counterparty]"""

    kitty_id: KittyId
    initiator: AccountId
    counterparty: AccountId


Event = KittyCreated | KittyBred | KittyTransferred | KittyPriceSet | KittyExchanged


def event_to_dict(event: Event) -> dict[str, Any]:
    """Convert an event to a JSON-serializable dictionary."""
    data: dict[str, Any] = {"type": type(event).__name__}
    for key, value in asdict(event).items():
        data[key] = value["dna"].hex() if key == "kitty" else value
    return data
