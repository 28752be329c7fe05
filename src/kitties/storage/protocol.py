"""Storage protocol for swappable backends.

The storage layer exposes the four logical tables the ledgers work on:
- Ownership: kitty_id -> OwnedKitty(owner, kitty)
- NextKittyId: single counter
- KittyPrice: kitty_id -> price (listing)
- Balance: account -> balance

Implementations only provide the logical key-value contract. Invariants
(ownership checks, overflow, listing rules) live in the ledgers.

Usage:
    store = LocalStore()
    module = KittiesModule(store=store)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from kitties.core.genome import Kitty
from kitties.core.types import AccountId, Balance, KittyId
from kitties.storage.models import OwnedKitty


@runtime_checkable
class Store(Protocol):
    """Abstract storage interface. Implementations handle actual data."""

    # Ownership table

    def get_kitty(self, kitty_id: KittyId) -> OwnedKitty | None:
        """Get ownership record for a kitty id."""
        ...

    def put_kitty(self, kitty_id: KittyId, owner: AccountId, kitty: Kitty) -> None:
        """Insert or overwrite the ownership record for a kitty id."""
        ...

    def take_kitty(self, kitty_id: KittyId) -> OwnedKitty | None:
        """Remove and return the ownership record, or None if absent."""
        ...

    def move_kitty(self, kitty_id: KittyId, to: AccountId) -> None:
        """Re-key an existing record to a new owner in one step."""
        ...

    def kitties_of(self, owner: AccountId) -> Iterator[tuple[KittyId, Kitty]]:
        """Iterate all kitties held by an owner, ordered by id."""
        ...

    # NextKittyId counter

    def next_kitty_id(self) -> KittyId:
        """Current value of the id counter."""
        ...

    def set_next_kitty_id(self, value: KittyId) -> None:
        """Overwrite the id counter. Only the allocator calls this."""
        ...

    # Listing table

    def get_price(self, kitty_id: KittyId) -> Balance | None:
        """Get listed price, or None if not for sale."""
        ...

    def set_price(self, kitty_id: KittyId, price: Balance) -> None:
        """Create or overwrite a listing."""
        ...

    def take_price(self, kitty_id: KittyId) -> Balance | None:
        """Remove and return a listing, or None if absent."""
        ...

    # Balance table

    def get_balance(self, account: AccountId) -> Balance | None:
        """Get account balance, or None if the account has no record."""
        ...

    def set_balance(self, account: AccountId, balance: Balance) -> None:
        """Create or overwrite an account balance."""
        ...

    # Persistence

    def snapshot(self) -> dict[str, Any]:
        """Serialize all four tables to a JSON-compatible dict."""
        ...

    def restore(self, data: dict[str, Any]) -> None:
        """Replace all four tables from a snapshot() result."""
        ...
