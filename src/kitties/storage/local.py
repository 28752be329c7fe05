"""Local in-memory storage implementation.

Simple dict-based storage suitable for single-process use and testing.

Usage:
    store = LocalStore()
    store = LocalStore.from_genesis(GenesisConfig(balances={"alice": 500}))
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from kitties.core.genome import Kitty
from kitties.core.types import AccountId, Balance, KittyId
from kitties.storage.models import OwnedKitty

if TYPE_CHECKING:
    from kitties.config import GenesisConfig


class LocalStore:
    """In-memory store using one dict per logical table.

    Structure:
        _kitties[kitty_id] = OwnedKitty(owner, kitty)
        _prices[kitty_id] = price
        _balances[account] = balance
        _next_kitty_id = counter
    """

    def __init__(self) -> None:
        self._kitties: dict[KittyId, OwnedKitty] = {}
        self._next_kitty_id: KittyId = 0
        self._prices: dict[KittyId, Balance] = {}
        self._balances: dict[AccountId, Balance] = {}

    @classmethod
    def from_genesis(cls, genesis: GenesisConfig) -> LocalStore:
        """Create a store seeded with genesis balances, listings and counter.

        Args:
            genesis: Validated genesis configuration.

        Returns:
            New LocalStore with genesis state applied.
        """
        store = cls()
        store._next_kitty_id = genesis.next_kitty_id
        store._balances.update(genesis.balances)
        store._prices.update(genesis.prices)
        return store

    def get_kitty(self, kitty_id: KittyId) -> OwnedKitty | None:
        return self._kitties.get(kitty_id)

    def put_kitty(self, kitty_id: KittyId, owner: AccountId, kitty: Kitty) -> None:
        self._kitties[kitty_id] = OwnedKitty(owner=owner, kitty=kitty)

    def take_kitty(self, kitty_id: KittyId) -> OwnedKitty | None:
        return self._kitties.pop(kitty_id, None)

    def move_kitty(self, kitty_id: KittyId, to: AccountId) -> None:
        """Re-key a record to a new owner.

        Raises:
            KeyError: If no record exists for kitty_id.
        """
        record = self._kitties[kitty_id]
        self._kitties[kitty_id] = OwnedKitty(owner=to, kitty=record.kitty)

    def kitties_of(self, owner: AccountId) -> Iterator[tuple[KittyId, Kitty]]:
        for kitty_id in sorted(self._kitties):
            record = self._kitties[kitty_id]
            if record.owner == owner:
                yield kitty_id, record.kitty

    def next_kitty_id(self) -> KittyId:
        return self._next_kitty_id

    def set_next_kitty_id(self, value: KittyId) -> None:
        self._next_kitty_id = value

    def get_price(self, kitty_id: KittyId) -> Balance | None:
        return self._prices.get(kitty_id)

    def set_price(self, kitty_id: KittyId, price: Balance) -> None:
        self._prices[kitty_id] = price

    def take_price(self, kitty_id: KittyId) -> Balance | None:
        return self._prices.pop(kitty_id, None)

    def get_balance(self, account: AccountId) -> Balance | None:
        return self._balances.get(account)

    def set_balance(self, account: AccountId, balance: Balance) -> None:
        self._balances[account] = balance

    def snapshot(self) -> dict[str, Any]:
        """Serialize the four tables to a JSON-compatible dict.

        Genomes are hex-encoded; integer keys become strings.

        Returns:
            Snapshot dict accepted by restore().
        """
        return {
            "kitties": {
                str(kitty_id): {"owner": record.owner, "dna": record.kitty.to_hex()}
                for kitty_id, record in self._kitties.items()
            },
            "next_kitty_id": self._next_kitty_id,
            "prices": {str(kitty_id): price for kitty_id, price in self._prices.items()},
            "balances": dict(self._balances),
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Restore from a snapshot() dict, replacing all current state.

        All four tables are parsed before any is replaced, so a malformed
        snapshot leaves the store unchanged.

        Args:
            data: Dict previously produced by snapshot().

        Raises:
            KeyError, ValueError, TypeError: If data is not a valid snapshot.
        """
        kitties = {
            int(kitty_id): OwnedKitty(owner=entry["owner"], kitty=Kitty.from_hex(entry["dna"]))
            for kitty_id, entry in data["kitties"].items()
        }
        next_kitty_id = int(data["next_kitty_id"])
        prices = {int(kitty_id): int(price) for kitty_id, price in data["prices"].items()}
        balances = {account: int(balance) for account, balance in data["balances"].items()}

        self._kitties = kitties
        self._next_kitty_id = next_kitty_id
        self._prices = prices
        self._balances = balances
