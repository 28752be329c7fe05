"""Ownership ledger: creating, breeding and transferring kitties.

Usage:
    ledger = OwnershipLedger(store, IdAllocator(store), LocalRandomness())
    kitty_id, kitty = ledger.create("alice")
    ledger.transfer("alice", "bob", kitty_id)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from kitties.core.errors import InvalidKittyIdError, SameGenderError
from kitties.core.genome import Kitty, combine_dna
from kitties.core.types import AccountId, KittyId
from kitties.randomness import RandomnessPort, random_value
from kitties.storage.allocator import IdAllocator
from kitties.storage.protocol import Store

logger = logging.getLogger(__name__)


class OwnershipLedger:
    """Keyed storage of kitties by owner and id.

    Every id is held by at most one owner; transfer() is the only operation
    that changes the owner of an existing id.

    Args:
        store: Backing store for the ownership table.
        allocator: Source of fresh kitty ids.
        randomness: Port used to draw genomes and breeding selectors.
    """

    def __init__(self, store: Store, allocator: IdAllocator, randomness: RandomnessPort):
        self._store = store
        self._allocator = allocator
        self._randomness = randomness

    def exists(self, owner: AccountId, kitty_id: KittyId) -> bool:
        record = self._store.get_kitty(kitty_id)
        return record is not None and record.owner == owner

    def get(self, owner: AccountId, kitty_id: KittyId) -> Kitty | None:
        """Get a kitty if and only if owner holds it."""
        record = self._store.get_kitty(kitty_id)
        if record is None or record.owner != owner:
            return None
        return record.kitty

    def owner_of(self, kitty_id: KittyId) -> AccountId | None:
        record = self._store.get_kitty(kitty_id)
        return None if record is None else record.owner

    def kitties_of(self, owner: AccountId) -> Iterator[tuple[KittyId, Kitty]]:
        return self._store.kitties_of(owner)

    def _require(self, owner: AccountId, kitty_id: KittyId) -> Kitty:
        kitty = self.get(owner, kitty_id)
        if kitty is None:
            raise InvalidKittyIdError(f"Kitty {kitty_id} is not owned by {owner!r}")
        return kitty

    def create(self, owner: AccountId) -> tuple[KittyId, Kitty]:
        """Create a kitty with a random genome for owner.

        Returns:
            (kitty_id, kitty) of the new kitty.

        Raises:
            IdOverflowError: If no id can be allocated.
        """
        kitty_id = self._allocator.allocate()
        kitty = Kitty(random_value(self._randomness, owner))
        self._store.put_kitty(kitty_id, owner, kitty)
        logger.debug("Created kitty %d for %s", kitty_id, owner)
        return kitty_id, kitty

    def breed(
        self, owner: AccountId, kitty_id_1: KittyId, kitty_id_2: KittyId
    ) -> tuple[KittyId, Kitty]:
        """Breed two kitties of opposite gender held by owner.

        The child genome takes each bit from parent 1 or parent 2 according
        to a random selector. Parents are validated before an id is
        allocated, so rejected calls never consume an id.

        Returns:
            (kitty_id, kitty) of the child.

        Raises:
            InvalidKittyIdError: If either parent is not owned by owner.
            SameGenderError: If both parents have the same gender.
            IdOverflowError: If no id can be allocated.
        """
        parent_1 = self._require(owner, kitty_id_1)
        parent_2 = self._require(owner, kitty_id_2)

        if parent_1.gender() == parent_2.gender():
            raise SameGenderError(
                f"Kitties {kitty_id_1} and {kitty_id_2} are both {parent_1.gender().value}"
            )

        kitty_id = self._allocator.allocate()
        selector = random_value(self._randomness, owner)
        child = Kitty(combine_dna(parent_1.dna, parent_2.dna, selector))
        self._store.put_kitty(kitty_id, owner, child)
        logger.debug("Bred kitty %d from %d and %d for %s", kitty_id, kitty_id_1, kitty_id_2, owner)
        return kitty_id, child

    def transfer(self, sender: AccountId, to: AccountId, kitty_id: KittyId) -> bool:
        """Move a kitty from sender to another owner.

        A transfer to oneself only validates that sender holds the kitty.

        Returns:
            True if ownership moved, False for a self-transfer.

        Raises:
            InvalidKittyIdError: If sender does not hold kitty_id.
        """
        self._require(sender, kitty_id)
        if sender == to:
            return False

        self._store.move_kitty(kitty_id, to)
        logger.debug("Transferred kitty %d from %s to %s", kitty_id, sender, to)
        return True

    def remove(self, owner: AccountId, kitty_id: KittyId) -> Kitty | None:
        """Remove a kitty from owner without re-inserting it anywhere.

        Returns:
            The removed kitty, or None if owner did not hold it.
        """
        if not self.exists(owner, kitty_id):
            return None
        record = self._store.take_kitty(kitty_id)
        return None if record is None else record.kitty
