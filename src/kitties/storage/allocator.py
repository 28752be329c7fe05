"""Kitty id allocation service.

IdAllocator hands out monotonically increasing, never reused kitty ids.
The counter itself lives in the store so that it survives snapshot/restore.
"""

from __future__ import annotations

import logging

from kitties.core.errors import IdOverflowError
from kitties.core.types import KittyId
from kitties.storage.protocol import Store

logger = logging.getLogger(__name__)


class IdAllocator:
    """Allocates kitty ids with a checked increment.

    Args:
        store: Store holding the NextKittyId counter.
        max_id: Largest value the counter may reach (2**id_bits - 1).
    """

    def __init__(self, store: Store, max_id: int = 2**32 - 1):
        if max_id < 0:
            raise ValueError(f"max_id must be non-negative, got {max_id}")
        self._store = store
        self._max_id = max_id

    @property
    def max_id(self) -> int:
        return self._max_id

    def peek(self) -> KittyId:
        """Return the id the next allocate() call would hand out."""
        return self._store.next_kitty_id()

    def allocate(self) -> KittyId:
        """Return the current counter value and advance it by one.

        Returns:
            Newly allocated KittyId.

        Raises:
            IdOverflowError: If advancing would exceed max_id. The counter is
                left unchanged.
        """
        current = self._store.next_kitty_id()
        if current >= self._max_id:
            logger.warning("Kitty id counter exhausted at %d", current)
            raise IdOverflowError(f"Kitty id counter cannot advance past {self._max_id}")

        self._store.set_next_kitty_id(current + 1)
        return current
