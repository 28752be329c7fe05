"""Marketplace ledger: price listings and the exchange protocol.

The exchange protocol reproduces the established contract, including three
behaviors awaiting product clarification:
- the listing is consumed before the balance checks, so failed exchanges
  unlist the kitty (unless atomic_exchange is enabled)
- the gating balance is the counterparty's, not the initiator's
- the kitty leaves the initiator but is not credited to the counterparty

Usage:
    market = MarketplaceLedger(store, ownership)
    old_price = market.set_price("alice", kitty_id, 120)
    market.exchange("alice", "bob", kitty_id)
"""

from __future__ import annotations

import logging

from kitties.core.errors import (
    BalanceOverflowError,
    InsufficientBalanceError,
    InvalidKittyIdError,
    NotForSaleError,
    SelfExchangeError,
)
from kitties.core.types import AccountId, Balance, KittyId
from kitties.ledger.ownership import OwnershipLedger
from kitties.storage.protocol import Store

logger = logging.getLogger(__name__)


class MarketplaceLedger:
    """Price listings keyed by kitty id and balances keyed by account.

    Args:
        store: Backing store for listing and balance tables.
        ownership: Ownership ledger used for ownership checks and removal.
        max_balance: Largest representable balance (2**balance_bits - 1).
        atomic_exchange: If True, a rejected exchange leaves the listing in
            place instead of consuming it.
    """

    def __init__(
        self,
        store: Store,
        ownership: OwnershipLedger,
        max_balance: int = 2**128 - 1,
        atomic_exchange: bool = False,
    ):
        self._store = store
        self._ownership = ownership
        self._max_balance = max_balance
        self._atomic_exchange = atomic_exchange

    def price(self, kitty_id: KittyId) -> Balance | None:
        return self._store.get_price(kitty_id)

    def balance(self, account: AccountId) -> Balance | None:
        return self._store.get_balance(account)

    def _check_amount(self, amount: Balance) -> None:
        if not 0 <= amount <= self._max_balance:
            raise ValueError(f"Amount {amount} outside [0, {self._max_balance}]")

    def set_price(self, caller: AccountId, kitty_id: KittyId, new_price: Balance) -> Balance:
        """Overwrite the price of a kitty that is already listed.

        There is no operation creating a first listing; listings only come
        from genesis or storage-level seeding.

        Returns:
            The previous price.

        Raises:
            InvalidKittyIdError: If caller does not own kitty_id.
            NotForSaleError: If kitty_id has no existing listing.
            ValueError: If new_price is outside the balance range.
        """
        self._check_amount(new_price)
        if not self._ownership.exists(caller, kitty_id):
            raise InvalidKittyIdError(f"Kitty {kitty_id} is not owned by {caller!r}")

        old_price = self._store.get_price(kitty_id)
        if old_price is None:
            raise NotForSaleError(f"Kitty {kitty_id} has no listing to update")

        self._store.set_price(kitty_id, new_price)
        logger.debug("Price of kitty %d changed from %d to %d", kitty_id, old_price, new_price)
        return old_price

    def exchange(self, initiator: AccountId, counterparty: AccountId, kitty_id: KittyId) -> Balance:
        """Settle a listed kitty between initiator and counterparty.

        Steps, in order:
        1. initiator == counterparty fails before any storage read.
        2. The listing is taken (peeked in atomic mode); none -> NotForSale.
        3. No counterparty balance record -> NotForSale.
        4. Counterparty balance must exceed the price, else InsufficientBalance.
        5. Price moves from initiator to counterparty (each side only if it
           has a balance record) and the kitty is removed from initiator.

        Returns:
            The settled price.

        Raises:
            SelfExchangeError: If initiator == counterparty.
            NotForSaleError: If no listing or no counterparty balance exists.
            InsufficientBalanceError: If counterparty balance <= price.
            InvalidKittyIdError: If initiator does not hold the kitty.
            BalanceOverflowError: If a balance update leaves the valid range.
        """
        if initiator == counterparty:
            raise SelfExchangeError(f"{initiator!r} cannot exchange with itself")

        gating_balance = self._store.get_balance(counterparty)
        if self._atomic_exchange:
            price = self._store.get_price(kitty_id)
        else:
            price = self._store.take_price(kitty_id)
        if price is None:
            raise NotForSaleError(f"Kitty {kitty_id} is not listed")

        if gating_balance is None:
            raise NotForSaleError(f"{counterparty!r} has no balance record")
        if not price < gating_balance:
            raise InsufficientBalanceError(
                f"Balance {gating_balance} of {counterparty!r} does not exceed price {price}"
            )
        if not self._ownership.exists(initiator, kitty_id):
            raise InvalidKittyIdError(f"Kitty {kitty_id} is not owned by {initiator!r}")

        initiator_balance = self._store.get_balance(initiator)
        if initiator_balance is not None:
            initiator_balance -= price
            if initiator_balance < 0:
                raise BalanceOverflowError(f"Balance of {initiator!r} would drop below zero")
        counterparty_balance = gating_balance + price
        if counterparty_balance > self._max_balance:
            raise BalanceOverflowError(f"Balance of {counterparty!r} would exceed maximum")

        if self._atomic_exchange:
            self._store.take_price(kitty_id)
        if initiator_balance is not None:
            self._store.set_balance(initiator, initiator_balance)
        self._store.set_balance(counterparty, counterparty_balance)
        self._ownership.remove(initiator, kitty_id)

        logger.debug(
            "Exchanged kitty %d between %s and %s at %d", kitty_id, initiator, counterparty, price
        )
        return price
