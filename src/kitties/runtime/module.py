"""KittiesModule: entry point wiring storage, ledgers, randomness and events.

Usage:
    module = KittiesModule()
    kitty_id, kitty = module.create("alice").unwrap()
    module.transfer("alice", "bob", kitty_id)

    # Or through typed call records
    module.dispatch("alice", Breed(kitty_id_1=0, kitty_id_2=1))
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from kitties.config import GenesisConfig, KittiesSettings
from kitties.core.errors import KittiesError
from kitties.core.genome import Kitty
from kitties.core.types import AccountId, Balance, KittyId
from kitties.events import (
    Event,
    EventSink,
    KittyBred,
    KittyCreated,
    KittyExchanged,
    KittyPriceSet,
    KittyTransferred,
)
from kitties.ledger import MarketplaceLedger, OwnershipLedger
from kitties.randomness import LocalRandomness, RandomnessPort
from kitties.runtime.calls import Breed, Call, Create, Exchange, SetPrice, Transfer
from kitties.runtime.result import CallResult
from kitties.storage import IdAllocator, LocalStore, Store

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KittiesModule:
    """State-transition module invoked one call at a time.

    Every call runs to completion under a re-entrant lock, so concurrent
    callers are serialized. Rejected calls return a failed CallResult; on
    success one event is emitted to the sink.

    Args:
        store: Storage backend (default: empty LocalStore).
        randomness: Randomness port (default: LocalRandomness seeded from settings).
        sink: Event sink (default: none, events are dropped).
        settings: Module settings (default: loaded from environment).
    """

    def __init__(
        self,
        store: Store | None = None,
        randomness: RandomnessPort | None = None,
        sink: EventSink | None = None,
        settings: KittiesSettings | None = None,
    ):
        self._settings = settings or KittiesSettings()
        self._store = store or LocalStore()
        self._randomness = randomness or LocalRandomness(self._settings.seed_bytes)
        self._sink = sink
        self._lock = threading.RLock()

        self._allocator = IdAllocator(self._store, self._settings.max_kitty_id)
        self._ownership = OwnershipLedger(self._store, self._allocator, self._randomness)
        self._marketplace = MarketplaceLedger(
            self._store,
            self._ownership,
            max_balance=self._settings.max_balance,
            atomic_exchange=self._settings.atomic_exchange,
        )

    @classmethod
    def from_genesis(
        cls, genesis: GenesisConfig, settings: KittiesSettings | None = None, **kwargs: Any
    ) -> KittiesModule:
        """Create a module over a LocalStore seeded with genesis state.

        Raises:
            ValueError: If genesis values exceed the configured id or balance range.
        """
        settings = settings or KittiesSettings()
        genesis.check_bounds(settings)
        return cls(store=LocalStore.from_genesis(genesis), settings=settings, **kwargs)

    @property
    def settings(self) -> KittiesSettings:
        return self._settings

    @property
    def store(self) -> Store:
        return self._store

    def _run(
        self,
        call_name: str,
        caller: AccountId,
        operation: Callable[[], T],
        to_event: Callable[[T], Event | None],
    ) -> CallResult[T]:
        with self._lock:
            try:
                value = operation()
            except KittiesError as e:
                logger.warning("%s by %s rejected: %s (%s)", call_name, caller, e.kind.value, e)
                return CallResult.failure(e.kind, str(e))

            event = to_event(value)
            if event is not None:
                self._emit(event)
            return CallResult.success(value)

    def _emit(self, event: Event) -> None:
        if self._sink is None:
            return
        try:
            self._sink.emit(event)
        except Exception:
            logger.exception("Event sink failed on %s", type(event).__name__)

    # Calls

    def create(self, caller: AccountId) -> CallResult[tuple[KittyId, Kitty]]:
        """Create a new kitty for caller."""
        return self._run(
            "create",
            caller,
            lambda: self._ownership.create(caller),
            lambda created: KittyCreated(caller, *created),
        )

    def breed(
        self, caller: AccountId, kitty_id_1: KittyId, kitty_id_2: KittyId
    ) -> CallResult[tuple[KittyId, Kitty]]:
        """Breed two of caller's kitties of opposite gender."""
        return self._run(
            "breed",
            caller,
            lambda: self._ownership.breed(caller, kitty_id_1, kitty_id_2),
            lambda bred: KittyBred(caller, *bred),
        )

    def transfer(self, caller: AccountId, to: AccountId, kitty_id: KittyId) -> CallResult[bool]:
        """Transfer caller's kitty to another account.

        Self-transfers succeed without an event.
        """
        return self._run(
            "transfer",
            caller,
            lambda: self._ownership.transfer(caller, to, kitty_id),
            lambda moved: KittyTransferred(caller, to, kitty_id) if moved else None,
        )

    def set_price(
        self, caller: AccountId, kitty_id: KittyId, new_price: Balance
    ) -> CallResult[Balance]:
        """Update an existing listing. The result value is the previous price."""
        return self._run(
            "set_price",
            caller,
            lambda: self._marketplace.set_price(caller, kitty_id, new_price),
            lambda old_price: KittyPriceSet(kitty_id, old_price),
        )

    def exchange(
        self, caller: AccountId, counterparty: AccountId, kitty_id: KittyId
    ) -> CallResult[Balance]:
        """Exchange a listed kitty with counterparty. The result value is the price."""
        return self._run(
            "exchange",
            caller,
            lambda: self._marketplace.exchange(caller, counterparty, kitty_id),
            lambda _: KittyExchanged(kitty_id, caller, counterparty),
        )

    def dispatch(self, caller: AccountId, call: Call) -> CallResult[Any]:
        """Route a typed call record to its operation.

        Raises:
            TypeError: If call is not a known call record.
        """
        match call:
            case Create():
                return self.create(caller)
            case Breed(kitty_id_1=first, kitty_id_2=second):
                return self.breed(caller, first, second)
            case Transfer(to=to, kitty_id=kitty_id):
                return self.transfer(caller, to, kitty_id)
            case SetPrice(kitty_id=kitty_id, new_price=new_price):
                return self.set_price(caller, kitty_id, new_price)
            case Exchange(counterparty=counterparty, kitty_id=kitty_id):
                return self.exchange(caller, counterparty, kitty_id)
        raise TypeError(f"Unknown call: {type(call).__name__}")

    # Read queries

    def kitties(self, owner: AccountId, kitty_id: KittyId) -> Kitty | None:
        return self._ownership.get(owner, kitty_id)

    def owner_of(self, kitty_id: KittyId) -> AccountId | None:
        return self._ownership.owner_of(kitty_id)

    def kitties_of(self, owner: AccountId) -> list[tuple[KittyId, Kitty]]:
        with self._lock:
            return list(self._ownership.kitties_of(owner))

    def next_kitty_id(self) -> KittyId:
        return self._allocator.peek()

    def kitty_price(self, kitty_id: KittyId) -> Balance | None:
        return self._marketplace.price(kitty_id)

    def balance(self, account: AccountId) -> Balance | None:
        return self._marketplace.balance(account)
