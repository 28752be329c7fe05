"""Tests for MarketplaceLedger.

The exchange contract is reproduced as established:
- the listing is consumed before balance checks (unless atomic_exchange)
- the counterparty's balance gates the exchange
- the kitty leaves the initiator and is not credited to anyone
"""

import pytest

from kitties import (
    BalanceOverflowError,
    InsufficientBalanceError,
    InvalidKittyIdError,
    NotForSaleError,
    SelfExchangeError,
)
from kitties.ledger import MarketplaceLedger, OwnershipLedger
from kitties.storage import IdAllocator, LocalStore


class RecordingStore(LocalStore):
    """LocalStore that records listing and balance reads."""

    def __init__(self) -> None:
        super().__init__()
        self.reads: list[str] = []

    def get_price(self, kitty_id):
        self.reads.append("get_price")
        return super().get_price(kitty_id)

    def take_price(self, kitty_id):
        self.reads.append("take_price")
        return super().take_price(kitty_id)

    def get_balance(self, account):
        self.reads.append("get_balance")
        return super().get_balance(account)


@pytest.fixture
def ownership(store, randomness):
    return OwnershipLedger(store, IdAllocator(store), randomness)


@pytest.fixture
def market(store, ownership):
    return MarketplaceLedger(store, ownership)


@pytest.fixture
def atomic_market(store, ownership):
    return MarketplaceLedger(store, ownership, atomic_exchange=True)


@pytest.fixture
def listed(store, add_kitty):
    """Kitty owned by alice, listed at 100; alice has 500, bob has 300."""
    kitty_id = add_kitty("alice", first=4)
    store.set_price(kitty_id, 100)
    store.set_balance("alice", 500)
    store.set_balance("bob", 300)
    return kitty_id


# set_price


def test_set_price_overwrites_and_returns_previous(market, store, listed):
    assert market.set_price("alice", listed, 250) == 100
    assert store.get_price(listed) == 250
    assert market.price(listed) == 250


def test_set_price_without_listing_fails_even_for_owner(market, store, add_kitty):
    kitty_id = add_kitty("alice", first=4)

    with pytest.raises(NotForSaleError):
        market.set_price("alice", kitty_id, 100)
    assert store.get_price(kitty_id) is None


def test_set_price_requires_ownership(market, store, listed):
    with pytest.raises(InvalidKittyIdError):
        market.set_price("bob", listed, 1)
    assert store.get_price(listed) == 100


def test_set_price_rejects_out_of_range_amount(market, listed):
    with pytest.raises(ValueError):
        market.set_price("alice", listed, -1)
    with pytest.raises(ValueError):
        market.set_price("alice", listed, 2**128)


# exchange: literal contract


def test_self_exchange_fails_before_any_storage_read():
    store = RecordingStore()
    market = MarketplaceLedger(store, OwnershipLedger(store, IdAllocator(store), None))

    with pytest.raises(SelfExchangeError):
        market.exchange("alice", "alice", 0)
    assert store.reads == []


def test_exchange_settles_against_counterparty_balance(market, store, listed):
    assert market.exchange("alice", "bob", listed) == 100

    assert store.get_balance("alice") == 400
    assert store.get_balance("bob") == 400
    assert store.get_price(listed) is None


def test_exchange_removes_kitty_without_crediting_counterparty(market, ownership, listed):
    market.exchange("alice", "bob", listed)

    assert not ownership.exists("alice", listed)
    assert not ownership.exists("bob", listed)
    assert ownership.owner_of(listed) is None


def test_exchange_without_initiator_balance_only_credits_counterparty(market, store, add_kitty):
    kitty_id = add_kitty("carol", first=4)
    store.set_price(kitty_id, 10)
    store.set_balance("bob", 50)

    market.exchange("carol", "bob", kitty_id)

    assert store.get_balance("carol") is None
    assert store.get_balance("bob") == 60


def test_exchange_of_unlisted_kitty_fails(market, store, add_kitty):
    kitty_id = add_kitty("alice", first=4)
    store.set_balance("bob", 300)

    with pytest.raises(NotForSaleError):
        market.exchange("alice", "bob", kitty_id)


def test_exchange_without_counterparty_balance_consumes_listing(market, store, ownership, listed):
    with pytest.raises(NotForSaleError):
        market.exchange("alice", "carol", listed)

    assert store.get_price(listed) is None
    assert ownership.exists("alice", listed)
    assert store.get_balance("alice") == 500


@pytest.mark.parametrize("counterparty_balance", [100, 99, 0])
def test_insufficient_balance_consumes_listing(market, store, listed, counterparty_balance):
    """Counterparty balance must strictly exceed the price."""
    store.set_balance("bob", counterparty_balance)

    with pytest.raises(InsufficientBalanceError):
        market.exchange("alice", "bob", listed)

    assert store.get_price(listed) is None
    assert store.get_balance("alice") == 500
    assert store.get_balance("bob") == counterparty_balance


def test_exchange_of_kitty_not_held_by_initiator_moves_no_balance(market, store, listed):
    store.set_balance("dave", 50)

    with pytest.raises(InvalidKittyIdError):
        market.exchange("dave", "bob", listed)

    assert store.get_balance("dave") == 50
    assert store.get_balance("bob") == 300
    assert store.get_price(listed) is None


def test_initiator_underflow_is_rejected_before_writes(market, store, listed):
    store.set_balance("alice", 40)

    with pytest.raises(BalanceOverflowError):
        market.exchange("alice", "bob", listed)

    assert store.get_balance("alice") == 40
    assert store.get_balance("bob") == 300
    assert store.get_kitty(listed).owner == "alice"


def test_counterparty_overflow_is_rejected_before_writes(store, ownership, listed):
    market = MarketplaceLedger(store, ownership, max_balance=350)

    with pytest.raises(BalanceOverflowError):
        market.exchange("alice", "bob", listed)

    assert store.get_balance("alice") == 500
    assert store.get_balance("bob") == 300


# exchange: atomic listing mode


def test_atomic_mode_keeps_listing_on_insufficient_balance(atomic_market, store, listed):
    store.set_balance("bob", 100)

    with pytest.raises(InsufficientBalanceError):
        atomic_market.exchange("alice", "bob", listed)
    assert store.get_price(listed) == 100


def test_atomic_mode_keeps_listing_without_counterparty_balance(atomic_market, store, listed):
    with pytest.raises(NotForSaleError):
        atomic_market.exchange("alice", "carol", listed)
    assert store.get_price(listed) == 100


def test_atomic_mode_consumes_listing_on_success(atomic_market, store, listed):
    atomic_market.exchange("alice", "bob", listed)

    assert store.get_price(listed) is None
    assert store.get_balance("bob") == 400
