"""Stateful ledgers operating on a Store."""

from kitties.ledger.marketplace import MarketplaceLedger
from kitties.ledger.ownership import OwnershipLedger

__all__ = [
    "OwnershipLedger",
    "MarketplaceLedger",
]
