"""Kitties: registry, breeding and marketplace for genome-bearing collectibles.

Usage:
    from kitties import KittiesModule, GenesisConfig, EventLog

    log = EventLog()
    module = KittiesModule.from_genesis(GenesisConfig(balances={"bob": 1_000}), sink=log)

    first, _ = module.create("alice").unwrap()
    second, _ = module.create("alice").unwrap()
    result = module.breed("alice", first, second)
    if not result.ok:
        print(result.error)  # ErrorKind.SAME_GENDER
"""

__version__ = "0.1.0"

# Configuration
from kitties.config import GenesisConfig, KittiesSettings, configure_logging

# Core primitives
from kitties.core import (
    AccountId,
    Balance,
    BalanceOverflowError,
    ErrorKind,
    Gender,
    IdOverflowError,
    InsufficientBalanceError,
    InvalidKittyIdError,
    KittiesError,
    Kitty,
    KittyId,
    NotForSaleError,
    SameGenderError,
    SelfExchangeError,
    combine_dna,
    gender,
)

# Events
from kitties.events import (
    EventLog,
    EventSink,
    KittyBred,
    KittyCreated,
    KittyExchanged,
    KittyPriceSet,
    KittyTransferred,
)

# Ledgers
from kitties.ledger import MarketplaceLedger, OwnershipLedger

# Randomness
from kitties.randomness import LocalRandomness, RandomnessPort

# Runtime
from kitties.runtime import (
    Breed,
    CallResult,
    Create,
    Exchange,
    KittiesModule,
    SetPrice,
    Transfer,
)

# Storage
from kitties.storage import IdAllocator, LocalStore, Store

__all__ = [
    # Version
    "__version__",
    # Core
    "AccountId",
    "KittyId",
    "Balance",
    "Kitty",
    "Gender",
    "gender",
    "combine_dna",
    "ErrorKind",
    "KittiesError",
    "IdOverflowError",
    "InvalidKittyIdError",
    "SameGenderError",
    "NotForSaleError",
    "SelfExchangeError",
    "InsufficientBalanceError",
    "BalanceOverflowError",
    # Storage
    "Store",
    "LocalStore",
    "IdAllocator",
    # Randomness
    "RandomnessPort",
    "LocalRandomness",
    # Ledgers
    "OwnershipLedger",
    "MarketplaceLedger",
    # Events
    "EventSink",
    "EventLog",
    "KittyCreated",
    "KittyBred",
    "KittyTransferred",
    "KittyPriceSet",
    "KittyExchanged",
    # Runtime
    "KittiesModule",
    "CallResult",
    "Create",
    "Breed",
    "Transfer",
    "SetPrice",
    "Exchange",
    # Config
    "KittiesSettings",
    "GenesisConfig",
    "configure_logging",
]
