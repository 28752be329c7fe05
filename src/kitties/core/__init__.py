"""Core functionalities: stateless models, pure functions and errors.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    For stateful services, see storage/, ledger/ and runtime/.
"""

from kitties.core.errors import (
    BalanceOverflowError,
    ErrorKind,
    IdOverflowError,
    InsufficientBalanceError,
    InvalidKittyIdError,
    KittiesError,
    NotForSaleError,
    SameGenderError,
    SelfExchangeError,
)
from kitties.core.genome import Gender, Kitty, combine_dna, combine_dna_byte, gender
from kitties.core.types import DNA_LENGTH, AccountId, Balance, KittyId

__all__ = [
    # Types
    "AccountId",
    "KittyId",
    "Balance",
    "DNA_LENGTH",
    # Genome
    "Kitty",
    "Gender",
    "gender",
    "combine_dna",
    "combine_dna_byte",
    # Errors
    "ErrorKind",
    "KittiesError",
    "IdOverflowError",
    "InvalidKittyIdError",
    "SameGenderError",
    "NotForSaleError",
    "SelfExchangeError",
    "InsufficientBalanceError",
    "BalanceOverflowError",
]
