"""Error taxonomy for state transitions.

Every rejected call raises exactly one KittiesError subclass. The runtime
facade converts these into a failed CallResult carrying the ErrorKind;
any other exception is a programming error and propagates.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Enumerated failure reasons returned to the dispatcher."""

    ID_OVERFLOW = "id_overflow"
    INVALID_KITTY_ID = "invalid_kitty_id"
    SAME_GENDER = "same_gender"
    NOT_FOR_SALE = "not_for_sale"
    SELF_EXCHANGE = "self_exchange"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    BALANCE_OVERFLOW = "balance_overflow"


class KittiesError(Exception):
    """Base class for rejected state transitions."""

    kind: ErrorKind


class IdOverflowError(KittiesError):
    """Raised when the next kitty id would exceed the id type's range."""

    kind = ErrorKind.ID_OVERFLOW


class InvalidKittyIdError(KittiesError):
    """Raised when a kitty is absent or not owned by the caller."""

    kind = ErrorKind.INVALID_KITTY_ID


class SameGenderError(KittiesError):
    """Raised when breeding two kitties of the same gender."""

    kind = ErrorKind.SAME_GENDER


class NotForSaleError(KittiesError):
    """Raised when no listing (or no counterparty balance) is present."""

    kind = ErrorKind.NOT_FOR_SALE


class SelfExchangeError(KittiesError):
    """Raised when initiator and counterparty of an exchange are the same."""

    kind = ErrorKind.SELF_EXCHANGE


class InsufficientBalanceError(KittiesError):
    """Raised when the gating balance does not exceed the listed price."""

    kind = ErrorKind.INSUFFICIENT_BALANCE


class BalanceOverflowError(KittiesError):
    """Raised when a balance update would leave the representable range."""

    kind = ErrorKind.BALANCE_OVERFLOW
