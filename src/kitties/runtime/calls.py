"""Typed call records accepted by KittiesModule.dispatch().

The caller identity is passed alongside the record, never inside it.
"""

from __future__ import annotations

from dataclasses import dataclass

from kitties.core.types import AccountId, Balance, KittyId


@dataclass(frozen=True, slots=True)
class Create:
    """Create a new kitty for the caller."""


@dataclass(frozen=True, slots=True)
class Breed:
    """Breed two of the caller's kitties."""

    kitty_id_1: KittyId
    kitty_id_2: KittyId


@dataclass(frozen=True, slots=True)
class Transfer:
    """Transfer one of the caller's kitties to another account."""

    to: AccountId
    kitty_id: KittyId


@dataclass(frozen=True, slots=True)
class SetPrice:
    """Update the listing price of one of the caller's kitties."""

    kitty_id: KittyId
    new_price: Balance


@dataclass(frozen=True, slots=True)
class Exchange:
    """Exchange a listed kitty with a counterparty."""

    counterparty: AccountId
    kitty_id: KittyId


Call = Create | Breed | Transfer | SetPrice | Exchange
