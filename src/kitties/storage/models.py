"""Storage record models."""

from __future__ import annotations

from dataclasses import dataclass

from kitties.core.genome import Kitty
from kitties.core.types import AccountId


@dataclass(frozen=True, slots=True)
class OwnedKitty:
    """Ownership record: one entry per kitty id, embedding its owner.

    Keying ownership by id alone makes "exactly one owner per id" structural,
    while "does owner X hold id Y" stays an O(1) lookup plus comparison.
    """

    owner: AccountId
    kitty: Kitty
