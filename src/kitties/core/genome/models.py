"""Genome models.

Usage:
    kitty = Kitty(bytes(16))
    kitty.gender()  # Gender.MALE
"""

from __future__ import annotations

from dataclasses import dataclass

from kitties.core.genome.gender import Gender, gender
from kitties.core.types import DNA_LENGTH


@dataclass(frozen=True, slots=True)
class Kitty:
    """Immutable 16-byte genome. Gender is derived, never stored."""

    dna: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.dna, bytes | bytearray):
            raise TypeError(f"Kitty dna must be bytes, got {type(self.dna).__name__}")
        if len(self.dna) != DNA_LENGTH:
            raise ValueError(f"Kitty dna must be {DNA_LENGTH} bytes, got {len(self.dna)}")
        if isinstance(self.dna, bytearray):
            object.__setattr__(self, "dna", bytes(self.dna))

    def gender(self) -> Gender:
        return gender(self.dna)

    def to_hex(self) -> str:
        return self.dna.hex()

    @classmethod
    def from_hex(cls, value: str) -> Kitty:
        return cls(bytes.fromhex(value))
