"""Randomness port and per-call value derivation."""

from kitties.randomness.hashing import blake2_128, encode_payload, random_value
from kitties.randomness.local import LocalRandomness
from kitties.randomness.protocol import RandomnessPort

__all__ = [
    "RandomnessPort",
    "LocalRandomness",
    "random_value",
    "encode_payload",
    "blake2_128",
]
