"""Derivation of per-call random values.

Payload encoding (all integers little-endian):
    u32 len(seed) | seed | u32 len(caller utf-8) | caller utf-8 | u32 call_index

The payload is hashed with BLAKE2b truncated to a 128-bit digest.
"""

from __future__ import annotations

import hashlib

from kitties.core.types import DNA_LENGTH, AccountId
from kitties.randomness.protocol import RandomnessPort


def encode_payload(seed: bytes, caller: AccountId, call_index: int) -> bytes:
    """Encode (seed, caller, call_index) into the hashed payload.

    Raises:
        ValueError: If call_index does not fit in an unsigned 32-bit integer.
    """
    if not 0 <= call_index < 2**32:
        raise ValueError(f"call_index must fit in u32, got {call_index}")
    caller_bytes = caller.encode("utf-8")
    return b"".join(
        (
            len(seed).to_bytes(4, "little"),
            seed,
            len(caller_bytes).to_bytes(4, "little"),
            caller_bytes,
            call_index.to_bytes(4, "little"),
        )
    )


def blake2_128(payload: bytes) -> bytes:
    return hashlib.blake2b(payload, digest_size=DNA_LENGTH).digest()


def random_value(port: RandomnessPort, caller: AccountId) -> bytes:
    """Draw the 16-byte random value for caller from the port's inputs.

    Args:
        port: Injected randomness capability.
        caller: Identity of the account making the call.

    Returns:
        16 pseudo-random bytes, deterministic for identical inputs.
    """
    return blake2_128(encode_payload(port.random_seed(), caller, port.call_index()))
