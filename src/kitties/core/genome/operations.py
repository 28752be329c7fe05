"""Pure DNA combination functions.

Each selector bit picks, per bit position, whether the child inherits the
bit of parent A (selector bit 0) or parent B (selector bit 1).
"""

from __future__ import annotations

from kitties.core.types import DNA_LENGTH


def combine_dna_byte(a: int, b: int, selector: int) -> int:
    """Combine one byte of two parents under a selector mask."""
    return ((~selector & a) | (selector & b)) & 0xFF


def combine_dna(parent_a: bytes, parent_b: bytes, selector: bytes) -> bytes:
    """Combine two parent genomes into a child genome.

    Args:
        parent_a: Genome of the first parent.
        parent_b: Genome of the second parent.
        selector: Random mask choosing parent bits.

    Returns:
        The 16-byte child genome.

    Raises:
        ValueError: If any input is not exactly 16 bytes.
    """
    for name, value in (("parent_a", parent_a), ("parent_b", parent_b), ("selector", selector)):
        if len(value) != DNA_LENGTH:
            raise ValueError(f"{name} must be {DNA_LENGTH} bytes, got {len(value)}")

    return bytes(
        combine_dna_byte(a, b, s) for a, b, s in zip(parent_a, parent_b, selector, strict=True)
    )
