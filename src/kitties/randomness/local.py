"""Local randomness port with a fixed seed.

Usage:
    port = LocalRandomness(seed=bytes(32))
    port.call_index()  # 0, then 1, 2, ...
"""

from __future__ import annotations


class LocalRandomness:
    """Fixed-seed port whose call index advances by one on every read.

    Two ports built with the same seed and start index produce the same
    sequence of values, which makes runs reproducible.

    Args:
        seed: Global random seed.
        start_index: First call index handed out.
    """

    def __init__(self, seed: bytes = bytes(32), start_index: int = 0):
        if start_index < 0:
            raise ValueError(f"start_index must be non-negative, got {start_index}")
        self._seed = bytes(seed)
        self._index = start_index

    def random_seed(self) -> bytes:
        return self._seed

    def call_index(self) -> int:
        index = self._index
        self._index += 1
        return index
