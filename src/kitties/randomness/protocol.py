"""Protocol for the injected randomness capability.

The port only supplies entropy inputs. Deriving the 16-byte value from
them is core logic, see kitties.randomness.hashing.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomnessPort(Protocol):
    """Source of the global random seed and the per-call sequence index.

    Example implementations:
        - LocalRandomness: fixed seed, self-advancing index (testing, local runs)
        - A dispatcher-backed port reading the ledger's seed and call index
    """

    def random_seed(self) -> bytes:
        """Global random seed for the current call."""
        ...

    def call_index(self) -> int:
        """Sequence index of the current call within its ordering unit."""
        ...
