"""Gender derivation from a genome."""

from __future__ import annotations

from enum import Enum


class Gender(Enum):
    """Gender derived from the parity of the first genome byte."""

    MALE = "male"
    FEMALE = "female"


def gender(dna: bytes) -> Gender:
    """Derive gender from a genome.

    Args:
        dna: Genome bytes (only byte 0 is inspected).

    Returns:
        Gender.MALE if byte 0 is even, Gender.FEMALE otherwise.
    """
    return Gender.MALE if dna[0] % 2 == 0 else Gender.FEMALE
