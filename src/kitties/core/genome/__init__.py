"""Genome engine: kitty model, gender and DNA combination."""

from kitties.core.genome.gender import Gender, gender
from kitties.core.genome.models import Kitty
from kitties.core.genome.operations import combine_dna, combine_dna_byte

__all__ = [
    "Kitty",
    "Gender",
    "gender",
    "combine_dna",
    "combine_dna_byte",
]
