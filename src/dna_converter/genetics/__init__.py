"""Genetic code, translation and protein metrics."""

from .codons import (
    CODON_TABLE,
    START_CODON,
    STOP_CODONS,
    GeneticCodeInfo,
    genetic_code_info,
)
from .translation import (
    NO_PROTEIN,
    StopCodon,
    Translation,
    TranslationStatus,
    translate,
    find_stop_codons,
)
from .protein import ProteinInfo, ResidueCount, get_protein_info, molecular_weight

__all__ = [
    # Genetic code
    "CODON_TABLE",
    "START_CODON",
    "STOP_CODONS",
    "GeneticCodeInfo",
    "genetic_code_info",
    # Translation
    "NO_PROTEIN",
    "StopCodon",
    "Translation",
    "TranslationStatus",
    "translate",
    "find_stop_codons",
    # Protein
    "ProteinInfo",
    "ResidueCount",
    "get_protein_info",
    "molecular_weight",
]
