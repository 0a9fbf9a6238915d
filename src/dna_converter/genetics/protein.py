"""Protein composition and molecular weight."""

from collections import Counter
from dataclasses import dataclass, field

from Bio.Data.IUPACData import protein_weights

from dna_converter.utils.sequences import round_half_up

from .translation import NO_PROTEIN, Translation


# Water lost per peptide bond (Da)
PEPTIDE_BOND_LOSS = 18


@dataclass(frozen=True)
class ResidueCount:
    count: int
    percentage: float


@dataclass(frozen=True)
class ProteinInfo:
    """Length, approximate molecular weight (Da) and residue composition of a protein."""
    length: int
    molecular_weight: float
    composition: dict[str, ResidueCount] = field(default_factory=dict)


def molecular_weight(protein: str) -> float:
    """
    Approximate molecular weight of a peptide.

    Sum of the average amino acid masses minus 18 Da for each peptide bond.

    Raises:
        ValueError: If the protein contains a letter without a known mass
    """
    unknown = set(protein) - set(protein_weights)
    if unknown:
        raise ValueError(f"protein contains unknown residues: {sorted(unknown)}")

    weight = sum((protein_weights[aa] for aa in protein), 0.0)
    if len(protein) > 1:
        weight -= PEPTIDE_BOND_LOSS * (len(protein) - 1)
    return round_half_up(weight)


def get_protein_info(protein: str | Translation) -> ProteinInfo:
    """
    Compute length, molecular weight and amino acid composition.

    Composition is ordered by decreasing count; percentages are relative to
    the protein length and rounded to two decimals. The "No protein found"
    label and unsuccessful translations count as an empty protein.

    Args:
        protein: Protein sequence, display label or Translation

    Returns:
        ProteinInfo for the protein
    """
    if isinstance(protein, Translation):
        protein = protein.protein
    if protein == NO_PROTEIN:
        protein = ""

    length = len(protein)
    composition = {
        aa: ResidueCount(count, round_half_up(count / length * 100))
        for aa, count in Counter(protein).most_common()
    }
    return ProteinInfo(length, molecular_weight(protein), composition)
