"""Nucleotide sequence utilities."""

import re
from decimal import ROUND_HALF_UP, Decimal

from Bio.SeqUtils import gc_fraction


DNA_BASES = "ATGC"
RNA_BASES = "AUGC"

# Counter key order: A, T, G, C, U
NUCLEOTIDES = ("A", "T", "G", "C", "U")

ALPHABETS = ("DNA", "RNA")

_INVALID_DNA = re.compile(r"[^ATGC]")

# Watson-Crick pairing, position preserved
COMPLEMENT_TABLE = str.maketrans({
    'A': 'T', 'T': 'A', 'G': 'C', 'C': 'G',
})


def validate_sequence(sequence: str) -> str:
    """
    Clean raw text into a DNA sequence.

    Input is uppercased and every character outside A/T/G/C is dropped.
    Nothing is raised for invalid characters; an empty result means the
    input held no usable sequence.

    Args:
        sequence: Raw user text

    Returns:
        Uppercase sequence containing only A, T, G and C
    """
    return _INVALID_DNA.sub("", sequence.upper())


def get_complement(dna: str) -> str:
    """Return the complementary strand (3'->5'), aligned base by base with the input."""
    return dna.translate(COMPLEMENT_TABLE)


def transcribe(dna: str) -> str:
    """Transcribe DNA to mRNA (T becomes U)."""
    return dna.replace("T", "U")


def count_nucleotides(sequence: str, alphabet: str | None = None) -> dict[str, int]:
    """
    Count nucleotides of a DNA or RNA sequence.

    All five symbols are tallied, then the one that does not belong to the
    alphabet is dropped: ``U`` for DNA, ``T`` for RNA. Without an explicit
    alphabet the sequence is treated as RNA when it contains any ``U`` and
    as DNA otherwise.

    Args:
        sequence: Validated DNA or RNA sequence
        alphabet: "DNA", "RNA" or None to guess from the sequence

    Returns:
        Dictionary of nucleotide -> count (A, T/U, G, C)

    Raises:
        ValueError: If alphabet is not one of DNA or RNA
    """
    counts = dict.fromkeys(NUCLEOTIDES, 0)
    for base in sequence:
        if base in counts:
            counts[base] += 1

    if alphabet is None:
        is_rna = "U" in sequence
    elif alphabet.upper() in ALPHABETS:
        is_rna = alphabet.upper() == "RNA"
    else:
        raise ValueError(f"alphabet must be one of {ALPHABETS}, got {alphabet!r}")

    del counts["T" if is_rna else "U"]
    return counts


def calculate_gc(sequence: str) -> float:
    """Calculate GC content as a percentage rounded to two decimals."""
    return round_half_up(gc_fraction(sequence) * 100)


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to a fixed number of decimals, ties away from zero (3.125 -> 3.13)."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
