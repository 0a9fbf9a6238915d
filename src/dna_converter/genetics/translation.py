"""mRNA -> protein translation in the first reading frame.

Both translate() and find_stop_codons() walk non-overlapping codons from
offset 0 and ignore a trailing partial codon. translate() halts at the
first stop codon; find_stop_codons() reports every one of them.
"""

import enum
import logging
from dataclasses import dataclass

from .codons import CODON_TABLE, STOP_CODONS, STOP_SYMBOL

logger = logging.getLogger(__name__)

# Display label when translation yields no residues
NO_PROTEIN = "No protein found"


class TranslationStatus(enum.Enum):
    TRANSLATED = "translated"
    IMMEDIATE_STOP = "immediate_stop"
    NO_CODONS = "no_codons"


@dataclass(frozen=True)
class StopCodon:
    """An in-frame stop codon with 1-based inclusive positions."""
    codon: str
    position: int
    position_end: int


@dataclass(frozen=True)
class Translation:
    """
    Outcome of translating one mRNA.

    ``status`` tells apart a normal translation, a stop codon reached before
    any residue, and a sequence without a single translatable codon.
    ``stop`` is the stop codon that ended translation, if any.
    """
    protein: str
    status: TranslationStatus
    stop: StopCodon | None = None

    @property
    def found(self) -> bool:
        return self.status is TranslationStatus.TRANSLATED

    @property
    def display(self) -> str:
        return self.protein if self.found else NO_PROTEIN

    def __len__(self) -> int:
        return len(self.protein)

    def __str__(self) -> str:
        return self.display


def _codons(rna: str):
    """Yield (0-based offset, codon) for every complete codon in frame 1."""
    for i in range(0, len(rna) - 2, 3):
        yield i, rna[i : i + 3]


def translate(rna: str) -> Translation:
    """
    Translate an mRNA sequence into a protein.

    Codons missing from the codon table are skipped. Translation stops at
    the first stop codon; nothing after it is read.

    Args:
        rna: mRNA sequence (A, U, G, C)

    Returns:
        Translation with the residues read before the first stop
    """
    residues = []
    for i, codon in _codons(rna):
        amino_acid = CODON_TABLE.get(codon)
        if amino_acid is None:
            logger.debug("Skipping unmapped codon %r at position %d", codon, i + 1)
            continue
        if amino_acid == STOP_SYMBOL:
            status = TranslationStatus.TRANSLATED if residues else TranslationStatus.IMMEDIATE_STOP
            return Translation("".join(residues), status, StopCodon(codon, i + 1, i + 3))
        residues.append(amino_acid)

    status = TranslationStatus.TRANSLATED if residues else TranslationStatus.NO_CODONS
    return Translation("".join(residues), status)


def find_stop_codons(rna: str) -> list[StopCodon]:
    """List every in-frame stop codon, without halting at the first."""
    return [
        StopCodon(codon, i + 1, i + 3)
        for i, codon in _codons(rna)
        if codon in STOP_CODONS
    ]
