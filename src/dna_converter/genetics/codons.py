"""Standard genetic code (NCBI table 1) over the RNA alphabet."""

from dataclasses import dataclass
from types import MappingProxyType

from Bio.Data.CodonTable import unambiguous_rna_by_id


NCBI_TABLE_ID = 1

STOP_SYMBOL = "*"

_STANDARD = unambiguous_rna_by_id[NCBI_TABLE_ID]

# Only AUG initiates; the table's alternative starts (UUG, CUG) are not used
START_CODON = "AUG"

STOP_CODONS = ("UAA", "UAG", "UGA")

# 61 sense codons + 3 stops, read-only
CODON_TABLE = MappingProxyType({
    **_STANDARD.forward_table,
    **{codon: STOP_SYMBOL for codon in STOP_CODONS},
})


@dataclass(frozen=True)
class GeneticCodeInfo:
    """Description of the genetic code used for translation."""
    name: str
    ncbi_table: int
    description: str
    start_codon: str
    stop_codons: tuple[str, ...]
    total_codons: int
    limitations: tuple[str, ...]


def genetic_code_info() -> GeneticCodeInfo:
    """Return information about the genetic code used by translate()."""
    return GeneticCodeInfo(
        name="Standard Genetic Code",
        ncbi_table=NCBI_TABLE_ID,
        description="Used by nuclear genomes of most organisms",
        start_codon=START_CODON,
        stop_codons=STOP_CODONS,
        total_codons=len(CODON_TABLE),
        limitations=(
            "Does not include mitochondrial genetic codes",
            "Does not include alternative start codons",
            "Does not handle ambiguous nucleotides (N, R, Y, etc.)",
        ),
    )
