"""Full conversion of raw or FASTA input into analysis results."""

import logging
from dataclasses import dataclass, field

from dna_converter.genetics import (
    ProteinInfo,
    ResidueCount,
    StopCodon,
    Translation,
    find_stop_codons,
    get_protein_info,
    translate,
)
from dna_converter.utils import (
    calculate_gc,
    count_nucleotides,
    get_complement,
    is_fasta,
    parse_fasta,
    transcribe,
    validate_sequence,
)

logger = logging.getLogger(__name__)

# User-facing messages for a failed conversion
EMPTY_INPUT = "Please enter a DNA sequence or FASTA format"
NO_FASTA_SEQUENCES = "No valid sequences found in FASTA input"
INVALID_SEQUENCE = "Invalid sequence. Please use only A, T, G, C characters."


@dataclass(frozen=True)
class AnalysisResult:
    """Read-only snapshot of everything derived from one DNA sequence."""
    original: str
    complement: str
    rna: str
    translation: Translation
    nucleotide_counts: dict[str, int]
    gc_content: float
    stop_codons: list[StopCodon]
    protein_info: ProteinInfo
    id: str | None = None
    description: str = ""

    @property
    def length(self) -> int:
        return len(self.original)

    @property
    def protein(self) -> str:
        return self.translation.display

    @property
    def protein_length(self) -> int:
        return self.protein_info.length

    @property
    def molecular_weight(self) -> float:
        return self.protein_info.molecular_weight

    @property
    def aa_composition(self) -> dict[str, ResidueCount]:
        return self.protein_info.composition

    def to_record(self) -> dict:
        """Flatten into a single table row."""
        row = {
            "id": self.id,
            "description": self.description,
            "length": self.length,
            "gc_content": self.gc_content,
            "protein_length": self.protein_length,
            "molecular_weight": self.molecular_weight,
        }
        row.update(self.nucleotide_counts)
        row.update({
            "stop_codons": len(self.stop_codons),
            "original": self.original,
            "complement": self.complement,
            "rna": self.rna,
            "protein": self.protein,
        })
        return row


@dataclass(frozen=True)
class Conversion:
    """Outcome of one conversion request: results, or an error message."""
    results: list[AnalysisResult] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def analyze_sequence(
    dna: str,
    seq_id: str | None = None,
    description: str = "",
    alphabet: str | None = None,
) -> AnalysisResult:
    """
    Complement, transcribe, translate and measure a validated DNA sequence.

    Args:
        dna: Validated DNA sequence (callers reject empty sequences first)
        seq_id: Identifier, for FASTA records
        description: Header description, for FASTA records
        alphabet: Alphabet tag for the nucleotide counter (None to guess)

    Returns:
        AnalysisResult for the sequence
    """
    rna = transcribe(dna)
    translation = translate(rna)
    return AnalysisResult(
        original=dna,
        complement=get_complement(dna),
        rna=rna,
        translation=translation,
        nucleotide_counts=count_nucleotides(dna, alphabet),
        gc_content=calculate_gc(dna),
        stop_codons=find_stop_codons(rna),
        protein_info=get_protein_info(translation),
        id=seq_id,
        description=description,
    )


def convert_input(text: str, alphabet: str | None = None) -> Conversion:
    """
    Convert raw nucleotide text or FASTA text.

    FASTA records without a sequence are skipped. FASTA input where every
    record is empty fails with NO_FASTA_SEQUENCES, the same as input with no
    records at all; the browser version of this tool reported an empty
    result without an error in that case. A failed conversion is reported
    through Conversion.error, never raised.

    Args:
        text: User input, raw sequence or FASTA
        alphabet: Alphabet tag for the nucleotide counter (None to guess)

    Returns:
        Conversion with one result per usable sequence
    """
    if not text.strip():
        return Conversion(error=EMPTY_INPUT)

    if is_fasta(text):
        records = parse_fasta(text.strip())
        results = []
        for rec in records:
            if not rec.sequence:
                logger.info("Skipping FASTA record %s: no valid sequence", rec.id)
                continue
            results.append(analyze_sequence(rec.sequence, rec.id, rec.description, alphabet))
        if not results:
            return Conversion(error=NO_FASTA_SEQUENCES)
        return Conversion(results)

    cleaned = validate_sequence(text)
    if not cleaned:
        return Conversion(error=INVALID_SEQUENCE)
    return Conversion([analyze_sequence(cleaned, alphabet=alphabet)])
