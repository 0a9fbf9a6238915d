"""Shared utility functions."""

from .sequences import (
    validate_sequence,
    get_complement,
    transcribe,
    count_nucleotides,
    calculate_gc,
    round_half_up,
)
from .fasta import FastaRecord, is_fasta, parse_fasta
from .params import parse_params, get_conversion_params

__all__ = [
    "validate_sequence",
    "get_complement",
    "transcribe",
    "count_nucleotides",
    "calculate_gc",
    "round_half_up",
    "FastaRecord",
    "is_fasta",
    "parse_fasta",
    "parse_params",
    "get_conversion_params",
]
