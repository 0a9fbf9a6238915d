"""FASTA text detection and parsing."""

import io
import logging
import re
from dataclasses import dataclass

from Bio import SeqIO

from .sequences import validate_sequence

logger = logging.getLogger(__name__)

# Identifier used when a header line carries no name
DEFAULT_ID = "Unnamed"

_FIRST_HEADER = re.compile(r"^>", re.MULTILINE)


@dataclass(frozen=True)
class FastaRecord:
    """One named sequence from FASTA text."""
    id: str
    description: str
    sequence: str


def is_fasta(text: str) -> bool:
    """Return True if the text looks like FASTA (first non-blank character is '>')."""
    return text.strip().startswith(">")


def parse_fasta(text: str) -> list[FastaRecord]:
    """
    Parse FASTA text into records.

    Every line starting with '>' opens a new record. The first word of the
    header is the id, the remaining words joined by single spaces are the
    description. Sequence lines are cleaned with validate_sequence().
    Text before the first header is ignored.

    Records whose sequence ends up empty are still returned; callers decide
    whether to drop them.

    Args:
        text: Multi-line FASTA text

    Returns:
        List of FastaRecord in input order
    """
    start = _FIRST_HEADER.search(text)
    if start is None:
        return []

    records = []
    for rec in SeqIO.parse(io.StringIO(text[start.start():]), "fasta"):
        seq_id = rec.id or DEFAULT_ID
        sequence = validate_sequence(str(rec.seq))
        if not sequence:
            logger.debug("FASTA record %s has no valid sequence", seq_id)
        records.append(FastaRecord(seq_id, " ".join(rec.description.split()[1:]), sequence))
    return records
