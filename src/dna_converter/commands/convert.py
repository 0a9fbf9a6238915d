"""Convert DNA sequences to mRNA and protein and report statistics."""

import pandas as pd

from dna_converter.commands.common import (
    add_input_arguments,
    convert_or_exit,
    load_settings,
    title,
    wrap,
)


def register(subparsers):
    """Register the convert subcommand."""
    parser = subparsers.add_parser(
        "convert",
        help="Transcribe and translate DNA sequences",
        description="""
Transcribe DNA to mRNA and translate it to protein (standard genetic code,
first reading frame). Accepts a raw sequence, where anything other than
A/T/G/C is ignored, or FASTA text with one or more records.
""",
    )
    add_input_arguments(parser)
    parser.add_argument("--out", dest="output", help="Output CSV, one row per sequence")
    parser.set_defaults(func=run)


def format_report(result, line_width: int = 0) -> str:
    """Render one analysis result as a text report."""
    counts = " ".join(f"{base}:{n}" for base, n in result.nucleotide_counts.items())
    lines = [
        f"== {title(result)}",
        f"Length:           {result.length} bp",
        f"GC content:       {result.gc_content:.2f}%",
        f"Protein length:   {result.protein_length} aa",
        f"Molecular weight: {result.molecular_weight} Da",
        f"Nucleotides:      {counts}",
        "",
        "Original DNA (5' -> 3')",
        wrap(result.original, line_width),
        "Complementary DNA (3' -> 5')",
        wrap(result.complement, line_width),
        "mRNA (5' -> 3')",
        wrap(result.rna, line_width),
        "Protein",
        wrap(result.protein, line_width),
        "",
        "Stop codons:",
    ]
    if result.stop_codons:
        lines.extend(f"  {stop.codon} at position {stop.position}-{stop.position_end}" for stop in result.stop_codons)
    else:
        lines.append("  No stop codons in reading frame")

    if result.aa_composition:
        lines.append("Amino acid composition:")
        lines.extend(
            f"  {aa}: {data.count} ({data.percentage:.2f}%)"
            for aa, data in result.aa_composition.items()
        )
    return "\n".join(lines)


def run(args):
    """Run the convert command."""
    settings = load_settings(args)
    conversion = convert_or_exit(args, settings)

    for result in conversion.results:
        print(format_report(result, settings["line_width"]))
        print()

    if args.output:
        table = pd.DataFrame([r.to_record() for r in conversion.results])
        table.to_csv(args.output, index=False)
        print(f"Wrote {len(table)} sequences to {args.output}")
