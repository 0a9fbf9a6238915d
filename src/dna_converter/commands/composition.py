"""Amino acid composition of translated proteins."""

import pandas as pd

from dna_converter.commands.common import add_input_arguments, convert_or_exit, load_settings
from dna_converter.genetics import NO_PROTEIN


def register(subparsers):
    """Register the composition subcommand."""
    parser = subparsers.add_parser(
        "composition",
        help="Amino acid composition of the translated protein",
        description="""
Translate each sequence and tabulate the amino acid composition of the
resulting protein (count and percentage per residue).
""",
    )
    add_input_arguments(parser)
    parser.add_argument("--out", dest="output", help="Output CSV (printed to stdout if omitted)")
    parser.set_defaults(func=run)


def composition_table(results) -> pd.DataFrame:
    """One row per (sequence, residue), most frequent residues first."""
    rows = [
        {
            "id": result.id if result.id is not None else "sequence",
            "residue": aa,
            "count": data.count,
            "percentage": data.percentage,
        }
        for result in results
        for aa, data in result.aa_composition.items()
    ]
    return pd.DataFrame(rows, columns=["id", "residue", "count", "percentage"])


def run(args):
    """Run the composition command."""
    conversion = convert_or_exit(args, load_settings(args))
    table = composition_table(conversion.results)

    if args.output:
        table.to_csv(args.output, index=False)
        print(f"Wrote {len(table)} residues to {args.output}")
    elif table.empty:
        print(NO_PROTEIN)
    else:
        print(table.to_string(index=False))
