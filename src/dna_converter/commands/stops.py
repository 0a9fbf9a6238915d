"""List in-frame stop codons."""

from dna_converter.commands.common import add_input_arguments, convert_or_exit, load_settings, title


def register(subparsers):
    """Register the stops subcommand."""
    parser = subparsers.add_parser(
        "stops",
        help="List stop codons in the first reading frame",
        description="""
Report every UAA, UAG and UGA codon in the first reading frame of the
transcribed sequence, including those after the codon that ends
translation.
""",
    )
    add_input_arguments(parser)
    parser.set_defaults(func=run)


def run(args):
    """Run the stops command."""
    conversion = convert_or_exit(args, load_settings(args))

    for result in conversion.results:
        print(f"== {title(result)}")
        if not result.stop_codons:
            print("No stop codons in reading frame")
            continue
        for stop in result.stop_codons:
            print(f"{stop.codon}\t{stop.position}\t{stop.position_end}")
