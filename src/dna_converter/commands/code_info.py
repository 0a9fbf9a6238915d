"""Describe the genetic code used for translation."""

from dna_converter.genetics import genetic_code_info


def register(subparsers):
    """Register the code-info subcommand."""
    parser = subparsers.add_parser(
        "code-info",
        help="Show the genetic code used for translation",
    )
    parser.set_defaults(func=run)


def run(args):
    """Run the code-info command."""
    info = genetic_code_info()
    print(f"{info.name} (NCBI table {info.ncbi_table})")
    print(info.description)
    print(f"Start codon: {info.start_codon}")
    print(f"Stop codons: {', '.join(info.stop_codons)}")
    print(f"Codons:      {info.total_codons}")
    print("Limitations:")
    for limitation in info.limitations:
        print(f"  - {limitation}")
