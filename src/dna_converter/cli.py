#!/usr/bin/env python
"""dnaconv - DNA to mRNA and protein conversion CLI."""

import argparse
import sys

from dna_converter import __version__


def main():
    """Main entry point for the dnaconv CLI."""
    parser = argparse.ArgumentParser(
        prog="dnaconv",
        description="Transcribe DNA to mRNA, translate to protein and report sequence statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dnaconv convert --seq ATGGTGCACCTGACTCCTGAGGAGAAGTAG
  dnaconv convert --in genes.fa --out results.csv --params params.txt
  dnaconv stops --in genes.fa
  dnaconv composition --in genes.fa --out composition.csv
  dnaconv code-info

For more information on a specific command:
  dnaconv <command> --help
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available subcommands",
        metavar="<command>",
    )

    # Import and register subcommands
    from dna_converter.commands import (
        convert,
        stops,
        composition,
        code_info,
    )

    convert.register(subparsers)
    stops.register(subparsers)
    composition.register(subparsers)
    code_info.register(subparsers)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()
