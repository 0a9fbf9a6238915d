"""Input handling shared by the subcommands."""

import sys
import textwrap
from pathlib import Path

from dna_converter.analysis import Conversion, convert_input
from dna_converter.utils import parse_params, get_conversion_params


def add_input_arguments(parser):
    """Add --seq/--in input options and --params to a subcommand parser."""
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--seq", help="Sequence text (raw DNA or FASTA)")
    source.add_argument("--in", dest="input", help="Input file (raw DNA or FASTA); stdin if omitted")
    parser.add_argument("--params", dest="param_file", help="Parameters file (params.txt)")


def read_input(args) -> str:
    """Return the input text selected on the command line."""
    if args.seq is not None:
        return args.seq
    if args.input:
        path = Path(args.input)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        return path.read_text()
    return sys.stdin.read()


def load_settings(args) -> dict:
    """Conversion settings from --params, defaults when absent."""
    params = parse_params(args.param_file) if args.param_file else {}
    return get_conversion_params(params)


def convert_or_exit(args, settings: dict) -> Conversion:
    """Convert the command-line input; print the error and exit 1 on failure."""
    conversion = convert_input(read_input(args), alphabet=settings["alphabet"])
    if not conversion.ok:
        print(f"error: {conversion.error}", file=sys.stderr)
        sys.exit(1)
    return conversion


def wrap(seq: str, width: int) -> str:
    """Wrap a sequence to a fixed line width (0 = single line)."""
    if width <= 0:
        return seq
    return "\n".join(textwrap.wrap(seq, width))


def title(result) -> str:
    """Heading for one result: FASTA id and description, or 'sequence'."""
    if result.id is None:
        return "sequence"
    return f"{result.id} {result.description}".rstrip()
