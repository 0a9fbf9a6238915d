"""Parameter file parsing utilities."""

from pathlib import Path
from typing import Any

from .sequences import ALPHABETS


def parse_params(param_file: str | Path) -> dict[str, Any]:
    """
    Parse params.txt file.

    Lines have the form ``NAME = value``. Numeric values are parsed as
    float; anything else is kept as a string. Lines starting with '#' are
    comments.

    Args:
        param_file: Path to the parameters file

    Returns:
        Dictionary of parameter name -> value
    """
    params = {}
    with open(param_file) as f:
        for line in f:
            if line.lstrip().startswith("#"):
                continue
            if "=" in line:
                name, value = line.split("=", 1)
                name = name.strip()
                value = value.strip()
                try:
                    params[name] = float(value)
                except ValueError:
                    params[name] = value
    return params


def get_conversion_params(params: dict) -> dict:
    """
    Extract conversion settings from parsed params dict.

    Returns:
        Dictionary with keys ``alphabet`` (None, "DNA" or "RNA") and
        ``line_width`` (0 disables wrapping)

    Raises:
        ValueError: If a value is out of range
    """
    alphabet = str(params.get("ALPHABET", "auto")).upper()
    if alphabet == "AUTO":
        alphabet = None
    elif alphabet not in ALPHABETS:
        raise ValueError(f"ALPHABET must be auto, DNA or RNA, got {params['ALPHABET']!r}")

    line_width = params.get("LINE_WIDTH", 0)
    if not isinstance(line_width, (int, float)) or line_width != int(line_width):
        raise ValueError(f"LINE_WIDTH must be an integer, got {line_width!r}")
    line_width = int(line_width)
    if line_width < 0:
        raise ValueError(f"LINE_WIDTH cannot be negative, got {line_width}")

    return {
        "alphabet": alphabet,
        "line_width": line_width,
    }
