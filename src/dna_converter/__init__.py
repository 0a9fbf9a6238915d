"""DNA to RNA and protein conversion with simple sequence statistics."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dna-converter")
except PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"

__all__ = ["__version__"]
