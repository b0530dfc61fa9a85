"""guardlite: Steam Guard codes from a local maFile."""

from .core import extract, generate_code, seconds_remaining

__all__ = ["__version__", "extract", "generate_code", "seconds_remaining"]

__version__ = "0.1.0"
