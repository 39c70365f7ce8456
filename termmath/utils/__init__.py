"""Utilities: errors, symbol tables, example gallery, logging setup."""

from .constants import EXAMPLES
from .errors import (
    TermMathError,
    RenderError,
    ConversionError,
    MathMLParseError,
    InvalidStructureError,
)

__all__ = [
    "EXAMPLES",
    "TermMathError",
    "RenderError",
    "ConversionError",
    "MathMLParseError",
    "InvalidStructureError",
]
