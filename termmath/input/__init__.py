"""Input layer: LaTeX and plain-text conversion, MathML tree access."""

from .converter import LatexConverter, ExpressionConverter
from .tree import parse_mathml

__all__ = ["LatexConverter", "ExpressionConverter", "parse_mathml"]
