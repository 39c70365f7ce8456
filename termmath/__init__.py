r"""
termmath - render LaTeX and MathML as Unicode text for terminals.

Usage:
    import termmath
    print(termmath.render_latex(r"\frac{x^2 + 1}{y}"))
"""

from .layout import Grid, TypesettingEngine
from .models import InputFormat, RenderOptions, RenderResult
from .output import MathRenderer, MathRenderState
from .utils.errors import (
    TermMathError,
    RenderError,
    ConversionError,
    MathMLParseError,
    InvalidStructureError,
)

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "TypesettingEngine",
    "InputFormat",
    "RenderOptions",
    "RenderResult",
    "MathRenderer",
    "MathRenderState",
    "TermMathError",
    "RenderError",
    "ConversionError",
    "MathMLParseError",
    "InvalidStructureError",
    "render_latex",
    "render_mathml",
]


def render_latex(latex: str) -> str:
    """Render LaTeX math to a Unicode string for terminal display."""
    return MathRenderer().render_latex(latex)


def render_mathml(mathml: str) -> str:
    """Render MathML to a Unicode string for terminal display."""
    return MathRenderer().render_mathml(mathml)
