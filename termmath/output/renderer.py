"""
Math rendering for terminals.

Ties the input converters, the MathML tree parser and the typesetting engine
together behind one object.
"""

import logging
import time
from typing import List, Optional, Union

import sympy as sp

from ..input.converter import ExpressionConverter, LatexConverter
from ..input.tree import parse_mathml
from ..layout.engine import TypesettingEngine
from ..layout.grid import Grid
from ..models import InputFormat, RenderOptions, RenderResult
from ..utils.errors import TermMathError

logger = logging.getLogger(__name__)


class MathRenderer:
    """
    Render math notation as a block of monospace text.

    Usage:
        renderer = MathRenderer()
        print(renderer.render_latex(r"\\frac{x^2 + 1}{y}"))

    Every method raises a TermMathError subclass on failure:
    ConversionError, MathMLParseError or InvalidStructureError.
    """

    def __init__(self, options: Optional[RenderOptions] = None):
        self.options = options or RenderOptions()
        self._engine = TypesettingEngine(
            use_unicode_scripts=self.options.use_unicode_scripts
        )
        self._latex = LatexConverter(display=self.options.display)
        self._expressions = ExpressionConverter()

    def render(self, source: str, input_format: InputFormat = InputFormat.LATEX) -> RenderResult:
        """
        Render source text in the given notation.

        Returns:
            RenderResult with the intermediate MathML and the grid.
        """
        start = time.perf_counter()

        if input_format == InputFormat.LATEX:
            mathml = self._latex.convert(source)
        elif input_format == InputFormat.EXPRESSION:
            mathml = self._expressions.convert(source)
        else:
            mathml = source

        grid = self._engine.process(parse_mathml(mathml))
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.debug(
            "Rendered %s input to %dx%d grid in %dms",
            input_format.name.lower(),
            grid.width,
            grid.height,
            elapsed_ms,
        )

        return RenderResult(
            source=source,
            input_format=input_format,
            mathml=mathml,
            grid=grid,
            render_time_ms=elapsed_ms,
        )

    def render_to_grid(self, latex: str) -> Grid:
        """Render LaTeX to a Grid (for callers that compose further)."""
        return self.render(latex).grid

    def render_latex(self, latex: str) -> str:
        """Render LaTeX to text."""
        return self._format(self.render_to_grid(latex))

    def render_mathml(self, mathml: str) -> str:
        """Render a MathML document to text."""
        return self._format(self.render(mathml, InputFormat.MATHML).grid)

    def render_expr(self, expr: Union[sp.Basic, str]) -> str:
        """
        Render a SymPy expression, or plain-text math parsed by SymPy.
        """
        if isinstance(expr, str):
            return self._format(self.render(expr, InputFormat.EXPRESSION).grid)
        mathml = self._expressions.to_mathml(expr)
        return self._format(self.render(mathml, InputFormat.MATHML).grid)

    def render_lines(self, latex: str) -> List[str]:
        """Render LaTeX to rows of equal width, trailing blanks included."""
        return self.render_to_grid(latex).to_lines()

    def render_or_error(self, latex: str) -> str:
        """Render LaTeX, or return 'Error: ...' text in place of the output."""
        try:
            return self.render_latex(latex)
        except TermMathError as e:
            return f"Error: {e}"

    def _format(self, grid: Grid) -> str:
        if self.options.keep_trailing_blanks:
            return "\n".join(grid.to_lines())
        return grid.to_string()


class MathRenderState:
    """
    Cached render of one expression for a presentation layer.

    Call update() when the expression changes; painting then only reads the
    stored lines or error text.
    """

    def __init__(self, renderer: Optional[MathRenderer] = None):
        self._renderer = renderer or MathRenderer()
        self.source: Optional[str] = None
        self.rendered: Optional[str] = None
        self.lines: List[str] = []
        self.error: Optional[str] = None
        self.exception: Optional[TermMathError] = None

    def update(self, latex: str) -> None:
        """Re-render if the expression changed."""
        if latex == self.source:
            return
        self.source = latex

        try:
            grid = self._renderer.render_to_grid(latex)
        except TermMathError as e:
            logger.info("Render failed for %r: %s", latex, e)
            self.rendered = None
            self.lines = []
            self.error = str(e)
            self.exception = e
            return

        self.rendered = grid.to_string()
        self.lines = grid.to_lines()
        self.error = None
        self.exception = None

    def display_lines(self) -> List[str]:
        """Lines to paint: the rendered rows, or the error message."""
        if self.error is not None:
            return [f"Error: {self.error}"]
        return self.lines
