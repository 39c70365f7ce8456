"""
Input converters.

Turn user notation into presentation MathML for the layout engine:
LaTeX through latex2mathml, plain-text math through SymPy's parser and
presentation MathML printer.
"""

import logging
import re
from typing import Optional, Tuple

import sympy as sp
from latex2mathml.converter import convert as latex2mathml_convert
from sympy.parsing.sympy_parser import (
    parse_expr,
    standard_transformations,
    implicit_multiplication_application,
    convert_xor,
)

from ..utils.errors import ConversionError, UnbalancedBracesError
from .tree import MATHML_NS

logger = logging.getLogger(__name__)

# Braces not preceded by a backslash (\{ and \} are literal braces)
_OPEN_BRACE_RE = re.compile(r"(?<!\\)\{")
_CLOSE_BRACE_RE = re.compile(r"(?<!\\)\}")


class LatexConverter:
    """
    Convert LaTeX strings to MathML.

    Usage:
        converter = LatexConverter()
        mathml = converter.convert(r"\\frac{a}{b}")
    """

    def __init__(self, display: str = "inline"):
        """
        Args:
            display: MathML display mode, 'inline' or 'block'
        """
        self.display = display

    def convert(self, latex: str) -> str:
        """
        Convert a LaTeX string to a MathML document.

        Args:
            latex: LaTeX math, with or without $...$ / \\[...\\] delimiters

        Returns:
            MathML text with a <math> root.

        Raises:
            ConversionError: If the LaTeX cannot be converted.
        """
        cleaned = self._preprocess(latex)
        self._check_braces(cleaned)

        try:
            mathml = latex2mathml_convert(cleaned, display=self.display)
        except Exception as e:
            raise ConversionError(
                str(e) or type(e).__name__,
                source=latex,
                suggestion=self._suggest_fix(cleaned, str(e)),
                technical_details=f"{type(e).__name__}: {e}",
            ) from e

        logger.debug("Converted %r to %d characters of MathML", cleaned, len(mathml))
        return mathml

    def try_convert(self, latex: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Attempt to convert, returning None on failure instead of raising.

        Returns:
            Tuple of (MathML or None, error message or None)
        """
        try:
            return self.convert(latex), None
        except ConversionError as e:
            return None, str(e)

    def _preprocess(self, latex: str) -> str:
        """
        Clean and normalize LaTeX for conversion.
        """
        result = latex.strip()

        # Remove display math delimiters if present
        for delim in [r"\[", r"\]", r"$$", r"$", r"\(", r"\)"]:
            result = result.replace(delim, "")

        # Normalize whitespace
        return " ".join(result.split())

    def _check_braces(self, latex: str) -> None:
        open_count = len(_OPEN_BRACE_RE.findall(latex))
        close_count = len(_CLOSE_BRACE_RE.findall(latex))
        if open_count != close_count:
            raise UnbalancedBracesError(latex, open_count, close_count)

    def _suggest_fix(self, latex: str, error_msg: str) -> Optional[str]:
        """
        Suggest a fix based on the error message.
        """
        if "\\" in latex and ("command" in error_msg.lower() or not error_msg):
            return "Check the spelling of LaTeX commands"
        if "Expected" in error_msg or "missing" in error_msg.lower():
            return "Check for missing operands or malformed commands"
        return None


class ExpressionConverter:
    """
    Convert plain-text math notation (not LaTeX) to MathML via SymPy.

    - "x^2 + 2x + 1" -> x**2 + 2*x + 1
    - "E = mc^2"     -> Eq(E, m*c**2)

    Expressions are kept unevaluated so the output mirrors the input.
    """

    TRANSFORMATIONS = standard_transformations + (
        implicit_multiplication_application,
        convert_xor,
    )

    # Names SymPy would otherwise read as constants or functions
    RESERVED_NAMES = {"E", "I", "N", "S", "O", "Q", "C"}

    def parse(self, text: str) -> sp.Basic:
        """
        Parse plain text into a SymPy expression.

        Raises:
            ConversionError: If the text cannot be parsed.
        """
        # Keep single uppercase letters as symbols (E is not Euler's number here)
        local_dict = {}
        for name in set(re.findall(r"\b([A-Za-z][A-Za-z0-9_]*)\b", text)):
            if name in self.RESERVED_NAMES or (len(name) == 1 and name.isupper()):
                local_dict[name] = sp.Symbol(name)

        try:
            if text.count("=") == 1:
                lhs, rhs = text.split("=")
                return sp.Eq(
                    self._parse_side(lhs, local_dict),
                    self._parse_side(rhs, local_dict),
                    evaluate=False,
                )
            return self._parse_side(text, local_dict)
        except Exception as e:
            raise ConversionError(
                f"Failed to parse expression: {e}",
                source=text,
                notation="Expression",
                suggestions=[
                    "Use ^ or ** for powers and / for fractions",
                    "Check for unbalanced parentheses",
                ],
            ) from e

    def _parse_side(self, text: str, local_dict: dict) -> sp.Basic:
        return parse_expr(
            text.strip(),
            local_dict=local_dict,
            transformations=self.TRANSFORMATIONS,
            evaluate=False,
        )

    def to_mathml(self, expr: sp.Basic) -> str:
        """Print a SymPy expression as a presentation MathML document."""
        body = sp.mathml(expr, printer="presentation")
        return f'<math xmlns="{MATHML_NS}">{body}</math>'

    def convert(self, text: str) -> str:
        """Parse plain text and print it as MathML."""
        mathml = self.to_mathml(self.parse(text))
        logger.debug("Converted expression %r to MathML", text)
        return mathml
