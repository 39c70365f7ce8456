"""
Tests for the input layer: LaTeX and plain-text converters, and MathML tree
access.
"""

import pytest


class TestLatexConverter:
    """Test LaTeX to MathML conversion."""

    def test_fraction(self):
        from termmath.input.converter import LatexConverter

        mathml = LatexConverter().convert(r"\frac{a}{b}")

        assert "<math" in mathml
        assert "<mfrac>" in mathml

    def test_strips_delimiters(self):
        from termmath.input.converter import LatexConverter

        converter = LatexConverter()
        assert converter.convert("$x^2$") == converter.convert("x^2")
        assert converter.convert(r"\[x^2\]") == converter.convert("x^2")

    def test_block_display(self):
        from termmath.input.converter import LatexConverter

        mathml = LatexConverter(display="block").convert("x")
        assert 'display="block"' in mathml

    def test_escaped_braces_are_not_counted(self):
        from termmath.input.converter import LatexConverter

        mathml = LatexConverter().convert(r"\{x\}")
        assert "<math" in mathml

    def test_try_convert_success(self):
        from termmath.input.converter import LatexConverter

        mathml, error = LatexConverter().try_convert("x + 1")

        assert mathml is not None
        assert error is None

    def test_try_convert_failure(self):
        from termmath.input.converter import LatexConverter

        mathml, error = LatexConverter().try_convert(r"\sqrt{x")

        assert mathml is None
        assert error.startswith("LaTeX conversion error:")
        assert "closing" in error

    def test_converter_failure_wrapped(self):
        """Errors raised by latex2mathml come back as ConversionError."""
        from termmath.input.converter import LatexConverter
        from termmath.utils.errors import ConversionError

        with pytest.raises(ConversionError) as exc_info:
            LatexConverter().convert("x^")

        assert exc_info.value.source == "x^"
        assert exc_info.value.__cause__ is not None


class TestExpressionConverter:
    """Test plain-text math parsing with SymPy."""

    def test_power(self):
        import sympy as sp
        from termmath.input.converter import ExpressionConverter

        expr = ExpressionConverter().parse("x^2")
        x = sp.Symbol("x")

        assert expr == x**2

    def test_equation_keeps_uppercase_symbols(self):
        import sympy as sp
        from termmath.input.converter import ExpressionConverter

        expr = ExpressionConverter().parse("E = m*c^2")

        assert isinstance(expr, sp.Eq)
        assert sp.Symbol("E") in expr.free_symbols

    def test_parse_failure(self):
        from termmath.input.converter import ExpressionConverter
        from termmath.utils.errors import ConversionError

        with pytest.raises(ConversionError) as exc_info:
            ExpressionConverter().parse("x +* (")

        assert exc_info.value.source == "x +* ("
        assert str(exc_info.value).startswith("Expression conversion error:")

    def test_to_mathml(self):
        import sympy as sp
        from termmath.input.converter import ExpressionConverter
        from termmath.input.tree import MATHML_NS

        x = sp.Symbol("x")
        mathml = ExpressionConverter().to_mathml(x**2)

        assert mathml.startswith(f'<math xmlns="{MATHML_NS}">')
        assert "<msup>" in mathml

    def test_convert(self):
        from termmath.input.converter import ExpressionConverter

        mathml = ExpressionConverter().convert("x/2")
        assert "<mfrac>" in mathml


class TestTree:
    """Test MathML parsing and tree queries."""

    def test_parse_document(self):
        from termmath.input.tree import local_name, parse_mathml

        root = parse_mathml(
            '<math xmlns="http://www.w3.org/1998/Math/MathML"><mi>x</mi></math>'
        )
        assert local_name(root) == "math"

    def test_parse_fragment_list(self):
        """Several top-level elements are wrapped in a <math> root."""
        from termmath.input.tree import element_children, local_name, parse_mathml

        root = parse_mathml("<mi>a</mi><mo>+</mo><mi>b</mi>")

        assert local_name(root) == "math"
        assert [local_name(c) for c in element_children(root)] == ["mi", "mo", "mi"]

    def test_named_entities(self):
        from termmath.input.tree import parse_mathml, text_content

        root = parse_mathml("<mo>&InvisibleTimes;</mo>")
        assert text_content(root) == "\u2062"

    def test_html5_named_entities(self):
        """Entities written by SymPy's printer resolve to their characters."""
        from termmath.input.tree import parse_mathml, text_content

        root = parse_mathml(
            "<mrow><mi>&ExponentialE;</mi><mi>&ImaginaryI;</mi><mo>&dd;</mo></mrow>"
        )
        assert text_content(root) == "\u2147\u2148\u2146"

    def test_xml_entities_kept(self):
        from termmath.input.tree import parse_mathml, text_content

        root = parse_mathml("<mo>&lt;</mo>")
        assert text_content(root) == "<"

    def test_unknown_entity(self):
        from termmath.input.tree import parse_mathml
        from termmath.utils.errors import MathMLParseError

        with pytest.raises(MathMLParseError):
            parse_mathml("<mi>&notAnEntityName;</mi>")

    def test_malformed_document(self):
        from termmath.input.tree import parse_mathml
        from termmath.utils.errors import MathMLParseError

        with pytest.raises(MathMLParseError) as exc_info:
            parse_mathml("<math><mi>x</math>")

        assert str(exc_info.value).startswith("MathML parse error:")

    def test_plain_text_is_not_mathml(self):
        from termmath.input.tree import parse_mathml
        from termmath.utils.errors import MathMLParseError

        with pytest.raises(MathMLParseError):
            parse_mathml("x + 1")

    def test_text_content_includes_tails(self):
        from termmath.input.tree import parse_mathml, text_content

        root = parse_mathml("<mtext> a <mi>b</mi> c </mtext>")
        assert text_content(root) == "a  c"

    def test_children_skip_comments(self):
        from xml.etree import ElementTree as ET

        from termmath.input.tree import element_children

        root = ET.Element("mrow")
        root.append(ET.Comment("note"))
        root.append(ET.Element("mi"))

        assert len(element_children(root)) == 1
