"""
Tests for the symbol lookup tables.
"""

import pytest

from termmath.utils.symbols import (
    ACCENTS,
    BIG_OPERATORS,
    BRACKETS,
    LIMIT_OPERATORS,
    get_greek,
    get_symbol,
    left_bracket,
    right_bracket,
    scale_bracket,
    to_subscript,
    to_superscript,
)


class TestScriptTables:
    """Test Unicode superscript/subscript conversion."""

    def test_superscript_digits(self):
        assert to_superscript("2") == "²"
        assert to_superscript("10") == "¹⁰"

    def test_superscript_expression(self):
        assert to_superscript("n+1") == "ⁿ⁺¹"
        assert to_superscript("-1") == "⁻¹"

    def test_subscript_letters(self):
        assert to_subscript("i") == "ᵢ"
        assert to_subscript("k") == "ₖ"
        assert to_subscript("0") == "₀"

    def test_partial_conversion_fails(self):
        """One unconvertible character makes the whole lookup fail."""
        assert to_superscript("2∑") is None
        assert to_subscript("x→0") is None

    def test_empty_text_converts(self):
        assert to_superscript("") == ""


class TestNameTables:
    """Test Greek and command-name lookups."""

    @pytest.mark.parametrize(
        "name,expected",
        [("alpha", "α"), ("pi", "π"), ("Omega", "Ω")],
    )
    def test_greek(self, name, expected):
        assert get_greek(name) == expected

    def test_unknown_greek(self):
        assert get_greek("alef") is None

    @pytest.mark.parametrize(
        "name,expected",
        [("sum", "∑"), ("infty", "∞"), ("pm", "±"), ("sin", "sin")],
    )
    def test_symbol(self, name, expected):
        assert get_symbol(name) == expected

    def test_unknown_symbol(self):
        assert get_symbol("notacommand") is None

    def test_operator_sets(self):
        assert "∑" in BIG_OPERATORS
        assert "∫" in BIG_OPERATORS
        assert "lim" in LIMIT_OPERATORS
        assert "x" not in BIG_OPERATORS

    def test_accents_are_combining_marks(self):
        assert ACCENTS["^"] == "\u0302"
        assert ACCENTS["→"] == "\u20d7"


class TestBrackets:
    """Test scaled bracket glyph sets."""

    def test_single_row(self):
        assert left_bracket("(", 1) == ["("]
        assert right_bracket("]", 1) == ["]"]

    def test_two_rows(self):
        assert left_bracket("(", 2) == ["⎛", "⎝"]

    def test_three_rows(self):
        assert left_bracket("(", 3) == ["⎛", "⎜", "⎝"]
        assert right_bracket(")", 3) == ["⎞", "⎟", "⎠"]

    def test_tall_brace(self):
        glyphs = left_bracket("{", 5)
        assert glyphs[0] == "⎧"
        assert glyphs[-1] == "⎩"
        assert len(glyphs) == 5

    def test_unknown_token_defaults_to_paren(self):
        assert left_bracket("⟨", 3) == ["⎛", "⎜", "⎝"]

    def test_scale_bracket_heights(self):
        glyphs = BRACKETS["bracket"]["left"]
        for height in range(1, 6):
            assert len(scale_bracket(glyphs, height)) == height
