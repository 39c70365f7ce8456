"""
Tests for the Grid layout buffer.

Covers construction, cell access, overlay copying and the two composition
operators with their baseline rules.
"""

import pytest

from termmath.layout.grid import BLANK, CONTINUATION, Grid, split_units


class TestConstruction:
    """Test the Grid constructors."""

    @pytest.mark.parametrize("ch", ["x", "+", "2", "α", "∑", "─"])
    def test_single_character(self, ch):
        """A one-character grid is 1x1 with baseline 0."""
        g = Grid.from_text(ch)
        assert g.width == 1
        assert g.height == 1
        assert g.baseline == 0
        assert g.get(0, 0) == ch

    def test_from_text_width(self):
        g = Grid.from_text("sin")
        assert g.width == 3
        assert g.to_lines() == ["sin"]

    def test_from_empty_text(self):
        """Empty text gives a zero-width single row."""
        g = Grid.from_text("")
        assert g.width == 0
        assert g.height == 1

    def test_from_lines_pads_short_rows(self):
        g = Grid.from_lines(["ab", "c"], baseline=1)
        assert g.width == 2
        assert g.height == 2
        assert g.baseline == 1
        assert g.to_lines() == ["ab", "c "]

    def test_empty_canvas_is_blank(self):
        g = Grid.empty(3, 2, 1)
        assert g.to_lines() == ["   ", "   "]
        assert g.baseline == 1

    def test_empty_rejects_baseline_outside(self):
        with pytest.raises(ValueError):
            Grid.empty(2, 2, 2)

    def test_empty_rejects_negative_size(self):
        with pytest.raises(ValueError):
            Grid.empty(-1, 1, 0)

    def test_from_lines_rejects_bad_baseline(self):
        with pytest.raises(ValueError):
            Grid.from_lines(["a"], baseline=3)

    def test_copy_is_independent(self):
        g = Grid.from_text("ab")
        c = g.copy()
        c.set(0, 0, "z")
        assert g.get(0, 0) == "a"
        assert c.get(0, 0) == "z"


class TestDisplayUnits:
    """Test splitting text into one-column units."""

    def test_combining_mark_joins_previous(self):
        units = split_units("x\u0302y")
        assert units == ["x\u0302", "y"]

    def test_accented_grid_width(self):
        g = Grid.from_text("v\u20d7")
        assert g.width == 1
        assert g.get(0, 0) == "v\u20d7"

    def test_leading_zero_width_dropped(self):
        assert split_units("\u2062x") == ["x"]

    def test_wide_glyph_takes_two_columns(self):
        units = split_units("中a")
        assert units == ["中", CONTINUATION, "a"]
        assert Grid.from_text("中a").to_lines() == ["中a"]


class TestCellAccess:
    """Test get/set bounds handling."""

    def test_get_out_of_range_is_blank(self):
        g = Grid.from_text("x")
        assert g.get(5, 0) == BLANK
        assert g.get(0, -1) == BLANK

    def test_set_out_of_range_ignored(self):
        g = Grid.from_text("x")
        g.set(3, 3, "y")
        g.set(-1, 0, "y")
        assert g.to_lines() == ["x"]

    def test_fill_row_and_col(self):
        g = Grid.empty(3, 3, 1)
        g.fill_row(1, "─")
        g.fill_col(0, "│")
        assert g.to_lines() == ["│  ", "│──", "│  "]


class TestCopyInto:
    """Test overlay copying."""

    def test_blanks_do_not_overwrite(self):
        target = Grid.from_text("abc")
        target.copy_into(Grid.from_text("x y"), 0, 0)
        assert target.to_lines() == ["xby"]

    def test_clipped_at_edges(self):
        target = Grid.empty(2, 1, 0)
        target.copy_into(Grid.from_text("xyz"), 1, 0)
        assert target.to_lines() == [" x"]

    def test_negative_offset_clipped(self):
        target = Grid.empty(2, 1, 0)
        target.copy_into(Grid.from_text("xyz"), -1, 0)
        assert target.to_lines() == ["yz"]


class TestConcatHorizontal:
    """Test baseline-aligned horizontal joining."""

    def test_simple_row(self):
        g = Grid.concat_horizontal(
            [Grid.from_text("x"), Grid.from_text("+"), Grid.from_text("y")]
        )
        assert g.to_string() == "x+y"
        assert g.height == 1
        assert g.baseline == 0

    def test_empty_list(self):
        g = Grid.concat_horizontal([])
        assert (g.width, g.height, g.baseline) == (0, 1, 0)

    def test_aligns_on_baseline(self):
        frac = Grid.from_lines(["a", "─", "b"], baseline=1)
        g = Grid.concat_horizontal([Grid.from_text("x="), frac])
        assert g.height == 3
        assert g.baseline == 1
        assert g.to_lines() == ["  a", "x=─", "  b"]

    def test_ascent_and_descent(self):
        """Height is max ascent + 1 + max descent."""
        tall_top = Grid.from_lines(["1", "2", "3"], baseline=2)  # ascent 2, descent 0
        tall_bottom = Grid.from_lines(["4", "5", "6"], baseline=0)  # ascent 0, descent 2
        g = Grid.concat_horizontal([tall_top, tall_bottom])
        assert g.height == 5
        assert g.baseline == 2
        assert g.to_lines() == ["1 ", "2 ", "34", " 5", " 6"]


class TestStackVertical:
    """Test centred vertical stacking."""

    def test_empty_list(self):
        g = Grid.stack_vertical([])
        assert (g.width, g.height, g.baseline) == (0, 1, 0)

    def test_centering_and_baseline(self):
        g = Grid.stack_vertical(
            [Grid.from_text("n"), Grid.from_text("∑"), Grid.from_text("k=1")]
        )
        assert g.width == 3
        assert g.height == 3
        assert g.baseline == 1
        assert g.to_lines() == [" n ", " ∑ ", "k=1"]

    def test_odd_slack_goes_right(self):
        g = Grid.stack_vertical([Grid.from_text("ab"), Grid.from_text("x")])
        assert g.to_lines() == ["ab", "x "]

    def test_baseline_is_half_height(self):
        g = Grid.stack_vertical([Grid.from_text("a"), Grid.from_text("b")])
        assert g.baseline == 1


class TestOutput:
    """Test flattening a grid to text."""

    def test_to_string_trims_trailing_blanks(self):
        g = Grid.from_lines(["ab", "c"], baseline=0)
        assert g.to_string() == "ab\nc"
        assert str(g) == "ab\nc"

    def test_round_trip_through_lines(self):
        original = Grid.from_lines([" a ", "───", " b "], baseline=1)
        rebuilt = Grid.from_lines(original.to_lines(), baseline=original.baseline)
        assert rebuilt == original
        assert rebuilt.to_string() == original.to_string()

    def test_equality_considers_baseline(self):
        assert Grid.from_lines(["a", "b"], 0) != Grid.from_lines(["a", "b"], 1)

    def test_is_single_row(self):
        assert Grid.from_text("x").is_single_row
        assert not Grid.from_lines(["x", "y"]).is_single_row

    def test_repr_mentions_shape(self):
        assert "width=2" in repr(Grid.from_text("ab"))
