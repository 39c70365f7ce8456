"""
Grid - a 2D buffer of display units with baseline tracking.

A grid is the value every layout step produces. Each cell holds one display
unit: a grapheme cluster (a base character plus any combining marks), or the
empty continuation unit that follows a double-width glyph. The baseline is the
row that lines up with the surrounding text when grids are joined
horizontally.

Usage:
    x = Grid.from_text("x")
    row = Grid.concat_horizontal([x, Grid.from_text("+"), Grid.from_text("y")])
    print(row)  # x+y
"""

from typing import List, Optional, Sequence

from wcwidth import wcwidth


BLANK = " "
CONTINUATION = ""  # Second column of a double-width glyph


def split_units(text: str) -> List[str]:
    """
    Split text into display units.

    Zero-width characters (combining marks, invisible operators) join the
    preceding unit; a zero-width character with nothing before it is dropped.
    A glyph wider than one column is followed by continuation units so that
    every unit occupies exactly one terminal column.
    """
    units: List[str] = []
    last = -1  # Index of the last unit that can take a combining mark

    for ch in text:
        width = wcwidth(ch)
        if width == 0:
            if last >= 0:
                units[last] += ch
            continue

        units.append(ch)
        last = len(units) - 1
        if width > 1:
            units.extend([CONTINUATION] * (width - 1))

    return units


def _check_shape(width: int, height: int, baseline: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
    if baseline < 0:
        raise ValueError(f"Baseline must be non-negative, got {baseline}")
    if height > 0 and baseline >= height:
        raise ValueError(f"Baseline {baseline} is outside a grid of height {height}")
    if height == 0 and baseline != 0:
        raise ValueError("An empty grid must have baseline 0")


class Grid:
    """
    Rectangular buffer of display units.

    Attributes:
        width: Number of columns (every row has exactly this many units)
        height: Number of rows
        baseline: Row aligned with the text line (0 = top)
    """

    def __init__(self, rows: Optional[List[List[str]]] = None, baseline: int = 0):
        """
        Build a grid from pre-filled rows of units.

        Short rows are padded with blanks to the widest row.
        """
        rows = rows or []
        width = max((len(row) for row in rows), default=0)
        _check_shape(width, len(rows), baseline)

        self.width = width
        self.height = len(rows)
        self.baseline = baseline
        self._rows = [list(row) + [BLANK] * (width - len(row)) for row in rows]

    # === Construction ===

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Create a one-row grid (baseline 0) from a string."""
        return cls([split_units(text)], baseline=0)

    @classmethod
    def from_lines(cls, lines: Sequence[str], baseline: int = 0) -> "Grid":
        """Create a grid from several lines of text."""
        return cls([split_units(line) for line in lines], baseline=baseline)

    @classmethod
    def empty(cls, width: int, height: int, baseline: int = 0) -> "Grid":
        """
        Create an all-blank canvas.

        Raises:
            ValueError: If the baseline does not fall inside the grid.
        """
        _check_shape(width, height, baseline)
        grid = cls()
        grid.width = width
        grid.height = height
        grid.baseline = baseline
        grid._rows = [[BLANK] * width for _ in range(height)]
        return grid

    def copy(self) -> "Grid":
        """Return an independent copy of this grid."""
        return Grid(self._rows, baseline=self.baseline)

    # === Cell access ===

    def get(self, x: int, y: int) -> str:
        """Get the unit at (x, y), or a blank if out of range."""
        if 0 <= y < self.height and 0 <= x < self.width:
            return self._rows[y][x]
        return BLANK

    def set(self, x: int, y: int, unit: str) -> None:
        """Set the unit at (x, y). Writes outside the grid are ignored."""
        if 0 <= y < self.height and 0 <= x < self.width:
            self._rows[y][x] = unit

    def copy_into(self, source: "Grid", x_offset: int, y_offset: int) -> None:
        """
        Copy every non-blank unit of `source` into this grid at an offset.

        Blank source units leave the existing content untouched, so accents
        and scripts can be overlaid without erasing.
        """
        for y, row in enumerate(source._rows):
            for x, unit in enumerate(row):
                if unit != BLANK:
                    self.set(x_offset + x, y_offset + y, unit)

    def fill_row(self, y: int, unit: str) -> None:
        """Overwrite row `y` with one unit (fraction bars, overlines)."""
        if 0 <= y < self.height:
            for x in range(self.width):
                self._rows[y][x] = unit

    def fill_col(self, x: int, unit: str) -> None:
        """Overwrite column `x` with one unit."""
        if 0 <= x < self.width:
            for y in range(self.height):
                self._rows[y][x] = unit

    # === Composition ===

    @staticmethod
    def concat_horizontal(grids: Sequence["Grid"]) -> "Grid":
        """
        Join grids left to right, aligned on their baselines.

        The result's baseline is the largest ascent among the inputs and its
        height is that ascent plus one plus the largest descent.
        """
        if not grids:
            return Grid.empty(0, 1, 0)

        ascent = max(g.baseline for g in grids)
        descent = max(max(g.height - g.baseline - 1, 0) for g in grids)
        total_width = sum(g.width for g in grids)

        result = Grid.empty(total_width, ascent + 1 + descent, ascent)
        x_pos = 0
        for g in grids:
            result.copy_into(g, x_pos, ascent - g.baseline)
            x_pos += g.width

        return result

    @staticmethod
    def stack_vertical(grids: Sequence["Grid"]) -> "Grid":
        """
        Stack grids top to bottom, each centered horizontally.

        When the slack is odd the extra blank column goes on the right.
        The baseline is placed at total_height // 2.
        """
        if not grids:
            return Grid.empty(0, 1, 0)

        max_width = max(g.width for g in grids)
        total_height = sum(g.height for g in grids)

        result = Grid.empty(max_width, total_height, total_height // 2)
        y_pos = 0
        for g in grids:
            result.copy_into(g, (max_width - g.width) // 2, y_pos)
            y_pos += g.height

        return result

    # === Output ===

    @property
    def is_single_row(self) -> bool:
        return self.height == 1

    def to_lines(self) -> List[str]:
        """Get rows as strings, keeping the full width."""
        return ["".join(row) for row in self._rows]

    def to_string(self) -> str:
        """Get rows joined by newlines, with trailing blanks trimmed per row."""
        return "\n".join(line.rstrip(BLANK) for line in self.to_lines())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Grid(width={self.width}, height={self.height}, "
            f"baseline={self.baseline}, lines={self.to_lines()!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.baseline == other.baseline and self._rows == other._rows
