"""
Core data structures for termmath.

These dataclasses define the contract between the input, layout and output
layers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import List

from .layout.grid import Grid


class InputFormat(Enum):
    """Notations the renderer accepts."""

    LATEX = auto()
    MATHML = auto()
    EXPRESSION = auto()  # Plain-text math parsed by SymPy, e.g. "x^2 + 1"


@dataclass
class RenderOptions:
    """Settings for a renderer."""

    use_unicode_scripts: bool = True  # x² instead of a 2-row layout when possible
    display: str = "inline"  # MathML display mode requested from the converter
    keep_trailing_blanks: bool = False  # Fixed-width lines instead of trimmed text

    def __post_init__(self):
        if self.display not in ("inline", "block"):
            raise ValueError(f"display must be 'inline' or 'block', got {self.display!r}")


@dataclass
class RenderResult:
    """
    Complete result of one render call.

    Keeps the intermediate MathML so callers can inspect what was laid out.
    """

    source: str
    input_format: InputFormat
    mathml: str
    grid: Grid
    render_time_ms: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def text(self) -> str:
        """Rendered output with trailing blanks trimmed per row."""
        return self.grid.to_string()

    @property
    def lines(self) -> List[str]:
        """Rendered rows, all of the same width."""
        return self.grid.to_lines()
