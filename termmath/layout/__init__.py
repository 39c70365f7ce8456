"""Layout layer: the character grid and the MathML typesetting engine."""

from .grid import Grid
from .engine import TypesettingEngine

__all__ = ["Grid", "TypesettingEngine"]
