"""Output layer: rendering facade and cached render state."""

from .renderer import MathRenderer, MathRenderState

__all__ = ["MathRenderer", "MathRenderState"]
