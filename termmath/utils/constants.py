"""
Example expression gallery.

Used by the CLI (--examples) and the GUI when no expression is given.
"""

from typing import Dict, List, Optional


EXAMPLES = {
    "quadratic": {
        "name": "Quadratic Formula",
        "latex": r"x = \frac{-b \pm \sqrt{b^2 - 4ac}}{2a}",
    },
    "euler": {
        "name": "Euler's Identity",
        "latex": r"e^{i\pi} + 1 = 0",
    },
    "gaussian": {
        "name": "Integral",
        "latex": r"\int_0^\infty e^{-x^2} dx = \frac{\sqrt{\pi}}{2}",
    },
    "basel": {
        "name": "Sum",
        "latex": r"\sum_{n=1}^{\infty} \frac{1}{n^2} = \frac{\pi^2}{6}",
    },
    "greek": {
        "name": "Greek Letters",
        "latex": r"\alpha + \beta = \gamma",
    },
    "indices": {
        "name": "Matrix-like",
        "latex": r"a_{11} + a_{22} + a_{33}",
    },
    "fraction": {
        "name": "Fraction",
        "latex": r"\frac{a + b}{c + d}",
    },
    "sqrt": {
        "name": "Square Root",
        "latex": r"\sqrt{x^2 + y^2}",
    },
    "limit": {
        "name": "Limits",
        "latex": r"\lim_{x \to \infty} \frac{1}{x} = 0",
    },
    "derivative": {
        "name": "Derivative",
        "latex": r"\frac{d}{dx} x^n = nx^{n-1}",
    },
    "product": {
        "name": "Product",
        "latex": r"\prod_{i=1}^{n} i = n!",
    },
    "binomial": {
        "name": "Binomial",
        "latex": r"\binom{n}{k} = \frac{n!}{k!(n-k)!}",
    },
}


def get_example(key: str) -> Optional[Dict[str, str]]:
    """Look up a gallery entry by key."""
    return EXAMPLES.get(key)


def search_examples(term: str) -> List[str]:
    """Return gallery keys whose key or name contains `term` (case-insensitive)."""
    term = term.lower()
    return [
        key
        for key, entry in EXAMPLES.items()
        if term in key or term in entry["name"].lower()
    ]
