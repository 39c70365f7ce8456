"""
Symbol tables for terminal math rendering.

Read-only lookup tables built once at import time:
Unicode superscript/subscript forms, Greek letter names, LaTeX command
names, accent marks, and the glyph sets used to draw tall brackets.
"""

from typing import Dict, List, Optional, Tuple


SUPERSCRIPTS: Dict[str, str] = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
    "+": "⁺",
    "-": "⁻",
    "−": "⁻",
    "=": "⁼",
    "(": "⁽",
    ")": "⁾",
    "a": "ᵃ",
    "b": "ᵇ",
    "c": "ᶜ",
    "d": "ᵈ",
    "e": "ᵉ",
    "f": "ᶠ",
    "g": "ᵍ",
    "h": "ʰ",
    "i": "ⁱ",
    "j": "ʲ",
    "k": "ᵏ",
    "l": "ˡ",
    "m": "ᵐ",
    "n": "ⁿ",
    "o": "ᵒ",
    "p": "ᵖ",
    "r": "ʳ",
    "s": "ˢ",
    "t": "ᵗ",
    "u": "ᵘ",
    "v": "ᵛ",
    "w": "ʷ",
    "x": "ˣ",
    "y": "ʸ",
    "z": "ᶻ",
    " ": " ",
}

SUBSCRIPTS: Dict[str, str] = {
    "0": "₀",
    "1": "₁",
    "2": "₂",
    "3": "₃",
    "4": "₄",
    "5": "₅",
    "6": "₆",
    "7": "₇",
    "8": "₈",
    "9": "₉",
    "+": "₊",
    "-": "₋",
    "−": "₋",
    "=": "₌",
    "(": "₍",
    ")": "₎",
    "a": "ₐ",
    "e": "ₑ",
    "h": "ₕ",
    "i": "ᵢ",
    "j": "ⱼ",
    "k": "ₖ",
    "l": "ₗ",
    "m": "ₘ",
    "n": "ₙ",
    "o": "ₒ",
    "p": "ₚ",
    "r": "ᵣ",
    "s": "ₛ",
    "t": "ₜ",
    "u": "ᵤ",
    "v": "ᵥ",
    "x": "ₓ",
    " ": " ",
}

GREEK_LETTERS: Dict[str, str] = {
    # Lowercase
    "alpha": "α",
    "beta": "β",
    "gamma": "γ",
    "delta": "δ",
    "epsilon": "ε",
    "varepsilon": "ε",
    "zeta": "ζ",
    "eta": "η",
    "theta": "θ",
    "vartheta": "ϑ",
    "iota": "ι",
    "kappa": "κ",
    "lambda": "λ",
    "mu": "μ",
    "nu": "ν",
    "xi": "ξ",
    "omicron": "ο",
    "pi": "π",
    "varpi": "ϖ",
    "rho": "ρ",
    "varrho": "ϱ",
    "sigma": "σ",
    "varsigma": "ς",
    "tau": "τ",
    "upsilon": "υ",
    "phi": "φ",
    "varphi": "ϕ",
    "chi": "χ",
    "psi": "ψ",
    "omega": "ω",
    # Uppercase
    "Alpha": "Α",
    "Beta": "Β",
    "Gamma": "Γ",
    "Delta": "Δ",
    "Epsilon": "Ε",
    "Zeta": "Ζ",
    "Eta": "Η",
    "Theta": "Θ",
    "Iota": "Ι",
    "Kappa": "Κ",
    "Lambda": "Λ",
    "Mu": "Μ",
    "Nu": "Ν",
    "Xi": "Ξ",
    "Omicron": "Ο",
    "Pi": "Π",
    "Rho": "Ρ",
    "Sigma": "Σ",
    "Tau": "Τ",
    "Upsilon": "Υ",
    "Phi": "Φ",
    "Chi": "Χ",
    "Psi": "Ψ",
    "Omega": "Ω",
}

MATH_SYMBOLS: Dict[str, str] = {
    # Binary operators
    "pm": "±",
    "mp": "∓",
    "times": "×",
    "div": "÷",
    "cdot": "·",
    "ast": "∗",
    "star": "⋆",
    "circ": "∘",
    "bullet": "•",
    "oplus": "⊕",
    "ominus": "⊖",
    "otimes": "⊗",
    "oslash": "⊘",
    "odot": "⊙",
    # Relations
    "leq": "≤",
    "le": "≤",
    "geq": "≥",
    "ge": "≥",
    "neq": "≠",
    "ne": "≠",
    "equiv": "≡",
    "approx": "≈",
    "cong": "≅",
    "sim": "∼",
    "simeq": "≃",
    "propto": "∝",
    "ll": "≪",
    "gg": "≫",
    "subset": "⊂",
    "supset": "⊃",
    "subseteq": "⊆",
    "supseteq": "⊇",
    "in": "∈",
    "notin": "∉",
    "ni": "∋",
    "perp": "⊥",
    "parallel": "∥",
    # Arrows
    "leftarrow": "←",
    "rightarrow": "→",
    "uparrow": "↑",
    "downarrow": "↓",
    "leftrightarrow": "↔",
    "Leftarrow": "⇐",
    "Rightarrow": "⇒",
    "Uparrow": "⇑",
    "Downarrow": "⇓",
    "Leftrightarrow": "⇔",
    "mapsto": "↦",
    "to": "→",
    "gets": "←",
    "implies": "⟹",
    "iff": "⟺",
    # Big operators
    "sum": "∑",
    "prod": "∏",
    "coprod": "∐",
    "int": "∫",
    "iint": "∬",
    "iiint": "∭",
    "oint": "∮",
    "bigcup": "⋃",
    "bigcap": "⋂",
    "bigvee": "⋁",
    "bigwedge": "⋀",
    "bigoplus": "⨁",
    "bigotimes": "⨂",
    # Misc symbols
    "infty": "∞",
    "nabla": "∇",
    "partial": "∂",
    "forall": "∀",
    "exists": "∃",
    "nexists": "∄",
    "emptyset": "∅",
    "varnothing": "∅",
    "neg": "¬",
    "lnot": "¬",
    "land": "∧",
    "lor": "∨",
    "wedge": "∧",
    "vee": "∨",
    "cap": "∩",
    "cup": "∪",
    "setminus": "∖",
    "sqrt": "√",
    "surd": "√",
    "angle": "∠",
    "measuredangle": "∡",
    "triangle": "△",
    "therefore": "∴",
    "because": "∵",
    "ldots": "…",
    "cdots": "⋯",
    "vdots": "⋮",
    "ddots": "⋱",
    "prime": "′",
    "dprime": "″",
    # Delimiters
    "langle": "⟨",
    "rangle": "⟩",
    "lceil": "⌈",
    "rceil": "⌉",
    "lfloor": "⌊",
    "rfloor": "⌋",
    "lbrace": "{",
    "rbrace": "}",
    "lvert": "|",
    "rvert": "|",
    "lVert": "‖",
    "rVert": "‖",
    # Functions (rendered as text)
    "sin": "sin",
    "cos": "cos",
    "tan": "tan",
    "cot": "cot",
    "sec": "sec",
    "csc": "csc",
    "arcsin": "arcsin",
    "arccos": "arccos",
    "arctan": "arctan",
    "sinh": "sinh",
    "cosh": "cosh",
    "tanh": "tanh",
    "log": "log",
    "ln": "ln",
    "lg": "lg",
    "exp": "exp",
    "lim": "lim",
    "limsup": "lim sup",
    "liminf": "lim inf",
    "max": "max",
    "min": "min",
    "sup": "sup",
    "inf": "inf",
    "det": "det",
    "dim": "dim",
    "ker": "ker",
    "hom": "hom",
    "arg": "arg",
    "deg": "deg",
    "gcd": "gcd",
    "lcm": "lcm",
    "mod": "mod",
    "Pr": "Pr",
    # Letter-like symbols
    "Re": "ℜ",
    "Im": "ℑ",
    "wp": "℘",
    "ell": "ℓ",
    "hbar": "ℏ",
    "aleph": "ℵ",
    "beth": "ℶ",
    "gimel": "ℷ",
    "daleth": "ℸ",
}

# Operators whose scripts are drawn as limits above and below
BIG_OPERATORS = frozenset(["∑", "∏", "∫", "∬", "∭", "∮", "⋃", "⋂"])

# Operator names whose under-script is written inline as a subscript
LIMIT_OPERATORS = frozenset(["lim", "max", "min", "sup", "inf"])

# Accent text (as found in an over-script) -> combining mark
ACCENTS: Dict[str, str] = {
    "^": "̂",
    "ˆ": "̂",
    "~": "̃",
    "˜": "̃",
    "¯": "̄",
    "ˉ": "̄",
    "-": "̄",
    ".": "̇",
    "˙": "̇",
    "..": "̈",
    "¨": "̈",
    "→": "⃗",
}

# (top, middle, bottom, single-row)
BracketGlyphs = Tuple[str, str, str, str]

BRACKETS: Dict[str, Dict[str, BracketGlyphs]] = {
    "paren": {
        "left": ("⎛", "⎜", "⎝", "("),
        "right": ("⎞", "⎟", "⎠", ")"),
    },
    "bracket": {
        "left": ("⎡", "⎢", "⎣", "["),
        "right": ("⎤", "⎥", "⎦", "]"),
    },
    "brace": {
        "left": ("⎧", "⎨", "⎩", "{"),
        "right": ("⎫", "⎬", "⎭", "}"),
    },
    "vert": {
        "left": ("│", "│", "│", "|"),
        "right": ("│", "│", "│", "|"),
    },
    "double_vert": {
        "left": ("║", "║", "║", "‖"),
        "right": ("║", "║", "║", "‖"),
    },
    "ceil": {
        "left": ("⎡", "⎢", "⎢", "⌈"),
        "right": ("⎤", "⎥", "⎥", "⌉"),
    },
    "floor": {
        "left": ("⎢", "⎢", "⎣", "⌊"),
        "right": ("⎥", "⎥", "⎦", "⌋"),
    },
}

LEFT_BRACKET_TOKENS: Dict[str, str] = {
    "(": "paren",
    "\\left(": "paren",
    "[": "bracket",
    "\\left[": "bracket",
    "{": "brace",
    "\\{": "brace",
    "\\left{": "brace",
    "\\left\\{": "brace",
    "\\lbrace": "brace",
    "|": "vert",
    "\\left|": "vert",
    "\\lvert": "vert",
    "‖": "double_vert",
    "\\lVert": "double_vert",
    "⌈": "ceil",
    "\\lceil": "ceil",
    "⌊": "floor",
    "\\lfloor": "floor",
}

RIGHT_BRACKET_TOKENS: Dict[str, str] = {
    ")": "paren",
    "\\right)": "paren",
    "]": "bracket",
    "\\right]": "bracket",
    "}": "brace",
    "\\}": "brace",
    "\\right}": "brace",
    "\\right\\}": "brace",
    "\\rbrace": "brace",
    "|": "vert",
    "\\right|": "vert",
    "\\rvert": "vert",
    "‖": "double_vert",
    "\\rVert": "double_vert",
    "⌉": "ceil",
    "\\rceil": "ceil",
    "⌋": "floor",
    "\\rfloor": "floor",
}


def _convert(text: str, table: Dict[str, str]) -> Optional[str]:
    converted = []
    for ch in text:
        mapped = table.get(ch)
        if mapped is None:
            return None
        converted.append(mapped)
    return "".join(converted)


def to_superscript(text: str) -> Optional[str]:
    """
    Convert text to Unicode superscript characters.

    Returns None if any character has no superscript form.
    """
    return _convert(text, SUPERSCRIPTS)


def to_subscript(text: str) -> Optional[str]:
    """
    Convert text to Unicode subscript characters.

    Returns None if any character has no subscript form.
    """
    return _convert(text, SUBSCRIPTS)


def get_greek(name: str) -> Optional[str]:
    """Get a Greek letter by its LaTeX name (e.g. 'alpha' -> 'α')."""
    return GREEK_LETTERS.get(name)


def get_symbol(name: str) -> Optional[str]:
    """Get a math symbol by its LaTeX command name, without the backslash."""
    return MATH_SYMBOLS.get(name)


def scale_bracket(glyphs: BracketGlyphs, height: int) -> List[str]:
    """
    Build the per-row glyphs of a bracket spanning `height` rows.

    Args:
        glyphs: (top, middle, bottom, single-row) glyph set
        height: Number of rows to cover

    Returns:
        One glyph per row, top to bottom.
    """
    top, middle, bottom, single = glyphs
    if height <= 1:
        return [single]
    if height == 2:
        return [top, bottom]
    return [top] + [middle] * (height - 2) + [bottom]


def left_bracket(token: str, height: int) -> List[str]:
    """Scaled glyphs for an opening token, defaulting to a parenthesis."""
    kind = LEFT_BRACKET_TOKENS.get(token, "paren")
    return scale_bracket(BRACKETS[kind]["left"], height)


def right_bracket(token: str, height: int) -> List[str]:
    """Scaled glyphs for a closing token, defaulting to a parenthesis."""
    kind = RIGHT_BRACKET_TOKENS.get(token, "paren")
    return scale_bracket(BRACKETS[kind]["right"], height)
