"""
MathML typesetting engine.

Turns a MathML element tree into a Grid with one recursive, bottom-up pass.
Each element is laid out from the grids of its children only, so a call
depends on nothing but its own subtree.

Layout never fails on unusual input: unknown elements are laid out as rows,
and scripts without a Unicode superscript/subscript form fall back to a 2D
placement. The only error is an element with the wrong number of children.
"""

from typing import List, Optional
from xml.etree.ElementTree import Element

from ..input.tree import element_children, local_name, text_content
from ..utils.errors import InvalidStructureError
from ..utils.symbols import (
    ACCENTS,
    BIG_OPERATORS,
    LIMIT_OPERATORS,
    get_greek,
    get_symbol,
    left_bracket,
    right_bracket,
    to_subscript,
    to_superscript,
)
from .grid import Grid


FRACTION_BAR = "─"
ROOT_SIGN = "√"
ROOT_OVERLINE = "_"
INDEX_ROOT_OVERLINE = "─"
TABLE_COLUMN_GAP = 2
TABLE_ROW_SEPARATOR = "  "

# Operators padded with a blank on each side inside a row
BINARY_OPERATORS = frozenset(["+", "-", "−", "±", "∓"])  # Only when not leading
RELATION_OPERATORS = frozenset(
    ["=", "≤", "≥", "≠", "≈", "≡", "→", "⇒", "⟹", "×", "÷", "·"]
)

# Elements whose children are simply laid out in a row
ROW_TAGS = frozenset(
    ["math", "mrow", "mstyle", "mpadded", "mphantom", "menclose", "mtd"]
)
TEXT_TAGS = frozenset(["mi", "mn", "mtext"])
ANNOTATION_TAGS = frozenset(["annotation", "annotation-xml"])

# linethickness values that mean "no fraction bar" (e.g. binomials)
ZERO_THICKNESS = frozenset(["0", "0pt", "0px", "0em", "0ex", "0.0"])


def _blank() -> Grid:
    return Grid.from_text(" ")


class TypesettingEngine:
    """
    Lay out MathML elements on a character grid.

    Usage:
        engine = TypesettingEngine()
        grid = engine.process(parse_mathml("<msup><mi>x</mi><mn>2</mn></msup>"))
        print(grid)  # x²
    """

    def __init__(self, use_unicode_scripts: bool = True):
        """
        Args:
            use_unicode_scripts: Render simple scripts with Unicode
                superscript/subscript characters on one line. When False,
                scripts always use the 2D layout.
        """
        self.use_unicode_scripts = use_unicode_scripts

    def process(self, node: Element) -> Grid:
        """
        Lay out one element and its subtree.

        Raises:
            InvalidStructureError: If a fixed-arity element has the wrong
                number of children.
        """
        tag = local_name(node)

        if tag in ROW_TAGS:
            return self._process_row(node)
        elif tag in TEXT_TAGS:
            return self._process_text(node)
        elif tag == "mo":
            return Grid.from_text(self._operator_text(node))
        elif tag == "msup":
            return self._process_superscript(node)
        elif tag == "msub":
            return self._process_subscript(node)
        elif tag == "msubsup":
            return self._process_subsup(node)
        elif tag == "mfrac":
            return self._process_fraction(node)
        elif tag == "msqrt":
            return self._process_sqrt(node)
        elif tag == "mroot":
            return self._process_nth_root(node)
        elif tag == "mover":
            return self._process_over(node)
        elif tag == "munder":
            return self._process_under(node)
        elif tag == "munderover":
            return self._process_underover(node)
        elif tag == "mtable":
            return self._process_table(node)
        elif tag == "mtr":
            return self._process_table_row(node)
        elif tag == "mfenced":
            return self._process_fenced(node)
        elif tag == "mspace":
            return _blank()
        elif tag == "semantics":
            # Only the presentation branch is drawn
            for child in element_children(node):
                if local_name(child) not in ANNOTATION_TAGS:
                    return self.process(child)
            return Grid.empty(0, 1, 0)
        elif tag in ANNOTATION_TAGS:
            return Grid.empty(0, 1, 0)
        else:
            # Unknown element: lay out its children as a row
            return self._process_row(node)

    # === Helpers ===

    def _children(self, node: Element, expected: int) -> List[Element]:
        children = element_children(node)
        if len(children) != expected:
            raise InvalidStructureError(local_name(node), expected, len(children))
        return children

    def _process_script(self, node: Element) -> Grid:
        """Scripts and limits use compact rows so characters stay adjacent."""
        if local_name(node) == "mrow":
            return self._process_row(node, spacing=False)
        return self.process(node)

    def _operator_text(self, node: Element) -> str:
        """Resolve an operator's text, including backslash command names."""
        text = text_content(node)
        if text in BIG_OPERATORS:
            return text
        if text.startswith("\\"):
            name = text[1:]
            return get_symbol(name) or get_greek(name) or text
        return text

    def _is_spaced_operator(self, op: str, is_first: bool) -> bool:
        if op in RELATION_OPERATORS:
            return True
        return not is_first and op in BINARY_OPERATORS

    def _row_operator_text(self, node: Element) -> str:
        """Operator text of a row child; latex2mathml writes \\pm as an <mi>."""
        tag = local_name(node)
        if tag == "mo":
            return self._operator_text(node)
        if tag == "mi":
            return text_content(node)
        return ""

    def _is_limit(self, node: Element) -> bool:
        """lim, max, ... on their own or carrying a condition."""
        tag = local_name(node)
        if tag in ("msub", "munder"):
            children = element_children(node)
            return bool(children) and (
                self._operator_text(children[0]) in LIMIT_OPERATORS
            )
        return tag == "mo" and self._operator_text(node) in LIMIT_OPERATORS

    def _inline_limit(self, base_node: Element, under: Grid) -> Optional[Grid]:
        """Write the one-row condition of lim, max, ... next to the name."""
        base_text = self._operator_text(base_node)
        if base_text not in LIMIT_OPERATORS or under.height != 1:
            return None

        under_text = under.to_string().strip()
        if self.use_unicode_scripts:
            unicode_sub = to_subscript(under_text)
            if unicode_sub is not None:
                return Grid.from_text(base_text + unicode_sub)
        return Grid.from_text(f"{base_text}({under_text})")

    # === Rows and leaves ===

    def _process_row(self, node: Element, spacing: bool = True) -> Grid:
        """
        Concatenate children horizontally.

        With spacing on, a blank column separates a multi-row child from its
        neighbours, binary/relational operators get a blank on each side
        (without doubling a blank already added for a multi-row neighbour),
        and a limit operator is followed by one blank.
        """
        children = element_children(node)
        if not children:
            text = text_content(node)
            if text:
                return Grid.from_text(text)
            return Grid.empty(0, 1, 0)

        grids: List[Grid] = []
        prev_multiline = False
        after_limit = False

        for i, child in enumerate(children):
            grid = self.process(child)
            multiline = grid.height > 1

            if spacing and i > 0 and (prev_multiline or multiline) and not after_limit:
                grids.append(_blank())

            if spacing and self._is_spaced_operator(
                self._row_operator_text(child), i == 0
            ):
                if not prev_multiline and not multiline and not after_limit:
                    grids.append(_blank())
                grids.append(grid)
                grids.append(_blank())
            else:
                grids.append(grid)

            after_limit = spacing and i < len(children) - 1 and self._is_limit(child)
            if after_limit:
                grids.append(_blank())

            prev_multiline = multiline

        return Grid.concat_horizontal(grids)

    def _process_text(self, node: Element) -> Grid:
        text = text_content(node)
        # Identifiers may name a Greek letter instead of containing it
        greek = get_greek(text)
        return Grid.from_text(greek if greek else text)

    # === Scripts ===

    def _process_superscript(self, node: Element) -> Grid:
        base_node, sup_node = self._children(node, 2)
        base = self.process(base_node)
        sup = self._process_script(sup_node)

        if self.use_unicode_scripts and base.height == 1 and sup.height == 1:
            unicode_sup = to_superscript(sup.to_string().strip())
            if unicode_sup is not None:
                return Grid.from_text(base.to_string() + unicode_sup)

        # Exponent above and to the right of the base
        result = Grid.empty(
            base.width + sup.width, base.height + sup.height, base.baseline + sup.height
        )
        result.copy_into(base, 0, sup.height)
        result.copy_into(sup, base.width, 0)
        return result

    def _process_subscript(self, node: Element) -> Grid:
        base_node, sub_node = self._children(node, 2)
        base = self.process(base_node)
        sub = self._process_script(sub_node)

        # \lim_{x \to 0} arrives as a subscript
        limit = self._inline_limit(base_node, sub)
        if limit is not None:
            return limit

        if self.use_unicode_scripts and base.height == 1 and sub.height == 1:
            unicode_sub = to_subscript(sub.to_string().strip())
            if unicode_sub is not None:
                return Grid.from_text(base.to_string() + unicode_sub)

        # Index below and to the right of the base
        result = Grid.empty(
            base.width + sub.width, base.height + sub.height, base.baseline
        )
        result.copy_into(base, 0, 0)
        result.copy_into(sub, base.width, base.height)
        return result

    def _process_subsup(self, node: Element) -> Grid:
        base_node, sub_node, sup_node = self._children(node, 3)
        base = self.process(base_node)
        sub = self._process_script(sub_node)
        sup = self._process_script(sup_node)

        # Integrals, sums and friends carry their limits above and below
        if self._operator_text(base_node) in BIG_OPERATORS:
            return Grid.stack_vertical([sup, base, sub])

        if (
            self.use_unicode_scripts
            and base.height == 1
            and sub.height == 1
            and sup.height == 1
        ):
            unicode_sub = to_subscript(sub.to_string().strip())
            unicode_sup = to_superscript(sup.to_string().strip())
            if unicode_sub is not None and unicode_sup is not None:
                return Grid.from_text(base.to_string() + unicode_sub + unicode_sup)

        width = base.width + max(sub.width, sup.width)
        height = sup.height + base.height + sub.height
        result = Grid.empty(width, height, base.baseline + sup.height)
        result.copy_into(sup, base.width, 0)
        result.copy_into(base, 0, sup.height)
        result.copy_into(sub, base.width, sup.height + base.height)
        return result

    # === Fractions and roots ===

    def _process_fraction(self, node: Element) -> Grid:
        num_node, den_node = self._children(node, 2)
        num = self.process(num_node)
        den = self.process(den_node)

        width = max(num.width, den.width)
        height = num.height + 1 + den.height
        result = Grid.empty(width, height, num.height)

        result.copy_into(num, (width - num.width) // 2, 0)
        if node.get("linethickness", "").strip() not in ZERO_THICKNESS:
            result.fill_row(num.height, FRACTION_BAR)
        result.copy_into(den, (width - den.width) // 2, num.height + 1)
        return result

    def _process_sqrt(self, node: Element) -> Grid:
        #  ___
        # √abc
        inner = self._process_row(node)

        width = inner.width + 1
        result = Grid.empty(width, inner.height + 1, inner.baseline + 1)
        for x in range(1, width):
            result.set(x, 0, ROOT_OVERLINE)
        result.set(0, 1, ROOT_SIGN)
        result.copy_into(inner, 1, 1)
        return result

    def _process_nth_root(self, node: Element) -> Grid:
        base_node, index_node = self._children(node, 2)
        inner = self.process(base_node)
        index = self._process_script(index_node)

        if self.use_unicode_scripts and inner.height == 1 and index.height == 1:
            unicode_index = to_superscript(index.to_string().strip())
            if unicode_index is not None:
                return Grid.from_text(unicode_index + ROOT_SIGN + inner.to_string())

        #  ───
        # n√abc
        width = index.width + 1 + inner.width
        height = max(inner.height + 1, index.height)
        result = Grid.empty(width, height, inner.baseline + 1)

        result.copy_into(index, 0, 0)
        result.set(index.width, height - 1, ROOT_SIGN)
        for x in range(index.width + 1, width):
            result.set(x, 0, INDEX_ROOT_OVERLINE)
        result.copy_into(inner, index.width + 1, 1)
        return result

    # === Accents and limits ===

    def _process_over(self, node: Element) -> Grid:
        base_node, over_node = self._children(node, 2)
        base = self.process(base_node)
        over = self._process_script(over_node)

        if base.height == 1:
            mark = ACCENTS.get(over.to_string().strip())
            if mark:
                return Grid.from_text(base.to_string() + mark)

        return Grid.stack_vertical([over, base])

    def _process_under(self, node: Element) -> Grid:
        base_node, under_node = self._children(node, 2)
        base = self.process(base_node)
        under = self._process_script(under_node)

        limit = self._inline_limit(base_node, under)
        if limit is not None:
            return limit

        # The base keeps its own baseline; the under-script hangs below it
        width = max(base.width, under.width)
        result = Grid.empty(width, base.height + under.height, base.baseline)
        result.copy_into(base, (width - base.width) // 2, 0)
        result.copy_into(under, (width - under.width) // 2, base.height)
        return result

    def _process_underover(self, node: Element) -> Grid:
        base_node, under_node, over_node = self._children(node, 3)
        base = self.process(base_node)
        under = self._process_script(under_node)
        over = self._process_script(over_node)
        return Grid.stack_vertical([over, base, under])

    # === Tables ===

    def _process_table(self, node: Element) -> Grid:
        rows: List[List[Grid]] = [
            [
                self._process_row(cell)
                for cell in element_children(row)
                if local_name(cell) == "mtd"
            ]
            for row in element_children(node)
            if local_name(row) == "mtr"
        ]
        if not rows:
            return Grid.empty(0, 1, 0)

        num_cols = max(len(row) for row in rows)
        col_widths = [0] * num_cols
        row_heights = [0] * len(rows)
        for i, row in enumerate(rows):
            for j, cell in enumerate(row):
                col_widths[j] = max(col_widths[j], cell.width)
                row_heights[i] = max(row_heights[i], cell.height)

        total_width = sum(col_widths) + TABLE_COLUMN_GAP * max(num_cols - 1, 0)
        total_height = sum(row_heights)
        result = Grid.empty(total_width, total_height, total_height // 2)

        y_pos = 0
        for i, row in enumerate(rows):
            x_pos = 0
            for j, cell in enumerate(row):
                result.copy_into(cell, x_pos + (col_widths[j] - cell.width) // 2, y_pos)
                x_pos += col_widths[j] + TABLE_COLUMN_GAP
            y_pos += row_heights[i]

        return result

    def _process_table_row(self, node: Element) -> Grid:
        parts: List[Grid] = []
        for i, cell in enumerate(element_children(node)):
            if i > 0:
                parts.append(Grid.from_text(TABLE_ROW_SEPARATOR))
            parts.append(self._process_row(cell))
        return Grid.concat_horizontal(parts)

    # === Fences ===

    def _process_fenced(self, node: Element) -> Grid:
        open_token = node.get("open", "(")
        close_token = node.get("close", ")")
        inner = self._process_row(node)

        if inner.height <= 1:
            return Grid.from_text(open_token + inner.to_string() + close_token)

        width = inner.width + 2
        result = Grid.empty(width, inner.height, inner.baseline)

        # An empty token means no fence on that side
        if open_token:
            for y, glyph in enumerate(left_bracket(open_token, inner.height)):
                result.set(0, y, glyph)
        if close_token:
            for y, glyph in enumerate(right_bracket(close_token, inner.height)):
                result.set(width - 1, y, glyph)

        result.copy_into(inner, 1, 0)
        return result
