"""
termmath - render math notation as Unicode text in the terminal.

Entry point for the command line.

Usage:
    termmath "x^2 + 1"                     # Render LaTeX
    termmath -f mathml "<math>...</math>"  # Render MathML
    termmath -f expr "x**2/(y + 1)"        # Render plain-text math via SymPy
    termmath --examples                    # Render the example gallery
    termmath --gui                         # Show output in a window
"""

import argparse
import logging
import sys

from . import __version__

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="termmath",
        description="Render LaTeX, MathML or plain-text math as Unicode text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=r"""
Examples:
  termmath "\frac{a + b}{c + d}"         Render a fraction
  termmath "\sum_{n=1}^{\infty} 1/n^2"   Render a sum with limits
  echo "x^2" | termmath -               Read the expression from stdin
  termmath -f expr "sqrt(x)/2"           Parse with SymPy, then render
  termmath --lines "\sqrt{x}"            Keep trailing blanks (fixed width)
  termmath --examples                    Render the built-in gallery
        """,
    )

    # Positional: expression to render
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to render ('-' reads from stdin)",
    )

    # Input notation
    parser.add_argument(
        "-f",
        "--from",
        dest="input_format",
        choices=["latex", "mathml", "expr"],
        default="latex",
        help="Input notation (default: latex)",
    )

    parser.add_argument(
        "--lines",
        action="store_true",
        help="Print fixed-width lines, keeping trailing blanks",
    )

    parser.add_argument(
        "--no-unicode-scripts",
        action="store_true",
        help="Always draw scripts on separate rows instead of using ² or ₙ",
    )

    parser.add_argument(
        "--show-mathml",
        action="store_true",
        help="Print the intermediate MathML before the output",
    )

    parser.add_argument(
        "--examples",
        nargs="?",
        const="",
        metavar="TERM",
        help="Render the example gallery (optionally only entries matching TERM)",
    )

    # Clipboard input
    parser.add_argument(
        "--from-clipboard",
        action="store_true",
        help="Read the expression from the clipboard",
    )

    parser.add_argument(
        "--gui",
        action="store_true",
        help="Show the output in a window (requires PyQt6)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write log messages to PATH",
    )

    return parser


def render_cli(
    expression: str,
    input_format: str,
    keep_trailing_blanks: bool,
    use_unicode_scripts: bool,
    show_mathml: bool,
) -> int:
    """Render an expression and print the result."""
    from .models import InputFormat, RenderOptions
    from .output.renderer import MathRenderer
    from .utils.errors import TermMathError, format_error_for_user

    formats = {
        "latex": InputFormat.LATEX,
        "mathml": InputFormat.MATHML,
        "expr": InputFormat.EXPRESSION,
    }

    renderer = MathRenderer(
        RenderOptions(
            use_unicode_scripts=use_unicode_scripts,
            keep_trailing_blanks=keep_trailing_blanks,
        )
    )

    try:
        result = renderer.render(expression, formats[input_format])
    except TermMathError as e:
        print(f"Error: {format_error_for_user(e)}", file=sys.stderr)
        return 1

    if show_mathml:
        print(result.mathml)
        print()

    if keep_trailing_blanks:
        print("\n".join(result.lines))
    else:
        print(result.text)

    logger.info("Rendered in %dms", result.render_time_ms)
    return 0


def list_examples(search_term: str = "", use_unicode_scripts: bool = True) -> int:
    """Render the example gallery."""
    from .models import RenderOptions
    from .output.renderer import MathRenderer
    from .utils.constants import EXAMPLES, search_examples

    keys = search_examples(search_term) if search_term else list(EXAMPLES)
    if not keys:
        print(f"No examples found matching '{search_term}'")
        return 0

    renderer = MathRenderer(RenderOptions(use_unicode_scripts=use_unicode_scripts))

    for key in keys:
        entry = EXAMPLES[key]
        print(f"═══ {entry['name']} ═══")
        print(f"LaTeX: {entry['latex']}")
        print()
        print(renderer.render_or_error(entry["latex"]))
        print()

    print(f"Total: {len(keys)} examples")
    return 0


def get_clipboard_text() -> str | None:
    """Get text from system clipboard."""
    try:
        # Try PyQt6 first (most reliable)
        from PyQt6.QtWidgets import QApplication

        app = QApplication.instance() or QApplication([])
        return app.clipboard().text()
    except ImportError:
        pass

    import subprocess

    for command in (
        ["xclip", "-selection", "clipboard", "-o"],
        ["xsel", "--clipboard", "--output"],
    ):
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except FileNotFoundError:
            continue
        if result.returncode == 0:
            return result.stdout

    return None


def main(argv=None):
    """Main entry point."""
    from .utils.logging_config import setup_logging

    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    use_unicode_scripts = not args.no_unicode_scripts

    # Gallery mode
    if args.examples is not None:
        return list_examples(args.examples, use_unicode_scripts)

    expression = args.expression
    if args.from_clipboard:
        expression = get_clipboard_text()
        if not expression:
            print("Error: Could not read from clipboard", file=sys.stderr)
            return 1
    elif expression == "-":
        expression = sys.stdin.read()

    if expression is not None:
        expression = expression.strip()

    # GUI mode
    if args.gui:
        from .gui.main_window import run_app

        run_app(expression or None)
        return 0

    if not expression:
        parser.print_usage(sys.stderr)
        print("Error: No expression given", file=sys.stderr)
        return 1

    return render_cli(
        expression=expression,
        input_format=args.input_format,
        keep_trailing_blanks=args.lines,
        use_unicode_scripts=use_unicode_scripts,
        show_mathml=args.show_mathml,
    )


if __name__ == "__main__":
    sys.exit(main() or 0)
