"""
Centralized error handling for termmath.

Provides a small, closed hierarchy of render errors with user-friendly
messages, suggestions for fixes, and a rich context for display layers.

Only three things can go wrong in a render call:

- the upstream converter could not turn the input notation into MathML
- the MathML text could not be parsed into a tree
- the tree contains a construct with the wrong number of children

Everything else (unknown elements, characters without a Unicode
superscript/subscript form) degrades to a fallback layout instead of failing.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, List
from xml.etree.ElementTree import ParseError as XMLParseError


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    INFO = auto()  # Informational, output may still be usable
    WARNING = auto()  # Non-fatal
    ERROR = auto()  # Render failed, input can be corrected
    CRITICAL = auto()  # Unrecoverable error


@dataclass
class ErrorContext:
    """
    Rich context for error reporting.

    Provides user-friendly information beyond the raw exception.
    """

    title: str  # Short title for dialog/status line
    message: str  # User-friendly message
    technical_details: Optional[str]  # Debug info (shown on expand)
    suggestions: List[str]  # Actionable suggestions
    severity: ErrorSeverity
    recoverable: bool = True  # Can user retry with different input?

    @classmethod
    def from_exception(cls, exc: Exception, context: str = "") -> "ErrorContext":
        """Create ErrorContext from any exception using smart detection."""
        exc_type = type(exc).__name__
        exc_msg = str(exc)

        if isinstance(exc, TermMathError):
            return exc.to_context()

        # Raw XML errors that escaped the tree layer
        if isinstance(exc, XMLParseError):
            return cls(
                title="MathML Parse Error",
                message="Could not read the MathML document.",
                technical_details=f"{exc_type}: {exc_msg}",
                suggestions=MathMLParseError.default_suggestions.copy(),
                severity=ErrorSeverity.ERROR,
            )

        # Conversion errors raised by third-party converters
        if "latex" in exc_type.lower() or "latex" in exc_msg.lower():
            return cls(
                title="Conversion Error",
                message="Could not convert the LaTeX input.",
                technical_details=f"{exc_type}: {exc_msg}",
                suggestions=ConversionError.default_suggestions.copy(),
                severity=ErrorSeverity.ERROR,
            )

        # Import/dependency errors
        if isinstance(exc, ImportError):
            return cls(
                title="Missing Dependency",
                message="A required component is not installed.",
                technical_details=f"{exc_type}: {exc_msg}",
                suggestions=[
                    "Check that all dependencies are installed",
                    "Run: pip install -e .[gui]",
                ],
                severity=ErrorSeverity.CRITICAL,
                recoverable=False,
            )

        # Generic fallback
        return cls(
            title="Error",
            message=f"An unexpected error occurred: {exc_msg}",
            technical_details=f"{exc_type}: {exc_msg}\nContext: {context}",
            suggestions=["Try again with a simpler expression"],
            severity=ErrorSeverity.ERROR,
        )


class TermMathError(Exception):
    """
    Base exception for all termmath errors.

    Subclasses provide rich error context for user-friendly reporting.
    """

    default_title = "Error"
    default_suggestions: List[str] = []
    default_severity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        *,
        suggestions: Optional[List[str]] = None,
        technical_details: Optional[str] = None,
        severity: Optional[ErrorSeverity] = None,
    ):
        super().__init__(message)
        self.user_message = message
        self.suggestions = suggestions or self.default_suggestions.copy()
        self.technical_details = technical_details
        self.severity = severity or self.default_severity

    def to_context(self) -> ErrorContext:
        """Convert to ErrorContext for display."""
        return ErrorContext(
            title=self.default_title,
            message=self.user_message,
            technical_details=self.technical_details,
            suggestions=self.suggestions,
            severity=self.severity,
            recoverable=self.severity != ErrorSeverity.CRITICAL,
        )


# Name used by callers that only care that a render failed
RenderError = TermMathError


# === Upstream conversion ===


class ConversionError(TermMathError):
    """Raised when the input notation cannot be converted to MathML."""

    default_title = "Conversion Error"
    default_suggestions = [
        "Check for missing or extra braces { }",
        "Verify LaTeX commands are spelled correctly",
        "Remove surrounding text that is not math",
    ]

    def __init__(
        self,
        detail: str,
        *,
        source: str = "",
        suggestion: Optional[str] = None,
        notation: str = "LaTeX",
        **kwargs,
    ):
        # Add specific suggestion to front of list if provided
        suggestions = kwargs.pop("suggestions", None) or self.default_suggestions.copy()
        if suggestion:
            suggestions.insert(0, suggestion)

        super().__init__(
            f"{notation} conversion error: {detail}", suggestions=suggestions, **kwargs
        )
        self.detail = detail
        self.notation = notation
        self.source = source


class UnbalancedBracesError(ConversionError):
    """Raised when braces in LaTeX input are unbalanced."""

    default_title = "Unbalanced Braces"

    def __init__(self, latex: str, open_count: int, close_count: int):
        diff = open_count - close_count
        if diff > 0:
            msg = f"Missing {diff} closing brace(s) '}}'"
        else:
            msg = f"Missing {-diff} opening brace(s) '{{'"

        super().__init__(
            msg,
            source=latex,
            suggestions=[
                f"Current count: {open_count} opening, {close_count} closing",
                "Add the missing braces to balance the expression",
            ],
        )
        self.open_count = open_count
        self.close_count = close_count


# === Tree access ===


class MathMLParseError(TermMathError):
    """Raised when MathML text cannot be parsed into an element tree."""

    default_title = "MathML Parse Error"
    default_suggestions = [
        "Check that every element is closed",
        "Escape '&' and '<' inside token elements",
        "Use numeric character references instead of named entities",
    ]

    def __init__(self, detail: str, **kwargs):
        super().__init__(f"MathML parse error: {detail}", **kwargs)
        self.detail = detail


# === Layout ===


class InvalidStructureError(TermMathError):
    """Raised when an element has the wrong number of children."""

    default_title = "Invalid Structure"
    default_suggestions = [
        "The MathML tree is malformed",
        "Check that fractions, scripts and roots have all their parts",
    ]

    def __init__(self, tag: str, expected: int, actual: int):
        super().__init__(
            f"Invalid math structure: {tag} requires exactly {expected} "
            f"children, got {actual}",
            technical_details=f"Element <{tag}> has {actual} element children",
        )
        self.tag = tag
        self.expected = expected
        self.actual = actual


# === Utility functions ===


def format_error_for_user(exc: Exception, context: str = "") -> str:
    """
    Format an exception into a user-friendly string.

    Returns a single string suitable for a status line or in place of output.
    """
    ctx = ErrorContext.from_exception(exc, context)
    if not ctx.suggestions:
        return ctx.message
    return f"{ctx.message} Try: {ctx.suggestions[0]}"


def format_error_for_dialog(exc: Exception, context: str = "") -> dict:
    """
    Describe a render failure for the viewer's message box.

    Suggestions and technical details go in the detailed text so the short
    text stays one line.
    """
    from PyQt6.QtWidgets import QMessageBox

    ctx = ErrorContext.from_exception(exc, context)

    sections = []
    if ctx.suggestions:
        sections.append(
            "Suggestions:\n" + "\n".join(f"  - {s}" for s in ctx.suggestions)
        )
    source = getattr(exc, "source", "")
    if source:
        sections.append(f"Input:\n  {source}")
    if ctx.technical_details:
        sections.append(f"Technical details:\n  {ctx.technical_details}")

    if ctx.severity == ErrorSeverity.INFO:
        icon = QMessageBox.Icon.Information
    elif ctx.severity == ErrorSeverity.WARNING:
        icon = QMessageBox.Icon.Warning
    else:
        icon = QMessageBox.Icon.Critical

    return {
        "title": ctx.title,
        "text": ctx.message,
        "detailed_text": "\n\n".join(sections) or None,
        "icon": icon,
    }
