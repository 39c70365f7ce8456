"""
Main application window for termmath.

PyQt6-based viewer that paints rendered math in a fixed-pitch font.
The window is display-only: it shows one expression, or the example gallery.
"""

import sys
from typing import List, Optional

from PyQt6.QtWidgets import (
    QApplication,
    QGroupBox,
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QColor, QFontDatabase, QPainter

from ..output.renderer import MathRenderState
from ..utils.constants import EXAMPLES
from ..utils.errors import TermMathError, format_error_for_dialog, format_error_for_user


class MathView(QWidget):
    """
    Paints the rows of one rendered expression.

    Rendering happens in set_expression(); paintEvent() only reads the
    cached lines from the render state.
    """

    MARGIN = 8

    def __init__(self, latex: str = "", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._state = MathRenderState()

        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        font.setPointSize(13)
        self.setFont(font)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)

        if latex:
            self.set_expression(latex)

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def exception(self) -> Optional[TermMathError]:
        return self._state.exception

    def set_expression(self, latex: str) -> None:
        """Render a LaTeX expression and schedule a repaint."""
        self._state.update(latex)
        self.updateGeometry()
        self.update()

    def lines(self) -> List[str]:
        return self._state.display_lines()

    def sizeHint(self) -> QSize:
        metrics = self.fontMetrics()
        lines = self.lines() or [""]
        width = max(metrics.horizontalAdvance(line) for line in lines)
        height = metrics.lineSpacing() * len(lines)
        return QSize(width + 2 * self.MARGIN, height + 2 * self.MARGIN)

    def paintEvent(self, event):
        painter = QPainter(self)
        if self._state.error is not None:
            painter.setPen(QColor("firebrick"))

        metrics = self.fontMetrics()
        y = self.MARGIN + metrics.ascent()
        for line in self.lines():
            painter.drawText(self.MARGIN, y, line)
            y += metrics.lineSpacing()

        painter.end()


class MainWindow(QMainWindow):
    """
    Main application window for termmath.

    Layout:
    - One panel per expression (LaTeX source above the rendered output)
    - Status Bar: render status
    """

    def __init__(self, latex: Optional[str] = None):
        super().__init__()

        self.setWindowTitle("termmath")
        self.setGeometry(100, 100, 700, 600)
        self.setMinimumSize(400, 300)

        if latex:
            entries = [("Expression", latex)]
        else:
            entries = [(entry["name"], entry["latex"]) for entry in EXAMPLES.values()]

        self.views: List[MathView] = []
        self._init_ui(entries)
        self._init_statusbar()

    def _init_ui(self, entries):
        """Initialize the main UI layout."""
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setSpacing(10)
        layout.setContentsMargins(10, 10, 10, 10)

        for name, latex in entries:
            layout.addWidget(self._create_expression_panel(name, latex))
        layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

    def _create_expression_panel(self, name: str, latex: str) -> QGroupBox:
        """Create a panel showing the source and its rendering."""
        group = QGroupBox(name)
        layout = QVBoxLayout(group)

        source = QLabel(latex)
        source.setStyleSheet("color: gray;")
        source.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(source)

        view = MathView(latex)
        layout.addWidget(view)
        self.views.append(view)

        return group

    def _init_statusbar(self):
        """Initialize the status bar."""
        failed = sum(1 for view in self.views if view.error is not None)
        if failed:
            self.statusBar().showMessage(f"{failed} of {len(self.views)} failed to render")
        else:
            self.statusBar().showMessage(f"Rendered {len(self.views)} expression(s)")

    def show_first_error(self) -> None:
        """Open an error dialog for the first expression that failed, if any."""
        for view in self.views:
            if view.exception is not None:
                self._show_error(view.exception, "while rendering")
                return

    def _show_error(self, exc: Exception, context: str = "") -> None:
        """Show an error dialog with suggestions and a brief status message."""
        error_info = format_error_for_dialog(exc, context)

        msg_box = QMessageBox(self)
        msg_box.setWindowTitle(error_info["title"])
        msg_box.setText(error_info["text"])
        msg_box.setIcon(error_info["icon"])

        if error_info["detailed_text"]:
            msg_box.setDetailedText(error_info["detailed_text"])

        msg_box.exec()

        self.statusBar().showMessage(format_error_for_user(exc, context))


def run_app(latex: Optional[str] = None):
    """Run the termmath viewer."""
    app = QApplication(sys.argv)
    app.setApplicationName("termmath")

    window = MainWindow(latex)
    window.show()
    if latex:
        window.show_first_error()

    sys.exit(app.exec())
