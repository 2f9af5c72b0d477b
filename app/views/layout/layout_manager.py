"""LayoutManager: Builds the main window's vertical layout."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from app.views.constants import SEPARATOR_COLOR


class LayoutManager:
    """Manages main window layout.

    Top to bottom: search bar, separator, era label, gallery, separator,
    comparison area (info panel left, workspace right).
    """

    # Layout constants
    SEPARATOR_MARGIN = 40
    ERA_INDENT = 60
    WINDOW_SIZE_RATIO = 0.8

    def __init__(self, main_window: QMainWindow) -> None:
        """Initialize with main window reference.

        Args:
            main_window: The QMainWindow to manage layout for
        """
        self.window = main_window

    def create_separator(self) -> QWidget:
        """Create a horizontal rule with side margins."""
        holder = QWidget()
        row = QHBoxLayout(holder)
        row.setContentsMargins(self.SEPARATOR_MARGIN, 20, self.SEPARATOR_MARGIN, 0)
        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        line.setStyleSheet(f"color: {SEPARATOR_COLOR};")
        row.addWidget(line)
        return holder

    def create_era_label(self) -> QLabel:
        """Create the bold label showing the current era."""
        label = QLabel("")
        label.setStyleSheet(f"font-size: 20px; font-weight: bold; padding: 20px 0 20px {self.ERA_INDENT}px;")
        return label

    def setup_main_layout(
        self,
        search_widget: QWidget,
        era_label: QLabel,
        gallery_widget: QWidget,
        info_widget: QWidget,
        workspace_widget: QWidget,
    ) -> QWidget:
        """Assemble the central widget.

        Returns:
            Central widget configured with the layout
        """
        central = QWidget(self.window)
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        root.addWidget(search_widget)
        root.addWidget(self.create_separator())
        root.addWidget(era_label)
        root.addWidget(gallery_widget)
        root.addWidget(self.create_separator())

        comparison = QWidget()
        row = QHBoxLayout(comparison)
        row.setContentsMargins(20, 0, 0, 40)
        row.addWidget(info_widget, 0, Qt.AlignTop)
        row.addWidget(workspace_widget, 1)
        root.addWidget(comparison, 1)

        return central

    def setup_initial_window_size(self) -> None:
        """Setup initial window size based on screen dimensions."""
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        rect = screen.availableGeometry()
        width = int(rect.width() * self.WINDOW_SIZE_RATIO)
        height = int(rect.height() * self.WINDOW_SIZE_RATIO)
        self.window.resize(width, height)
