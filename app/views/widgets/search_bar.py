"""SearchBar: keyword input plus result count."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QWidget

from app.views.constants import ACCENT_COLOR, SEARCH_PLACEHOLDER
from core.services.filter_service import result_count_text


class SearchBar(QWidget):
    """Emits `searchChanged(str)` on every keystroke."""

    searchChanged = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._input = QLineEdit()
        self._input.setPlaceholderText(SEARCH_PLACEHOLDER)
        self._input.setFixedWidth(500)
        self._input.setStyleSheet(f"font-size: 20px; border: 1px solid {ACCENT_COLOR}; padding: 10px;")
        self._input.textChanged.connect(self.searchChanged.emit)

        self._count = QLabel("")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(40, 20, 20, 20)
        layout.addWidget(self._input)
        layout.addSpacing(20)
        layout.addWidget(self._count)
        layout.addStretch(1)

    def set_count(self, count: int) -> None:
        self._count.setText(result_count_text(count))

    def set_text(self, text: str) -> None:
        """Set the query without re-emitting when unchanged."""
        if self._input.text() != text:
            self._input.setText(text)
