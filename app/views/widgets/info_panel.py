"""InfoPanel: detail fields of the focused workspace object."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from app.viewmodels.object_vm import ObjectVM
from app.views.constants import (
    ACCENT_COLOR,
    INFO_PANEL_WIDTH_PX,
    LABEL_DATING,
    LABEL_LOCATION,
    LABEL_MATERIAL,
    LABEL_TECHNIQUE,
    RETURN_BUTTON_TEXT,
    SEPARATOR_COLOR,
)

_LABEL_STYLE = f"font-size: 20px; color: {ACCENT_COLOR};"
_VALUE_STYLE = f"font-size: 20px; color: {ACCENT_COLOR}; font-weight: bold; margin-bottom: 20px;"
_HEADLINE_STYLE = f"font-size: 25px; color: {ACCENT_COLOR}; font-weight: bold; margin-bottom: 20px;"
_BUTTON_STYLE = (
    f"border: 1px solid {ACCENT_COLOR}; color: {ACCENT_COLOR}; border-radius: 2px;"
    " background: #fff; font-size: 20px; padding: 10px;"
)


def _label(text: str, style: str) -> QLabel:
    lbl = QLabel(text)
    lbl.setStyleSheet(style)
    lbl.setWordWrap(True)
    lbl.setTextInteractionFlags(Qt.TextSelectableByMouse)
    return lbl


class InfoPanel(QWidget):
    """Shows inventory number, name, materials, techniques, dating and find spot.

    Hidden while the workspace is empty; empty while nothing is focused.
    """

    returnRequested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedWidth(INFO_PANEL_WIDTH_PX)
        self.setObjectName("InfoPanel")
        self.setStyleSheet(f"#InfoPanel {{ border-right: 1px solid {SEPARATOR_COLOR}; }}")

        self._content = QWidget(self)
        content = QVBoxLayout(self._content)
        content.setContentsMargins(0, 0, 0, 0)

        self._inventory = _label("", _LABEL_STYLE)
        self._name = _label("", _HEADLINE_STYLE)
        self._materials = _label("", _VALUE_STYLE)
        self._technology = _label("", _VALUE_STYLE)
        self._dating = _label("", _VALUE_STYLE)
        self._location = _label("", _VALUE_STYLE)

        content.addWidget(self._inventory)
        content.addWidget(self._name)
        for caption, value in (
            (LABEL_MATERIAL, self._materials),
            (LABEL_TECHNIQUE, self._technology),
            (LABEL_DATING, self._dating),
            (LABEL_LOCATION, self._location),
        ):
            content.addWidget(_label(caption, _LABEL_STYLE))
            content.addWidget(value)
        content.addStretch(1)

        self._return_button = QPushButton(RETURN_BUTTON_TEXT)
        self._return_button.setStyleSheet(_BUTTON_STYLE)
        self._return_button.clicked.connect(self.returnRequested.emit)
        content.addWidget(self._return_button, alignment=Qt.AlignHCenter)

        root = QVBoxLayout(self)
        root.setContentsMargins(40, 40, 40, 40)
        root.addWidget(self._content)

    def show_object(self, obj: ObjectVM | None) -> None:
        """Fill the panel with `obj`; None clears it."""
        self._content.setVisible(obj is not None)
        if obj is None:
            return
        self._inventory.setText(obj.inventory_id)
        self._name.setText(obj.name)
        self._materials.setText(obj.materials_text)
        self._technology.setText(obj.technology_text)
        self._dating.setText(obj.dating_text)
        self._location.setText(obj.location)
