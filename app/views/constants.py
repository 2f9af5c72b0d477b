"""
UI/view constants centralized for reuse across view modules.

Visible texts are kept in German to match the museum's catalog language.
"""

from __future__ import annotations

from PySide6.QtCore import Qt

WINDOW_TITLE: str = "Zeitstrahl - Fundstücke"

# Drag and drop: one item type carrying the object id
OBJECT_MIME_TYPE: str = "application/x-exhibition-object"

# Data roles
OBJECT_ID_ROLE: int = Qt.UserRole
PREVIEW_URL_ROLE: int = Qt.UserRole + 1

# Visible texts
SEARCH_PLACEHOLDER: str = "Stichwort eingeben"
DROP_HINT: str = (
    "Ziehe ein Fundstück aus dem Zeitstrahl auf den Untersuchungstisch "
    "um es genauer anzuschauen"
)
RETURN_BUTTON_TEXT: str = "Objekt zurücklegen"
LABEL_MATERIAL: str = "Material"
LABEL_TECHNIQUE: str = "Technik"
LABEL_DATING: str = "Datierung"
LABEL_LOCATION: str = "Fundort"

# Styling
ACCENT_COLOR: str = "#a88a49"
SEPARATOR_COLOR: str = "#aaa"
FADED_OPACITY: float = 0.5

# Sizes (overridable by settings.json)
DEFAULT_THUMB_HEIGHT: int = 150
DEFAULT_PREVIEW_HEIGHT: int = 500
DEFAULT_HIT_TEST_X: int = 50
GALLERY_HEIGHT_PX: int = 300
INFO_PANEL_WIDTH_PX: int = 450
GALLERY_SPACING_PX: int = 12
