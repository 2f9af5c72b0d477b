"""Pixmap and drag payload helpers shared by the gallery and the workspace."""

from __future__ import annotations

from PySide6.QtCore import QByteArray, QMimeData, Qt
from PySide6.QtGui import QImage, QPainter, QPixmap

from app.views.constants import OBJECT_MIME_TYPE


def faded_pixmap(pixmap: QPixmap, opacity: float) -> QPixmap:
    """Return a copy of `pixmap` drawn with the given opacity.

    Args:
        pixmap: Source pixmap
        opacity: Value between 0.0 (invisible) and 1.0 (unchanged)

    Returns:
        QPixmap: New pixmap with transparent background
    """
    if pixmap.isNull() or opacity >= 1.0:
        return pixmap
    out = QPixmap(pixmap.size())
    out.fill(Qt.transparent)
    painter = QPainter(out)
    try:
        painter.setOpacity(max(0.0, opacity))
        painter.drawPixmap(0, 0, pixmap)
    finally:
        painter.end()
    return out


def to_pixmap(image: object) -> QPixmap:
    """Convert a loaded QImage (or None) into a QPixmap."""
    if isinstance(image, QImage) and not image.isNull():
        return QPixmap.fromImage(image)
    return QPixmap()


def object_mime_data(object_id: str) -> QMimeData:
    """Build the drag payload for an exhibition object."""
    mime = QMimeData()
    mime.setData(OBJECT_MIME_TYPE, QByteArray(object_id.encode("utf-8")))
    return mime


def object_id_from_mime(mime: QMimeData | None) -> str | None:
    """Extract the object id from a drag payload, or None if it carries none."""
    if mime is None or not mime.hasFormat(OBJECT_MIME_TYPE):
        return None
    raw = bytes(mime.data(OBJECT_MIME_TYPE).data()).decode("utf-8", errors="ignore")
    return raw or None
