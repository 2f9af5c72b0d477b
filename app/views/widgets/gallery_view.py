"""GalleryView: horizontal timeline of exhibition objects that can be dragged."""

from __future__ import annotations

from collections.abc import Sequence

from PySide6.QtCore import QPoint, QSize, Qt, Signal
from PySide6.QtGui import QDrag, QIcon, QPixmap
from PySide6.QtWidgets import QAbstractItemView, QListView, QListWidget, QListWidgetItem, QWidget

from app.views.constants import (
    DEFAULT_HIT_TEST_X,
    DEFAULT_THUMB_HEIGHT,
    FADED_OPACITY,
    GALLERY_HEIGHT_PX,
    GALLERY_SPACING_PX,
    OBJECT_ID_ROLE,
    PREVIEW_URL_ROLE,
)
from app.views.media_utils import faded_pixmap, object_mime_data
from core.models import ExhibitionObject


class GalleryView(QListWidget):
    """Single-row, horizontally scrolling gallery.

    Emits `scrolled()` whenever the horizontal position changes. While an item
    is dragged it is rendered faded.
    """

    scrolled = Signal()

    def __init__(
        self,
        parent: QWidget | None = None,
        thumb_height: int = DEFAULT_THUMB_HEIGHT,
        hit_test_x: int = DEFAULT_HIT_TEST_X,
    ) -> None:
        super().__init__(parent)
        self._thumb_height = thumb_height
        self._hit_test_x = hit_test_x
        self._ids: list[str] = []
        self._pixmaps: dict[str, QPixmap] = {}
        self._dragging_id: str | None = None

        self.setViewMode(QListView.IconMode)
        self.setFlow(QListView.LeftToRight)
        self.setWrapping(False)
        self.setMovement(QListView.Static)
        self.setResizeMode(QListView.Adjust)
        self.setSpacing(GALLERY_SPACING_PX)
        self.setIconSize(QSize(int(thumb_height * 1.5), thumb_height))
        self.setFixedHeight(GALLERY_HEIGHT_PX)
        self.setHorizontalScrollMode(QAbstractItemView.ScrollPerPixel)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setDragEnabled(True)
        self.setDragDropMode(QAbstractItemView.DragOnly)

        self.horizontalScrollBar().valueChanged.connect(lambda *_: self.scrolled.emit())

    @property
    def thumb_height(self) -> int:
        return self._thumb_height

    @property
    def dragging_id(self) -> str | None:
        """Id of the object currently being dragged, if any."""
        return self._dragging_id

    def object_ids(self) -> list[str]:
        """Ids of the displayed objects in display order."""
        return list(self._ids)

    def set_objects(self, objects: Sequence[ExhibitionObject]) -> list[ExhibitionObject]:
        """Show `objects`; returns those that still need an image."""
        ids = [o.id for o in objects]
        if ids == self._ids:
            return []
        self._ids = ids
        self.clear()
        missing: list[ExhibitionObject] = []
        for obj in objects:
            item = QListWidgetItem()
            item.setData(OBJECT_ID_ROLE, obj.id)
            item.setData(PREVIEW_URL_ROLE, obj.preview_url)
            item.setToolTip(f"{obj.name}\n{obj.era}")
            item.setFlags(Qt.ItemIsEnabled | Qt.ItemIsSelectable | Qt.ItemIsDragEnabled)
            pm = self._pixmaps.get(obj.preview_url)
            if pm is not None:
                item.setIcon(QIcon(pm))
            else:
                missing.append(obj)
            self.addItem(item)
        return missing

    def set_image(self, url: str, pixmap: QPixmap) -> None:
        """Attach a loaded image to every item showing `url`."""
        if pixmap.isNull():
            return
        self._pixmaps[url] = pixmap
        for row in range(self.count()):
            item = self.item(row)
            if item is not None and item.data(PREVIEW_URL_ROLE) == url:
                item.setIcon(QIcon(pixmap))

    def reference_point(self) -> QPoint:
        """Viewport point whose object defines the displayed era."""
        return QPoint(self._hit_test_x, max(0, self.viewport().height() // 2))

    def object_id_at(self, position: QPoint | None) -> str | None:
        """Hit-test: id of the object rendered at `position` (viewport coordinates)."""
        point = position if isinstance(position, QPoint) else self.reference_point()
        item = self.itemAt(point)
        if item is None:
            return None
        value = item.data(OBJECT_ID_ROLE)
        return str(value) if value is not None else None

    def startDrag(self, supportedActions: Qt.DropActions) -> None:  # noqa: N802,N803
        item = self.currentItem()
        if item is None:
            return
        object_id = str(item.data(OBJECT_ID_ROLE))
        url = item.data(PREVIEW_URL_ROLE)
        pixmap = self._pixmaps.get(url, QPixmap())

        drag = QDrag(self)
        drag.setMimeData(object_mime_data(object_id))
        if not pixmap.isNull():
            drag.setPixmap(pixmap)

        self._dragging_id = object_id
        if not pixmap.isNull():
            item.setIcon(QIcon(faded_pixmap(pixmap, FADED_OPACITY)))
        try:
            drag.exec(Qt.CopyAction)
        finally:
            self._dragging_id = None
            # The item may be gone if the drop moved the object to the workspace
            if object_id in self._ids and not pixmap.isNull():
                for row in range(self.count()):
                    it = self.item(row)
                    if it is not None and it.data(OBJECT_ID_ROLE) == object_id:
                        it.setIcon(QIcon(pixmap))
