"""WorkspaceView: drop target holding the selected objects."""

from __future__ import annotations

from collections.abc import Sequence

from PySide6.QtCore import QSize, Qt, QTimer, Signal
from PySide6.QtGui import QDragEnterEvent, QDragMoveEvent, QDropEvent, QIcon, QPixmap
from PySide6.QtWidgets import (
    QAbstractItemView,
    QLabel,
    QListView,
    QListWidget,
    QListWidgetItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from app.views.constants import (
    DEFAULT_PREVIEW_HEIGHT,
    DROP_HINT,
    FADED_OPACITY,
    OBJECT_ID_ROLE,
    PREVIEW_URL_ROLE,
    SEPARATOR_COLOR,
)
from app.views.media_utils import faded_pixmap, object_id_from_mime
from core.models import ExhibitionObject

_PAGE_HINT = 0
_PAGE_OBJECTS = 1


class WorkspaceView(QWidget):
    """Shows a drop hint while empty and the selected objects otherwise.

    Signals:
        objectDropped(str): An exhibition object was dropped onto the workspace.
        objectClicked(str): A workspace object was clicked.
    """

    objectDropped = Signal(str)
    objectClicked = Signal(str)

    def __init__(self, parent: QWidget | None = None, preview_height: int = DEFAULT_PREVIEW_HEIGHT) -> None:
        super().__init__(parent)
        self._preview_height = preview_height
        self._ids: list[str] = []
        self._focused_id: str | None = None
        self._pixmaps: dict[str, QPixmap] = {}

        self.setAcceptDrops(True)

        self._stack = QStackedWidget(self)
        hint = QLabel(DROP_HINT)
        hint.setAlignment(Qt.AlignCenter)
        hint.setWordWrap(True)
        hint.setStyleSheet(f"border: 1px dashed {SEPARATOR_COLOR}; font-size: 20px; padding: 20px;")
        self._stack.insertWidget(_PAGE_HINT, hint)

        self._list = QListWidget()
        self._list.setViewMode(QListView.IconMode)
        self._list.setFlow(QListView.LeftToRight)
        self._list.setWrapping(False)
        self._list.setMovement(QListView.Static)
        self._list.setIconSize(QSize(preview_height, preview_height))
        self._list.setHorizontalScrollMode(QAbstractItemView.ScrollPerPixel)
        self._list.setSelectionMode(QAbstractItemView.NoSelection)
        self._list.setDragDropMode(QAbstractItemView.NoDragDrop)
        self._list.itemClicked.connect(self._on_item_clicked)
        self._stack.insertWidget(_PAGE_OBJECTS, self._list)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.addWidget(self._stack)

    @property
    def preview_height(self) -> int:
        return self._preview_height

    def set_objects(
        self, objects: Sequence[ExhibitionObject], focused_id: str | None
    ) -> list[ExhibitionObject]:
        """Show the selected objects; returns those that still need an image."""
        ids = [o.id for o in objects]
        missing: list[ExhibitionObject] = []
        if ids != self._ids:
            self._ids = ids
            self._list.clear()
            for obj in objects:
                item = QListWidgetItem()
                item.setData(OBJECT_ID_ROLE, obj.id)
                item.setData(PREVIEW_URL_ROLE, obj.preview_url)
                item.setToolTip(obj.name)
                if obj.preview_url not in self._pixmaps:
                    missing.append(obj)
                self._list.addItem(item)
        self._focused_id = focused_id
        self._stack.setCurrentIndex(_PAGE_OBJECTS if ids else _PAGE_HINT)
        self._refresh_icons()
        return missing

    def set_image(self, url: str, pixmap: QPixmap) -> None:
        """Attach a loaded image to every item showing `url`."""
        if pixmap.isNull():
            return
        self._pixmaps[url] = pixmap
        self._refresh_icons()

    def _refresh_icons(self) -> None:
        # Focused object fully opaque, the others faded
        for row in range(self._list.count()):
            item = self._list.item(row)
            pm = self._pixmaps.get(item.data(PREVIEW_URL_ROLE))
            if pm is None:
                continue
            if item.data(OBJECT_ID_ROLE) != self._focused_id:
                pm = faded_pixmap(pm, FADED_OPACITY)
            item.setIcon(QIcon(pm))

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        value = item.data(OBJECT_ID_ROLE)
        if value is not None:
            self.objectClicked.emit(str(value))

    # Drop target

    def dragEnterEvent(self, event: QDragEnterEvent) -> None:  # noqa: N802
        if object_id_from_mime(event.mimeData()) is not None:
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event: QDragMoveEvent) -> None:  # noqa: N802
        if object_id_from_mime(event.mimeData()) is not None:
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event: QDropEvent) -> None:  # noqa: N802
        object_id = object_id_from_mime(event.mimeData())
        if object_id is None:
            event.ignore()
            return
        event.acceptProposedAction()
        # Emit after the drag loop has returned so the gallery can be rebuilt safely
        QTimer.singleShot(0, lambda: self.objectDropped.emit(object_id))
