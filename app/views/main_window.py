"""MainWindow wiring the exhibit view-model to the desktop widgets."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from PySide6.QtCore import QPoint, QTimer, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QMessageBox
from loguru import logger

from app.viewmodels.main_vm import BrowserSnapshot, ExhibitVM
from app.views.constants import (
    DEFAULT_HIT_TEST_X,
    DEFAULT_PREVIEW_HEIGHT,
    DEFAULT_THUMB_HEIGHT,
    WINDOW_TITLE,
)
from app.views.image_tasks import ImageTaskRunner
from app.views.layout.layout_manager import LayoutManager
from app.views.media_utils import to_pixmap
from app.views.widgets.gallery_view import GalleryView
from app.views.widgets.info_panel import InfoPanel
from app.views.widgets.search_bar import SearchBar
from app.views.widgets.workspace_view import WorkspaceView
from core.models import ExhibitionObject
from infrastructure.logging import open_latest_log, open_log_directory


def next_tick(callback: Callable[[], None]) -> None:
    """Run `callback` once the event loop has processed pending events."""
    QTimer.singleShot(0, callback)


class MainWindow(QMainWindow):
    """Main application window.

    Renders `BrowserSnapshot`s from the view-model and forwards UI events
    back to it. Holds no browser state of its own.
    """

    imageLoaded = Signal(str, str, object)  # token, url, QImage

    def __init__(
        self,
        vm: ExhibitVM,
        image_service: Any | None = None,
        settings: Any | None = None,
        log_dir: str | None = None,
    ) -> None:
        """Initialize MainWindow.

        Args:
            vm: View-model owning the collection and browser state
            image_service: Image service for loading preview images
            settings: Settings instance for configuration
            log_dir: Directory the log files are written to
        """
        super().__init__()
        self._vm = vm
        self._img = image_service
        self._settings = settings
        self._log_dir = log_dir

        thumb_height = DEFAULT_THUMB_HEIGHT
        preview_height = DEFAULT_PREVIEW_HEIGHT
        hit_test_x = DEFAULT_HIT_TEST_X
        if settings is not None:
            thumb_height = settings.get_int("gallery.thumb_height", DEFAULT_THUMB_HEIGHT)
            preview_height = settings.get_int("workspace.preview_height", DEFAULT_PREVIEW_HEIGHT)
            hit_test_x = settings.get_int("gallery.hit_test_x", DEFAULT_HIT_TEST_X)

        self.layout_manager = LayoutManager(self)
        self.search_bar = SearchBar()
        self.era_label = self.layout_manager.create_era_label()
        self.gallery = GalleryView(thumb_height=thumb_height, hit_test_x=hit_test_x)
        self.info_panel = InfoPanel()
        self.workspace = WorkspaceView(preview_height=preview_height)
        self._runner = ImageTaskRunner(service=self._img, receiver=self)

        self._setup_ui()
        self._connect_signals()
        self.render(self._vm.snapshot())

    def _setup_ui(self) -> None:
        """Setup the main UI components and layout."""
        self.setWindowTitle(WINDOW_TITLE)
        central = self.layout_manager.setup_main_layout(
            self.search_bar, self.era_label, self.gallery, self.info_panel, self.workspace
        )
        self.setCentralWidget(central)
        self.layout_manager.setup_initial_window_size()
        self._setup_menus()

    def _setup_menus(self) -> None:
        """Create the log menu."""
        menu = self.menuBar().addMenu("Protokoll")
        latest = QAction("Letztes Protokoll öffnen", self)
        latest.triggered.connect(self._on_open_latest_log)
        folder = QAction("Protokollordner öffnen", self)
        folder.triggered.connect(lambda: open_log_directory(self._log_dir))
        menu.addAction(latest)
        menu.addAction(folder)

    def _connect_signals(self) -> None:
        """Connect all signal/slot relationships."""
        self.search_bar.searchChanged.connect(self._vm.on_search_change)
        self.gallery.scrolled.connect(self._on_gallery_scrolled)
        self.workspace.objectDropped.connect(self._vm.on_drop_object)
        self.workspace.objectClicked.connect(self._vm.on_focus_object)
        self.info_panel.returnRequested.connect(self._vm.on_return_focused)
        self.imageLoaded.connect(self._on_image_loaded)

        self._vm.set_locator(self.locate)
        self._vm.subscribe(self.render)

    # Capabilities handed to the view-model

    def locate(self, position: Any) -> str | None:
        """Hit-test the gallery at `position` (a viewport QPoint)."""
        return self.gallery.object_id_at(position if isinstance(position, QPoint) else None)

    # Rendering

    def render(self, snap: BrowserSnapshot) -> None:
        """Apply a snapshot to the widgets."""
        self.search_bar.set_text(snap.search)
        self.search_bar.set_count(snap.result_count)
        self.era_label.setText(snap.current_era or "")

        missing = self.gallery.set_objects(snap.gallery)
        self._request_images(ImageTaskRunner.GALLERY, missing, self.gallery.thumb_height)

        missing = self.workspace.set_objects(snap.selected, snap.focused_id)
        self._request_images(ImageTaskRunner.WORKSPACE, missing, self.workspace.preview_height)

        self.info_panel.setVisible(bool(snap.selected))
        self.info_panel.show_object(snap.focused)

    def _request_images(self, target: str, objects: Iterable[ExhibitionObject], height: int) -> None:
        for obj in objects:
            self._runner.request(target, obj.preview_url, height)

    # Slots

    def _on_open_latest_log(self) -> None:
        if not open_latest_log(self._log_dir):
            QMessageBox.information(self, "Protokoll", "Kein Protokoll gefunden.")

    def _on_gallery_scrolled(self) -> None:
        self._vm.on_scroll(self.gallery.reference_point())

    def _on_image_loaded(self, token: str, url: str, image: object) -> None:
        pixmap = to_pixmap(image)
        if pixmap.isNull():
            logger.debug("No image for {}", url)
            return
        if ImageTaskRunner.target_of(token) == ImageTaskRunner.WORKSPACE:
            self.workspace.set_image(url, pixmap)
        else:
            self.gallery.set_image(url, pixmap)

    def showEvent(self, event: Any) -> None:  # noqa: N802
        super().showEvent(event)
        # Layout is known only once shown; pick up the era at the reference point
        next_tick(lambda: self._vm.on_scroll(self.gallery.reference_point()))
