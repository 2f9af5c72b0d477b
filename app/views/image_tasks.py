from __future__ import annotations

from typing import Any

from PySide6.QtCore import QObject, QRunnable, QThreadPool
from loguru import logger


class _ImageTask(QRunnable):
    """QRunnable for background image loading.

    Emits `receiver.imageLoaded(token, url, image)` upon completion. The
    receiver is expected to own a Qt `Signal(str, str, object)` named
    `imageLoaded`.
    """

    def __init__(self, *, url: str, height: int, service: Any, receiver: QObject, token: str) -> None:
        super().__init__()
        self._url = url
        self._height = height
        self._service = service
        self._receiver = receiver
        self._token = token

    def run(self) -> None:  # type: ignore[override]
        try:
            img = self._service.get_thumbnail(self._url, self._height)
        except Exception as ex:  # pragma: no cover - GUI background task
            logger.error("Image task failed for {}: {}", self._url, ex)
            img = None
        try:
            self._receiver.imageLoaded.emit(self._token, self._url, img)  # type: ignore[attr-defined]
        except RuntimeError as ex:  # pragma: no cover - receiver already destroyed
            logger.debug("Image result dropped for {}: {}", self._url, ex)


class ImageTaskRunner:
    """Dispatches image load tasks to the global thread pool.

    Tokens have the format "{target}|{height}" where target is "gallery" or
    "workspace"; the url travels separately with the signal.
    """

    GALLERY = "gallery"
    WORKSPACE = "workspace"

    def __init__(self, *, service: Any, receiver: QObject) -> None:
        self._service = service
        self._receiver = receiver
        self._pool = QThreadPool.globalInstance()

    def request(self, target: str, url: str, height: int) -> str:
        """Request the image for `url` at `height` for `target`. Returns the token."""
        token = f"{target}|{height}"
        if self._service is None:
            return token
        task = _ImageTask(
            url=url,
            height=height,
            service=self._service,
            receiver=self._receiver,
            token=token,
        )
        self._pool.start(task)
        return token

    @staticmethod
    def target_of(token: str) -> str:
        """Return the target part of a token."""
        return token.split("|", 1)[0]
