"""Image loading, thumbnailing, and caching utilities.

Preview URLs are resolved to files under the configured asset directory and
decoded with Qt's image reader, scaled to a fixed height.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QImage, QImageReader
from loguru import logger

from infrastructure.utils import scaled_size, url_to_asset_path

PLACEHOLDER_COLOR = QColor(220, 220, 220)


@dataclass
class _MemCacheItem:
    key: str
    image: QImage


class _LRUCache:
    def __init__(self, capacity: int) -> None:
        self._cap = max(1, int(capacity or 1))
        self._data: OrderedDict[str, _MemCacheItem] = OrderedDict()

    def get(self, key: str) -> QImage | None:
        """Return cached QImage for key, moving it to the MRU position."""
        item = self._data.get(key)
        if not item:
            return None
        self._data.move_to_end(key)
        return item.image

    def put(self, key: str, image: QImage) -> None:
        """Insert or update `key` with `image`, evicting LRU when over capacity."""
        self._data[key] = _MemCacheItem(key, image)
        self._data.move_to_end(key)
        while len(self._data) > self._cap:
            self._data.popitem(last=False)


class ImageService:
    """Resolve preview URLs to local assets and load height-bounded images."""

    def __init__(self, settings: object | None = None, base_dir: Path | None = None) -> None:
        """Initialize the asset mapping and memory cache from settings."""
        self._mem_cap = 256
        self._url_prefix = "http://localhost:3000"
        asset_root = "assets"
        if settings is not None:
            try:
                self._mem_cap = int(settings.get("images.mem_cache", 256) or 256)
            except (ValueError, TypeError):
                self._mem_cap = 256
            raw_prefix = settings.get("images.url_prefix", self._url_prefix)
            if isinstance(raw_prefix, str):
                self._url_prefix = raw_prefix
            raw_root = settings.get("images.asset_root", asset_root)
            if isinstance(raw_root, str):
                asset_root = raw_root
        root = Path(asset_root)
        if not root.is_absolute() and base_dir is not None:
            root = base_dir / root
        self._asset_root = root
        self._mem_cache = _LRUCache(self._mem_cap)

    def get_thumbnail(self, url: str, height: int) -> QImage:
        """Return the image for `url` scaled to at most `height` pixels high."""
        key = f"{url}|{int(height)}"
        img = self._mem_cache.get(key)
        if img is not None and not img.isNull():
            return img

        img = self._load(url, height)
        if img is None or img.isNull():
            img = self._placeholder(height)
        self._mem_cache.put(key, img)
        return img

    def _load(self, url: str, height: int) -> QImage | None:
        path = url_to_asset_path(url, self._url_prefix, self._asset_root)
        if path is None or not path.exists():
            logger.debug("No local asset for {}", url)
            return None
        try:
            reader = QImageReader(str(path))
            reader.setAutoTransform(True)
            if reader.size().isValid():
                w, h = scaled_size(reader.size().width(), reader.size().height(), height)
                reader.setScaledSize(QSize(w, h))
            img = reader.read()
            if img is None or img.isNull():
                logger.warning("Decode failed for {}: {}", path, reader.errorString())
                return None
            return img
        except (OSError, ValueError) as ex:
            logger.error("Image load failed for {}: {}", path, ex)
            return None

    @staticmethod
    def _placeholder(height: int) -> QImage:
        side = max(16, int(height or 64))
        img = QImage(int(side * 0.75), side, QImage.Format_ARGB32)
        img.fill(PLACEHOLDER_COLOR)
        return img
