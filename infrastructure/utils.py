"""Utilities for mapping preview URLs back to local asset files.

Preview URLs are produced by rewriting the catalog's local image prefix into
a servable URL prefix. The desktop browser does not fetch anything over the
network; it maps the URL prefix onto a configured asset directory instead.
These helpers never raise; callers should expect `None` when a URL cannot be
mapped.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote

from loguru import logger


def url_to_asset_path(url: str, url_prefix: str, asset_root: str | Path) -> Path | None:
    """Map `url` below `url_prefix` to a file below `asset_root`.

    Returns None if `url` does not start with `url_prefix` or would escape
    `asset_root`.
    """
    if not url or not url.startswith(url_prefix):
        logger.debug("URL outside asset prefix: {}", url)
        return None
    relative = unquote(url[len(url_prefix):]).lstrip("/")
    root = Path(asset_root).resolve()
    candidate = (root / relative).resolve()
    try:
        candidate.relative_to(root)
    except ValueError:
        logger.warning("Rejected asset path outside root: {}", url)
        return None
    return candidate


def scaled_size(width: int, height: int, target_height: int) -> tuple[int, int]:
    """Scale (`width`, `height`) to `target_height`, keeping the aspect ratio.

    Images are never enlarged; non-positive inputs are returned unchanged.
    """
    if width <= 0 or height <= 0 or target_height <= 0 or height <= target_height:
        return width, height
    return max(1, int(width * (target_height / height))), target_height
