"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    @property
    def path(self) -> Path:
        """Location of the settings file."""
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def get_str(self, key: str, default: str) -> str:
        """Return `key` as a string; non-string values fall back to `default`."""
        value = self.get(key, default)
        return value if isinstance(value, str) else default

    def get_int(self, key: str, default: int) -> int:
        """Return `key` as an int; invalid values fall back to `default`."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_bool(self, key: str, default: bool) -> bool:
        """Return `key` as a bool; only JSON booleans are accepted."""
        value = self.get(key, default)
        return value if isinstance(value, bool) else default

    def resolve_path(self, key: str, default: str) -> Path:
        """Return `key` as a path, relative paths resolved against the settings file."""
        p = Path(self.get_str(key, default))
        if not p.is_absolute():
            p = self._path.parent / p
        return p
