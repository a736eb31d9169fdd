"""Infrastructure: single-line file holding the last used service URL."""

from __future__ import annotations

import os
from pathlib import Path

from output_enhancer.application.ports import UrlStore as UrlStorePort


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(Path.home(), ".config")
    return Path(base) / "eo" / "config.txt"


class FileUrlStore(UrlStorePort):
    """Reads and overwrites the saved URL; last write wins."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(path) if path else default_config_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str | None:
        """Return the saved URL, or None if the file is missing, unreadable or blank."""
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                line = f.readline().strip()
        except (OSError, UnicodeDecodeError):
            return None
        return line or None

    def save(self, url: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            f.write(url)
