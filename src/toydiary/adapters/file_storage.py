"""File-based key-value storage adapter."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStorageBackend:
    """
    File-based key-value storage.

    Implements StorageBackend protocol. Each key gets a JSON file.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path_for_key(self, key: str) -> Path:
        """Get the file path for a given key."""
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Read the value stored under a key. Returns None if not found."""
        path = self._path_for_key(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            return None

    def set(self, key: str, value: str) -> bool:
        """Write/overwrite the value under a key. Returns False on failure."""
        path = self._path_for_key(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            return False
        return True
