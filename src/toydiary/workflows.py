"""Shared wiring between the CLI and the store.

Each open_* function resolves storage from config and returns a ready,
loaded object.
"""

from .adapters.file_storage import FileStorageBackend
from .config import Config
from .session import EditSession
from .store import EntryStore


def get_backend(config: Config) -> FileStorageBackend:
    """Resolve the storage directory from config."""
    return FileStorageBackend(config.data_path)


def open_store(config: Config) -> EntryStore:
    """Build an EntryStore over the configured backend and load it."""
    store = EntryStore(get_backend(config), key=config.storage_key)
    store.load()
    return store


def open_session(config: Config) -> EditSession:
    """Build an EditSession over a freshly loaded store."""
    return EditSession(open_store(config), default_mood=config.default_mood)
