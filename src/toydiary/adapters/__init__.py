"""Adapters - I/O implementations of ports."""

from .file_storage import FileStorageBackend
from .memory_storage import MemoryStorageBackend

__all__ = [
    "FileStorageBackend",
    "MemoryStorageBackend",
]
