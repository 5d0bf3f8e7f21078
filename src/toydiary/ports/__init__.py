"""Ports - interfaces/protocols for external dependencies."""

from .storage_backend import StorageBackend

__all__ = [
    "StorageBackend",
]
