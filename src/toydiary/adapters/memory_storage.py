"""In-memory key-value storage adapter."""


class MemoryStorageBackend:
    """
    Dict-backed storage.

    Implements StorageBackend protocol. Set fail_writes to simulate a full
    or read-only store.
    """

    def __init__(self, initial: dict[str, str] | None = None, fail_writes: bool = False):
        self.values: dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes
        self.write_count = 0

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> bool:
        if self.fail_writes:
            return False
        self.values[key] = value
        self.write_count += 1
        return True
