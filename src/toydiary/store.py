"""Entry store - owns the diary collection and keeps it in sync with storage."""

import json
import logging
import time
import uuid
from typing import Callable

from .core.entries import Draft, Entry, filter_entries, sort_entries
from .core.stats import DiaryStats, compute_stats
from .ports.storage_backend import StorageBackend

logger = logging.getLogger(__name__)

STORAGE_KEY = "toy-diary-entries"


class EntryNotFoundError(KeyError):
    """Raised when updating an entry id that is not in the collection."""


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class EntryStore:
    """
    In-memory diary collection persisted through a StorageBackend.

    The collection is kept sorted by updated_at, most recent first. Every
    mutation is saved before the call returns.
    """

    def __init__(
        self,
        backend: StorageBackend,
        key: str = STORAGE_KEY,
        clock: Callable[[], int] = now_ms,
        new_id: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self.backend = backend
        self.key = key
        self._clock = clock
        self._new_id = new_id
        self._entries: list[Entry] = []
        self.save_warning: str | None = None

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, entry_id: str) -> Entry | None:
        """Find an entry by id. Returns None if not found."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    # ============== Persistence ==============

    def load(self) -> tuple[Entry, ...]:
        """Replace the live collection with the persisted one."""
        raw = self.backend.get(self.key)
        if not raw:
            self._entries = []
            return self.entries

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to load saved entries: {e}")
            self._entries = []
            return self.entries

        if not isinstance(data, list):
            logger.warning(f"Failed to load saved entries: expected a list, got {type(data).__name__}")
            self._entries = []
            return self.entries

        entries = []
        for index, item in enumerate(data):
            try:
                entries.append(Entry.from_dict(item))
            except (KeyError, TypeError, ValueError, OverflowError) as e:
                logger.warning(f"Skipping unreadable entry at index {index}: {e}")

        self._entries = _drop_duplicate_ids(sort_entries(entries))
        logger.debug(f"Loaded {len(self._entries)} entries from {self.key}")
        return self.entries

    def save(self) -> bool:
        """Write the live collection to the backend. Returns False on failure."""
        payload = json.dumps([e.to_dict() for e in self._entries], ensure_ascii=False)
        if self.backend.set(self.key, payload):
            self.save_warning = None
            return True

        self.save_warning = "Entries could not be saved to disk; changes are kept for this session only."
        logger.warning(f"Failed to save {len(self._entries)} entries to {self.key}")
        return False

    # ============== Mutations ==============

    def create(self, draft: Draft) -> Entry | None:
        """
        Add a new entry from a draft.

        Returns None (and changes nothing) when the draft has neither a
        title nor content.
        """
        if draft.is_blank():
            logger.debug("Rejected blank entry")
            return None

        entry = Entry.from_draft(self._new_id(), draft, self._clock())
        self._commit([entry, *self._entries])
        return entry

    def update(self, entry_id: str, draft: Draft) -> Entry:
        """Overwrite an existing entry's fields with the draft's."""
        existing = self.get(entry_id)
        if existing is None:
            raise EntryNotFoundError(entry_id)

        entry = Entry.from_draft(entry_id, draft, self._clock())
        others = [e for e in self._entries if e.id != entry_id]
        self._commit([entry, *others])
        return entry

    def delete(self, entry_id: str) -> bool:
        """Remove an entry if present. Returns True if an entry was removed."""
        remaining = [e for e in self._entries if e.id != entry_id]
        removed = len(remaining) != len(self._entries)
        self._commit(remaining)
        return removed

    def _commit(self, entries: list[Entry]) -> None:
        # Callers put the mutated entry first so it wins timestamp ties
        self._entries = sort_entries(entries)
        self.save()

    # ============== Derived views ==============

    def filtered_view(self, search_term: str = "", date_filter: str = "") -> list[Entry]:
        """Entries matching the search term and date filter, most recent first."""
        return filter_entries(self._entries, search_term, date_filter)

    def stats(self) -> DiaryStats:
        return compute_stats(self._entries)


def _drop_duplicate_ids(entries: list[Entry]) -> list[Entry]:
    """Keep the first (most recent) entry for each id."""
    seen = set()
    unique = []
    for entry in entries:
        if entry.id in seen:
            logger.warning(f"Dropping duplicate entry id {entry.id}")
            continue
        seen.add(entry.id)
        unique.append(entry)
    return unique
