"""Edit session - the entry form's draft and which entry it is editing."""

import logging
from datetime import date
from typing import Callable

from .core.entries import DEFAULT_MOOD, Draft, Entry, Mood, parse_mood
from .store import EntryStore

logger = logging.getLogger(__name__)


class EditSession:
    """
    Form state on top of an EntryStore.

    Holds the current draft and the id of the entry being edited, if any.
    Nothing reaches the store until submit() or delete() is called.
    """

    def __init__(
        self,
        store: EntryStore,
        default_mood: Mood = DEFAULT_MOOD,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.default_mood = default_mood
        self._today = today
        self.editing_id: str | None = None
        self.draft = self._blank()

    def _blank(self) -> Draft:
        return Draft.blank(self._today(), mood=self.default_mood)

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def reset(self) -> None:
        """Clear the form back to a blank draft dated today."""
        self.draft = self._blank()
        self.editing_id = None

    cancel = reset

    def begin_edit(self, entry: Entry) -> None:
        """Load an entry's fields into the form."""
        mood = parse_mood(entry.mood)
        if mood is None:
            logger.debug(f"Entry {entry.id} has unknown mood {entry.mood!r}, using {self.default_mood.value}")
            mood = self.default_mood
        self.editing_id = entry.id
        self.draft = Draft(date=entry.date, title=entry.title, content=entry.content, mood=mood)

    def change(self, **fields) -> Draft:
        """Overwrite draft fields; None values leave a field untouched."""
        self.draft = self.draft.with_changes(**fields)
        return self.draft

    def submit(self) -> Entry | None:
        """
        Commit the draft as an update or a new entry.

        The form resets on success. A blank new entry is rejected and the
        draft is left in place for correction.
        """
        if self.editing_id is not None:
            entry = self.store.update(self.editing_id, self.draft)
        else:
            entry = self.store.create(self.draft)

        if entry is not None:
            self.reset()
        return entry

    def delete(self, entry_id: str) -> bool:
        """Delete an entry, abandoning the edit if it was the one being edited."""
        removed = self.store.delete(entry_id)
        if self.editing_id == entry_id:
            self.reset()
        return removed
