"""Pure entry domain logic - no I/O dependencies."""

import math
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum


class Mood(Enum):
    """Closed set of mood tags an entry can be written with."""

    BRIGHT = "bright"
    CALM = "calm"
    REFLECTIVE = "reflective"
    STORMY = "stormy"

    @property
    def label(self) -> str:
        return MOOD_LABELS[self]

    @property
    def emoji(self) -> str:
        return self.label.split(" ")[0]


MOOD_LABELS = {
    Mood.BRIGHT: "😊 Bright",
    Mood.CALM: "😌 Calm",
    Mood.REFLECTIVE: "🧠 Reflective",
    Mood.STORMY: "🌧️ Stormy",
}

FALLBACK_MOOD_LABEL = "📝 Note"
DEFAULT_MOOD = Mood.CALM


def parse_mood(value: str | None) -> Mood | None:
    """Look up a mood by its tag. Returns None for unknown tags."""
    try:
        return Mood(value)
    except ValueError:
        return None


def mood_label(value: str) -> str:
    """Display label for a stored mood tag, falling back for unknown tags."""
    mood = parse_mood(value)
    return mood.label if mood else FALLBACK_MOOD_LABEL


@dataclass(frozen=True)
class Draft:
    """Unsaved field values collected by the entry form."""

    date: str
    title: str = ""
    content: str = ""
    mood: Mood = DEFAULT_MOOD

    def __post_init__(self):
        # Drafts only ever carry enumerated moods; accept the raw tag too
        object.__setattr__(self, "mood", Mood(self.mood))

    @classmethod
    def blank(cls, today: date | None = None, mood: Mood = DEFAULT_MOOD) -> "Draft":
        """Empty form state, dated today."""
        today = today or date.today()
        return cls(date=today.isoformat(), mood=mood)

    def is_blank(self) -> bool:
        """True when both title and content are empty after trimming."""
        return not self.title.strip() and not self.content.strip()

    def with_changes(self, **changes) -> "Draft":
        """Copy with the given fields overwritten; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


@dataclass(frozen=True)
class Entry:
    """A single diary record."""

    id: str
    date: str
    title: str
    content: str
    mood: str
    updated_at: int

    @property
    def mood_label(self) -> str:
        return mood_label(self.mood)

    @property
    def display_title(self) -> str:
        return self.title or "Untitled note"

    @property
    def display_content(self) -> str:
        return self.content or "No content added yet."

    @classmethod
    def from_draft(cls, entry_id: str, draft: Draft, updated_at: int) -> "Entry":
        return cls(
            id=entry_id,
            date=draft.date,
            title=draft.title,
            content=draft.content,
            mood=draft.mood.value,
            updated_at=updated_at,
        )

    def to_dict(self) -> dict:
        """Serialize using the stored key names."""
        return {
            "id": self.id,
            "date": self.date,
            "title": self.title,
            "content": self.content,
            "mood": self.mood,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        """
        Create Entry from a stored record.

        Raises KeyError, TypeError or ValueError for records that cannot be
        read. Unknown mood tags are kept as-is.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}")
        updated_at = data["updatedAt"]
        if (
            isinstance(updated_at, bool)
            or not isinstance(updated_at, (int, float))
            or not math.isfinite(updated_at)
        ):
            raise ValueError(f"Invalid updatedAt: {updated_at!r}")
        if data["id"] is None:
            raise ValueError("Missing id")
        return cls(
            id=str(data["id"]),
            date=str(data.get("date", "") or ""),
            title=str(data.get("title", "") or ""),
            content=str(data.get("content", "") or ""),
            mood=str(data.get("mood", "") or ""),
            updated_at=int(updated_at),
        )


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """
    Sort entries by updated_at, most recent first.

    Stable: entries with equal timestamps keep their relative order.
    Pure function - no I/O.
    """
    return sorted(entries, key=lambda e: e.updated_at, reverse=True)


def filter_entries(
    entries: list[Entry],
    search_term: str = "",
    date_filter: str = "",
) -> list[Entry]:
    """
    Filter entries by date and by a search term over title and content.

    The date must match exactly. The search term is trimmed and matched
    case-insensitively as a substring of the title or the content.
    Input order is preserved. Pure function - no I/O.
    """
    term = search_term.strip().casefold()
    return [
        e
        for e in entries
        if (not date_filter or e.date == date_filter)
        and (not term or term in e.title.casefold() or term in e.content.casefold())
    ]
