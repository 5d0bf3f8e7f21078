"""Derived statistics over the entry collection."""

from dataclasses import dataclass, field
from datetime import datetime

from .entries import Entry, Mood, parse_mood


@dataclass
class DiaryStats:
    """Aggregate numbers shown above the entry list."""

    total: int = 0
    last_updated: int | None = None
    mood_counts: dict[Mood, int] = field(default_factory=lambda: {m: 0 for m in Mood})

    def mood_mix(self) -> str:
        """One-line mood summary, e.g. '😊 2  😌 0  🧠 1  🌧️ 0'."""
        return "  ".join(f"{mood.emoji} {count}" for mood, count in self.mood_counts.items())


def compute_stats(entries: list[Entry]) -> DiaryStats:
    """
    Compute stats from a collection sorted most recent first.

    Every mood is reported, including those with no entries. Entries with
    unknown mood tags count toward the total only.
    Pure function - no I/O.
    """
    counts = {mood: 0 for mood in Mood}
    for entry in entries:
        mood = parse_mood(entry.mood)
        if mood is not None:
            counts[mood] += 1

    return DiaryStats(
        total=len(entries),
        last_updated=entries[0].updated_at if entries else None,
        mood_counts=counts,
    )


def format_timestamp(timestamp: int | None) -> str:
    """Render a millisecond timestamp as local 'Mon DD, HH:MM'."""
    if timestamp is None:
        return "—"
    try:
        return datetime.fromtimestamp(timestamp / 1000).strftime("%b %d, %H:%M")
    except (OverflowError, OSError, ValueError):
        # Outside the platform's datetime range
        return "—"
