"""Functional core - pure business logic with no I/O."""

from .entries import (
    DEFAULT_MOOD,
    Draft,
    Entry,
    Mood,
    filter_entries,
    mood_label,
    parse_mood,
    sort_entries,
)
from .stats import DiaryStats, compute_stats, format_timestamp

__all__ = [
    # Entries
    "DEFAULT_MOOD",
    "Draft",
    "Entry",
    "Mood",
    "filter_entries",
    "mood_label",
    "parse_mood",
    "sort_entries",
    # Stats
    "DiaryStats",
    "compute_stats",
    "format_timestamp",
]
