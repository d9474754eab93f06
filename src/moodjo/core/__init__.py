"""Functional core - pure mood and entry logic with no I/O."""

from .emotions import (
    Color,
    EmotionPoint,
    Energy,
    Hue,
    PRESETS,
    Valence,
    all_points,
    emotion,
    find_by_name,
)
from .mood import DecodedMood, MoodSource, decode, decode_mood, encode
from .entries import (
    JournalEntry,
    all_tags,
    day_bounds,
    filter_entries,
    normalize_tags,
    start_of_day,
)

__all__ = [
    # Emotions
    "Color",
    "EmotionPoint",
    "Energy",
    "Hue",
    "PRESETS",
    "Valence",
    "all_points",
    "emotion",
    "find_by_name",
    # Mood codec
    "DecodedMood",
    "MoodSource",
    "decode",
    "decode_mood",
    "encode",
    # Entries
    "JournalEntry",
    "all_tags",
    "day_bounds",
    "filter_entries",
    "normalize_tags",
    "start_of_day",
]
