"""Journal entry record and pure entry logic - no I/O dependencies."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Iterable

from .emotions import EmotionPoint
from .mood import decode


def local_time(moment: datetime | date) -> datetime:
    """Naive local datetime for a moment. Bare dates become local midnight."""
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            return moment.astimezone().replace(tzinfo=None)
        return moment
    return datetime.combine(moment, time.min)


def start_of_day(moment: datetime | date) -> datetime:
    """
    Local calendar midnight for a moment.

    Aware datetimes are converted to the local zone first; the result is
    always naive local time.
    """
    return datetime.combine(local_time(moment).date(), time.min)


def day_bounds(moment: datetime | date) -> tuple[datetime, datetime]:
    """Half-open interval [start, end) covering the calendar day of a moment."""
    start = start_of_day(moment)
    return start, start + timedelta(days=1)


def same_day(a: datetime | date, b: datetime | date) -> bool:
    return start_of_day(a) == start_of_day(b)


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Trim tags, drop blanks and duplicates. First occurrence wins."""
    result: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in result:
            result.append(tag)
    return result


@dataclass
class JournalEntry:
    """One calendar day's journal entry."""

    timestamp: datetime
    last_modified: datetime
    text: str = ""
    title: str | None = None
    image_paths: list[str] = field(default_factory=list)
    audio_path: str | None = None
    mood_value: str | None = None
    tags: list[str] = field(default_factory=list)
    is_favorite: bool = False
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def day(self) -> date:
        return start_of_day(self.timestamp).date()

    @property
    def mood(self) -> EmotionPoint | None:
        """Decoded mood, or None if unset or unreadable."""
        return decode(self.mood_value)

    def mark_modified(self, now: datetime | None = None) -> None:
        self.last_modified = now or datetime.now()

    def matches_search(self, search_text: str) -> bool:
        """Case-insensitive substring match on title, text, or any tag."""
        needle = search_text.casefold()
        if self.title and needle in self.title.casefold():
            return True
        if self.text and needle in self.text.casefold():
            return True
        return any(needle in tag.casefold() for tag in self.tags)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "last_modified": self.last_modified.isoformat(),
            "title": self.title,
            "text": self.text,
            "image_paths": list(self.image_paths),
            "audio_path": self.audio_path,
            "mood_value": self.mood_value,
            "tags": list(self.tags),
            "is_favorite": self.is_favorite,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JournalEntry":
        """Create a JournalEntry from its stored JSON form."""
        timestamp = datetime.fromisoformat(data["timestamp"])
        last_modified = data.get("last_modified")
        return cls(
            id=data["id"],
            timestamp=timestamp,
            last_modified=datetime.fromisoformat(last_modified) if last_modified else timestamp,
            title=data.get("title"),
            text=data.get("text") or "",
            image_paths=list(data.get("image_paths") or []),
            audio_path=data.get("audio_path"),
            mood_value=data.get("mood_value"),
            tags=list(data.get("tags") or []),
            is_favorite=bool(data.get("is_favorite", False)),
        )


def filter_entries(
    entries: list[JournalEntry],
    favorites_only: bool = False,
    tag: str | None = None,
    search_text: str = "",
) -> list[JournalEntry]:
    """
    Apply the list filters. All active filters must pass.

    Favorites first, then exact tag membership, then free-text search.
    Pure function - no I/O.
    """
    result = entries

    if favorites_only:
        result = [e for e in result if e.is_favorite]

    if tag is not None:
        result = [e for e in result if tag in e.tags]

    if search_text:
        result = [e for e in result if e.matches_search(search_text)]

    return list(result)


def all_tags(entries: list[JournalEntry]) -> list[str]:
    """Sorted unique tags across entries."""
    return sorted({tag for e in entries for tag in e.tags})


def sort_newest_first(entries: Iterable[JournalEntry]) -> list[JournalEntry]:
    return sorted(entries, key=lambda e: e.timestamp, reverse=True)
