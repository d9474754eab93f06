"""Journal entry storage interface."""

from datetime import date, datetime
from typing import Protocol

from moodjo.core.entries import JournalEntry


class StoreError(Exception):
    """Raised when the entry store cannot complete an operation."""

    pass


class EntryStore(Protocol):
    """Interface for persisting journal entries, at most one per calendar day."""

    def insert(self, entry: JournalEntry) -> None:
        """Persist a new entry."""
        ...

    def update(self, entry: JournalEntry) -> None:
        """Persist changes to an existing entry and stamp last_modified."""
        ...

    def delete(self, entry: JournalEntry) -> None:
        """Remove an entry."""
        ...

    def fetch_all(self, strict: bool = False) -> list[JournalEntry]:
        """All entries, newest timestamp first. When strict, any unreadable entry raises StoreError."""
        ...

    def fetch_for_day(self, moment: datetime | date) -> JournalEntry | None:
        """The entry for the calendar day containing moment, if any."""
        ...

    def exists_for_day(self, moment: datetime | date) -> bool:
        """Check if an entry exists for the calendar day containing moment."""
        ...
