"""File-based journal entry storage adapter."""

import json
import logging
import os
from datetime import date, datetime
from pathlib import Path

from moodjo.core.entries import JournalEntry, day_bounds, sort_newest_first, start_of_day
from moodjo.ports.entry_store import StoreError

logger = logging.getLogger(__name__)


class FileEntryStore:
    """
    File-based entry storage.

    Implements EntryStore protocol. Each calendar day gets one JSON document,
    so the filename itself enforces one entry per day.
    """

    def __init__(self, entries_dir: Path | str):
        self.entries_dir = Path(entries_dir).expanduser()
        self.entries_dir.mkdir(parents=True, exist_ok=True)

    def _path_for_day(self, moment: datetime | date) -> Path:
        """Get the file path for the calendar day of a moment."""
        return self.entries_dir / f"{start_of_day(moment).date().isoformat()}.json"

    def _read(self, path: Path) -> JournalEntry:
        return JournalEntry.from_dict(json.loads(path.read_text()))

    def _write(self, path: Path, entry: JournalEntry) -> None:
        """Write via a temp file so a failed write never leaves a partial document."""
        tmp = path.with_suffix(".json.tmp")
        try:
            tmp.write_text(json.dumps(entry.to_dict(), indent=2))
            os.replace(tmp, path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StoreError(f"Failed to write {path.name}: {e}") from e

    def _require_stored(self, entry: JournalEntry) -> Path:
        """Path of the stored document for this entry. Raises if it isn't there."""
        path = self._path_for_day(entry.timestamp)
        stored = self.fetch_for_day(entry.timestamp)
        if stored is None or stored.id != entry.id:
            raise StoreError(f"No stored entry {entry.id} for {entry.day.isoformat()}")
        return path

    def insert(self, entry: JournalEntry) -> None:
        """Persist a new entry. Refuses to overwrite another entry for the same day."""
        path = self._path_for_day(entry.timestamp)
        if path.exists():
            raise StoreError(f"An entry is already stored for {entry.day.isoformat()}")
        self._write(path, entry)
        logger.debug(f"Inserted entry {entry.id} for {entry.day.isoformat()}")

    def update(self, entry: JournalEntry) -> None:
        """Persist changes to an existing entry, stamping last_modified (undone if the write fails)."""
        path = self._require_stored(entry)
        previous = entry.last_modified
        entry.mark_modified()
        try:
            self._write(path, entry)
        except StoreError:
            entry.last_modified = previous
            raise
        logger.debug(f"Updated entry {entry.id}")

    def delete(self, entry: JournalEntry) -> None:
        """Remove an entry."""
        path = self._require_stored(entry)
        try:
            path.unlink()
        except OSError as e:
            raise StoreError(f"Failed to delete {path.name}: {e}") from e
        logger.debug(f"Deleted entry {entry.id}")

    def fetch_all(self, strict: bool = False) -> list[JournalEntry]:
        """
        All entries, newest first.

        Unreadable documents are skipped, or raise StoreError when strict.
        """
        entries = []
        try:
            paths = list(self.entries_dir.glob("*.json"))
        except OSError as e:
            raise StoreError(f"Failed to list {self.entries_dir}: {e}") from e

        for path in paths:
            try:
                entries.append(self._read(path))
            except (OSError, ValueError, KeyError) as e:
                if strict:
                    raise StoreError(f"Failed to read {path.name}: {e}") from e
                logger.warning(f"Skipping unreadable entry {path.name}: {e}")
                continue
        return sort_newest_first(entries)

    def fetch_for_day(self, moment: datetime | date) -> JournalEntry | None:
        """The entry whose timestamp falls in [start of day, start of next day)."""
        path = self._path_for_day(moment)
        if not path.exists():
            return None

        try:
            entry = self._read(path)
        except (OSError, ValueError, KeyError) as e:
            raise StoreError(f"Failed to read {path.name}: {e}") from e

        start, end = day_bounds(moment)
        if not start <= start_of_day(entry.timestamp) < end:
            return None
        return entry

    def exists_for_day(self, moment: datetime | date) -> bool:
        """Check if an entry exists for the calendar day of a moment."""
        return self.fetch_for_day(moment) is not None

