"""Journal entry lifecycle - create, edit, delete and browse entries.

Every mutation goes to the store first, then the in-memory entry list is
re-fetched in full and subscribers are notified with the new list.
"""

import dataclasses
import logging
from datetime import date, datetime
from typing import Callable, Iterable

from .core.entries import (
    JournalEntry,
    all_tags,
    filter_entries,
    local_time,
    normalize_tags,
)
from .ports.entry_store import EntryStore, StoreError
from .ports.media_store import MediaStore

logger = logging.getLogger(__name__)

Subscriber = Callable[[list[JournalEntry]], None]


class DuplicateEntryError(Exception):
    """Raised when creating an entry for a day that already has one."""

    def __init__(self, day: date | None = None):
        self.day = day
        super().__init__(
            "An entry already exists for this date. Only one entry per day is allowed."
        )


class JournalManager:
    """
    Owns the in-memory entry list and enforces one entry per calendar day.

    The media store is optional; without one, media referenced by deleted or
    edited entries is left in place for cleanup_orphaned to collect.
    """

    def __init__(self, store: EntryStore, media: MediaStore | None = None):
        self.store = store
        self.media = media
        self.entries: list[JournalEntry] = []
        self._subscribers: list[Subscriber] = []
        self.reload()

    # ============== Subscriptions ==============

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call callback with the new entry list after every reload. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def reload(self) -> list[JournalEntry]:
        """Replace the in-memory list with a fresh fetch. Read failures yield an empty list."""
        try:
            entries = self.store.fetch_all()
        except StoreError as e:
            logger.warning(f"Failed to fetch entries: {e}")
            entries = []

        self.entries = list(entries)
        for callback in list(self._subscribers):
            callback(self.entries)
        return self.entries

    # ============== Mutations ==============

    def create(
        self,
        day: datetime | date,
        text: str,
        title: str | None = None,
        image_paths: Iterable[str] = (),
        audio_path: str | None = None,
        mood_value: str | None = None,
        tags: Iterable[str] = (),
        is_favorite: bool = False,
    ) -> JournalEntry:
        """
        Create the entry for a calendar day.

        Raises DuplicateEntryError if that day already has an entry, and
        StoreError if the store fails.
        """
        if self.store.exists_for_day(day):
            raise DuplicateEntryError(local_time(day).date())

        timestamp = local_time(day)
        entry = JournalEntry(
            timestamp=timestamp,
            last_modified=timestamp,
            title=title,
            text=text,
            image_paths=list(image_paths),
            audio_path=audio_path,
            mood_value=mood_value,
            tags=normalize_tags(tags),
            is_favorite=is_favorite,
        )

        self.store.insert(entry)
        logger.info(f"Created entry for {entry.day.isoformat()}")
        self.reload()
        return entry

    def update(
        self,
        entry: JournalEntry,
        text: str,
        title: str | None = None,
        image_paths: Iterable[str] = (),
        audio_path: str | None = None,
        mood_value: str | None = None,
        tags: Iterable[str] = (),
    ) -> None:
        """
        Overwrite an entry's editable fields and persist.

        On StoreError the entry's fields are restored and the error propagates.
        Media the entry stopped referencing is released once the update succeeds.
        """
        snapshot = dataclasses.replace(entry)
        old_images = list(entry.image_paths)
        old_audio = entry.audio_path

        entry.title = title
        entry.text = text
        entry.image_paths = list(image_paths)
        entry.audio_path = audio_path
        entry.mood_value = mood_value
        entry.tags = normalize_tags(tags)
        entry.mark_modified()

        try:
            self.store.update(entry)
        except StoreError:
            vars(entry).update(vars(snapshot))
            raise

        self._release_media(
            [p for p in old_images if p not in entry.image_paths],
            old_audio if old_audio and old_audio != entry.audio_path else None,
        )
        self.reload()

    def delete(self, entry: JournalEntry) -> None:
        """Delete an entry and its media. Store failures are logged, not raised."""
        try:
            self.store.delete(entry)
        except StoreError as e:
            logger.warning(f"Failed to delete entry: {e}")
            return

        self._release_media(entry.image_paths, entry.audio_path)
        self.reload()

    def toggle_favorite(self, entry: JournalEntry) -> None:
        """Flip the favorite flag. Store failures are logged and the entry restored."""
        snapshot = dataclasses.replace(entry)
        entry.is_favorite = not entry.is_favorite
        try:
            self.store.update(entry)
        except StoreError as e:
            vars(entry).update(vars(snapshot))
            logger.warning(f"Failed to toggle favorite: {e}")
            return
        self.reload()

    def _release_media(self, image_paths: Iterable[str], audio_path: str | None) -> None:
        """Delete media an entry no longer references. Failures are logged, not raised."""
        if self.media is None:
            return
        for filename in image_paths:
            try:
                self.media.delete_image(filename)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to delete image {filename}: {e}")
        if audio_path:
            try:
                self.media.delete_audio(audio_path)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to delete audio {audio_path}: {e}")

    # ============== Queries ==============

    def exists_for_day(self, day: datetime | date) -> bool:
        try:
            return self.store.exists_for_day(day)
        except StoreError as e:
            logger.warning(f"Failed to check entry existence: {e}")
            return False

    def entry_for_day(self, day: datetime | date) -> JournalEntry | None:
        try:
            return self.store.fetch_for_day(day)
        except StoreError as e:
            logger.warning(f"Failed to fetch entry for date: {e}")
            return None

    def filtered_view(
        self,
        favorites_only: bool = False,
        tag: str | None = None,
        search_text: str = "",
    ) -> list[JournalEntry]:
        """Entries passing every active filter, newest first."""
        return filter_entries(self.entries, favorites_only, tag, search_text)

    def all_tags(self) -> list[str]:
        return all_tags(self.entries)

    def referenced_media(
        self, entries: list[JournalEntry] | None = None
    ) -> tuple[set[str], set[str]]:
        """(image filenames, audio filenames) referenced by entries (default: loaded ones)."""
        entries = self.entries if entries is None else entries
        images = {p for e in entries for p in e.image_paths}
        audio = {e.audio_path for e in entries if e.audio_path}
        return images, audio

    def cleanup_media(self) -> int:
        """
        Delete media files no stored entry references. Returns how many were removed.

        Reads the store directly rather than the in-memory list, which may be
        an empty stand-in after a failed reload. The listing is strict: if any
        stored document can't be read, StoreError propagates and nothing is
        deleted.
        """
        if self.media is None:
            return 0
        images, audio = self.referenced_media(self.store.fetch_all(strict=True))
        return self.media.cleanup_orphaned(images, audio)
