"""Shared workflow layer between the CLI and the entry manager.

Save flows write media first and only then touch the entry, so an entry
never references a file that isn't on disk.
"""

import logging
from datetime import date, datetime
from typing import Iterable

from .adapters.file_entries import FileEntryStore
from .adapters.file_media import FileMediaStore
from .config import Config
from .core.entries import JournalEntry
from .manager import JournalManager

logger = logging.getLogger(__name__)


def get_entry_store(config: Config) -> FileEntryStore:
    """Resolve entry directory from config."""
    return FileEntryStore(config.entries_path)


def get_media_store(config: Config) -> FileMediaStore:
    """Resolve media directory from config."""
    return FileMediaStore(config.media_path)


def get_manager(config: Config) -> JournalManager:
    return JournalManager(get_entry_store(config), get_media_store(config))


def can_save(text: str | None) -> bool:
    """The editor only saves entries with some body text."""
    return bool(text and text.strip())


def _check_image_count(count: int, config: Config | None) -> None:
    max_images = (config or Config()).max_images
    if count > max_images:
        raise ValueError(f"At most {max_images} images per entry (got {count})")


def _save_media(
    media: FileMediaStore, images: Iterable[bytes], audio: bytes | None
) -> tuple[list[str], str | None]:
    """Write media. Raises OSError, after removing what was written, if any save fails."""
    image_paths: list[str] = []
    audio_path = None
    for data in images:
        filename = media.save_image(data)
        if filename is None:
            media.delete_images(image_paths)
            raise OSError("Failed to save image")
        image_paths.append(filename)

    if audio is not None:
        audio_path = media.save_audio(audio)
        if audio_path is None:
            media.delete_images(image_paths)
            raise OSError("Failed to save audio")

    return image_paths, audio_path


def _discard_media(media: FileMediaStore, image_paths: list[str], audio_path: str | None) -> None:
    """Remove media written for a save that didn't go through."""
    media.delete_images(image_paths)
    if audio_path:
        media.delete_audio(audio_path)
    if image_paths or audio_path:
        logger.info(f"Discarded {len(image_paths) + bool(audio_path)} media files from failed save")


def save_new_entry(
    manager: JournalManager,
    media: FileMediaStore,
    day: datetime | date,
    text: str,
    title: str | None = None,
    images: Iterable[bytes] = (),
    audio: bytes | None = None,
    mood_value: str | None = None,
    tags: Iterable[str] = (),
    config: Config | None = None,
) -> JournalEntry:
    """
    Save media, then create the entry for a day.

    If creation fails (DuplicateEntryError or StoreError) the files written
    here are removed before the error propagates.
    """
    images = list(images)
    _check_image_count(len(images), config)

    image_paths, audio_path = _save_media(media, images, audio)
    try:
        return manager.create(
            day,
            text=text,
            title=title or None,
            image_paths=image_paths,
            audio_path=audio_path,
            mood_value=mood_value,
            tags=tags,
        )
    except Exception:
        _discard_media(media, image_paths, audio_path)
        raise


def save_entry_changes(
    manager: JournalManager,
    media: FileMediaStore,
    entry: JournalEntry,
    text: str,
    title: str | None = None,
    keep_images: Iterable[str] | None = None,
    new_images: Iterable[bytes] = (),
    audio: bytes | None = None,
    remove_audio: bool = False,
    mood_value: str | None = None,
    tags: Iterable[str] = (),
    config: Config | None = None,
) -> None:
    """
    Save new media, then update the entry.

    keep_images defaults to every image the entry already has. New audio
    replaces the old recording; remove_audio drops it. Files the entry no
    longer references are released by the manager after the update succeeds.
    """
    kept = list(entry.image_paths if keep_images is None else keep_images)
    new_images = list(new_images)
    _check_image_count(len(kept) + len(new_images), config)

    added_paths, new_audio_path = _save_media(media, new_images, audio)
    if new_audio_path:
        audio_path = new_audio_path
    elif remove_audio:
        audio_path = None
    else:
        audio_path = entry.audio_path

    try:
        manager.update(
            entry,
            text=text,
            title=title or None,
            image_paths=kept + added_paths,
            audio_path=audio_path,
            mood_value=mood_value,
            tags=tags,
        )
    except Exception:
        _discard_media(media, added_paths, new_audio_path)
        raise
