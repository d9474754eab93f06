"""File-based media storage adapter - image and audio blobs by filename."""

import logging
import uuid
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

IMAGE_SUFFIX = ".jpg"
AUDIO_SUFFIX = ".m4a"


class FileMediaStore:
    """
    File-based media storage.

    Implements MediaStore protocol. Images and audio live in separate
    directories under media_dir; entries reference them by bare filename.
    Construct one per application and pass it to whatever needs it.
    """

    def __init__(self, media_dir: Path | str):
        self.media_dir = Path(media_dir).expanduser()
        self.images_dir = self.media_dir / "images"
        self.audio_dir = self.media_dir / "audio"
        self.images_dir.mkdir(parents=True, exist_ok=True)
        self.audio_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _resolve(directory: Path, filename: str) -> Path:
        """Path for a stored filename. Rejects anything that isn't a bare name."""
        if not filename or Path(filename).name != filename or filename in (".", ".."):
            raise ValueError(f"Invalid media filename: {filename!r}")
        return directory / filename

    def _save(self, directory: Path, data: bytes, suffix: str) -> str | None:
        filename = uuid.uuid4().hex + suffix
        try:
            (directory / filename).write_bytes(data)
        except OSError as e:
            logger.warning(f"Failed to save {filename}: {e}")
            return None
        return filename

    def _load(self, directory: Path, filename: str) -> bytes | None:
        path = self._resolve(directory, filename)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Failed to load {filename}: {e}")
            return None

    def _delete(self, directory: Path, filename: str) -> None:
        path = self._resolve(directory, filename)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to delete {filename}: {e}")

    # Images

    def save_image(self, data: bytes) -> str | None:
        """Save image bytes and return the generated filename."""
        return self._save(self.images_dir, data, IMAGE_SUFFIX)

    def save_images(self, images: Iterable[bytes]) -> list[str]:
        """Save several images. Failed saves are left out of the result."""
        filenames = []
        for data in images:
            filename = self.save_image(data)
            if filename:
                filenames.append(filename)
        return filenames

    def load_image(self, filename: str) -> bytes | None:
        return self._load(self.images_dir, filename)

    def load_images(self, filenames: Iterable[str]) -> list[bytes]:
        """Load several images, skipping any that are missing."""
        loaded = (self.load_image(f) for f in filenames)
        return [data for data in loaded if data is not None]

    def delete_image(self, filename: str) -> None:
        self._delete(self.images_dir, filename)

    def delete_images(self, filenames: Iterable[str]) -> None:
        for filename in filenames:
            self.delete_image(filename)

    # Audio

    def save_audio(self, data: bytes) -> str | None:
        """Save audio bytes and return the generated filename."""
        return self._save(self.audio_dir, data, AUDIO_SUFFIX)

    def load_audio(self, filename: str) -> bytes | None:
        return self._load(self.audio_dir, filename)

    def delete_audio(self, filename: str) -> None:
        self._delete(self.audio_dir, filename)

    # Cleanup

    def cleanup_orphaned(
        self, referenced_images: Iterable[str], referenced_audio: Iterable[str]
    ) -> int:
        """Remove stored files no entry references. Returns how many were removed."""
        removed = 0
        for directory, referenced in (
            (self.images_dir, set(referenced_images)),
            (self.audio_dir, set(referenced_audio)),
        ):
            for path in directory.iterdir():
                if not path.is_file() or path.name in referenced:
                    continue
                try:
                    path.unlink()
                    removed += 1
                except OSError as e:
                    logger.warning(f"Failed to remove orphaned {path.name}: {e}")
        if removed:
            logger.info(f"Removed {removed} orphaned media files")
        return removed
