"""Media storage interface."""

from typing import Iterable, Protocol


class MediaStore(Protocol):
    """Interface for image and audio blobs referenced by filename."""

    def save_image(self, data: bytes) -> str | None:
        """Store image bytes. Returns the generated filename, or None on failure."""
        ...

    def load_image(self, filename: str) -> bytes | None:
        ...

    def delete_image(self, filename: str) -> None:
        ...

    def save_audio(self, data: bytes) -> str | None:
        """Store audio bytes. Returns the generated filename, or None on failure."""
        ...

    def load_audio(self, filename: str) -> bytes | None:
        ...

    def delete_audio(self, filename: str) -> None:
        ...

    def cleanup_orphaned(
        self, referenced_images: Iterable[str], referenced_audio: Iterable[str]
    ) -> int:
        """Delete stored files not in the referenced sets. Returns count removed."""
        ...
