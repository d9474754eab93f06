"""Adapters - I/O implementations of ports."""

from .file_entries import FileEntryStore
from .file_media import FileMediaStore

__all__ = [
    "FileEntryStore",
    "FileMediaStore",
]
