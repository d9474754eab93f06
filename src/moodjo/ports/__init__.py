"""Ports - interfaces/protocols for external dependencies."""

from .entry_store import EntryStore, StoreError
from .media_store import MediaStore

__all__ = [
    "EntryStore",
    "StoreError",
    "MediaStore",
]
