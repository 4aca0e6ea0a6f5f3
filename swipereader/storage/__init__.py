"""
Storage module for SwipeReader.

Provides the record-store interface for positions and settings, with an
in-memory implementation and a JSON file implementation.
"""

from .base import AUTO_ADVANCE_KEY, CHUNK_SIZE_KEY, ProgressStore
from .local_store import LocalProgressStore
from .memory_store import InMemoryProgressStore

__all__ = [
    "AUTO_ADVANCE_KEY",
    "CHUNK_SIZE_KEY",
    "InMemoryProgressStore",
    "LocalProgressStore",
    "ProgressStore",
]
