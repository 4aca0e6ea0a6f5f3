"""
Record-store interface for reading positions and settings.

The reading core never performs I/O itself. Positions and settings are read
and written through this interface by the reading session.
"""

from abc import ABC, abstractmethod
from typing import Any

from swipereader.schemas.reading import Position

CHUNK_SIZE_KEY = "chunkSize"
AUTO_ADVANCE_KEY = "autoAdvanceEnabled"


class ProgressStore(ABC):
    """Abstract base class for position and settings record stores."""

    @abstractmethod
    def get_position(self, book_id: str) -> Position | None:
        """Return the saved position for a book, or None if there is none."""
        pass

    @abstractmethod
    def set_position(self, book_id: str, position: Position) -> None:
        """Save the reading position for a book."""
        pass

    @abstractmethod
    def delete_position(self, book_id: str) -> None:
        pass

    @abstractmethod
    def get_setting(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set_setting(self, key: str, value: Any) -> None:
        pass
