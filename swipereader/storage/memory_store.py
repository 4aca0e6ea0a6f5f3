"""
In-memory progress store.
"""

from typing import Any

from swipereader.schemas.reading import Position

from .base import ProgressStore


class InMemoryProgressStore(ProgressStore):
    """Dictionary-backed store, used in tests and short-lived sessions."""

    def __init__(self) -> None:
        self.positions: dict[str, Position] = {}
        self.settings: dict[str, Any] = {}

    def get_position(self, book_id: str) -> Position | None:
        return self.positions.get(book_id)

    def set_position(self, book_id: str, position: Position) -> None:
        self.positions[book_id] = position

    def delete_position(self, book_id: str) -> None:
        self.positions.pop(book_id, None)

    def get_setting(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set_setting(self, key: str, value: Any) -> None:
        self.settings[key] = value
