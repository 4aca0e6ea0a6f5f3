"""
JSON file backed progress store.

Keeps every book's position and all settings in one small JSON document,
rewritten on each change.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from swipereader.schemas.reading import Position

from .base import ProgressStore


class LocalProgressStore(ProgressStore):
    """Progress store persisted to a local JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._data: dict[str, dict[str, Any]] = {"positions": {}, "settings": {}}
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read progress store {self.path}: {e}")
            return
        if not isinstance(raw, dict):
            logger.warning(f"Ignoring malformed progress store {self.path}")
            return
        for section in ("positions", "settings"):
            value = raw.get(section)
            if isinstance(value, dict):
                self._data[section] = value

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self._data, indent=2, sort_keys=True), encoding="utf-8"
        )

    def get_position(self, book_id: str) -> Position | None:
        raw = self._data["positions"].get(book_id)
        if raw is None:
            return None
        try:
            return Position.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Discarding corrupted position for book {book_id}: {e}")
            return None

    def set_position(self, book_id: str, position: Position) -> None:
        self._data["positions"][book_id] = position.model_dump()
        self._save()

    def delete_position(self, book_id: str) -> None:
        if self._data["positions"].pop(book_id, None) is not None:
            self._save()

    def get_setting(self, key: str, default: Any = None) -> Any:
        return self._data["settings"].get(key, default)

    def set_setting(self, key: str, value: Any) -> None:
        self._data["settings"][key] = value
        self._save()
