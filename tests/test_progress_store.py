"""
Tests for the progress store implementations.
"""

import json

import pytest

from swipereader.schemas.reading import Position
from swipereader.storage import (
    AUTO_ADVANCE_KEY,
    CHUNK_SIZE_KEY,
    InMemoryProgressStore,
    LocalProgressStore,
    ProgressStore,
)


@pytest.fixture(params=["memory", "local"])
def store(request, tmp_path) -> ProgressStore:
    if request.param == "memory":
        return InMemoryProgressStore()
    return LocalProgressStore(tmp_path / "state" / "reader.json")


def test_position_round_trip(store: ProgressStore) -> None:
    assert store.get_position("book") is None
    store.set_position("book", Position(chapter_index=3, word_offset=120))
    assert store.get_position("book") == Position(chapter_index=3, word_offset=120)
    assert store.get_position("other") is None


def test_delete_position(store: ProgressStore) -> None:
    store.set_position("book", Position(chapter_index=1, word_offset=5))
    store.delete_position("book")
    store.delete_position("never-saved")
    assert store.get_position("book") is None


def test_settings(store: ProgressStore) -> None:
    assert store.get_setting(CHUNK_SIZE_KEY) is None
    assert store.get_setting(AUTO_ADVANCE_KEY, False) is False
    store.set_setting(CHUNK_SIZE_KEY, 40)
    store.set_setting(AUTO_ADVANCE_KEY, True)
    assert store.get_setting(CHUNK_SIZE_KEY) == 40
    assert store.get_setting(AUTO_ADVANCE_KEY) is True


def test_local_store_persists_between_instances(tmp_path) -> None:
    path = tmp_path / "reader.json"
    first = LocalProgressStore(path)
    first.set_position("book", Position(chapter_index=2, word_offset=75))
    first.set_setting(CHUNK_SIZE_KEY, 60)

    second = LocalProgressStore(path)
    assert second.get_position("book") == Position(chapter_index=2, word_offset=75)
    assert second.get_setting(CHUNK_SIZE_KEY) == 60

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["positions"]["book"] == {"chapter_index": 2, "word_offset": 75}
    assert data["settings"] == {CHUNK_SIZE_KEY: 60}


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '{"positions": 7}'])
def test_local_store_ignores_malformed_file(tmp_path, content: str) -> None:
    path = tmp_path / "reader.json"
    path.write_text(content, encoding="utf-8")
    store = LocalProgressStore(path)
    assert store.get_position("book") is None

    store.set_position("book", Position(word_offset=10))
    assert LocalProgressStore(path).get_position("book") == Position(word_offset=10)


def test_local_store_discards_corrupted_position(tmp_path) -> None:
    path = tmp_path / "reader.json"
    path.write_text(
        json.dumps(
            {
                "positions": {
                    "bad": {"chapter_index": "first", "word_offset": None},
                    "good": {"chapter_index": 1, "word_offset": 3},
                },
                "settings": {},
            }
        ),
        encoding="utf-8",
    )
    store = LocalProgressStore(path)
    assert store.get_position("bad") is None
    assert store.get_position("good") == Position(chapter_index=1, word_offset=3)
