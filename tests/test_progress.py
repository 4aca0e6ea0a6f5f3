"""
Unit tests for whole-book progress translation.
"""

import pytest

from swipereader.reader.progress import (
    calculate_progress,
    find_position_from_progress,
    get_total_words,
    get_words_before_chapter,
)
from swipereader.schemas.reading import ChapterText, Position


def chapters_of(*word_counts: int) -> list[ChapterText]:
    return [
        ChapterText(book_id="book", chapter_index=i, word_count=count)
        for i, count in enumerate(word_counts)
    ]


class TestCalculateProgress:
    def test_counts_earlier_chapters(self):
        assert calculate_progress(chapters_of(100, 100), 1, 50) == 75.0

    def test_start_and_end(self):
        chapters = chapters_of(100, 100)
        assert calculate_progress(chapters, 0, 0) == 0.0
        assert calculate_progress(chapters, 1, 100) == 100.0

    def test_empty_book(self):
        assert calculate_progress([], 0, 0) == 0.0
        assert calculate_progress(chapters_of(0, 0), 1, 0) == 0.0

    def test_result_is_clamped(self):
        chapters = chapters_of(100, 100)
        assert calculate_progress(chapters, 1, 500) == 100.0
        assert calculate_progress(chapters, 0, -20) == 0.0

    def test_totals(self):
        chapters = chapters_of(10, 20, 30)
        assert get_total_words(chapters) == 60
        assert get_words_before_chapter(chapters, 0) == 0
        assert get_words_before_chapter(chapters, 2) == 30


class TestFindPositionFromProgress:
    @pytest.mark.parametrize(
        ("percent", "expected"),
        [
            (0, Position(chapter_index=0, word_offset=0)),
            (25, Position(chapter_index=0, word_offset=50)),
            (50, Position(chapter_index=0, word_offset=100)),
            (75, Position(chapter_index=1, word_offset=50)),
            (100, Position(chapter_index=1, word_offset=100)),
            (150, Position(chapter_index=1, word_offset=100)),
            (-10, Position(chapter_index=0, word_offset=0)),
        ],
    )
    def test_positions(self, percent, expected):
        assert find_position_from_progress(chapters_of(100, 100), percent) == expected

    def test_no_chapters(self):
        assert find_position_from_progress([], 40) == Position()

    def test_boundary_resolves_to_end_of_earlier_chapter(self):
        chapters = chapters_of(0, 50, 0, 50)
        assert find_position_from_progress(chapters, 0) == Position()
        assert find_position_from_progress(chapters, 50) == Position(
            chapter_index=1, word_offset=50
        )

    @pytest.mark.parametrize(
        "percent", [0, 0.5, 7, 14, 33.3, 50, 63, 77.7, 91, 99.9, 100]
    )
    def test_round_trip_within_one_word(self, percent):
        chapters = chapters_of(123, 0, 457, 89)
        position = find_position_from_progress(chapters, percent)
        result = calculate_progress(
            chapters, position.chapter_index, position.word_offset
        )
        assert abs(result - percent) <= 100 / get_total_words(chapters)
