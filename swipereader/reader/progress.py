"""
Whole-book progress translation (reader package).

Progress depends only on chapter word counts, never on the slide size, so
the displayed percentage stays put while the reader resizes slides.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from swipereader.schemas.reading import ChapterText, Position


def get_total_words(chapters: Sequence[ChapterText]) -> int:
    return sum(chapter.word_count for chapter in chapters)


def get_words_before_chapter(chapters: Sequence[ChapterText], chapter_index: int) -> int:
    return sum(chapter.word_count for chapter in chapters[: max(chapter_index, 0)])


def calculate_progress(
    chapters: Sequence[ChapterText], chapter_index: int, word_offset: int
) -> float:
    """Percentage (0-100) of the book read at ``(chapter_index, word_offset)``."""
    total_words = get_total_words(chapters)
    if total_words == 0:
        return 0.0

    position = get_words_before_chapter(chapters, chapter_index) + word_offset
    percent = position / total_words * 100
    return min(max(percent, 0.0), 100.0)


def find_position_from_progress(
    chapters: Sequence[ChapterText], percent: float
) -> Position:
    """Inverse of :func:`calculate_progress`.

    A target that lands exactly on a chapter boundary resolves to the end of
    the earlier chapter. Percentages at or above 100 resolve to the end
    of the last chapter.
    """
    if not chapters:
        return Position(chapter_index=0, word_offset=0)

    total_words = get_total_words(chapters)
    percent = percent if math.isfinite(percent) else 0.0
    percent = min(max(percent, 0.0), 100.0)
    remaining = math.floor(percent / 100 * total_words)

    for index, chapter in enumerate(chapters):
        if remaining <= chapter.word_count:
            return Position(chapter_index=index, word_offset=remaining)
        remaining -= chapter.word_count

    last = len(chapters) - 1
    return Position(chapter_index=last, word_offset=chapters[last].word_count)
