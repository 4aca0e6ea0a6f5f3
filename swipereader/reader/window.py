"""
Sliding window of slides around a reading position (reader package).

Only a handful of slides around the current word offset are materialized,
so navigating or changing the slide size never re-chunks a whole book.
The text is cut at the target word: the part before it supplies the
previous slides and the part after it supplies the current and next ones,
so the current slide always starts exactly at the target offset.
"""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Literal

from loguru import logger

from swipereader.schemas.reading import (
    ChapterText,
    ChunkConfig,
    ShiftThresholds,
    SlideWindow,
    WindowConfig,
)
from swipereader.text.chunker import SlideChunker
from swipereader.text.segmentation import count_words, word_start_index

ShiftDirection = Literal["forward", "backward"]


class SlidingWindowHelper:
    """Computes and queries slide windows for one chapter at a time."""

    def compute_window(
        self,
        chapter: ChapterText,
        target_word_offset: int,
        chunk_config: ChunkConfig,
        window_config: WindowConfig | None = None,
    ) -> SlideWindow:
        window_config = window_config or WindowConfig()
        text = chapter.text or ""
        if not text.strip():
            return SlideWindow(chapter_index=chapter.chapter_index)

        total_words = count_words(text)
        offset = min(max(target_word_offset, 0), total_words)
        if offset != target_word_offset:
            logger.warning(
                f"Clamped word offset {target_word_offset} to {offset} "
                f"for chapter {chapter.chapter_index} ({total_words} words)"
            )

        cut = word_start_index(text, offset)
        chunker = SlideChunker(chunk_config)

        prev: list[str] = []
        if window_config.prev_count > 0 and offset > 0:
            prev = list(
                deque(chunker.iter_slides(text[:cut]), maxlen=window_config.prev_count)
            )
        current_and_next = list(
            islice(chunker.iter_slides(text[cut:]), window_config.next_count + 1)
        )

        slides = prev + current_and_next
        current_index = min(len(prev), max(len(slides) - 1, 0))
        slide_word_counts = [len(slide.split()) for slide in slides]
        start_word_offset = offset - sum(slide_word_counts[: len(prev)])
        end_word_offset = start_word_offset + sum(slide_word_counts)

        logger.debug(
            f"Window for chapter {chapter.chapter_index} at offset {offset}: "
            f"{len(slides)} slides, words {start_word_offset}-{end_word_offset}"
        )
        return SlideWindow(
            slides=slides,
            current_index=current_index,
            start_word_offset=start_word_offset,
            end_word_offset=end_word_offset,
            chapter_index=chapter.chapter_index,
            slide_word_counts=slide_word_counts,
        )

    def is_within_window(self, window: SlideWindow, word_offset: int) -> bool:
        return window.start_word_offset <= word_offset < window.end_word_offset

    def find_slide_index_at_offset(self, window: SlideWindow, word_offset: int) -> int:
        """Index of the slide covering ``word_offset``, clamped to the window."""
        if not window.slides or word_offset < window.start_word_offset:
            return 0

        slide_start = window.start_word_offset
        for index, count in enumerate(window.slide_word_counts):
            if slide_start <= word_offset < slide_start + count:
                return index
            slide_start += count

        return len(window.slides) - 1

    def get_offset_at_slide_index(self, window: SlideWindow, slide_index: int) -> int:
        """Absolute word offset where the slide at ``slide_index`` begins."""
        if slide_index <= 0:
            return window.start_word_offset
        return window.start_word_offset + sum(window.slide_word_counts[:slide_index])

    def needs_shifting(
        self, window: SlideWindow, thresholds: ShiftThresholds | None = None
    ) -> ShiftDirection | None:
        thresholds = thresholds or ShiftThresholds()
        if window.current_index >= thresholds.forward:
            return "forward"
        if window.current_index <= thresholds.backward:
            return "backward"
        return None
