"""
Per-session reading state (reader package).

A ``ReadingSession`` is created when a reader opens a book and discarded
when they leave it. It owns the slide window, the chunk configuration and
the pace estimator for that session, and writes the position back to the
progress store after every navigation step. Nothing here is shared between
sessions.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from swipereader.pacing.estimator import ReadingTimeEstimator
from swipereader.reader.progress import calculate_progress, find_position_from_progress
from swipereader.reader.window import SlidingWindowHelper
from swipereader.schemas.reading import (
    ChapterText,
    ChunkConfig,
    Position,
    ShiftThresholds,
    SlideWindow,
    WindowConfig,
)
from swipereader.storage.base import CHUNK_SIZE_KEY, ProgressStore
from swipereader.text.segmentation import count_words


class ReadingSession:
    """Navigation state for one reader on one book.

    ``chapters`` must be in reading order; ``Position.chapter_index`` indexes
    into that sequence.
    """

    def __init__(
        self,
        book_id: str,
        chapters: Sequence[ChapterText],
        store: ProgressStore,
        chunk_config: ChunkConfig | None = None,
        window_config: WindowConfig | None = None,
        shift_thresholds: ShiftThresholds | None = None,
        estimator: ReadingTimeEstimator | None = None,
    ) -> None:
        if not chapters:
            raise ValueError(f"No chapters found for book {book_id}")

        self.book_id = book_id
        self.chapters = list(chapters)
        self.store = store
        self.window_config = window_config or WindowConfig()
        self.shift_thresholds = shift_thresholds or ShiftThresholds()
        self.estimator = estimator or ReadingTimeEstimator()
        self.window_helper = SlidingWindowHelper()
        self.chunk_config = chunk_config or self._load_chunk_config()
        self._chapter_words: dict[int, int] = {}
        self._word_offset = 0

        saved = store.get_position(book_id) or Position()
        chapter_index = min(max(saved.chapter_index, 0), len(self.chapters) - 1)
        if chapter_index != saved.chapter_index:
            logger.warning(
                f"Saved chapter {saved.chapter_index} for book {book_id} is out of "
                f"range, resuming at chapter {chapter_index}"
            )
        self.window = self._recompute(chapter_index, saved.word_offset)

    def _load_chunk_config(self) -> ChunkConfig:
        saved = self.store.get_setting(CHUNK_SIZE_KEY)
        if saved is None:
            return ChunkConfig()
        try:
            return ChunkConfig.from_setting(saved)
        except ValueError as e:
            logger.warning(f"Ignoring invalid saved slide size {saved!r}: {e}")
            return ChunkConfig()

    def _words_in_chapter(self, chapter_index: int) -> int:
        if chapter_index not in self._chapter_words:
            self._chapter_words[chapter_index] = count_words(
                self.chapters[chapter_index].text
            )
        return self._chapter_words[chapter_index]

    def _recompute(
        self,
        chapter_index: int,
        word_offset: int,
        window_config: WindowConfig | None = None,
    ) -> SlideWindow:
        window = self.window_helper.compute_window(
            self.chapters[chapter_index],
            word_offset,
            self.chunk_config,
            window_config or self.window_config,
        )
        # Windows are keyed by position in the reading order
        window = window.model_copy(update={"chapter_index": chapter_index})
        self._word_offset = self.window_helper.get_offset_at_slide_index(
            window, window.current_index
        )
        return window

    def _select(self, slide_index: int) -> None:
        self.window = self.window.model_copy(update={"current_index": slide_index})
        self._word_offset = self.window_helper.get_offset_at_slide_index(
            self.window, slide_index
        )

    def _save_position(self) -> None:
        self.store.set_position(self.book_id, self.position)

    @property
    def chapter_index(self) -> int:
        return self.window.chapter_index

    @property
    def chapter(self) -> ChapterText:
        return self.chapters[self.chapter_index]

    @property
    def current_slide(self) -> str | None:
        return self.window.current_slide

    @property
    def position(self) -> Position:
        return Position(chapter_index=self.chapter_index, word_offset=self._word_offset)

    @property
    def progress_percent(self) -> float:
        return calculate_progress(self.chapters, self.chapter_index, self._word_offset)

    def next_slide(self, dwell_seconds: float | None = None) -> bool:
        """Advance one slide, entering the next chapter at its start.

        ``dwell_seconds`` is the time spent on the slide being left and feeds
        the pace estimator. Returns False at the end of the book.
        """
        window = self.window
        chapter_words = self._words_in_chapter(self.chapter_index)
        if window.slides and window.current_index < len(window.slides) - 1:
            self._select(window.current_index + 1)
            shift = self.window_helper.needs_shifting(self.window, self.shift_thresholds)
            if shift == "forward" and self.window.end_word_offset < chapter_words:
                self.window = self._recompute(self.chapter_index, self._word_offset)
        elif window.end_word_offset < chapter_words:
            self.window = self._recompute(self.chapter_index, window.end_word_offset)
        elif self.chapter_index < len(self.chapters) - 1:
            logger.debug(f"Entering chapter {self.chapter_index + 1} of {self.book_id}")
            self.window = self._recompute(self.chapter_index + 1, 0)
        else:
            return False

        if dwell_seconds is not None:
            self.estimator.add_observation(dwell_seconds)
        self._save_position()
        return True

    def previous_slide(self) -> bool:
        """Go back one slide, entering the previous chapter at its last slide.

        Returns False at the start of the book.
        """
        window = self.window
        if window.current_index > 0:
            self._select(window.current_index - 1)
            shift = self.window_helper.needs_shifting(self.window, self.shift_thresholds)
            if shift == "backward" and self.window.start_word_offset > 0:
                self.window = self._recompute(self.chapter_index, self._word_offset)
        elif window.start_word_offset > 0:
            # Needs at least one slide before the current one to step back to
            window_config = self.window_config.model_copy(
                update={"prev_count": max(self.window_config.prev_count, 1)}
            )
            self.window = self._recompute(
                self.chapter_index, self._word_offset, window_config
            )
            self._select(max(self.window.current_index - 1, 0))
        elif self.chapter_index > 0:
            previous = self.chapter_index - 1
            logger.debug(f"Entering chapter {previous} of {self.book_id} at its end")
            self.window = self._recompute(previous, self._words_in_chapter(previous))
        else:
            return False

        self._save_position()
        return True

    def set_chunk_config(self, max_words: int) -> ChunkConfig:
        """Change the slide size, keeping the reader on the same word.

        Raises ``ValueError`` for a size outside the allowed setting range.
        """
        chunk_config = ChunkConfig.from_setting(max_words)
        self.store.set_setting(CHUNK_SIZE_KEY, chunk_config.max_words)
        self.chunk_config = chunk_config
        self.window = self._recompute(self.chapter_index, self._word_offset)
        self._save_position()
        return chunk_config

    def seek_progress(self, percent: float) -> Position:
        target = find_position_from_progress(self.chapters, percent)
        self.window = self._recompute(target.chapter_index, target.word_offset)
        self._save_position()
        return self.position

    def jump_to_chapter(self, chapter_index: int) -> Position:
        chapter_index = min(max(chapter_index, 0), len(self.chapters) - 1)
        self.window = self._recompute(chapter_index, 0)
        self._save_position()
        return self.position

    def autoplay_duration(self) -> float | None:
        """Seconds before auto-advancing, or None until timing data is trusted."""
        if not self.estimator.should_enable_autoplay():
            return None
        return self.estimator.predict()

    def close(self) -> None:
        self._save_position()
        self.estimator.reset()
