"""
Pydantic models for chapters, slide configuration, positions and windows.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from swipereader.configs.config import config
from swipereader.text.segmentation import count_words


class ChunkConfig(BaseModel):
    """Slide size configuration. ``max_words`` is a hard per-slide cap."""

    model_config = ConfigDict(frozen=True)

    max_words: int = Field(
        default_factory=lambda: config.default_max_words,
        gt=0,
        description="Maximum number of words on a single slide",
    )

    @classmethod
    def from_setting(cls, value: Any) -> ChunkConfig:
        """Build a config from a user-facing slide size setting.

        The setting must be an integer inside the configured slider range.
        Raises ``ValueError`` (or ``pydantic.ValidationError``) otherwise.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Slide size must be an integer, got {value!r}")
        low, high = config.slide_words_range
        if not low <= value <= high:
            raise ValueError(
                f"Slide size {value} outside allowed range {low}-{high} words"
            )
        return cls(max_words=value)


class WindowConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    prev_count: int = Field(
        default_factory=lambda: config.window_prev_count,
        ge=0,
        description="Slides kept before the current slide",
    )
    next_count: int = Field(
        default_factory=lambda: config.window_next_count,
        ge=0,
        description="Slides kept after the current slide",
    )

    @property
    def size(self) -> int:
        return self.prev_count + self.next_count + 1


class ShiftThresholds(BaseModel):
    model_config = ConfigDict(frozen=True)

    forward: int = Field(default_factory=lambda: config.shift_forward_threshold)
    backward: int = Field(default_factory=lambda: config.shift_backward_threshold)


class ChapterText(BaseModel):
    """A chapter as supplied by the parsing/storage layer. Read-only."""

    model_config = ConfigDict(frozen=True)

    book_id: str
    chapter_index: int = Field(ge=0)
    title: str = ""
    text: str = ""
    word_count: int = Field(default=0, ge=0)

    @classmethod
    def from_text(
        cls, book_id: str, chapter_index: int, text: str, title: str = ""
    ) -> ChapterText:
        return cls(
            book_id=book_id,
            chapter_index=chapter_index,
            title=title,
            text=text,
            word_count=count_words(text),
        )


class Position(BaseModel):
    """Durable resume point, independent of the slide size."""

    model_config = ConfigDict(frozen=True)

    chapter_index: int = 0
    word_offset: int = 0


class Slide(BaseModel):
    text: str
    word_count: int


class SlideWindow(BaseModel):
    """A bounded run of slides around the reading position."""

    slides: list[str] = Field(default_factory=list)
    current_index: int = 0
    start_word_offset: int = 0
    end_word_offset: int = 0
    chapter_index: int = 0
    slide_word_counts: list[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_offsets(self) -> SlideWindow:
        if len(self.slides) != len(self.slide_word_counts):
            raise ValueError("slides and slide_word_counts differ in length")
        if sum(self.slide_word_counts) != self.end_word_offset - self.start_word_offset:
            raise ValueError("slide word counts do not cover the window offsets")
        if self.slides:
            if not 0 <= self.current_index < len(self.slides):
                raise ValueError(f"current_index {self.current_index} out of range")
        elif self.current_index != 0:
            raise ValueError("empty window must have current_index 0")
        return self

    @property
    def is_empty(self) -> bool:
        return not self.slides

    @property
    def current_slide(self) -> str | None:
        if not self.slides:
            return None
        return self.slides[self.current_index]
