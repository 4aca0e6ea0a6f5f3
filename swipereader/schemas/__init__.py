"""
Pydantic models shared by the chunker, window positioner and reading session.
"""

from .reading import (
    ChapterText,
    ChunkConfig,
    Position,
    ShiftThresholds,
    Slide,
    SlideWindow,
    WindowConfig,
)

__all__ = [
    "ChapterText",
    "ChunkConfig",
    "Position",
    "ShiftThresholds",
    "Slide",
    "SlideWindow",
    "WindowConfig",
]
