"""
Configuration module for SwipeReader (configs).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Config:
    def __init__(self) -> None:
        # Logging / runtime
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("LOG_FILE")
        self.log_dir = os.getenv("LOG_DIR", "logs")

        # Slide size setting
        self.default_max_words = int(os.getenv("DEFAULT_MAX_WORDS", "50"))
        self.min_slide_words = int(os.getenv("MIN_SLIDE_WORDS", "20"))
        self.max_slide_words = int(os.getenv("MAX_SLIDE_WORDS", "100"))
        self.slide_words_step = int(os.getenv("SLIDE_WORDS_STEP", "10"))

        # Sliding window
        self.window_prev_count = int(os.getenv("WINDOW_PREV_COUNT", "5"))
        self.window_next_count = int(os.getenv("WINDOW_NEXT_COUNT", "5"))
        self.shift_forward_threshold = int(os.getenv("SHIFT_FORWARD_THRESHOLD", "8"))
        self.shift_backward_threshold = int(
            os.getenv("SHIFT_BACKWARD_THRESHOLD", "2")
        )

        # Reading pace
        self.pace_alpha = float(os.getenv("PACE_ALPHA", "0.3"))
        self.pace_min_observations = int(os.getenv("PACE_MIN_OBSERVATIONS", "5"))
        self.pace_min_seconds = float(os.getenv("PACE_MIN_SECONDS", "5"))
        self.pace_buffer_seconds = float(os.getenv("PACE_BUFFER_SECONDS", "2"))

        self._progress_store_path: Path | None = None

    @property
    def progress_store_path(self) -> Path:
        if self._progress_store_path is None:
            self._progress_store_path = Path(
                os.getenv("PROGRESS_STORE_PATH", "reader_state.json")
            ).expanduser()
        return self._progress_store_path

    @property
    def slide_words_range(self) -> tuple[int, int]:
        """Inclusive bounds accepted for the user's slide size setting."""
        return self.min_slide_words, self.max_slide_words


config = Config()
