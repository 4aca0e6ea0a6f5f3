"""
Online reading time estimator (pacing package).

Keeps an exponential moving average of how long the reader spends on each
slide and predicts how long to wait before auto-advancing. Constant time
and space per observation; state lives for one reading session.
"""

from __future__ import annotations

import math

from loguru import logger

from swipereader.configs.config import config


class ReadingTimeEstimator:
    def __init__(
        self,
        alpha: float | None = None,
        min_observations: int | None = None,
        min_seconds: float | None = None,
        buffer_seconds: float | None = None,
    ) -> None:
        self.alpha = config.pace_alpha if alpha is None else alpha
        if not 0 < self.alpha <= 1:
            raise ValueError(f"alpha must be in (0, 1], got {self.alpha}")
        self.min_observations = (
            config.pace_min_observations
            if min_observations is None
            else min_observations
        )
        self.min_seconds = config.pace_min_seconds if min_seconds is None else min_seconds
        self.buffer_seconds = (
            config.pace_buffer_seconds if buffer_seconds is None else buffer_seconds
        )
        self._n = 0
        self._ema = 0.0

    @property
    def observation_count(self) -> int:
        return self._n

    @property
    def current_ema(self) -> float:
        return self._ema

    def add_observation(self, seconds: float) -> None:
        """Record the time spent on one slide, floored at ``min_seconds``."""
        if not math.isfinite(seconds):
            logger.warning(f"Ignoring non-finite reading time: {seconds}")
            return

        value = max(seconds, self.min_seconds)
        if self._n == 0:
            self._ema = value
        else:
            self._ema = self.alpha * value + (1 - self.alpha) * self._ema
        self._n += 1

    def predict(self) -> float:
        """Seconds to wait on the next slide, including the safety buffer."""
        if self._n == 0:
            return self.min_seconds + self.buffer_seconds
        return max(self.min_seconds, self._ema + self.buffer_seconds)

    def should_enable_autoplay(self) -> bool:
        return self._n >= self.min_observations

    def reset(self) -> None:
        self._n = 0
        self._ema = 0.0
