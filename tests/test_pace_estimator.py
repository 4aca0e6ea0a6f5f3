"""
Unit tests for the reading time estimator.
"""

import math

import pytest

from swipereader.pacing.estimator import ReadingTimeEstimator


@pytest.fixture
def estimator():
    return ReadingTimeEstimator(
        alpha=0.3, min_observations=5, min_seconds=5, buffer_seconds=2
    )


class TestReadingTimeEstimator:
    def test_first_observation_sets_average(self, estimator):
        estimator.add_observation(10)
        assert estimator.current_ema == 10
        assert estimator.predict() == 12

    def test_moving_average_update(self, estimator):
        estimator.add_observation(10)
        estimator.add_observation(20)
        assert estimator.current_ema == pytest.approx(13.0)
        assert estimator.observation_count == 2

    def test_prediction_without_data(self, estimator):
        assert estimator.predict() == 7

    def test_short_observations_are_floored(self, estimator):
        estimator.add_observation(0.4)
        assert estimator.current_ema == 5
        assert estimator.predict() == 7

    def test_autoplay_needs_enough_observations(self, estimator):
        for _ in range(4):
            estimator.add_observation(8)
        assert not estimator.should_enable_autoplay()
        estimator.add_observation(8)
        assert estimator.should_enable_autoplay()

    def test_reset(self, estimator):
        for _ in range(6):
            estimator.add_observation(30)
        estimator.reset()
        assert estimator.observation_count == 0
        assert estimator.current_ema == 0
        assert not estimator.should_enable_autoplay()
        assert estimator.predict() == 7

    def test_slower_reading_raises_prediction(self, estimator):
        for _ in range(5):
            estimator.add_observation(10)
        before = estimator.predict()
        for _ in range(10):
            estimator.add_observation(20)
        assert estimator.predict() > before

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_observations_are_ignored(self, estimator, value):
        estimator.add_observation(value)
        assert estimator.observation_count == 0

    @pytest.mark.parametrize("alpha", [0, -0.1, 1.5])
    def test_invalid_alpha(self, alpha):
        with pytest.raises(ValueError):
            ReadingTimeEstimator(alpha=alpha)
