"""
Pacing package for SwipeReader.

Provides the online reading time estimator used for auto-advance.
"""

from .estimator import ReadingTimeEstimator

__all__ = ["ReadingTimeEstimator"]
