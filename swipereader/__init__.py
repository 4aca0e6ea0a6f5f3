"""
SwipeReader core.

Turns chapter text into short swipeable slides, keeps a bounded window of
slides around the reading position, translates positions to whole-book
progress, and estimates reading pace for auto-advance.
"""

__version__ = "0.1.0"
