"""
Reader package for SwipeReader.

Provides the sliding slide window, book progress translation and the
per-session reading state built on top of them.
"""
