"""
Text package for SwipeReader.

Provides sentence segmentation and slide chunking. Import from the
submodules directly: ``swipereader.text.segmentation`` and
``swipereader.text.chunker``.
"""
