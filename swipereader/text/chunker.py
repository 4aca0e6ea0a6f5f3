"""
Slide chunking (text package).

Builds slides of two sentences each, capped at ``ChunkConfig.max_words``.
When the cap cuts a slide short, the words left over are carried into the
next slide and count as that slide's first sentence. Output is lossless:
joining all slides with spaces gives the same word sequence as the input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from swipereader.schemas.reading import ChunkConfig, Slide
from swipereader.text.segmentation import iter_sentences, tokenize_words

TARGET_SENTENCES_PER_SLIDE = 2


class SlideChunker:
    def __init__(self, config: ChunkConfig | None = None) -> None:
        self.config = config or ChunkConfig()

    @property
    def max_words(self) -> int:
        return self.config.max_words

    def iter_slides(self, text: str) -> Iterator[str]:
        """Lazily yield slide texts for ``text``.

        Callers that only need the first few slides can stop early without
        paying for the rest of the text.
        """
        return _chunk_with_carryover(iter_sentences(text), self.max_words)

    def chunk_text(self, text: str) -> list[str]:
        if not text or not text.strip():
            return []
        return list(self.iter_slides(text))

    def chunk_slides(self, text: str) -> list[Slide]:
        return [
            Slide(text=slide, word_count=len(slide.split()))
            for slide in self.chunk_text(text)
        ]


def _chunk_with_carryover(sentences: Iterable[str], max_words: int) -> Iterator[str]:
    remaining = iter(sentences)
    carryover: list[str] = []
    exhausted = False

    while not exhausted or carryover:
        buffer = list(carryover)
        sentences_added = 1 if carryover else 0

        while sentences_added < TARGET_SENTENCES_PER_SLIDE and not exhausted:
            sentence = next(remaining, None)
            if sentence is None:
                exhausted = True
                break
            buffer.extend(tokenize_words(sentence))
            sentences_added += 1

        if not buffer:
            break

        if len(buffer) > max_words:
            yield " ".join(buffer[:max_words])
            carryover = buffer[max_words:]
        else:
            yield " ".join(buffer)
            carryover = []


def chunk_text(text: str, config: ChunkConfig | None = None) -> list[str]:
    """Split ``text`` into slide texts under ``config``."""
    return SlideChunker(config).chunk_text(text)
