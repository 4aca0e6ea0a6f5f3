"""Shared test fixtures for SwipeReader tests."""

import random
import sys
from collections.abc import Callable

import pytest
from loguru import logger

from swipereader.schemas.reading import ChapterText


def build_sentence_text(
    n_sentences: int, words_per_sentence: int, prefix: str = "w"
) -> str:
    """Text of numbered words where every sentence ends with a period.

    Word ``i`` is spelled ``{prefix}{i}`` so tests can see exactly which word
    a slide starts on.
    """
    words = []
    for i in range(n_sentences * words_per_sentence):
        word = f"{prefix}{i}"
        if (i + 1) % words_per_sentence == 0:
            word += "."
        words.append(word)
    return " ".join(words)


def build_random_text(seed: int, n_words: int = 400) -> str:
    """Irregular prose with mixed punctuation, long run-ons and line breaks."""
    rng = random.Random(seed)
    parts: list[str] = []
    for i in range(n_words):
        word = f"t{i}"
        roll = rng.random()
        if roll < 0.08:
            word += rng.choice([".", "!", "?", "?!", "..."])
        elif roll < 0.1:
            word += ","
        parts.append(word)
        parts.append(rng.choice([" ", " ", " ", "\n", "\n\n", "  "]))
    return "".join(parts)


@pytest.fixture
def make_text() -> Callable[..., str]:
    return build_sentence_text


@pytest.fixture
def random_text() -> Callable[..., str]:
    return build_random_text


@pytest.fixture
def chapter_300() -> ChapterText:
    """A 300-word chapter made of thirty 10-word sentences."""
    return ChapterText.from_text("book-1", 0, build_sentence_text(30, 10))


@pytest.fixture(autouse=True)
def restore_loguru():
    """Keep loguru on its default stderr sink between tests."""
    yield
    logger.remove()
    logger.add(sys.stderr)
