"""
Sentence segmentation and word tokenization (text package).

Sentences end at a run of ``.``, ``!`` or ``?`` followed by whitespace or the
end of the text. This is a punctuation heuristic: abbreviations such as
"Mr." and ellipses still end a sentence. Every non-whitespace character of
the input lands in exactly one sentence.
"""

import re
from collections.abc import Iterator

_SENTENCE_RE = re.compile(r"\S.*?(?:[.!?]+(?=\s|\Z)|\Z)", re.DOTALL)
_WORD_RE = re.compile(r"\S+")


def iter_sentences(text: str) -> Iterator[str]:
    """Yield trimmed sentences in order. Yields nothing for blank text."""
    for match in _SENTENCE_RE.finditer(text or ""):
        sentence = match.group(0).strip()
        if sentence:
            yield sentence


def split_sentences(text: str) -> list[str]:
    return list(iter_sentences(text))


def tokenize_words(text: str) -> list[str]:
    return (text or "").split()


def count_words(text: str) -> int:
    return sum(1 for _ in _WORD_RE.finditer(text or ""))


def word_start_index(text: str, word_offset: int) -> int:
    """Character index where the word at ``word_offset`` starts.

    Offsets at or past the last word map to ``len(text)``; negative offsets
    map to 0.
    """
    if word_offset <= 0:
        return 0
    for index, match in enumerate(_WORD_RE.finditer(text)):
        if index == word_offset:
            return match.start()
    return len(text)
