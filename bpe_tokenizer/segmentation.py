"""Unicode sentence and word segmentation.

Boundaries follow Unicode Standard Annex #29 as implemented by ``uniseg``.
Only segments that contain at least one alphabetic or numeric character are
kept, so whitespace and punctuation never reach the tokenizer.
"""

from __future__ import annotations

from collections.abc import Iterator

import regex
from uniseg.sentencebreak import sentences
from uniseg.wordbreak import words

ALPHANUMERIC_PATTERN = regex.compile(r"[\p{Alphabetic}\p{N}]")


def has_alphanumeric(segment: str) -> bool:
    """Check whether a segment contains a letter or a number."""
    return ALPHANUMERIC_PATTERN.search(segment) is not None


def split_sentences(text: str) -> Iterator[str]:
    """Yield the sentences of ``text`` in order."""
    if not text:
        return
    for sentence in sentences(text):
        if has_alphanumeric(sentence):
            yield sentence


def split_words(sentence: str) -> Iterator[str]:
    """Yield the words of ``sentence`` in order."""
    if not sentence:
        return
    for word in words(sentence):
        if has_alphanumeric(word):
            yield word
