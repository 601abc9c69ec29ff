"""Vocabulary management for the BPE tokenizer."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import regex

from bpe_tokenizer.errors import InvalidFileError, InvalidVocabularyInputError

logger = logging.getLogger(__name__)

# Scores are base-10 signed integers that fit in 64 bits
SCORE_PATTERN = regex.compile(r"[+-]?[0-9]+")
MIN_SCORE = -(2**63)
MAX_SCORE = 2**63 - 1


def _parse_score(text: str) -> int | None:
    if SCORE_PATTERN.fullmatch(text) is None:
        return None
    score = int(text)
    if not MIN_SCORE <= score <= MAX_SCORE:
        return None
    return score


def _split_lines(text: str) -> Iterator[str]:
    """Split on newlines only, dropping a trailing '\\r' and the final empty line."""
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


@dataclass(frozen=True)
class Vocabulary:
    """Read-only mapping from token text to score.

    Higher scores are preferred when several tokens of the same length match.
    A token missing from the vocabulary has no score at all; callers must not
    confuse that with a token stored with a very low score.
    """

    tokens: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the token mapping."""
        object.__setattr__(self, "tokens", MappingProxyType(dict(self.tokens)))
        longest = max((len(token) for token in self.tokens), default=0)
        object.__setattr__(self, "_max_token_length", longest)

    @classmethod
    def from_str(cls, text: str) -> Vocabulary:
        """Parse vocabulary text made of ``<token>\\t<score>`` lines.

        The token is everything before the first tab. Parsing stops at the
        first malformed line and no vocabulary is returned.

        Raises:
            InvalidVocabularyInputError: A line has no tab or its score is
                not a signed integer.
        """
        tokens: dict[str, int] = {}
        for line_number, line in enumerate(_split_lines(text), start=1):
            token, sep, score_text = line.partition("\t")
            if not sep:
                raise InvalidVocabularyInputError(line_number)
            score = _parse_score(score_text)
            if score is None:
                raise InvalidVocabularyInputError(line_number)
            tokens[token] = score
        return cls(tokens)

    @classmethod
    def from_mapping(
        cls,
        tokens: Mapping[str, int] | Iterable[tuple[str, int]],
    ) -> Vocabulary:
        """Create a vocabulary from an already-loaded mapping or pairs."""
        try:
            items = dict(tokens)
        except (TypeError, ValueError) as exc:
            raise InvalidVocabularyInputError() from exc

        for token, score in items.items():
            if not isinstance(token, str):
                raise InvalidVocabularyInputError()
            if isinstance(score, bool) or not isinstance(score, int):
                raise InvalidVocabularyInputError()
        return cls(items)

    @classmethod
    def from_file(cls, path: str | Path) -> Vocabulary:
        """Read and parse a vocabulary file.

        Raises:
            InvalidFileError: The file could not be read.
            InvalidVocabularyInputError: The contents could not be parsed.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidFileError(str(path)) from exc

        vocab = cls.from_str(text)
        logger.debug("Loaded %d tokens from %s", len(vocab), path)
        return vocab

    def score(self, token: str) -> int | None:
        """Get the score for a token, or None if it is not in the vocabulary."""
        return self.tokens.get(token)

    @property
    def max_token_length(self) -> int:
        """Length in characters of the longest token."""
        return self._max_token_length

    def to_str(self) -> str:
        """Serialize to the ``<token>\\t<score>`` line format."""
        return "".join(f"{token}\t{score}\n" for token, score in self.tokens.items())

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    def __len__(self) -> int:
        return len(self.tokens)


def save_vocab(vocab: Vocabulary, path: str | Path) -> None:
    """Save vocabulary to disk in the tab-separated text format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(vocab.to_str())


def load_vocab(path: str | Path) -> Vocabulary:
    """Load vocabulary from disk."""
    return Vocabulary.from_file(path)
