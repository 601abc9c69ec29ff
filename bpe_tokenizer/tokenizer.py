"""Main tokenizer interface for bpe_tokenizer."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from bpe_tokenizer.constants import (
    SENTENCE_END_TOKEN,
    SENTENCE_START_TOKEN,
    UNKNOWN_TOKEN,
    WORD_BREAK_CHAR,
)
from bpe_tokenizer.default_vocabs import DefaultVocab, load_default_vocab
from bpe_tokenizer.segmentation import split_sentences, split_words
from bpe_tokenizer.vocab import Vocabulary


class BytePairEncoder:
    """Greedy longest-match subword tokenizer over a scored vocabulary.

    Text is split into sentences, sentences into words, and each lower-cased
    word (prefixed with the word break character) is split into vocabulary
    tokens:

    1. Try every substring of the word, from longest to shortest.
    2. At the first length with any match, keep the match with the highest
       score (the leftmost one on a tie).
    3. Split the word around that match and tokenize both sides the same way.
    4. A span with no match at all becomes a single ``<unk>`` token.

    Usage:
        encoder = BytePairEncoder.from_str("▁hello\\t1\\n▁world\\t2")
        tokens = encoder.tokenize("Hello, world!")
        # ['<s>', '▁hello', '▁world', '</s>']
    """

    def __init__(self, vocab: Vocabulary):
        """Initialize the tokenizer.

        Args:
            vocab: Vocabulary to match words against. It is never modified,
                so one encoder may be shared between threads.
        """
        self.vocab = vocab

    @classmethod
    def from_str(cls, text: str) -> BytePairEncoder:
        """Create a tokenizer from ``<token>\\t<score>`` lines."""
        return cls(Vocabulary.from_str(text))

    @classmethod
    def from_file(cls, path: str | Path) -> BytePairEncoder:
        """Create a tokenizer from a vocabulary file."""
        return cls(Vocabulary.from_file(path))

    @classmethod
    def from_mapping(
        cls,
        tokens: Mapping[str, int] | Iterable[tuple[str, int]],
    ) -> BytePairEncoder:
        """Create a tokenizer from an already-loaded token to score mapping."""
        return cls(Vocabulary.from_mapping(tokens))

    @classmethod
    def from_default(
        cls,
        which: DefaultVocab | str = DefaultVocab.MEDIUM,
        vocab_dir: str | Path | None = None,
    ) -> BytePairEncoder:
        """Create a tokenizer from one of the bundled multilingual vocabularies.

        Args:
            which: Vocabulary size to load (small, medium or large)
            vocab_dir: Directory holding the bundled resources. Defaults to
                the ``vocabs`` directory inside the package.

        Raises:
            NoDefaultVocabError: The vocabulary was not bundled.
            DecompressionError: The resource is not valid gzip data.
            DeserializationError: The resource does not hold a token map.
        """
        return cls(load_default_vocab(which, vocab_dir=vocab_dir))

    @classmethod
    def default_small(cls) -> BytePairEncoder:
        """Tokenizer for the bundled 100,000 token vocabulary."""
        return cls.from_default(DefaultVocab.SMALL)

    @classmethod
    def default_medium(cls) -> BytePairEncoder:
        """Tokenizer for the bundled 320,000 token vocabulary."""
        return cls.from_default(DefaultVocab.MEDIUM)

    @classmethod
    def default_large(cls) -> BytePairEncoder:
        """Tokenizer for the bundled 1,000,000 token vocabulary."""
        return cls.from_default(DefaultVocab.LARGE)

    def tokenize_sentences_iter(self, text: str) -> Iterator[Iterator[str]]:
        """Lazily tokenize text, one token iterator per sentence.

        Empty text yields no sentences at all.
        """
        return (self.tokenize_sentence_iter(s) for s in split_sentences(text))

    def tokenize_iter(self, text: str) -> Iterator[str]:
        """Lazily tokenize text into a flat stream of tokens."""
        return itertools.chain.from_iterable(self.tokenize_sentences_iter(text))

    def tokenize_sentences(self, text: str) -> list[list[str]]:
        """Tokenize text into a list of tokenized sentences.

        Args:
            text: Text string to tokenize

        Returns:
            One token list per sentence, each wrapped in ``<s>`` and ``</s>``
        """
        return [list(sentence) for sentence in self.tokenize_sentences_iter(text)]

    def tokenize(self, text: str) -> list[str]:
        """Tokenize text into a flat list of tokens.

        Args:
            text: Text string to tokenize

        Returns:
            Tokens of every sentence, concatenated in order
        """
        return list(self.tokenize_iter(text))

    def tokenize_batch(
        self,
        texts: list[str],
        num_workers: int | None = None,
    ) -> list[list[str]]:
        """Batch tokenize multiple texts with optional parallelization.

        Args:
            texts: List of text strings to tokenize
            num_workers: Number of parallel workers (None for sequential)

        Returns:
            List of token lists, in the order of ``texts``
        """
        if num_workers is None or num_workers <= 1 or len(texts) < 10:
            return [self.tokenize(t) for t in texts]

        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            results = list(executor.map(self.tokenize, texts))

        return results

    def tokenize_sentence_iter(self, sentence: str) -> Iterator[str]:
        """Tokenize a single sentence, adding sentence start and end markers.

        Each word is lower-cased and prefixed with the word break character
        before it is matched against the vocabulary.
        """
        yield SENTENCE_START_TOKEN
        for word in split_words(sentence):
            yield from self.tokenize_word(WORD_BREAK_CHAR + word.lower())
        yield SENTENCE_END_TOKEN

    def tokenize_word(self, word: str) -> list[str]:
        """Split one word into vocabulary tokens.

        The word is used as given: no lower-casing and no word break prefix
        is added.

        Args:
            word: A single word

        Returns:
            Tokens for the word; an empty list for an empty word
        """
        tokens: list[str] = []

        # Pending work in reverse order: (start, end) spans still to split,
        # or tokens already matched.
        stack: list[tuple[int, int] | str] = [(0, len(word))]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                tokens.append(item)
                continue

            start, end = item
            if start == end:
                continue

            match = self._find_best_match(word, start, end)
            if match is None:
                tokens.append(UNKNOWN_TOKEN)
                continue

            match_start, match_end = match
            stack.append((match_end, end))
            stack.append(word[match_start:match_end])
            stack.append((start, match_start))

        return tokens

    def _find_best_match(
        self,
        word: str,
        start: int,
        end: int,
    ) -> tuple[int, int] | None:
        """Find the longest, then highest scoring, token inside word[start:end]."""
        scores = self.vocab.tokens
        longest = min(end - start, self.vocab.max_token_length)

        for length in range(longest, 0, -1):
            best_start = -1
            best_score = 0
            for offset in range(start, end - length + 1):
                score = scores.get(word[offset:offset + length])
                if score is None:
                    continue
                if best_start < 0 or score > best_score:
                    best_start = offset
                    best_score = score

            if best_start >= 0:
                return best_start, best_start + length

        return None

    @property
    def vocab_size(self) -> int:
        """Number of tokens in the vocabulary."""
        return len(self.vocab)

    def get_vocab(self) -> dict[str, int]:
        """Get a copy of the vocabulary as a dict mapping tokens to scores."""
        return dict(self.vocab.tokens)

    def __len__(self) -> int:
        """Return vocabulary size."""
        return self.vocab_size

    def __repr__(self) -> str:
        """String representation."""
        return f"BytePairEncoder(vocab_size={self.vocab_size})"
