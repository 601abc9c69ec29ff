"""Bundled multilingual vocabularies.

The default vocabularies come from the BPEmb project (MIT licensed) and cover
275 languages. They are not shipped in the source tree; maintainers build
them with ``scripts/build_default_vocabs.py``, which stores each token to
score map as a gzip-compressed JSON object under ``bpe_tokenizer/vocabs``.
"""

from __future__ import annotations

import gzip
import json
import logging
import zlib
from enum import Enum
from pathlib import Path

from bpe_tokenizer.errors import (
    DecompressionError,
    DeserializationError,
    InvalidVocabularyInputError,
    NoDefaultVocabError,
)
from bpe_tokenizer.vocab import Vocabulary

logger = logging.getLogger(__name__)

DEFAULT_VOCAB_DIR = Path(__file__).parent / "vocabs"
RESOURCE_SUFFIX = ".json.gz"


class DefaultVocab(str, Enum):
    """Available default vocabulary sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def source_name(self) -> str:
        """File name of the BPEmb vocabulary this resource is built from."""
        return f"multi.wiki.bpe.vs{self.num_tokens}.vocab"

    @property
    def num_tokens(self) -> int:
        return _NUM_TOKENS[self]

    @property
    def resource_name(self) -> str:
        return self.source_name + RESOURCE_SUFFIX


_NUM_TOKENS = {
    DefaultVocab.SMALL: 100_000,
    DefaultVocab.MEDIUM: 320_000,
    DefaultVocab.LARGE: 1_000_000,
}


def default_vocab_path(
    which: DefaultVocab | str,
    vocab_dir: str | Path | None = None,
) -> Path:
    """Path of the bundled resource for a default vocabulary."""
    which = DefaultVocab(which)
    vocab_dir = Path(vocab_dir) if vocab_dir is not None else DEFAULT_VOCAB_DIR
    return vocab_dir / which.resource_name


def load_default_vocab(
    which: DefaultVocab | str,
    vocab_dir: str | Path | None = None,
) -> Vocabulary:
    """Decompress and deserialize a bundled vocabulary.

    Args:
        which: Vocabulary size to load
        vocab_dir: Directory holding the bundled resources

    Returns:
        The decoded vocabulary

    Raises:
        NoDefaultVocabError: The resource is not part of this install.
        DecompressionError: The resource is not valid gzip data.
        DeserializationError: The payload is not a JSON object of integer
            scores keyed by token.
    """
    which = DefaultVocab(which)
    path = default_vocab_path(which, vocab_dir)
    if not path.is_file():
        raise NoDefaultVocabError(which.value)

    try:
        with gzip.open(path, "rb") as f:
            payload = f.read()
    except (OSError, EOFError, zlib.error) as exc:
        raise DecompressionError(str(exc)) from exc

    try:
        data = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DeserializationError(str(exc)) from exc

    if not isinstance(data, dict):
        raise DeserializationError(f"expected a JSON object, got {type(data).__name__}")

    try:
        vocab = Vocabulary.from_mapping(data)
    except InvalidVocabularyInputError as exc:
        raise DeserializationError("token scores must be integers") from exc

    logger.debug("Loaded %s default vocabulary with %d tokens", which.value, len(vocab))
    return vocab


def save_default_vocab(vocab: Vocabulary, path: str | Path) -> None:
    """Write a vocabulary in the bundled resource format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = json.dumps(dict(vocab.tokens), ensure_ascii=False).encode("utf-8")
    with gzip.open(path, "wb") as f:
        f.write(payload)
