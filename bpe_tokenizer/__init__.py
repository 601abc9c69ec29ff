"""
bpe_tokenizer - greedy longest-match BPE tokenization over a scored vocabulary.

Usage:
    from bpe_tokenizer import BytePairEncoder

    encoder = BytePairEncoder.from_str("hello\\t1\\nworld\\t2\\n▁\\t3")
    tokens = encoder.tokenize("Hello, world!")
    # ['<s>', '▁', 'hello', '▁', 'world', '</s>']
"""

from bpe_tokenizer.default_vocabs import DefaultVocab, load_default_vocab
from bpe_tokenizer.errors import (
    BytePairEncoderError,
    DecompressionError,
    DeserializationError,
    InvalidFileError,
    InvalidVocabularyInputError,
    NoDefaultVocabError,
)
from bpe_tokenizer.tokenizer import BytePairEncoder
from bpe_tokenizer.vocab import Vocabulary, load_vocab, save_vocab

__version__ = "0.1.0"
__all__ = [
    "BytePairEncoder",
    "BytePairEncoderError",
    "DecompressionError",
    "DefaultVocab",
    "DeserializationError",
    "InvalidFileError",
    "InvalidVocabularyInputError",
    "NoDefaultVocabError",
    "Vocabulary",
    "load_default_vocab",
    "load_vocab",
    "save_vocab",
]
