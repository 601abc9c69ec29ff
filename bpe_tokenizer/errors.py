"""Exceptions raised while building a vocabulary."""

from __future__ import annotations


class BytePairEncoderError(Exception):
    """Base class for all tokenizer errors."""


class InvalidFileError(BytePairEncoderError):
    """The vocabulary file could not be read."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Error reading file: {path}")


class InvalidVocabularyInputError(BytePairEncoderError):
    """The vocabulary text or mapping could not be parsed."""

    def __init__(self, line_number: int | None = None):
        self.line_number = line_number
        message = "Invalid vocabulary input: could not parse vocabulary"
        if line_number is not None:
            message += f" (line {line_number})"
        super().__init__(message)


class DecompressionError(BytePairEncoderError):
    """A bundled vocabulary resource could not be decompressed."""

    def __init__(self, message: str):
        super().__init__(f"Error decompressing vocabulary data: {message}")


class DeserializationError(BytePairEncoderError):
    """A bundled vocabulary resource could not be deserialized."""

    def __init__(self, message: str):
        super().__init__(f"Error deserializing vocabulary data: {message}")


class NoDefaultVocabError(BytePairEncoderError):
    """The requested default vocabulary is not bundled with this install."""

    def __init__(self, which: str):
        self.which = which
        super().__init__(
            f"Default vocabulary '{which}' is not available. "
            "Build it with: python scripts/build_default_vocabs.py"
        )
