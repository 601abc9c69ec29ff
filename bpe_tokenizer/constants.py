"""Marker tokens inserted by the tokenizer."""

# Prepended to every word before lookup; vocabularies store word-initial
# subwords with this prefix (e.g. "▁the").
WORD_BREAK_CHAR = "▁"

SENTENCE_START_TOKEN = "<s>"
SENTENCE_END_TOKEN = "</s>"
UNKNOWN_TOKEN = "<unk>"
