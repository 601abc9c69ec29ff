"""Shared helpers for scripts and loaders."""

from bpe_tokenizer.utils.progress import byte_progress, item_progress, setup_logging

__all__ = [
    "byte_progress",
    "item_progress",
    "setup_logging",
]
