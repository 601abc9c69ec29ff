"""Downloading of pre-trained vocabulary files."""

from bpe_tokenizer.data.bpemb import BPEmbDownloader

__all__ = [
    "BPEmbDownloader",
]
