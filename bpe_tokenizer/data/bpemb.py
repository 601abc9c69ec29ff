"""Downloader for the BPEmb multilingual vocabulary files."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from bpe_tokenizer.default_vocabs import DefaultVocab
from bpe_tokenizer.utils.progress import byte_progress

logger = logging.getLogger(__name__)

BPEMB_BASE_URL = "https://bpemb.h-its.org/multi"


class BPEmbDownloader:
    """Download BPEmb ``.vocab`` files (one ``<token>\\t<score>`` pair per line)."""

    def __init__(self, output_dir: str | Path = "vocab"):
        """Initialize downloader.

        Args:
            output_dir: Directory to save downloaded files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def url_for(which: DefaultVocab | str) -> str:
        """URL of the BPEmb vocabulary matching a default vocabulary size."""
        return f"{BPEMB_BASE_URL}/{DefaultVocab(which).source_name}"

    def download(
        self,
        which: DefaultVocab | str,
        show_progress: bool = True,
        timeout: float = 60.0,
    ) -> Path:
        """Download one vocabulary file.

        Args:
            which: Vocabulary size to download
            show_progress: Whether to show progress bar
            timeout: Seconds to wait for the server

        Returns:
            Path to downloaded file
        """
        url = self.url_for(which)
        output_path = self.output_dir / url.split("/")[-1]

        if output_path.exists():
            logger.info("File already exists: %s", output_path)
            return output_path

        logger.info("Downloading %s", url)

        response = requests.get(url, stream=True, timeout=timeout)
        response.raise_for_status()

        total_size = int(response.headers.get("content-length", 0))

        # Write to a temporary name so an interrupted download is not reused
        partial_path = output_path.with_name(output_path.name + ".part")
        with open(partial_path, "wb") as f:
            with byte_progress(total_size, disable=not show_progress) as pbar:
                for chunk in response.iter_content(chunk_size=8192):
                    f.write(chunk)
                    pbar.update(len(chunk))
        partial_path.replace(output_path)

        logger.info("Downloaded to %s", output_path)
        return output_path
