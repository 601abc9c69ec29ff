"""Progress bars and logging for downloads and vocabulary builds."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TypeVar

from tqdm import tqdm

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def byte_progress(
    total: int | None,
    desc: str = "Downloading",
    disable: bool = False,
) -> tqdm:
    """Progress bar counting transferred bytes.

    Args:
        total: Expected size in bytes; 0 or None when the server sent none
        desc: Description prefix
        disable: Whether to hide the bar

    Returns:
        tqdm progress bar, to be advanced with ``update(len(chunk))``
    """
    return tqdm(
        total=total or None,
        desc=desc,
        disable=disable,
        unit="B",
        unit_scale=True,
        unit_divisor=1024,
        ncols=100,
        file=sys.stderr,
    )


def item_progress(
    items: Iterable[T],
    desc: str,
    disable: bool = False,
) -> Iterable[T]:
    """Wrap an iterable of work items (e.g. vocabularies to build) in a bar."""
    return tqdm(items, desc=desc, disable=disable, unit="vocab", ncols=100, file=sys.stderr)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send package logs to stderr.

    Args:
        verbose: Also show DEBUG messages such as token counts per load

    Returns:
        The ``bpe_tokenizer`` logger
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return logging.getLogger("bpe_tokenizer")
