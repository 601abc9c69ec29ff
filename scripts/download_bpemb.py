#!/usr/bin/env python3
"""Download BPEmb multilingual vocabularies for the bundled defaults."""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bpe_tokenizer.data.bpemb import BPEmbDownloader
from bpe_tokenizer.default_vocabs import DefaultVocab
from bpe_tokenizer.utils.progress import setup_logging


def main():
    parser = argparse.ArgumentParser(
        description="Download BPEmb vocabulary files"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="vocab",
        help="Output directory for downloaded files",
    )
    parser.add_argument(
        "--size",
        choices=[v.value for v in DefaultVocab] + ["all"],
        default="all",
        help="Vocabulary size to download (default: all)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable progress bar",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    if args.size == "all":
        sizes = list(DefaultVocab)
    else:
        sizes = [DefaultVocab(args.size)]

    downloader = BPEmbDownloader(output_dir=args.output)

    try:
        for which in sizes:
            path = downloader.download(which, show_progress=not args.no_progress)
            print(f"{which.value}: {path}")

        print()
        print("Next step: build the bundled resources:")
        print(f"  python scripts/build_default_vocabs.py --input {args.output}")

    except KeyboardInterrupt:
        print("\nDownload cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
