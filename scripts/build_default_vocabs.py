#!/usr/bin/env python3
"""Convert BPEmb vocabulary files into the bundled resource format."""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bpe_tokenizer.default_vocabs import (
    DEFAULT_VOCAB_DIR,
    DefaultVocab,
    save_default_vocab,
)
from bpe_tokenizer.utils.progress import item_progress, setup_logging
from bpe_tokenizer.vocab import load_vocab


def main():
    parser = argparse.ArgumentParser(
        description="Build bundled default vocabularies from BPEmb files"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=str,
        default="vocab",
        help="Directory containing multi.wiki.bpe.vs*.vocab files",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=str(DEFAULT_VOCAB_DIR),
        help="Directory to write the compressed resources to",
    )
    parser.add_argument(
        "--size",
        choices=[v.value for v in DefaultVocab] + ["all"],
        default="all",
        help="Vocabulary size to build (default: all available)",
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

    input_dir = Path(args.input)
    output_dir = Path(args.output)

    if not input_dir.is_dir():
        print(f"Error: Input directory does not exist: {input_dir}")
        sys.exit(1)

    if args.size == "all":
        sizes = [v for v in DefaultVocab if (input_dir / v.source_name).exists()]
    else:
        sizes = [DefaultVocab(args.size)]

    if not sizes:
        print(f"Error: No BPEmb vocabulary files found in {input_dir}")
        print("Download them with: python scripts/download_bpemb.py")
        sys.exit(1)

    for which in item_progress(sizes, desc="Building", disable=args.no_progress):
        # Malformed vocabulary files abort the build
        vocab = load_vocab(input_dir / which.source_name)
        output_path = output_dir / which.resource_name
        save_default_vocab(vocab, output_path)
        print(f"{which.value}: {len(vocab):,} tokens -> {output_path}")


if __name__ == "__main__":
    main()
