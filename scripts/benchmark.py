#!/usr/bin/env python3
"""Benchmark BytePairEncoder throughput."""

import argparse
import sys
import time
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bpe_tokenizer import BytePairEncoder, DefaultVocab, NoDefaultVocabError


def load_benchmark_texts() -> list[str]:
    """Load sample texts for benchmarking."""
    texts = [
        # Short texts
        "Hello, world!",
        "The quick brown fox jumps over the lazy dog.",
        "Python is a programming language.",

        # Technical text
        """
        Machine learning is a subset of artificial intelligence (AI) that provides
        systems the ability to automatically learn and improve from experience without
        being explicitly programmed. Machine learning focuses on the development of
        computer programs that can access data and use it to learn for themselves.
        """,

        # Wikipedia-style text
        """
        The Python programming language was created by Guido van Rossum and first
        released in 1991. Python's design philosophy emphasizes code readability
        with its notable use of significant whitespace. Its language constructs and
        object-oriented approach aim to help programmers write clear, logical code
        for small and large-scale projects.
        """,

        # Unicode text
        "こんにちは世界 🌍 Привет мир مرحبا بالعالم",

        # Numbers and special characters
        "The meeting is at 3:30 PM on 2024-01-15. Contact: user@example.com",
    ]

    return texts


def benchmark_tokenizer(
    tokenizer: BytePairEncoder,
    texts: list[str],
    name: str,
    iterations: int = 100,
) -> dict:
    """Benchmark a tokenizer.

    Returns dict with timing and token count statistics.
    """
    # Warmup
    for text in texts[:3]:
        tokenizer.tokenize(text)

    total_tokens = 0
    total_chars = 0
    unknown_tokens = 0

    start_time = time.perf_counter()

    for _ in range(iterations):
        for text in texts:
            tokens = tokenizer.tokenize(text)
            total_tokens += len(tokens)
            total_chars += len(text)

    end_time = time.perf_counter()
    elapsed = end_time - start_time

    for text in texts:
        unknown_tokens += tokenizer.tokenize(text).count("<unk>")

    return {
        "name": name,
        "total_time": elapsed,
        "iterations": iterations,
        "total_tokens": total_tokens,
        "total_chars": total_chars,
        "tokens_per_char": total_tokens / total_chars,
        "chars_per_token": total_chars / total_tokens,
        "throughput_chars": total_chars / elapsed,
        "unknown_tokens": unknown_tokens,
    }


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark BytePairEncoder vocabularies"
    )
    parser.add_argument(
        "--vocab-path",
        type=str,
        default=None,
        help="Path to a vocabulary file (defaults to the bundled vocabularies)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=100,
        help="Number of benchmark iterations",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Tokenizer Benchmark")
    print("=" * 60)
    print()

    texts = load_benchmark_texts()
    print(f"Benchmark texts: {len(texts)}")
    print(f"Total characters: {sum(len(t) for t in texts):,}")
    print(f"Iterations: {args.iterations}")
    print()

    if args.vocab_path:
        candidates = [(Path(args.vocab_path).name, lambda: BytePairEncoder.from_file(args.vocab_path))]
    else:
        candidates = [
            (f"default-{which.value}", lambda which=which: BytePairEncoder.from_default(which))
            for which in DefaultVocab
        ]

    results = []

    for name, load in candidates:
        print(f"Loading {name}...")
        try:
            tokenizer = load()
        except NoDefaultVocabError:
            print("  Not bundled, skipping")
            continue

        print(f"  Vocab size: {tokenizer.vocab_size:,}")
        print(f"Benchmarking {name}...")
        result = benchmark_tokenizer(tokenizer, texts, name, args.iterations)
        results.append(result)
        print(f"  Done: {result['throughput_chars']:.0f} chars/sec")
        print()

    print("=" * 60)
    print("Results")
    print("=" * 60)
    print()

    if not results:
        print("No tokenizers benchmarked successfully.")
        sys.exit(1)

    # Header
    print(f"{'Vocabulary':<25} {'Tokens/Char':<12} {'Chars/Token':<12} {'Chars/Sec':<15} {'<unk>':<8}")
    print("-" * 72)

    for r in results:
        print(
            f"{r['name']:<25} "
            f"{r['tokens_per_char']:<12.4f} "
            f"{r['chars_per_token']:<12.2f} "
            f"{r['throughput_chars']:<15,.0f} "
            f"{r['unknown_tokens']:<8}"
        )


if __name__ == "__main__":
    main()
