"""Benchmark tokenize_batch() and detokenize_batch() on a slice of the Sci-Fi Gutenberg dataset.

Outputs a row with the columns:
  Corpus Size | Vocab Size | Tokenize Throughput | Detokenize Throughput |
  Words per Token | OOV Rate
"""

import argparse
import time

from datasets import load_dataset

from phrasetok import ParallelMode, from_vocab_file

HF_DATASET = "stevez80/Sci-Fi-Books-gutenberg"


def load_corpus(num_docs: int | None) -> list[str]:
    """Load up to `num_docs` documents via dataset indexing; full dataset when None."""
    print(f"Loading {HF_DATASET} (non-streaming) …")
    ds = load_dataset(HF_DATASET, split="train")
    if num_docs is not None:
        return ds[:num_docs]["text"]
    return ds["text"]


def main() -> None:
    """Run the tokenize/detokenize benchmark and print a table row."""
    parser = argparse.ArgumentParser(
        description="Benchmark PhraseTok tokenize_batch() and detokenize_batch()."
    )
    parser.add_argument("vocab", type=str, help="Vocabulary file, one phrase per line.")
    parser.add_argument(
        "--num-docs",
        type=int,
        default=None,
        help="Number of documents to tokenize (default: full dataset).",
    )
    parser.add_argument(
        "--prob",
        type=float,
        default=0.0,
        help="Regularization probability (default: 0, deterministic).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count for batch mode (default: CPU count).",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default="auto",
        help="Parallel mode: auto, batch or off (default: auto).",
    )
    args = parser.parse_args()

    docs = load_corpus(args.num_docs)
    if not docs:
        raise RuntimeError("No documents loaded from dataset.")

    tokenizer = from_vocab_file(args.vocab, prob=args.prob, seed=0)
    total_bytes = sum(len(d.encode("utf-8")) for d in docs)
    corpus_mb = total_bytes / (1024 * 1024)

    # --- Tokenizing ---
    t0 = time.perf_counter()
    results = tokenizer.tokenize_batch(
        docs,
        num_workers=args.workers,
        parallel_mode=ParallelMode.get(args.mode),
        seed=0,
    )
    tokenize_elapsed = time.perf_counter() - t0
    tokenize_mbps = total_bytes / tokenize_elapsed / (1024 * 1024)

    id_batch = [ids for _, ids in results]
    total_tokens = sum(len(ids) for ids in id_batch)
    n_oov = sum(1 for ids in id_batch for i in ids if tokenizer.is_unknown(i))
    total_words = sum(len(d.split()) for d in docs)

    # --- Detokenizing (in-vocabulary ids only, the sentinel has no phrase) ---
    known_batch = [[i for i in ids if not tokenizer.is_unknown(i)] for ids in id_batch]
    t0 = time.perf_counter()
    tokenizer.detokenize_batch(known_batch)
    detokenize_elapsed = time.perf_counter() - t0
    detokenize_mtps = (total_tokens - n_oov) / detokenize_elapsed / 1_000_000

    words_per_token = total_words / total_tokens if total_tokens else 0.0
    oov_rate = n_oov / total_tokens * 100 if total_tokens else 0.0

    # --- Output ---
    print()
    header = (
        f"| {'Corpus Size':14} | {'Vocab Size':10} | {'Tokenize Throughput':19} "
        f"| {'Detokenize Throughput':21} | {'Words per Token':15} | {'OOV Rate':8} |"
    )
    sep = (
        f"| {'-' * 14} | {'-' * 10} | {'-' * 19} "
        f"| {'-' * 21} | {'-' * 15} | {'-' * 8} |"
    )
    row = (
        f"| {f'{corpus_mb:.2f} MB':14} | {tokenizer.vocab_size():10,} "
        f"| {f'{tokenize_mbps:.2f} MB/sec':19} | {f'{detokenize_mtps:.1f}M tokens/sec':21} "
        f"| {f'{words_per_token:.3f}':15} | {f'{oov_rate:.1f}%':8} |"
    )
    print(header)
    print(sep)
    print(row)
    print()


if __name__ == "__main__":
    main()
