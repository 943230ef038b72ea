import logging

import phrasetok as ptok


def main() -> None:
    """Tokenize a sample sentence with and without regularization."""
    logging.basicConfig(level=logging.INFO)

    vocab = ["Show me", "the", "way.", "Show", "me", "the way."]
    tok = ptok.get_tokenizer(vocab)
    tokens, ids = tok.tokenize("Show me the way.")
    print(f"tokens: {tokens} ids: {ids}")
    print(f"detokenized: {tok.detokenize(ids)!r}")

    # regularized: shorter matches are sampled half of the time
    reg_tok = ptok.get_tokenizer(vocab, prob=0.5, seed=0)
    for tokens, ids in reg_tok.tokenize_batch(["Show me the way."] * 4, seed=0):
        print(f"tokens: {tokens} ids: {ids}")


if __name__ == "__main__":
    main()
