"""Unit tests for PhraseTokenizer tokenize/detokenize, edge cases and properties."""

import random

import pytest

import phrasetok as ptok
from phrasetok.errors import DetokenizationError, InvalidIdError

SHOW_ME_VOCAB = ["Show me", "the", "way.", "Show", "me"]


def _non_whitespace(text: str) -> str:
    return "".join(text.split())


# Worked examples
# ---------------------------------------------------------------------------


def test_show_me_the_way(show_me_tokenizer):
    """Greedy longest match merges "Show" and "me" into one phrase."""
    tokens, ids = show_me_tokenizer.tokenize("Show me the way.")
    assert tokens == ["Show me", "the", "way."]
    assert ids == [0, 1, 2]


def test_detokenize_show_me(show_me_tokenizer):
    assert show_me_tokenizer.detokenize([0, 1, 2]) == "Show me the way."


def test_oov_word_falls_back_to_sentinel():
    """A word missing from the vocabulary is emitted verbatim with the sentinel id."""
    tok = ptok.get_tokenizer(["Show me", "the", "Show", "me"])
    tokens, ids = tok.tokenize("Show me the way.")
    assert tokens == ["Show me", "the", "way."]
    assert ids == [0, 1, tok.unk_id]
    assert tok.is_unknown(ids[-1])
    assert all(not tok.is_unknown(i) for i in ids[:-1])


def test_custom_sentinel_id():
    tok = ptok.get_tokenizer(["the"], unk_id=100)
    assert tok.encode("the cat") == [0, 100]


def test_oov_offsets_and_flag():
    tok = ptok.get_tokenizer(["the"])
    emitted = tok.tokenize_with_offsets("the  cat")
    assert [t.is_oov for t in emitted] == [False, True]
    assert (emitted[1].start, emitted[1].end) == (5, 8)


# Edge cases
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text", ["", "   ", "\n\t  　"])
def test_empty_and_whitespace_input(show_me_tokenizer, text):
    assert show_me_tokenizer.tokenize(text) == ([], [])


def test_detokenize_empty(show_me_tokenizer):
    assert show_me_tokenizer.detokenize([]) == ""


def test_extension_stops_at_partial_phrase():
    """A candidate that is only a prefix falls back to the last full match."""
    tok = ptok.get_tokenizer(["New", "New York City", "York"])
    tokens, ids = tok.tokenize("New York")
    assert tokens == ["New", "York"]
    assert ids == [0, 2]


def test_prefix_without_word_boundary_does_not_extend():
    """"Show" prefixes "Showcase" but not "Show " so extension stops."""
    tok = ptok.get_tokenizer(["Show", "Showcase", "me"])
    assert tok.tokenize("Show me") == (["Show", "me"], [0, 2])


def test_unmatched_start_of_multiword_phrase_is_oov():
    """A word that only begins a phrase which never completes is out of vocabulary."""
    tok = ptok.get_tokenizer(["New York", "Boston"])
    tokens, ids = tok.tokenize("New Boston")
    assert tokens == ["New", "Boston"]
    assert ids == [-1, 1]


def test_irregular_whitespace_is_normalized(show_me_tokenizer):
    tokens, ids = show_me_tokenizer.tokenize("  Show \t me\n\nthe   way.  ")
    assert tokens == ["Show me", "the", "way."]
    assert show_me_tokenizer.detokenize(ids) == "Show me the way."


def test_split_end_punctuation():
    tok = ptok.get_tokenizer(["Show me", "the", "way", "."], split_end_punctuation=True)
    tokens, ids = tok.tokenize("Show me the way.")
    assert tokens == ["Show me", "the", "way", "."]
    assert ids == [0, 1, 2, 3]


def test_unicode_phrases():
    tok = ptok.get_tokenizer(["東京 タワー", "café", "naïve"])
    assert tok.tokenize("東京 タワー café naïve") == (
        ["東京 タワー", "café", "naïve"],
        [0, 1, 2],
    )


# Detokenization
# ---------------------------------------------------------------------------


def test_detokenize_to_tokens(show_me_tokenizer):
    assert show_me_tokenizer.detokenize_to_tokens([3, 4, 1]) == ["Show", "me", "the"]


@pytest.mark.parametrize("bad_id", [-1, 5, 1000])
def test_detokenize_invalid_id_raises(show_me_tokenizer, bad_id):
    with pytest.raises(InvalidIdError) as exc_info:
        show_me_tokenizer.detokenize([0, bad_id, 1])
    assert exc_info.value.invalid_id == bad_id
    assert exc_info.value.vocab_size == len(SHOW_ME_VOCAB)


def test_detokenize_reports_first_invalid_id(show_me_tokenizer):
    with pytest.raises(InvalidIdError) as exc_info:
        show_me_tokenizer.detokenize([0, 7, 9])
    assert exc_info.value.invalid_id == 7


def test_detokenize_rejects_sentinel(show_me_tokenizer):
    _, ids = show_me_tokenizer.tokenize("Show unseen")
    with pytest.raises(InvalidIdError):
        show_me_tokenizer.detokenize(ids)


def test_detokenization_disabled():
    tok = ptok.get_tokenizer(SHOW_ME_VOCAB, support_detokenization=False)
    with pytest.raises(DetokenizationError):
        tok.detokenize([0])


def test_id_bijection(show_me_tokenizer):
    """Every id detokenizes to its own vocabulary phrase."""
    for token_id, phrase in enumerate(SHOW_ME_VOCAB):
        assert show_me_tokenizer.detokenize([token_id]) == phrase
        assert show_me_tokenizer.vocab.lookup_word(token_id) == phrase


def test_detokenize_batch(show_me_tokenizer):
    assert show_me_tokenizer.detokenize_batch([[0], [1, 2]]) == ["Show me", "the way."]


# Properties
# ---------------------------------------------------------------------------


_PROPERTY_VOCAB = ["a", "a b", "a b c", "b", "c", "c a", "b c a b"]


def _random_text(rng: random.Random) -> str:
    words = [rng.choice(["a", "b", "c", "x"]) for _ in range(rng.randint(0, 12))]
    return rng.choice([" ", "  ", "\t"]).join(words)


@pytest.mark.parametrize("prob", [0.0, 0.5, 1.0])
def test_coverage(prob):
    """Emitted spans reproduce the non-whitespace input in order without gaps."""
    tok = ptok.get_tokenizer(_PROPERTY_VOCAB, prob=prob)
    text_rng = random.Random(7)
    for _ in range(200):
        text = _random_text(text_rng)
        emitted = tok.tokenize_with_offsets(text, random.Random(1))
        assert "".join(_non_whitespace(t.text) for t in emitted) == _non_whitespace(text)
        assert "".join(_non_whitespace(text[t.start : t.end]) for t in emitted) == (
            _non_whitespace(text)
        )
        for prev, cur in zip(emitted, emitted[1:]):
            assert prev.end <= cur.start


def test_longest_match_is_deterministic():
    tok = ptok.get_tokenizer(_PROPERTY_VOCAB)
    text_rng = random.Random(3)
    for _ in range(100):
        text = _random_text(text_rng)
        assert tok.tokenize(text) == tok.tokenize(text)


def test_round_trip_on_in_vocab_text():
    tok = ptok.get_tokenizer(_PROPERTY_VOCAB, prob=0.5, seed=11)
    text_rng = random.Random(5)
    for _ in range(100):
        text = _random_text(text_rng).replace("x", "a")
        tokens, ids = tok.tokenize(text)
        assert all(not tok.is_unknown(i) for i in ids)
        assert tok.detokenize(ids) == " ".join(tokens)
        assert tok.detokenize(ids) == " ".join(text.split())


def test_seeded_tokenization_is_reproducible(nested_vocab):
    tok = ptok.get_tokenizer(nested_vocab, prob=0.5, seed=42)
    text = "a b c d " * 20
    assert tok.tokenize(text) == tok.tokenize(text)


def test_explicit_rng_overrides_config_seed(nested_vocab):
    tok = ptok.get_tokenizer(nested_vocab, prob=0.5, seed=42)
    text = "a b c " * 20
    first = tok.tokenize(text, random.Random(1))
    second = tok.tokenize(text, random.Random(1))
    assert first == second


def test_regularization_always_shorter_at_prob_one(nested_vocab):
    """With probability 1 the longest match is never emitted when a shorter exists."""
    tok = ptok.get_tokenizer(nested_vocab, prob=1.0)
    for seed in range(50):
        tokens, _ = tok.tokenize("a b c", random.Random(seed))
        assert tokens[0] in ("a", "a b")


def test_no_entropy_used_without_regularization(nested_vocab):
    tok = ptok.get_tokenizer(nested_vocab)
    rng = random.Random(0)
    state = rng.getstate()
    tok.tokenize("a b c d a b", rng)
    assert rng.getstate() == state


# Random source lifecycle
# ---------------------------------------------------------------------------


def test_deterministic_tokenize_creates_no_random_source(show_me_tokenizer, monkeypatch):
    def fail(seed):
        pytest.fail("random source created without regularization")

    monkeypatch.setattr(show_me_tokenizer, "_rng_for", fail)
    assert show_me_tokenizer.tokenize("Show me the way.") == (
        ["Show me", "the", "way."],
        [0, 1, 2],
    )


def test_regularized_tokenize_creates_seeded_random_source(nested_vocab, monkeypatch):
    tok = ptok.get_tokenizer(nested_vocab, prob=0.5, seed=8)
    seeds = []

    def record(seed):
        seeds.append(seed)
        return random.Random(seed)

    monkeypatch.setattr(tok, "_rng_for", record)
    tok.tokenize("a b c")
    assert seeds == [8]
