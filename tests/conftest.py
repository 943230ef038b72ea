"""Shared fixtures for phrasetok tests."""

import pytest

import phrasetok as ptok


SHOW_ME_VOCAB = ["Show me", "the", "way.", "Show", "me"]


@pytest.fixture
def show_me_tokenizer():
    """Return a deterministic tokenizer over the "Show me the way." vocabulary."""
    return ptok.get_tokenizer(SHOW_ME_VOCAB)


@pytest.fixture
def nested_vocab():
    """Phrases where "a", "a b" and "a b c" all compete at the same start."""
    return ["a", "a b", "a b c", "d", "c"]
