"""Tokenizer implementations for phrase-level text processing."""

from .base import Tokenizer
from .phrase import PhraseTokenizer


__all__ = ["Tokenizer", "PhraseTokenizer"]
