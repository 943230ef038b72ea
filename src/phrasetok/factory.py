"""Factory functions for creating phrase tokenizers."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ._models.phrase import PhraseTokenizer
from .config import PhraseTokenizerConfig
from .types import Phrase
from .vocab import load_vocab


def create(config: PhraseTokenizerConfig | dict[str, Any]) -> PhraseTokenizer:
    """
    Create a phrase tokenizer from a config or a plain mapping.

    :param config: Tokenizer config, or a mapping of config fields.
    :return: Ready-to-use tokenizer.
    :raises ConstructionError: If the config is malformed or the vocabulary is empty.

    .. code-block:: python

        tok = create(PhraseTokenizerConfig(vocab=("Show me", "the", "way.")))
        tok = create({"vocab": ["Show me", "the", "way."], "prob": 0.1})
    """
    if isinstance(config, dict):
        config = PhraseTokenizerConfig.from_dict(config)
    return PhraseTokenizer(config)


def get_tokenizer(vocab: Iterable[Phrase], **options: Any) -> PhraseTokenizer:
    """
    Create a phrase tokenizer from an ordered phrase list.

    :param vocab: Phrases; the position of each phrase is its id.
    :param options: Any other ``PhraseTokenizerConfig`` field.
    """
    return create({"vocab": vocab, **options})


def from_vocab_file(vocab_file: str | Path, **options: Any) -> PhraseTokenizer:
    """
    Load a phrase tokenizer from a vocabulary file with one phrase per line.

    :param vocab_file: Path to the UTF-8 vocabulary file.
    :param options: Any other ``PhraseTokenizerConfig`` field.
    :raises ConstructionError: If the file is missing, has blank lines, or
        yields an invalid config.

    .. code-block:: python

        tok = from_vocab_file("phrases.txt", prob=0.1, seed=0)
        tokens, ids = tok.tokenize("Show me the way.")
    """
    return get_tokenizer(load_vocab(vocab_file), **options)
