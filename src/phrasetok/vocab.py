"""Exact-match phrase vocabulary."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from .errors import ConstructionError
from .types import Phrase, TokenId

# words of a multi-word phrase are joined by exactly one space
PHRASE_SEP: Final[str] = " "

log = logging.getLogger(__name__)


class StringVocab:
    """
    Bidirectional table between phrase strings and integer ids.

    The id of a phrase is its position in the ordered list it was built from.
    Lookups by string are exact, no normalization is applied.
    """

    def __init__(self, phrases: Iterable[Phrase]) -> None:
        self._phrases: tuple[Phrase, ...] = tuple(phrases)
        if not self._phrases:
            raise ConstructionError("vocabulary must not be empty", vocab_size=0)

        self._index: dict[Phrase, TokenId] = {}
        for idx, phrase in enumerate(self._phrases):
            if not isinstance(phrase, str):
                raise ConstructionError(
                    f"phrase at position {idx} is not a string",
                    vocab_size=len(self._phrases),
                    invalid_entry=repr(phrase),
                )
            if not phrase:
                raise ConstructionError(
                    f"empty phrase at position {idx}", vocab_size=len(self._phrases)
                )
            # candidates are words joined by one space, anything else never matches
            if phrase != PHRASE_SEP.join(phrase.split()):
                raise ConstructionError(
                    "phrase words must be separated by exactly one space",
                    vocab_size=len(self._phrases),
                    invalid_entry=phrase,
                )
            # ids must stay a bijection over [0, size)
            if phrase in self._index:
                raise ConstructionError(
                    "duplicate phrase in vocabulary",
                    vocab_size=len(self._phrases),
                    invalid_entry=phrase,
                )
            self._index[phrase] = idx

    def contains(self, key: str) -> bool:
        """Return whether ``key`` is exactly a vocabulary phrase."""
        return key in self._index

    def lookup_id(self, key: str) -> TokenId | None:
        """Return the id of ``key`` or ``None`` if it is not in the vocabulary."""
        return self._index.get(key)

    def lookup_word(self, vocab_id: TokenId) -> Phrase | None:
        """Return the phrase of ``vocab_id`` or ``None`` if the id is out of range."""
        if vocab_id < 0 or vocab_id >= len(self._phrases):
            return None
        return self._phrases[vocab_id]

    def size(self) -> int:
        """Return the number of phrases in the vocabulary."""
        return len(self._phrases)

    @property
    def phrases(self) -> tuple[Phrase, ...]:
        return self._phrases


def load_vocab(vocab_file: str | Path) -> list[Phrase]:
    """
    Read an ordered phrase list from a text file, one phrase per line.

    Only the line terminator is stripped so phrases keep inner whitespace.

    :param vocab_file: Path to a UTF-8 vocabulary file.
    :return: Phrases in file order; the line number (from 0) is the id.
    :raises ConstructionError: If the file does not exist or holds a blank line.
    """
    path = Path(vocab_file)
    if not path.exists():
        raise ConstructionError(f"vocab file does not exist: {path}")

    log.info(f"loading vocabulary from {path}")

    phrases: list[Phrase] = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            phrase = line.rstrip("\r\n")
            if not phrase:
                raise ConstructionError(f"blank line in vocab file at line {lineno}")
            phrases.append(phrase)

    log.debug(f"read {len(phrases)} phrases from {path}")
    return phrases
