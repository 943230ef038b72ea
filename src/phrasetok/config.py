"""Construction descriptor for phrase tokenizers."""

import logging
from dataclasses import dataclass, field
from typing import Any, Final

from .errors import ConstructionError, StrategyError
from .prefix_index import IndexKind
from .strategy import list_strategies
from .types import Phrase, TokenId

log = logging.getLogger(__name__)

DEFAULT_UNK_ID: Final[TokenId] = -1


@dataclass(frozen=True)
class PhraseTokenizerConfig:
    """
    Everything needed to build a ``PhraseTokenizer``.

    :param vocab: Ordered phrases; the position of a phrase is its id.
    :param prob: Regularization probability in ``[0, 1]``; 0 disables sampling.
    :param strategy: Name of the selection strategy resolving competing matches.
    :param split_end_punctuation: Split trailing punctuation off each word.
    :param support_detokenization: Allow ``detokenize`` on the built tokenizer.
    :param unk_id: Sentinel id of out-of-vocabulary words, outside ``[0, len(vocab))``.
    :param seed: Seed of the per-call random source; ``None`` seeds from the OS.
    :param index: Name of the prefix index implementation.
    """

    vocab: tuple[Phrase, ...] = field(default_factory=tuple)
    prob: float = 0.0
    strategy: str = "shorter"
    split_end_punctuation: bool = False
    support_detokenization: bool = True
    unk_id: TokenId = DEFAULT_UNK_ID
    seed: int | None = None
    index: str = "trie"

    def __post_init__(self) -> None:
        # a bare string would otherwise become one phrase per character
        if isinstance(self.vocab, (str, bytes)):
            raise ConstructionError(
                "vocab must be a sequence of phrases, not a single string",
                invalid_entry=str(self.vocab),
            )
        try:
            # accept any sequence of phrases but store an immutable copy
            object.__setattr__(self, "vocab", tuple(self.vocab))
        except TypeError as e:
            raise ConstructionError(
                f"vocab must be a sequence of phrases (got {type(self.vocab).__name__})"
            ) from e

    def validate(self) -> None:
        """
        Check the descriptor before a tokenizer is built from it.

        :raises ConstructionError: On a wrongly typed field, an empty vocabulary, a probability
            outside ``[0, 1]``, an unknown strategy or index name, or a
            sentinel id that collides with a real id.
        """
        # bool is an int subclass, so True would pass as probability 1
        if isinstance(self.prob, bool) or not isinstance(self.prob, (int, float)):
            raise ConstructionError(
                f"regularization probability must be a number (got {self.prob!r})"
            )
        if isinstance(self.unk_id, bool) or not isinstance(self.unk_id, int):
            raise ConstructionError(
                f"unknown-id sentinel must be an integer (got {self.unk_id!r})"
            )
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ConstructionError(f"seed must be an integer or None (got {self.seed!r})")
        if not isinstance(self.strategy, str) or not isinstance(self.index, str):
            raise ConstructionError("strategy and index must be given by name")

        vocab_size = len(self.vocab)
        if vocab_size == 0:
            raise ConstructionError("vocabulary must not be empty", vocab_size=0)

        if not 0.0 <= self.prob <= 1.0:
            raise ConstructionError(
                f"regularization probability must be in [0, 1] (got {self.prob})"
            )

        if self.strategy not in list_strategies():
            raise ConstructionError(
                f"unknown strategy {self.strategy!r} (available: {list_strategies()})"
            )

        try:
            IndexKind.get(self.index)
        except StrategyError as e:
            raise ConstructionError(f"unknown prefix index {self.index!r}") from e

        # the sentinel must be distinguishable from every real id
        if 0 <= self.unk_id < vocab_size:
            raise ConstructionError(
                f"unknown-id sentinel {self.unk_id} collides with a vocabulary id",
                vocab_size=vocab_size,
            )

        if self.prob > 0.0 and self.strategy == "longest":
            log.warning(
                f"regularization probability {self.prob} has no effect with the longest strategy"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PhraseTokenizerConfig":
        """
        Build a config from a plain mapping, e.g. parsed JSON.

        :raises ConstructionError: If the mapping has unknown keys.
        """
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ConstructionError(
                f"unknown config keys: {', '.join(sorted(unknown))}"
            )
        return cls(**data)
