"""
Base tokenizer interface for phrase-level tokenization implementations.
"""

import logging
import os
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from random import Random

from .._decorators import measure_time
from .._matcher import PHRASE_SEP, EmittedToken
from ..parallel import ParallelMode
from ..types import TokenId, TokenIds, Tokens

log = logging.getLogger(__name__)


class Tokenizer(ABC):
    """
    Abstract base class for vocabulary-driven tokenizers.

    Subclasses provide offset-aware tokenization and id lookup; this class
    derives the plain, id-only and batch variants from them.
    """

    @abstractmethod
    def tokenize_with_offsets(
        self, text: str, rng: Random | None = None
    ) -> list[EmittedToken]:
        """Tokenize text into emitted tokens carrying their source offsets."""
        ...

    @abstractmethod
    def detokenize_to_tokens(self, ids: TokenIds) -> Tokens:
        """Map ids back to their vocabulary strings."""
        ...

    @abstractmethod
    def vocab_size(self) -> int:
        """Return the number of entries in the vocabulary."""
        ...

    def tokenize(self, text: str, rng: Random | None = None) -> tuple[Tokens, TokenIds]:
        """
        Tokenize text into parallel lists of token strings and ids.

        Example:
            >>> tok.tokenize("Show me the way.")
            (['Show me', 'the', 'way.'], [0, 1, 2])
        """
        emitted = self.tokenize_with_offsets(text, rng)
        return [tok.text for tok in emitted], [tok.id for tok in emitted]

    def encode(self, text: str, rng: Random | None = None) -> TokenIds:
        """Tokenize text and return only the ids."""
        return [tok.id for tok in self.tokenize_with_offsets(text, rng)]

    def detokenize(self, ids: TokenIds) -> str:
        """
        Reconstruct text by joining the phrases of ``ids`` with single spaces.

        The join is lossy: the original spacing between tokens (runs of
        spaces, tabs, leading or trailing whitespace) is not restored.
        """
        return PHRASE_SEP.join(self.detokenize_to_tokens(ids))

    def _rng_for(self, seed: int | None) -> Random:
        """Return a fresh random source confined to one call."""
        return Random(seed)

    @measure_time
    def tokenize_batch(
        self,
        texts: list[str],
        num_workers: int | None = None,
        parallel_mode: ParallelMode = ParallelMode.AUTO,
        seed: int | None = None,
    ) -> list[tuple[Tokens, TokenIds]]:
        """
        Tokenize many texts using the requested parallelization mode.

        ``off`` tokenizes texts serially. ``batch`` runs whole-text tokenizations
        on a thread pool. ``auto`` picks batch mode for more than one text.
        Every text gets its own random source; with ``seed`` text ``i`` is
        seeded with ``seed + i`` so results do not depend on the mode.

        :param texts: Text inputs to tokenize.
        :param num_workers: Worker count for batch mode; defaults to the CPU count.
        :param parallel_mode: Parallelization policy.
        :param seed: Base seed for per-text random sources.
        :returns: ``(tokens, ids)`` pairs in input order.
        """
        if not texts:
            return []

        if num_workers is None:
            workers = os.cpu_count() or 1
        else:
            workers = max(1, num_workers)  # "0" interpreted as 1 worker

        def tokenize_one(idx: int) -> tuple[Tokens, TokenIds]:
            rng = None if seed is None else self._rng_for(seed + idx)
            return self.tokenize(texts[idx], rng)

        def process_batch() -> list[tuple[Tokens, TokenIds]]:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                return list(pool.map(tokenize_one, range(len(texts))))

        log.debug(f"tokenizing {len(texts)} texts (mode: {parallel_mode.value})")

        match parallel_mode:
            case ParallelMode.OFF:
                return [tokenize_one(idx) for idx in range(len(texts))]
            case ParallelMode.BATCH:
                return process_batch()
            case ParallelMode.AUTO:
                if len(texts) <= 1 or workers == 1:
                    return [tokenize_one(idx) for idx in range(len(texts))]
                return process_batch()

    def detokenize_batch(self, id_batch: list[TokenIds]) -> list[str]:
        """Detokenize several id sequences; fails on the first invalid id."""
        return [self.detokenize(ids) for ids in id_batch]

    def is_unknown(self, token_id: TokenId) -> bool:
        """Return whether ``token_id`` lies outside the vocabulary."""
        return not 0 <= token_id < self.vocab_size()
