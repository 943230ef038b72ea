"""Phrase tokenizer built on greedy multi-word vocabulary matching."""

import logging
from random import Random
from typing import override

from .._matcher import EmittedToken, PhraseMatcher
from .._sanitise import render_text
from ..config import PhraseTokenizerConfig
from ..errors import DetokenizationError, InvalidIdError
from ..prefix_index import build_index
from ..segmenter import WhitespaceSegmenter
from ..strategy import get_strategy
from ..types import TokenIds, Tokens
from ..vocab import StringVocab
from .base import Tokenizer

log = logging.getLogger(__name__)


class PhraseTokenizer(Tokenizer):
    """
    Tokenizer that segments text into phrases of one or more words.

    Words are split on whitespace and then merged greedily into the longest
    run found in the vocabulary, e.g. with phrases "Show me", "the" and
    "way." the text "Show me the way." yields three tokens. A word that starts
    no vocabulary phrase is emitted verbatim with the ``unk_id`` sentinel.

    Instances are read-only after construction and may be shared across
    threads; each call uses its own random source.
    """

    def __init__(self, config: PhraseTokenizerConfig) -> None:
        """
        Build vocabulary, prefix index and matcher from ``config``.

        :raises ConstructionError: If the config is invalid or the vocabulary
            cannot be indexed. No partially built tokenizer is returned.
        """
        super().__init__()
        config.validate()
        self.config = config
        self.vocab = StringVocab(config.vocab)
        self.index = build_index(self.vocab.phrases, config.index)
        self.segmenter = WhitespaceSegmenter(config.split_end_punctuation)
        self.matcher = PhraseMatcher(
            self.vocab,
            self.index,
            get_strategy(config.strategy),
            config.prob,
        )
        log.info(
            f"built phrase tokenizer: {self.vocab.size()} phrases, "
            f"strategy {config.strategy}, prob {config.prob}, index {config.index}"
        )

    @property
    def unk_id(self) -> int:
        return self.config.unk_id

    @property
    def prob(self) -> float:
        return self.config.prob

    @override
    def vocab_size(self) -> int:
        return self.vocab.size()

    @override
    def tokenize_with_offsets(
        self, text: str, rng: Random | None = None
    ) -> list[EmittedToken]:
        """
        Tokenize text into emitted tokens with source offsets.

        Words that do not start any vocabulary phrase are emitted verbatim
        with ``unk_id`` and ``is_oov`` set; tokenization never aborts on
        unseen input.

        :param text: Input text.
        :param rng: Random source for regularization; defaults to a fresh
            source seeded with ``config.seed`` when regularization is active.
        :returns: Emitted tokens in input order.
        """
        words = self.segmenter.segment(text)
        if not words:
            return []

        if rng is None and self.prob > 0.0:
            rng = self._rng_for(self.config.seed)

        emitted: list[EmittedToken] = []
        idx = 0
        while idx < len(words):
            result = self.matcher.match_from(words, idx, rng)
            if result.token is not None:
                emitted.append(result.token)
                idx += result.words_consumed
                continue

            # out-of-vocabulary fallback: one literal word with the sentinel id
            word = words[idx]
            log.debug(f"out-of-vocabulary word {render_text(word.text)!r} at {word.start}")
            emitted.append(
                EmittedToken(
                    text=word.text,
                    id=self.config.unk_id,
                    start=word.start,
                    end=word.end,
                    n_words=1,
                    is_oov=True,
                )
            )
            idx += 1

        return emitted

    @override
    def detokenize_to_tokens(self, ids: TokenIds) -> Tokens:
        """
        Map ids to vocabulary phrases.

        :raises DetokenizationError: If the tokenizer was built without
            detokenization support.
        :raises InvalidIdError: On the first id outside ``[0, vocab_size)``;
            no partial result is returned.
        """
        if not self.config.support_detokenization:
            raise DetokenizationError(
                f"{self.__class__.__name__} was built with support_detokenization=False"
            )

        tokens: Tokens = []
        for token_id in ids:
            phrase = self.vocab.lookup_word(token_id)
            if phrase is None:
                raise InvalidIdError(
                    "id not in vocabulary",
                    invalid_id=token_id,
                    vocab_size=self.vocab.size(),
                )
            tokens.append(phrase)
        return tokens
