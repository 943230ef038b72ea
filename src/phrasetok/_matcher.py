"""
Core phrase matching operations.
"""

from dataclasses import dataclass
from random import Random

from typing_extensions import deprecated

from .errors import TokenizationError
from .prefix_index import PrefixIndex
from .segmenter import WordSpan
from .strategy import SelectionStrategy
from .types import Phrase, TokenId
from .vocab import PHRASE_SEP, StringVocab


@dataclass(frozen=True, slots=True)
class EmittedToken:
    """A phrase chosen by the matcher and the input words it covers."""

    text: Phrase
    id: TokenId
    # offsets of the first and last consumed word in the original text
    start: int
    end: int
    n_words: int
    is_oov: bool = False


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of one matching step; ``token`` is ``None`` when nothing matched."""

    token: EmittedToken | None
    words_consumed: int

    @property
    def found(self) -> bool:
        return self.token is not None


class PhraseMatcher:
    """
    Greedy phrase matcher growing a candidate across word boundaries.

    The matcher is stateless between calls; the random source is supplied by
    the caller so concurrent calls stay independent.
    """

    def __init__(
        self,
        vocab: StringVocab,
        index: PrefixIndex,
        strategy: SelectionStrategy,
        prob: float = 0.0,
    ) -> None:
        self.vocab = vocab
        self.index = index
        self.strategy = strategy
        self.prob = prob

    def match_from(
        self, words: list[WordSpan], start: int, rng: Random | None = None
    ) -> MatchResult:
        """
        Consume one or more words starting at ``words[start]`` and emit one phrase.

        The candidate is extended one word at a time while the candidate
        followed by a space is still a prefix of some vocabulary phrase. Every
        extension that is itself a phrase is recorded, and the selection
        strategy picks which recorded length to emit.

        :param words: Word spans of the input text.
        :param start: Index of the first word to match.
        :param rng: Random source used only when regularization is active; may be
            ``None`` when the probability is 0.
        :returns: The emitted token, or a not-found result consuming one word.
        """
        if not 0 <= start < len(words):
            raise IndexError(f"start index {start} out of range for {len(words)} words")

        candidate = words[start].text
        n_words = 1
        # word counts of emittable candidates, strictly increasing
        lengths: list[int] = []
        phrases: dict[int, Phrase] = {}

        while True:
            match = self.index.lookup(candidate)
            if match.in_vocab:
                lengths.append(n_words)
                phrases[n_words] = candidate
            if start + n_words >= len(words):
                break
            # extendable only says some longer phrase exists, it must also
            # continue at a word boundary
            if not match.extendable or not self.index.has_prefix(candidate + PHRASE_SEP):
                break
            candidate = candidate + PHRASE_SEP + words[start + n_words].text
            n_words += 1

        if not lengths:
            return MatchResult(token=None, words_consumed=1)

        if rng is None:
            if self.prob > 0.0:
                raise ValueError("a random source is required when regularization is active")
            chosen = lengths[-1]
        else:
            chosen = self.strategy.select(lengths, self.prob, rng)
        phrase = phrases[chosen]
        vocab_id = self.vocab.lookup_id(phrase)
        # index and vocab are built from the same phrase list
        if vocab_id is None:
            raise TokenizationError(
                "prefix index and vocabulary disagree, kindly report issue",
                position=words[start].start,
            )

        token = EmittedToken(
            text=phrase,
            id=vocab_id,
            start=words[start].start,
            end=words[start + chosen - 1].end,
            n_words=chosen,
        )
        return MatchResult(token=token, words_consumed=chosen)


@deprecated(
    "Reference implementation for documentation only. Use `PhraseMatcher.match_from()` for production."
)
def slow_longest_match(phrases: set[Phrase], words: list[str], start: int) -> int | None:
    """
    Return the word count of the longest phrase starting at ``words[start]``.

    Tries every run length from longest to shortest, so each step costs
    O(n) joins. Returns ``None`` when not even the single word is a phrase.
    """
    for n_words in range(len(words) - start, 0, -1):
        if PHRASE_SEP.join(words[start : start + n_words]) in phrases:
            return n_words
    return None
