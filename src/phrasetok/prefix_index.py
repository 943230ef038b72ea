"""
Prefix query structures over vocabulary phrases.

The phrase matcher only relies on the ``PrefixIndex`` contract, so any
implementation answering membership and prefix queries can be swapped in.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import override

from .errors import ConstructionError, StrategyError
from .types import Phrase


@dataclass(frozen=True, slots=True)
class PrefixMatch:
    """Result of querying a candidate phrase against the index."""

    # candidate is exactly a vocabulary phrase
    in_vocab: bool
    # candidate is a strict prefix of a longer vocabulary phrase
    extendable: bool

    @property
    def dead_end(self) -> bool:
        return not (self.in_vocab or self.extendable)


class PrefixIndex(ABC):
    """
    Read-only index answering membership and prefix queries.

    The matcher stops growing a candidate once ``lookup`` reports it is not
    ``extendable``, and otherwise asks ``has_prefix`` whether a longer phrase
    continues after a word boundary.
    """

    @abstractmethod
    def has_prefix(self, prefix: str) -> bool:
        """Return whether some vocabulary phrase starts with ``prefix``."""

    @abstractmethod
    def lookup(self, key: str) -> PrefixMatch:
        """Classify ``key`` as a member and/or strict prefix of the vocabulary."""


class _TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False


class TriePrefixIndex(PrefixIndex):
    """Character trie over vocabulary phrases; queries cost O(len(key))."""

    def __init__(self, phrases: Iterable[Phrase]) -> None:
        self._root = _TrieNode()
        for phrase in phrases:
            if not phrase:
                raise ConstructionError("cannot index an empty phrase")
            node = self._root
            for ch in phrase:
                node = node.children.setdefault(ch, _TrieNode())
            node.terminal = True

    def _walk(self, key: str) -> _TrieNode | None:
        node = self._root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @override
    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    @override
    def lookup(self, key: str) -> PrefixMatch:
        node = self._walk(key)
        if node is None:
            return PrefixMatch(in_vocab=False, extendable=False)
        return PrefixMatch(in_vocab=node.terminal, extendable=bool(node.children))


class PrefixSetIndex(PrefixIndex):
    """
    Hash set of every prefix of every phrase.

    Uses memory quadratic in phrase length but answers each query with one
    hash lookup. Suited to small vocabularies and as a reference for tests.
    """

    def __init__(self, phrases: Iterable[Phrase]) -> None:
        self._members: set[Phrase] = set()
        # prefix -> True when a strictly longer phrase extends it
        self._prefixes: dict[str, bool] = {}
        for phrase in phrases:
            if not phrase:
                raise ConstructionError("cannot index an empty phrase")
            self._members.add(phrase)
            for end in range(1, len(phrase) + 1):
                prefix = phrase[:end]
                extended = end < len(phrase)
                self._prefixes[prefix] = self._prefixes.get(prefix, False) or extended

    @override
    def has_prefix(self, prefix: str) -> bool:
        return prefix == "" or prefix in self._prefixes

    @override
    def lookup(self, key: str) -> PrefixMatch:
        if key == "":
            return PrefixMatch(in_vocab=False, extendable=bool(self._prefixes))
        return PrefixMatch(
            in_vocab=key in self._members,
            extendable=self._prefixes.get(key, False),
        )


class IndexKind(str, Enum):
    """Named prefix index implementations."""

    TRIE = "trie"
    PREFIX_SET = "prefix-set"

    @classmethod
    def get(cls, name: str) -> "IndexKind":
        """Get index kind by name (case-insensitive)."""
        try:
            return cls[name.upper().replace("-", "_")]
        except KeyError:
            raise StrategyError(
                "unknown prefix index",
                invalid_name=name,
                available=[kind.value for kind in cls],
            )


_INDEX_REGISTRY: dict[IndexKind, type[PrefixIndex]] = {
    IndexKind.TRIE: TriePrefixIndex,
    IndexKind.PREFIX_SET: PrefixSetIndex,
}


def build_index(phrases: Iterable[Phrase], kind: str = "trie") -> PrefixIndex:
    """Build the named prefix index over ``phrases``."""
    return _INDEX_REGISTRY[IndexKind.get(kind)](phrases)


def list_indexes() -> list[str]:
    """Return available prefix index names."""
    return [kind.value for kind in IndexKind]
