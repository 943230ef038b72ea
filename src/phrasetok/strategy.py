"""Resolution policies for choosing among competing phrase matches."""

from abc import ABC, abstractmethod
from random import Random
from typing import Final, Literal, override

from .errors import StrategyError

# =========================================================================================

# match selection strategies


class SelectionStrategy(ABC):
    """
    Base strategy for resolving which recorded match length is emitted.

    ``lengths`` holds the word counts of every emittable match found while
    growing a candidate phrase, strictly increasing and never empty.
    """

    @abstractmethod
    def select(self, lengths: list[int], prob: float, rng: Random) -> int:
        """Return the chosen word count, one of ``lengths``."""


class LongestMatchStrategy(SelectionStrategy):
    """Strategy that always emits the longest match and never samples."""

    @override
    def select(self, lengths: list[int], prob: float, rng: Random) -> int:
        return lengths[-1]


class ShorterMatchStrategy(SelectionStrategy):
    """
    Strategy that, with probability ``prob``, emits a strictly shorter match.

    One uniform sample is drawn per resolution whenever ``prob`` is positive.
    When it falls below ``prob`` and a shorter match exists, the emitted
    length is picked uniformly among the shorter ones. Otherwise the longest
    match wins.
    """

    @override
    def select(self, lengths: list[int], prob: float, rng: Random) -> int:
        if prob <= 0.0:
            return lengths[-1]
        if rng.random() < prob and len(lengths) > 1:
            return lengths[rng.randrange(len(lengths) - 1)]
        return lengths[-1]


class UniformMatchStrategy(SelectionStrategy):
    """
    Strategy that, with probability ``prob``, emits any match uniformly.

    Unlike ``ShorterMatchStrategy`` the longest match stays a candidate of the
    random pick.
    """

    @override
    def select(self, lengths: list[int], prob: float, rng: Random) -> int:
        if prob <= 0.0:
            return lengths[-1]
        if rng.random() < prob:
            return rng.choice(lengths)
        return lengths[-1]


StrategyName = Literal["longest", "shorter", "uniform"]

_SELECTION_STRATEGIES: Final[dict[str, type[SelectionStrategy]]] = {
    "longest": LongestMatchStrategy,
    "shorter": ShorterMatchStrategy,
    "uniform": UniformMatchStrategy,
}


def list_strategies() -> list[str]:
    """Return available selection strategy names."""
    return list(_SELECTION_STRATEGIES.keys())


def get_strategy(name: StrategyName = "shorter") -> SelectionStrategy:
    """
    Create a selection strategy by name.

    :param name: Strategy identifier: "longest", "shorter", or "uniform".
    :raises StrategyError: If name is unknown.
    """
    if name not in _SELECTION_STRATEGIES:
        raise StrategyError(
            "unknown strategy name",
            invalid_name=name,
            available=list(_SELECTION_STRATEGIES.keys()),
        )
    return _SELECTION_STRATEGIES[name]()


__all__ = [
    "StrategyName",
    "SelectionStrategy",
    "LongestMatchStrategy",
    "ShorterMatchStrategy",
    "UniformMatchStrategy",
    "list_strategies",
    "get_strategy",
]
