"""Parallel processing mode helpers for batch tokenization."""

from enum import Enum
from typing import TYPE_CHECKING, Literal

from .errors import StrategyError
from .types import TokenIds, Tokens

if TYPE_CHECKING:
    from ._models.base import Tokenizer

ParallelStrategy = Literal["auto", "batch", "off"]


class ParallelMode(str, Enum):
    """Named parallelization modes for batch tokenization."""

    AUTO = "auto"
    BATCH = "batch"
    OFF = "off"

    @classmethod
    def get(cls, name: str) -> "ParallelMode":
        """Get parallel mode by name (case-insensitive)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise StrategyError(
                "unknown mode",
                invalid_name=name,
                available=[mode.value for mode in cls],
            )


def list_parallel_modes() -> list[str]:
    """Return available parallel mode names."""
    return [mode.value for mode in ParallelMode]


def tokenize_batch(
    tokenizer: "Tokenizer",
    texts: list[str],
    num_workers: int | None = None,
    parallel_mode: ParallelStrategy = "auto",
    seed: int | None = None,
) -> list[tuple[Tokens, TokenIds]]:
    """Tokenize many texts with a parallel mode given by name."""
    return tokenizer.tokenize_batch(
        texts,
        num_workers=num_workers,
        parallel_mode=ParallelMode.get(parallel_mode),
        seed=seed,
    )


__all__ = [
    "ParallelStrategy",
    "ParallelMode",
    "list_parallel_modes",
    "tokenize_batch",
]
