"""PhraseTok: multi-word phrase tokenization library."""

from ._matcher import EmittedToken, MatchResult, PhraseMatcher
from ._models.base import Tokenizer
from ._models.phrase import PhraseTokenizer
from .config import PhraseTokenizerConfig
from .errors import (
    ConstructionError,
    DetokenizationError,
    InvalidIdError,
    PhraseTokError,
    StrategyError,
    VocabularyError,
)
from .factory import create, from_vocab_file, get_tokenizer
from .parallel import ParallelMode, list_parallel_modes
from .prefix_index import (
    PrefixIndex,
    PrefixMatch,
    PrefixSetIndex,
    TriePrefixIndex,
    list_indexes,
)
from .segmenter import WhitespaceSegmenter, WordSpan
from .strategy import (
    LongestMatchStrategy,
    SelectionStrategy,
    ShorterMatchStrategy,
    UniformMatchStrategy,
    get_strategy,
    list_strategies,
)
from .vocab import StringVocab, load_vocab

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("phrasetok")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Tokenizer",
    "PhraseTokenizer",
    "PhraseTokenizerConfig",
    "PhraseMatcher",
    "MatchResult",
    "EmittedToken",
    "StringVocab",
    "PrefixIndex",
    "PrefixMatch",
    "TriePrefixIndex",
    "PrefixSetIndex",
    "WhitespaceSegmenter",
    "WordSpan",
    "SelectionStrategy",
    "LongestMatchStrategy",
    "ShorterMatchStrategy",
    "UniformMatchStrategy",
    "ParallelMode",
    "PhraseTokError",
    "ConstructionError",
    "VocabularyError",
    "InvalidIdError",
    "DetokenizationError",
    "StrategyError",
    "create",
    "get_tokenizer",
    "from_vocab_file",
    "get_strategy",
    "load_vocab",
    "list_indexes",
    "list_parallel_modes",
    "list_strategies",
]
