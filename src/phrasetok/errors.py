"""Custom exception hierarchy for phrasetok errors."""

from .types import TokenId


class PhraseTokError(Exception):
    """Base exception for all phrasetok errors."""


class ConstructionError(PhraseTokError):
    """Raised when a tokenizer cannot be built from its configuration."""

    def __init__(
        self,
        message: str,
        *,
        vocab_size: int | None = None,
        invalid_entry: str | None = None,
    ) -> None:
        """Initialize with optional vocab size and offending entry appended to the message."""
        extra = " "
        if vocab_size is not None:
            extra += f"(vocab size: {vocab_size}) "
        if invalid_entry is not None:
            extra += f"(invalid entry: {invalid_entry!r}) "
        super().__init__(message + extra)
        self.vocab_size = vocab_size
        self.invalid_entry = invalid_entry


class VocabularyError(PhraseTokError):
    """Raised when vocabulary operations fail."""


class InvalidIdError(VocabularyError):
    """Raised when an id outside ``[0, vocab_size)`` is detokenized."""

    def __init__(self, message: str, *, invalid_id: TokenId, vocab_size: int) -> None:
        super().__init__(
            f"{message} (invalid id: {invalid_id}) (vocab size: {vocab_size})"
        )
        self.invalid_id = invalid_id
        self.vocab_size = vocab_size


class DetokenizationError(PhraseTokError):
    """Raised when detokenization is requested but not supported."""


class StrategyError(PhraseTokError):
    """Raised when a named strategy or mode cannot be resolved."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available


class TokenizationError(PhraseTokError):
    """Raised when tokenization reaches an inconsistent internal state."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position
