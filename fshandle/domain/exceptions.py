"""Domain exceptions for fshandle.

These exceptions represent misuse of handles and other domain-level errors.
Failures of the underlying filesystem are never wrapped in these; they
propagate as the OSError the provider raised.
"""


class FsHandleDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class HandleMovedError(FsHandleDomainError):
    """Raised when a handle whose entry was deleted is used again."""

    pass


class InvalidConfigError(FsHandleDomainError):
    """Raised when configuration values fail validation."""

    pass
