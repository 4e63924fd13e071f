"""CLI error handling with actionable hints.

Provides consistent error formatting for all fshandle CLI commands.
"""

import re

import click

from fshandle.domain.exceptions import FsHandleDomainError


class FsHandleCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise FsHandleCliError(
            "Destination already exists",
            hint="Choose another destination or delete it first",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present."""
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def format_error_message(exception: Exception, operation_name: str) -> str:
    """Format an exception into a user-friendly error message.

    - FsHandleDomainError: Uses the error's message directly
    - OSError: Names the path and adds context about permissions/disk space
    - re.error: Points at the malformed pattern
    - Other exceptions: Includes the exception text with operation context

    Args:
        exception: The exception that was caught.
        operation_name: Name of the operation for error messages (e.g., "copy").

    Returns:
        User-friendly error message string.
    """
    if isinstance(exception, FsHandleDomainError):
        return exception.message
    if isinstance(exception, OSError):
        return (
            f"I/O error during {operation_name}: {exception}. "
            "Check file permissions, disk space, and filesystem access."
        )
    if isinstance(exception, re.error):
        return f"Invalid pattern: {exception}"
    return f"{operation_name.capitalize()} error: {exception}"


def to_cli_error(exception: Exception, operation_name: str) -> FsHandleCliError:
    """Convert any exception raised by a command into a FsHandleCliError."""
    hint = None
    if isinstance(exception, FsHandleDomainError):
        hint = exception.hint
    elif not isinstance(exception, (OSError, re.error)):
        hint = "Run with --verbose for more details"
    return FsHandleCliError(format_error_message(exception, operation_name), hint=hint)
