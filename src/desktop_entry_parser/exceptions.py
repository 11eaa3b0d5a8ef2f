"""Exception classes for desktop entry parsing."""


class DesktopEntryError(Exception):
    """Base exception for desktop entry parsing."""

    error_prefix: str = "Desktop entry error"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path of the desktop file that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class EntryIOError(DesktopEntryError):
    """Raised when a desktop file cannot be read.

    The underlying exception is kept on ``cause`` and chained as
    ``__cause__`` by the raising site.
    """

    error_prefix = "Failed to read desktop entry"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize error with the exception that caused the read failure.

        Args:
            message: Error message describing the failure.
            target: Optional path of the desktop file that failed.
            cause: Exception raised by the underlying read.

        """
        super().__init__(message, target)
        self.cause = cause


class FormatError(DesktopEntryError):
    """Raised when desktop entry content violates the format or schema."""

    error_prefix = "Invalid desktop entry"
