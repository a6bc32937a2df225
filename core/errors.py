"""Error types raised by the Result container."""

from __future__ import annotations

from core.failures import message_of


class ResultError(Exception):
    """Base error for Result extraction failures."""

    def __init__(self, message: str) -> None:
        """Initialize with error message."""
        self.message = message
        super().__init__(message)


class NoValuePresentError(ResultError, LookupError):
    """Raised when a value is requested from an empty Result."""

    def __init__(self, message: str = "No value present") -> None:
        """Initialize with error message."""
        super().__init__(message)


class FailurePresentError(ResultError, RuntimeError):
    """
    Raised when a value is requested from a Result holding a failure.

    The captured failure is always attached as ``__cause__``.
    """

    def __init__(self, failure: BaseException) -> None:
        """
        Initialize from the captured failure.

        Args:
            failure: The failure held by the Result.
        """
        self.failure = failure
        super().__init__(f"Result holds a failure: {type(failure).__name__}: {message_of(failure)}")


class NoValueProducedError(ResultError, ValueError):
    """Captured when a strict supplier returns None instead of a value."""

    def __init__(self, message: str = "Supplier produced no value") -> None:
        """Initialize with error message."""
        super().__init__(message)
