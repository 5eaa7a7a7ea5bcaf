from __future__ import annotations


class LazyFetchError(Exception):
    """Base error for lazyfetch."""


class ApplicationError(LazyFetchError):
    """
    Raised when the remote API answers with a client error carrying a body.

    The body text is the message and the HTTP status is kept on
    ``status_code``.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"ApplicationError(status_code={self.status_code!r}, message={self.message!r})"


class DisconnectedError(LazyFetchError):
    """Raised when a response is read after its fetch was cancelled."""


class TransportError(LazyFetchError):
    """Wraps a fetch failure or a cached terminal error on re-raise."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.cause = cause


class ContentError(LazyFetchError, ValueError):
    """Raised when a body does not hold the requested JSON type."""


class BodyEncodingError(AssertionError):
    """Raised when an error body the API guarantees to be UTF-8 is not."""
