r"""Exceptions raised by the retry drivers and the HTTP adapters."""

from __future__ import annotations

__all__ = ["HttpRequestError", "RetryCanceledError", "RetryDeadlineExceededError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class RetryCanceledError(RuntimeError):
    """Exception raised when a retry sequence is canceled during a pause.

    Cancellation is always terminal: once raised, the operation is not
    invoked again.

    Args:
        message: A descriptive error message.
        attempt: The number of operation invocations made before the
            cancellation.
        cause: The error reported by the last attempt, if any.

    Example:
        ```pycon
        >>> from abackoff.exceptions import RetryCanceledError
        >>> raise RetryCanceledError("retry canceled after 3 attempts", attempt=3)
        Traceback (most recent call last):
            ...
        abackoff.exceptions.RetryCanceledError: retry canceled after 3 attempts

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        attempt: int = 0,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.attempt = attempt
        self.cause = cause


class RetryDeadlineExceededError(RetryCanceledError):
    """Exception raised when the retry deadline expires during a pause."""


class HttpRequestError(RuntimeError):
    """Exception raised when an HTTP request fails.

    Args:
        method: The HTTP method (e.g., "GET", "POST").
        url: The URL that was requested.
        message: A descriptive error message.
        status_code: The HTTP status code, if a response was received.
        response: The HTTP response, if one was received.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from abackoff.exceptions import HttpRequestError
        >>> error = HttpRequestError(
        ...     method="GET",
        ...     url="https://api.example.com/data",
        ...     message="GET request to https://api.example.com/data failed with status 503",
        ...     status_code=503,
        ... )
        >>> error.status_code
        503

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response = response
        self.cause = cause
