r"""Run httpx requests under the retry drivers.

This module adapts an HTTP request into a retried operation:

- timeouts and network errors (``httpx.RequestError``) are retried,
- responses with a status in ``status_forcelist`` are retried,
- other error responses (status >= 400) stop the sequence,
- any other response ends the sequence and is returned.
"""

from __future__ import annotations

__all__ = ["RETRY_STATUS_CODES", "request_with_backoff", "request_with_backoff_async"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from abackoff.core.config import BackoffConfig
from abackoff.exceptions import HttpRequestError
from abackoff.retry.executor import retry
from abackoff.retry.executor_async import retry_async
from abackoff.retry.outcome import RetryOutcome

if TYPE_CHECKING:
    import asyncio
    import threading
    from collections.abc import Callable

    from abackoff.backoff.base import BaseBackoffStrategy
    from abackoff.callbacks import RetryInfo

logger: logging.Logger = logging.getLogger(__name__)

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def _evaluate_response(
    response: httpx.Response,
    method: str,
    url: str,
    status_forcelist: tuple[int, ...],
) -> RetryOutcome:
    if response.status_code in status_forcelist:
        return RetryOutcome.again(
            HttpRequestError(
                method=method,
                url=url,
                message=f"{method} request to {url} failed with status {response.status_code}",
                status_code=response.status_code,
                response=response,
            )
        )
    if response.status_code >= 400:
        logger.debug(
            f"{method} request to {url} failed with non-retryable status {response.status_code}"
        )
        return RetryOutcome.stop(
            HttpRequestError(
                method=method,
                url=url,
                message=f"{method} request to {url} failed with status {response.status_code}",
                status_code=response.status_code,
                response=response,
            )
        )
    return RetryOutcome.done()


def _evaluate_exception(exc: httpx.RequestError, method: str, url: str) -> RetryOutcome:
    if isinstance(exc, httpx.TimeoutException):
        message = f"{method} request to {url} timed out"
    else:
        message = f"{method} request to {url} failed: {exc}"
    return RetryOutcome.again(HttpRequestError(method=method, url=url, message=message, cause=exc))


def request_with_backoff(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    strategy: BaseBackoffStrategy | None = None,
    cancel: threading.Event | None = None,
    timeout: float | None = None,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    on_retry: Callable[[RetryInfo], None] | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send an HTTP request, retrying transient failures with backoff.

    Args:
        client: The httpx client used to send the request.
        method: The HTTP method (e.g., "GET", "POST").
        url: The URL to request.
        strategy: Optional backoff strategy. A new strategy with the
            default configuration is created if omitted.
        cancel: Optional event that aborts the retries.
        timeout: Optional maximum duration in seconds of the retries.
        status_forcelist: HTTP status codes that trigger a retry.
        on_retry: Optional callback invoked before each pause.
        **kwargs: Additional keyword arguments passed to
            ``client.request``.

    Returns:
        The first response that is neither an error nor retryable.

    Raises:
        HttpRequestError: If a non-retryable error status is received.
        RetryCanceledError: If the retries are canceled or time out.

    Example:
        ```pycon
        >>> import httpx
        >>> from abackoff.http import request_with_backoff
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     response = request_with_backoff(client, "GET", "https://api.example.com/data")
        ...

        ```
    """
    if strategy is None:
        strategy = BackoffConfig().build()
    last_response: httpx.Response | None = None

    def operation(attempt: int) -> RetryOutcome:
        nonlocal last_response
        logger.debug(f"{method} request to {url} (attempt {attempt + 1})")
        try:
            response = client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            return _evaluate_exception(exc, method, url)
        last_response = response
        return _evaluate_response(response, method, url, status_forcelist)

    retry(strategy, operation, cancel=cancel, timeout=timeout, on_retry=on_retry)
    return last_response


async def request_with_backoff_async(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    strategy: BaseBackoffStrategy | None = None,
    cancel: asyncio.Event | None = None,
    timeout: float | None = None,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    on_retry: Callable[[RetryInfo], None] | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send an async HTTP request, retrying transient failures with
    backoff.

    Same behavior as ``request_with_backoff`` with an
    ``httpx.AsyncClient``.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from abackoff.http import request_with_backoff_async
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...         return await request_with_backoff_async(
        ...             client, "GET", "https://api.example.com/data"
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """
    if strategy is None:
        strategy = BackoffConfig().build()
    last_response: httpx.Response | None = None

    async def operation(attempt: int) -> RetryOutcome:
        nonlocal last_response
        logger.debug(f"{method} request to {url} (attempt {attempt + 1})")
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            return _evaluate_exception(exc, method, url)
        last_response = response
        return _evaluate_response(response, method, url, status_forcelist)

    await retry_async(strategy, operation, cancel=cancel, timeout=timeout, on_retry=on_retry)
    return last_response
