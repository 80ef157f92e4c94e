"""HTTP – TenacityRetryPolicy used by :class:`AirshipClient`."""
from __future__ import annotations

from typing import Any, Callable, TypeVar

import tenacity

from airship_push.errors import AirshipFailure

T = TypeVar("T")


def is_retryable(exc: BaseException) -> bool:
    """Retry connection failures and 5xx responses, never 4xx."""
    return isinstance(exc, AirshipFailure) and exc.is_retryable


class TenacityRetryPolicy:
    """Retry policy backed by the ``tenacity`` library.

    Parameters
    ----------
    max_attempts:
        Maximum number of call attempts (including the first call).
        ``1`` disables retrying.
    wait:
        A ``tenacity`` wait strategy. Defaults to
        ``wait_exponential(multiplier=0.5, max=8)``.
    retry:
        A ``tenacity`` retry predicate. Defaults to :func:`is_retryable`.
    """

    def __init__(
        self,
        max_attempts: int = 1,
        wait: Any = None,
        retry: Any = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.max_attempts = max_attempts
        self._wait = wait or tenacity.wait_exponential(multiplier=0.5, max=8)
        self._retry = retry or tenacity.retry_if_exception(is_retryable)

    def _build_retrying(self) -> tenacity.Retrying:
        return tenacity.Retrying(
            stop=tenacity.stop_after_attempt(self.max_attempts),
            wait=self._wait,
            retry=self._retry,
            reraise=True,
        )

    def execute(self, func: Callable[[], T]) -> T:
        """Execute *func* synchronously, re-raising the last error."""
        return self._build_retrying()(func)


__all__ = ["TenacityRetryPolicy", "is_retryable"]
