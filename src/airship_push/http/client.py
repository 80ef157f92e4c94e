"""HTTP – AirshipClient, the httpx-backed transport."""
from __future__ import annotations

from typing import Any, Mapping

import httpx

from airship_push import __version__
from airship_push.common.endpoints import ACCEPT_HEADER
from airship_push.common.transport import TransportResponse
from airship_push.config import ClientSettings
from airship_push.errors import AirshipFailure, ForbiddenError, TransportError, UnauthorizedError
from airship_push.http.retry import TenacityRetryPolicy
from airship_push.observability.logging import Logger, get_logger
from airship_push.push.core import Push, ScheduledPush


class AirshipClient:
    """Synchronous transport for the push service.

    Authenticates with HTTP basic auth (app key / master secret), resolves
    relative URLs against ``settings.base_url`` and maps unsuccessful
    responses onto the error hierarchy::

        401           -> UnauthorizedError
        403           -> ForbiddenError
        other non-2xx -> AirshipFailure

    Connection failures and 5xx responses are retried up to
    ``settings.max_retries`` times.

    Usage::

        with AirshipClient(key="app-key", secret="master-secret") as airship:
            push = airship.create_push()
            push.audience = audience.all_()
            push.notification = payload.notification(alert="Hello")
            push.device_types = payload.all_()
            push.send_push()
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        key: str | None = None,
        secret: str | None = None,
        retry_wait: Any = None,
        logger: Logger | None = None,
        **kwargs: Any,
    ) -> None:
        if settings is None:
            settings = ClientSettings(key=key or "", secret=secret or "")
        self.settings = settings
        self._logger = logger or get_logger(__name__)
        self._retry = TenacityRetryPolicy(
            max_attempts=settings.max_retries + 1,
            wait=retry_wait,
        )
        self._client = httpx.Client(
            base_url=settings.base_url,
            auth=(settings.key, settings.secret),
            timeout=settings.timeout,
            headers={
                "Accept": ACCEPT_HEADER,
                "User-Agent": f"airship-push/{__version__}",
            },
            **kwargs,
        )

    def __enter__(self) -> "AirshipClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def send_request(
        self,
        method: str,
        url: str,
        body: str | None = None,
        content_type: str | None = None,
    ) -> TransportResponse:
        headers = {"Content-Type": content_type} if content_type else {}
        response = self._retry.execute(lambda: self._request(method, url, body, headers))
        self._logger.debug(
            "http.response",
            method=method,
            url=str(response.request.url),
            status_code=response.status_code,
        )
        return {"body": _parse_body(response), "code": response.status_code}

    def _request(
        self,
        method: str,
        url: str,
        body: str | None,
        headers: Mapping[str, str],
    ) -> httpx.Response:
        try:
            response = self._client.request(method, url, content=body, headers=headers)
        except httpx.TimeoutException as exc:
            raise AirshipFailure(f"Request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise AirshipFailure(f"Request failed: {method} {url}: {exc}", cause=exc) from exc
        if response.is_success:
            return response
        error = _error_for(response, method, url)
        self._logger.warning("http.error", **error.to_dict())
        raise error

    # ------------------------------------------------------------------
    # Entity factories
    # ------------------------------------------------------------------

    def create_push(self) -> Push:
        return Push(self)

    def create_scheduled_push(self) -> ScheduledPush:
        return ScheduledPush(self)


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_for(response: httpx.Response, method: str, url: str) -> TransportError:
    status = response.status_code
    body = _parse_body(response)
    if status == 401:
        return UnauthorizedError(
            f"Client is not authorized to make this request: {method} {url}",
            status_code=status,
        )
    if status == 403:
        return ForbiddenError(
            f"Client is forbidden from making this request: {method} {url}",
            status_code=status,
        )
    details = body if isinstance(body, Mapping) else {}
    error = details.get("error")
    return AirshipFailure(
        f"HTTP {status} from {method} {url}" + (f": {error}" if error else ""),
        status_code=status,
        error=error,
        error_code=details.get("error_code"),
        details=details.get("details"),
        response_body=body,
    )


__all__ = ["AirshipClient"]
