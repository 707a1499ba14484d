"""Synchronous HTTP client that executes request descriptors.

This module provides :class:`SyncClient`, the blocking transport used by
:class:`~tidalkit.api.TidalAPI`. It wraps :class:`httpx.Client` and
honours a single contract: execute a
:class:`~tidalkit.client.request.RequestDescriptor` and return the decoded
JSON body, or raise on a non-2xx response.

- Non-2xx responses raise :class:`~tidalkit.exceptions.RemoteError`
  carrying the original status code and body.
- Network and timeout failures raise
  :class:`~tidalkit.exceptions.TransportError`.
- Nothing is retried.

See Also:
    :class:`~tidalkit.client.async_client.AsyncClient` for the
    equivalent non-blocking implementation.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from tidalkit.client.request import RequestDescriptor
from tidalkit.client.response import extract_response_data
from tidalkit.exceptions import RemoteError, TransportError
from tidalkit.models import ClientConfig

logger = logging.getLogger(__name__)


class SyncClient:
    """Synchronous HTTP client for API calls.

    Must be used as a context manager so that the underlying connection
    pool is properly opened and closed.

    Args:
        config: Timeout and SSL settings.
        transport: Optional :mod:`httpx` transport, e.g.
            :class:`httpx.MockTransport` in tests.

    Example::

        with SyncClient(config) as client:
            data = client.execute(descriptor)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncClient:
        self._client = httpx.Client(
            timeout=self._config.timeout,
            verify=self._config.verify_ssl,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def execute(self, descriptor: RequestDescriptor) -> Any:
        """Send *descriptor* and return the decoded response body.

        Args:
            descriptor: The request to send.

        Returns:
            The decoded JSON body (or raw text for non-JSON bodies,
            ``None`` for empty ones).

        Raises:
            RemoteError: On any non-2xx status.
            TransportError: On network / timeout errors.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        logger.debug(
            "%s %s params=%s headers=%s",
            descriptor.method,
            descriptor.url,
            descriptor.params,
            descriptor.redacted_headers(),
        )
        try:
            response = self._client.request(**request_kwargs(descriptor))
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{descriptor.method} {descriptor.url} failed: {exc}"
            ) from exc

        raise_for_status(response, descriptor)
        return extract_response_data(response)


def request_kwargs(descriptor: RequestDescriptor) -> dict[str, Any]:
    """Translate a descriptor into keyword arguments for ``httpx`` ``request()``."""
    kwargs: dict[str, Any] = {
        "method": descriptor.method,
        "url": descriptor.url,
        "headers": descriptor.headers,
    }
    if descriptor.params:
        kwargs["params"] = descriptor.params
    if descriptor.form is not None:
        kwargs["data"] = descriptor.form
    if descriptor.basic_auth is not None:
        kwargs["auth"] = httpx.BasicAuth(*descriptor.basic_auth)
    return kwargs


def raise_for_status(response: httpx.Response, descriptor: RequestDescriptor) -> None:
    """Raise :class:`~tidalkit.exceptions.RemoteError` for a non-2xx response."""
    status = response.status_code
    if 200 <= status < 300:
        return

    body = response.text
    logger.debug("%s %s -> HTTP %d: %s", descriptor.method, descriptor.url, status, body[:200])
    prefix = f"HTTP {status}"
    summary = body[:200]
    message = f"{prefix}: {summary}" if summary else prefix
    raise RemoteError(message, status_code=status, body=body)
