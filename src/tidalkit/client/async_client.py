"""Asynchronous HTTP client -- mirrors :class:`~tidalkit.client.sync_client.SyncClient` API.

This module provides :class:`AsyncClient`, the non-blocking counterpart to
:class:`~tidalkit.client.sync_client.SyncClient`. It wraps
:class:`httpx.AsyncClient` and shares the descriptor translation and the
status-to-error mapping, so a request behaves the same on either client.
Suspension is cooperative; several calls may be in flight at once on one
client since no call holds state across requests.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from tidalkit.client.request import RequestDescriptor
from tidalkit.client.response import extract_response_data
from tidalkit.client.sync_client import raise_for_status, request_kwargs
from tidalkit.exceptions import TransportError
from tidalkit.models import ClientConfig

logger = logging.getLogger(__name__)


class AsyncClient:
    """Asynchronous HTTP client for API calls.

    Must be used as an async context manager.

    Args:
        config: Timeout and SSL settings.
        transport: Optional :mod:`httpx` async transport.

    Example::

        async with AsyncClient(config) as client:
            data = await client.execute(descriptor)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncClient:
        self._client = httpx.AsyncClient(
            timeout=self._config.timeout,
            verify=self._config.verify_ssl,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def execute(self, descriptor: RequestDescriptor) -> Any:
        """Send *descriptor* and return the decoded response body.

        Behaves identically to
        :meth:`~tidalkit.client.sync_client.SyncClient.execute` but is
        non-blocking.

        Raises:
            RemoteError: On any non-2xx status.
            TransportError: On network / timeout errors.
        """
        assert self._client is not None, "Client not initialised -- use as async context manager"

        logger.debug(
            "%s %s params=%s headers=%s",
            descriptor.method,
            descriptor.url,
            descriptor.params,
            descriptor.redacted_headers(),
        )
        try:
            response = await self._client.request(**request_kwargs(descriptor))
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{descriptor.method} {descriptor.url} failed: {exc}"
            ) from exc

        raise_for_status(response, descriptor)
        return extract_response_data(response)
