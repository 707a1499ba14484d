"""Top-level facades: :class:`TidalAPI` (blocking) and :class:`AsyncTidalAPI`.

Each facade owns one HTTP client (and thus one connection pool) for its
lifetime and exposes the ``artist`` and ``auth`` resources. Both are
context managers.

Example::

    from tidalkit import TidalAPI

    with TidalAPI() as api:
        artist = api.artist.get(3346, client_id="...")
        tracks = api.artist.top_tracks(3346, client_id="...", limit=10)
"""

from __future__ import annotations

from typing import Optional

import httpx

from tidalkit.client.async_client import AsyncClient
from tidalkit.client.sync_client import SyncClient
from tidalkit.config import resolve_config
from tidalkit.models import ClientConfig
from tidalkit.resources.artist import ArtistAPI, AsyncArtistAPI
from tidalkit.resources.auth import AsyncAuthAPI, AuthAPI


class TidalAPI:
    """Blocking entry point to the catalog and authorization APIs.

    Args:
        config: Explicit configuration. When ``None`` it is resolved from
            the environment and ``./tidalkit.json`` via
            :func:`~tidalkit.config.resolve_config`.
        transport: Optional :mod:`httpx` transport, e.g. for tests.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config or resolve_config()
        self._client = SyncClient(self.config, transport=transport)
        self.artist = ArtistAPI(self._client, self.config)
        self.auth = AuthAPI(self._client, self.config)

    def __enter__(self) -> TidalAPI:
        self._client.__enter__()
        return self

    def __exit__(self, *args: object) -> None:
        self._client.__exit__(*args)


class AsyncTidalAPI:
    """Non-blocking entry point. Mirrors :class:`TidalAPI`.

    Example::

        async with AsyncTidalAPI() as api:
            bio = await api.artist.bio(3346, access_token=token)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or resolve_config()
        self._client = AsyncClient(self.config, transport=transport)
        self.artist = AsyncArtistAPI(self._client, self.config)
        self.auth = AsyncAuthAPI(self._client, self.config)

    async def __aenter__(self) -> AsyncTidalAPI:
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._client.__aexit__(*args)
