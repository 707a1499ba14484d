"""Artist metadata resource.

:class:`ArtistAPI` and :class:`AsyncArtistAPI` expose the five artist
endpoints. Every method resolves its credential first, so a call without
``client_id`` or ``access_token`` (and without a configured fallback)
fails with :class:`~tidalkit.exceptions.ConfigurationError` before any
request is sent.

``country_code`` defaults to the configured country (``US`` unless
overridden); ``limit`` and ``offset`` default to 50 and 0.
"""

from __future__ import annotations

from typing import Optional

from tidalkit.auth.credentials import Credential, resolve_credential
from tidalkit.client.async_client import AsyncClient
from tidalkit.client.response import map_response
from tidalkit.client.sync_client import SyncClient
from tidalkit.endpoints import artist as endpoints
from tidalkit.models import (
    DEFAULT_PAGE_LIMIT,
    Artist,
    ArtistAlbums,
    ArtistBio,
    ArtistLinks,
    ArtistParams,
    ClientConfig,
    PagedArtistParams,
    TopTracks,
)


class _ArtistResource:
    """Credential and parameter resolution shared by the sync and async resources."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    def _credential(self, client_id: Optional[str], access_token: Optional[str]) -> Credential:
        if client_id or access_token:
            return resolve_credential(client_id, access_token)
        return resolve_credential(self._config.client_id, self._config.access_token)

    def _params(self, id: int, country_code: Optional[str]) -> ArtistParams:
        return ArtistParams(id=id, country_code=country_code or self._config.country_code)

    def _paged_params(
        self, id: int, country_code: Optional[str], limit: int, offset: int
    ) -> PagedArtistParams:
        return PagedArtistParams(
            id=id,
            country_code=country_code or self._config.country_code,
            limit=limit,
            offset=offset,
        )


class ArtistAPI(_ArtistResource):
    """Blocking artist endpoints.

    Args:
        client: An entered :class:`~tidalkit.client.sync_client.SyncClient`.
        config: Base URLs, default country and fallback credentials.
    """

    def __init__(self, client: SyncClient, config: ClientConfig) -> None:
        super().__init__(config)
        self._client = client

    def get(
        self,
        id: int,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> Artist:
        """Get info about an artist."""
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.artist_request(
            self._config.api_url, self._params(id, country_code), credential
        )
        return map_response(Artist, self._client.execute(descriptor))

    def bio(
        self,
        id: int,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> ArtistBio:
        """Get an artist's bio."""
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.bio_request(
            self._config.api_url, self._params(id, country_code), credential
        )
        return map_response(ArtistBio, self._client.execute(descriptor))

    def links(
        self,
        id: int,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> ArtistLinks:
        """Get an artist's links.

        The API answers 404 when an artist has no links. That surfaces as
        :class:`~tidalkit.exceptions.RemoteError` with ``status_code == 404``,
        like any other non-2xx response.
        """
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.links_request(
            self._config.api_url, self._params(id, country_code), credential
        )
        return map_response(ArtistLinks, self._client.execute(descriptor))

    def top_tracks(
        self,
        id: int,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> TopTracks:
        """Get one page of an artist's top tracks."""
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.top_tracks_request(
            self._config.api_url,
            self._paged_params(id, country_code, limit, offset),
            credential,
        )
        return map_response(TopTracks, self._client.execute(descriptor))

    def albums(
        self,
        id: int,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> ArtistAlbums:
        """Get one page of an artist's albums."""
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.albums_request(
            self._config.api_url,
            self._paged_params(id, country_code, limit, offset),
            credential,
        )
        return map_response(ArtistAlbums, self._client.execute(descriptor))


class AsyncArtistAPI(_ArtistResource):
    """Non-blocking artist endpoints. Mirrors :class:`ArtistAPI`."""

    def __init__(self, client: AsyncClient, config: ClientConfig) -> None:
        super().__init__(config)
        self._client = client

    async def get(
        self,
        id: int,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> Artist:
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.artist_request(
            self._config.api_url, self._params(id, country_code), credential
        )
        return map_response(Artist, await self._client.execute(descriptor))

    async def bio(
        self,
        id: int,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> ArtistBio:
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.bio_request(
            self._config.api_url, self._params(id, country_code), credential
        )
        return map_response(ArtistBio, await self._client.execute(descriptor))

    async def links(
        self,
        id: int,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> ArtistLinks:
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.links_request(
            self._config.api_url, self._params(id, country_code), credential
        )
        return map_response(ArtistLinks, await self._client.execute(descriptor))

    async def top_tracks(
        self,
        id: int,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> TopTracks:
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.top_tracks_request(
            self._config.api_url,
            self._paged_params(id, country_code, limit, offset),
            credential,
        )
        return map_response(TopTracks, await self._client.execute(descriptor))

    async def albums(
        self,
        id: int,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        country_code: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> ArtistAlbums:
        credential = self._credential(client_id, access_token)
        descriptor = endpoints.albums_request(
            self._config.api_url,
            self._paged_params(id, country_code, limit, offset),
            credential,
        )
        return map_response(ArtistAlbums, await self._client.execute(descriptor))
