"""Request builders for the artist endpoints of the catalog API.

Each builder takes the typed call parameters, the resolved credential and
the API base URL, and returns a
:class:`~tidalkit.client.request.RequestDescriptor`. Query parameters are
sent in the order declared on the parameter model.
"""

from __future__ import annotations

from tidalkit.auth.credentials import Credential
from tidalkit.client.request import RequestDescriptor, build_request
from tidalkit.models import ArtistParams, PagedArtistParams

ARTISTS_PATH = "/v1/artists"


def _artist_request(
    base_url: str, suffix: str, params: ArtistParams, credential: Credential
) -> RequestDescriptor:
    return build_request(
        base_url,
        f"{ARTISTS_PATH}/{params.id}{suffix}",
        params=params.query_params(),
        credential=credential,
    )


def artist_request(base_url: str, params: ArtistParams, credential: Credential) -> RequestDescriptor:
    """``GET /v1/artists/{id}``"""
    return _artist_request(base_url, "", params, credential)


def bio_request(base_url: str, params: ArtistParams, credential: Credential) -> RequestDescriptor:
    """``GET /v1/artists/{id}/bio``"""
    return _artist_request(base_url, "/bio", params, credential)


def links_request(base_url: str, params: ArtistParams, credential: Credential) -> RequestDescriptor:
    """``GET /v1/artists/{id}/links``

    The server answers 404 when the artist has no links.
    """
    return _artist_request(base_url, "/links", params, credential)


def top_tracks_request(
    base_url: str, params: PagedArtistParams, credential: Credential
) -> RequestDescriptor:
    """``GET /v1/artists/{id}/toptracks``"""
    return _artist_request(base_url, "/toptracks", params, credential)


def albums_request(
    base_url: str, params: PagedArtistParams, credential: Credential
) -> RequestDescriptor:
    """``GET /v1/artists/{id}/albums``"""
    return _artist_request(base_url, "/albums", params, credential)
