"""Canonical Pydantic models shared across all tidalkit modules.

This is the single source of truth for data shapes in the project. The
models fall into three groups:

**Configuration** -- :class:`ClientConfig`, resolved by
:func:`tidalkit.config.resolve_config`.

**Call parameters** -- typed inputs of each endpoint, serialised in field
order into query strings or form bodies: :class:`ArtistParams`,
:class:`PagedArtistParams`, :class:`DeviceTokenParams`, and
:class:`AccessTokenParams`.

**Wire models** -- typed outputs produced by
:func:`tidalkit.client.response.map_response`: :class:`Artist`,
:class:`ArtistBio`, :class:`ArtistLinks`, :class:`TopTracks`,
:class:`ArtistAlbums`, :class:`DeviceAuthorizationSession`, and
:class:`AccessTokenResult`.

The catalog API speaks camelCase; wire models expose snake_case attributes
through an alias generator and accept either spelling. Unknown fields are
kept (``extra="allow"``) and reachable via ``model_extra``: the remote
service is trusted structurally, not validated deeply.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_API_URL = "https://api.tidal.com"
DEFAULT_AUTH_URL = "https://auth.tidal.com"
DEFAULT_COUNTRY_CODE = "US"
DEFAULT_PAGE_LIMIT = 50
DEFAULT_DEVICE_SCOPE = "r_usr+w_usr+w_sub"
DEFAULT_TOKEN_SCOPE = "r_usr+w_usr"
DEVICE_CODE_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:device_code"

T = TypeVar("T")


class _WireModel(BaseModel):
    """Base for camelCase payloads of the catalog API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


# --- Configuration ---


class ClientConfig(BaseModel):
    """Connection settings shared by every call made through one API facade.

    ``client_id`` and ``access_token`` are fallbacks used only when a call
    supplies no credential of its own.
    """

    api_url: str = Field(default=DEFAULT_API_URL, description="Catalog API base URL")
    auth_url: str = Field(default=DEFAULT_AUTH_URL, description="Authorization server base URL")
    country_code: str = Field(
        default=DEFAULT_COUNTRY_CODE, description="Default countryCode query parameter"
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    client_id: Optional[str] = None
    access_token: Optional[str] = None


# --- Call parameters ---


class ArtistParams(BaseModel):
    """Parameters of the single-artist endpoints (``get``, ``bio``, ``links``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    country_code: str = DEFAULT_COUNTRY_CODE

    def query_params(self) -> list[tuple[str, str]]:
        """Return the query string pairs in declaration order, omitting unset optionals."""
        data = self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)
        return [(key, str(value)) for key, value in data.items()]


class PagedArtistParams(ArtistParams):
    """Parameters of the paginated artist endpoints (``toptracks``, ``albums``)."""

    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0


class DeviceTokenParams(BaseModel):
    """Form body of the device authorization request."""

    client_id: str
    scope: str = DEFAULT_DEVICE_SCOPE

    def form(self) -> dict[str, str]:
        return {"client_id": self.client_id, "scope": self.scope}


class AccessTokenParams(BaseModel):
    """Inputs of one device-code token exchange.

    ``client_secret`` never appears in the form body; it travels only as
    the basic-auth password.
    """

    client_id: str
    client_secret: str = Field(repr=False)
    device_code: str
    grant_type: str = DEVICE_CODE_GRANT_TYPE
    scope: str = DEFAULT_TOKEN_SCOPE

    def form(self) -> dict[str, str]:
        return {
            "client_id": self.client_id,
            "device_code": self.device_code,
            "grant_type": self.grant_type,
            "scope": self.scope,
        }


# --- Artist wire models ---


class ArtistRole(_WireModel):
    category_id: Optional[int] = None
    category: Optional[str] = None


class Artist(_WireModel):
    """Artist metadata returned by ``GET /v1/artists/{id}``."""

    id: int
    name: Optional[str] = None
    artist_types: list[str] = Field(default_factory=list)
    url: Optional[str] = None
    picture: Optional[str] = None
    popularity: Optional[int] = None
    artist_roles: list[ArtistRole] = Field(default_factory=list)
    mixes: dict[str, str] = Field(default_factory=dict)


class ArtistBio(_WireModel):
    source: Optional[str] = None
    last_updated: Optional[str] = None
    text: Optional[str] = None
    summary: Optional[str] = None


class ArtistLink(_WireModel):
    url: str
    site_name: Optional[str] = None


class Track(_WireModel):
    """A track item as listed on an artist page. Only common fields are typed."""

    id: int
    title: Optional[str] = None
    duration: Optional[int] = None
    track_number: Optional[int] = None
    volume_number: Optional[int] = None
    explicit: Optional[bool] = None
    isrc: Optional[str] = None
    audio_quality: Optional[str] = None
    popularity: Optional[int] = None
    album: Optional[dict[str, Any]] = None
    artists: list[dict[str, Any]] = Field(default_factory=list)


class Album(_WireModel):
    """An album item as listed on an artist page. Only common fields are typed."""

    id: int
    title: Optional[str] = None
    duration: Optional[int] = None
    number_of_tracks: Optional[int] = None
    number_of_volumes: Optional[int] = None
    release_date: Optional[str] = None
    type: Optional[str] = None
    explicit: Optional[bool] = None
    upc: Optional[str] = None
    cover: Optional[str] = None
    audio_quality: Optional[str] = None
    artists: list[dict[str, Any]] = Field(default_factory=list)


class PagedResult(_WireModel, Generic[T]):
    """One page of a paginated listing.

    ``len(items) <= limit`` is expected from the server but not enforced.
    """

    limit: int
    offset: int
    total_number_of_items: int
    items: list[T]


class ArtistLinks(PagedResult[ArtistLink]):
    source: Optional[str] = None


TopTracks = PagedResult[Track]
ArtistAlbums = PagedResult[Album]


# --- Auth wire models ---


class DeviceAuthorizationSession(_WireModel):
    """Device and user codes issued by the authorization server.

    Created by the device authorization request and consumed by
    :class:`~tidalkit.auth.device_flow.DeviceAuthorizationFlow`. Never
    persisted.

    Attributes:
        device_code: Opaque code exchanged for a token at every poll.
        user_code: Short code the user types at ``verification_uri``.
        verification_uri: Page where the user enters ``user_code``.
        verification_uri_complete: Page with the user code pre-filled.
        expires_in: Lifetime of the device code in seconds.
        interval: Minimum number of seconds between two polls.
    """

    device_code: str
    user_code: str
    verification_uri: str
    verification_uri_complete: Optional[str] = None
    expires_in: int
    interval: int = 5


class AccessTokenResult(BaseModel):
    """Token payload returned by a successful device-code exchange."""

    model_config = ConfigDict(extra="allow")

    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
