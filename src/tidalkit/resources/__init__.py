"""Resource facades grouping the endpoints of one API area."""

from tidalkit.resources.artist import ArtistAPI, AsyncArtistAPI
from tidalkit.resources.auth import AsyncAuthAPI, AuthAPI

__all__ = ["ArtistAPI", "AsyncArtistAPI", "AsyncAuthAPI", "AuthAPI"]
