"""Credential variants and the resolver that picks one per call.

A call to the catalog API authenticates in exactly one way:

- :class:`ClientIdentifier` -- the application's client id, sent as the
  ``x-tidal-token`` header.
- :class:`BearerToken` -- a user access token, sent as
  ``Authorization: Bearer <token>``.

:func:`resolve_credential` turns the two optional inputs of a call into one
of these variants once, at call entry, so that request building never has
to re-check which input was provided.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from tidalkit.exceptions import ConfigurationError

CLIENT_TOKEN_HEADER = "x-tidal-token"


@dataclass(frozen=True)
class ClientIdentifier:
    """Authenticate as the application via the ``x-tidal-token`` header."""

    value: str

    def headers(self) -> dict[str, str]:
        return {CLIENT_TOKEN_HEADER: self.value}

    def __repr__(self) -> str:
        return "ClientIdentifier(value='***')"


@dataclass(frozen=True)
class BearerToken:
    """Authenticate as a user via an ``Authorization: Bearer`` header."""

    value: str

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.value}"}

    def __repr__(self) -> str:
        return "BearerToken(value='***')"


Credential = Union[ClientIdentifier, BearerToken]


def resolve_credential(
    client_id: Optional[str] = None,
    access_token: Optional[str] = None,
) -> Credential:
    """Select the credential a call authenticates with.

    A non-empty *client_id* wins even when *access_token* is also given.

    Args:
        client_id: The application's client identifier.
        access_token: A user access token.

    Returns:
        A :class:`ClientIdentifier` or a :class:`BearerToken`.

    Raises:
        ConfigurationError: If neither value is provided.
    """
    if client_id:
        return ClientIdentifier(client_id)
    if access_token:
        return BearerToken(access_token)
    raise ConfigurationError(
        "missing credential: you need to either provide a client_id or an access_token"
    )
