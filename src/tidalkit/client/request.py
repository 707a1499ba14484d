"""Transport-independent request descriptors.

:func:`build_request` composes a :class:`RequestDescriptor` from a base
URL, a relative path, ordered query parameters, the resolved credential
and an optional form body. Construction is pure: the descriptor is later
handed to :class:`~tidalkit.client.sync_client.SyncClient` or
:class:`~tidalkit.client.async_client.AsyncClient`, which put it on the
wire with :mod:`httpx`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from tidalkit.auth.credentials import Credential

_MASKED_HEADERS = frozenset({"authorization", "x-tidal-token"})


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to send one HTTP request.

    Attributes:
        method: HTTP method (``GET`` or ``POST``).
        base_url: Scheme and host, e.g. ``https://api.tidal.com``.
        path: Path relative to *base_url*, starting with ``/``.
        params: Query parameters in the order they are sent.
        headers: Request headers, including the credential header.
        form: Form-encoded body (``application/x-www-form-urlencoded``).
        basic_auth: ``(username, password)`` for HTTP basic auth.
    """

    method: str
    base_url: str
    path: str
    params: list[tuple[str, str]] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict, repr=False)
    form: Optional[dict[str, str]] = None
    basic_auth: Optional[tuple[str, str]] = field(default=None, repr=False)

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.path}"

    def redacted_headers(self) -> dict[str, str]:
        """Headers with credential values masked, for logging."""
        return {
            k: ("***" if k.lower() in _MASKED_HEADERS else v)
            for k, v in self.headers.items()
        }


def build_request(
    base_url: str,
    path: str,
    method: str = "GET",
    params: Optional[Sequence[tuple[str, Any]]] = None,
    credential: Optional[Credential] = None,
    form: Optional[dict[str, str]] = None,
    basic_auth: Optional[tuple[str, str]] = None,
) -> RequestDescriptor:
    """Compose a :class:`RequestDescriptor`.

    Args:
        base_url: Scheme and host of the target server.
        path: Relative path, starting with ``/``.
        method: HTTP method.
        params: Ordered ``(name, value)`` pairs. Pairs whose value is
            ``None`` are dropped; the others are stringified.
        credential: The resolved credential, mapped to exactly one header.
        form: Form body fields.
        basic_auth: ``(username, password)`` for HTTP basic auth.

    Returns:
        The frozen descriptor.
    """
    headers: dict[str, str] = {"Accept": "application/json"}
    if credential is not None:
        headers.update(credential.headers())

    query = [(name, str(value)) for name, value in (params or []) if value is not None]

    return RequestDescriptor(
        method=method.upper(),
        base_url=base_url,
        path=path,
        params=query,
        headers=headers,
        form=dict(form) if form is not None else None,
        basic_auth=basic_auth,
    )
