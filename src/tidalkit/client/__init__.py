"""HTTP client module for tidalkit.

Provides the request descriptor builder and the synchronous and
asynchronous clients that put descriptors on the wire with :mod:`httpx`.

Classes:
    :class:`RequestDescriptor` -- a fully specified, transport-free request.
    :class:`SyncClient` -- blocking client backed by :class:`httpx.Client`.
    :class:`AsyncClient` -- non-blocking client backed by :class:`httpx.AsyncClient`.
"""

from tidalkit.client.async_client import AsyncClient
from tidalkit.client.request import RequestDescriptor, build_request
from tidalkit.client.sync_client import SyncClient

__all__ = ["AsyncClient", "RequestDescriptor", "SyncClient", "build_request"]
