"""tidalkit -- client library for the TIDAL catalog API and its device authorization flow.

The package builds fully specified requests from typed call parameters,
sends them with :mod:`httpx`, and maps the JSON answers onto Pydantic
models. Authentication uses either the application's client id or a user
access token obtained through the OAuth2 device authorization grant.

Typical workflow::

    from tidalkit import TidalAPI

    with TidalAPI() as api:
        flow = api.auth.start_device_flow(client_id, client_secret)
        # show flow.session.verification_uri_complete to the user, then
        # call api.auth.poll(flow) every flow.interval seconds
        ...
        albums = api.artist.albums(3346, access_token=token.access_token)

Modules:
    api: :class:`TidalAPI` and :class:`AsyncTidalAPI` facades.
    models: Pydantic models shared across the entire package.
    config: Environment and project-file configuration.
    exceptions: Exception hierarchy rooted at :class:`TidalError`.
    auth: Credential resolution and the device authorization state machine.
    client: Request descriptors and the sync/async HTTP clients.
    endpoints: Per-endpoint request builders.
    resources: Artist and auth resource facades.
"""

from tidalkit.api import AsyncTidalAPI, TidalAPI
from tidalkit.auth.device_flow import DeviceAuthorizationFlow, DeviceFlowState, PollResult
from tidalkit.exceptions import (
    ConfigurationError,
    DeviceCodeDenied,
    DeviceCodeExpired,
    DeviceFlowError,
    DeviceFlowFinished,
    RemoteError,
    TidalError,
    TransportError,
    ValidationError,
)
from tidalkit.models import AccessTokenResult, ClientConfig, DeviceAuthorizationSession

__version__ = "0.1.0"

__all__ = [
    "AccessTokenResult",
    "AsyncTidalAPI",
    "ClientConfig",
    "ConfigurationError",
    "DeviceAuthorizationFlow",
    "DeviceAuthorizationSession",
    "DeviceCodeDenied",
    "DeviceCodeExpired",
    "DeviceFlowError",
    "DeviceFlowFinished",
    "DeviceFlowState",
    "PollResult",
    "RemoteError",
    "TidalAPI",
    "TidalError",
    "TransportError",
    "ValidationError",
]
