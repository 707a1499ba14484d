"""Device authorization resource.

:class:`AuthAPI` and :class:`AsyncAuthAPI` talk to the authorization
server:

- :meth:`~AuthAPI.get_device_token` -- obtain a device code and user code.
- :meth:`~AuthAPI.get_access_token` -- one raw device-code exchange.
- :meth:`~AuthAPI.start_device_flow` -- obtain a device code and wrap it in
  a :class:`~tidalkit.auth.device_flow.DeviceAuthorizationFlow`.
- :meth:`~AuthAPI.poll` -- advance a flow by exactly one exchange.

None of these methods retries or sleeps.

See Also:
    :mod:`tidalkit.auth.device_flow` for the polling contract.
"""

from __future__ import annotations

from tidalkit.auth.device_flow import DeviceAuthorizationFlow, PollResult
from tidalkit.client.async_client import AsyncClient
from tidalkit.client.response import map_response
from tidalkit.client.sync_client import SyncClient
from tidalkit.endpoints.auth import access_token_request, device_authorization_request
from tidalkit.exceptions import RemoteError
from tidalkit.models import (
    DEFAULT_DEVICE_SCOPE,
    DEFAULT_TOKEN_SCOPE,
    DEVICE_CODE_GRANT_TYPE,
    AccessTokenParams,
    AccessTokenResult,
    ClientConfig,
    DeviceAuthorizationSession,
    DeviceTokenParams,
)


class AuthAPI:
    """Blocking device authorization endpoints.

    Args:
        client: An entered :class:`~tidalkit.client.sync_client.SyncClient`.
        config: Provides ``auth_url``.
    """

    def __init__(self, client: SyncClient, config: ClientConfig) -> None:
        self._client = client
        self._config = config

    def get_device_token(
        self, client_id: str, scope: str = DEFAULT_DEVICE_SCOPE
    ) -> DeviceAuthorizationSession:
        """Generate a device code and user code.

        After that, send the user to ``verification_uri_complete``.

        Raises:
            RemoteError: On any non-2xx response.
        """
        descriptor = device_authorization_request(
            self._config.auth_url, DeviceTokenParams(client_id=client_id, scope=scope)
        )
        return map_response(DeviceAuthorizationSession, self._client.execute(descriptor))

    def get_access_token(
        self,
        client_id: str,
        client_secret: str,
        device_code: str,
        grant_type: str = DEVICE_CODE_GRANT_TYPE,
        scope: str = DEFAULT_TOKEN_SCOPE,
    ) -> AccessTokenResult:
        """Exchange a device code for an access token, once.

        While the user has not approved yet the server answers with an
        ``authorization_pending`` error, raised here as
        :class:`~tidalkit.exceptions.RemoteError`. Use :meth:`poll` for
        typed pending/denied/expired outcomes.
        """
        params = AccessTokenParams(
            client_id=client_id,
            client_secret=client_secret,
            device_code=device_code,
            grant_type=grant_type,
            scope=scope,
        )
        descriptor = access_token_request(self._config.auth_url, params)
        return map_response(AccessTokenResult, self._client.execute(descriptor))

    def start_device_flow(
        self,
        client_id: str,
        client_secret: str,
        scope: str = DEFAULT_DEVICE_SCOPE,
        token_scope: str = DEFAULT_TOKEN_SCOPE,
    ) -> DeviceAuthorizationFlow:
        """Request a device code and return a PENDING flow for it."""
        session = self.get_device_token(client_id, scope=scope)
        return DeviceAuthorizationFlow(session, client_id, client_secret, scope=token_scope)

    def poll(self, flow: DeviceAuthorizationFlow) -> PollResult:
        """Perform one token exchange for *flow*.

        Returns:
            ``PollResult(PENDING)`` while the user has not decided, or
            ``PollResult(GRANTED, token)`` once approved.

        Raises:
            DeviceCodeDenied: The user declined.
            DeviceCodeExpired: The device code expired.
            DeviceFlowFinished: *flow* is already terminal; nothing is sent.
            RemoteError: Any other non-2xx response.
        """
        descriptor = flow.exchange_request(self._config.auth_url)
        try:
            data = self._client.execute(descriptor)
        except RemoteError as exc:
            return flow.handle_error(exc)
        return flow.handle_token(data)


class AsyncAuthAPI:
    """Non-blocking device authorization endpoints. Mirrors :class:`AuthAPI`."""

    def __init__(self, client: AsyncClient, config: ClientConfig) -> None:
        self._client = client
        self._config = config

    async def get_device_token(
        self, client_id: str, scope: str = DEFAULT_DEVICE_SCOPE
    ) -> DeviceAuthorizationSession:
        descriptor = device_authorization_request(
            self._config.auth_url, DeviceTokenParams(client_id=client_id, scope=scope)
        )
        return map_response(DeviceAuthorizationSession, await self._client.execute(descriptor))

    async def get_access_token(
        self,
        client_id: str,
        client_secret: str,
        device_code: str,
        grant_type: str = DEVICE_CODE_GRANT_TYPE,
        scope: str = DEFAULT_TOKEN_SCOPE,
    ) -> AccessTokenResult:
        params = AccessTokenParams(
            client_id=client_id,
            client_secret=client_secret,
            device_code=device_code,
            grant_type=grant_type,
            scope=scope,
        )
        descriptor = access_token_request(self._config.auth_url, params)
        return map_response(AccessTokenResult, await self._client.execute(descriptor))

    async def start_device_flow(
        self,
        client_id: str,
        client_secret: str,
        scope: str = DEFAULT_DEVICE_SCOPE,
        token_scope: str = DEFAULT_TOKEN_SCOPE,
    ) -> DeviceAuthorizationFlow:
        session = await self.get_device_token(client_id, scope=scope)
        return DeviceAuthorizationFlow(session, client_id, client_secret, scope=token_scope)

    async def poll(self, flow: DeviceAuthorizationFlow) -> PollResult:
        descriptor = flow.exchange_request(self._config.auth_url)
        try:
            data = await self._client.execute(descriptor)
        except RemoteError as exc:
            return flow.handle_error(exc)
        return flow.handle_token(data)
