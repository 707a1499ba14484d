"""OAuth2 Device Authorization Grant (:rfc:`8628`) polling state machine.

Flow:
    1. :meth:`~tidalkit.resources.auth.AuthAPI.get_device_token` obtains a
       :class:`~tidalkit.models.DeviceAuthorizationSession` (device code,
       user code, verification URI, interval, expiry).
    2. The caller shows the user ``verification_uri_complete`` (or
       ``verification_uri`` and ``user_code``).
    3. The caller invokes :meth:`~tidalkit.resources.auth.AuthAPI.poll`
       repeatedly. Each invocation performs exactly one token exchange and
       advances a :class:`DeviceAuthorizationFlow`.

States::

    PENDING --authorization_pending / slow_down--> PENDING
    PENDING --token payload-------------------> GRANTED
    PENDING --access_denied-------------------> DENIED   (DeviceCodeDenied)
    PENDING --expired_token-------------------> EXPIRED  (DeviceCodeExpired)
    PENDING --any other non-2xx---------------> FAILED   (RemoteError)

The library never sleeps and never tracks the device code's lifetime.
The caller owns the loop, waits at least :attr:`DeviceAuthorizationFlow.interval`
seconds between polls, and stops once ``session.expires_in`` has elapsed::

    flow = api.auth.start_device_flow(client_id, client_secret)
    print(flow.session.verification_uri_complete)
    deadline = time.monotonic() + flow.session.expires_in
    while time.monotonic() < deadline:
        time.sleep(flow.interval)
        result = api.auth.poll(flow)
        if result.token is not None:
            break
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

from tidalkit.client.request import RequestDescriptor
from tidalkit.client.response import map_response
from tidalkit.endpoints.auth import access_token_request
from tidalkit.exceptions import (
    DeviceCodeDenied,
    DeviceCodeExpired,
    DeviceFlowFinished,
    RemoteError,
    ValidationError,
)
from tidalkit.models import (
    DEFAULT_TOKEN_SCOPE,
    DEVICE_CODE_GRANT_TYPE,
    AccessTokenParams,
    AccessTokenResult,
    DeviceAuthorizationSession,
)

logger = logging.getLogger(__name__)

PENDING_ERRORS = frozenset({"authorization_pending"})
SLOW_DOWN_ERROR = "slow_down"
DENIED_ERRORS = frozenset({"access_denied", "authorization_declined"})
EXPIRED_ERRORS = frozenset({"expired_token"})

SLOW_DOWN_INCREMENT = 5
"""Seconds added to the polling interval on ``slow_down`` (:rfc:`8628` section 3.5)."""


class DeviceFlowState(str, enum.Enum):
    """States of a device authorization flow. Every state but PENDING is terminal."""

    PENDING = "pending"
    GRANTED = "granted"
    DENIED = "denied"
    EXPIRED = "expired"
    FAILED = "failed"


@dataclass(frozen=True)
class PollResult:
    """Outcome of one exchange attempt that did not raise.

    Attributes:
        state: ``PENDING`` or ``GRANTED``.
        token: The access token when ``state`` is ``GRANTED``.
    """

    state: DeviceFlowState
    token: Optional[AccessTokenResult] = None


class DeviceAuthorizationFlow:
    """Caller-held state of one device authorization flow.

    The flow builds each token exchange request from the session's
    ``device_code``, unmodified, and interprets the outcome. It never keeps
    the granted token: ownership goes to the caller with the
    :class:`PollResult`.

    Args:
        session: The session returned by the device authorization request.
        client_id: The application's client identifier.
        client_secret: The application's client secret (basic-auth password).
        scope: Scope requested in the token exchange.
        grant_type: OAuth2 grant type of the exchange.
    """

    def __init__(
        self,
        session: DeviceAuthorizationSession,
        client_id: str,
        client_secret: str,
        scope: str = DEFAULT_TOKEN_SCOPE,
        grant_type: str = DEVICE_CODE_GRANT_TYPE,
    ) -> None:
        self.session = session
        self._params = AccessTokenParams(
            client_id=client_id,
            client_secret=client_secret,
            device_code=session.device_code,
            grant_type=grant_type,
            scope=scope,
        )
        self.state = DeviceFlowState.PENDING
        self.interval = max(session.interval, 1)
        self.attempts = 0

    def __repr__(self) -> str:
        return (
            f"DeviceAuthorizationFlow(user_code={self.session.user_code!r}, "
            f"state={self.state.value}, attempts={self.attempts})"
        )

    @property
    def is_terminal(self) -> bool:
        return self.state is not DeviceFlowState.PENDING

    def exchange_request(self, auth_url: str) -> RequestDescriptor:
        """Build the next token exchange request.

        Args:
            auth_url: Base URL of the authorization server.

        Raises:
            DeviceFlowFinished: If the flow already reached a terminal state.
        """
        if self.is_terminal:
            raise DeviceFlowFinished(
                f"Device authorization flow already finished ({self.state.value}); "
                "start a new flow"
            )
        self.attempts += 1
        return access_token_request(auth_url, self._params)

    def handle_token(self, data: Any) -> PollResult:
        """Advance on a 2xx exchange response.

        Raises:
            ValidationError: If the body is not a token payload. The flow
                moves to FAILED.
        """
        try:
            token = map_response(AccessTokenResult, data)
        except ValidationError:
            self._transition(DeviceFlowState.FAILED)
            raise
        self._transition(DeviceFlowState.GRANTED)
        return PollResult(DeviceFlowState.GRANTED, token)

    def handle_error(self, exc: RemoteError) -> PollResult:
        """Advance on a non-2xx exchange response.

        Returns:
            A PENDING result while the user has not decided yet.

        Raises:
            DeviceCodeDenied: The user declined.
            DeviceCodeExpired: The device code expired.
            RemoteError: *exc* itself, for any other failure.
        """
        error = exc.error_code

        if error in PENDING_ERRORS:
            logger.debug("Device authorization pending (attempt %d)", self.attempts)
            return PollResult(DeviceFlowState.PENDING)

        if error == SLOW_DOWN_ERROR:
            self.interval += SLOW_DOWN_INCREMENT
            logger.debug("Authorization server asked to slow down; interval now %ds", self.interval)
            return PollResult(DeviceFlowState.PENDING)

        if error in DENIED_ERRORS:
            self._transition(DeviceFlowState.DENIED)
            raise DeviceCodeDenied("Device authorization denied by user") from exc

        if error in EXPIRED_ERRORS:
            self._transition(DeviceFlowState.EXPIRED)
            raise DeviceCodeExpired("Device code expired -- start a new flow") from exc

        self._transition(DeviceFlowState.FAILED)
        raise exc

    def _transition(self, state: DeviceFlowState) -> None:
        logger.debug("Device authorization flow %s -> %s", self.state.value, state.value)
        self.state = state
