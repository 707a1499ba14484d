"""Exception hierarchy for tidalkit.

All exceptions inherit from :class:`TidalError`, so callers that do not
care about the failure class can catch a single type. Nothing in the
library retries or swallows these errors; each one surfaces to the
immediate caller of the failing operation.

Subclass hierarchy::

    TidalError
    +-- ConfigurationError      (missing credential, bad config value)
    +-- RemoteError             (non-2xx HTTP response)
    +-- TransportError          (network / timeout failure)
    +-- ValidationError         (unexpected response shape)
    +-- DeviceFlowError
        +-- DeviceCodeDenied    (user declined the device authorization)
        +-- DeviceCodeExpired   (device code ran out before approval)
        +-- DeviceFlowFinished  (exchange attempted from a terminal state)
"""

from __future__ import annotations

import json
from typing import Any, Optional


class TidalError(Exception):
    """Base exception for all tidalkit errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(TidalError):
    """Raised for caller-side configuration problems (e.g. no credential supplied).

    Never retried: the call is rejected before any network interaction.
    """


class RemoteError(TidalError):
    """Raised when the API answers with a non-2xx HTTP status.

    The original status code and the raw body text are kept verbatim so
    callers can distinguish "not found" from other failures by status.

    Args:
        message: Human-readable error description.
        status_code: The HTTP status code returned by the server.
        body: The raw response body text.
    """

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def json(self) -> Any:
        """Decode the body as JSON, returning ``None`` when it is not JSON."""
        if not self.body:
            return None
        try:
            return json.loads(self.body)
        except ValueError:
            return None

    @property
    def error_code(self) -> Optional[str]:
        """The OAuth2 ``error`` field of a JSON error body, if any."""
        data = self.json()
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, str):
                return error
        return None


class TransportError(TidalError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""


class ValidationError(TidalError):
    """Raised when a response body does not have the expected structure."""


class DeviceFlowError(TidalError):
    """Base class for terminal outcomes of the device authorization flow."""


class DeviceCodeDenied(DeviceFlowError):
    """Raised when the user declines the device authorization. Stop polling."""


class DeviceCodeExpired(DeviceFlowError):
    """Raised when the device code expired before the user approved it. Stop polling."""


class DeviceFlowFinished(DeviceFlowError):
    """Raised when an exchange is attempted on a flow that already reached a terminal state."""
