"""Authentication subsystem for tidalkit.

Exports the per-call credential variants and resolver, and the device
authorization polling state machine.
"""

from tidalkit.auth.credentials import (
    BearerToken,
    ClientIdentifier,
    Credential,
    resolve_credential,
)
from tidalkit.auth.device_flow import DeviceAuthorizationFlow, DeviceFlowState, PollResult

__all__ = [
    "BearerToken",
    "ClientIdentifier",
    "Credential",
    "DeviceAuthorizationFlow",
    "DeviceFlowState",
    "PollResult",
    "resolve_credential",
]
