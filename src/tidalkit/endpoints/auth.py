"""Request builders for the OAuth2 device authorization endpoints.

Neither request carries a catalog credential header. The token exchange
authenticates with HTTP basic auth (client id / client secret) and also
echoes the client id in the form body; the authorization server requires
both.
"""

from __future__ import annotations

from tidalkit.client.request import RequestDescriptor, build_request
from tidalkit.models import AccessTokenParams, DeviceTokenParams

OAUTH2_PATH = "/v1/oauth2"


def device_authorization_request(base_url: str, params: DeviceTokenParams) -> RequestDescriptor:
    """``POST /v1/oauth2/device_authorization`` with form ``client_id, scope``."""
    return build_request(
        base_url,
        f"{OAUTH2_PATH}/device_authorization",
        method="POST",
        form=params.form(),
    )


def access_token_request(base_url: str, params: AccessTokenParams) -> RequestDescriptor:
    """``POST /v1/oauth2/token`` exchanging a device code for an access token."""
    return build_request(
        base_url,
        f"{OAUTH2_PATH}/token",
        method="POST",
        form=params.form(),
        basic_auth=(params.client_id, params.client_secret),
    )
