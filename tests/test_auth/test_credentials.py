"""Tests for per-call credential resolution."""

from __future__ import annotations

import pytest

from tidalkit.auth.credentials import (
    CLIENT_TOKEN_HEADER,
    BearerToken,
    ClientIdentifier,
    resolve_credential,
)
from tidalkit.exceptions import ConfigurationError


class TestResolveCredential:
    def test_client_id_only(self) -> None:
        assert resolve_credential(client_id="cid") == ClientIdentifier("cid")

    def test_access_token_only(self) -> None:
        assert resolve_credential(access_token="tok") == BearerToken("tok")

    def test_client_id_wins_over_access_token(self) -> None:
        credential = resolve_credential(client_id="cid", access_token="tok")
        assert isinstance(credential, ClientIdentifier)
        assert credential.value == "cid"

    def test_empty_client_id_falls_back_to_token(self) -> None:
        assert resolve_credential(client_id="", access_token="tok") == BearerToken("tok")

    @pytest.mark.parametrize(
        "client_id, access_token",
        [(None, None), ("", None), (None, ""), ("", "")],
    )
    def test_missing_credential(self, client_id: str | None, access_token: str | None) -> None:
        with pytest.raises(ConfigurationError, match="missing credential"):
            resolve_credential(client_id, access_token)


class TestCredentialHeaders:
    def test_client_identifier_header(self) -> None:
        assert ClientIdentifier("cid").headers() == {CLIENT_TOKEN_HEADER: "cid"}

    def test_bearer_header(self) -> None:
        assert BearerToken("tok").headers() == {"Authorization": "Bearer tok"}

    def test_repr_masks_value(self) -> None:
        assert "secret" not in repr(ClientIdentifier("secret"))
        assert "secret" not in repr(BearerToken("secret"))
