"""Tests for request descriptor construction."""

from __future__ import annotations

from tidalkit.auth.credentials import BearerToken, ClientIdentifier
from tidalkit.client.request import RequestDescriptor, build_request


class TestBuildRequest:
    def test_defaults(self) -> None:
        descriptor = build_request("https://api.example.com", "/v1/things")
        assert descriptor.method == "GET"
        assert descriptor.url == "https://api.example.com/v1/things"
        assert descriptor.params == []
        assert descriptor.headers == {"Accept": "application/json"}
        assert descriptor.form is None
        assert descriptor.basic_auth is None

    def test_trailing_slash_in_base_url(self) -> None:
        descriptor = build_request("https://api.example.com/", "/v1/things")
        assert descriptor.url == "https://api.example.com/v1/things"

    def test_method_is_upper_cased(self) -> None:
        assert build_request("https://h", "/p", method="post").method == "POST"

    def test_client_identifier_header(self) -> None:
        descriptor = build_request("https://h", "/p", credential=ClientIdentifier("cid"))
        assert descriptor.headers["x-tidal-token"] == "cid"
        assert "Authorization" not in descriptor.headers

    def test_bearer_header(self) -> None:
        descriptor = build_request("https://h", "/p", credential=BearerToken("tok"))
        assert descriptor.headers["Authorization"] == "Bearer tok"
        assert "x-tidal-token" not in descriptor.headers

    def test_params_keep_order_and_drop_none(self) -> None:
        descriptor = build_request(
            "https://h",
            "/p",
            params=[("countryCode", "US"), ("cursor", None), ("limit", 50), ("offset", 0)],
        )
        assert descriptor.params == [("countryCode", "US"), ("limit", "50"), ("offset", "0")]

    def test_form_and_basic_auth(self) -> None:
        form = {"client_id": "cid"}
        descriptor = build_request(
            "https://h", "/token", method="POST", form=form, basic_auth=("cid", "secret")
        )
        assert descriptor.form == {"client_id": "cid"}
        assert descriptor.form is not form
        assert descriptor.basic_auth == ("cid", "secret")


class TestRedactedHeaders:
    def test_credentials_masked(self) -> None:
        descriptor = RequestDescriptor(
            method="GET",
            base_url="https://h",
            path="/p",
            headers={"Authorization": "Bearer tok", "x-tidal-token": "cid", "Accept": "application/json"},
        )
        assert descriptor.redacted_headers() == {
            "Authorization": "***",
            "x-tidal-token": "***",
            "Accept": "application/json",
        }

    def test_repr_hides_credentials(self) -> None:
        descriptor = build_request(
            "https://auth.tidal.test",
            "/v1/oauth2/token",
            method="POST",
            credential=BearerToken("bearer-value"),
            basic_auth=("cid", "secret"),
        )
        text = repr(descriptor)
        assert "secret" not in text
        assert "bearer-value" not in text
        assert "/v1/oauth2/token" in text
