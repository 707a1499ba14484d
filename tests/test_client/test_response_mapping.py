"""Tests for response body extraction and model mapping."""

from __future__ import annotations

import httpx
import pytest

from tidalkit.client.response import extract_response_data, map_response
from tidalkit.exceptions import ValidationError
from tidalkit.models import Artist, ArtistLinks, TopTracks


def _make_response(**kwargs: object) -> httpx.Response:
    return httpx.Response(
        request=httpx.Request("GET", "https://api.example.com/test"),
        **kwargs,  # type: ignore[arg-type]
    )


# ---------------------------------------------------------------------------
# extract_response_data
# ---------------------------------------------------------------------------


class TestExtractResponseData:
    def test_json(self) -> None:
        assert extract_response_data(_make_response(status_code=200, json={"a": 1})) == {"a": 1}

    def test_text(self) -> None:
        assert extract_response_data(_make_response(status_code=200, text="hello")) == "hello"

    def test_empty(self) -> None:
        assert extract_response_data(_make_response(status_code=204, content=b"")) is None


# ---------------------------------------------------------------------------
# map_response
# ---------------------------------------------------------------------------


class TestMapResponse:
    def test_camel_case_fields_map_to_attributes(self) -> None:
        artist = map_response(
            Artist,
            {
                "id": 3346,
                "name": "Gorillaz",
                "artistTypes": ["ARTIST", "CONTRIBUTOR"],
                "popularity": 77,
                "artistRoles": [{"categoryId": -1, "category": "Artist"}],
                "mixes": {"ARTIST_MIX": "000ec0b01da1ddd752ec5dee553d48"},
            },
        )
        assert artist.name == "Gorillaz"
        assert artist.artist_types == ["ARTIST", "CONTRIBUTOR"]
        assert artist.artist_roles[0].category_id == -1
        assert artist.mixes["ARTIST_MIX"].startswith("000ec")

    def test_unknown_fields_pass_through(self) -> None:
        artist = map_response(Artist, {"id": 1, "handle": None, "banner": "x"})
        assert artist.model_extra == {"handle": None, "banner": "x"}

    def test_paged_result(self) -> None:
        page = map_response(
            TopTracks,
            {
                "limit": 2,
                "offset": 0,
                "totalNumberOfItems": 10,
                "items": [{"id": 1, "title": "Feel Good Inc."}, {"id": 2, "title": "DARE"}],
            },
        )
        assert page.total_number_of_items == 10
        assert [t.title for t in page.items] == ["Feel Good Inc.", "DARE"]

    def test_items_longer_than_limit_are_trusted(self) -> None:
        page = map_response(
            TopTracks,
            {"limit": 1, "offset": 0, "totalNumberOfItems": 2, "items": [{"id": 1}, {"id": 2}]},
        )
        assert len(page.items) == 2

    def test_links_source(self) -> None:
        links = map_response(
            ArtistLinks,
            {
                "limit": 10,
                "offset": 0,
                "totalNumberOfItems": 1,
                "items": [{"url": "https://gorillaz.com", "siteName": "OFFICIAL_HOMEPAGE"}],
                "source": "TiVo",
            },
        )
        assert links.source == "TiVo"
        assert links.items[0].site_name == "OFFICIAL_HOMEPAGE"

    def test_missing_pagination_field(self) -> None:
        with pytest.raises(ValidationError, match="TopTracks|PagedResult"):
            map_response(TopTracks, {"limit": 1, "offset": 0, "items": []})

    def test_not_an_object(self) -> None:
        with pytest.raises(ValidationError, match="Expected a JSON object"):
            map_response(Artist, ["not", "an", "object"])

    def test_text_body(self) -> None:
        with pytest.raises(ValidationError):
            map_response(Artist, "<html></html>")
