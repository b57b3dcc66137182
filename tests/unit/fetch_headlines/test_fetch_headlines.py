"""Tests for fetch_headlines.fetch_headlines module."""

from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest
import requests

from common.errors import FetchError
from fetch_headlines.fetch_headlines import (
    MAX_HEADLINES,
    build_search_params,
    fetch_headlines,
    filter_articles,
    normalize_articles,
    strip_source_suffix,
)
from fetch_headlines.models import Headline


def _article(title="Title", url="https://example.com/1", source="Reuters", description=None):
    return {
        "title": title,
        "url": url,
        "source": {"id": None, "name": source},
        "description": description,
    }


def _response(status_code=200, payload=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    response.json.return_value = payload
    return response


class TestStripSourceSuffix:
    def test_strips_publication_suffix(self) -> None:
        assert strip_source_suffix("Big Event - Some News Outlet") == "Big Event"

    def test_only_last_segment_removed(self) -> None:
        assert strip_source_suffix("Talks - round two - Reuters") == "Talks - round two"

    def test_title_without_suffix_unchanged(self) -> None:
        assert strip_source_suffix("Pentagon confirms deployment") == "Pentagon confirms deployment"

    def test_hyphenated_word_not_treated_as_suffix(self) -> None:
        assert strip_source_suffix("Cease-fire holds") == "Cease-fire holds"

    def test_suffix_containing_hyphen_kept(self) -> None:
        assert strip_source_suffix("Strike reported - Al-Jazeera") == "Strike reported - Al-Jazeera"


class TestFilterArticles:
    def test_drops_entries_missing_required_fields(self) -> None:
        articles = [
            _article(title="A"),
            _article(title=None),
            _article(title="B", url=""),
            {"title": "C", "url": "https://example.com/c", "source": {"name": None}},
            {"title": "D", "url": "https://example.com/d"},
            _article(title="E"),
        ]
        result = filter_articles(articles)
        assert [a["title"] for a in result] == ["A", "E"]

    def test_empty_input(self) -> None:
        assert filter_articles([]) == []

    def test_non_string_fields_treated_as_missing(self) -> None:
        articles = [
            _article(title=123),
            _article(title="A", url=["https://example.com"]),
            _article(title="B", source=42),
            "not an article",
            _article(title="C"),
        ]
        result = filter_articles(articles)
        assert [a["title"] for a in result] == ["C"]


class TestNormalizeArticles:
    def test_maps_to_headlines(self) -> None:
        result = normalize_articles([
            _article(title="Big Event - Some News Outlet", source="Some News Outlet",
                     description="Details here"),
        ])
        assert result == [
            Headline(
                title="Big Event",
                url="https://example.com/1",
                source="Some News Outlet",
                description="Details here",
            )
        ]

    def test_missing_description_becomes_empty_string(self) -> None:
        result = normalize_articles([_article(description=None)])
        assert result[0].description == ""

    def test_truncates_to_max_headlines(self) -> None:
        articles = [_article(title=f"T{i}", url=f"https://example.com/{i}") for i in range(40)]
        result = normalize_articles(articles)
        assert len(result) == MAX_HEADLINES
        assert result[0].title == "T0"
        assert result[-1].title == f"T{MAX_HEADLINES - 1}"

    def test_truncation_applies_after_filtering(self) -> None:
        articles = [_article(title=None)] * 5 + [
            _article(title=f"T{i}", url=f"https://example.com/{i}") for i in range(20)
        ]
        result = normalize_articles(articles)
        assert len(result) == MAX_HEADLINES
        assert result[0].title == "T0"

    def test_all_filtered_returns_empty(self) -> None:
        assert normalize_articles([_article(url=None)]) == []


class TestBuildSearchParams:
    def test_window_starts_yesterday(self) -> None:
        now = datetime(2024, 3, 1, 6, 0, tzinfo=timezone.utc)
        params = build_search_params("key", "q", now)
        assert params["from"] == "2024-02-29"
        assert params["sortBy"] == "relevancy"
        assert params["language"] == "en"
        assert params["pageSize"] == 20
        assert params["apiKey"] == "key"
        assert params["q"] == "q"


@patch("fetch_headlines.fetch_headlines.requests.get")
class TestFetchHeadlines:
    def test_returns_normalized_headlines(self, mock_get) -> None:
        mock_get.return_value = _response(payload={
            "status": "ok",
            "articles": [_article(title="A - Outlet"), _article(title=None)],
        })

        result = fetch_headlines("key", query="troops", timeout=5)

        assert [h.title for h in result] == ["A"]
        _, kwargs = mock_get.call_args
        assert kwargs["params"]["q"] == "troops"
        assert kwargs["timeout"] == 5

    def test_http_error_raises(self, mock_get) -> None:
        mock_get.return_value = _response(status_code=401, text="apiKeyInvalid")

        with pytest.raises(FetchError, match="401"):
            fetch_headlines("bad-key")

    def test_zero_articles_raises(self, mock_get) -> None:
        mock_get.return_value = _response(payload={"status": "ok", "articles": []})

        with pytest.raises(FetchError, match="No articles"):
            fetch_headlines("key")

    def test_missing_articles_key_raises(self, mock_get) -> None:
        mock_get.return_value = _response(payload={"status": "ok"})

        with pytest.raises(FetchError):
            fetch_headlines("key")

    def test_request_exception_wrapped(self, mock_get) -> None:
        mock_get.side_effect = requests.ConnectionError("down")

        with pytest.raises(FetchError, match="down"):
            fetch_headlines("key")

    def test_invalid_json_raises(self, mock_get) -> None:
        response = _response()
        response.json.side_effect = ValueError("not json")
        mock_get.return_value = response

        with pytest.raises(FetchError):
            fetch_headlines("key")

    def test_non_list_articles_raises(self, mock_get) -> None:
        mock_get.return_value = _response(payload={"status": "ok", "articles": 5})

        with pytest.raises(FetchError, match="malformed"):
            fetch_headlines("key")

    def test_non_string_title_skipped(self, mock_get) -> None:
        mock_get.return_value = _response(payload={"articles": [
            {"title": 123, "url": "u", "source": {"name": "S"}},
            _article(title="Real - Outlet"),
        ]})

        assert [h.title for h in fetch_headlines("key")] == ["Real"]

    def test_filtered_to_zero_is_not_an_error(self, mock_get) -> None:
        mock_get.return_value = _response(payload={"articles": [_article(title=None)]})

        assert fetch_headlines("key") == []
