"""Fetch and normalize headlines from the NewsAPI search endpoint."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import requests

from common.config import DEFAULT_TIMEOUT
from common.errors import FetchError
from common.utils import get_nested_value, get_value
from fetch_headlines.models import Headline

logger = logging.getLogger(__name__)

NEWS_API_URL = "https://newsapi.org/v2/everything"
DEFAULT_QUERY = (
    "US military OR airstrike OR troops OR invasion OR escalation OR Pentagon OR weapons transfer"
)
PAGE_SIZE = 20
MAX_HEADLINES = 15

# " - Some Outlet" at the end of a title; the outlet segment has no hyphen
_SOURCE_SUFFIX_RE = re.compile(r" - [^-]+$")


def strip_source_suffix(title: str) -> str:
    """Remove a trailing " - <publication>" suffix from a headline title."""
    return _SOURCE_SUFFIX_RE.sub("", title).strip()


def filter_articles(raw_articles: list[Any]) -> list[Any]:
    """Drop raw articles missing a title, url or source name. Order is kept.

    Fields that are present but not strings count as missing.
    """
    kept = []
    for raw in raw_articles:
        if not isinstance(raw, dict):
            continue
        fields = (
            get_value(raw, "title"),
            get_value(raw, "url"),
            get_nested_value(raw, "source", "name"),
        )
        if all(isinstance(f, str) and f for f in fields):
            kept.append(raw)

    dropped = len(raw_articles) - len(kept)
    if dropped:
        logger.info("Skipped %d articles with missing title, url or source", dropped)
    return kept


def normalize_articles(raw_articles: list[Any], limit: int = MAX_HEADLINES) -> list[Headline]:
    """Filter raw NewsAPI articles and convert the first `limit` into Headlines."""
    return [
        Headline(
            title=strip_source_suffix(get_value(raw, "title")),
            url=get_value(raw, "url"),
            source=get_nested_value(raw, "source", "name"),
            description=get_value(raw, "description") or "",
        )
        for raw in filter_articles(raw_articles)[:limit]
    ]


def build_search_params(api_key: str, query: str, now: datetime) -> dict[str, Any]:
    """Build NewsAPI query parameters for the window yesterday through now."""
    from_date = (now - timedelta(days=1)).date().isoformat()
    return {
        "q": query,
        "from": from_date,
        "sortBy": "relevancy",
        "language": "en",
        "pageSize": PAGE_SIZE,
        "apiKey": api_key,
    }


def fetch_headlines(
    api_key: str,
    query: str = DEFAULT_QUERY,
    now: Optional[datetime] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[Headline]:
    """
    Fetch recent headlines matching `query` from NewsAPI.

    Args:
        api_key: NewsAPI key
        query: Free-text search query
        now: Reference time for the date window (default: current UTC time)
        timeout: Request timeout in seconds

    Returns:
        Up to MAX_HEADLINES Headlines in relevancy order. May be empty if
        every returned article was filtered out.

    Raises:
        FetchError: If the request fails, the response is not successful,
            or the API returned zero articles.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    params = build_search_params(api_key, query, now)
    logger.info("Fetching headlines from NewsAPI (from %s)", params["from"])

    try:
        response = requests.get(NEWS_API_URL, params=params, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"NewsAPI request failed: {exc}") from exc

    if not response.ok:
        raise FetchError(f"NewsAPI error {response.status_code}: {response.text}")

    try:
        data = response.json()
    except ValueError as exc:
        raise FetchError(f"NewsAPI returned invalid JSON: {exc}") from exc

    articles = get_value(data, "articles") or []
    if not isinstance(articles, list):
        raise FetchError(f"NewsAPI returned malformed articles: {type(articles).__name__}")
    if not articles:
        raise FetchError("No articles returned from NewsAPI")

    logger.info("Got %d articles", len(articles))

    headlines = normalize_articles(articles)
    logger.info("Kept %d headlines", len(headlines))
    return headlines
