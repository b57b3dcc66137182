"""Run the fetch, classify and write stages with a fallback on failure."""

from __future__ import annotations

import logging
from pathlib import Path

from classify_headlines.classify_headlines import DEFAULT_MODEL, classify_headlines
from common.config import DEFAULT_TIMEOUT, Settings
from fetch_headlines.fetch_headlines import DEFAULT_QUERY, fetch_headlines
from update_status.models import StatusRecord
from update_status.write_status import build_fallback_record, save_status_record, write_status

logger = logging.getLogger(__name__)


def run_pipeline(
    settings: Settings,
    status_file: str | Path,
    model: str = DEFAULT_MODEL,
    query: str = DEFAULT_QUERY,
    timeout: float = DEFAULT_TIMEOUT,
) -> StatusRecord:
    """Fetch headlines, classify them and write the status file.

    Errors propagate to the caller; nothing is written on failure.
    """
    headlines = fetch_headlines(settings.news_api_key, query=query, timeout=timeout)
    result = classify_headlines(
        headlines,
        settings.anthropic_api_key,
        model=model,
        timeout=timeout,
    )
    return write_status(result, status_file)


def update_status(
    settings: Settings,
    status_file: str | Path,
    model: str = DEFAULT_MODEL,
    query: str = DEFAULT_QUERY,
    timeout: float = DEFAULT_TIMEOUT,
) -> bool:
    """
    Run the pipeline, writing the fallback record if any stage fails.

    Returns:
        True if a classification was written, False if the fallback was.
    """
    try:
        run_pipeline(settings, status_file, model=model, query=query, timeout=timeout)
    except Exception:
        logger.exception("Status update failed")
        save_status_record(build_fallback_record(), status_file)
        logger.warning("Wrote fallback status due to error")
        return False
    return True
