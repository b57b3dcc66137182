"""Build and persist the status record."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from classify_headlines.models import ClassificationResult, ReportedHeadline
from common.local_io import save_json_record_local
from update_status.models import StatusRecord

logger = logging.getLogger(__name__)

FALLBACK_STATUS = "unclear"
FALLBACK_TAGLINE = "Something went wrong with today's analysis. Check back soon."


def build_status_record(
    result: ClassificationResult,
    now: Optional[datetime] = None,
) -> StatusRecord:
    """Stamp a classification result with the update time."""
    if now is None:
        now = datetime.now(timezone.utc)
    return StatusRecord(
        status=result.status,
        tagline=result.tagline,
        updated=now.isoformat(),
        headlines=[
            ReportedHeadline(title=h.title, url=h.url, source=h.source)
            for h in result.headlines
        ],
    )


def build_fallback_record(now: Optional[datetime] = None) -> StatusRecord:
    """Fixed "unclear" record written when the pipeline fails."""
    if now is None:
        now = datetime.now(timezone.utc)
    return StatusRecord(
        status=FALLBACK_STATUS,
        tagline=FALLBACK_TAGLINE,
        updated=now.isoformat(),
        headlines=[],
    )


def save_status_record(record: StatusRecord, path: str | Path) -> Path:
    """Overwrite the status file with `record`."""
    filepath = save_json_record_local(record, path)
    logger.info("Wrote %s: status=%s", filepath.name, record.status)
    logger.info('Tagline: "%s"', record.tagline)
    return filepath


def write_status(
    result: ClassificationResult,
    path: str | Path,
    now: Optional[datetime] = None,
) -> StatusRecord:
    """Build a StatusRecord from `result` and write it to `path`."""
    record = build_status_record(result, now)
    save_status_record(record, path)
    return record
